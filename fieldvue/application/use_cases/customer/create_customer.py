# Standard library imports
import logging

# Local application imports
from ....domain.repositories.customer_repository import CustomerRepository
from ....domain.models.customer import Customer
from ...dto.customer_dto import CustomerCreateRequest, CustomerResponse
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class CreateCustomerUseCase:
    """Use case for creating a customer record"""

    def __init__(self, customer_repository: CustomerRepository) -> None:
        self.customer_repository = customer_repository

    async def execute(self, request: CustomerCreateRequest, current_user: UserResponse) -> CustomerResponse:
        """
        Create a customer owned by the current user

        Raises:
            ValueError: If the name is missing
        """
        customer = Customer(
            id=None,
            name=(request.name or "").strip(),
            email=request.email,
            phone_number=request.phone_number,
            address=request.address,
            field=request.field,
            created_by=current_user.id,
        )
        saved = await self.customer_repository.save(customer)
        logger.info(f"Customer {saved.id} created by user {current_user.id}")
        return CustomerResponse.from_domain(saved)
