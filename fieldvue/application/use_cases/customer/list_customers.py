# Local application imports
from ....domain.constants.enums import UserRole
from ....domain.repositories.customer_repository import CustomerRepository
from ...dto.customer_dto import CustomerListResponse, CustomerResponse
from ...dto.user_dto import UserResponse


class ListCustomersUseCase:
    """Admins see every customer; everyone else sees the customers they created"""

    def __init__(self, customer_repository: CustomerRepository) -> None:
        self.customer_repository = customer_repository

    async def execute(self, current_user: UserResponse) -> CustomerListResponse:
        created_by = None if current_user.role == UserRole.ADMIN else current_user.id
        customers = await self.customer_repository.find_all(created_by=created_by)
        return CustomerListResponse(
            customers=[CustomerResponse.from_domain(customer) for customer in customers],
            count=len(customers),
        )
