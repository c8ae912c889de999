from typing import TYPE_CHECKING
from ...domain.repositories.customer_repository import CustomerRepository
from ...application.use_cases.customer import CreateCustomerUseCase, ListCustomersUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CustomerProvider:
    """Customer use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            CreateCustomerUseCase,
            lambda: CreateCustomerUseCase(customer_repository=container.get(CustomerRepository))
        )
        container.register_factory(
            ListCustomersUseCase,
            lambda: ListCustomersUseCase(customer_repository=container.get(CustomerRepository))
        )
