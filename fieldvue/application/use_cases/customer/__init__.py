from .create_customer import CreateCustomerUseCase
from .list_customers import ListCustomersUseCase

__all__ = ["CreateCustomerUseCase", "ListCustomersUseCase"]
