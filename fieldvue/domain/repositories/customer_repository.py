from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.customer import Customer


class CustomerRepository(ABC):
    """Repository interface - defines contract for customer data access"""

    @abstractmethod
    async def find_by_id(self, customer_id: str) -> Optional[Customer]:
        """Find customer by ID"""
        pass

    @abstractmethod
    async def find_all(self, created_by: Optional[str] = None) -> List[Customer]:
        """List customers, newest first; restricted to a creator when given"""
        pass

    @abstractmethod
    async def save(self, customer: Customer) -> Customer:
        """Save customer (create or update)"""
        pass
