# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING

# Local application imports
from ...core.exceptions import DatabaseError
from ...domain.repositories.customer_repository import CustomerRepository
from ...domain.models.customer import Customer
from ...domain.constants import CustomerFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_customer_collection


class MongoCustomerRepository(CustomerRepository):
    """MongoDB implementation of CustomerRepository"""

    def __init__(self, customer_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.customer_collection = (
            customer_collection if customer_collection is not None else get_customer_collection()
        )

    async def find_by_id(self, customer_id: str) -> Optional[Customer]:
        if not customer_id:
            return None
        try:
            object_id = ObjectId(customer_id)
        except (InvalidId, ValueError, TypeError):
            return None

        try:
            document = await self.customer_collection.find_one({CustomerFields.MONGO_ID: object_id})
        except Exception as e:
            raise DatabaseError(f"Error finding customer by ID: {str(e)}", operation="find_by_id")
        return self._document_to_customer(document) if document else None

    async def find_all(self, created_by: Optional[str] = None) -> List[Customer]:
        """
        List customers, newest first

        Args:
            created_by: Restrict to customers entered by this user; None lists all

        Returns:
            List of Customer domain models
        """
        query: Dict[str, Any] = {}
        if created_by:
            query[CustomerFields.CREATED_BY] = created_by

        try:
            cursor = self.customer_collection.find(query).sort(CustomerFields.CREATED_AT, DESCENDING)
            customers = []
            async for document in cursor:
                customers.append(self._document_to_customer(document))
            return customers
        except Exception as e:
            raise DatabaseError(f"Error listing customers: {str(e)}", operation="find_all")

    async def save(self, customer: Customer) -> Customer:
        if not customer:
            raise ValueError("Customer cannot be None")

        customer_dict = self._customer_to_dict(customer)
        customer_dict[CustomerFields.UPDATED_AT] = utc_now()

        try:
            if customer.id:
                try:
                    object_id = ObjectId(customer.id)
                except (InvalidId, TypeError):
                    raise ValueError(f"Invalid customer ID format: {customer.id}")
                update_result = await self.customer_collection.update_one(
                    {CustomerFields.MONGO_ID: object_id}, {"$set": customer_dict}
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"Customer with ID {customer.id} not found")
                document = await self.customer_collection.find_one({CustomerFields.MONGO_ID: object_id})
            else:
                customer_dict[CustomerFields.CREATED_AT] = (
                    customer.created_at or customer_dict[CustomerFields.UPDATED_AT]
                )
                result = await self.customer_collection.insert_one(customer_dict)
                document = await self.customer_collection.find_one({CustomerFields.MONGO_ID: result.inserted_id})
        except ValueError:
            raise
        except Exception as e:
            raise DatabaseError(f"Error saving customer: {str(e)}", operation="save")

        if document is None:
            raise DatabaseError("Customer was saved but could not be retrieved", operation="save")
        return self._document_to_customer(document)

    def _document_to_customer(self, document: Dict[str, Any]) -> Customer:
        return Customer(
            id=str(document[CustomerFields.MONGO_ID]),
            name=document.get(CustomerFields.NAME, ""),
            email=document.get(CustomerFields.EMAIL),
            phone_number=document.get(CustomerFields.PHONE_NUMBER),
            address=document.get(CustomerFields.ADDRESS),
            field=document.get(CustomerFields.FIELD),
            created_by=document.get(CustomerFields.CREATED_BY),
            created_at=ensure_utc(document.get(CustomerFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(CustomerFields.UPDATED_AT)),
        )

    def _customer_to_dict(self, customer: Customer) -> Dict[str, Any]:
        return {
            CustomerFields.NAME: customer.name.strip(),
            CustomerFields.EMAIL: customer.email,
            CustomerFields.PHONE_NUMBER: customer.phone_number,
            CustomerFields.ADDRESS: customer.address,
            CustomerFields.FIELD: customer.field,
            CustomerFields.CREATED_BY: customer.created_by,
        }
