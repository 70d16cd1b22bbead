"""Customer records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pymongo.database import Database

from nutrix.database import new_object_id


def _without_internal_id(doc: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in doc.items() if key != "_id"}


@dataclass
class GetCustomersParams:
    """Pagination for customer listings; pages are numbered from 1."""

    page_number: int
    page_size: int


@dataclass
class CustomersService:
    """Create, read, update and delete customers."""

    database: Database

    @property
    def _collection(self):
        return self.database["customers"]

    def get_customers(self, params: GetCustomersParams) -> tuple[list[dict[str, Any]], int]:
        """Return one page of customers and the total number of customers."""
        cursor = self._collection.find(
            {},
            skip=(params.page_number - 1) * params.page_size,
            limit=params.page_size,
        )
        customers = [_without_internal_id(doc) for doc in cursor]
        return customers, self._collection.count_documents({})

    def get_customer(self, customer_id: str) -> dict[str, Any]:
        doc = self._collection.find_one({"id": customer_id})
        if doc is None:
            raise LookupError(f"customer {customer_id} not found")
        return _without_internal_id(doc)

    def insert_new(self, customer: dict[str, Any]) -> dict[str, Any]:
        """Store a customer under a new id and return it as stored."""
        record = _without_internal_id(customer)
        record["id"] = new_object_id()
        result = self._collection.insert_one(record)
        doc = self._collection.find_one({"_id": result.inserted_id})
        if doc is None:
            raise LookupError("inserted customer not found")
        return _without_internal_id(doc)

    def update_customer(self, customer: dict[str, Any], customer_id: str) -> dict[str, Any]:
        """Change the non-empty name, phone and address of a customer."""
        update = {
            key: customer[key]
            for key in ("name", "phone", "address")
            if customer.get(key)
        }
        update["id"] = customer_id
        self._collection.update_one({"id": customer_id}, {"$set": update})
        return self.get_customer(customer_id)

    def delete_customer(self, customer_id: str) -> None:
        self._collection.delete_one({"id": customer_id})