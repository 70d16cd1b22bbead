"""Daily sales records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable

from pymongo.database import Database

DATE_FORMAT = "%Y-%m-%d"


def _without_internal_id(doc: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in doc.items() if key != "_id"}


@dataclass
class SalesService:
    """Aggregates finished orders into one sales document per day."""

    database: Database
    today: Callable[[], date] = date.today

    @property
    def _sales(self):
        return self.database["sales"]

    def get_sales_per_day(self, page_number: int, page_size: int) -> tuple[list[dict[str, Any]], int]:
        """Return one page of days, newest first, and the number of days."""
        total = self._sales.count_documents({})
        cursor = self._sales.find(
            {},
            sort=[("date", -1)],
            skip=(page_number - 1) * page_size,
            limit=page_size,
        )
        return [_without_internal_id(doc) for doc in cursor], total

    def add_order_to_sales_day(self, order: dict[str, Any], items_cost: list[dict[str, Any]]) -> None:
        """Record a finished order and its costs under today's date."""
        day = self.today().strftime(DATE_FORMAT)
        sales_order = {"order": order, "costs": items_cost}
        cost = order.get("cost", 0.0)
        sale_price = order.get("sale_price", 0.0)
        query = {"date": day}

        if self._sales.count_documents(query) == 0:
            self._sales.insert_one(
                {"date": day, "orders": [sales_order], "costs": cost, "total_sales": sale_price}
            )
        else:
            self._sales.update_one(
                query,
                {
                    "$push": {"orders": sales_order},
                    "$inc": {"costs": cost, "total_sales": sale_price},
                },
                upsert=True,
            )