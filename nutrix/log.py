"""Queries over the activity log collection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pymongo.database import Database
from pymongo.errors import PyMongoError

_logger = logging.getLogger(__name__)

COMPONENT_CONSUME = "component_consume"
ORDER_FINISH = "order_finish"


def _without_internal_id(doc: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in doc.items() if key != "_id"}


@dataclass
class LogService:
    """Reads consumption and sales entries from the logs collection."""

    database: Database

    @property
    def _logs(self):
        return self.database["logs"]

    def get_component_logs(
        self, component_id: str, page_number: int, page_size: int
    ) -> tuple[list[dict[str, Any]], int]:
        """Return one page of a material's consumption logs and their total count."""
        query = {"type": COMPONENT_CONSUME, "component_id": component_id}
        skip = 0 if page_number == 1 else (page_number - 1) * page_size

        total = self._logs.count_documents(query)
        cursor = self._logs.find(query, skip=skip, limit=page_size)
        return [_without_internal_id(doc) for doc in cursor], total

    def get_sales_logs(self) -> list[dict[str, Any]]:
        """Return every finished-order log; database errors are logged, not raised."""
        try:
            return [_without_internal_id(doc) for doc in self._logs.find({"type": ORDER_FINISH})]
        except PyMongoError as exc:
            _logger.error("%s", exc)
            return []