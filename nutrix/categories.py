"""Product categories shown on the point-of-sale menu."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Any

from pymongo.database import Database

from nutrix.database import new_object_id

_logger = logging.getLogger(__name__)


def _without_internal_id(doc: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in doc.items() if key != "_id"}


@dataclass
class CategoryService:
    """Create, list, update and delete categories."""

    database: Database

    @property
    def _categories(self):
        return self.database["categories"]

    @property
    def _recipes(self):
        return self.database["recipes"]

    def insert_category(self, category: dict[str, Any]) -> dict[str, Any]:
        """Store a category under a fresh id and return it as stored."""
        record = copy.deepcopy(_without_internal_id(category))
        record["id"] = new_object_id()
        self._categories.insert_one(copy.deepcopy(record))
        return record

    def delete_category(self, category_id: str) -> None:
        self._categories.delete_one({"id": category_id})

    def update_category(self, category: dict[str, Any]) -> dict[str, Any]:
        """Overwrite the name and products of a stored category."""
        self._categories.update_one(
            {"id": category.get("id", "")},
            {
                "$set": {
                    "name": category.get("name", ""),
                    "products": category.get("products", []),
                }
            },
        )
        return category

    def get_categories(self, page_number: int, page_size: int) -> list[dict[str, Any]]:
        """Return one page of categories; pages are numbered from 1.

        Products whose recipe no longer exists are logged and left out.
        """
        cursor = self._categories.find(
            {},
            skip=(page_number - 1) * page_size,
            limit=page_size,
        )

        categories = []
        for doc in cursor:
            products = []
            for category_product in doc.get("products") or []:
                recipe = self._recipes.find_one({"id": category_product.get("id")})
                if recipe is None:
                    _logger.error("Recipe doesn't exist id: %s", category_product.get("id"))
                    continue
                products.append({"id": recipe.get("id", "")})

            categories.append(
                {
                    "name": doc.get("name", ""),
                    "id": doc.get("id", ""),
                    "products": products,
                }
            )
        return categories