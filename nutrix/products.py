"""Products (recipes): storage, ready stock and recipe trees."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

from pymongo.database import Database

from nutrix.database import new_object_id


class InsufficientReadyError(Exception):
    """Raised when more ready units are requested than are in stock."""

    def __init__(self, product_id: str, ready: float, requested: float) -> None:
        super().__init__(
            f"insufficient ready quantity for product {product_id}: "
            f"{ready} ready, {requested} requested"
        )
        self.product_id = product_id
        self.ready = ready
        self.requested = requested


def _without_internal_id(doc: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in doc.items() if key != "_id"}


@dataclass
class GetProductsParams:
    """Pagination and name search for product listings; pages start at 1."""

    page_number: int
    page_size: int
    search: str = ""


@dataclass
class RecipeService:
    """Manage products and resolve their material and sub-product trees."""

    database: Database

    @property
    def _recipes(self):
        return self.database["recipes"]

    @property
    def _materials(self):
        return self.database["materials"]

    def _find_recipe(self, product_id: str) -> dict[str, Any]:
        doc = self._recipes.find_one({"id": product_id})
        if doc is None:
            raise LookupError(f"product {product_id} not found")
        return _without_internal_id(doc)

    def get_product(self, product_id: str) -> dict[str, Any]:
        return self._find_recipe(product_id)

    def update_product(self, product_id: str, product: dict[str, Any]) -> None:
        """Overwrite the editable fields of a stored product."""
        self._recipes.update_one(
            {"id": product_id},
            {
                "$set": {
                    "name": product.get("name", ""),
                    "materials": product.get("materials", []),
                    "sub_products": product.get("sub_products", []),
                    "ready": product.get("ready", 0.0),
                    "recipeId": product.get("id", ""),
                    "price": product.get("price", 0.0),
                    "image_url": product.get("image_url", ""),
                }
            },
        )

    def delete_product(self, product_id: str) -> None:
        self._recipes.delete_one({"id": product_id})

    def insert_new(self, product: dict[str, Any]) -> dict[str, Any]:
        """Store a product under a fresh id and return it as stored."""
        record = copy.deepcopy(_without_internal_id(product))
        record["id"] = new_object_id()
        result = self._recipes.insert_one(record)
        doc = self._recipes.find_one({"_id": result.inserted_id})
        if doc is None:
            raise LookupError("inserted product not found")
        return _without_internal_id(doc)

    def get_products(self, params: GetProductsParams) -> tuple[list[dict[str, Any]], int]:
        """Return one page of products sorted by name, and the matching total.

        Sub-products carry the names of the products they refer to.
        """
        query: dict[str, Any] = {}
        if params.search:
            query["name"] = {"$regex": f"(?i).*{params.search}.*"}

        total = self._recipes.count_documents(query)
        cursor = self._recipes.find(
            query,
            sort=[("name", 1)],
            skip=(params.page_number - 1) * params.page_size,
            limit=params.page_size,
        )

        products = []
        for doc in cursor:
            product = _without_internal_id(doc)
            for sub_product in product.get("sub_products") or []:
                found = self._recipes.find_one({"id": sub_product.get("id")})
                if found is None:
                    raise LookupError(f"sub product {sub_product.get('id')} not found")
                sub_product["name"] = found.get("name", "")
            products.append(product)
        return products, total

    def consume_from_ready(self, product_id: str, quantity: float) -> None:
        """Take quantity units from the product's ready stock."""
        product = self._find_recipe(product_id)
        ready = product.get("ready", 0.0)
        if ready < quantity:
            raise InsufficientReadyError(product_id, ready, quantity)
        self._recipes.update_one({"id": product_id}, {"$set": {"ready": ready - quantity}})

    def fill_recipe_design(self, item: dict[str, Any]) -> dict[str, Any]:
        """Return a copy of an order item with its product trees resolved."""
        filled = dict(item)
        filled["product"] = self.get_recipe_tree(item["product"]["id"])
        filled["sub_items"] = [
            self.fill_recipe_design(sub_item) for sub_item in item.get("sub_items") or []
        ]
        return filled

    def get_recipe_materials(self, recipe_id: str) -> list[dict[str, Any]]:
        return list(self._find_recipe(recipe_id).get("materials") or [])

    def get_recipe_tree(self, recipe_id: str) -> dict[str, Any]:
        """Resolve a recipe into its materials (with usable entries) and sub-recipes."""
        recipe = self._find_recipe(recipe_id)

        materials = []
        for material in recipe.get("materials") or []:
            stored = self._materials.find_one({"id": material.get("id")})
            if stored is None:
                raise LookupError(f"material {material.get('id')} not found")
            materials.append(
                {
                    "id": material.get("id"),
                    "name": stored.get("name", ""),
                    "quantity": material.get("quantity", 0.0),
                    "entries": [
                        entry
                        for entry in stored.get("entries") or []
                        if entry.get("quantity", 0) > 0
                    ],
                    "unit": stored.get("unit", ""),
                }
            )

        sub_products = []
        for sub_product in recipe.get("sub_products") or []:
            sub_tree = self.get_recipe_tree(sub_product["id"])
            sub_tree["quantity"] = float(sub_product.get("quantity", 0))
            sub_products.append(sub_tree)

        return {
            "id": recipe_id,
            "name": recipe.get("name", ""),
            "quantity": recipe.get("quantity", 0.0),
            "price": recipe.get("price", 0.0),
            "ready": recipe.get("ready", 0.0),
            "materials": materials,
            "sub_products": sub_products,
        }

    def get_ready_number(self, recipe_id: str) -> float:
        return self._find_recipe(recipe_id).get("ready", 0.0)