"""
Product service orchestrator.

Coordinates product catalog operations over an in-memory collection seeded
with example records.

Dependencies: microservices.core.exceptions
System role: Product catalog use cases (service-b)
"""

import logging
from typing import Any

from microservices.core.exceptions import ProductNotFoundError

from .store_utils import generate_record_id, utc_now

logger = logging.getLogger(__name__)


def _seed_products() -> dict[str, dict[str, Any]]:
    now = utc_now()
    seeds = [
        ("1", "Wireless Headphones",
         "High-quality wireless Bluetooth headphones with noise cancellation",
         299.99, "electronics", 50, "WH-001"),
        ("2", "Smart Watch",
         "Advanced fitness tracking smartwatch with heart rate monitor",
         199.99, "electronics", 30, "SW-002"),
        ("3", "Coffee Maker",
         "Programmable drip coffee maker with thermal carafe",
         89.99, "appliances", 25, "CM-003"),
    ]
    return {
        product_id: {
            "id": product_id,
            "name": name,
            "description": description,
            "price": price,
            "category": category,
            "stock": stock,
            "sku": sku,
            "created_at": now,
            "updated_at": now,
        }
        for product_id, name, description, price, category, stock, sku in seeds
    }


class ProductService:
    """Product service orchestrator."""

    def __init__(self, products: dict[str, dict[str, Any]] | None = None) -> None:
        """
        Initialize product service.

        Args:
            products: Initial products keyed by ID (defaults to the seed records)
        """
        self._products = _seed_products() if products is None else products

    async def create_product(self, **fields: Any) -> dict:
        """
        Create a new product.

        Args:
            **fields: name, description, price, category, stock, sku

        Returns:
            dict: Created product
        """
        now = utc_now()
        product = {
            "id": generate_record_id(self._products),
            **fields,
            "created_at": now,
            "updated_at": now,
        }
        self._products[product["id"]] = product
        logger.info("Product created", extra={"product_id": product["id"]})
        return dict(product)

    async def get_all_products(self, category: str | None = None) -> list[dict]:
        """
        Get all products, optionally filtered by category (case-insensitive).

        Args:
            category: Optional category filter

        Returns:
            list[dict]: Matching products
        """
        if category:
            return await self.get_products_by_category(category)

        products = [dict(p) for p in self._products.values()]
        logger.info(f"Retrieved {len(products)} products")
        return products

    async def get_products_by_category(self, category: str) -> list[dict]:
        """Get products whose category matches case-insensitively."""
        wanted = category.lower()
        products = [
            dict(p) for p in self._products.values()
            if p["category"].lower() == wanted
        ]
        logger.info(f"Retrieved {len(products)} products in category: {category}")
        return products

    async def get_product(self, product_id: str) -> dict:
        """
        Get product by ID.

        Raises:
            ProductNotFoundError: If the product doesn't exist
        """
        product = self._products.get(product_id)
        if product is None:
            logger.warning("Product not found", extra={"product_id": product_id})
            raise ProductNotFoundError(product_id)
        return dict(product)

    async def update_product(self, product_id: str, **changes: Any) -> dict:
        """
        Apply a partial update to a product.

        Raises:
            ProductNotFoundError: If the product doesn't exist
        """
        product = self._products.get(product_id)
        if product is None:
            logger.warning("Product not found for update", extra={"product_id": product_id})
            raise ProductNotFoundError(product_id)

        product.update({key: value for key, value in changes.items() if value is not None})
        product["updated_at"] = utc_now()
        logger.info("Product updated", extra={"product_id": product_id})
        return dict(product)

    async def delete_product(self, product_id: str) -> None:
        """
        Delete a product.

        Raises:
            ProductNotFoundError: If the product doesn't exist
        """
        if self._products.pop(product_id, None) is None:
            logger.warning("Product not found for deletion", extra={"product_id": product_id})
            raise ProductNotFoundError(product_id)
        logger.info("Product deleted", extra={"product_id": product_id})
