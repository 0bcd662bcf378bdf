"""JSON-file-backed implementation of ProductRepository.

The catalog file is read once, on first use, and cached: products are
static for the lifetime of the process.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, currency: str = DEFAULT_CURRENCY) -> None:
        self._file_path = file_path
        self._currency = currency
        self._products: list[Product] | None = None

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        return list(self._load())

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[Product]:
        if self._products is None:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            products = [self._to_domain(item) for item in raw]
            self._assert_unique_ids(products)
            self._products = products
            logger.info(
                "Products data loaded: %d products from %s",
                len(products), self._file_path,
            )
        return self._products

    def _to_domain(self, raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money.of(raw["price"], raw.get("currency", self._currency)),
            image=raw.get("image", ""),
            description=raw.get("description", ""),
            category=raw.get("category", ""),
        )

    @staticmethod
    def _assert_unique_ids(products: list[Product]) -> None:
        seen: set[int] = set()
        for product in products:
            if product.id in seen:
                raise ValidationError(f"Duplicate product ID {product.id} in catalog")
            seen.add(product.id)
