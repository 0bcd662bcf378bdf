"""Product aggregate.

Products are loaded once from the static catalog and never change
afterwards. Identity is the integer ``id``.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    id: int
    name: str
    price: Money
    image: str = ""
    description: str = ""
    category: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id <= 0:
            raise ValidationError(f"Product id must be a positive integer, got {self.id!r}")
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if self.price.amount <= 0:
            raise ValidationError(
                f"Product price must be greater than zero ({self.name})"
            )

    def matches(self, term: str) -> bool:
        """True if *term* (already lower-cased) occurs in name, description or category."""
        return (
            term in self.name.lower()
            or term in self.description.lower()
            or term in self.category.lower()
        )
