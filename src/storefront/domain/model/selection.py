"""Selection, the single product currently chosen for ordering.

A Selection is an immutable snapshot. The functions in this module
return new snapshots rather than mutating; whoever owns the current
selection (see ``StorefrontSession``) decides which snapshot is live.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class Selection:
    product: Product | None = None
    quantity: Quantity = field(default_factory=Quantity)

    @staticmethod
    def empty() -> Selection:
        return Selection()

    @property
    def is_empty(self) -> bool:
        return self.product is None

    @property
    def total(self) -> Money:
        """Unit price times quantity, computed on every access."""
        if self.product is None:
            raise ValidationError("No product selected")
        return self.product.price * self.quantity.value


def parse_product_id(raw: int | str) -> int:
    """Turn an id from the UI (often a string attribute) into an int."""
    if isinstance(raw, bool):
        raise EntityNotFoundError(f"Product with ID {raw!r} not found")
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError as exc:
        raise EntityNotFoundError(f"Product with ID {raw!r} not found") from exc


def select(catalog: Iterable[Product], product_id: int | str) -> Selection:
    """Pick a product by id with the default quantity of one.

    Raises EntityNotFoundError when no product matches; there is no
    fallback to some other product.
    """
    wanted = parse_product_id(product_id)
    for product in catalog:
        if product.id == wanted:
            return Selection(product=product)
    raise EntityNotFoundError(f"Product with ID {wanted} not found")


def set_quantity(selection: Selection, raw: object) -> Selection:
    return replace(selection, quantity=Quantity.coerce(raw))


def clear() -> Selection:
    return Selection.empty()


def total(selection: Selection) -> Money:
    return selection.total
