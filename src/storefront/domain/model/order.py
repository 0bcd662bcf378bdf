"""Order records, the core of the domain.

An OrderRecord freezes everything staff need to fulfil a purchase:
the product and price as they were when the customer submitted the
form, and the customer's contact details.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.selection import Selection
from storefront.domain.model.value_objects import Money
from storefront.domain.service.order_validation import validate_order_form

ORDER_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class OrderFlowState(Enum):
    IDLE = "IDLE"
    SELECTED = "SELECTED"
    COMPOSED = "COMPOSED"
    DISPATCHED = "DISPATCHED"


@dataclass(frozen=True)
class OrderForm:
    """Raw customer input from the order modal, unvalidated."""

    name: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""
    size: str = ""
    instructions: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> OrderForm:
        """Build a form from loosely-typed input; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if key in known:
                values[key] = "" if value is None else str(value)
        return cls(**values)


@dataclass(frozen=True)
class OrderRecord:
    """An immutable, fully validated order.

    Use the ``OrderRecord.compose()`` factory, which validates the form
    before anything is captured.
    """

    product_name: str
    unit_price: Money  # locked at composition time
    size: str
    quantity: int
    total: Money
    customer_name: str
    phone: str
    address: str
    placed_at: datetime
    email: str | None = None
    instructions: str | None = None

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def compose(
        selection: Selection,
        form: OrderForm,
        now: datetime,
        sizes: Sequence[str] = (),
    ) -> OrderRecord:
        """Create an order from the live selection and a submitted form.

        *sizes*, when given, is the set of sizes the form may name.
        """
        if selection.product is None:
            raise ValidationError("No product selected")
        validate_order_form(form, sizes)

        product = selection.product
        return OrderRecord(
            product_name=product.name,
            unit_price=product.price,
            size=form.size.strip(),
            quantity=selection.quantity.value,
            total=selection.total,
            customer_name=form.name.strip(),
            phone=form.phone.strip(),
            address=form.address.strip(),
            placed_at=now,
            email=form.email.strip() or None,
            instructions=form.instructions.strip() or None,
        )

    # --- Computed properties --------------------------------------------------

    @property
    def order_time(self) -> str:
        return self.placed_at.strftime(ORDER_TIME_FORMAT)
