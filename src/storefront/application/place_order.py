"""Application service: Place Order use case.

Validates the submitted form and freezes the current selection into an
OrderRecord. Validation failures propagate unchanged so the UI can
re-prompt for exactly the fields that are wrong.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime

from storefront.application.dto import OrderDTO
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import OrderForm, OrderRecord
from storefront.domain.model.selection import Selection
from storefront.domain.service.message_formatter import (
    DEFAULT_STORE_NAME,
    format_order_message,
)

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        clock: Callable[[], datetime] = datetime.now,
        store_name: str = DEFAULT_STORE_NAME,
        sizes: Sequence[str] = (),
    ) -> None:
        self._clock = clock
        self._store_name = store_name
        self._sizes = tuple(sizes)

    def handle(
        self,
        selection: Selection,
        fields: OrderForm | Mapping[str, object],
    ) -> OrderRecord:
        """Compose an order from *selection* and the customer's *fields*.

        Steps:
        1. Normalise the raw fields into an OrderForm.
        2. Let OrderRecord.compose validate and capture the timestamp.
        """
        form = fields if isinstance(fields, OrderForm) else OrderForm.from_mapping(fields)
        try:
            order = OrderRecord.compose(selection, form, self._clock(), self._sizes)
        except ValidationError as exc:
            logger.warning("Order form rejected: %s", exc)
            raise
        logger.info(
            "Order composed: %s x%d, total %s",
            order.product_name, order.quantity, order.total,
        )
        return order

    def to_dto(self, order: OrderRecord) -> OrderDTO:
        return OrderDTO(
            product_name=order.product_name,
            unit_price=str(order.unit_price),
            size=order.size,
            quantity=order.quantity,
            total=str(order.total),
            customer_name=order.customer_name,
            phone=order.phone,
            email=order.email,
            address=order.address,
            instructions=order.instructions,
            order_time=order.order_time,
            message=format_order_message(order, self._store_name),
        )
