"""Storefront session: the command interface a UI drives.

One session per open page. It owns every piece of mutable state the
pipeline needs (search term, sort key, the selection slot, the composed
order) and is the only thing that writes the selection, so at most one
order can be in progress at a time.

State machine::

    IDLE --select--> SELECTED --submit--> COMPOSED --dispatch--> DISPATCHED
      ^                 |                                            |
      +------close------+---------------------close------------------+

A failed submit leaves the session in SELECTED. A command issued in the
wrong state raises ValidationError and changes nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime

from storefront.application.dispatch_order import DispatchOrderHandler
from storefront.application.dto import (
    ChannelActionDTO,
    OrderDTO,
    OrderSummaryDTO,
    ProductDTO,
)
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.query_catalog import QueryCatalogHandler
from storefront.application.select_product import SelectProductHandler
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import OrderFlowState, OrderForm, OrderRecord
from storefront.domain.model.selection import Selection, clear, set_quantity
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.catalog_query import SortKey
from storefront.domain.service.delivery_dispatcher import Channel, DispatchTarget

logger = logging.getLogger(__name__)


class StorefrontSession:

    def __init__(
        self,
        product_repo: ProductRepository,
        target: DispatchTarget,
        clock: Callable[[], datetime] = datetime.now,
        sizes: Sequence[str] = (),
    ) -> None:
        self._query = QueryCatalogHandler(product_repo)
        self._select = SelectProductHandler(product_repo)
        self._place = PlaceOrderHandler(
            clock=clock, store_name=target.store_name, sizes=sizes
        )
        self._dispatch = DispatchOrderHandler(target)

        self._search_term = ""
        self._sort_key = SortKey.NONE
        self._selection = Selection.empty()
        self._order: OrderRecord | None = None
        self._state = OrderFlowState.IDLE

    # --- Read-only views ------------------------------------------------------

    @property
    def state(self) -> OrderFlowState:
        return self._state

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def order(self) -> OrderRecord | None:
        return self._order

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def sort_key(self) -> SortKey:
        return self._sort_key

    # --- Catalog commands -----------------------------------------------------

    def on_search(self, term: str) -> list[ProductDTO]:
        """Filter by *term*, keeping the current sort."""
        self._search_term = (term or "").strip()
        return self.view()

    def on_sort(self, key: SortKey | str | None) -> list[ProductDTO]:
        """Re-sort, keeping the current search term."""
        self._sort_key = SortKey.parse(key)
        return self.view()

    def view(self) -> list[ProductDTO]:
        return self._query.handle(self._search_term, self._sort_key)

    # --- Order commands -------------------------------------------------------

    def on_select(self, product_id: int | str) -> OrderSummaryDTO:
        """IDLE -> SELECTED. An unknown id leaves the session IDLE."""
        self._require(OrderFlowState.IDLE, "select a product")
        self._selection = self._select.handle(product_id)
        self._transition(OrderFlowState.SELECTED)
        return self._select.summarize(self._selection)

    def on_quantity(self, raw: object) -> OrderSummaryDTO:
        """Update the quantity; bad input clamps to one."""
        self._require(OrderFlowState.SELECTED, "change the quantity")
        self._selection = set_quantity(self._selection, raw)
        return self._select.summarize(self._selection)

    def on_submit_order(self, fields: OrderForm | Mapping[str, object]) -> OrderDTO:
        """SELECTED -> COMPOSED. Validation errors keep SELECTED."""
        self._require(OrderFlowState.SELECTED, "submit an order")
        self._order = self._place.handle(self._selection, fields)
        self._transition(OrderFlowState.COMPOSED)
        return self._place.to_dto(self._order)

    def on_dispatch(self, channel: Channel | str) -> ChannelActionDTO:
        """COMPOSED -> DISPATCHED. The selection is released once sent."""
        self._require(OrderFlowState.COMPOSED, "dispatch an order")
        action = self._dispatch.handle(self._order, channel)
        self._selection = clear()
        self._transition(OrderFlowState.DISPATCHED)
        return action

    def on_close(self) -> None:
        """Any state -> IDLE, forgetting the selection and any order."""
        self._selection = clear()
        self._order = None
        self._transition(OrderFlowState.IDLE)

    # --- Internal helpers -----------------------------------------------------

    def _require(self, expected: OrderFlowState, action: str) -> None:
        if self._state is not expected:
            logger.warning(
                "Cannot %s in %s state", action, self._state.value
            )
            raise ValidationError(
                f"Cannot {action}: current state is {self._state.value}, "
                f"expected {expected.value}"
            )

    def _transition(self, new_state: OrderFlowState) -> None:
        if new_state is not self._state:
            logger.debug("Order flow %s -> %s", self._state.value, new_state.value)
        self._state = new_state
