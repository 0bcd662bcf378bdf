"""Application service: Select Product use case."""

from __future__ import annotations

import logging

from storefront.application.dto import OrderSummaryDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.selection import Selection, select
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class SelectProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int | str) -> Selection:
        """Pick a product for ordering, quantity one.

        Raises EntityNotFoundError for an unknown id.
        """
        try:
            selection = select(self._product_repo.list_all(), product_id)
        except EntityNotFoundError:
            logger.warning("Product not found with ID: %r", product_id)
            raise
        logger.info("Selected product %s", selection.product.name)
        return selection

    @staticmethod
    def summarize(selection: Selection) -> OrderSummaryDTO:
        # Raises ValidationError on an empty selection.
        total = selection.total
        return OrderSummaryDTO(
            product_name=selection.product.name,
            unit_price=str(selection.product.price),
            quantity=selection.quantity.value,
            total=str(total),
        )
