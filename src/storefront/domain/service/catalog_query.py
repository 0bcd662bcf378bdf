"""Domain service: catalog search and sort.

``filter_and_sort`` is a pure function over an immutable catalog: the
same catalog, term and sort key always yield the same view.
"""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Iterable
from enum import Enum

from storefront.domain.model.product import Product

logger = logging.getLogger(__name__)


class SortKey(Enum):
    NONE = "none"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    NAME_ASC = "name-asc"

    @classmethod
    def parse(cls, raw: str | SortKey | None) -> SortKey:
        """Map a select-box value to a sort key.

        Accepts the canonical values and the storefront's own option
        values (``price-low``, ``price-high``, ``name``). Anything else
        keeps catalog order.
        """
        if isinstance(raw, SortKey):
            return raw
        value = (raw or "").strip().lower()
        if value in _ALIASES:
            return _ALIASES[value]
        try:
            return cls(value)
        except ValueError:
            if value:
                logger.warning("Unknown sort key %r, keeping catalog order", raw)
            return cls.NONE


_ALIASES = {
    "": SortKey.NONE,
    "default": SortKey.NONE,
    "price-low": SortKey.PRICE_ASC,
    "price-high": SortKey.PRICE_DESC,
    "name": SortKey.NAME_ASC,
}


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")


def _name_order(product: Product) -> tuple[str, str, str]:
    # Accents and case only break ties; on a case tie lowercase sorts first.
    folded = product.name.casefold()
    return (_strip_accents(folded), folded, product.name.swapcase())


def search(catalog: Iterable[Product], term: str) -> list[Product]:
    needle = (term or "").strip().lower()
    if not needle:
        return list(catalog)
    return [product for product in catalog if product.matches(needle)]


def sort_products(products: Iterable[Product], key: SortKey) -> list[Product]:
    # sorted() is stable, and reverse=True keeps ties in catalog order too.
    if key is SortKey.PRICE_ASC:
        return sorted(products, key=lambda p: p.price.amount)
    if key is SortKey.PRICE_DESC:
        return sorted(products, key=lambda p: p.price.amount, reverse=True)
    if key is SortKey.NAME_ASC:
        return sorted(products, key=_name_order)
    return list(products)


def filter_and_sort(
    catalog: Iterable[Product],
    search_term: str = "",
    sort_key: SortKey | str | None = SortKey.NONE,
) -> list[Product]:
    """Derive the catalog view for a search term and a sort key."""
    key = SortKey.parse(sort_key)
    view = sort_products(search(catalog, search_term), key)
    logger.debug(
        "Catalog query term=%r sort=%s -> %d products",
        search_term, key.value, len(view),
    )
    return view
