"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    """Output: one product card as rendered in the catalog grid."""

    id: int
    name: str
    price: str  # formatted, e.g. "PKR 4299"
    image: str
    description: str
    category: str


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: the live summary shown inside the order modal."""

    product_name: str
    unit_price: str
    quantity: int
    total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a composed order plus the message staff will receive."""

    product_name: str
    unit_price: str
    size: str
    quantity: int
    total: str
    customer_name: str
    phone: str
    email: str | None
    address: str
    instructions: str | None
    order_time: str
    message: str


@dataclass(frozen=True)
class ChannelActionDTO:
    """Output: what the UI should do to deliver an order.

    Exactly one of ``url`` or ``clipboard_payload`` is set. When the
    payload is set, ``fallback_url`` holds the webmail compose link.
    """

    channel: str
    url: str | None = None
    clipboard_payload: str | None = None
    fallback_url: str | None = None
