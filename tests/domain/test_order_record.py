"""Unit tests for OrderRecord composition and the order message."""

from datetime import datetime

import pytest

from storefront.domain.exceptions import MissingFieldsError, ValidationError
from storefront.domain.model.order import OrderForm, OrderRecord
from storefront.domain.model.selection import Selection, select, set_quantity
from storefront.domain.model.value_objects import Money
from storefront.domain.service.message_formatter import (
    format_email_copy,
    format_order_message,
    order_subject,
)
from tests.fakes import FIXED_NOW, jackets


def _form(**overrides) -> OrderForm:
    values = dict(
        name="Ali Khan",
        phone="0300 1234567",
        address="Saddar Bazar, Peshawar",
        size="L",
    )
    values.update(overrides)
    return OrderForm(**values)


def _leather_order(qty: int = 2, **form_overrides) -> OrderRecord:
    selection = set_quantity(select(jackets(), 2), qty)
    return OrderRecord.compose(selection, _form(**form_overrides), FIXED_NOW)


class TestCompose:

    def test_captures_product_and_total(self):
        order = _leather_order(qty=2)
        assert order.product_name == "Women's Faux Leather Jacket"
        assert order.unit_price == Money(4299)
        assert order.quantity == 2
        assert order.total == Money(8598)
        assert order.size == "L"

    def test_timestamp_is_composition_time(self):
        order = _leather_order()
        assert order.placed_at == FIXED_NOW
        assert order.order_time == "2024-11-05 14:30:00"

    def test_blank_optional_fields_become_none(self):
        order = _leather_order(email="  ", instructions="")
        assert order.email is None
        assert order.instructions is None

    def test_fields_are_trimmed(self):
        order = _leather_order(name="  Ali Khan ", email=" ali@example.com ")
        assert order.customer_name == "Ali Khan"
        assert order.email == "ali@example.com"

    def test_invalid_form_builds_nothing(self):
        with pytest.raises(MissingFieldsError):
            _leather_order(address="")

    def test_empty_selection_rejected(self):
        with pytest.raises(ValidationError, match="No product selected"):
            OrderRecord.compose(Selection.empty(), _form(), FIXED_NOW)

    def test_record_is_immutable(self):
        order = _leather_order()
        with pytest.raises(AttributeError):
            order.quantity = 5  # type: ignore[misc]


class TestOrderMessage:

    def test_unit_price_and_total_appear_verbatim(self):
        message = format_order_message(_leather_order(qty=2))
        assert "Price: PKR 4299\n" in message
        assert "Total: PKR 8598\n" in message

    def test_section_order(self):
        message = format_order_message(_leather_order())
        positions = [
            message.index("NEW ORDER - HHMI Brothers"),
            message.index("ORDER DETAILS:"),
            message.index("CUSTOMER INFO:"),
            message.index("INSTRUCTIONS:"),
            message.index("Order placed via HHMI Brothers Website"),
        ]
        assert positions == sorted(positions)

    def test_full_layout(self):
        order = _leather_order(qty=1, email="ali@example.com", instructions="Gift wrap")
        assert format_order_message(order) == "\n".join([
            "NEW ORDER - HHMI Brothers",
            "",
            "ORDER DETAILS:",
            "Product: Women's Faux Leather Jacket",
            "Price: PKR 4299",
            "Quantity: 1",
            "Total: PKR 4299",
            "Size: L",
            "",
            "CUSTOMER INFO:",
            "Name: Ali Khan",
            "Phone: 0300 1234567",
            "Email: ali@example.com",
            "Address: Saddar Bazar, Peshawar",
            "",
            "INSTRUCTIONS:",
            "Gift wrap",
            "Order Time: 2024-11-05 14:30:00",
            "-----------------------",
            "Order placed via HHMI Brothers Website",
            "Please process this order and contact the customer for confirmation.",
        ])

    def test_missing_instructions_render_none(self):
        message = format_order_message(_leather_order(instructions=""))
        assert "INSTRUCTIONS:\nNone\n" in message

    def test_email_line_omitted_without_email(self):
        assert "Email:" not in format_order_message(_leather_order(email=""))

    def test_store_name_is_configurable(self):
        message = format_order_message(_leather_order(), store_name="Jacket Hub")
        assert message.startswith("NEW ORDER - Jacket Hub\n")

    def test_subject_includes_product(self):
        assert order_subject(_leather_order()) == (
            "NEW ORDER - HHMI Brothers - Women's Faux Leather Jacket"
        )


class TestEmailCopy:

    def test_wraps_message_with_summary(self):
        order = _leather_order(qty=2)
        text = format_email_copy(order)
        assert text.startswith(format_order_message(order))
        assert "ORDER SUMMARY:" in text
        assert "• Total: PKR 8598" in text
        assert text.endswith("We'll contact you within 24 hours.")

    def test_optional_bullets_only_when_present(self):
        text = format_email_copy(_leather_order(email="", instructions=""))
        assert "• Email:" not in text
        assert "• Instructions:" not in text

        text = format_email_copy(_leather_order(email="a@b.co", instructions="Ring twice"))
        assert "• Email: a@b.co" in text
        assert "• Instructions: Ring twice" in text
