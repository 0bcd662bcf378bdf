"""Domain service: plain-text order messages.

The text produced here is sent verbatim over WhatsApp and email and is
read by staff, so section order and labels are part of the contract.
"""

from __future__ import annotations

from storefront.domain.model.order import OrderRecord

DEFAULT_STORE_NAME = "HHMI Brothers"
RULE = "-" * 23


def order_subject(order: OrderRecord, store_name: str = DEFAULT_STORE_NAME) -> str:
    return f"NEW ORDER - {store_name} - {order.product_name}"


def format_order_message(order: OrderRecord, store_name: str = DEFAULT_STORE_NAME) -> str:
    """Render the fixed-section order message.

    Sections: order details, customer info, instructions ("None" when
    empty), then the footer. The email line is left out when the
    customer gave none.
    """
    lines = [
        f"NEW ORDER - {store_name}",
        "",
        "ORDER DETAILS:",
        f"Product: {order.product_name}",
        f"Price: {order.unit_price}",
        f"Quantity: {order.quantity}",
        f"Total: {order.total}",
        f"Size: {order.size}",
        "",
        "CUSTOMER INFO:",
        f"Name: {order.customer_name}",
        f"Phone: {order.phone}",
    ]
    if order.email:
        lines.append(f"Email: {order.email}")
    lines += [
        f"Address: {order.address}",
        "",
        "INSTRUCTIONS:",
        order.instructions or "None",
        f"Order Time: {order.order_time}",
        RULE,
        f"Order placed via {store_name} Website",
        "Please process this order and contact the customer for confirmation.",
    ]
    return "\n".join(lines)


def format_email_copy(order: OrderRecord, store_name: str = DEFAULT_STORE_NAME) -> str:
    """Message plus a bullet summary, for customers who paste it into their own mail app."""
    summary = [
        "---",
        "ORDER SUMMARY:",
        f"• Product: {order.product_name}",
        f"• Size: {order.size}",
        f"• Quantity: {order.quantity}",
        f"• Total: {order.total}",
        f"• Customer: {order.customer_name}",
        f"• Phone: {order.phone}",
        f"• Address: {order.address}",
    ]
    if order.email:
        summary.append(f"• Email: {order.email}")
    if order.instructions:
        summary.append(f"• Instructions: {order.instructions}")

    return "\n".join([
        format_order_message(order, store_name),
        "",
        *summary,
        "",
        "Thank you for your order! We'll contact you within 24 hours.",
    ])
