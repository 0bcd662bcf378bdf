"""CLI commands for placing an order."""

from __future__ import annotations

import click

from storefront.application.dto import ChannelActionDTO
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import storefront_session


def _display_action(action: ChannelActionDTO) -> None:
    if action.clipboard_payload is not None:
        click.echo("Copy the order below into a new email:")
        click.echo()
        click.echo(action.clipboard_payload)
        click.echo()
        click.echo(f"Or open webmail directly: {action.fallback_url}")
    else:
        click.echo(f"Open this link to send the order via {action.channel}:")
        click.echo(action.url)


@click.command("place")
@click.option("--product-id", required=True, help="Product ID from 'products list'.")
@click.option("--quantity", default="1", help="Quantity; anything invalid counts as 1.")
@click.option("--name", default="", help="Customer full name.")
@click.option("--phone", default="", help="Customer phone number.")
@click.option("--email", default="", help="Customer email (optional).")
@click.option("--address", default="", help="Delivery address.")
@click.option("--size", default="", help="Size, e.g. M or XL.")
@click.option("--instructions", default="", help="Special instructions.")
@click.option(
    "--channel",
    type=click.Choice(["whatsapp", "email"]),
    default="whatsapp",
    help="How to send the order.",
)
@click.pass_context
def order_place(
    ctx: click.Context,
    product_id: str,
    quantity: str,
    name: str,
    phone: str,
    email: str,
    address: str,
    size: str,
    instructions: str,
    channel: str,
) -> None:
    """Compose an order and print the link that sends it."""
    session = storefront_session(ctx.obj.get("deployment"))

    try:
        session.on_select(product_id)
        summary = session.on_quantity(quantity)
        dto = session.on_submit_order(
            {
                "name": name,
                "phone": phone,
                "email": email,
                "address": address,
                "size": size,
                "instructions": instructions,
            }
        )
        action = session.on_dispatch(channel)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    finally:
        session.on_close()

    click.echo(f"Order for {summary.product_name} x{summary.quantity}  (total {summary.total})")
    click.echo()
    click.echo(dto.message)
    click.echo()
    _display_action(action)
