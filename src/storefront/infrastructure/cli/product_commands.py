"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import storefront_session

SORT_CHOICES = ["none", "price-asc", "price-desc", "name-asc", "price-low", "price-high", "name"]


@click.command("list")
@click.option("--search", "term", default="", help="Match name, description or category.")
@click.option("--sort", "sort_key", type=click.Choice(SORT_CHOICES), default="none", help="Sort order.")
@click.pass_context
def product_list(ctx: click.Context, term: str, sort_key: str) -> None:
    """List catalog products, optionally searched and sorted."""
    session = storefront_session(ctx.obj.get("deployment"))
    session.on_search(term)
    products = session.on_sort(sort_key)

    if not products:
        click.echo("No products found matching your criteria.")
        return

    click.echo(f"{'ID':<4} {'Name':<30} {'Category':<10} {'Price':>10}")
    click.echo("-" * 57)
    for p in products:
        click.echo(f"{p.id:<4} {p.name:<30} {p.category:<10} {p.price:>10}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_context
def product_show(ctx: click.Context, product_id: str) -> None:
    """Show one product and its order summary."""
    session = storefront_session(ctx.obj.get("deployment"))

    try:
        summary = session.on_select(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    product = session.selection.product
    click.echo(f"Product #{product.id}: {summary.product_name}")
    click.echo(f"Category: {product.category}")
    click.echo(f"Price:    {summary.unit_price}")
    if product.description:
        click.echo()
        click.echo(product.description)
