import logging

import click

from storefront.infrastructure.cli.order_commands import order_place
from storefront.infrastructure.cli.preference_commands import (
    history_clear,
    history_show,
    theme_set,
    theme_show,
)
from storefront.infrastructure.cli.product_commands import product_list, product_show


@click.group()
@click.option("--deployment", default=None, help="Deployment name from config/storefront.yml.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log pipeline activity.")
@click.pass_context
def cli(ctx: click.Context, deployment: str | None, verbose: bool) -> None:
    """Storefront catalog and order pipeline"""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["deployment"] = deployment


@cli.group()
def products() -> None:
    """Browse the catalog."""


@cli.group()
def order() -> None:
    """Place orders."""


@cli.group()
def theme() -> None:
    """Manage the theme preference."""


@cli.group()
def history() -> None:
    """Manage the saved assistant conversation."""


# Register subcommands
products.add_command(product_list)
products.add_command(product_show)
order.add_command(order_place)
theme.add_command(theme_show)
theme.add_command(theme_set)
history.add_command(history_show)
history.add_command(history_clear)
