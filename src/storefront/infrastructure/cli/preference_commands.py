"""CLI commands for stored preferences."""

from __future__ import annotations

import click

from storefront.application.preferences import ConversationLog, ThemePreferences
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import preference_repository


@click.command("show")
def theme_show() -> None:
    """Show the saved theme."""
    click.echo(ThemePreferences(preference_repository()).current())


@click.command("set")
@click.argument("name")
def theme_set(name: str) -> None:
    """Save a theme name."""
    try:
        saved = ThemePreferences(preference_repository()).change(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Theme changed to: {saved}")


@click.command("show")
def history_show() -> None:
    """Print the saved conversation, oldest first."""
    entries = ConversationLog(preference_repository()).entries()
    if not entries:
        click.echo("No conversation history.")
        return
    for entry in entries:
        click.echo(f"[{entry.timestamp}] {entry.type}: {entry.content}")


@click.command("clear")
def history_clear() -> None:
    """Forget the saved conversation."""
    ConversationLog(preference_repository()).clear()
    click.echo("Conversation history cleared.")
