"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from promptconv.cli_commands.convert import convert
    from promptconv.cli_commands.providers import providers

    cli.add_command(convert)
    cli.add_command(providers)
