"""Shared CLI output formatters."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.table import Table

console = Console()


def print_prompt(prompt: str, *, as_json: bool = False) -> None:
    """Print a rendered prompt string.

    Markup and highlighting are disabled so the connector literals and blank
    lines come out exactly as rendered.
    """
    if as_json:
        console.print_json(json.dumps({"prompt": prompt}))
        return
    console.print(prompt, markup=False, highlight=False, soft_wrap=True)


def print_blocks(blocks: list[dict[str, Any]]) -> None:
    """Print content blocks as JSON."""
    console.print_json(json.dumps(blocks))


def print_providers_table(providers: dict[str, str]) -> None:
    """Pretty-print provider names and their output shape."""
    table = Table(title="Providers")
    table.add_column("Name", style="cyan")
    table.add_column("Output")

    for name, shape in providers.items():
        table.add_row(name, shape)

    console.print(table)
