"""``promptconv providers`` — list the supported provider formats."""

from __future__ import annotations

import click

from promptconv.cli_commands._output import print_providers_table
from promptconv.core.interface.registry import available_providers

_OUTPUT_SHAPES = {
    "claude": "Human:/Assistant: turn markup (string)",
    "google": "role-tagged content blocks (JSON)",
    "makersuite": "role-tagged content blocks (JSON)",
    "text_completion": "role-labelled lines (string)",
}


@click.command("providers")
def providers() -> None:
    """List the provider formats a transcript can be rendered to."""
    print_providers_table({name: _OUTPUT_SHAPES.get(name, "") for name in available_providers()})
