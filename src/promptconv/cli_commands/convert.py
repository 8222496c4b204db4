"""``promptconv convert`` — render a transcript file for one provider."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from promptconv.cli_commands._output import console, print_blocks, print_prompt
from promptconv.core.interface.config import ConverterConfig
from promptconv.core.interface.registry import available_providers
from promptconv.sdk.errors import TranscriptValidationError
from promptconv.sdk.transcript import TranscriptLoader, render


@click.command("convert")
@click.argument("transcript_file", type=click.Path(exists=True))
@click.option(
    "--provider",
    "-p",
    type=click.Choice(available_providers()),
    required=True,
    help="Target provider format.",
)
@click.option("--model", "-m", default="", help="Model name (selects the Google vision layout).")
@click.option("--no-human-prefix", is_flag=True, help="Claude: omit the leading Human: marker.")
@click.option(
    "--no-assistant-postfix", is_flag=True, help="Claude: omit the trailing Assistant: marker."
)
@click.option(
    "--system-prompt", is_flag=True, help="Claude: lift leading system messages into a preamble."
)
@click.option("--json", "as_json", is_flag=True, help="Output string prompts as JSON.")
def convert(
    transcript_file: str,
    provider: str,
    model: str,
    no_human_prefix: bool,
    no_assistant_postfix: bool,
    system_prompt: bool,
    as_json: bool,
) -> None:
    """Render a transcript for a provider.

    TRANSCRIPT_FILE is a JSON or YAML list of messages, or a mapping with a
    ``messages`` key.
    """
    try:
        transcript = TranscriptLoader(Path(transcript_file)).load()
    except TranscriptValidationError as exc:
        console.print(f"[red]Error loading transcript:[/red] {exc}")
        sys.exit(1)

    config = ConverterConfig(
        provider=provider,
        model=model,
        add_human_prefix=not no_human_prefix,
        add_assistant_postfix=not no_assistant_postfix,
        with_system_prompt=system_prompt,
    )
    result = render(transcript, config)

    if isinstance(result, str):
        print_prompt(result, as_json=as_json)
    else:
        print_blocks(result)
