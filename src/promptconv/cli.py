"""promptconv CLI entrypoint."""

from __future__ import annotations

import sys

import click

from promptconv import __version__
from promptconv.cli_commands._output import console
from promptconv.utils.telemetry import configure_telemetry


@click.group()
@click.version_option(version=__version__, prog_name="promptconv")
@click.option("--trace", is_flag=True, help="Print conversion spans to the console.")
@click.option(
    "--otlp-endpoint",
    default=None,
    metavar="HOST:PORT",
    help="Export conversion spans over OTLP/gRPC (implies tracing).",
)
def main(trace: bool, otlp_endpoint: str | None) -> None:
    """promptconv — render chat transcripts for LLM prompt APIs."""
    if not (trace or otlp_endpoint):
        return

    try:
        configure_telemetry(export_to_console=trace, otlp_endpoint=otlp_endpoint)
    except ImportError as exc:
        console.print(f"[red]Tracing unavailable:[/red] {exc}")
        sys.exit(1)


# Register subcommands
from promptconv.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
