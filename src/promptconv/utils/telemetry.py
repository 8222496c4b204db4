"""OpenTelemetry tracing for promptconv.

Every transpiler wraps its conversion in a ``promptconv.convert`` span obtained
from :func:`get_tracer`. Until :func:`configure_telemetry` installs an SDK
tracer provider those spans are the API's no-op spans, so library callers pay
nothing for the instrumentation.

The CLI turns tracing on with ``promptconv --trace`` (spans printed to the
console) or ``promptconv --otlp-endpoint HOST:PORT``. Both need the ``otel``
extra: ``pip install promptconv[otel]``.
"""

from __future__ import annotations

from typing import Any

from opentelemetry import trace

# ---------------------------------------------------------------------------
# Span attribute keys set by the transpilers
# ---------------------------------------------------------------------------

ATTR_PROVIDER = "promptconv.provider"
ATTR_MODEL = "promptconv.model"
ATTR_MESSAGE_COUNT = "promptconv.messages.count"
ATTR_BLOCK_COUNT = "promptconv.blocks.count"
ATTR_MULTIMODAL = "promptconv.multimodal"
ATTR_PROMPT_LENGTH = "promptconv.prompt.length"

_INSTRUMENTATION_NAME = "promptconv"

_SDK_HINT = "Install the tracing extra with: pip install promptconv[otel]"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return the tracer for *name* (a no-op tracer until tracing is configured)."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = "promptconv",
    export_to_console: bool = True,
    otlp_endpoint: str | None = None,
) -> None:
    """Install an SDK tracer provider that exports conversion spans.

    Args:
        service_name: Value of the ``service.name`` resource attribute.
        export_to_console: Print each finished span as JSON to stdout.
        otlp_endpoint: When set, also batch-export spans over OTLP/gRPC.

    Raises:
        ImportError: If ``opentelemetry-sdk`` (or, for *otlp_endpoint*,
            ``opentelemetry-exporter-otlp``) is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
    except ImportError as exc:
        raise ImportError(f"opentelemetry-sdk is required for tracing. {_SDK_HINT}") from exc

    processors = _span_processors(export_to_console, otlp_endpoint)

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))  # pyright: ignore[reportUnknownVariableType,reportUnknownMemberType]
    for processor in processors:
        provider.add_span_processor(processor)  # pyright: ignore[reportUnknownMemberType]
    trace.set_tracer_provider(provider)  # pyright: ignore[reportUnknownArgumentType]


def _span_processors(export_to_console: bool, otlp_endpoint: str | None) -> list[Any]:
    """Build one span processor per requested destination."""
    from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        BatchSpanProcessor,
        ConsoleSpanExporter,
        SimpleSpanProcessor,
    )

    processors: list[Any] = []
    if export_to_console:
        processors.append(SimpleSpanProcessor(ConsoleSpanExporter()))

    if otlp_endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        except ImportError as exc:
            raise ImportError(
                f"opentelemetry-exporter-otlp is required for OTLP export. {_SDK_HINT}"
            ) from exc
        processors.append(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))

    return processors
