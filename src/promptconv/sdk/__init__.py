"""promptconv SDK — load transcript files and render them for a provider."""

from promptconv.sdk.errors import TranscriptValidationError
from promptconv.sdk.transcript import TranscriptLoader, render

__all__ = [
    "TranscriptLoader",
    "TranscriptValidationError",
    "render",
]
