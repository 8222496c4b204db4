"""SDK error types."""

from __future__ import annotations


class TranscriptValidationError(Exception):
    """Raised when a transcript file fails parsing or validation."""
