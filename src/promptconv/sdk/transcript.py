"""Transcript loading and rendering for the promptconv SDK."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from promptconv.core.interface.config import ConverterConfig
from promptconv.core.interface.models import Transcript
from promptconv.core.interface.registry import get_transpiler
from promptconv.sdk.errors import TranscriptValidationError


class TranscriptLoader:
    """Load and validate a JSON or YAML transcript file into a :class:`Transcript`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> Transcript:
        """Read the file, parse it, and validate.

        ``.json`` files are parsed as JSON, anything else as YAML. The document
        may be a bare list of messages or a mapping with a ``messages`` key.

        Raises:
            TranscriptValidationError: On read errors, parse errors or schema
                validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TranscriptValidationError(f"Cannot read {self._path}: {exc}") from exc

        data: Any
        if self._path.suffix == ".json":
            try:
                data = json.loads(raw)
            except json.JSONDecodeError as exc:
                raise TranscriptValidationError(f"JSON parse error: {exc}") from exc
        else:
            try:
                data = yaml.safe_load(raw)
            except yaml.YAMLError as exc:
                raise TranscriptValidationError(f"YAML parse error: {exc}") from exc

        if not isinstance(data, (list, dict)):
            raise TranscriptValidationError(
                "Transcript must be a list of messages or a mapping with 'messages'"
            )

        try:
            return Transcript.from_obj(data)
        except ValidationError as exc:
            raise TranscriptValidationError(str(exc)) from exc


def render(
    transcript: Transcript, config: ConverterConfig
) -> str | list[dict[str, Any]]:
    """Render *transcript* for the provider named in *config*."""
    return get_transpiler(config).to_provider(transcript)
