"""Transpiler protocol — renders a transcript into a provider-specific payload.

Each provider family has a concrete transpiler wrapping one conversion
function. String-prompt providers return ``str``; block-shaped providers
return a list of wire dicts.
"""

from collections.abc import Iterable
from typing import Any, Protocol

from promptconv.core.interface.models import MessageLike, Transcript


class Transpiler(Protocol):
    """Protocol for provider-specific prompt transpilers."""

    provider: str

    def to_provider(
        self, messages: Transcript | Iterable[MessageLike]
    ) -> str | list[dict[str, Any]]:
        """Render *messages* into the payload the provider expects.

        The caller's messages are never mutated.
        """
        ...
