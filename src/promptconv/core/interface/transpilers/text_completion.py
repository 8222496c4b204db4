"""Text-completion transpiler — renders a transcript as role-labelled lines."""

from collections.abc import Iterable

from promptconv.core.interface.models import MessageLike, Role, Transcript, to_messages
from promptconv.utils.telemetry import (
    ATTR_MESSAGE_COUNT,
    ATTR_PROMPT_LENGTH,
    ATTR_PROVIDER,
    get_tracer,
)

_tracer = get_tracer(__name__)

ASSISTANT_CUE = "\nassistant:"


def convert_text_completion_prompt(messages: str | Transcript | Iterable[MessageLike]) -> str:
    """Render *messages* as ``<speaker>: <text>`` lines ending in an assistant cue.

    A pre-rendered string is returned unchanged. Unnamed system messages are
    labelled ``System``, named ones use the name, and every other message uses
    its raw role string.
    """
    if isinstance(messages, str):
        return messages

    lines: list[str] = []
    for msg in to_messages(messages):
        if msg.kind is Role.SYSTEM and msg.name is None:
            lines.append("System: " + msg.text)
        elif msg.kind is Role.SYSTEM:
            lines.append(f"{msg.name}: {msg.text}")
        else:
            lines.append(f"{msg.role}: {msg.text}")
    return "\n".join(lines) + ASSISTANT_CUE


class TextCompletionTranspiler:
    """Renders transcripts for plain text-completion endpoints."""

    provider = "text_completion"

    def to_provider(self, messages: str | Transcript | Iterable[MessageLike]) -> str:
        """Convert *messages* to a single prompt string."""
        with _tracer.start_as_current_span("promptconv.convert") as span:
            span.set_attribute(ATTR_PROVIDER, self.provider)
            if not isinstance(messages, str):
                messages = to_messages(messages)
                span.set_attribute(ATTR_MESSAGE_COUNT, len(messages))
            prompt = convert_text_completion_prompt(messages)
            span.set_attribute(ATTR_PROMPT_LENGTH, len(prompt))
        return prompt
