"""Google transpiler — maps a transcript to MakerSuite ``contents`` blocks.

Key differences from the canonical transcript:
- Role "assistant" becomes "model"; every other role becomes "user".
- Consecutive same-role messages must be merged into one block.
- The vision model takes a single combined user turn carrying the whole
  conversation as text plus exactly one inline image.
"""

import logging
from collections.abc import Iterable
from typing import Any

from promptconv.core.interface.models import (
    ContentBlock,
    InlineData,
    InlineDataPart,
    Message,
    MessageLike,
    Role,
    TextPart,
    Transcript,
    to_messages,
)
from promptconv.utils.telemetry import (
    ATTR_BLOCK_COUNT,
    ATTR_MESSAGE_COUNT,
    ATTR_MODEL,
    ATTR_MULTIMODAL,
    ATTR_PROVIDER,
    get_tracer,
)

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

MULTIMODAL_MODEL = "gemini-pro-vision"

# 1x1 transparent PNG
PNG_PIXEL = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)

_SEPARATOR = "\n\n"


def _block_role(msg: Message) -> str:
    return "model" if msg.kind is Role.ASSISTANT else "user"


def _text_block(text: str, role: str) -> ContentBlock:
    return ContentBlock(parts=[TextPart(text=text.strip())], role=role)  # type: ignore[arg-type]


def _multimodal_contents(messages: list[Message]) -> list[ContentBlock]:
    """Collapse the whole transcript into one user turn with an image."""
    combined_text = _SEPARATOR.join(
        ("MODEL: " if msg.kind is Role.ASSISTANT else "USER: ") + msg.text
        for msg in messages
    ).strip()

    image = next((msg.image for msg in messages if msg.image is not None), None)
    image_data = image.data if image is not None else None
    if not image_data:
        logger.debug("Google prompt: first image part has no data, using placeholder pixel")
        image_data = PNG_PIXEL

    return [
        ContentBlock(
            parts=[
                TextPart(text=combined_text),
                InlineDataPart(inline_data=InlineData(mime_type="image/png", data=image_data)),
            ],
            role="user",
        )
    ]


def _text_contents(messages: list[Message]) -> list[ContentBlock]:
    """Merge runs of same-role messages into alternating blocks."""
    contents: list[ContentBlock] = []
    last_role = ""
    current_text = ""

    for index, msg in enumerate(messages):
        role = _block_role(msg)
        if role == last_role:
            current_text += _SEPARATOR + msg.text
        else:
            # An empty buffer is dropped rather than emitted as a blank block
            if current_text:
                contents.append(_text_block(current_text, last_role))
            current_text = msg.text
            last_role = role

        if index == len(messages) - 1:
            contents.append(_text_block(current_text, last_role))

    return contents


def convert_google_prompt(
    messages: Transcript | Iterable[MessageLike], model: str
) -> list[ContentBlock]:
    """Convert *messages* to Google ``contents`` blocks for *model*.

    For :data:`MULTIMODAL_MODEL` the result is always a single user block with
    the combined text and an inline PNG: the data of the first image part, or
    :data:`PNG_PIXEL` when there is none or it is empty. Otherwise the result
    has one block per maximal run of same-role messages.
    """
    msgs = to_messages(messages)
    if model == MULTIMODAL_MODEL:
        return _multimodal_contents(msgs)
    return _text_contents(msgs)


class GoogleTranspiler:
    """Renders transcripts for Google MakerSuite ``generateContent``."""

    provider = "google"

    def __init__(self, model: str = "") -> None:
        self.model = model

    def to_provider(self, messages: Transcript | Iterable[MessageLike]) -> list[dict[str, Any]]:
        """Convert *messages* to wire-format ``contents`` dicts."""
        msgs = to_messages(messages)
        with _tracer.start_as_current_span("promptconv.convert") as span:
            span.set_attribute(ATTR_PROVIDER, self.provider)
            span.set_attribute(ATTR_MODEL, self.model)
            span.set_attribute(ATTR_MULTIMODAL, self.model == MULTIMODAL_MODEL)
            span.set_attribute(ATTR_MESSAGE_COUNT, len(msgs))
            blocks = convert_google_prompt(msgs, self.model)
            span.set_attribute(ATTR_BLOCK_COUNT, len(blocks))
        return [block.to_provider() for block in blocks]
