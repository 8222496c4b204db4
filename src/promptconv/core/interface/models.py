"""Transcript models — the provider-agnostic input and the block-shaped output.

A transcript is an ordered list of :class:`Message` values. Roles are kept as
raw strings so that unrecognised roles survive validation and fall through to
each converter's default branch; :class:`Role` gives the typed view.
"""

from collections.abc import Iterable
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# ---------------------------------------------------------------------------
# Roles
# ---------------------------------------------------------------------------


class Role(str, Enum):
    """Known transcript roles plus an explicit catch-all."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str) -> "Role":
        """Map a raw role string to a member, ``UNKNOWN`` when unrecognised."""
        try:
            role = cls(value)
        except ValueError:
            return cls.UNKNOWN
        return role


# ---------------------------------------------------------------------------
# Content — plain text or a structured text + image value
# ---------------------------------------------------------------------------


class ImageRef(BaseModel):
    """Inline image reference (base64 payload)."""

    mime_type: str = "image/png"
    data: str | None = None

    @classmethod
    def from_url(cls, url: str) -> "ImageRef":
        """Build a reference from a ``data:<mime>;base64,<payload>`` URL.

        Anything that is not a data URL is kept verbatim as the payload.
        """
        if url.startswith("data:") and "," in url:
            header, payload = url[5:].split(",", 1)
            mime_type = header.split(";", 1)[0] or "image/png"
            return cls(mime_type=mime_type, data=payload)
        return cls(data=url)


class MultimodalContent(BaseModel):
    """Structured content: one text part and an optional image part.

    Also accepts the ChatML list shape::

        [{"type": "text", "text": "..."},
         {"type": "image_url", "image_url": {"data": "..."}}]
    """

    text: str = ""
    image: ImageRef | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_chatml_parts(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value

        texts: list[str] = []
        image: ImageRef | None = None
        for part in value:
            if not isinstance(part, dict):
                continue
            if part.get("type") == "text" or "text" in part:
                texts.append(str(part.get("text", "")))
            elif image is None and isinstance(part.get("image_url"), dict):
                image = _image_from_chatml(part["image_url"])
        return {"text": "\n".join(texts), "image": image}


def _image_from_chatml(raw: dict[str, Any]) -> ImageRef:
    if raw.get("data"):
        return ImageRef(mime_type=raw.get("mime_type") or "image/png", data=raw["data"])
    if raw.get("url"):
        return ImageRef.from_url(raw["url"])
    return ImageRef(data=None)


MessageContent = str | MultimodalContent


# ---------------------------------------------------------------------------
# Message & Transcript
# ---------------------------------------------------------------------------


class Message(BaseModel):
    """A single role-tagged transcript entry.

    ``name`` doubles as a speaker label and, on system messages, as the
    ``example_user`` / ``example_assistant`` sentinel used by turn markup.
    """

    role: str
    name: str | None = None
    content: MessageContent = ""

    @field_validator("content", mode="before")
    @classmethod
    def _coerce_content(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, list):
            return MultimodalContent.model_validate(value)
        if isinstance(value, (int, float, bool)):
            return str(value)
        return value

    @property
    def kind(self) -> Role:
        """Typed role, ``Role.UNKNOWN`` for anything unrecognised."""
        return Role.parse(self.role)

    @property
    def text(self) -> str:
        """The textual part of the content."""
        if isinstance(self.content, MultimodalContent):
            return self.content.text
        return self.content

    @property
    def image(self) -> ImageRef | None:
        """The image part, when the content carries one."""
        if isinstance(self.content, MultimodalContent):
            return self.content.image
        return None

    def with_text(self, text: str) -> "Message":
        """Return a copy with the text replaced, keeping any image part."""
        if isinstance(self.content, MultimodalContent):
            content: MessageContent = self.content.model_copy(update={"text": text})
        else:
            content = text
        return self.model_copy(update={"content": content})

    @classmethod
    def system(cls, text: str, name: str | None = None) -> "Message":
        """Create a system message."""
        return cls(role="system", content=text, name=name)

    @classmethod
    def user(cls, text: str, name: str | None = None) -> "Message":
        """Create a user message."""
        return cls(role="user", content=text, name=name)

    @classmethod
    def assistant(cls, text: str, name: str | None = None) -> "Message":
        """Create an assistant message."""
        return cls(role="assistant", content=text, name=name)


class Transcript(BaseModel):
    """An ordered sequence of messages forming a conversation."""

    messages: list[Message] = []

    @classmethod
    def from_obj(cls, data: Any) -> "Transcript":
        """Validate a bare message list or a ``{"messages": [...]}`` mapping."""
        if isinstance(data, list):
            data = {"messages": data}
        return cls.model_validate(data)

    def append(self, message: Message) -> None:
        """Append a message to the transcript."""
        self.messages.append(message)

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self):  # type: ignore[override]
        return iter(self.messages)


# ---------------------------------------------------------------------------
# Content blocks — output of the block-shaped converter
# ---------------------------------------------------------------------------


class TextPart(BaseModel):
    """``{"text": ...}`` part."""

    text: str


class InlineData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    mime_type: str = Field(default="image/png", alias="mimeType")
    data: str


class InlineDataPart(BaseModel):
    """``{"inlineData": {"mimeType": ..., "data": ...}}`` part."""

    model_config = ConfigDict(populate_by_name=True)

    inline_data: InlineData = Field(alias="inlineData")


BlockPart = TextPart | InlineDataPart


class ContentBlock(BaseModel):
    """One role-tagged unit of a block-shaped transcript."""

    parts: list[BlockPart]
    role: Literal["user", "model"]

    @property
    def text(self) -> str:
        """Concatenated text of all text parts."""
        return "".join(part.text for part in self.parts if isinstance(part, TextPart))

    def to_provider(self) -> dict[str, Any]:
        """Wire representation using the provider's camelCase field names."""
        return self.model_dump(by_alias=True)


# ---------------------------------------------------------------------------
# Input normalisation
# ---------------------------------------------------------------------------


MessageLike = Message | dict[str, Any]


def to_messages(messages: Transcript | Iterable[MessageLike]) -> list[Message]:
    """Normalise a transcript, message list, or list of raw dicts.

    Existing :class:`Message` instances are passed through as-is, so callers
    that copy before mutating must do so themselves.
    """
    return [m if isinstance(m, Message) else Message.model_validate(m) for m in messages]
