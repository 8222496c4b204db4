"""Tests for transcript and content-block models."""

import pytest
from pydantic import ValidationError

from promptconv.core.interface.models import (
    ContentBlock,
    ImageRef,
    InlineData,
    InlineDataPart,
    Message,
    MultimodalContent,
    Role,
    TextPart,
    Transcript,
    to_messages,
)


class TestRole:
    def test_known_roles(self) -> None:
        assert Role.parse("system") is Role.SYSTEM
        assert Role.parse("user") is Role.USER
        assert Role.parse("assistant") is Role.ASSISTANT

    def test_unknown_role(self) -> None:
        assert Role.parse("narrator") is Role.UNKNOWN
        assert Role.parse("") is Role.UNKNOWN


class TestMessage:
    def test_constructors(self) -> None:
        msg = Message.user("hi", name="Bob")
        assert msg.role == "user"
        assert msg.kind is Role.USER
        assert msg.name == "Bob"
        assert msg.text == "hi"
        assert msg.image is None

    def test_unknown_role_is_kept_verbatim(self) -> None:
        msg = Message(role="narrator", content="x")
        assert msg.role == "narrator"
        assert msg.kind is Role.UNKNOWN

    def test_missing_content_defaults_to_empty(self) -> None:
        assert Message(role="user").text == ""
        assert Message.model_validate({"role": "user", "content": None}).text == ""

    def test_role_is_required(self) -> None:
        with pytest.raises(ValidationError):
            Message.model_validate({"content": "hi"})

    def test_structured_content(self) -> None:
        msg = Message.model_validate(
            {"role": "user", "content": {"text": "look", "image": {"mime_type": "image/jpeg", "data": "AB"}}}
        )
        assert isinstance(msg.content, MultimodalContent)
        assert msg.text == "look"
        assert msg.image == ImageRef(mime_type="image/jpeg", data="AB")

    def test_chatml_parts(self) -> None:
        msg = Message.model_validate(
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": "what is"},
                    {"type": "image_url", "image_url": {"url": "data:image/webp;base64,XYZ"}},
                    {"type": "text", "text": "this?"},
                ],
            }
        )
        assert msg.text == "what is\nthis?"
        assert msg.image == ImageRef(mime_type="image/webp", data="XYZ")

    def test_image_url_without_source_keeps_empty_image(self) -> None:
        msg = Message.model_validate(
            {"role": "user", "content": [{"type": "image_url", "image_url": {}}]}
        )
        assert msg.image == ImageRef(data=None)

    def test_scalar_content_is_stringified(self) -> None:
        assert Message.model_validate({"role": "user", "content": 5}).text == "5"
        assert Message.model_validate({"role": "user", "content": 1.5}).text == "1.5"
        assert Message.model_validate({"role": "user", "content": True}).text == "True"

    def test_with_text_keeps_image(self) -> None:
        msg = Message(role="user", content=MultimodalContent(text="a", image=ImageRef(data="D")))
        updated = msg.with_text("b")
        assert updated.text == "b"
        assert updated.image is not None
        assert msg.text == "a"


class TestImageRef:
    def test_from_data_url(self) -> None:
        ref = ImageRef.from_url("data:image/jpeg;base64,QUJD")
        assert ref.mime_type == "image/jpeg"
        assert ref.data == "QUJD"

    def test_from_plain_url(self) -> None:
        ref = ImageRef.from_url("https://example.com/cat.png")
        assert ref.data == "https://example.com/cat.png"
        assert ref.mime_type == "image/png"


class TestTranscript:
    def test_from_list(self) -> None:
        transcript = Transcript.from_obj([{"role": "user", "content": "hi"}])
        assert len(transcript) == 1
        assert [m.text for m in transcript] == ["hi"]

    def test_from_mapping(self) -> None:
        transcript = Transcript.from_obj({"messages": [{"role": "assistant", "content": "yo"}]})
        assert transcript.messages[0].kind is Role.ASSISTANT

    def test_append(self) -> None:
        transcript = Transcript()
        transcript.append(Message.user("hi"))
        assert len(transcript) == 1

    def test_to_messages_passes_instances_through(self) -> None:
        msg = Message.user("hi")
        result = to_messages([msg, {"role": "assistant", "content": "yo"}])
        assert result[0] is msg
        assert result[1].kind is Role.ASSISTANT


class TestContentBlock:
    def test_to_provider_uses_wire_names(self) -> None:
        block = ContentBlock(
            parts=[
                TextPart(text="hi"),
                InlineDataPart(inline_data=InlineData(mime_type="image/png", data="D")),
            ],
            role="user",
        )
        assert block.to_provider() == {
            "parts": [{"text": "hi"}, {"inlineData": {"mimeType": "image/png", "data": "D"}}],
            "role": "user",
        }
        assert block.text == "hi"

    def test_validates_from_wire_names(self) -> None:
        block = ContentBlock.model_validate(
            {"parts": [{"inlineData": {"mimeType": "image/png", "data": "D"}}], "role": "model"}
        )
        assert isinstance(block.parts[0], InlineDataPart)
        assert block.parts[0].inline_data.data == "D"

    def test_rejects_unknown_role(self) -> None:
        with pytest.raises(ValidationError):
            ContentBlock(parts=[TextPart(text="x")], role="assistant")  # type: ignore[arg-type]
