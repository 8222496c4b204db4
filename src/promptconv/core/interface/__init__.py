"""Transcript models, converter configuration and provider transpilers."""

from promptconv.core.interface.config import ConverterConfig
from promptconv.core.interface.errors import ConversionError, UnknownProviderError
from promptconv.core.interface.models import (
    ContentBlock,
    ImageRef,
    InlineData,
    InlineDataPart,
    Message,
    MessageContent,
    MultimodalContent,
    Role,
    TextPart,
    Transcript,
    to_messages,
)
from promptconv.core.interface.registry import available_providers, get_transpiler
from promptconv.core.interface.transpiler import Transpiler

__all__ = [
    "ContentBlock",
    "ConversionError",
    "ConverterConfig",
    "ImageRef",
    "InlineData",
    "InlineDataPart",
    "Message",
    "MessageContent",
    "MultimodalContent",
    "Role",
    "TextPart",
    "Transcript",
    "Transpiler",
    "UnknownProviderError",
    "available_providers",
    "get_transpiler",
    "to_messages",
]
