"""Provider-specific transpiler implementations."""

from promptconv.core.interface.transpilers.claude import ClaudeTranspiler, convert_claude_prompt
from promptconv.core.interface.transpilers.google import GoogleTranspiler, convert_google_prompt
from promptconv.core.interface.transpilers.text_completion import (
    TextCompletionTranspiler,
    convert_text_completion_prompt,
)

__all__ = [
    "ClaudeTranspiler",
    "GoogleTranspiler",
    "TextCompletionTranspiler",
    "convert_claude_prompt",
    "convert_google_prompt",
    "convert_text_completion_prompt",
]
