"""promptconv — render provider-agnostic chat transcripts for LLM prompt APIs."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from promptconv.core.interface.transpilers.claude import (
        convert_claude_prompt as convert_claude_prompt,
    )
    from promptconv.core.interface.transpilers.google import (
        convert_google_prompt as convert_google_prompt,
    )
    from promptconv.core.interface.transpilers.text_completion import (
        convert_text_completion_prompt as convert_text_completion_prompt,
    )

_CONVERTER_EXPORTS = {
    "convert_claude_prompt": "promptconv.core.interface.transpilers.claude",
    "convert_google_prompt": "promptconv.core.interface.transpilers.google",
    "convert_text_completion_prompt": "promptconv.core.interface.transpilers.text_completion",
}


def __getattr__(name: str) -> object:
    module_path = _CONVERTER_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'promptconv' has no attribute {name!r}")
