"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import promptconv

    assert promptconv.__version__ == "0.1.0"


def test_cli_entrypoint() -> None:
    from promptconv.cli import main

    assert callable(main)


def test_lazy_converter_exports() -> None:
    import promptconv

    prompt = promptconv.convert_claude_prompt(
        [{"role": "user", "content": "hi"}], False, False, False
    )
    assert prompt == "\n\nHuman: hi"
    assert callable(promptconv.convert_google_prompt)
    assert callable(promptconv.convert_text_completion_prompt)


def test_sdk_imports() -> None:
    from promptconv.sdk import TranscriptLoader, TranscriptValidationError, render

    assert TranscriptLoader is not None
    assert TranscriptValidationError is not None
    assert callable(render)
