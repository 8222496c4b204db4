"""Tests for ``promptconv convert`` and ``promptconv providers``."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import patch

from click.testing import CliRunner

from promptconv.cli import main

if TYPE_CHECKING:
    from pathlib import Path

_TRANSCRIPT = """\
- role: system
  content: Be terse.
- role: user
  content: Hello
- role: assistant
  content: Hi there
"""


def _write_transcript(tmp_path: Path) -> Path:
    f = tmp_path / "chat.yaml"
    f.write_text(_TRANSCRIPT)
    return f


class TestConvertCommand:
    def test_claude(self, tmp_path: Path) -> None:
        f = _write_transcript(tmp_path)

        runner = CliRunner()
        result = runner.invoke(main, ["convert", str(f), "--provider", "claude"])

        assert result.exit_code == 0
        assert "Human: Hello" in result.output
        assert "Assistant: Hi there" in result.output

    def test_claude_system_prompt_json(self, tmp_path: Path) -> None:
        f = _write_transcript(tmp_path)

        runner = CliRunner()
        result = runner.invoke(
            main,
            [
                "convert",
                str(f),
                "-p",
                "claude",
                "--system-prompt",
                "--no-human-prefix",
                "--no-assistant-postfix",
                "--json",
            ],
        )

        assert result.exit_code == 0
        assert '"prompt"' in result.output
        assert "Be terse." in result.output

    def test_text_completion(self, tmp_path: Path) -> None:
        f = _write_transcript(tmp_path)

        runner = CliRunner()
        result = runner.invoke(main, ["convert", str(f), "--provider", "text_completion"])

        assert result.exit_code == 0
        assert "System: Be terse." in result.output
        assert "assistant: Hi there" in result.output

    def test_google_blocks(self, tmp_path: Path) -> None:
        f = _write_transcript(tmp_path)

        runner = CliRunner()
        result = runner.invoke(
            main, ["convert", str(f), "--provider", "google", "--model", "gemini-pro"]
        )

        assert result.exit_code == 0
        assert '"role": "model"' in result.output
        assert '"Hi there"' in result.output

    def test_google_vision_placeholder(self, tmp_path: Path) -> None:
        f = _write_transcript(tmp_path)

        runner = CliRunner()
        result = runner.invoke(
            main, ["convert", str(f), "--provider", "google", "--model", "gemini-pro-vision"]
        )

        assert result.exit_code == 0
        assert "inlineData" in result.output
        assert "image/png" in result.output

    def test_unknown_provider_rejected(self, tmp_path: Path) -> None:
        f = _write_transcript(tmp_path)

        runner = CliRunner()
        result = runner.invoke(main, ["convert", str(f), "--provider", "cohere"])

        assert result.exit_code != 0

    def test_bad_file(self, tmp_path: Path) -> None:
        f = tmp_path / "bad.json"
        f.write_text("not json")

        runner = CliRunner()
        result = runner.invoke(main, ["convert", str(f), "--provider", "claude"])

        assert result.exit_code == 1
        assert "Error loading transcript" in result.output


class TestProvidersCommand:
    def test_lists_providers(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["providers"])

        assert result.exit_code == 0
        assert "claude" in result.output
        assert "makersuite" in result.output


class TestTracingOptions:
    def test_no_tracing_by_default(self, tmp_path: Path) -> None:
        f = _write_transcript(tmp_path)

        runner = CliRunner()
        with patch("promptconv.cli.configure_telemetry") as configure:
            result = runner.invoke(main, ["convert", str(f), "--provider", "claude"])

        assert result.exit_code == 0
        configure.assert_not_called()

    def test_trace_configures_console_export(self, tmp_path: Path) -> None:
        f = _write_transcript(tmp_path)

        runner = CliRunner()
        with patch("promptconv.cli.configure_telemetry") as configure:
            result = runner.invoke(
                main, ["--trace", "convert", str(f), "--provider", "text_completion"]
            )

        assert result.exit_code == 0
        configure.assert_called_once_with(export_to_console=True, otlp_endpoint=None)
        assert "System: Be terse." in result.output

    def test_otlp_endpoint_implies_tracing(self) -> None:
        runner = CliRunner()
        with patch("promptconv.cli.configure_telemetry") as configure:
            result = runner.invoke(main, ["--otlp-endpoint", "localhost:4317", "providers"])

        assert result.exit_code == 0
        configure.assert_called_once_with(export_to_console=False, otlp_endpoint="localhost:4317")

    def test_missing_sdk_exits(self) -> None:
        runner = CliRunner()
        with patch(
            "promptconv.cli.configure_telemetry",
            side_effect=ImportError("opentelemetry-sdk is required for tracing."),
        ):
            result = runner.invoke(main, ["--trace", "providers"])

        assert result.exit_code == 1
        assert "Tracing unavailable" in result.output
