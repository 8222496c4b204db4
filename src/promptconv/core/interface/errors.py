"""Error types for provider selection.

The converters themselves never raise; malformed messages degrade to
malformed output.
"""


class ConversionError(Exception):
    """Base error for all conversion failures."""


class UnknownProviderError(ConversionError):
    """No converter is registered for the requested provider."""

    def __init__(self, provider: str, known: list[str] | None = None) -> None:
        self.provider = provider
        self.known = known or []
        msg = f"Unknown provider: {provider}"
        if self.known:
            msg += f" (expected one of: {', '.join(self.known)})"
        super().__init__(msg)
