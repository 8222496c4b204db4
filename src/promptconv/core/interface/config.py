"""Converter configuration — target provider, model name, rendering flags."""

from pydantic import BaseModel


class ConverterConfig(BaseModel):
    """Configuration for rendering a transcript for one provider.

    ``model`` only matters to the block-shaped converter, which switches to its
    single-turn multimodal layout for the vision model. The three flags only
    matter to turn markup.
    """

    provider: str
    model: str = ""
    add_human_prefix: bool = True
    add_assistant_postfix: bool = True
    with_system_prompt: bool = False

    @property
    def provider_key(self) -> str:
        """Normalised provider name used for registry lookups."""
        return self.provider.strip().lower().replace("-", "_")
