"""Provider registry — picks the transpiler for a :class:`ConverterConfig`."""

from collections.abc import Callable

from promptconv.core.interface.config import ConverterConfig
from promptconv.core.interface.errors import UnknownProviderError
from promptconv.core.interface.transpiler import Transpiler
from promptconv.core.interface.transpilers import (
    ClaudeTranspiler,
    GoogleTranspiler,
    TextCompletionTranspiler,
)


def _claude(config: ConverterConfig) -> Transpiler:
    return ClaudeTranspiler(
        add_human_prefix=config.add_human_prefix,
        add_assistant_postfix=config.add_assistant_postfix,
        with_system_prompt=config.with_system_prompt,
    )


def _google(config: ConverterConfig) -> Transpiler:
    return GoogleTranspiler(model=config.model)


def _text_completion(config: ConverterConfig) -> Transpiler:
    return TextCompletionTranspiler()


_FACTORIES: dict[str, Callable[[ConverterConfig], Transpiler]] = {
    "claude": _claude,
    "google": _google,
    "makersuite": _google,
    "text_completion": _text_completion,
}


def available_providers() -> list[str]:
    """Return the provider names accepted by :func:`get_transpiler`."""
    return sorted(_FACTORIES)


def get_transpiler(config: ConverterConfig) -> Transpiler:
    """Build the transpiler for ``config.provider``.

    Raises:
        UnknownProviderError: If no transpiler handles the provider.
    """
    factory = _FACTORIES.get(config.provider_key)
    if factory is None:
        raise UnknownProviderError(config.provider, available_providers())
    return factory(config)
