"""ContextVar-based lexer configuration for pepino.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is read when a ScanContext is created, so every scan started inside
a context sees the same defaults.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from pepino.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(default_language="fr")):
        result = lex("Fonctionnalité: Connexion\n")

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pepino.i18n import LanguageRegistry


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Attributes:
        default_language: Language code active until a "# language:" directive
        language_registry: Registry for language lookups (built-ins if None)
        log_diagnostics: Also emit each recorded diagnostic as a WARNING log record

    """

    default_language: str = "en"
    language_registry: LanguageRegistry | None = None
    log_diagnostics: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> LexConfig:
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> LexConfig.from_dict({"default_language": "de", "other": 1}).default_language
            'de'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(default_language="nl")):
        ...     get_lex_config().default_language
        'nl'

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
