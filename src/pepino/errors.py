"""Exception classes for pepino.

The lexer itself never raises for any input text; these exceptions are
raised by the surrounding API (language registry, configuration) and
caught where the lexer turns them into diagnostics.
"""

from __future__ import annotations


class PepinoError(Exception):
    """Base exception for all pepino errors.

    Subclass this for specific error categories.
    """

    pass


class UnsupportedLanguageError(PepinoError, LookupError):
    """Raised when a language code has no registered keyword table."""

    def __init__(self, code: str, available: tuple[str, ...] = ()) -> None:
        """Initialize with the unknown code.

        Args:
            code: The language code that was requested (e.g., "xx")
            available: Codes that are registered, for the message
        """
        self.code = code
        self.available = available
        message = f"Unsupported language {code!r}"
        if available:
            message += f" (available: {', '.join(available)})"
        super().__init__(message)


class LanguageRegistrationError(PepinoError):
    """Raised when a language conflicts with an existing registration."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        super().__init__(f"Language '{code}': {message}")
