"""Per-scan context: active language and diagnostics.

Every scan threads a ScanContext through its producers. By default each
Lexer gets its own context, so scans are independent and can run in
parallel. A caller may share one context across several files (e.g., to
collect all diagnostics in one place); writes are then serialized by the
context's lock, and a "# language:" directive in one file stays active
for the next file scanned with the same context. When files sharing a
context are scanned in parallel, which directive wins is unspecified.

Thread Safety:
Diagnostic is frozen. ScanContext serializes its writes with a lock.

"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from urllib.parse import unquote, urlparse

from pepino.config import get_lex_config
from pepino.i18n import Language, LanguageRegistry, get_default_registry
from pepino.location import SourceLocation
from pepino.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Advisory message recorded during a scan.

    Attributes:
        message: Human-readable description
        location: Where the condition was detected, if meaningful

    """

    message: str
    location: SourceLocation | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class ScanContext:
    """Mutable state shared by the producers of one (or more) scans.

    Attributes:
        language: Active keyword table; switched by "# language:" comments
        registry: Where "# language:" codes are looked up
        diagnostics: Append-only list of advisory diagnostics

    """

    language: Language
    registry: LanguageRegistry
    diagnostics: list[Diagnostic] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @classmethod
    def create(
        cls,
        language: str | None = None,
        registry: LanguageRegistry | None = None,
    ) -> ScanContext:
        """Create a context from the active LexConfig.

        Args:
            language: Starting language code (config default if None)
            registry: Language registry (config registry, then built-ins, if None)

        Raises:
            UnsupportedLanguageError: If the starting language is not registered
        """
        config = get_lex_config()
        if registry is None:
            registry = config.language_registry
        if registry is None:
            registry = get_default_registry()
        if language is None:
            language = config.default_language
        return cls(language=registry.get(language), registry=registry)

    def report(self, message: str, location: SourceLocation | None = None) -> Diagnostic:
        """Append a diagnostic.

        Args:
            message: Human-readable description
            location: Optional location of the condition

        Returns:
            The recorded Diagnostic
        """
        diagnostic = Diagnostic(message, location)
        with self._lock:
            self.diagnostics.append(diagnostic)
        if get_lex_config().log_diagnostics:
            logger.warning("%s", message)
        return diagnostic

    def switch_language(self, language: Language) -> None:
        with self._lock:
            previous = self.language
            self.language = language
        logger.debug("Language switched from %s to %s", previous.code, language.code)

    @property
    def messages(self) -> list[str]:
        """Diagnostic messages as plain strings."""
        with self._lock:
            return [d.message for d in self.diagnostics]


def display_name(source_file: str | None) -> str:
    """Last path component of a source locator, parsed loosely.

    Accepts plain paths and URIs; anything unparsable yields its own text.

    Example:
        >>> display_name("file:///tmp/features/login.feature")
        'login.feature'
    """
    if not source_file:
        return ""
    try:
        path = urlparse(source_file).path or source_file
    except ValueError:
        path = source_file
    return PurePosixPath(unquote(path).replace("\\", "/")).name or source_file


__all__ = ["Diagnostic", "ScanContext", "display_name"]
