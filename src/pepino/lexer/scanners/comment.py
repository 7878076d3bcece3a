"""Comment and language directive scanner mixin."""

from __future__ import annotations

import re

from pepino.context import ScanContext
from pepino.errors import UnsupportedLanguageError
from pepino.lexer.charsets import is_new_line
from pepino.location import SourceLocation

# "# language: fr" (whitespace-tolerant)
LANGUAGE_DIRECTIVE = re.compile(r"^\s*language\s*:\s*(.*?)\s*$")


class CommentScannerMixin:
    """Mixin consuming comments and applying "# language:" directives.

    Comments never produce tokens. A comment that is the first content of
    its line also consumes the line's newline, so full-line comments leave
    no trace in the token stream.

    """

    # These will be set by the Lexer class
    _context: ScanContext
    _at_line_start: bool

    @property
    def position(self) -> SourceLocation:
        raise NotImplementedError

    @property
    def _display_name(self) -> str:
        raise NotImplementedError

    def _advance(self) -> str:
        raise NotImplementedError

    def _peek(self) -> str:
        raise NotImplementedError

    def _read_line_until(self, predicate) -> str:
        raise NotImplementedError

    def _report(self, message: str, location: SourceLocation | None = None) -> None:
        raise NotImplementedError

    def _end_line(self) -> None:
        raise NotImplementedError

    def _scan_comment(self) -> None:
        location = self.position
        full_line = self._at_line_start
        self._advance()  # #
        text = self._read_line_until(lambda c: False)

        match = LANGUAGE_DIRECTIVE.match(text)
        if match:
            self._apply_language_directive(match.group(1), location)

        if full_line and is_new_line(self._peek()):
            self._advance()
            self._end_line()

    def _apply_language_directive(self, code: str, location: SourceLocation) -> None:
        """Switch the active language, or record why it could not be switched."""
        try:
            language = self._context.registry.get(code)
        except UnsupportedLanguageError:
            self._report(
                f"File: {self._display_name} declares an unsupported language",
                location,
            )
            return
        self._context.switch_language(language)
