"""Data table scanner mixin."""

from __future__ import annotations

from collections.abc import Callable

from pepino.lexer.charsets import (
    CELL_ESCAPABLE,
    HEADER_OPEN,
    is_escape,
    is_header_close,
    is_new_line,
    is_symbol,
    is_table_delimiter,
)
from pepino.tokens import Token, TokenType


class TableScannerMixin:
    """Mixin producing TABLE_CELL and TABLE_HEADER tokens.

    Cell escapes: "\\|" -> "|", "\\n" -> newline, "\\\\" -> "\\",
    "\\<" -> "<", "\\>" -> ">". Any other backslash is kept as-is.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int

    def _save_location(self) -> None:
        raise NotImplementedError

    def _advance(self) -> str:
        raise NotImplementedError

    def _peek(self) -> str:
        raise NotImplementedError

    def _peek_next(self) -> str:
        raise NotImplementedError

    def _find_until(self, predicate: Callable[[str], bool], *, line_only: bool = False) -> int:
        raise NotImplementedError

    def _read_line_until(self, predicate: Callable[[str], bool]) -> str:
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str, **payload) -> Token:
        raise NotImplementedError

    def _classify_cell(self, text: str, escaped: frozenset[int]) -> tuple[str, bool]:
        """Classify decoded cell text. Implemented by TableClassifierMixin."""
        raise NotImplementedError

    def _scan_table_cell(self) -> Token | None:
        """Read the cell opened by the delimiter at the cursor.

        Returns:
            The cell token, or None when the text after the delimiter runs to
            the end of the line without another delimiter (trailing text
            after the last "|"); the driver then re-dispatches.
        """
        self._advance()  # |
        self._save_location()
        text, escaped = self._read_cell()

        if not is_table_delimiter(self._peek()):
            return None

        value, is_header = self._classify_cell(text, escaped)
        return self._make_token(TokenType.TABLE_HEADER if is_header else TokenType.TABLE_CELL, value)

    def _read_cell(self) -> tuple[str, frozenset[int]]:
        """Decode cell text up to an unescaped delimiter or the end of the line.

        Returns:
            (decoded text, indices of characters produced by escapes)
        """
        chars: list[str] = []
        escaped: set[int] = set()
        while True:
            char = self._peek()
            if not char or is_new_line(char) or is_table_delimiter(char):
                break

            if is_escape(char):
                following = self._peek_next()
                if following == "n" or following in CELL_ESCAPABLE:
                    escaped.add(len(chars))
                    chars.append("\n" if following == "n" else following)
                    self._advance()
                    self._advance()
                    continue

            chars.append(char)
            self._advance()

        return "".join(chars), frozenset(escaped)

    def _scan_placeholder(self) -> Token:
        """Read "<name>" outside a table cell (scenario outline placeholders).

        Without a closing marker on the same line, the text is plain step
        text and comes back as MATCH.
        """
        self._save_location()
        close = self._find_until(is_header_close, line_only=True)
        self._advance()  # <

        if close < self._source_len and is_header_close(self._source[close]):
            name = self._read_line_until(is_header_close)
            self._advance()  # >
            return self._make_token(TokenType.TABLE_HEADER, name)

        return self._make_token(TokenType.MATCH, HEADER_OPEN + self._read_line_until(is_symbol))
