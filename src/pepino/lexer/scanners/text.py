"""Free-text scanner mixin: step text, quotes and escapes."""

from __future__ import annotations

from collections.abc import Callable

from pepino.lexer.charsets import (
    BACKTICK,
    COMMENT,
    DOC_STRING_FENCE_LENGTH,
    ESCAPE,
    QUOTE,
    is_comment,
    is_new_line,
    is_symbol,
)
from pepino.tokens import Token, TokenType

# Backticks are ordinary text; only a full fence ends step text
BACKTICK_FENCE = BACKTICK * DOC_STRING_FENCE_LENGTH


class TextScannerMixin:
    """Mixin producing MATCH tokens for step text."""

    # These will be set by the Lexer class
    _source: str
    _pos: int

    def _save_location(self) -> None:
        raise NotImplementedError

    def _advance(self) -> str:
        raise NotImplementedError

    def _peek(self) -> str:
        raise NotImplementedError

    def _find_until(self, predicate: Callable[[str], bool], *, line_only: bool = False) -> int:
        raise NotImplementedError

    def _commit_to(self, end: int) -> None:
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str, **payload) -> Token:
        raise NotImplementedError

    def _scan_match(self) -> Token:
        """Step text up to the next symbol or backtick fence."""
        self._save_location()
        return self._make_token(TokenType.MATCH, self._read_text())

    def _scan_quote(self) -> Token:
        """A lone quote; parsers use these to delimit string arguments."""
        self._save_location()
        self._advance()
        return self._make_token(TokenType.MATCH, QUOTE)

    def _scan_escape(self) -> Token:
        """Escaped character plus the text after it up to the next symbol.

        "\\#" is literal text, never a comment or directive. A trailing
        backslash at the end of a line stays a backslash.
        """
        self._save_location()
        self._advance()  # \
        char = self._peek()

        if is_comment(char):
            self._advance()
            return self._make_token(TokenType.MATCH, COMMENT)

        if not char or is_new_line(char):
            return self._make_token(TokenType.MATCH, ESCAPE)

        self._advance()
        return self._make_token(TokenType.MATCH, char + self._read_text())

    def _read_text(self) -> str:
        end = self._find_until(is_symbol, line_only=True)
        fence = self._source.find(BACKTICK_FENCE, self._pos, end)
        if fence != -1:
            end = fence
        text = self._source[self._pos : end]
        self._commit_to(end)
        return text
