"""Line-start scanner mixin: scopes, step keywords, titles and descriptions."""

from __future__ import annotations

from collections.abc import Callable

from pepino.lexer.charsets import (
    SPACE_STRIP,
    TITLE_END,
    is_doc_string_delimiter,
    is_header_open,
    is_scope_terminator,
)
from pepino.scopes import Scope, StepKeyword
from pepino.tokens import Token, TokenType


class ScopeScannerMixin:
    """Mixin classifying the first content of a line.

    - "Feature: Login"     -> SCOPE(FEATURE), then TITLE("Login")
    - "Given a user"       -> KEYWORD(GIVEN), then MATCH("a user")
    - "Some prose"         -> DESCRIPTION("Some prose")
    - '"Fast" checkout'    -> DESCRIPTION('"Fast" checkout')
    - '\"\"\"'                -> DOC_STRING (see DocStringScannerMixin)

    """

    # These will be set by the Lexer class
    _pos: int
    _last_scope: Scope | None
    _last_keyword: StepKeyword | None

    def _save_location(self) -> None:
        raise NotImplementedError

    def _advance(self) -> str:
        raise NotImplementedError

    def _peek(self) -> str:
        raise NotImplementedError

    def _skip_spaces(self) -> bool:
        raise NotImplementedError

    def _commit_to(self, end: int) -> None:
        raise NotImplementedError

    def _read_line_until(self, predicate: Callable[[str], bool]) -> str:
        raise NotImplementedError

    def _look_ahead_line_until(self, predicate: Callable[[str], bool]) -> str:
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str, **payload) -> Token:
        raise NotImplementedError

    def _resolve_scope(self, candidate: str) -> Scope:
        """Resolve scope. Implemented by ScopeClassifierMixin."""
        raise NotImplementedError

    def _scan_line_start(self) -> Token | None:
        """Produce the first token of a line.

        Returns:
            The token, or None after stripping leading whitespace (the driver
            re-dispatches on the first real character).
        """
        if self._skip_spaces():
            return None

        if is_doc_string_delimiter(self._peek()):
            token = self._scan_doc_string()
            if token is not None:
                return token

        self._save_location()
        scope = self._resolve_scope(self._look_ahead_line_until(is_scope_terminator))

        if scope.is_step:
            keyword_text = scope.synonym.rstrip()
            self._commit_to(self._pos + len(keyword_text))
            self._last_keyword = scope.keyword
            token = self._make_token(TokenType.KEYWORD, keyword_text, keyword=scope.keyword)
            self._skip_spaces()
            return token

        if not scope.is_unknown:
            self._read_line_until(is_scope_terminator)
            if self._peek() == TITLE_END:
                self._advance()
            self._last_scope = scope
            token = self._make_token(TokenType.SCOPE, scope.synonym, scope=scope)
            self._skip_spaces()
            return token

        text = self._read_line_until(lambda c: False)
        return self._make_token(TokenType.DESCRIPTION, text.strip(SPACE_STRIP))

    def _scan_title(self) -> Token | None:
        """Read scope title text up to a placeholder or the end of the line."""
        self._save_location()
        title = self._read_line_until(is_header_open)
        if not title:
            # Unreachable through the driver; advancing keeps the scan finite
            self._advance()
            return None
        return self._make_token(TokenType.TITLE, title)
