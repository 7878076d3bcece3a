"""Tag scanner mixin."""

from pepino.lexer.charsets import is_tag_character
from pepino.tokens import Token, TokenType


class TagScannerMixin:
    """Mixin producing TAG tokens ("@smoke" -> TAG("smoke"))."""

    def _save_location(self) -> None:
        raise NotImplementedError

    def _advance(self) -> str:
        raise NotImplementedError

    def _read_until(self, predicate) -> str:
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str, **payload) -> Token:
        raise NotImplementedError

    def _scan_tag(self) -> Token:
        self._save_location()
        self._advance()  # @
        name = self._read_until(lambda c: not is_tag_character(c))
        return self._make_token(TokenType.TAG, name)
