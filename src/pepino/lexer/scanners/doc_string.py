"""Doc-string scanner mixin."""

from __future__ import annotations

from pepino.lexer.charsets import DOC_STRING_ESCAPABLE, is_escape
from pepino.location import SourceLocation
from pepino.tokens import DocString, Token, TokenType


class DocStringScannerMixin:
    """Mixin producing DOC_STRING tokens.

    A doc-string opens on a fence, at the start of a line or after step
    text, and runs until a line starting with the same fence:

        \"\"\"json
          {"id": 1,
            "ok": true}
        \"\"\"

    The text after the opening fence is the content type. The literal is
    dedented by the leading whitespace of its first line and loses trailing
    blank lines. Escaped fence characters and escaped backslashes are
    decoded in the literal and kept verbatim in the raw literal.

    """

    # These will be set by the Lexer class
    _source_len: int
    _pos: int

    @property
    def position(self) -> SourceLocation:
        raise NotImplementedError

    @property
    def _display_name(self) -> str:
        raise NotImplementedError

    def _save_location(self) -> None:
        raise NotImplementedError

    def _advance(self) -> str:
        raise NotImplementedError

    def _peek(self) -> str:
        raise NotImplementedError

    def _peek_next(self) -> str:
        raise NotImplementedError

    def _commit_to(self, end: int) -> None:
        raise NotImplementedError

    def _report(self, message: str, location: SourceLocation | None = None) -> None:
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str, **payload) -> Token:
        raise NotImplementedError

    def _fence_at_cursor(self) -> str:
        """Fence run at the cursor. Implemented by DocStringClassifierMixin."""
        raise NotImplementedError

    def _is_closing_fence(self, fence: str) -> bool:
        """Closing fence check. Implemented by DocStringClassifierMixin."""
        raise NotImplementedError

    def _scan_doc_string(self) -> Token | None:
        """Read a doc-string if the cursor sits on an opening fence.

        Returns:
            DOC_STRING token, or None if there is no fence at the cursor.
        """
        fence = self._fence_at_cursor()
        if not fence:
            return None

        self._save_location()
        opened_at = self.position
        self._commit_to(self._pos + len(fence))

        decoded: list[str] = []
        raw: list[str] = []
        closed = False
        while self._pos < self._source_len:
            char = self._peek()
            if is_escape(char) and self._peek_next() in DOC_STRING_ESCAPABLE:
                following = self._peek_next()
                decoded.append(following)
                raw.append(char + following)
                self._advance()
                self._advance()
                continue

            if char == fence[0] and self._is_closing_fence(fence):
                closed = True
                break

            decoded.append(char)
            raw.append(char)
            self._advance()

        if closed:
            self._commit_to(self._pos + len(fence))
        else:
            self._report(
                f"File: {self._display_name} has an unterminated doc string",
                opened_at,
            )

        raw_literal = "".join(raw)
        literal, content_type = _split_doc_string("".join(decoded))
        return self._make_token(
            TokenType.DOC_STRING,
            raw_literal,
            doc_string=DocString(raw_literal, literal, content_type),
        )


def _split_doc_string(text: str) -> tuple[str, str | None]:
    """Split decoded block text into (literal, content_type)."""
    lines = text.split("\n")
    content_type = lines[0].strip() or None
    body = lines[1:]

    # Indentation of the first content line applies to the whole block
    indent = 0
    if body and body[0].strip():
        indent = len(body[0]) - len(body[0].lstrip())

    dedented = [_dedent(line, indent) for line in body]
    while dedented and not dedented[-1].strip():
        dedented.pop()
    return "\n".join(dedented), content_type


def _dedent(line: str, width: int) -> str:
    """Remove up to width leading whitespace characters."""
    pos = 0
    while pos < width and pos < len(line) and line[pos].isspace():
        pos += 1
    return line[pos:]
