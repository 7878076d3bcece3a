"""Character-level state-machine lexer for Gherkin feature files.

The driver examines one character at a time and routes it to a token
producer. Line state lives in three fields: whether the cursor is at the
start of a line, the structural scope opened on this line, and the step
keyword opened on this line. All three reset on every consumed newline.

Every dispatch either produces a token or advances the cursor, so the
scan always terminates when input is exhausted.

Thread Safety:
Lexer instances are single-use. Create one per source string.
Distinct instances are independent unless they share a ScanContext.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from pepino.context import Diagnostic, ScanContext, display_name
from pepino.lexer.charsets import (
    QUOTE,
    is_comment,
    is_doc_string_delimiter,
    is_escape,
    is_header_open,
    is_new_line,
    is_space,
    is_table_delimiter,
    is_tag_marker,
)
from pepino.lexer.classifiers import (
    DocStringClassifierMixin,
    ScopeClassifierMixin,
    TableClassifierMixin,
)
from pepino.lexer.scanners import (
    CommentScannerMixin,
    DocStringScannerMixin,
    ScopeScannerMixin,
    TableScannerMixin,
    TagScannerMixin,
    TextScannerMixin,
)
from pepino.location import SourceLocation
from pepino.scopes import Scope, StepKeyword
from pepino.tokens import DocString, Token, TokenType
from pepino.utils.logger import get_logger

logger = get_logger(__name__)

STRUCTURAL_TYPES = frozenset(TokenType) - {TokenType.DESCRIPTION, TokenType.NEW_LINE}


class Lexer(
    # Classifiers (pure logic, no position mutation)
    ScopeClassifierMixin,
    DocStringClassifierMixin,
    TableClassifierMixin,
    # Scanners (one per token family)
    CommentScannerMixin,
    TagScannerMixin,
    TableScannerMixin,
    DocStringScannerMixin,
    ScopeScannerMixin,
    TextScannerMixin,
):
    """State-machine lexer producing Gherkin tokens.

    Usage:
            >>> lexer = Lexer("Feature: X\\n  Scenario: Y\\n    Given a thing\\n")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(SCOPE, FEATURE, 1:1)
        Token(TITLE, 'X', 1:10)
        Token(NEW_LINE, '\\n', 1:11)
        Token(SCOPE, SCENARIO, 2:3)
        Token(TITLE, 'Y', 2:13)
        Token(NEW_LINE, '\\n', 2:14)
        Token(KEYWORD, GIVEN, 3:5)
        Token(MATCH, 'a thing', 3:11)
        Token(NEW_LINE, '\\n', 3:18)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_context",
        "_diagnostics",
        # Per-line state
        "_at_line_start",
        "_last_scope",
        "_last_keyword",
        # Saved location for the token being produced
        "_saved_pos",
        "_saved_lineno",
        "_saved_col",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        *,
        context: ScanContext | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Feature file text
            source_file: Optional source locator (path or URI) for diagnostics
            context: Scan context to share; a fresh one from the active
                LexConfig if None
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file
        self._context = context if context is not None else ScanContext.create()
        self._diagnostics: list[Diagnostic] = []

        self._at_line_start = True
        self._last_scope: Scope | None = None
        self._last_keyword: StepKeyword | None = None

        self._saved_pos = 0
        self._saved_lineno = 1
        self._saved_col = 1

    @property
    def context(self) -> ScanContext:
        return self._context

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Diagnostics recorded by this lexer only.

        The context may hold more when it is shared with other scans.
        """
        return list(self._diagnostics)

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time

        Complexity: O(n) where n = len(source)
        """
        source_len = self._source_len
        while self._pos < source_len:
            token = self._dispatch()
            if token is not None:
                yield token

    def lex(self) -> list[Token]:
        """Tokenize the whole source and check it contains any Gherkin.

        A file whose tokens are all descriptions and newlines records a
        diagnostic; the tokens are still returned.
        """
        tokens = list(self.tokenize())
        if not any(token.type in STRUCTURAL_TYPES for token in tokens):
            self._report(
                f"File: {self._display_name} does not contain any valid gherkin"
            )
        logger.debug(
            "Lexed %s: %d tokens, language %s",
            self._display_name,
            len(tokens),
            self._context.language.code,
        )
        return tokens

    def _dispatch(self) -> Token | None:
        """Route the character at the cursor to its producer.

        Returns:
            The produced token, or None when the producer only consumed
            input (whitespace, comments, unterminated cells).
        """
        char = self._peek()

        if is_new_line(char):
            self._save_location()
            self._advance()
            self._end_line()
            return self._make_token(TokenType.NEW_LINE, char)

        if is_comment(char):
            self._scan_comment()
            return None

        if is_tag_marker(char):
            token = self._scan_tag()
        elif is_table_delimiter(char):
            token = self._scan_table_cell()
        elif is_header_open(char):
            token = self._scan_placeholder()
        elif self._at_line_start:
            token = self._scan_line_start()
        elif self._last_scope is not None:
            token = self._scan_title()
        elif is_doc_string_delimiter(char) and self._fence_at_cursor():
            token = self._scan_doc_string()
        elif char == QUOTE:
            token = self._scan_quote()
        elif is_escape(char):
            token = self._scan_escape()
        elif self._last_keyword is not None:
            token = self._scan_match()
        else:
            # Nothing claims this character (e.g., spaces between tags)
            self._advance()
            return None

        if token is not None:
            self._at_line_start = False
        return token

    def _report(self, message: str, location: SourceLocation | None = None) -> None:
        """Record a diagnostic in the scan context and on this lexer."""
        self._diagnostics.append(self._context.report(message, location))

    def _end_line(self) -> None:
        """Reset per-line state after a newline has been consumed."""
        self._at_line_start = True
        self._last_scope = None
        self._last_keyword = None

    @property
    def _display_name(self) -> str:
        return display_name(self._source_file) or "<string>"

    # =========================================================================
    # Position tracking
    # =========================================================================

    @property
    def position(self) -> SourceLocation:
        """Snapshot of the cursor position."""
        return SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._pos,
            source_file=self._source_file,
        )

    def _peek(self) -> str:
        """Current character, or empty string at end of input."""
        if self._pos >= self._source_len:
            return ""
        return self._source[self._pos]

    def _peek_next(self) -> str:
        """Character after the cursor, or empty string past end of input."""
        if self._pos + 1 >= self._source_len:
            return ""
        return self._source[self._pos + 1]

    def _peek_previous(self) -> str:
        """Character before the cursor, or empty string at start of input."""
        if self._pos == 0:
            return ""
        return self._source[self._pos - 1]

    def _advance(self) -> str:
        """Advance position by one character.

        Updates line/column tracking. A no-op at end of input.

        Returns:
            The consumed character, or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""

        char = self._source[self._pos]
        self._pos += 1

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        return char

    def _commit_to(self, end: int) -> None:
        """Move the cursor to end, updating line/column tracking.

        Uses str.count over the skipped segment instead of a per-character loop.
        """
        end = min(end, self._source_len)
        if end <= self._pos:
            return

        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")

        if newline_count > 0:
            last_nl = segment.rfind("\n")
            self._lineno += newline_count
            self._col = len(segment) - last_nl
        else:
            self._col += len(segment)

        self._pos = end

    # =========================================================================
    # Window helpers
    # =========================================================================

    def _find_until(
        self, predicate: Callable[[str], bool], *, line_only: bool = False
    ) -> int:
        """Index of the first character satisfying predicate (or EOF).

        Args:
            predicate: Stop condition
            line_only: Also stop at a newline
        """
        source = self._source
        pos = self._pos
        source_len = self._source_len
        while pos < source_len:
            char = source[pos]
            if predicate(char) or (line_only and char == "\n"):
                break
            pos += 1
        return pos

    def _read_until(self, predicate: Callable[[str], bool]) -> str:
        end = self._find_until(predicate)
        text = self._source[self._pos : end]
        self._commit_to(end)
        return text

    def _read_line_until(self, predicate: Callable[[str], bool]) -> str:
        """Consume text up to predicate or the end of the line (newline not consumed)."""
        end = self._find_until(predicate, line_only=True)
        text = self._source[self._pos : end]
        self._commit_to(end)
        return text

    def _look_ahead_line_until(self, predicate: Callable[[str], bool]) -> str:
        """Like _read_line_until, without moving the cursor."""
        end = self._find_until(predicate, line_only=True)
        return self._source[self._pos : end]

    def _skip_spaces(self) -> bool:
        """Consume horizontal whitespace. Returns True if any was consumed."""
        if not is_space(self._peek()):
            return False
        self._read_line_until(lambda c: not is_space(c))
        return True

    # =========================================================================
    # Token construction
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location for the next token.

        Call this at the START of scanning a token, before any position changes.
        """
        self._saved_pos = self._pos
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        *,
        scope: Scope | None = None,
        keyword: StepKeyword | None = None,
        doc_string: DocString | None = None,
    ) -> Token:
        """Create a Token at the saved location."""
        return Token(
            type=token_type,
            value=value,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _offset=self._saved_pos,
            scope=scope.kind if scope is not None else None,
            keyword=keyword,
            doc_string=doc_string,
            _source_file=self._source_file,
        )
