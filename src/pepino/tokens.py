"""Token and TokenType definitions for the pepino lexer.

The lexer produces a stream of Token objects that a Gherkin parser
consumes. Each Token has a type, a string value, an optional structured
payload (scope kind, step keyword or doc-string) and a source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from pepino.scopes import ScopeKind, StepKeyword

if TYPE_CHECKING:
    from pepino.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer."""

    NEW_LINE = auto()
    TAG = auto()  # @smoke
    TABLE_CELL = auto()  # | value |
    TABLE_HEADER = auto()  # | <name> |, or <name> in step text
    SCOPE = auto()  # Feature:, Scenario:, ...
    KEYWORD = auto()  # Given, When, Then, ...
    TITLE = auto()  # Text after a scope's colon
    DESCRIPTION = auto()  # Free-text line
    MATCH = auto()  # Step text
    DOC_STRING = auto()  # """ ... """


@dataclass(frozen=True, slots=True)
class DocString:
    """Payload of a DOC_STRING token.

    Attributes:
        raw_literal: Block content exactly as written, escapes preserved
        literal: Escapes decoded, common indentation stripped, trailing
            blank lines removed, content-type line excluded
        content_type: Text after the opening fence (e.g., "json"), or None

    """

    raw_literal: str
    literal: str
    content_type: str | None = None


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Tag name, cell or free text, matched synonym for SCOPE and
            KEYWORD tokens, raw literal for DOC_STRING tokens
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed)
        _offset: Absolute start position in source
        scope: Structural kind, for SCOPE tokens
        keyword: Canonical step keyword, for KEYWORD tokens
        doc_string: Payload, for DOC_STRING tokens
        _source_file: Optional source locator

    """

    type: TokenType
    value: str
    _lineno: int
    _col: int
    _offset: int = 0
    scope: ScopeKind | None = None
    keyword: StepKeyword | None = None
    doc_string: DocString | None = None
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from pepino.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._offset,
            source_file=self._source_file,
        )
        # Safe mutation of frozen dataclass cache field (idempotent write)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.type is TokenType.SCOPE and self.scope is not None:
            detail = self.scope.name
        elif self.type is TokenType.KEYWORD and self.keyword is not None:
            detail = self.keyword.name
        else:
            detail = self.value
            if len(detail) > 20:
                detail = detail[:17] + "..."
            detail = repr(detail)
        return f"Token({self.type.name}, {detail}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column (convenience accessor)."""
        return self._col

    def is_description(self) -> bool:
        return self.type is TokenType.DESCRIPTION

    def is_new_line(self) -> bool:
        return self.type is TokenType.NEW_LINE
