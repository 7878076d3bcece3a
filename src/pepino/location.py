"""Source location tracking for diagnostics and debugging.

Provides SourceLocation, the immutable position snapshot attached to every
token the lexer produces.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a token in a feature file.

    All positions are 1-indexed (lineno and col_offset start at 1).

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column (1-indexed)
        offset: Absolute offset into the source text (0-indexed)
        source_file: Source locator (path or URI), if known

    Examples:
            >>> loc = SourceLocation(2, 5, source_file="features/login.feature")
            >>> str(loc)
            'features/login.feature:2:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for diagnostics.

        Returns:
            Formatted string like "file.feature:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create a placeholder location for synthesized tokens."""
        return cls(lineno=0, col_offset=0)
