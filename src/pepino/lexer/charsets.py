"""Character classes for O(1) classification.

Every predicate takes a single character and returns False for the empty
string, which the lexer uses to signal end of input.

Usage:
    from pepino.lexer.charsets import is_symbol

    if is_symbol(char):  # O(1) lookup
        ...
"""

NEW_LINE = "\n"
COMMENT = "#"
TAG_MARKER = "@"
TABLE_DELIMITER = "|"
HEADER_OPEN = "<"
HEADER_CLOSE = ">"
QUOTE = '"'
BACKTICK = "`"
ESCAPE = "\\"
TITLE_END = ":"

# Horizontal whitespace (newline is structural, never "space")
SPACE_CHARS: frozenset[str] = frozenset(" \t\r\f\v\u00a0\u3000")

# For str.strip(): trims horizontal whitespace but keeps newlines
SPACE_STRIP = "".join(sorted(SPACE_CHARS))

DOC_STRING_DELIMITERS: frozenset[str] = frozenset((QUOTE, BACKTICK))

# Characters that end a bare run of step text
SYMBOLS: frozenset[str] = frozenset(
    (NEW_LINE, COMMENT, TABLE_DELIMITER, HEADER_OPEN, QUOTE, ESCAPE)
)

SCOPE_TERMINATORS: frozenset[str] = frozenset((TITLE_END, NEW_LINE))

# Escapes recognized inside table cells (besides \n)
CELL_ESCAPABLE: frozenset[str] = frozenset((TABLE_DELIMITER, ESCAPE, HEADER_OPEN, HEADER_CLOSE))

# Escapes recognized inside doc-strings
DOC_STRING_ESCAPABLE: frozenset[str] = DOC_STRING_DELIMITERS | frozenset(ESCAPE)

# Minimum run of fence characters that opens a doc-string
DOC_STRING_FENCE_LENGTH = 3


def is_new_line(char: str) -> bool:
    return char == NEW_LINE


def is_space(char: str) -> bool:
    return char in SPACE_CHARS


def is_comment(char: str) -> bool:
    return char == COMMENT


def is_tag_marker(char: str) -> bool:
    return char == TAG_MARKER


def is_tag_character(char: str) -> bool:
    """Tag names run until whitespace or another tag/comment marker."""
    return bool(char) and not char.isspace() and char not in (TAG_MARKER, COMMENT)


def is_table_delimiter(char: str) -> bool:
    return char == TABLE_DELIMITER


def is_header_open(char: str) -> bool:
    return char == HEADER_OPEN


def is_header_close(char: str) -> bool:
    return char == HEADER_CLOSE


def is_doc_string_delimiter(char: str) -> bool:
    return char in DOC_STRING_DELIMITERS


def is_escape(char: str) -> bool:
    return char == ESCAPE


def is_symbol(char: str) -> bool:
    return char in SYMBOLS


def is_scope_terminator(char: str) -> bool:
    return char in SCOPE_TERMINATORS


def is_doc_string_fence(text: str) -> bool:
    """Check whether text is a run of one fence character, long enough to open a block."""
    return (
        len(text) >= DOC_STRING_FENCE_LENGTH
        and text[0] in DOC_STRING_DELIMITERS
        and text == text[0] * len(text)
    )
