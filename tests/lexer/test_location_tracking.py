"""Tests for accurate source location tracking in the lexer.

Token locations are what diagnostics and parser errors point at. These
tests verify line numbers, columns and offsets, and the bounded
look-around helpers of the position tracker.
"""

from pepino.lexer import Lexer
from pepino.location import SourceLocation
from pepino.tokens import TokenType


class TestTokenLocations:
    """Locations attached to produced tokens."""

    def test_end_to_end_locations(self) -> None:
        source = "Feature: X\n  Scenario: Y\n    Given a thing\n"
        tokens = list(Lexer(source).tokenize())
        assert [(t.lineno, t.col) for t in tokens] == [
            (1, 1),
            (1, 10),
            (1, 11),
            (2, 3),
            (2, 13),
            (2, 14),
            (3, 5),
            (3, 11),
            (3, 18),
        ]

    def test_offsets_match_source(self) -> None:
        source = "Feature: X\n  Scenario: Y\n"
        for token in Lexer(source).tokenize():
            if token.type == TokenType.SCOPE:
                assert source.startswith(token.value, token.location.offset)

    def test_lines_after_doc_string(self) -> None:
        source = 'Given x\n"""\na\nb\n"""\nThen y\n'
        tokens = list(Lexer(source).tokenize())
        then = next(t for t in tokens if t.type == TokenType.KEYWORD and t.value == "Then")
        assert then.location.lineno == 6
        assert then.location.col_offset == 1

    def test_source_file_in_location(self) -> None:
        token = next(Lexer("Feature: X", source_file="a/b.feature").tokenize())
        assert str(token.location) == "a/b.feature:1:1"

    def test_location_is_cached(self) -> None:
        token = next(Lexer("Feature: X").tokenize())
        assert token.location is token.location


class TestPositionTracker:
    """Cursor movement and look-around."""

    def test_initial_position(self) -> None:
        lexer = Lexer("ab", source_file="x.feature")
        assert lexer.position == SourceLocation(1, 1, 0, "x.feature")

    def test_advance_over_newline(self) -> None:
        lexer = Lexer("a\nb")
        assert lexer._advance() == "a"
        assert lexer._advance() == "\n"
        assert (lexer.position.lineno, lexer.position.col_offset) == (2, 1)

    def test_advance_past_end_is_noop(self) -> None:
        lexer = Lexer("a")
        lexer._advance()
        before = lexer.position
        assert lexer._advance() == ""
        assert lexer.position == before

    def test_peek_boundaries(self) -> None:
        lexer = Lexer("ab")
        assert lexer._peek_previous() == ""
        assert lexer._peek_next() == "b"
        lexer._advance()
        assert lexer._peek_previous() == "a"
        assert lexer._peek_next() == ""
        lexer._advance()
        assert lexer._peek() == ""

    def test_commit_counts_lines(self) -> None:
        lexer = Lexer("ab\ncd\nef")
        lexer._commit_to(7)
        assert lexer.position == SourceLocation(3, 2, 7)

    def test_commit_clamps_to_end(self) -> None:
        lexer = Lexer("abc")
        lexer._commit_to(99)
        assert lexer.position.offset == 3


class TestSourceLocation:
    """SourceLocation formatting."""

    def test_str_without_file(self) -> None:
        assert str(SourceLocation(3, 7)) == "3:7"

    def test_unknown(self) -> None:
        assert SourceLocation.unknown() == SourceLocation(0, 0)
