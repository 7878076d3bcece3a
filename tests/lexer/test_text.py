"""Tests for step text, quotes, escapes and tags."""

from pepino.lexer import Lexer
from pepino.tokens import TokenType


def _pairs(source: str) -> list[tuple[TokenType, str]]:
    return [(t.type, t.value) for t in Lexer(source).tokenize()]


class TestStepText:
    """MATCH tokens after a step keyword."""

    def test_quoted_argument_split(self) -> None:
        assert _pairs('Given a "red" ball') == [
            (TokenType.KEYWORD, "Given"),
            (TokenType.MATCH, "a "),
            (TokenType.MATCH, '"'),
            (TokenType.MATCH, "red"),
            (TokenType.MATCH, '"'),
            (TokenType.MATCH, " ball"),
        ]

    def test_at_sign_is_plain_text(self) -> None:
        assert _pairs("Given user a@b.com") == [
            (TokenType.KEYWORD, "Given"),
            (TokenType.MATCH, "user a@b.com"),
        ]

    def test_backtick_is_plain_text(self) -> None:
        assert _pairs("Then `ls` prints") == [
            (TokenType.KEYWORD, "Then"),
            (TokenType.MATCH, "`ls` prints"),
        ]


class TestEscapes:
    """Backslash escapes in step text."""

    def test_escaped_hash(self) -> None:
        assert _pairs("Given issue \\#42") == [
            (TokenType.KEYWORD, "Given"),
            (TokenType.MATCH, "issue "),
            (TokenType.MATCH, "#"),
            (TokenType.MATCH, "42"),
        ]

    def test_escaped_symbol_becomes_text(self) -> None:
        assert _pairs("Given cost \\<5") == [
            (TokenType.KEYWORD, "Given"),
            (TokenType.MATCH, "cost "),
            (TokenType.MATCH, "<5"),
        ]

    def test_escaped_quote(self) -> None:
        assert _pairs('Given say \\"hi') == [
            (TokenType.KEYWORD, "Given"),
            (TokenType.MATCH, "say "),
            (TokenType.MATCH, '"hi'),
        ]

    def test_trailing_backslash(self) -> None:
        assert _pairs("Given path\\\n") == [
            (TokenType.KEYWORD, "Given"),
            (TokenType.MATCH, "path"),
            (TokenType.MATCH, "\\"),
            (TokenType.NEW_LINE, "\n"),
        ]


class TestTags:
    """@tags before features and scenarios."""

    def test_tag_line(self) -> None:
        assert _pairs("@smoke @slow\nFeature: X") == [
            (TokenType.TAG, "smoke"),
            (TokenType.TAG, "slow"),
            (TokenType.NEW_LINE, "\n"),
            (TokenType.SCOPE, "Feature"),
            (TokenType.TITLE, "X"),
        ]

    def test_adjacent_tags(self) -> None:
        assert _pairs("@a@b") == [(TokenType.TAG, "a"), (TokenType.TAG, "b")]

    def test_tag_with_punctuation(self) -> None:
        assert _pairs("  @issue:42-b") == [(TokenType.TAG, "issue:42-b")]

    def test_tag_stops_at_comment(self) -> None:
        assert _pairs("@wip# later\n") == [
            (TokenType.TAG, "wip"),
            (TokenType.NEW_LINE, "\n"),
        ]

    def test_tag_locations(self) -> None:
        tokens = list(Lexer("@smoke @slow").tokenize())
        assert [t.location.col_offset for t in tokens] == [1, 8]
