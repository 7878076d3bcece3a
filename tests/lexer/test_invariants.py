"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from pepino.config import LexConfig, lex_config_context
from pepino.lexer import Lexer
from pepino.tokens import TokenType

# Characters every producer reacts to, plus keyword fragments
GHERKIN_ALPHABET = st.sampled_from(
    list("#@|<>\"`\\:\n \t*xn")
    + ["Feature", "Scenario", "Given ", "Examples", '"""', "```", "\\|", "\\n", "language:"]
)
gherkin_text = st.lists(GHERKIN_ALPHABET, max_size=80).map("".join)

QUIET = LexConfig(log_diagnostics=False)


class TestTermination:
    """Every scan ends, having consumed the whole input."""

    @given(st.text(max_size=1000))
    @settings(max_examples=200)
    def test_consumes_all_input(self, source: str) -> None:
        with lex_config_context(QUIET):
            lexer = Lexer(source)
            list(lexer.tokenize())
        assert lexer._pos == len(source)

    @given(gherkin_text)
    @settings(max_examples=300)
    def test_special_characters_terminate(self, source: str) -> None:
        with lex_config_context(QUIET):
            lexer = Lexer(source)
            lexer.lex()
        assert lexer._pos == len(source)

    @given(st.text(alphabet="<>\n :Scenario", max_size=200))
    @settings(max_examples=100)
    def test_title_and_placeholder_combinations(self, source: str) -> None:
        """Scope titles interleaved with markers never stall the driver."""
        with lex_config_context(QUIET):
            lexer = Lexer(source)
            list(lexer.tokenize())
        assert lexer._pos == len(source)


class TestDeterminism:
    """Scanning is a pure function of text and starting language."""

    @given(gherkin_text)
    @settings(max_examples=100)
    def test_fresh_lexers_agree(self, source: str) -> None:
        with lex_config_context(QUIET):
            first = Lexer(source).lex()
            second = Lexer(source).lex()
        assert first == second


class TestStructure:
    """Shape of the token stream."""

    @given(gherkin_text)
    @settings(max_examples=100)
    def test_positions_are_one_indexed(self, source: str) -> None:
        with lex_config_context(QUIET):
            tokens = Lexer(source).lex()
        for token in tokens:
            assert token.location.lineno >= 1
            assert token.location.col_offset >= 1
            assert 0 <= token.location.offset < max(len(source), 1)

    @given(gherkin_text)
    @settings(max_examples=100)
    def test_token_offsets_increase(self, source: str) -> None:
        with lex_config_context(QUIET):
            tokens = Lexer(source).lex()
        offsets = [t.location.offset for t in tokens]
        assert offsets == sorted(offsets)

    @given(gherkin_text)
    @settings(max_examples=100)
    def test_new_lines_never_exceed_source(self, source: str) -> None:
        with lex_config_context(QUIET):
            tokens = Lexer(source).lex()
        new_lines = sum(1 for t in tokens if t.type == TokenType.NEW_LINE)
        assert new_lines <= source.count("\n")

    @given(st.from_regex(r"[a-z ]{1,40}(\n[a-z ]{1,40}){0,5}", fullmatch=True))
    @settings(max_examples=50)
    def test_prose_is_descriptions(self, source: str) -> None:
        """Keyword-free prose yields only descriptions and newlines."""
        with lex_config_context(QUIET):
            lexer = Lexer(source)
            tokens = lexer.lex()
        assert {t.type for t in tokens} <= {TokenType.DESCRIPTION, TokenType.NEW_LINE}
        assert len(lexer.context.diagnostics) == 1
