"""Tests for comments and the "# language:" directive."""

import pytest

from pepino.context import ScanContext
from pepino.lexer import Lexer
from pepino.scopes import ScopeKind, StepKeyword
from pepino.tokens import TokenType


class TestComments:
    """Comments produce no tokens."""

    def test_full_line_comment_vanishes(self) -> None:
        tokens = list(Lexer("# a comment\nFeature: X\n").tokenize())
        assert [t.type for t in tokens] == [
            TokenType.SCOPE,
            TokenType.TITLE,
            TokenType.NEW_LINE,
        ]
        assert tokens[0].location.lineno == 2

    def test_indented_comment_vanishes(self) -> None:
        tokens = list(Lexer("Feature: X\n    # note\n  Scenario: Y\n").tokenize())
        assert [t.type for t in tokens].count(TokenType.NEW_LINE) == 2

    def test_trailing_comment_keeps_newline(self) -> None:
        tokens = list(Lexer("Given a # why\nWhen b\n").tokenize())
        assert [(t.type, t.value) for t in tokens] == [
            (TokenType.KEYWORD, "Given"),
            (TokenType.MATCH, "a "),
            (TokenType.NEW_LINE, "\n"),
            (TokenType.KEYWORD, "When"),
            (TokenType.MATCH, "b"),
            (TokenType.NEW_LINE, "\n"),
        ]

    def test_comment_at_end_of_input(self) -> None:
        assert list(Lexer("# only a comment").tokenize()) == []

    def test_comment_resets_line_state(self) -> None:
        """The line after a full-line comment starts fresh."""
        tokens = list(Lexer("# c\nGiven x\n").tokenize())
        assert tokens[0].type == TokenType.KEYWORD


class TestLanguageDirective:
    """"# language:" switches keyword tables for the rest of the scan."""

    def test_french(self) -> None:
        source = (
            "# language: fr\n"
            "Fonctionnalité: Connexion\n"
            "  Scénario: X\n"
            "    Soit un utilisateur\n"
            "    Quand il se connecte\n"
        )
        tokens = list(Lexer(source).tokenize())
        scopes = [t.scope for t in tokens if t.type == TokenType.SCOPE]
        keywords = [t.keyword for t in tokens if t.type == TokenType.KEYWORD]
        assert scopes == [ScopeKind.FEATURE, ScopeKind.SCENARIO]
        assert keywords == [StepKeyword.GIVEN, StepKeyword.WHEN]

    def test_directive_updates_context(self) -> None:
        lexer = Lexer("# language: de\n")
        list(lexer.tokenize())
        assert lexer.context.language.code == "de"

    @pytest.mark.parametrize(
        "comment",
        ["#language:fr", "#   language :   fr   ", "# language: fr"],
    )
    def test_directive_whitespace_tolerant(self, comment: str) -> None:
        tokens = list(Lexer(f"{comment}\nFonctionnalité: X").tokenize())
        assert tokens[0].type == TokenType.SCOPE

    def test_english_keywords_inactive_after_switch(self) -> None:
        tokens = list(Lexer("# language: fr\nFeature: X").tokenize())
        assert tokens[0].type == TokenType.DESCRIPTION

    def test_longest_synonym_wins(self) -> None:
        tokens = list(Lexer("# language: fr\nÉtant donné qu'il pleut").tokenize())
        assert tokens[0].keyword == StepKeyword.GIVEN
        assert tokens[0].value == "Étant donné qu'"
        assert tokens[1].value == "il pleut"

    def test_unsupported_language_keeps_previous(self) -> None:
        lexer = Lexer("# language: xx\nFeature: X\n", source_file="features/login.feature")
        tokens = lexer.lex()
        assert tokens[0].scope == ScopeKind.FEATURE
        assert lexer.context.language.code == "en"
        assert lexer.context.messages == [
            "File: login.feature declares an unsupported language"
        ]

    def test_unsupported_language_diagnostic_location(self) -> None:
        lexer = Lexer("Feature: X\n# language: klingon\n")
        list(lexer.tokenize())
        (diagnostic,) = lexer.context.diagnostics
        assert diagnostic.location.lineno == 2
        assert diagnostic.location.col_offset == 1

    def test_escaped_comment_is_not_a_directive(self) -> None:
        lexer = Lexer("Given x \\# language: fr\nFeature: Y")
        tokens = list(lexer.tokenize())
        assert lexer.context.language.code == "en"
        assert (TokenType.MATCH, "#") in [(t.type, t.value) for t in tokens]
        assert tokens[-2].scope == ScopeKind.FEATURE

    def test_shared_context_carries_language(self) -> None:
        context = ScanContext.create()
        list(Lexer("# language: nl\n", context=context).tokenize())
        tokens = list(Lexer("Functionaliteit: X", context=context).tokenize())
        assert tokens[0].scope == ScopeKind.FEATURE

    def test_separate_lexers_do_not_share_language(self) -> None:
        list(Lexer("# language: nl\n").tokenize())
        tokens = list(Lexer("Functionaliteit: X").tokenize())
        assert tokens[0].type == TokenType.DESCRIPTION
