"""
pepino: Gherkin lexical scanner for Python

Turns feature-file text into an ordered stream of typed tokens for a
Gherkin parser: scopes (Feature, Scenario, ...), step keywords, titles,
descriptions, step text, tags, table cells and doc-strings. Keyword
recognition follows the file's "# language:" directive.

Quick Start:
    >>> from pepino import lex
    >>> result = lex("Feature: X\\n  Scenario: Y\\n    Given a thing\\n")
    >>> [t.type.name for t in result.tokens]
    ['SCOPE', 'TITLE', 'NEW_LINE', 'SCOPE', 'TITLE', 'NEW_LINE', 'KEYWORD', 'MATCH', 'NEW_LINE']
    >>> result.diagnostics
    []

Diagnostics are advisory: the lexer never raises for any input text.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from pepino.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from pepino.context import Diagnostic, ScanContext
from pepino.errors import LanguageRegistrationError, PepinoError, UnsupportedLanguageError
from pepino.i18n import (
    Language,
    LanguageRegistry,
    create_default_registry,
    get_default_registry,
)
from pepino.lexer import Lexer
from pepino.location import SourceLocation
from pepino.scopes import Scope, ScopeKind, StepKeyword
from pepino.serialization import to_dict, to_json
from pepino.tokens import DocString, Token, TokenType

__version__ = "0.1.0"


@dataclass(frozen=True, slots=True)
class LexResult:
    """Outcome of lexing one feature file.

    Attributes:
        tokens: Token stream, in source order
        diagnostics: Advisory diagnostics recorded while scanning
        language: Language active when the scan finished

    """

    tokens: list[Token]
    diagnostics: list[Diagnostic]
    language: Language

    @property
    def ok(self) -> bool:
        """True when no diagnostics were recorded."""
        return not self.diagnostics


def lex(
    source: str,
    *,
    source_file: str | None = None,
    context: ScanContext | None = None,
) -> LexResult:
    """Lex a feature file into tokens.

    Args:
        source: Feature file text
        source_file: Optional source locator (path or URI) for diagnostics
        context: Shared scan context; a fresh one if None. Only this scan's
            diagnostics are returned either way.

    Returns:
        LexResult with tokens, diagnostics and the final active language
    """
    lexer = Lexer(source, source_file=source_file, context=context)
    tokens = lexer.lex()
    return LexResult(
        tokens=tokens,
        diagnostics=lexer.diagnostics,
        language=lexer.context.language,
    )


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    context: ScanContext | None = None,
) -> Iterator[Token]:
    """Lazily tokenize a feature file (no "no valid gherkin" check)."""
    return Lexer(source, source_file=source_file, context=context).tokenize()


__all__ = [
    # Main API
    "lex",
    "tokenize",
    "LexResult",
    "Lexer",
    # Tokens
    "Token",
    "TokenType",
    "DocString",
    "SourceLocation",
    "Scope",
    "ScopeKind",
    "StepKeyword",
    # Languages
    "Language",
    "LanguageRegistry",
    "create_default_registry",
    "get_default_registry",
    # Scan context and configuration
    "Diagnostic",
    "ScanContext",
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Serialization
    "to_dict",
    "to_json",
    # Errors
    "PepinoError",
    "UnsupportedLanguageError",
    "LanguageRegistrationError",
]
