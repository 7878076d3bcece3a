"""Locale keyword tables and scope resolution.

A Language maps every structural scope and canonical step keyword to the
surface synonyms a feature file may use for it. Resolution is a pure,
data-driven lookup: exact match for structural scopes, longest-prefix
match for step keywords.

Step synonyms keep their trailing space ("Given ") the way the upstream
Gherkin locale catalogue writes them; synonyms that bind directly to the
following word ("Lorsqu'") have none. "*" is accepted as StepKeyword.STAR
in every language.

Thread Safety:
Language is frozen. LanguageRegistry is guarded by a lock and safe to
share; lookups never observe a half-registered language.

Example:
    >>> from pepino.i18n import get_default_registry
    >>> fr = get_default_registry().get("fr")
    >>> fr.scope_for("Fonctionnalité").kind
    <ScopeKind.FEATURE: 1>
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from pepino.errors import LanguageRegistrationError, UnsupportedLanguageError
from pepino.scopes import Scope, ScopeKind, StepKeyword

STAR_SYNONYM = "* "

# Keys used by the upstream gherkin-languages.json catalogue
_SCOPE_KEYS: dict[str, ScopeKind] = {
    "feature": ScopeKind.FEATURE,
    "background": ScopeKind.BACKGROUND,
    "scenario": ScopeKind.SCENARIO,
    "scenarioOutline": ScopeKind.SCENARIO_OUTLINE,
    "rule": ScopeKind.RULE,
    "examples": ScopeKind.EXAMPLES,
}

_STEP_KEYS: dict[str, StepKeyword] = {
    "given": StepKeyword.GIVEN,
    "when": StepKeyword.WHEN,
    "then": StepKeyword.THEN,
    "and": StepKeyword.AND,
    "but": StepKeyword.BUT,
}


@dataclass(frozen=True, slots=True)
class Language:
    """Keyword table for one locale.

    Attributes:
        code: Locale code used by the "# language:" directive (e.g., "fr")
        name: English name of the language
        native: Native name of the language
        scopes: Structural scope -> accepted synonyms
        steps: Canonical step keyword -> accepted synonyms

    """

    code: str
    name: str
    native: str
    scopes: dict[ScopeKind, tuple[str, ...]]
    steps: dict[StepKeyword, tuple[str, ...]]
    # (synonym, keyword) pairs, longest synonym first
    _step_index: tuple[tuple[str, StepKeyword], ...] = field(
        init=False, repr=False, compare=False
    )
    _scope_index: dict[str, ScopeKind] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        scope_index: dict[str, ScopeKind] = {}
        for kind, synonyms in self.scopes.items():
            for synonym in synonyms:
                scope_index.setdefault(synonym, kind)

        pairs: list[tuple[str, StepKeyword]] = [(STAR_SYNONYM, StepKeyword.STAR)]
        for keyword, synonyms in self.steps.items():
            pairs.extend((synonym, keyword) for synonym in synonyms if synonym != STAR_SYNONYM)
        # Stable sort keeps declaration order among equal lengths
        pairs.sort(key=lambda pair: len(pair[0]), reverse=True)

        object.__setattr__(self, "_scope_index", scope_index)
        object.__setattr__(self, "_step_index", tuple(pairs))

    def scope_for(self, candidate: str) -> Scope:
        """Resolve a line's leading text to a Scope.

        Args:
            candidate: Text from the first non-space character of the line up
                to (not including) the scope terminator

        Returns:
            The matching structural Scope, a STEP scope carrying its keyword,
            or Scope.UNKNOWN. Matching is case-sensitive and exact.
        """
        stripped = candidate.rstrip()
        kind = self._scope_index.get(stripped)
        if kind is not None:
            return Scope(kind, synonym=stripped)

        for synonym, keyword in self._step_index:
            if candidate.startswith(synonym) or stripped == synonym.rstrip():
                return Scope(ScopeKind.STEP, keyword, synonym)

        return Scope.UNKNOWN

    def synonyms(self, key: ScopeKind | StepKeyword) -> tuple[str, ...]:
        """All accepted synonyms for a scope or step keyword."""
        if isinstance(key, StepKeyword):
            if key is StepKeyword.STAR:
                return (STAR_SYNONYM,)
            return self.steps.get(key, ())
        return self.scopes.get(key, ())

    @classmethod
    def from_dict(cls, code: str, data: dict[str, Any]) -> Language:
        """Build a Language from a gherkin-languages.json style entry.

        Unknown keys are ignored. A "* " synonym in the step lists is
        accepted and folded into StepKeyword.STAR.

        Example:
            >>> Language.from_dict("pirate", {
            ...     "name": "Pirate", "native": "Pirate",
            ...     "feature": ["Ahoy matey!"], "given": ["* ", "Gangway! "],
            ... }).scope_for("Ahoy matey!").kind
            <ScopeKind.FEATURE: 1>
        """
        scopes = {kind: tuple(data.get(key, ())) for key, kind in _SCOPE_KEYS.items()}
        steps = {
            keyword: tuple(s for s in data.get(key, ()) if s != STAR_SYNONYM)
            for key, keyword in _STEP_KEYS.items()
        }
        return cls(
            code=code,
            name=data.get("name", code),
            native=data.get("native", data.get("name", code)),
            scopes=scopes,
            steps=steps,
        )


# Subset of the upstream Gherkin locale catalogue
BUILTIN_LANGUAGES: dict[str, dict[str, Any]] = {
    "en": {
        "name": "English",
        "native": "English",
        "feature": ["Feature", "Business Need", "Ability"],
        "background": ["Background"],
        "rule": ["Rule"],
        "scenario": ["Example", "Scenario"],
        "scenarioOutline": ["Scenario Outline", "Scenario Template"],
        "examples": ["Examples", "Scenarios"],
        "given": ["Given "],
        "when": ["When "],
        "then": ["Then "],
        "and": ["And "],
        "but": ["But "],
    },
    "fr": {
        "name": "French",
        "native": "français",
        "feature": ["Fonctionnalité"],
        "background": ["Contexte"],
        "rule": ["Règle"],
        "scenario": ["Exemple", "Scénario"],
        "scenarioOutline": ["Plan du scénario", "Plan du Scénario"],
        "examples": ["Exemples"],
        "given": [
            "Soit ",
            "Sachant que ",
            "Sachant qu'",
            "Sachant ",
            "Etant donné que ",
            "Etant donné qu'",
            "Etant donné ",
            "Etant donnée ",
            "Etant donnés ",
            "Etant données ",
            "Étant donné que ",
            "Étant donné qu'",
            "Étant donné ",
            "Étant donnée ",
            "Étant donnés ",
            "Étant données ",
        ],
        "when": ["Quand ", "Lorsque ", "Lorsqu'"],
        "then": ["Alors ", "Donc "],
        "and": ["Et que ", "Et qu'", "Et "],
        "but": ["Mais que ", "Mais qu'", "Mais "],
    },
    "de": {
        "name": "German",
        "native": "Deutsch",
        "feature": ["Funktionalität", "Funktion"],
        "background": ["Grundlage", "Hintergrund", "Voraussetzungen", "Vorbedingungen"],
        "rule": ["Rule", "Regel"],
        "scenario": ["Beispiel", "Szenario"],
        "scenarioOutline": ["Szenariogrundriss", "Szenarien"],
        "examples": ["Beispiele"],
        "given": ["Angenommen ", "Gegeben sei ", "Gegeben seien "],
        "when": ["Wenn "],
        "then": ["Dann "],
        "and": ["Und "],
        "but": ["Aber "],
    },
    "es": {
        "name": "Spanish",
        "native": "español",
        "feature": ["Característica", "Necesidad del negocio", "Requisito"],
        "background": ["Antecedentes"],
        "rule": ["Regla", "Regla de negocio"],
        "scenario": ["Ejemplo", "Escenario"],
        "scenarioOutline": ["Esquema del escenario"],
        "examples": ["Ejemplos"],
        "given": ["Dado ", "Dada ", "Dados ", "Dadas "],
        "when": ["Cuando "],
        "then": ["Entonces "],
        "and": ["Y ", "E "],
        "but": ["Pero "],
    },
    "nl": {
        "name": "Dutch",
        "native": "Nederlands",
        "feature": ["Functionaliteit"],
        "background": ["Achtergrond"],
        "rule": ["Rule", "Regel"],
        "scenario": ["Voorbeeld", "Scenario"],
        "scenarioOutline": ["Abstract Scenario"],
        "examples": ["Voorbeelden"],
        "given": ["Gegeven ", "Stel "],
        "when": ["Als ", "Wanneer "],
        "then": ["Dan "],
        "and": ["En "],
        "but": ["Maar "],
    },
}

DEFAULT_LANGUAGE = "en"


class LanguageRegistry:
    """Code -> Language lookup table.

    Thread Safety:
        Registration and lookup are serialized by an internal lock.
    """

    __slots__ = ("_languages", "_lock")

    def __init__(self, languages: tuple[Language, ...] = ()) -> None:
        self._languages: dict[str, Language] = {}
        self._lock = threading.Lock()
        for language in languages:
            self.register(language)

    def register(self, language: Language, *, replace: bool = False) -> LanguageRegistry:
        """Register a language.

        Args:
            language: Language to add
            replace: Allow overwriting an existing registration for the same code

        Returns:
            Self for chaining

        Raises:
            LanguageRegistrationError: If the code is taken and replace is False
        """
        with self._lock:
            if language.code in self._languages and not replace:
                raise LanguageRegistrationError(language.code, "already registered")
            self._languages[language.code] = language
        return self

    def get(self, code: str) -> Language:
        """Look up a language by code.

        Raises:
            UnsupportedLanguageError: If no language is registered for code
        """
        with self._lock:
            language = self._languages.get(code)
            if language is None:
                raise UnsupportedLanguageError(code, tuple(sorted(self._languages)))
            return language

    @property
    def codes(self) -> frozenset[str]:
        """All registered language codes."""
        with self._lock:
            return frozenset(self._languages)

    def __contains__(self, code: object) -> bool:
        with self._lock:
            return code in self._languages

    def __len__(self) -> int:
        with self._lock:
            return len(self._languages)


def create_default_registry() -> LanguageRegistry:
    """Create a fresh registry holding the built-in languages."""
    return LanguageRegistry(
        tuple(Language.from_dict(code, data) for code, data in BUILTIN_LANGUAGES.items())
    )


_default_registry: LanguageRegistry | None = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> LanguageRegistry:
    """Get the shared built-in registry (created on first use)."""
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = create_default_registry()
    return _default_registry


__all__ = [
    "BUILTIN_LANGUAGES",
    "DEFAULT_LANGUAGE",
    "Language",
    "LanguageRegistry",
    "STAR_SYNONYM",
    "create_default_registry",
    "get_default_registry",
]
