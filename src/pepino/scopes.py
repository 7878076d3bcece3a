"""Structural classifications for Gherkin lines.

A line's leading keyword resolves to a Scope: either a structural block
(Feature, Scenario, Examples, ...) or a step carrying its canonical
StepKeyword. Unknown covers everything else (free-text descriptions).

Thread Safety:
All types here are enums or frozen dataclasses. Safe to share.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar


class ScopeKind(Enum):
    """Structural kind of a Gherkin line."""

    FEATURE = auto()
    BACKGROUND = auto()
    SCENARIO = auto()
    SCENARIO_OUTLINE = auto()
    RULE = auto()
    EXAMPLES = auto()
    STEP = auto()
    UNKNOWN = auto()


class StepKeyword(Enum):
    """Canonical step keyword, independent of the locale's surface text."""

    GIVEN = auto()
    WHEN = auto()
    THEN = auto()
    AND = auto()
    BUT = auto()
    STAR = auto()  # *


@dataclass(frozen=True, slots=True)
class Scope:
    """Result of resolving a line's leading text against a Language.

    Attributes:
        kind: Structural kind
        keyword: Canonical step keyword (only for STEP)
        synonym: The surface text that matched, e.g. "Scenario Outline" or "Given "

    """

    kind: ScopeKind
    keyword: StepKeyword | None = None
    synonym: str = ""

    UNKNOWN: ClassVar[Scope]

    @property
    def is_step(self) -> bool:
        return self.kind is ScopeKind.STEP

    @property
    def is_unknown(self) -> bool:
        return self.kind is ScopeKind.UNKNOWN


Scope.UNKNOWN = Scope(ScopeKind.UNKNOWN)
