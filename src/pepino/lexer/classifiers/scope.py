"""Scope classifier mixin."""

from __future__ import annotations

from pepino.context import ScanContext
from pepino.scopes import Scope


class ScopeClassifierMixin:
    """Mixin resolving a line's leading text against the active language."""

    # These will be set by the Lexer class
    _context: ScanContext

    def _resolve_scope(self, candidate: str) -> Scope:
        """Classify candidate text as a structural scope, a step, or unknown.

        Args:
            candidate: Text from the first non-space character of the line up
                to (not including) the scope terminator

        Returns:
            Scope resolved by the language active in the scan context.
        """
        return self._context.language.scope_for(candidate)
