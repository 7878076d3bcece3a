"""Pure classifiers for the pepino lexer.

Each classifier is a mixin that answers a question about the text at or
around the cursor without moving it.
"""

from pepino.lexer.classifiers.doc_string import (
    DocStringClassifierMixin,
)
from pepino.lexer.classifiers.scope import (
    ScopeClassifierMixin,
)
from pepino.lexer.classifiers.table import (
    TableClassifierMixin,
)

__all__ = [
    "DocStringClassifierMixin",
    "ScopeClassifierMixin",
    "TableClassifierMixin",
]
