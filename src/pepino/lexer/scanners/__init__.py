"""Token producers for the pepino lexer.

Each scanner is a mixin that recognizes one token family at the cursor
and consumes all of its text before returning.
"""

from __future__ import annotations

from pepino.lexer.scanners.comment import CommentScannerMixin
from pepino.lexer.scanners.doc_string import DocStringScannerMixin
from pepino.lexer.scanners.scope import ScopeScannerMixin
from pepino.lexer.scanners.table import TableScannerMixin
from pepino.lexer.scanners.tag import TagScannerMixin
from pepino.lexer.scanners.text import TextScannerMixin

__all__ = [
    "CommentScannerMixin",
    "DocStringScannerMixin",
    "ScopeScannerMixin",
    "TableScannerMixin",
    "TagScannerMixin",
    "TextScannerMixin",
]
