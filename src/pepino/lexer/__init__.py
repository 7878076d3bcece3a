"""Character-level state-machine lexer for Gherkin.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (driver, position tracking, helpers)
├── charsets.py          # Character classes and predicates
├── classifiers/         # Pure classification mixins
│   ├── scope.py         # Leading text -> Scope via the active language
│   ├── doc_string.py    # Fence detection
│   └── table.py         # Header cell detection
└── scanners/            # Token producers
    ├── comment.py       # Comments and "# language:" directives
    ├── tag.py           # @tags
    ├── table.py         # | cells | and <placeholders>
    ├── doc_string.py    # \"\"\" blocks
    ├── scope.py         # Scopes, step keywords, titles, descriptions
    └── text.py          # Step text, quotes, escapes

Usage:
    >>> from pepino.lexer import Lexer
    >>> [t.type.name for t in Lexer("@wip\\nFeature: X").tokenize()]
    ['TAG', 'NEW_LINE', 'SCOPE', 'TITLE']

"""

from pepino.lexer.core import Lexer

__all__ = ["Lexer"]
