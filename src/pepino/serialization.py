"""Token serialization: JSON-compatible dicts for token streams.

Useful for:
- Handing tokens to a parser running in another process
- Snapshotting token streams in tests
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from pepino import lex
    from pepino.serialization import to_json

    print(to_json(lex("Feature: X\\n").tokens))

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from pepino.tokens import Token


def token_to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Payload keys ("scope", "keyword", "doc_string") only appear on the
    token types that carry them.
    """
    result: dict[str, Any] = {
        "type": token.type.name,
        "value": token.value,
        "line": token.lineno,
        "column": token.col,
    }
    if token.scope is not None:
        result["scope"] = token.scope.name
    if token.keyword is not None:
        result["keyword"] = token.keyword.name
    if token.doc_string is not None:
        result["doc_string"] = {
            "raw_literal": token.doc_string.raw_literal,
            "literal": token.doc_string.literal,
            "content_type": token.doc_string.content_type,
        }
    return result


def to_dict(tokens: Iterable[Token], *, source_file: str | None = None) -> dict[str, Any]:
    """Convert a token stream to a JSON-compatible dict."""
    return {
        "source_file": source_file,
        "tokens": [token_to_dict(token) for token in tokens],
    }


def to_json(
    tokens: Iterable[Token], *, source_file: str | None = None, indent: int | None = None
) -> str:
    """Serialize a token stream to a JSON string."""
    return json.dumps(
        to_dict(tokens, source_file=source_file),
        sort_keys=True,
        indent=indent,
        ensure_ascii=False,
    )


__all__ = ["to_dict", "to_json", "token_to_dict"]
