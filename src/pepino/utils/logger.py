"""Logger namespace for pepino.

Everything pepino logs lives under the "pepino" logger:

- pepino.context: WARNING for each recorded diagnostic (unless
  LexConfig.log_diagnostics is False), DEBUG for language switches
- pepino.lexer.core: DEBUG summary after each lex()

The library never installs handlers; applications configure logging.
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "pepino"


def get_logger(name: str) -> logging.Logger:
    """Logger for name, placed under the pepino namespace.

    Module names inside the package are used as-is; any other name becomes
    a child of the package logger.

    Example:
        >>> get_logger("pepino.context").name
        'pepino.context'
        >>> get_logger("plugins.tags").name
        'pepino.plugins.tags'
    """
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(PACKAGE_LOGGER).getChild(name)
