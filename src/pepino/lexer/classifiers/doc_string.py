"""Doc-string fence classifier mixin."""

from pepino.lexer.charsets import is_doc_string_fence, is_space


class DocStringClassifierMixin:
    """Mixin providing doc-string fence detection."""

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int

    def _fence_at_cursor(self) -> str:
        """Return the fence run starting at the cursor, or "" if none.

        A fence is a run of at least three identical doc-string delimiter
        characters (\"\"\" or ```); longer runs are allowed and must then be
        closed by a run of the same length.
        """
        source = self._source
        start = self._pos
        if start >= self._source_len:
            return ""

        fence_char = source[start]
        end = start
        while end < self._source_len and source[end] == fence_char:
            end += 1

        run = source[start:end]
        return run if is_doc_string_fence(run) else ""

    def _is_closing_fence(self, fence: str) -> bool:
        """Check if the cursor sits on a fence closing the current doc-string.

        The closing run must reproduce the opening fence exactly and be the
        first non-space content of its line.

        Args:
            fence: The opening fence text
        """
        source = self._source
        pos = self._pos
        if not source.startswith(fence, pos):
            return False

        after = pos + len(fence)
        if after < self._source_len and source[after] == fence[0]:
            return False

        line_start = source.rfind("\n", 0, pos) + 1
        return all(is_space(char) for char in source[line_start:pos])
