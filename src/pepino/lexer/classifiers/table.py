"""Table cell classifier mixin."""

from pepino.lexer.charsets import HEADER_CLOSE, HEADER_OPEN, SPACE_STRIP


class TableClassifierMixin:
    """Mixin deciding whether decoded cell text is a header cell."""

    def _classify_cell(self, text: str, escaped: frozenset[int]) -> tuple[str, bool]:
        """Classify decoded cell text.

        A cell is a header when, after trimming whitespace, it is wrapped in
        an unescaped header-open and header-close marker ("<name>"). Header
        cells lose the markers and the whitespace inside them.

        Args:
            text: Decoded cell text
            escaped: Indices into text of characters that came from escapes

        Returns:
            (value, is_header)
        """
        start = len(text) - len(text.lstrip(SPACE_STRIP))
        end = len(text.rstrip(SPACE_STRIP))

        if (
            end - start >= 2
            and text[start] == HEADER_OPEN
            and text[end - 1] == HEADER_CLOSE
            and start not in escaped
            and end - 1 not in escaped
        ):
            return text[start + 1 : end - 1].strip(SPACE_STRIP), True

        return text[start:end], False
