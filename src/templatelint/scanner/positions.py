"""Offset to line/column arithmetic for template text."""

from __future__ import annotations

from bisect import bisect_left


def line_and_column(content: str, offset: int) -> tuple[int, int]:
    """Return the 1-based ``(line, column)`` of ``offset`` in ``content``.

    ``offset`` may equal ``len(content)`` (end of document). Reference
    implementation for ``LineIndex``, which answers the same question
    without rescanning the prefix.
    """
    prefix = content[:offset]
    line = prefix.count("\n") + 1
    column = len(prefix) - prefix.rfind("\n")
    return line, column


class LineIndex:
    """Precomputed newline offsets so repeated lookups avoid rescanning."""

    def __init__(self, content: str) -> None:
        self._length = len(content)
        self._newlines = [i for i, char in enumerate(content) if char == "\n"]

    def locate(self, offset: int) -> tuple[int, int]:
        offset = min(max(offset, 0), self._length)
        preceding = bisect_left(self._newlines, offset)
        line_start = self._newlines[preceding - 1] + 1 if preceding else 0
        return preceding + 1, offset - line_start + 1
