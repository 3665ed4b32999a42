# topmark:header:start
#
#   project      : CodegenLint
#   file         : position.py
#   file_relpath : src/codegenlint/engine/position.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Translate character offsets into line/column positions.

Lines are counted by splitting on the document's line separator, so a
position is consistent with the separator the rest of the engine uses
(content-range arithmetic, normalization and fixes).
"""

from __future__ import annotations

from codegenlint.diagnostic.model import Position, Range


class PositionError(ValueError):
    """Raised when an offset lies outside the document."""


def position_at(text: str, offset: int, newline: str) -> Position:
    """Return the position of ``offset`` in ``text``.

    Args:
        text (str): Document text.
        offset (int): Character offset, ``0 <= offset <= len(text)``.
        newline (str): Line separator used to split lines.

    Returns:
        Position: 1-based line number and 0-based column.

    Raises:
        PositionError: If ``offset`` is outside the document.
    """
    if offset < 0 or offset > len(text):
        raise PositionError(f"Offset {offset} outside document of length {len(text)}")
    head: str = text[:offset]
    line: int = head.count(newline) + 1
    last_sep: int = head.rfind(newline)
    column: int = offset if last_sep == -1 else offset - (last_sep + len(newline))
    return Position(line=line, column=column)


def range_at(text: str, start: int, end: int, newline: str) -> Range:
    """Return the `Range` spanning offsets ``start`` to ``end``."""
    return Range(start=position_at(text, start, newline), end=position_at(text, end, newline))
