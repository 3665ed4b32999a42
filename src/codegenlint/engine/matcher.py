# topmark:header:start
#
#   project      : CodegenLint
#   file         : matcher.py
#   file_relpath : src/codegenlint/engine/matcher.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Resolve marker tokens into start/end spans.

Rules, applied to the token sequence produced by `codegenlint.engine.lexer`:

1. A start token preceded (on the same line) by any other character is not a
   marker. It is dropped silently and does not bound other spans.
2. A start token whose matched text equals an earlier accepted start token is
   a duplicate. It bounds the previous span but is not resolved itself.
3. The end marker of a start token is the first end token starting at or
   after the end of the start marker's text and before the next accepted start token (or the end
   of the document).
4. The content range starts one line separator after the start marker's text
   and stops at the end marker's offset. When the start marker is not followed
   by a line separator (end marker on the same line) the span is *inline*: its
   content range starts right after the start marker's text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from codegenlint.config.logging import get_logger
from codegenlint.engine.lexer import MarkerToken, TokenKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from codegenlint.config.logging import CodegenLogger

logger: CodegenLogger = get_logger(__name__)


class ResolutionKind(Enum):
    """Outcome of resolving one accepted start marker."""

    SPAN = "span"
    DUPLICATE = "duplicate"
    MISSING_END = "missing_end"


@dataclass(frozen=True, slots=True)
class MarkerSpan:
    """A start marker, its end marker and the content range between them.

    Attributes:
        start (MarkerToken): The start marker.
        end (MarkerToken): The end marker.
        content_range (tuple[int, int]): ``(first, last)`` offsets of the existing
            content; ``last`` is exclusive and equals ``end.offset``.
        inline (bool): True when no line separator follows the start marker, so a
            fix must re-insert the line breaks around the content.
    """

    start: MarkerToken
    end: MarkerToken
    content_range: tuple[int, int]
    inline: bool = False

    def existing_content(self, text: str) -> str:
        """Return the content currently stored between the markers."""
        first, last = self.content_range
        return text[first:last]


@dataclass(frozen=True, slots=True)
class StartResolution:
    """Resolution of one accepted start marker (``span`` is set for SPAN only)."""

    start: MarkerToken
    kind: ResolutionKind
    span: MarkerSpan | None = None


def _find_end(
    start: MarkerToken, ends: Sequence[MarkerToken], limit: int | None
) -> MarkerToken | None:
    for end in ends:
        if limit is not None and end.offset >= limit:
            return None
        if end.offset >= start.end:
            return end
    return None


def resolve_spans(
    text: str, tokens: Sequence[MarkerToken], newline: str
) -> list[StartResolution]:
    """Pair each accepted start marker with its end marker.

    Args:
        text (str): Document text the tokens were read from.
        tokens (Sequence[MarkerToken]): Offset-ordered marker tokens.
        newline (str): Line separator of the document.

    Returns:
        list[StartResolution]: One resolution per accepted start marker, in document order.
    """
    starts: list[MarkerToken] = [
        t for t in tokens if t.kind is TokenKind.START and not t.mid_line
    ]
    ends: list[MarkerToken] = [t for t in tokens if t.kind is TokenKind.END]

    rejected: int = sum(1 for t in tokens if t.kind is TokenKind.START and t.mid_line)
    if rejected:
        logger.debug("resolve_spans(): ignoring %d mid-line start marker(s)", rejected)

    seen: set[str] = set()
    resolutions: list[StartResolution] = []
    for index, start in enumerate(starts):
        if start.text in seen:
            resolutions.append(StartResolution(start=start, kind=ResolutionKind.DUPLICATE))
            continue
        seen.add(start.text)

        limit: int | None = starts[index + 1].offset if index + 1 < len(starts) else None
        end: MarkerToken | None = _find_end(start, ends, limit)
        if end is None:
            resolutions.append(StartResolution(start=start, kind=ResolutionKind.MISSING_END))
            continue

        first: int = start.end + len(newline)
        inline: bool = text[start.end : first] != newline
        if inline:
            first = start.end
        span = MarkerSpan(
            start=start, end=end, content_range=(first, end.offset), inline=inline
        )
        logger.trace("resolve_spans(): span %s", span.content_range)
        resolutions.append(StartResolution(start=start, kind=ResolutionKind.SPAN, span=span))
    return resolutions
