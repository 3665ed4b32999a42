# topmark:header:start
#
#   project      : CodegenLint
#   file         : lexer.py
#   file_relpath : src/codegenlint/engine/lexer.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Forward scan of a document into an ordered sequence of marker tokens.

Start and end markers are located with the processor's `MarkerSyntax`
patterns and merged into a single offset-ordered token list. Pairing them
into spans is done by `codegenlint.engine.matcher`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from codegenlint.config.logging import get_logger

if TYPE_CHECKING:
    import re

    from codegenlint.config.logging import CodegenLogger
    from codegenlint.processors.base import MarkerSyntax

logger: CodegenLogger = get_logger(__name__)


class TokenKind(Enum):
    """Kind of marker token."""

    START = "start"
    END = "end"


@dataclass(frozen=True, slots=True)
class MarkerToken:
    """One marker occurrence.

    Attributes:
        kind (TokenKind): START or END.
        offset (int): Offset of the first matched character.
        text (str): Matched marker text.
        payload (str): Captured option payload (START tokens only, else ``""``).
        mid_line (bool): True when the character before ``offset`` exists and is not ``\\n``.
    """

    kind: TokenKind
    offset: int
    text: str
    payload: str = ""
    mid_line: bool = False

    @property
    def end(self) -> int:
        """Offset just past the matched text."""
        return self.offset + len(self.text)


def _is_mid_line(text: str, offset: int) -> bool:
    return offset > 0 and text[offset - 1] != "\n"


def _make_token(kind: TokenKind, text: str, match: re.Match[str]) -> MarkerToken:
    matched: str = match.group(0)
    payload: str = (match.group(1) or "") if kind is TokenKind.START and match.re.groups else ""
    # `.` also matches `\r`; keep a CRLF line ending out of the marker.
    if matched.endswith("\r"):
        matched = matched[:-1]
        payload = payload.removesuffix("\r")
    return MarkerToken(
        kind=kind,
        offset=match.start(),
        text=matched,
        payload=payload,
        mid_line=_is_mid_line(text, match.start()),
    )


def tokenize(text: str, syntax: MarkerSyntax) -> list[MarkerToken]:
    """Return every start and end marker in ``text``, ordered by offset.

    At equal offsets START sorts before END.

    Args:
        text (str): Document text.
        syntax (MarkerSyntax): Start/end patterns for the document's file kind.

    Returns:
        list[MarkerToken]: All marker occurrences in document order.
    """
    tokens: list[MarkerToken] = [
        _make_token(TokenKind.START, text, m) for m in syntax.start.finditer(text)
    ]
    tokens.extend(_make_token(TokenKind.END, text, m) for m in syntax.end.finditer(text))
    tokens.sort(key=lambda t: (t.offset, t.kind is TokenKind.END))
    logger.trace("tokenize(): %d marker token(s): %s", len(tokens), tokens)
    return tokens
