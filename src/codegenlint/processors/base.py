# topmark:header:start
#
#   project      : CodegenLint
#   file         : base.py
#   file_relpath : src/codegenlint/processors/base.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Document processor base module.

A *document processor* knows the marker syntax of one family of file kinds
and how to present a document to the engine:

    - **Syntax:** the `MarkerSyntax` (start/end patterns) for its extensions.
    - **Preprocess:** split or wrap raw text into the pseudo-documents the
      engine validates (identity for code files; see the markdown processor).
    - **Unwrap:** undo ``preprocess`` on one pseudo-document before scanning.
    - **Postprocess:** combine the per-pseudo-document diagnostic lists.

Processors are registered per file extension with
[`register_processor`][codegenlint.processors.registry.register_processor].
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from codegenlint.diagnostic.model import Diagnostic


@dataclass(frozen=True)
class MarkerSyntax:
    """Start/end marker patterns for one file kind.

    Attributes:
        start (re.Pattern[str]): Start marker; group 1 captures the option payload.
        end (re.Pattern[str]): End marker.
    """

    start: re.Pattern[str]
    end: re.Pattern[str]

    @classmethod
    def compile(cls, start: str, end: str) -> MarkerSyntax:
        """Compile a syntax from pattern strings.

        Raises:
            ValueError: If the start pattern has no capture group for the payload.
        """
        start_re: re.Pattern[str] = re.compile(start)
        if start_re.groups < 1:
            raise ValueError(f"Start marker pattern {start!r} must capture the option payload")
        return cls(start=start_re, end=re.compile(end))

    @property
    def end_literal(self) -> str:
        """Return the end marker as plain text (pattern with escapes removed)."""
        return self.end.pattern.replace("\\", "")


class DocumentProcessor:
    """Base class for processors bound to file extensions.

    Subclasses set ``syntax`` and may override the pre/post-processing hooks.
    """

    name: str = "base"
    description: str = ""
    syntax: MarkerSyntax

    def preprocess(self, text: str, newline: str) -> list[str]:
        """Return the pseudo-documents to validate for ``text`` (default: itself)."""
        return [text]

    def unwrap(self, text: str, newline: str) -> str:
        """Undo ``preprocess`` for one pseudo-document (default: identity)."""
        return text

    def postprocess(self, diagnostics: Sequence[Sequence[Diagnostic]]) -> list[Diagnostic]:
        """Flatten the diagnostic lists of all pseudo-documents in order."""
        return [d for group in diagnostics for d in group]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
