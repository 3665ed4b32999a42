# topmark:header:start
#
#   project      : CodegenLint
#   file         : markdown.py
#   file_relpath : src/codegenlint/processors/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Processor for Markdown documents (HTML comment markers).

Markdown is not code, so before validation the document is *wrapped*: a
sentinel line carrying the remove token is prepended and every original line
is prefixed with the trim token. Hosts that feed one linter with many file
kinds can then treat the wrapped text as an ordinary pseudo-source. The
engine unwraps each pseudo-document before scanning, so diagnostics and fixes
are expressed in offsets/lines of the **original** Markdown text: the
sentinel line never shifts reported positions.

Markers::

    <!-- codegen:start {preset: markdownTOC} -->
    - [Intro](#intro)
    <!-- codegen:end -->
"""

from __future__ import annotations

import re
from typing import Final

from codegenlint.constants import MARKDOWN_REMOVE_TOKEN, MARKDOWN_TRIM_TOKEN
from codegenlint.processors.base import DocumentProcessor, MarkerSyntax
from codegenlint.processors.registry import register_processor

_LINE_BREAK_RE: Final[re.Pattern[str]] = re.compile(r"(\r?\n)")


def _split_lines(text: str) -> list[tuple[str, str]]:
    """Split ``text`` into ``(line, separator)`` pairs; the last separator is ``""``."""
    parts: list[str] = _LINE_BREAK_RE.split(text)
    parts.append("")
    return list(zip(parts[0::2], parts[1::2]))


def wrap_markdown(text: str, newline: str) -> str:
    """Return ``text`` as a wrapped pseudo-document.

    The result has exactly one more line than ``text``: the leading sentinel,
    terminated by ``newline``. Original line separators are kept as they are.
    """
    body: str = "".join(f"{MARKDOWN_TRIM_TOKEN}{line}{sep}" for line, sep in _split_lines(text))
    return f"{MARKDOWN_REMOVE_TOKEN}{newline}{body}"


def unwrap_markdown(text: str) -> str:
    """Undo `wrap_markdown`.

    Sentinel lines (with their separator) are dropped and the trim token is
    removed from the start of every other line. Text that was never wrapped
    passes through unchanged.
    """
    return "".join(
        f"{line.removeprefix(MARKDOWN_TRIM_TOKEN)}{sep}"
        for line, sep in _split_lines(text)
        if line != MARKDOWN_REMOVE_TOKEN
    )


@register_processor(".md", ".markdown")
class MarkdownProcessor(DocumentProcessor):
    """Processor for ``<!-- codegen:start ... -->`` markers in Markdown."""

    name = "markdown"
    description = "<!-- codegen:start ... --> ... <!-- codegen:end -->"
    syntax = MarkerSyntax.compile(r"<!-- codegen:start (.*?) ?-->", r"<!-- codegen:end -->")

    def preprocess(self, text: str, newline: str) -> list[str]:
        """Wrap the document into a single pseudo-document."""
        return [wrap_markdown(text, newline)]

    def unwrap(self, text: str, newline: str) -> str:
        """Strip the wrapping added by `preprocess`."""
        return unwrap_markdown(text)
