# topmark:header:start
#
#   project      : CodegenLint
#   file         : test_marker_matching.py
#   file_relpath : tests/engine/test_marker_matching.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Marker tokenization and start/end pairing.

Covers the token order, mid-line rejection, duplicate detection, the
"next start marker bounds the search" rule and the content range arithmetic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codegenlint.engine.lexer import TokenKind, tokenize
from codegenlint.engine.matcher import ResolutionKind, resolve_spans
from codegenlint.processors.markdown import MarkdownProcessor
from codegenlint.processors.slash import SlashProcessor
from tests.conftest import parametrize

if TYPE_CHECKING:
    from codegenlint.engine.matcher import StartResolution

SYNTAX = SlashProcessor.syntax

START_A = "// codegen:start {preset: a}"
START_B = "// codegen:start {preset: b}"
END = "// codegen:end"


def _resolve(text: str, newline: str = "\n") -> list[StartResolution]:
    return resolve_spans(text, tokenize(text, SYNTAX), newline)


def test_tokenize_orders_tokens_and_captures_payload() -> None:
    text = f"{START_A}\nx\n{END}\n"
    tokens = tokenize(text, SYNTAX)

    assert [t.kind for t in tokens] == [TokenKind.START, TokenKind.END]
    start, end = tokens
    assert start.offset == 0
    assert start.text == START_A
    assert start.payload == "{preset: a}"
    assert start.end == len(START_A)
    assert end.offset == text.index(END)
    assert end.payload == ""


def test_tokenize_drops_trailing_carriage_return() -> None:
    text = f"{START_A}\r\nx\r\n{END}\r\n"
    start = tokenize(text, SYNTAX)[0]
    assert start.text == START_A
    assert start.payload == "{preset: a}"


def test_tokenize_flags_mid_line_markers() -> None:
    text = f"const s = '{START_A}';\n{START_B}\n"
    starts = [t for t in tokenize(text, SYNTAX) if t.kind is TokenKind.START]
    assert [t.mid_line for t in starts] == [True, False]


def test_basic_span_content_range() -> None:
    text = f"{START_A}\nwrong\n{END}"
    (resolution,) = _resolve(text)

    assert resolution.kind is ResolutionKind.SPAN
    assert resolution.span is not None
    first, last = resolution.span.content_range
    assert first == len(START_A) + 1
    assert last == text.index(END)
    assert resolution.span.existing_content(text) == "wrong\n"


def test_content_range_accounts_for_crlf() -> None:
    text = f"{START_A}\r\nwrong\r\n{END}\r\n"
    (resolution,) = _resolve(text, "\r\n")
    assert resolution.span is not None
    assert resolution.span.existing_content(text) == "wrong\r\n"


def test_empty_span() -> None:
    text = f"{START_A}\n{END}\n"
    (resolution,) = _resolve(text)
    assert resolution.span is not None
    first, last = resolution.span.content_range
    assert first == last == text.index(END)


def test_mid_line_start_is_ignored() -> None:
    text = f"const s = '{START_A}';\n"
    assert _resolve(text) == []


def test_mid_line_start_does_not_bound_previous_span() -> None:
    text = f"{START_A}\nconst s = '{START_B}';\n{END}\n"
    (resolution,) = _resolve(text)
    assert resolution.kind is ResolutionKind.SPAN


def test_missing_end_marker() -> None:
    (resolution,) = _resolve(f"{START_A}\nhi\n")
    assert resolution.kind is ResolutionKind.MISSING_END
    assert resolution.span is None


def test_end_marker_before_start_is_not_used() -> None:
    (resolution,) = _resolve(f"{END}\n{START_A}\n")
    assert resolution.kind is ResolutionKind.MISSING_END


def test_end_search_stops_at_next_start() -> None:
    text = f"{START_A}\na\n{START_B}\nb\n{END}\n"
    first, second = _resolve(text)

    assert first.kind is ResolutionKind.MISSING_END
    assert second.kind is ResolutionKind.SPAN
    assert second.span is not None
    assert second.span.existing_content(text) == "b\n"


def test_each_span_takes_the_nearest_end() -> None:
    text = f"{START_A}\na\n{END}\n{END}\n{START_B}\nb\n{END}\n"
    first, second = _resolve(text)

    assert first.span is not None and second.span is not None
    assert first.span.end.offset == text.index(END)
    assert first.span.existing_content(text) == "a\n"
    assert second.span.existing_content(text) == "b\n"


def test_duplicate_start_marker() -> None:
    text = f"{START_A}\na\n{END}\n{START_A}\na\n{END}\n"
    first, second = _resolve(text)

    assert first.kind is ResolutionKind.SPAN
    assert second.kind is ResolutionKind.DUPLICATE
    assert second.start.offset == text.index(START_A, 1)


def test_duplicate_still_bounds_the_previous_span() -> None:
    text = f"{START_A}\n{START_A}\n{END}\n"
    first, second = _resolve(text)
    assert first.kind is ResolutionKind.MISSING_END
    assert second.kind is ResolutionKind.DUPLICATE


def test_marker_on_the_same_line_is_not_an_end() -> None:
    (resolution,) = _resolve(f"{START_A} {END}\n")
    assert resolution.kind is ResolutionKind.MISSING_END


@parametrize("gap", ["", " "])
def test_end_marker_on_the_start_line_gives_an_inline_span(gap: str) -> None:
    start = "<!-- codegen:start {preset: a} -->"
    end = "<!-- codegen:end -->"
    text = f"{start}{gap}{end}\n"
    (resolution,) = resolve_spans(text, tokenize(text, MarkdownProcessor.syntax), "\n")

    assert resolution.kind is ResolutionKind.SPAN
    assert resolution.span is not None
    assert resolution.span.inline
    assert resolution.span.content_range == (len(start), len(start) + len(gap))


def test_span_on_its_own_lines_is_not_inline() -> None:
    (resolution,) = _resolve(f"{START_A}\n{END}\n")
    assert resolution.span is not None
    assert not resolution.span.inline
