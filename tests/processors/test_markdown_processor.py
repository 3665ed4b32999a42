# topmark:header:start
#
#   project      : CodegenLint
#   file         : test_markdown_processor.py
#   file_relpath : tests/processors/test_markdown_processor.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Markdown wrapping and validation of Markdown documents.

Positions and fixes are reported against the original Markdown text, not the
wrapped pseudo-document.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import given
from hypothesis import strategies as st

from codegenlint import api
from codegenlint.constants import MARKDOWN_REMOVE_TOKEN, MARKDOWN_TRIM_TOKEN
from codegenlint.diagnostic.model import DiagnosticCode, Position, Range
from codegenlint.engine.fixes import apply_fixes
from codegenlint.engine.validator import validate_document
from codegenlint.processors.markdown import MarkdownProcessor, unwrap_markdown, wrap_markdown
from tests.conftest import parametrize

if TYPE_CHECKING:
    from codegenlint.presets import FrozenPresetRegistry

START = '<!-- codegen:start {preset: echo, value: "- [Intro](#intro)"} -->'
END = "<!-- codegen:end -->"


def test_wrap_adds_sentinel_and_prefixes_every_line() -> None:
    wrapped = wrap_markdown("# Title\n\ntext", "\n")
    assert wrapped.split("\n") == [
        MARKDOWN_REMOVE_TOKEN,
        f"{MARKDOWN_TRIM_TOKEN}# Title",
        MARKDOWN_TRIM_TOKEN,
        f"{MARKDOWN_TRIM_TOKEN}text",
    ]


def test_wrap_keeps_original_line_separators() -> None:
    wrapped = wrap_markdown("a\r\nb", "\r\n")
    assert wrapped == f"{MARKDOWN_REMOVE_TOKEN}\r\n{MARKDOWN_TRIM_TOKEN}a\r\n{MARKDOWN_TRIM_TOKEN}b"


def test_unwrap_passes_plain_text_through() -> None:
    assert unwrap_markdown("# plain\n") == "# plain\n"


@given(
    text=st.text(max_size=80),
    newline=st.sampled_from(["\n", "\r\n"]),
)
def test_wrap_unwrap_round_trip(text: str, newline: str) -> None:
    wrapped = wrap_markdown(text, newline)
    assert unwrap_markdown(wrapped) == text
    assert wrapped.count("\n") == text.count("\n") + 1


def test_marker_syntax() -> None:
    syntax = MarkdownProcessor.syntax
    match = syntax.start.search("<!-- codegen:start {preset: markdownTOC} -->")
    assert match is not None
    assert match.group(1) == "{preset: markdownTOC}"
    assert syntax.end_literal == END


def test_stale_region_positions_refer_to_original_text(
    echo_registry: FrozenPresetRegistry,
) -> None:
    text = f"# Title\n\n{START}\nold\n{END}\n\n## Intro\n"
    (diagnostic,) = validate_document(text, "README.md", registry=echo_registry, newline="\n")

    assert diagnostic.code is DiagnosticCode.CONTENT_MISMATCH
    assert diagnostic.loc == Range(start=Position(4, 0), end=Position(5, 0))
    assert diagnostic.fix is not None
    assert apply_fixes(text, [diagnostic.fix]).text == (
        f"# Title\n\n{START}\n- [Intro](#intro)\n{END}\n\n## Intro\n"
    )


def test_up_to_date_markdown(echo_registry: FrozenPresetRegistry) -> None:
    text = f"{START}\n- [Intro](#intro)\n{END}\n"
    assert validate_document(text, "README.md", registry=echo_registry, newline="\n") == []


def test_inline_marker_in_prose_is_ignored(echo_registry: FrozenPresetRegistry) -> None:
    text = f"Use `{START}` to start a region.\n"
    assert validate_document(text, "README.md", registry=echo_registry, newline="\n") == []


def test_missing_end_marker_fix_uses_literal_end(echo_registry: FrozenPresetRegistry) -> None:
    (diagnostic,) = validate_document(
        f"{START}\n", "README.md", registry=echo_registry, newline="\n"
    )
    assert diagnostic.code is DiagnosticCode.MISSING_END_MARKER
    assert diagnostic.fix is not None
    assert diagnostic.fix.replacement == f"\n{END}"


@parametrize("gap", ["", " "])
def test_same_line_end_marker_fix_keeps_a_single_end(
    echo_registry: FrozenPresetRegistry, gap: str
) -> None:
    start = "<!-- codegen:start {preset: echo, value: hi} -->"
    run = api.fix_text(f"{start}{gap}{END}\n", "README.md", registry=echo_registry)

    assert run.text == f"{start}\nhi\n{END}\n"
    assert run.diagnostics == ()
    assert run.passes == 1
