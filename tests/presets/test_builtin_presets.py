# topmark:header:start
#
#   project      : CodegenLint
#   file         : test_builtin_presets.py
#   file_relpath : tests/presets/test_builtin_presets.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Builtin presets: ``empty``, ``exec``, ``copy``, ``custom`` and ``markdownTOC``."""

from __future__ import annotations

import sys
import textwrap
from typing import TYPE_CHECKING, Any

import pytest

from codegenlint.errors import PresetError
from codegenlint.presets import PresetContext, PresetMeta
from codegenlint.presets.builtins import copy, custom, empty, exec_command, markdown_toc

if TYPE_CHECKING:
    from pathlib import Path


def _context(filename: Path | str, existing: str = "", **options: Any) -> PresetContext:
    return PresetContext(
        meta=PresetMeta(filename=str(filename), existing_content=existing), options=options
    )


def test_empty() -> None:
    assert empty(_context("a.ts", "anything")) == ""


def test_exec_string_command(tmp_path: Path) -> None:
    assert exec_command(_context(tmp_path / "a.ts", cmd="echo hi")) == "hi"


def test_exec_argv_list_runs_in_document_directory(tmp_path: Path) -> None:
    (tmp_path / "data.txt").write_text("payload\n", encoding="utf-8")
    script = "print(open('data.txt').read())"
    assert exec_command(_context(tmp_path / "a.ts", cmd=[sys.executable, "-c", script])) == (
        "payload"
    )


def test_exec_failures(tmp_path: Path) -> None:
    doc = tmp_path / "a.ts"
    with pytest.raises(PresetError, match="must be a string or a list of strings"):
        exec_command(_context(doc))
    with pytest.raises(PresetError, match="is empty"):
        exec_command(_context(doc, cmd="   "))
    with pytest.raises(PresetError, match="command not found"):
        exec_command(_context(doc, cmd="cgl-definitely-not-a-command"))
    with pytest.raises(PresetError, match="exited with status 3"):
        exec_command(_context(doc, cmd=[sys.executable, "-c", "raise SystemExit(3)"]))
    with pytest.raises(PresetError, match="option 'timeout' must be int or float"):
        exec_command(_context(doc, cmd="echo hi", timeout="soon"))


def test_exec_missing_document_directory(tmp_path: Path) -> None:
    doc = tmp_path / "gone" / "a.ts"
    with pytest.raises(PresetError, match="document directory does not exist"):
        exec_command(_context(doc, cmd="echo hi"))


def test_exec_timeout(tmp_path: Path) -> None:
    cmd = [sys.executable, "-c", "import time; time.sleep(5)"]
    with pytest.raises(PresetError, match="timed out"):
        exec_command(_context(tmp_path / "a.ts", cmd=cmd, timeout=0.2))


def test_copy(tmp_path: Path) -> None:
    (tmp_path / "snippet.txt").write_text("one\ntwo\nthree\nfour\n", encoding="utf-8")
    doc = tmp_path / "a.ts"

    assert copy(_context(doc, source="snippet.txt")) == "one\ntwo\nthree\nfour"
    assert copy(_context(doc, source="snippet.txt", start=2, end=3)) == "two\nthree"
    assert copy(_context(doc, source="snippet.txt", start=4)) == "four"


def test_copy_errors(tmp_path: Path) -> None:
    (tmp_path / "snippet.txt").write_text("one\n", encoding="utf-8")
    doc = tmp_path / "a.ts"

    with pytest.raises(PresetError, match="option 'source' is required"):
        copy(_context(doc))
    with pytest.raises(PresetError, match="cannot read 'missing.txt'"):
        copy(_context(doc, source="missing.txt"))
    with pytest.raises(PresetError, match="invalid line bounds"):
        copy(_context(doc, source="snippet.txt", start=0))
    with pytest.raises(PresetError, match="option 'start' must be int"):
        copy(_context(doc, source="snippet.txt", start=True))


def test_custom(tmp_path: Path) -> None:
    (tmp_path / "gen.py").write_text(
        textwrap.dedent(
            """
            def generate(context):
                return "generated for " + context.options["who"]

            def other(context):
                return context.meta.existing_content.strip().upper()
            """
        ),
        encoding="utf-8",
    )
    doc = tmp_path / "a.ts"

    assert custom(_context(doc, source="gen.py", who="you")) == "generated for you"
    assert custom(_context(doc, " keep ", source="gen.py", export="other")) == "KEEP"


def test_custom_errors(tmp_path: Path) -> None:
    (tmp_path / "gen.py").write_text("def generate(context):\n    return 1\n", encoding="utf-8")
    doc = tmp_path / "a.ts"

    with pytest.raises(PresetError, match="source not found"):
        custom(_context(doc, source="nope.py"))
    with pytest.raises(PresetError, match="has no callable 'missing'"):
        custom(_context(doc, source="gen.py", export="missing"))
    with pytest.raises(PresetError, match="returned int, expected str"):
        custom(_context(doc, source="gen.py"))


MARKDOWN_DOC = """\
# Project

<!-- codegen:start {preset: markdownTOC, minDepth: 2} -->
<!-- codegen:end -->

## Getting started

```sh
# not a heading
```

### Install it!

## Usage

## Usage
"""


def test_markdown_toc(tmp_path: Path) -> None:
    readme = tmp_path / "README.md"
    readme.write_text(MARKDOWN_DOC, encoding="utf-8")

    assert markdown_toc(_context(readme, minDepth=2)) == (
        "- [Getting started](#getting-started)\n"
        "  - [Install it!](#install-it)\n"
        "- [Usage](#usage)\n"
        "- [Usage](#usage-1)"
    )
    assert markdown_toc(_context(readme, maxDepth=1)) == "- [Project](#project)"


def test_markdown_toc_unreadable_document(tmp_path: Path) -> None:
    with pytest.raises(PresetError, match="cannot read"):
        markdown_toc(_context(tmp_path / "missing.md"))


def test_markdown_toc_reads_headings_from_disk(tmp_path: Path) -> None:
    readme = tmp_path / "README.md"
    readme.write_text("# On disk\n", encoding="utf-8")
    context = _context(readme, existing="# In memory\n")
    assert markdown_toc(context) == "- [On disk](#on-disk)"
