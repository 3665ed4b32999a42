# topmark:header:start
#
#   project      : CodegenLint
#   file         : diff.py
#   file_relpath : src/codegenlint/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Unified diffs between a document and its fixed version, with a colorized preview."""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Sequence


def unified_diff(original: str, updated: str, path: str) -> list[str]:
    """Return the unified diff of ``original`` against ``updated`` (empty when equal)."""
    return list(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{path} (current)",
            tofile=f"{path} (fixed)",
            n=3,
        )
    )


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch (Sequence[str] | str): Diff lines, or the diff as one string.
        show_line_numbers (bool): Prefix each line with a 4-digit line number.

    Returns:
        str: The formatted, colorized diff.
    """
    lines: list[str] = (
        patch.splitlines(keepends=False) if isinstance(patch, str) else list(patch)
    )

    def process_line(line: str) -> str:
        content: str = line.removesuffix("\n").replace("\r", "\\r")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
