# topmark:header:start
#
#   project      : CodegenLint
#   file         : text.py
#   file_relpath : src/codegenlint/utils/text.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Text helpers for reading documents."""

from __future__ import annotations

from codegenlint.constants import LINE_SEPARATOR


def detect_newline(text: str, default: str = LINE_SEPARATOR) -> str:
    r"""Return the first newline sequence found in ``text``.

    One of ``"\r\n"``, ``"\n"`` or ``"\r"``; ``default`` when ``text`` has no
    line break.
    """
    for i, ch in enumerate(text):
        if ch == "\n":
            return "\n"
        if ch == "\r":
            return "\r\n" if text[i + 1 : i + 2] == "\n" else "\r"
    return default
