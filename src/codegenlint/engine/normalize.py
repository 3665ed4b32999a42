# topmark:header:start
#
#   project      : CodegenLint
#   file         : normalize.py
#   file_relpath : src/codegenlint/engine/normalize.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Content normalization applied before comparing generated and existing content.

Leading/trailing whitespace and the line-separator flavor are not significant:
``"  a\\r\\nb\\n"`` and ``"a\\nb"`` compare equal.
"""

from __future__ import annotations

import re
from typing import Final

_LINE_BREAK_RE: Final[re.Pattern[str]] = re.compile(r"\r?\n")


def normalize(value: str, newline: str) -> str:
    """Trim ``value`` and rewrite every line break as ``newline``."""
    return _LINE_BREAK_RE.sub(newline, value.strip())


def contents_match(existing: str, expected: str, newline: str) -> bool:
    """Return True when both values are equal after normalization."""
    return normalize(existing, newline) == normalize(expected, newline)
