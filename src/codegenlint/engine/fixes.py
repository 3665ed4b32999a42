# topmark:header:start
#
#   project      : CodegenLint
#   file         : fixes.py
#   file_relpath : src/codegenlint/engine/fixes.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Apply `Fix` edits to a text.

The engine only reports fixes; applying them is the host's job. This module
is the host-side helper used by the API and CLI. Fixes from one validation
pass never overlap by construction (each covers its own span); overlapping
fixes are skipped rather than merged and picked up on the next pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from codegenlint.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from codegenlint.config.logging import CodegenLogger
    from codegenlint.diagnostic.model import Fix

logger: CodegenLogger = get_logger(__name__)


@dataclass(frozen=True)
class FixResult:
    """Outcome of `apply_fixes`."""

    text: str
    applied: tuple[Fix, ...] = field(default_factory=tuple)
    skipped: tuple[Fix, ...] = field(default_factory=tuple)

    @property
    def changed(self) -> bool:
        """Return True if at least one fix was applied."""
        return bool(self.applied)


def apply_fixes(text: str, fixes: Iterable[Fix]) -> FixResult:
    """Apply non-overlapping ``fixes`` to ``text``.

    Fixes are sorted by range; a fix whose range starts before the end of the
    previously accepted one is skipped. Accepted fixes are spliced from the end
    of the text backwards so earlier offsets stay valid.

    Args:
        text (str): Original text; fix offsets refer to it.
        fixes (Iterable[Fix]): Edits to apply.

    Returns:
        FixResult: The patched text and the applied/skipped fixes.
    """
    accepted: list[Fix] = []
    skipped: list[Fix] = []
    cursor: int = -1
    for fix in sorted(fixes, key=lambda f: f.range):
        first, last = fix.range
        if first < cursor or last > len(text):
            logger.debug("Skipping fix %s (overlap or out of bounds)", fix.range)
            skipped.append(fix)
            continue
        accepted.append(fix)
        cursor = last

    patched: str = text
    for fix in reversed(accepted):
        first, last = fix.range
        patched = patched[:first] + fix.replacement + patched[last:]

    return FixResult(text=patched, applied=tuple(accepted), skipped=tuple(skipped))
