# topmark:header:start
#
#   project      : CodegenLint
#   file         : model.py
#   file_relpath : src/codegenlint/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Diagnostic and fix types produced by the CodegenLint engine.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * DiagnosticCode: stable machine-readable identifiers, one per failure mode.
    * Position / Range: 1-based line, 0-based column locations.
    * Fix: an advisory replacement over an exact character range.
    * Diagnostic: immutable lint record (message + location + optional fix).
    * DiagnosticLog: mutable per-document collector used during a validation pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Union, cast

from yachalk import chalk

from codegenlint.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from codegenlint.config.logging import CodegenLogger


logger: CodegenLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function for this level (human output only)."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


class DiagnosticCode(Enum):
    """Machine-readable identifier of the failure mode behind a diagnostic."""

    PARSE_FAILURE = "parse-failure"
    DUPLICATE_START_MARKER = "duplicate-start-marker"
    MISSING_END_MARKER = "missing-end-marker"
    INVALID_OPTIONS = "invalid-options"
    UNKNOWN_PRESET = "unknown-preset"
    PRESET_FAILURE = "preset-failure"
    CONTENT_MISMATCH = "content-mismatch"


@dataclass(frozen=True, slots=True)
class Position:
    """A point in a document: 1-based ``line``, 0-based ``column``."""

    line: int
    column: int

    def shifted(self, columns: int) -> Position:
        """Return the position ``columns`` characters further on the same line."""
        return Position(line=self.line, column=self.column + columns)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping."""
        return {"line": self.line, "column": self.column}


@dataclass(frozen=True, slots=True)
class Range:
    """A start/end pair of positions."""

    start: Position
    end: Position

    def to_dict(self) -> dict[str, dict[str, int]]:
        """Return a JSON-friendly mapping."""
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


Location = Union[Position, Range]


@dataclass(frozen=True, slots=True)
class Fix:
    """Replace ``text[range[0]:range[1]]`` with ``replacement``.

    Fixes are advisory: the engine constructs them, the host decides whether
    to apply them (see `codegenlint.engine.fixes`).
    """

    range: tuple[int, int]
    replacement: str

    def __post_init__(self) -> None:
        start, end = self.range
        if start < 0 or end < start:
            raise ValueError(f"Invalid fix range: {self.range!r}")

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping."""
        return {"range": list(self.range), "replacement": self.replacement}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One validation failure, anchored to a location in the document."""

    code: DiagnosticCode
    message: str
    loc: Location
    fix: Fix | None = None
    level: DiagnosticLevel = DiagnosticLevel.ERROR

    @property
    def start(self) -> Position:
        """Return the first position covered by this diagnostic."""
        return self.loc.start if isinstance(self.loc, Range) else self.loc

    def to_dict(self) -> dict[str, Any]:
        """Return the host-facing record ``{message, loc, fix?, code, level}``."""
        data: dict[str, Any] = {
            "message": self.message,
            "loc": self.loc.to_dict(),
            "code": self.code.value,
            "level": self.level.value,
        }
        if self.fix is not None:
            data["fix"] = self.fix.to_dict()
        return data


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int
    n_fixable: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error


@dataclass
class DiagnosticLog:
    """Mutable collection of the diagnostics emitted for one document."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def report(
        self,
        code: DiagnosticCode,
        message: str,
        loc: Location,
        *,
        fix: Fix | None = None,
    ) -> Diagnostic:
        """Append an ERROR diagnostic and return it.

        Args:
            code (DiagnosticCode): Failure mode.
            message (str): Human-readable message.
            loc (Location): Point or range the message is anchored to.
            fix (Fix | None): Optional advisory fix.

        Returns:
            Diagnostic: The recorded diagnostic.
        """
        diagnostic = Diagnostic(code=code, message=message, loc=loc, fix=fix)
        self.items.append(diagnostic)
        logger.trace("Adding [%s] at %s: %r", code.value, loc, message)
        return diagnostic

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Append already-built diagnostics (e.g. from a sub-document)."""
        self.items.extend(diagnostics)

    def stats(self) -> DiagnosticStats:
        """Return per-level counts for diagnostics in this log."""
        return compute_diagnostic_stats(self.items)

    def has_error(self) -> bool:
        """Return True if the log contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def fixes(self) -> list[Fix]:
        """Return the fixes attached to the logged diagnostics, in report order."""
        return [d.fix for d in self.items if d.fix is not None]

    def freeze(self) -> tuple[Diagnostic, ...]:
        """Return an immutable snapshot of the logged diagnostics."""
        return tuple(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts (and the fixable count) for ``diagnostics``."""
    items: list[Diagnostic] = list(diagnostics)
    return DiagnosticStats(
        n_info=sum(1 for d in items if d.level == DiagnosticLevel.INFO),
        n_warning=sum(1 for d in items if d.level == DiagnosticLevel.WARNING),
        n_error=sum(1 for d in items if d.level == DiagnosticLevel.ERROR),
        n_fixable=sum(1 for d in items if d.fix is not None),
    )
