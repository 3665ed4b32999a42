# topmark:header:start
#
#   project      : CodegenLint
#   file         : __init__.py
#   file_relpath : src/codegenlint/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Diagnostic primitives.

Design:
    - Each validation failure is an immutable `Diagnostic` carrying a message,
      a `Position` or `Range`, a `DiagnosticCode` and an optional `Fix`.
    - During a validation pass diagnostics are accumulated in a mutable
      `DiagnosticLog`; the engine returns a frozen tuple/list to the host.
"""

from __future__ import annotations

from codegenlint.diagnostic.model import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticLevel,
    DiagnosticLog,
    DiagnosticStats,
    Fix,
    Location,
    Position,
    Range,
    compute_diagnostic_stats,
)

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticLevel",
    "DiagnosticLog",
    "DiagnosticStats",
    "Fix",
    "Location",
    "Position",
    "Range",
    "compute_diagnostic_stats",
]
