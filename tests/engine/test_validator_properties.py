# topmark:header:start
#
#   project      : CodegenLint
#   file         : test_validator_properties.py
#   file_relpath : tests/engine/test_validator_properties.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

# pyright: strict

"""Property tests for the validation engine.

Generated documents hold several ``echo`` spans (see
``tests/strategies_codegen.py``) and the suite asserts:
1) a document without diagnostics stays clean when validated again,
2) applying every fix yields a document without diagnostics,
3) breaking the end marker of one span leaves the other spans' outcome alone,
4) every repeated copy of a start marker is reported as a duplicate, and
5) marker text preceded by other characters on its line is ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from codegenlint.diagnostic.model import DiagnosticCode
from codegenlint.engine.fixes import apply_fixes
from codegenlint.engine.validator import validate_document
from tests.conftest import echo_preset, make_registry
from tests.strategies_codegen import (
    SpanSpec,
    render_document,
    render_span,
    s_document,
    s_span,
)

if TYPE_CHECKING:
    from codegenlint.diagnostic.model import Diagnostic
    from tests.strategies_codegen import GeneratedDocument

REGISTRY = make_registry(echo=echo_preset)

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


def _validate(text: str, newline: str) -> list[Diagnostic]:
    return validate_document(text, "doc.ts", registry=REGISTRY, newline=newline)


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=30)
@given(doc=s_document(up_to_date=True))
def test_clean_document_is_a_fixed_point(doc: GeneratedDocument) -> None:
    assert _validate(doc.text, doc.newline) == []
    assert _validate(doc.text, doc.newline) == []


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=30)
@given(doc=s_document())
def test_applying_fixes_converges(doc: GeneratedDocument) -> None:
    diagnostics = _validate(doc.text, doc.newline)
    stale = [s for s in doc.spans if s.content.strip() != s.value]
    assert len(diagnostics) == len(stale)
    assert all(d.code is DiagnosticCode.CONTENT_MISMATCH for d in diagnostics)

    result = apply_fixes(doc.text, [d.fix for d in diagnostics if d.fix is not None])
    assert not result.skipped
    assert _validate(result.text, doc.newline) == []


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=30)
@given(
    spans=st.lists(s_span(), min_size=2, max_size=4),
    broken=st.integers(min_value=0, max_value=3),
)
def test_span_outcomes_are_independent(spans: list[SpanSpec], broken: int) -> None:
    broken %= len(spans)
    intact = tuple(spans)
    damaged = tuple(
        SpanSpec(value=s.value, content=s.content, closed=i != broken) for i, s in enumerate(spans)
    )

    def outcome(items: tuple[SpanSpec, ...]) -> dict[int, list[str]]:
        text = render_document(items, ("",), "\n")
        by_line: dict[int, list[str]] = {}
        for d in _validate(text, "\n"):
            by_line.setdefault(d.start.line, []).append(d.code.value)
        # Map the first line of every span's start marker to the span index.
        starts: dict[int, int] = {}
        for index in range(len(items)):
            marker = render_span(index, items[index], "\n").split("\n", 1)[0]
            starts[text[: text.index(marker)].count("\n") + 1] = index
        result: dict[int, list[str]] = {}
        for line, codes in by_line.items():
            index = max(i for start_line, i in starts.items() if start_line <= line)
            result.setdefault(index, []).extend(codes)
        return result

    before = outcome(intact)
    after = outcome(damaged)

    assert after.get(broken) == [DiagnosticCode.MISSING_END_MARKER.value]
    for index in range(len(spans)):
        if index != broken:
            assert after.get(index) == before.get(index)


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=30)
@given(span=s_span(up_to_date=True), copies=st.integers(min_value=2, max_value=4))
def test_repeated_start_marker_reported_per_extra_copy(span: SpanSpec, copies: int) -> None:
    block = render_span(0, span, "\n")
    text = "\n".join([block] * copies) + "\n"
    diagnostics = _validate(text, "\n")

    assert [d.code for d in diagnostics] == [DiagnosticCode.DUPLICATE_START_MARKER] * (copies - 1)
    marker_lines = [
        i + 1 for i, line in enumerate(text.split("\n")) if line.startswith("// codegen:start")
    ]
    assert [d.start.line for d in diagnostics] == marker_lines[1:]


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=30)
@given(
    prefix=st.text(alphabet="abc xyz=;'(", min_size=1, max_size=10),
    span=s_span(),
)
def test_mid_line_markers_are_not_markers(prefix: str, span: SpanSpec) -> None:
    text = prefix + render_span(0, span, "\n") + "\n"
    assert _validate(text, "\n") == []
