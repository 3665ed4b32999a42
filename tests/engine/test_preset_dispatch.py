# topmark:header:start
#
#   project      : CodegenLint
#   file         : test_preset_dispatch.py
#   file_relpath : tests/engine/test_preset_dispatch.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Preset lookup and invocation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codegenlint.engine.dispatch import (
    Generated,
    GenerationFailed,
    lookup_preset,
    run_preset,
    unknown_preset_message,
)
from tests.conftest import echo_preset, failing_preset, make_registry

if TYPE_CHECKING:
    from codegenlint.presets import PresetContext


def test_unknown_preset_message_lists_names_in_registration_order() -> None:
    registry = make_registry(zeta=echo_preset, alpha=echo_preset)
    assert unknown_preset_message("missing", registry) == (
        "unknown preset missing. Available presets: zeta, alpha"
    )


def test_lookup_preset() -> None:
    registry = make_registry(echo=echo_preset)
    assert lookup_preset("echo", registry) is echo_preset
    assert lookup_preset("nope", registry) is None
    assert lookup_preset(None, registry) is None
    assert lookup_preset(["echo"], registry) is None


def test_run_preset_passes_meta_and_options() -> None:
    seen: list[PresetContext] = []

    def spy(context: PresetContext) -> str:
        seen.append(context)
        return "out"

    result = run_preset(
        spy, filename="src/a.ts", existing_content="old\n", options={"preset": "spy", "k": 1}
    )

    assert result == Generated(text="out")
    (context,) = seen
    assert context.meta.filename == "src/a.ts"
    assert context.meta.existing_content == "old\n"
    assert context.options["k"] == 1


def test_run_preset_captures_exceptions() -> None:
    result = run_preset(failing_preset, filename="a.ts", existing_content="", options={})
    assert result == GenerationFailed(message="boom in a.ts")


def test_run_preset_uses_exception_type_when_message_is_empty() -> None:
    def silent(context: PresetContext) -> str:
        raise KeyError()

    result = run_preset(silent, filename="a.ts", existing_content="", options={})
    assert result == GenerationFailed(message="KeyError")


def test_run_preset_rejects_non_string_results() -> None:
    def number(context: PresetContext) -> str:
        return 42  # type: ignore[return-value]

    result = run_preset(number, filename="a.ts", existing_content="", options={"preset": "n"})
    assert isinstance(result, GenerationFailed)
    assert "returned int" in result.message
