# topmark:header:start
#
#   project      : CodegenLint
#   file         : dispatch.py
#   file_relpath : src/codegenlint/engine/dispatch.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Resolve a preset by name and run it against one span."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from codegenlint.config.logging import get_logger
from codegenlint.presets.registry import PresetContext, PresetMeta

if TYPE_CHECKING:
    from collections.abc import Mapping

    from codegenlint.config.logging import CodegenLogger
    from codegenlint.presets.registry import FrozenPresetRegistry, Preset

logger: CodegenLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Generated:
    """The preset produced ``text``."""

    text: str


@dataclass(frozen=True, slots=True)
class GenerationFailed:
    """The preset failed; ``message`` is reported verbatim."""

    message: str


GenerationResult = Union[Generated, GenerationFailed]


def unknown_preset_message(name: Any, registry: FrozenPresetRegistry) -> str:
    """Return the diagnostic message for an unknown preset name."""
    return f"unknown preset {name}. Available presets: {', '.join(registry.names())}"


def lookup_preset(name: Any, registry: FrozenPresetRegistry) -> Preset | None:
    """Return the callable registered under ``name`` or None."""
    preset: Preset | None = registry.get(name)
    return preset if callable(preset) else None


def run_preset(
    preset: Preset,
    *,
    filename: str,
    existing_content: str,
    options: Mapping[str, Any],
) -> GenerationResult:
    """Invoke ``preset`` and capture its outcome.

    Any exception raised by the preset, and any non-string return value, is
    turned into `GenerationFailed`; nothing propagates to the caller.

    Args:
        preset (Preset): The generator to run.
        filename (str): Name of the document being validated.
        existing_content (str): Current content of the span.
        options (Mapping[str, Any]): Parsed start-marker options.

    Returns:
        GenerationResult: `Generated` or `GenerationFailed`.
    """
    context = PresetContext(
        meta=PresetMeta(filename=filename, existing_content=existing_content),
        options=options,
    )
    try:
        result: Any = preset(context)
    except Exception as exc:
        logger.debug("Preset %r failed for %s: %r", options.get("preset"), filename, exc)
        return GenerationFailed(message=str(exc) or type(exc).__name__)

    if not isinstance(result, str):
        return GenerationFailed(
            message=f"preset {options.get('preset')} returned {type(result).__name__}, expected str"
        )
    return Generated(text=result)
