# topmark:header:start
#
#   project      : CodegenLint
#   file         : __init__.py
#   file_relpath : src/codegenlint/presets/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Presets: named generators computing the content of a marker span.

Use `build_registry()` to collect the builtin presets plus any plugin modules
into a frozen registry before validating documents.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from codegenlint.presets.registry import (
    FrozenPresetRegistry,
    Preset,
    PresetContext,
    PresetInfo,
    PresetMeta,
    PresetRegistry,
    register_preset,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

BUILTIN_PRESETS_MODULE: str = "codegenlint.presets.builtins"

__all__ = [
    "BUILTIN_PRESETS_MODULE",
    "FrozenPresetRegistry",
    "Preset",
    "PresetContext",
    "PresetInfo",
    "PresetMeta",
    "PresetRegistry",
    "build_registry",
    "default_registry",
    "register_preset",
]


def build_registry(modules: Iterable[str] = ()) -> FrozenPresetRegistry:
    """Return a frozen registry with the builtin presets and those of ``modules``.

    Presets from ``modules`` may replace builtins of the same name.

    Raises:
        PresetRegistryError: If a module cannot be loaded or declares invalid presets.
    """
    registry = PresetRegistry()
    registry.load_module(BUILTIN_PRESETS_MODULE)
    for module_name in modules:
        registry.load_module(module_name)
    return registry.freeze()


@lru_cache(maxsize=1)
def default_registry() -> FrozenPresetRegistry:
    """Return the (cached) frozen registry holding only the builtin presets."""
    return build_registry()
