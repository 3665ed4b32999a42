# topmark:header:start
#
#   project      : CodegenLint
#   file         : registry.py
#   file_relpath : src/codegenlint/presets/registry.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Preset registry.

A preset is a named generator: ``(PresetContext) -> str``. Presets are
validated when they are registered (identifier-like name, callable, unique),
not when they are dispatched. A registry is populated once (builtins plus any
configured plugin modules) and then frozen; validation passes only ever read
the frozen view, so several documents can be processed concurrently against
the same registry.

Notes:
    * `PresetRegistry.freeze()` returns a `FrozenPresetRegistry` backed by a
      `MappingProxyType`.
    * Registering on a frozen registry raises `PresetRegistryError`.
"""

from __future__ import annotations

import importlib
import inspect
import re
from dataclasses import dataclass
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, Protocol

from codegenlint.config.logging import get_logger
from codegenlint.errors import PresetRegistryError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator, Mapping

    from codegenlint.config.logging import CodegenLogger

logger: CodegenLogger = get_logger(__name__)

_PRESET_NAME_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")


@dataclass(frozen=True, slots=True)
class PresetMeta:
    """Facts about the document a preset is generating content for."""

    filename: str
    existing_content: str


@dataclass(frozen=True, slots=True)
class PresetContext:
    """Argument passed to every preset."""

    meta: PresetMeta
    options: Mapping[str, Any]


class Preset(Protocol):
    """Structural type of a preset generator."""

    def __call__(self, context: PresetContext) -> str:
        """Return the content expected between the markers."""
        ...


@dataclass(frozen=True)
class PresetInfo:
    """Stable, serializable metadata about a registered preset."""

    name: str
    description: str = ""
    module: str = ""


def _describe(preset: Preset) -> str:
    doc: str | None = inspect.getdoc(preset)
    return doc.strip().splitlines()[0] if doc else ""


class FrozenPresetRegistry:
    """Read-only preset mapping used during validation."""

    def __init__(self, presets: Mapping[str, Preset]) -> None:
        self._presets: Mapping[str, Preset] = MappingProxyType(dict(presets))

    def get(self, name: object) -> Preset | None:
        """Return the preset registered under ``name`` (None for unknown or non-string names)."""
        if not isinstance(name, str):
            return None
        return self._presets.get(name)

    def names(self) -> tuple[str, ...]:
        """Return the registered names in registration order."""
        return tuple(self._presets)

    def as_mapping(self) -> Mapping[str, Preset]:
        """Return the underlying read-only mapping."""
        return self._presets

    def iter_info(self) -> Iterator[PresetInfo]:
        """Yield metadata for every registered preset."""
        for name, preset in self._presets.items():
            yield PresetInfo(
                name=name,
                description=_describe(preset),
                module=getattr(preset, "__module__", "") or "",
            )

    def __contains__(self, name: object) -> bool:
        return name in self._presets

    def __len__(self) -> int:
        return len(self._presets)


class PresetRegistry:
    """Mutable registry used while presets are being collected."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._presets: dict[str, Preset] = {}
        self._frozen: bool = False

    def register(self, name: str, preset: Preset, *, replace: bool = False) -> None:
        """Register ``preset`` under ``name``.

        Args:
            name (str): Preset name as used in ``{preset: <name>}``.
            preset (Preset): The generator callable.
            replace (bool): Allow overriding an existing registration.

        Raises:
            PresetRegistryError: If the registry is frozen, the name is invalid,
                the preset is not callable, or the name is taken and ``replace`` is False.
        """
        with self._lock:
            if self._frozen:
                raise PresetRegistryError(f"Cannot register preset '{name}': registry is frozen")
            if not isinstance(name, str) or not _PRESET_NAME_RE.match(name):
                raise PresetRegistryError(f"Invalid preset name: {name!r}")
            if not callable(preset):
                raise PresetRegistryError(f"Preset '{name}' is not callable: {preset!r}")
            if name in self._presets and not replace:
                raise PresetRegistryError(f"Preset '{name}' is already registered")
            logger.debug("Registering preset '%s' -> %r", name, preset)
            self._presets[name] = preset

    def update(self, presets: Iterable[tuple[str, Preset]], *, replace: bool = False) -> None:
        """Register several ``(name, preset)`` pairs."""
        for name, preset in presets:
            self.register(name, preset, replace=replace)

    def load_module(self, module_name: str) -> None:
        """Import a plugin module and register the presets it declares.

        A plugin module either defines ``register(registry)`` or decorates its
        presets with `register_preset` (collected in ``__codegen_presets__``).

        Raises:
            PresetRegistryError: If the module cannot be imported or declares no presets.
        """
        try:
            module: Any = importlib.import_module(module_name)
        except ImportError as exc:
            raise PresetRegistryError(
                f"Cannot import preset module '{module_name}': {exc}"
            ) from exc

        hook: Callable[[PresetRegistry], None] | None = getattr(module, "register", None)
        declared: dict[str, Preset] | None = getattr(module, "__codegen_presets__", None)
        if callable(hook):
            hook(self)
        elif declared:
            self.update(declared.items(), replace=True)
        else:
            raise PresetRegistryError(f"Module '{module_name}' does not declare any presets")
        logger.info("Loaded presets from module '%s'", module_name)

    def freeze(self) -> FrozenPresetRegistry:
        """Stop accepting registrations and return the read-only view."""
        with self._lock:
            self._frozen = True
            return FrozenPresetRegistry(self._presets)

    @property
    def frozen(self) -> bool:
        """Return True once `freeze()` has been called."""
        return self._frozen

    def names(self) -> tuple[str, ...]:
        """Return the names registered so far."""
        with self._lock:
            return tuple(self._presets)


def register_preset(name: str | None = None) -> Callable[[Preset], Preset]:
    """Function decorator declaring a preset in its module's ``__codegen_presets__``.

    The decorated function is recorded on its defining module; registries
    pick it up through `PresetRegistry.load_module()`.

    Args:
        name (str | None): Preset name; defaults to the function name.

    Returns:
        Callable[[Preset], Preset]: The decorator (returns the function unchanged).
    """

    def decorator(fn: Preset) -> Preset:
        preset_name: str = name or getattr(fn, "__name__", "")
        if not _PRESET_NAME_RE.match(preset_name):
            raise PresetRegistryError(f"Invalid preset name: {preset_name!r}")
        module: Any = inspect.getmodule(fn)
        if module is None:
            raise PresetRegistryError(f"Cannot determine the module of preset '{preset_name}'")
        declared: dict[str, Preset] = module.__dict__.setdefault("__codegen_presets__", {})
        if preset_name in declared:
            raise PresetRegistryError(f"Preset '{preset_name}' declared twice in {module.__name__}")
        declared[preset_name] = fn
        return fn

    return decorator
