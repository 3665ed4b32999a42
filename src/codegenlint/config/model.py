# topmark:header:start
#
#   project      : CodegenLint
#   file         : model.py
#   file_relpath : src/codegenlint/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by the API and CLI.
    - `MutableConfig`: a mutable builder used during discovery and merging;
      it is frozen into a `Config` once all layers are merged.

Merge order (lowest to highest precedence):
    1) built-in defaults
    2) project configs discovered upward, root-most first
    3) explicit config files (``--config``), in the order given

Recognized tables::

    [files]
    include_patterns = []
    exclude_patterns = ["node_modules/", ".git/"]

    [presets]
    modules = []

    [fix]
    max_passes = 10
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from codegenlint.config.loaders import discover_config_files, extract_tool_table, load_toml_dict
from codegenlint.config.logging import get_logger
from codegenlint.constants import DEFAULT_EXCLUDE_PATTERNS, DEFAULT_MAX_FIX_PASSES

if TYPE_CHECKING:
    from collections.abc import Iterable

    from codegenlint.config.loaders import TomlTable
    from codegenlint.config.logging import CodegenLogger

logger: CodegenLogger = get_logger(__name__)

SECTION_FILES: Final[str] = "files"
SECTION_PRESETS: Final[str] = "presets"
SECTION_FIX: Final[str] = "fix"

KEY_ROOT: Final[str] = "root"
KEY_INCLUDE_PATTERNS: Final[str] = "include_patterns"
KEY_EXCLUDE_PATTERNS: Final[str] = "exclude_patterns"
KEY_MODULES: Final[str] = "modules"
KEY_MAX_PASSES: Final[str] = "max_passes"

_KNOWN_KEYS: Final[dict[str, frozenset[str]]] = {
    SECTION_FILES: frozenset({KEY_INCLUDE_PATTERNS, KEY_EXCLUDE_PATTERNS}),
    SECTION_PRESETS: frozenset({KEY_MODULES}),
    SECTION_FIX: frozenset({KEY_MAX_PASSES}),
}


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        include_patterns (tuple[str, ...]): Gitignore-style patterns a file must match
            (empty means every supported file).
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns of files to skip.
        preset_modules (tuple[str, ...]): Modules imported to register extra presets.
        max_fix_passes (int): Maximum validate-and-fix rounds for ``--apply``.
        config_files (tuple[Path, ...]): Config sources merged into this snapshot.
        warnings (tuple[str, ...]): Problems found while loading config (unknown keys,
            wrong value types); never fatal.
    """

    include_patterns: tuple[str, ...]
    exclude_patterns: tuple[str, ...]
    preset_modules: tuple[str, ...]
    max_fix_passes: int
    config_files: tuple[Path, ...]
    warnings: tuple[str, ...]

    @classmethod
    def defaults(cls) -> Config:
        """Return the built-in configuration (no discovery)."""
        return MutableConfig.from_defaults().freeze()


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Unset values are ``None`` (or empty) so `merge_with` can tell "not
    configured" apart from an explicit value.
    """

    include_patterns: list[str] = field(default_factory=lambda: [])
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    preset_modules: list[str] = field(default_factory=lambda: [])
    max_fix_passes: int | None = None
    config_files: list[Path] = field(default_factory=lambda: [])
    warnings: list[str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`."""
        return Config(
            include_patterns=tuple(self.include_patterns),
            exclude_patterns=tuple(self.exclude_patterns),
            preset_modules=tuple(dict.fromkeys(self.preset_modules)),
            max_fix_passes=self.max_fix_passes
            if self.max_fix_passes is not None
            else DEFAULT_MAX_FIX_PASSES,
            config_files=tuple(self.config_files),
            warnings=tuple(self.warnings),
        )

    # ---------------------------- Loading ----------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls(
            exclude_patterns=list(DEFAULT_EXCLUDE_PATTERNS),
            max_fix_passes=DEFAULT_MAX_FIX_PASSES,
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: str = "<config>") -> MutableConfig:
        """Build a draft from a CodegenLint TOML table.

        Values of the wrong type are ignored and recorded in ``warnings``, as
        are unknown tables and keys.

        Args:
            data (TomlTable): The CodegenLint table (top level of ``codegenlint.toml``
                or ``[tool.codegenlint]``).
            source (str): Name of the source, used in warnings.

        Returns:
            MutableConfig: The parsed draft.
        """
        draft = cls()

        def warn(message: str) -> None:
            logger.warning("%s: %s", source, message)
            draft.warnings.append(f"{source}: {message}")

        for section, value in data.items():
            if section == KEY_ROOT:
                if not isinstance(value, bool):
                    warn(f"'{KEY_ROOT}' must be a boolean")
                continue
            known: frozenset[str] | None = _KNOWN_KEYS.get(section)
            if known is None:
                warn(f"unknown table [{section}]")
                continue
            if not isinstance(value, dict):
                warn(f"[{section}] must be a table")
                continue
            for key in value:
                if key not in known:
                    warn(f"unknown key '{key}' in [{section}]")

        def string_list(section: str, key: str) -> list[str]:
            table: Any = data.get(section, {})
            raw: Any = table.get(key) if isinstance(table, dict) else None
            if raw is None:
                return []
            if not isinstance(raw, list) or not all(isinstance(v, str) for v in raw):
                warn(f"[{section}] {key} must be a list of strings")
                return []
            return list(raw)

        draft.include_patterns = string_list(SECTION_FILES, KEY_INCLUDE_PATTERNS)
        draft.exclude_patterns = string_list(SECTION_FILES, KEY_EXCLUDE_PATTERNS)
        draft.preset_modules = string_list(SECTION_PRESETS, KEY_MODULES)

        fix_table: Any = data.get(SECTION_FIX, {})
        max_passes: Any = fix_table.get(KEY_MAX_PASSES) if isinstance(fix_table, dict) else None
        if max_passes is not None:
            if isinstance(max_passes, int) and not isinstance(max_passes, bool) and max_passes >= 1:
                draft.max_fix_passes = max_passes
            else:
                warn(f"[{SECTION_FIX}] {KEY_MAX_PASSES} must be a positive integer")

        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a draft from ``codegenlint.toml`` or ``pyproject.toml``.

        Returns:
            MutableConfig | None: The draft, or None when ``path`` is a
                ``pyproject.toml`` without a ``[tool.codegenlint]`` table.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table: TomlTable | None = extract_tool_table(path, load_toml_dict(path))
        if table is None:
            logger.info("No [tool.codegenlint] table in %s", path)
            return None
        draft: MutableConfig = cls.from_toml_dict(table, source=str(path))
        draft.config_files = [path]
        return draft

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            anchor (Path | None): Where upward discovery starts (CWD if None).
            extra_config_files (Iterable[Path] | None): Explicit config files merged
                last, in the given order.
            no_config (bool): Skip discovery; explicit files are still merged.

        Returns:
            MutableConfig: The merged draft.

        Raises:
            ConfigError: If a config file cannot be read or parsed.
        """
        draft: MutableConfig = cls.from_defaults()

        layers: list[Path] = []
        if not no_config:
            layers.extend(discover_config_files(anchor or Path.cwd()))
        layers.extend(Path(p) for p in extra_config_files or ())

        for path in layers:
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is not None:
                draft = draft.merge_with(layer)
        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Pattern lists are replaced, not concatenated; preset modules accumulate.
        """
        return MutableConfig(
            include_patterns=other.include_patterns or self.include_patterns,
            exclude_patterns=other.exclude_patterns or self.exclude_patterns,
            preset_modules=self.preset_modules + other.preset_modules,
            max_fix_passes=other.max_fix_passes
            if other.max_fix_passes is not None
            else self.max_fix_passes,
            config_files=self.config_files + other.config_files,
            warnings=self.warnings + other.warnings,
        )
