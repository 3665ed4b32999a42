# topmark:header:start
#
#   project      : CodegenLint
#   file         : api.py
#   file_relpath : src/codegenlint/api.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Public CodegenLint API (stable surface).

Thin wrappers around the validation engine for integrations that do not go
through the CLI. The engine itself only reports; these helpers add the host
side: reading and writing files and applying fixes in rounds until the
document stops changing (the equivalent of a linter's ``--fix`` loop).

Configuration contract
----------------------
Functions accept either a frozen `codegenlint.config.Config`, a plain mapping
mirroring the TOML shape, or None for the built-in defaults:

```python
from codegenlint import api

result = api.check_file(
    Path("README.md"),
    config={"presets": {"modules": ["docs.presets"]}, "fix": {"max_passes": 3}},
)
```
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Union

from codegenlint.config import Config, MutableConfig
from codegenlint.config.logging import get_logger
from codegenlint.engine.fixes import apply_fixes
from codegenlint.engine.validator import validate_document
from codegenlint.errors import DocumentReadError, DocumentWriteError
from codegenlint.presets import build_registry as _build_preset_registry
from codegenlint.presets import default_registry
from codegenlint.utils.text import detect_newline

if TYPE_CHECKING:
    from codegenlint.config.logging import CodegenLogger
    from codegenlint.diagnostic.model import Diagnostic, Fix
    from codegenlint.engine.fixes import FixResult
    from codegenlint.presets import FrozenPresetRegistry

ConfigLike = Union[Config, Mapping[str, Any], None]

logger: CodegenLogger = get_logger(__name__)


@dataclass(frozen=True)
class FixRun:
    """Outcome of `fix_text`.

    Attributes:
        text (str): The text after the last applied round.
        diagnostics (tuple[Diagnostic, ...]): Diagnostics remaining in ``text``.
        passes (int): Number of rounds that changed the text.
    """

    text: str
    diagnostics: tuple[Diagnostic, ...]
    passes: int


@dataclass(frozen=True)
class FileResult:
    """Outcome of `check_file` for one document.

    Attributes:
        path (Path): The document.
        text (str): Content as read from disk.
        diagnostics (tuple[Diagnostic, ...]): Diagnostics for ``text``, or for the
            written content when ``written`` is True.
        fixed_text (str | None): Content after applying fixes; None when fixes
            would not change the document.
        written (bool): True if ``fixed_text`` was written back.
    """

    path: Path
    text: str
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)
    fixed_text: str | None = None
    written: bool = False

    @property
    def clean(self) -> bool:
        """Return True if no diagnostics remain."""
        return not self.diagnostics

    @property
    def would_change(self) -> bool:
        """Return True if applying fixes changes the document."""
        return self.fixed_text is not None and not self.written


def resolve_config(config: ConfigLike = None) -> Config:
    """Return a frozen `Config` for ``config`` (a Config, a TOML-shaped mapping, or None)."""
    if isinstance(config, Config):
        return config
    draft: MutableConfig = MutableConfig.from_defaults()
    if config is not None:
        draft = draft.merge_with(MutableConfig.from_toml_dict(dict(config), source="<api>"))
    return draft.freeze()


def build_registry(config: ConfigLike = None) -> FrozenPresetRegistry:
    """Return the frozen preset registry for ``config``.

    Raises:
        PresetRegistryError: If a configured preset module cannot be loaded.
    """
    modules: tuple[str, ...] = resolve_config(config).preset_modules
    if not modules:
        return default_registry()
    return _build_preset_registry(modules)


def check_text(
    text: str,
    filename: str,
    config: ConfigLike = None,
    *,
    registry: FrozenPresetRegistry | None = None,
    newline: str | None = None,
) -> list[Diagnostic]:
    """Validate ``text`` as if it were the content of ``filename``.

    Args:
        text (str): Document content.
        filename (str): Document name; its extension selects the marker syntax and
            presets resolve relative paths against its directory.
        config (ConfigLike): Configuration (only used when ``registry`` is None).
        registry (FrozenPresetRegistry | None): Presets to dispatch to.
        newline (str | None): Line separator; detected from ``text`` when None.

    Returns:
        list[Diagnostic]: The diagnostics.

    Raises:
        UnsupportedFileTypeError: If ``filename`` has no registered marker syntax.
    """
    presets: FrozenPresetRegistry = registry if registry is not None else build_registry(config)
    return validate_document(
        text,
        filename,
        registry=presets,
        newline=newline if newline is not None else detect_newline(text),
    )


def fix_text(
    text: str,
    filename: str,
    config: ConfigLike = None,
    *,
    registry: FrozenPresetRegistry | None = None,
) -> FixRun:
    """Validate and apply fixes in rounds until nothing changes.

    Each round validates the current text and applies every fix reported for
    it. Rounds stop when no fix applies, the text stops changing, or the
    configured ``max_fix_passes`` is reached.

    Returns:
        FixRun: Final text, the diagnostics that remain in it and the number of rounds.
    """
    cfg: Config = resolve_config(config)
    presets: FrozenPresetRegistry = registry if registry is not None else build_registry(cfg)
    newline: str = detect_newline(text)

    current: str = text
    passes: int = 0
    diagnostics: list[Diagnostic] = check_text(
        current, filename, registry=presets, newline=newline
    )
    while passes < cfg.max_fix_passes:
        fixes: list[Fix] = [d.fix for d in diagnostics if d.fix is not None]
        if not fixes:
            break
        result: FixResult = apply_fixes(current, fixes)
        if result.text == current:
            break
        current = result.text
        passes += 1
        logger.debug("%s: fix pass %d applied %d fix(es)", filename, passes, len(result.applied))
        diagnostics = check_text(current, filename, registry=presets, newline=newline)

    if diagnostics and passes == cfg.max_fix_passes:
        logger.warning(
            "%s: still %d diagnostic(s) after %d fix passes", filename, len(diagnostics), passes
        )
    return FixRun(text=current, diagnostics=tuple(diagnostics), passes=passes)


def read_document(path: Path) -> str:
    """Read ``path`` as UTF-8 keeping its line separators.

    Raises:
        DocumentReadError: If the file cannot be read or decoded.
    """
    try:
        with path.open(encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentReadError(f"Cannot read {path}: {exc}") from exc


def write_document(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` as UTF-8 without newline translation.

    Raises:
        DocumentWriteError: If the file cannot be written.
    """
    try:
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except OSError as exc:
        raise DocumentWriteError(f"Cannot write {path}: {exc}") from exc


def check_file(
    path: Path,
    config: ConfigLike = None,
    *,
    registry: FrozenPresetRegistry | None = None,
    apply: bool = False,
) -> FileResult:
    """Validate one file and compute (optionally write) its fixed content.

    Args:
        path (Path): File to check.
        config (ConfigLike): Configuration.
        registry (FrozenPresetRegistry | None): Presets to dispatch to.
        apply (bool): Write the fixed content back when it differs.

    Returns:
        FileResult: Diagnostics and fixed content for ``path``.

    Raises:
        DocumentReadError: If the file cannot be read.
        DocumentWriteError: If ``apply`` is set and the file cannot be written.
        UnsupportedFileTypeError: If the file's extension has no marker syntax.
    """
    cfg: Config = resolve_config(config)
    presets: FrozenPresetRegistry = registry if registry is not None else build_registry(cfg)
    text: str = read_document(path)
    filename: str = str(path)

    diagnostics: list[Diagnostic] = check_text(text, filename, registry=presets)
    if not any(d.fix is not None for d in diagnostics):
        return FileResult(path=path, text=text, diagnostics=tuple(diagnostics))

    run: FixRun = fix_text(text, filename, cfg, registry=presets)
    fixed_text: str | None = run.text if run.text != text else None
    if not apply or fixed_text is None:
        return FileResult(
            path=path, text=text, diagnostics=tuple(diagnostics), fixed_text=fixed_text
        )

    write_document(path, fixed_text)
    logger.info("%s: wrote fixes (%d pass(es))", path, run.passes)
    return FileResult(
        path=path,
        text=text,
        diagnostics=run.diagnostics,
        fixed_text=fixed_text,
        written=True,
    )
