# topmark:header:start
#
#   project      : CodegenLint
#   file         : loaders.py
#   file_relpath : src/codegenlint/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Load and discover TOML configuration sources.

Configuration lives either in ``codegenlint.toml`` (top-level tables) or in
``pyproject.toml`` under ``[tool.codegenlint]``. Parsing is done with
`tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from codegenlint.config.logging import get_logger
from codegenlint.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION
from codegenlint.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from codegenlint.config.logging import CodegenLogger

TomlTable = dict[str, Any]

logger: CodegenLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tool_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the CodegenLint table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.codegenlint]`` (None when absent);
    any other file is a CodegenLint file and is returned as is.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_SECTION) if isinstance(tool, dict) else None
    return cast("TomlTable", section) if isinstance(section, dict) else None


def discover_config_files(start: Path) -> list[Path]:
    """Return config files found by walking upward from ``start``.

    Files are ordered root-most first, nearest last, so a last-wins merge
    gives the nearest file precedence. Within one directory ``pyproject.toml``
    comes before ``codegenlint.toml``. A ``pyproject.toml`` without a
    ``[tool.codegenlint]`` table is skipped. A file setting ``root = true``
    stops the walk after its directory.

    Args:
        start (Path): Directory (or file) where discovery starts.

    Returns:
        list[Path]: Discovered config files in merge order.
    """
    per_dir: list[list[Path]] = []
    cur: Path = start.resolve()
    if cur.is_file():
        cur = cur.parent

    while True:
        stop_here: bool = False
        dir_entries: list[Path] = []
        for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME):
            candidate: Path = cur / name
            if not candidate.is_file():
                continue
            table: TomlTable | None = extract_tool_table(candidate, load_toml_dict(candidate))
            if table is None:
                continue
            logger.debug("Discovered config file: %s", candidate)
            dir_entries.append(candidate)
            if table.get("root") is True:
                stop_here = True

        if dir_entries:
            per_dir.append(dir_entries)

        parent: Path = cur.parent
        if stop_here:
            logger.debug("Stopping upward config discovery at %s due to root=true", cur)
            break
        if parent == cur:
            break
        cur = parent

    ordered: list[Path] = []
    for dir_list in reversed(per_dir):
        ordered.extend(dir_list)
    return ordered
