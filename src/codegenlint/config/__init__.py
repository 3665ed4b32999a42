# topmark:header:start
#
#   project      : CodegenLint
#   file         : __init__.py
#   file_relpath : src/codegenlint/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Configuration handling for CodegenLint.

TOML configuration is read with `tomlkit` from ``codegenlint.toml`` or the
``[tool.codegenlint]`` table of ``pyproject.toml``, merged into a
`MutableConfig` and frozen into a `Config`.
"""

from __future__ import annotations

from codegenlint.config.loaders import discover_config_files, load_toml_dict
from codegenlint.config.model import Config, MutableConfig

__all__: list[str] = [
    "Config",
    "MutableConfig",
    "discover_config_files",
    "load_toml_dict",
]
