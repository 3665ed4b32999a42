# topmark:header:start
#
#   project      : CodegenLint
#   file         : constants.py
#   file_relpath : src/codegenlint/constants.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""CodegenLint Constants."""

from __future__ import annotations

import os
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    CODEGENLINT_VERSION: str = get_version("codegenlint")
except PackageNotFoundError:  # running from a source checkout
    CODEGENLINT_VERSION = "0.0.0"

# Platform line separator; the engine default when the host does not pass one.
LINE_SEPARATOR: str = os.linesep

# Environment variable consulted by `setup_logging()`.
LOG_LEVEL_ENV_VAR: str = "CODEGENLINT_LOG_LEVEL"

# Configuration discovery:
CONFIG_FILE_NAME: str = "codegenlint.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "codegenlint"

# Markdown pre-processing tokens. Lines carrying REMOVE_TOKEN are dropped when
# unwrapping; TRIM_TOKEN is stripped from the start of every other line.
MARKDOWN_REMOVE_TOKEN: str = "<!-- codegenlint:remove -->"
MARKDOWN_TRIM_TOKEN: str = "<!-- codegenlint:trim -->"

DEFAULT_MAX_FIX_PASSES: int = 10
DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = ("node_modules/", ".git/")
