# topmark:header:start
#
#   project      : CodegenLint
#   file         : __init__.py
#   file_relpath : src/codegenlint/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""CodegenLint CLI package.

Click command definitions for the ``codegenlint`` console script, declared in
``pyproject.toml`` as::

    [project.scripts]
    codegenlint = "codegenlint.cli.main:cli"

All subcommands live in [`codegenlint.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
