# topmark:header:start
#
#   project      : CodegenLint
#   file         : __init__.py
#   file_relpath : src/codegenlint/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""CodegenLint package.

CodegenLint keeps generated regions of source files in sync with their
generators. Regions are delimited by ``codegen:start`` / ``codegen:end``
markers; the start marker names a *preset* that computes the expected content.
The package exposes a pure validation engine, a small typed API and a CLI.
"""

from __future__ import annotations
