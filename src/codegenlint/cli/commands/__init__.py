# topmark:header:start
#
#   project      : CodegenLint
#   file         : __init__.py
#   file_relpath : src/codegenlint/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Subcommands of the ``codegenlint`` CLI."""
