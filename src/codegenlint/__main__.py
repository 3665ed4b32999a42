# topmark:header:start
#
#   project      : CodegenLint
#   file         : __main__.py
#   file_relpath : src/codegenlint/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Allow ``python -m codegenlint``."""

from codegenlint.cli.main import cli

if __name__ == "__main__":
    cli()
