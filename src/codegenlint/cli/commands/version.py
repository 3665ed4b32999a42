# topmark:header:start
#
#   project      : CodegenLint
#   file         : version.py
#   file_relpath : src/codegenlint/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""CodegenLint `version` command.

Prints the CodegenLint version installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from codegenlint.cli.options import CONTEXT_SETTINGS, OutputFormat, common_format_option
from codegenlint.constants import CODEGENLINT_VERSION

if TYPE_CHECKING:
    from codegenlint.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of CodegenLint.",
    context_settings=CONTEXT_SETTINGS,
)
@common_format_option
@click.pass_context
def version_command(ctx: click.Context, *, output_format: str) -> None:
    """Show the current version of CodegenLint."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    if OutputFormat(output_format) == OutputFormat.JSON:
        console.print(json.dumps({"version": CODEGENLINT_VERSION}))
    elif vlevel > 0:
        console.print(console.styled("CodegenLint version:", bold=True, underline=True))
        console.print(f"    {console.styled(CODEGENLINT_VERSION, bold=True)}")
    else:
        console.print(console.styled(CODEGENLINT_VERSION, bold=True))
