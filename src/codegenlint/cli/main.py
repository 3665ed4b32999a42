# topmark:header:start
#
#   project      : CodegenLint
#   file         : main.py
#   file_relpath : src/codegenlint/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Entry point of the ``codegenlint`` CLI.

Group-level options are resolved once and placed into ``ctx.obj``
(``verbosity_level``, ``log_level``, ``color_enabled``, ``console``);
subcommands read them from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from codegenlint.cli.commands.check import check_command
from codegenlint.cli.commands.presets import presets_command
from codegenlint.cli.commands.version import version_command
from codegenlint.cli.console import ClickConsole
from codegenlint.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from codegenlint.config.logging import get_logger, resolve_env_log_level, setup_logging
from codegenlint.processors import register_all_processors

if TYPE_CHECKING:
    from codegenlint.cli.console import ConsoleLike
    from codegenlint.config.logging import CodegenLogger

logger: CodegenLogger = get_logger(__name__)

register_all_processors()


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color) on the Click context."""
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Keep generated regions between codegen markers up to date.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the CodegenLint CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'codegenlint check [PATHS...]' to validate generated regions.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(check_command)
cli.add_command(presets_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
