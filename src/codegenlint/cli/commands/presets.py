# topmark:header:start
#
#   project      : CodegenLint
#   file         : presets.py
#   file_relpath : src/codegenlint/cli/commands/presets.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""CodegenLint `presets` command.

Lists the presets available to ``{preset: <name>}`` markers: the builtins
plus those of the configured ``[presets] modules``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from codegenlint import api
from codegenlint.cli.commands.check import load_config
from codegenlint.cli.errors import CliConfigError
from codegenlint.cli.options import (
    CONTEXT_SETTINGS,
    OutputFormat,
    common_config_options,
    common_format_option,
)
from codegenlint.errors import PresetRegistryError

if TYPE_CHECKING:
    from codegenlint.cli.console import ConsoleLike
    from codegenlint.config import Config
    from codegenlint.presets import FrozenPresetRegistry, PresetInfo


@click.command(
    name="presets",
    help="List the registered presets.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@common_format_option
@click.pass_context
def presets_command(
    ctx: click.Context,
    *,
    output_format: str,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """List registered presets with the first line of their docstring."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    config: Config = load_config(config_paths, no_config)
    try:
        registry: FrozenPresetRegistry = api.build_registry(config)
    except PresetRegistryError as exc:
        raise CliConfigError(str(exc)) from exc

    infos: list[PresetInfo] = list(registry.iter_info())
    if OutputFormat(output_format) == OutputFormat.JSON:
        console.print(
            json.dumps(
                [
                    {"name": i.name, "description": i.description, "module": i.module}
                    for i in infos
                ],
                indent=2,
            )
        )
        return

    width: int = max((len(i.name) for i in infos), default=0)
    for info in infos:
        line: str = f"{console.styled(info.name.ljust(width), bold=True)}  {info.description}"
        if vlevel > 0:
            line += f" ({info.module})"
        console.print(line)
