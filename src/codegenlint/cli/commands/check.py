# topmark:header:start
#
#   project      : CodegenLint
#   file         : check.py
#   file_relpath : src/codegenlint/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""CodegenLint `check` command.

Validates every generated region of the selected documents. Without
``--apply`` nothing is written and the command exits with ``WOULD_CHANGE``
when any diagnostic is reported; with ``--apply`` fixes are applied in rounds
and the command fails only if diagnostics remain.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from codegenlint import api
from codegenlint.cli.errors import CliConfigError, exit_code_for
from codegenlint.cli.exit_codes import ExitCode
from codegenlint.cli.options import (
    CONTEXT_SETTINGS,
    OutputFormat,
    common_config_options,
    common_format_option,
)
from codegenlint.config import Config, MutableConfig
from codegenlint.config.logging import get_logger
from codegenlint.diagnostic.model import compute_diagnostic_stats
from codegenlint.errors import CodegenLintError, ConfigError, PresetRegistryError
from codegenlint.file_resolver import resolve_file_list
from codegenlint.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from codegenlint.cli.console import ConsoleLike
    from codegenlint.config.logging import CodegenLogger
    from codegenlint.diagnostic.model import Diagnostic, DiagnosticStats
    from codegenlint.presets import FrozenPresetRegistry

logger: CodegenLogger = get_logger(__name__)


def format_diagnostic(path: Path, diagnostic: Diagnostic, console: ConsoleLike) -> str:
    """Return ``path:line:col: level message [code]`` for human output."""
    pos = diagnostic.start
    level: str = diagnostic.level.value
    tag: str = diagnostic.level.color(level) if console.enable_color else level
    fixable: str = " (fixable)" if diagnostic.fix is not None else ""
    return (
        f"{path}:{pos.line}:{pos.column}: {tag} {diagnostic.message} "
        f"[{diagnostic.code.value}]{fixable}"
    )


def load_config(config_paths: tuple[str, ...], no_config: bool) -> Config:
    """Discover and merge configuration for the current directory.

    Raises:
        CliConfigError: If a config file cannot be read or parsed.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            anchor=Path.cwd(),
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
    except ConfigError as exc:
        raise CliConfigError(str(exc)) from exc
    return draft.freeze()


@click.command(
    name="check",
    help="Validate generated regions (dry-run). Use --apply to write fixes.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Report stale generated regions (exit code 2 if any)
  codegenlint check src README.md

  # Regenerate them in place
  codegenlint check --apply .
""",
)
@common_config_options
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@click.option(
    "--apply", "apply_changes", is_flag=True, help="Write fixes to files (off by default)."
)
@click.option("--diff", is_flag=True, help="Show unified diffs of the fixes (text output only).")
@common_format_option
@click.pass_context
def check_command(
    ctx: click.Context,
    *,
    paths: tuple[Path, ...],
    apply_changes: bool,
    diff: bool,
    output_format: str,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Validate (and optionally fix) the generated regions of ``paths``."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)
    fmt = OutputFormat(output_format)

    config: Config = load_config(config_paths, no_config)
    for warning in config.warnings:
        console.warn(f"warning: {warning}")
    try:
        registry: FrozenPresetRegistry = api.build_registry(config)
    except PresetRegistryError as exc:
        raise CliConfigError(str(exc)) from exc

    errors: list[dict[str, Any]] = []
    error_code: ExitCode | None = None
    for missing in (p for p in paths if not p.exists()):
        error_code = ExitCode.FILE_NOT_FOUND
        errors.append(
            {
                "path": str(missing),
                "error": "No such file or directory",
                "exit_code": int(error_code),
            }
        )
        if fmt == OutputFormat.TEXT:
            console.error(f"{missing}: No such file or directory")

    files: list[Path] = resolve_file_list(paths or (Path("."),), config)
    logger.info("Checking %d file(s)", len(files))
    if not files:
        if fmt == OutputFormat.JSON:
            console.print(json.dumps({"files": [], "errors": errors}, indent=2))
        elif vlevel >= 0:
            console.print("No files to check.")
        if error_code is not None:
            ctx.exit(error_code)
        return

    results: list[api.FileResult] = []
    for path in files:
        try:
            result: api.FileResult = api.check_file(
                path, config, registry=registry, apply=apply_changes
            )
        except CodegenLintError as exc:
            code: ExitCode = exit_code_for(exc)
            error_code = error_code or code
            errors.append({"path": str(path), "error": str(exc), "exit_code": int(code)})
            if fmt == OutputFormat.TEXT:
                console.error(f"{path}: {exc}")
            continue
        results.append(result)

        if fmt != OutputFormat.TEXT:
            continue
        for diagnostic in result.diagnostics:
            console.print(format_diagnostic(path, diagnostic, console))
        if result.written and vlevel >= 0:
            console.print(console.styled(f"Fixed {path}", fg="green"))
        if diff and result.fixed_text is not None:
            patch: list[str] = unified_diff(result.text, result.fixed_text, str(path))
            console.print(
                render_patch(patch) if console.enable_color else "".join(patch), nl=False
            )

    remaining: list[Diagnostic] = [d for r in results for d in r.diagnostics]
    stats: DiagnosticStats = compute_diagnostic_stats(remaining)

    if fmt == OutputFormat.JSON:
        payload: dict[str, Any] = {
            "files": [
                {
                    "path": str(r.path),
                    "diagnostics": [d.to_dict() for d in r.diagnostics],
                    "would_change": r.would_change,
                    "written": r.written,
                }
                for r in results
            ],
            "errors": errors,
        }
        console.print(json.dumps(payload, indent=2))
    elif vlevel >= 0:
        n_files: int = sum(1 for r in results if r.diagnostics)
        if stats.total:
            hint: str = "" if apply_changes else " Run `codegenlint check --apply` to fix."
            console.print(
                console.styled(
                    f"{stats.total} problem(s) in {n_files} file(s) "
                    f"({stats.n_fixable} fixable).{hint}",
                    bold=True,
                )
            )
        elif vlevel > 0 or apply_changes:
            console.print(console.styled(f"All {len(results)} file(s) up to date.", fg="green"))

    if error_code is not None:
        ctx.exit(error_code)
    if stats.total:
        ctx.exit(ExitCode.FAILURE if apply_changes else ExitCode.WOULD_CHANGE)
