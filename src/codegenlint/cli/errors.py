# topmark:header:start
#
#   project      : CodegenLint
#   file         : errors.py
#   file_relpath : src/codegenlint/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Exceptions for the CodegenLint CLI.

Each class carries the `ExitCode` Click exits with. `show()` prefers the
project console stored on the Click context and falls back to Click's own
error display.
"""

from __future__ import annotations

from typing import IO, Any

import click

from codegenlint.cli.exit_codes import ExitCode
from codegenlint.errors import (
    CodegenLintError,
    ConfigError,
    DocumentReadError,
    DocumentWriteError,
    PresetRegistryError,
    UnsupportedFileTypeError,
)


class CodegenLintCliError(click.ClickException):
    """Base class for all CodegenLint CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colored in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class CliUsageError(CodegenLintCliError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class CliConfigError(CodegenLintCliError):
    """Missing, invalid or malformed configuration (including preset modules)."""

    exit_code = ExitCode.CONFIG_ERROR


class CliIOError(CodegenLintCliError):
    """A document could not be read or written."""

    exit_code = ExitCode.IO_ERROR


class CliEncodingError(CodegenLintCliError):
    """A document could not be decoded as UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR


class CliUnsupportedFileTypeError(CodegenLintCliError):
    """No marker syntax is registered for a file named on the command line."""

    exit_code = ExitCode.UNSUPPORTED_FILE_TYPE


def exit_code_for(exc: CodegenLintError) -> ExitCode:
    """Return the exit code the CLI uses for a host-layer error."""
    if isinstance(exc, (ConfigError, PresetRegistryError)):
        return ExitCode.CONFIG_ERROR
    if isinstance(exc, UnsupportedFileTypeError):
        return ExitCode.UNSUPPORTED_FILE_TYPE
    if isinstance(exc, DocumentReadError) and isinstance(exc.__cause__, UnicodeDecodeError):
        return ExitCode.ENCODING_ERROR
    if isinstance(exc, DocumentReadError) and isinstance(exc.__cause__, FileNotFoundError):
        return ExitCode.FILE_NOT_FOUND
    if isinstance(exc, (DocumentReadError, DocumentWriteError)):
        if isinstance(exc.__cause__, PermissionError):
            return ExitCode.PERMISSION_DENIED
        return ExitCode.IO_ERROR
    return ExitCode.FAILURE
