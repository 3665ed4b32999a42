# topmark:header:start
#
#   project      : CodegenLint
#   file         : errors.py
#   file_relpath : src/codegenlint/errors.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Exceptions raised by the CodegenLint host layer.

The validation engine itself never raises for document content; every
content problem becomes a diagnostic. These exceptions cover the layer
around it: configuration, the preset registry and file handling.
"""

from __future__ import annotations


class CodegenLintError(Exception):
    """Base class for all CodegenLint errors."""


class ConfigError(CodegenLintError):
    """Configuration file is missing, unreadable or malformed."""


class PresetRegistryError(CodegenLintError):
    """A preset could not be registered (bad name, not callable, duplicate, frozen)."""


class UnsupportedFileTypeError(CodegenLintError):
    """No marker syntax is registered for the file's extension."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"No codegen marker syntax registered for '{filename}'")
        self.filename = filename


class DocumentReadError(CodegenLintError):
    """A document could not be read or decoded."""


class DocumentWriteError(CodegenLintError):
    """A fixed document could not be written back."""


class PresetError(CodegenLintError):
    """Raised by a preset that cannot produce content; the message becomes the diagnostic."""
