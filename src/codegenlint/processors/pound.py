# topmark:header:start
#
#   project      : CodegenLint
#   file         : pound.py
#   file_relpath : src/codegenlint/processors/pound.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Processor for files using ``#`` line comments (Python, shell, YAML, TOML)."""

from __future__ import annotations

from codegenlint.processors.base import DocumentProcessor, MarkerSyntax
from codegenlint.processors.registry import register_processor


@register_processor(".py", ".pyi", ".sh", ".bash", ".yaml", ".yml", ".toml")
class PoundProcessor(DocumentProcessor):
    """Processor for ``#`` line-comment markers."""

    name = "pound"
    description = "# codegen:start ... # codegen:end"
    syntax = MarkerSyntax.compile(r"# codegen:start ?(.*)", r"# codegen:end")
