# topmark:header:start
#
#   project      : CodegenLint
#   file         : slash.py
#   file_relpath : src/codegenlint/processors/slash.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Processor for files using ``//`` line comments (JavaScript/TypeScript family).

Markers::

    // codegen:start {preset: exec, cmd: "echo hi"}
    hi
    // codegen:end
"""

from __future__ import annotations

from codegenlint.processors.base import DocumentProcessor, MarkerSyntax
from codegenlint.processors.registry import register_processor


@register_processor(".ts", ".js", ".tsx", ".jsx", ".mts", ".cts", ".mjs", ".cjs")
class SlashProcessor(DocumentProcessor):
    """Processor for C-style ``//`` line-comment markers."""

    name = "slash"
    description = "// codegen:start ... // codegen:end"
    syntax = MarkerSyntax.compile(r"// codegen:start ?(.*)", r"// codegen:end")
