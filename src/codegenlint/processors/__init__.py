# topmark:header:start
#
#   project      : CodegenLint
#   file         : __init__.py
#   file_relpath : src/codegenlint/processors/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Auto-import all processor modules in the current package."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path

from codegenlint.processors.base import DocumentProcessor, MarkerSyntax
from codegenlint.processors.registry import (
    get_processor_for_file,
    get_processor_registry,
    register_processor,
)

__all__ = [
    "DocumentProcessor",
    "MarkerSyntax",
    "get_processor_for_file",
    "get_processor_registry",
    "register_all_processors",
    "register_processor",
]


def register_all_processors() -> None:
    """Import every processor module so their decorators run (idempotent)."""
    package_dir = Path(__file__).parent
    for module_info in pkgutil.iter_modules([str(package_dir)]):
        if not module_info.ispkg:
            importlib.import_module(f"{__name__}.{module_info.name}")
