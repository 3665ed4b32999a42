# topmark:header:start
#
#   project      : CodegenLint
#   file         : registry.py
#   file_relpath : src/codegenlint/processors/registry.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Registry of document processors keyed by file extension.

Each processor class is instantiated once at registration time and shared by
all the extensions it is registered for.
"""

from __future__ import annotations

from pathlib import PurePath
from types import MappingProxyType
from typing import TYPE_CHECKING

from codegenlint.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from codegenlint.config.logging import CodegenLogger
    from codegenlint.processors.base import DocumentProcessor

logger: CodegenLogger = get_logger(__name__)


_registry: dict[str, DocumentProcessor] = {}


def _normalize_extension(extension: str) -> str:
    ext: str = extension.lower()
    return ext if ext.startswith(".") else f".{ext}"


def register_processor(
    *extensions: str,
) -> Callable[[type[DocumentProcessor]], type[DocumentProcessor]]:
    """Class decorator registering a processor for one or more file extensions.

    Args:
        *extensions (str): Extensions such as ``".ts"`` (the dot is optional).

    Returns:
        Callable[[type[DocumentProcessor]], type[DocumentProcessor]]: The decorator.

    Raises:
        ValueError: If no extension is given.
    """
    if not extensions:
        raise ValueError("register_processor() needs at least one extension")
    normalized: tuple[str, ...] = tuple(_normalize_extension(e) for e in extensions)

    def decorator(cls: type[DocumentProcessor]) -> type[DocumentProcessor]:
        """Instantiate ``cls`` and bind it to every extension.

        Raises:
            ValueError: If an extension already has a processor.
        """
        instance: DocumentProcessor = cls()
        for ext in normalized:
            if ext in _registry:
                raise ValueError(
                    f"Extension '{ext}' already has a registered processor: {_registry[ext]!r}"
                )
            logger.debug("Registering processor %s for extension %s", cls.__name__, ext)
            _registry[ext] = instance
        return cls

    return decorator


def get_processor_registry() -> Mapping[str, DocumentProcessor]:
    """Return a read-only view of extension -> processor."""
    return MappingProxyType(_registry)


def get_processor_for_file(filename: str | PurePath) -> DocumentProcessor | None:
    """Return the processor registered for the extension of ``filename``, if any."""
    ext: str = PurePath(filename).suffix.lower()
    processor: DocumentProcessor | None = _registry.get(ext)
    if processor is None:
        logger.debug("No processor registered for '%s' (extension %r)", filename, ext)
    return processor
