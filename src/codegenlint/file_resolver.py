# topmark:header:start
#
#   project      : CodegenLint
#   file         : file_resolver.py
#   file_relpath : src/codegenlint/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Resolve the documents to check from CLI paths and config filters.

Directories are walked recursively and only files with a registered marker
syntax are kept from them; files named explicitly are always kept so the
caller can report unsupported types. Include patterns (if any) intersect the
candidate set, exclude patterns subtract from it. Patterns use gitignore
semantics (`pathspec`) relative to the workspace root. The result is sorted.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from codegenlint.config.logging import get_logger
from codegenlint.processors import get_processor_for_file, register_all_processors

if TYPE_CHECKING:
    from collections.abc import Iterable

    from codegenlint.config import Config
    from codegenlint.config.logging import CodegenLogger

logger: CodegenLogger = get_logger(__name__)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def is_supported(path: Path) -> bool:
    """Return True if a marker syntax is registered for ``path``'s extension."""
    return get_processor_for_file(path.name) is not None


def resolve_file_list(
    paths: Iterable[str | Path],
    config: Config,
    *,
    root: Path | None = None,
) -> list[Path]:
    """Return the sorted list of documents to check.

    Args:
        paths (Iterable[str | Path]): Files and directories given by the user.
        config (Config): Supplies include/exclude patterns.
        root (Path | None): Base for pattern matching (CWD if None).

    Returns:
        list[Path]: Files selected for processing.
    """
    register_all_processors()
    workspace_root: Path = root or Path.cwd()

    candidates: set[Path] = set()
    explicit: set[Path] = set()
    for raw in paths:
        p = Path(raw)
        if p.is_dir():
            candidates.update(f for f in p.rglob("*") if f.is_file() and is_supported(f))
        elif p.is_file():
            candidates.add(p)
            explicit.add(p)
        else:
            logger.warning("No such file or directory: %s", p)

    if config.include_patterns:
        include_spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, config.include_patterns)
        candidates = {
            p
            for p in candidates
            if p in explicit or include_spec.match_file(_rel_for_match(p, workspace_root))
        }

    if config.exclude_patterns:
        exclude_spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, config.exclude_patterns)
        candidates = {
            p
            for p in candidates
            if p in explicit or not exclude_spec.match_file(_rel_for_match(p, workspace_root))
        }

    logger.trace("Files to process: %d -- %s", len(candidates), sorted(candidates))
    return sorted(candidates)
