# topmark:header:start
#
#   project      : CodegenLint
#   file         : builtins.py
#   file_relpath : src/codegenlint/presets/builtins.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Builtin presets.

Presets read their options from ``context.options``; paths are resolved
relative to the directory of the document being validated. A preset signals
failure by raising; the message is reported on the start marker.
"""

from __future__ import annotations

import importlib.util
import re
import shlex
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from codegenlint.config.logging import get_logger
from codegenlint.errors import PresetError
from codegenlint.presets.registry import register_preset

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from codegenlint.config.logging import CodegenLogger
    from codegenlint.presets.registry import PresetContext

logger: CodegenLogger = get_logger(__name__)

DEFAULT_EXEC_TIMEOUT: Final[float] = 30.0

_HEADING_RE: Final[re.Pattern[str]] = re.compile(r"^(#{1,6})\s+(.+?)(?:\s+#+)?\s*$")
_FENCE_RE: Final[re.Pattern[str]] = re.compile(r"^\s*(```|~~~)")
_ANCHOR_STRIP_RE: Final[re.Pattern[str]] = re.compile(r"[^\w\- ]")


def _option(
    options: Mapping[str, Any],
    key: str,
    kind: type | tuple[type, ...],
    default: Any = None,
) -> Any:
    """Return ``options[key]`` checked against ``kind``.

    Raises:
        PresetError: If the option is required and missing, or has the wrong type.
    """
    value: Any = options.get(key, default)
    if value is None:
        raise PresetError(f"option '{key}' is required")
    if not isinstance(value, kind) or isinstance(value, bool) and kind is not bool:
        kinds: tuple[type, ...] = kind if isinstance(kind, tuple) else (kind,)
        expected: str = " or ".join(k.__name__ for k in kinds)
        raise PresetError(f"option '{key}' must be {expected}, got {type(value).__name__}")
    return value


def _document_dir(context: PresetContext) -> Path:
    return Path(context.meta.filename).resolve().parent


@register_preset("empty")
def empty(context: PresetContext) -> str:
    """Always generate empty content."""
    return ""


@register_preset("exec")
def exec_command(context: PresetContext) -> str:
    """Run ``cmd`` (no shell) in the document's directory and use its stdout.

    Options:
        cmd (str | list[str]): Command line, split with `shlex` when a string.
        timeout (int | float): Seconds before the command is killed (default 30).
    """
    raw: Any = context.options.get("cmd")
    if isinstance(raw, str):
        argv: list[str] = shlex.split(raw)
    elif isinstance(raw, list) and all(isinstance(a, str) for a in raw):
        argv = list(raw)
    else:
        raise PresetError("option 'cmd' must be a string or a list of strings")
    if not argv:
        raise PresetError("option 'cmd' is empty")

    timeout: float = float(
        _option(context.options, "timeout", (int, float), DEFAULT_EXEC_TIMEOUT)
    )
    cwd: Path = _document_dir(context)
    if not cwd.is_dir():
        raise PresetError(f"document directory does not exist: {cwd}")
    logger.debug("exec preset: running %s (timeout=%ss)", argv, timeout)
    try:
        completed = subprocess.run(
            argv,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as exc:
        raise PresetError(f"command not found: {argv[0]}") from exc
    except subprocess.TimeoutExpired as exc:
        raise PresetError(f"command {raw!r} timed out after {timeout}s") from exc

    if completed.returncode != 0:
        raise PresetError(
            f"command {raw!r} exited with status {completed.returncode}: "
            f"{completed.stderr.strip()}"
        )
    return completed.stdout.strip()


@register_preset("copy")
def copy(context: PresetContext) -> str:
    """Copy the content of ``source`` (optionally lines ``start``..``end``, 1-based inclusive)."""
    source: str = _option(context.options, "source", str)
    path: Path = _document_dir(context) / source
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PresetError(f"cannot read '{source}': {exc}") from exc

    lines: list[str] = text.splitlines()
    first: int = _option(context.options, "start", int, 1)
    last: int = _option(context.options, "end", int, len(lines))
    if first < 1 or last < first - 1:
        raise PresetError(f"invalid line bounds start={first}, end={last}")
    return "\n".join(lines[first - 1 : last])


@register_preset("custom")
def custom(context: PresetContext) -> str:
    """Call the function ``export`` (default ``generate``) of the Python file ``source``."""
    source: str = _option(context.options, "source", str)
    export: str = _option(context.options, "export", str, "generate")
    path: Path = _document_dir(context) / source
    if not path.is_file():
        raise PresetError(f"custom preset source not found: {source}")

    spec = importlib.util.spec_from_file_location(f"_codegen_custom_{path.stem}", path)
    if spec is None or spec.loader is None:
        raise PresetError(f"cannot load custom preset source: {source}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    fn: Any = getattr(module, export, None)
    if not callable(fn):
        raise PresetError(f"'{source}' has no callable '{export}'")
    result: Any = fn(context)
    if not isinstance(result, str):
        raise PresetError(f"'{source}:{export}' returned {type(result).__name__}, expected str")
    return result


def _iter_headings(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(depth, title)`` for ATX headings outside fenced code blocks."""
    in_fence: bool = False
    for line in text.splitlines():
        if _FENCE_RE.match(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        m: re.Match[str] | None = _HEADING_RE.match(line)
        if m:
            yield len(m.group(1)), m.group(2)


def _anchor(title: str, seen: dict[str, int]) -> str:
    """Return the GitHub-style anchor for ``title``, de-duplicated via ``seen``."""
    slug: str = _ANCHOR_STRIP_RE.sub("", title.strip().lower()).replace(" ", "-")
    count: int = seen.get(slug, 0)
    seen[slug] = count + 1
    return slug if count == 0 else f"{slug}-{count}"


@register_preset("markdownTOC")
def markdown_toc(context: PresetContext) -> str:
    """Generate a table of contents from the document's own Markdown headings.

    The headings are read from the file at ``meta.filename`` on disk, not from
    the text being validated: in-memory content passed to `check_text` or
    `fix_text` is ignored, and the preset fails when the file does not exist.

    Options:
        minDepth (int): Shallowest heading level listed (default 1).
        maxDepth (int): Deepest heading level listed (default 6).
    """
    min_depth: int = _option(context.options, "minDepth", int, 1)
    max_depth: int = _option(context.options, "maxDepth", int, 6)
    try:
        text: str = Path(context.meta.filename).read_text(encoding="utf-8")
    except OSError as exc:
        raise PresetError(f"cannot read '{context.meta.filename}': {exc}") from exc

    seen: dict[str, int] = {}
    entries: list[str] = []
    for depth, title in _iter_headings(text):
        anchor: str = _anchor(title, seen)
        if min_depth <= depth <= max_depth:
            indent: str = "  " * (depth - min_depth)
            entries.append(f"{indent}- [{title}](#{anchor})")
    return "\n".join(entries)
