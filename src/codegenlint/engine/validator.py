# topmark:header:start
#
#   project      : CodegenLint
#   file         : validator.py
#   file_relpath : src/codegenlint/engine/validator.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Validate the generated regions of one document.

This is the host integration boundary of the engine: it receives the full
text of a document plus its filename and returns the list of diagnostics. It
performs no I/O and never applies fixes.

Per accepted start marker, checks run in this order and stop at the first
failure:

    1. duplicate start marker
    2. missing end marker (fix: insert the end marker)
    3. option parsing
    4. preset lookup
    5. preset execution
    6. content comparison (fix: replace the content range)

A failure only affects its own span; all other spans are still validated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from codegenlint.config.logging import get_logger
from codegenlint.constants import LINE_SEPARATOR
from codegenlint.diagnostic.model import DiagnosticCode, DiagnosticLog, Fix, Position, Range
from codegenlint.engine.dispatch import (
    GenerationFailed,
    lookup_preset,
    run_preset,
    unknown_preset_message,
)
from codegenlint.engine.lexer import tokenize
from codegenlint.engine.matcher import ResolutionKind, resolve_spans
from codegenlint.engine.normalize import contents_match, normalize
from codegenlint.engine.options import OptionsError, parse_options
from codegenlint.engine.position import PositionError, position_at, range_at
from codegenlint.errors import UnsupportedFileTypeError
from codegenlint.presets import default_registry
from codegenlint.processors import get_processor_for_file, register_all_processors

if TYPE_CHECKING:
    from codegenlint.config.logging import CodegenLogger
    from codegenlint.diagnostic.model import Diagnostic
    from codegenlint.engine.dispatch import GenerationResult
    from codegenlint.engine.matcher import StartResolution
    from codegenlint.engine.options import OptionsResult
    from codegenlint.presets.registry import FrozenPresetRegistry, Preset
    from codegenlint.processors.base import DocumentProcessor, MarkerSyntax

logger: CodegenLogger = get_logger(__name__)

register_all_processors()


@dataclass(frozen=True)
class Document:
    """Immutable document handed to the engine.

    Attributes:
        text (str): Full document text.
        filename (str): Document name; its extension selects the marker syntax.
        newline (str): Line separator used for positions, normalization and fixes.
    """

    text: str
    filename: str
    newline: str = LINE_SEPARATOR


def _validate_start(
    source: str,
    *,
    filename: str,
    syntax: MarkerSyntax,
    registry: FrozenPresetRegistry,
    newline: str,
    resolution: StartResolution,
    log: DiagnosticLog,
) -> None:
    start = resolution.start
    start_pos: Position = position_at(source, start.offset, newline)
    start_loc = Range(start=start_pos, end=start_pos.shifted(len(start.text)))

    if resolution.kind is ResolutionKind.DUPLICATE:
        log.report(DiagnosticCode.DUPLICATE_START_MARKER, "duplicate start marker", start_loc)
        return

    if resolution.kind is ResolutionKind.MISSING_END:
        log.report(
            DiagnosticCode.MISSING_END_MARKER,
            f"couldn't find end marker (expected regex {syntax.end.pattern})",
            start_loc,
            fix=Fix(range=(start.end, start.end), replacement=newline + syntax.end_literal),
        )
        return

    span = resolution.span
    assert span is not None  # SPAN resolutions always carry a span

    parsed: OptionsResult = parse_options(start.payload)
    if isinstance(parsed, OptionsError):
        log.report(
            DiagnosticCode.INVALID_OPTIONS, f"Error parsing options. {parsed.cause}", start_loc
        )
        return

    preset: Preset | None = lookup_preset(parsed.preset, registry)
    if preset is None:
        log.report(
            DiagnosticCode.UNKNOWN_PRESET,
            unknown_preset_message(parsed.preset, registry),
            start_loc,
        )
        return

    existing_content: str = span.existing_content(source)
    result: GenerationResult = run_preset(
        preset,
        filename=filename,
        existing_content=existing_content,
        options=parsed.options,
    )
    if isinstance(result, GenerationFailed):
        log.report(DiagnosticCode.PRESET_FAILURE, result.message, start_loc)
        return

    expected: str = result.text
    if contents_match(existing_content, expected, newline):
        logger.trace("Span %s of %s is up to date", span.content_range, filename)
        return

    first, last = span.content_range
    replacement: str = normalize(expected, newline) + newline
    if span.inline:
        replacement = newline + replacement
    details: dict[str, str] = {"existing_content": existing_content, "expected": expected}
    log.report(
        DiagnosticCode.CONTENT_MISMATCH,
        f"content doesn't match {details!r}",
        range_at(source, first, last, newline),
        fix=Fix(range=span.content_range, replacement=replacement),
    )


def validate_source(
    source: str,
    *,
    filename: str,
    syntax: MarkerSyntax,
    registry: FrozenPresetRegistry,
    newline: str = LINE_SEPARATOR,
) -> list[Diagnostic]:
    """Validate every marker span of an already-unwrapped source text.

    Args:
        source (str): Text to scan.
        filename (str): Document name passed on to presets.
        syntax (MarkerSyntax): Marker patterns to use.
        registry (FrozenPresetRegistry): Presets available to the start markers.
        newline (str): Line separator of ``source``.

    Returns:
        list[Diagnostic]: Diagnostics in document order of their start markers.
    """
    log = DiagnosticLog()
    resolutions: list[StartResolution] = resolve_spans(
        source, tokenize(source, syntax), newline
    )
    logger.debug("%s: %d start marker(s)", filename, len(resolutions))

    for resolution in resolutions:
        try:
            _validate_start(
                source,
                filename=filename,
                syntax=syntax,
                registry=registry,
                newline=newline,
                resolution=resolution,
                log=log,
            )
        except PositionError as exc:
            logger.error(
                "%s: cannot locate marker at offset %d: %s",
                filename,
                resolution.start.offset,
                exc,
            )
            log.report(
                DiagnosticCode.PARSE_FAILURE, "Couldn't parse file", Position(line=1, column=0)
            )

    return list(log.freeze())


def validate(document: Document, registry: FrozenPresetRegistry | None = None) -> list[Diagnostic]:
    """Validate ``document`` with the processor registered for its extension.

    Args:
        document (Document): The document to validate.
        registry (FrozenPresetRegistry | None): Presets to dispatch to; defaults to
            the builtin presets.

    Returns:
        list[Diagnostic]: All diagnostics for the document.

    Raises:
        UnsupportedFileTypeError: If no processor handles the document's extension.
    """
    processor: DocumentProcessor | None = get_processor_for_file(document.filename)
    if processor is None:
        raise UnsupportedFileTypeError(document.filename)
    presets: FrozenPresetRegistry = registry if registry is not None else default_registry()

    groups: list[list[Diagnostic]] = [
        validate_source(
            processor.unwrap(block, document.newline),
            filename=document.filename,
            syntax=processor.syntax,
            registry=presets,
            newline=document.newline,
        )
        for block in processor.preprocess(document.text, document.newline)
    ]
    diagnostics: list[Diagnostic] = processor.postprocess(groups)
    logger.info("%s: %d diagnostic(s)", document.filename, len(diagnostics))
    return diagnostics


def validate_document(
    text: str,
    filename: str,
    *,
    registry: FrozenPresetRegistry | None = None,
    newline: str = LINE_SEPARATOR,
) -> list[Diagnostic]:
    """Shorthand for ``validate(Document(text, filename, newline), registry)``."""
    return validate(Document(text=text, filename=filename, newline=newline), registry)
