# topmark:header:start
#
#   project      : CodegenLint
#   file         : options.py
#   file_relpath : src/codegenlint/engine/options.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Parse the option payload embedded in a start marker.

The payload is everything captured after ``codegen:start`` and is read as a
single inline YAML document, e.g. ``{preset: exec, cmd: "echo hi"}``. Parsing
returns a typed result rather than raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

import yaml

from codegenlint.config.logging import CodegenLogger, get_logger

logger: CodegenLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class OptionsParsed:
    """Successfully parsed options (possibly empty)."""

    options: dict[str, Any] = field(default_factory=lambda: {})

    @property
    def preset(self) -> Any:
        """Return the declared preset name (None when absent)."""
        return self.options.get("preset")


@dataclass(frozen=True, slots=True)
class OptionsError:
    """Options could not be parsed; ``cause`` is a human-readable reason."""

    cause: str


OptionsResult = Union[OptionsParsed, OptionsError]


def parse_options(payload: str) -> OptionsResult:
    """Deserialize a start-marker payload.

    Args:
        payload (str): Captured payload text. Blank payloads yield empty options.

    Returns:
        OptionsResult: `OptionsParsed` with a mapping, or `OptionsError` with the cause.
    """
    try:
        value: Any = yaml.safe_load(payload)
    except (yaml.YAMLError, ValueError) as exc:
        # Out-of-range timestamps such as 2020-13-45 raise a plain ValueError.
        logger.debug("parse_options(): YAML error for %r: %s", payload, exc)
        return OptionsError(cause=str(exc))

    if value is None:
        return OptionsParsed()
    if not isinstance(value, dict):
        return OptionsError(cause=f"expected a mapping, got {type(value).__name__}: {value!r}")

    logger.trace("parse_options(): %r -> %r", payload, value)
    return OptionsParsed(options=dict(value))
