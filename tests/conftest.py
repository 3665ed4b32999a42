# topmark:header:start
#
#   project      : CodegenLint
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Pytest configuration for the CodegenLint test suite.

Sets up global fixtures, verbose logging for test runs and small helpers to
build preset registries without touching the builtin (subprocess/file based)
presets.

Notes:
    Engine tests pass ``newline="\\n"`` explicitly so results do not depend on
    the platform's line separator.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from codegenlint.config import logging
from codegenlint.presets import PresetRegistry

if TYPE_CHECKING:
    from codegenlint.presets import FrozenPresetRegistry, Preset, PresetContext

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def echo_preset(context: PresetContext) -> str:
    """Return the ``value`` option verbatim."""
    return str(context.options.get("value", ""))


def failing_preset(context: PresetContext) -> str:
    """Always fail."""
    raise RuntimeError(f"boom in {context.meta.filename}")


def make_registry(**presets: Preset) -> FrozenPresetRegistry:
    """Return a frozen registry holding exactly ``presets``.

    Args:
        **presets (Preset): Preset callables keyed by name.

    Returns:
        FrozenPresetRegistry: The frozen registry.
    """
    registry = PresetRegistry()
    registry.update(presets.items())
    return registry.freeze()


@pytest.fixture
def echo_registry() -> FrozenPresetRegistry:
    """Registry with an ``echo`` preset (returns ``value``) and a ``fail`` preset."""
    return make_registry(echo=echo_preset, fail=failing_preset)


@pytest.fixture(autouse=True)
def silence_codegenlint_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure CodegenLint's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("CODEGENLINT_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
