# topmark:header:start
#
#   project      : MarkOut
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the MarkOut test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, ensuring consistent and verbose logging output during testing.

Notes:
    Writer tests should go through `render()` (or the `serializer` fixture) so
    they exercise the same bind/replay/reset path as production code, instead
    of instantiating writers and sinks by hand.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from markout.config import logging
from markout.serializer import Serializer

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from markout.core.events import DocumentEvent

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
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


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_markout_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure MarkOut's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    MARKOUT_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE so writer event logging is exercised by every test.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@fixture()
def serializer() -> Serializer:
    """Return a fresh dispatcher."""
    return Serializer()


def render(
    events: Iterable[DocumentEvent],
    properties: Mapping[str, Any] | None = None,
    *,
    serializer: Serializer | None = None,
) -> str:
    """Serialize ``events`` into a string and reset the dispatcher afterwards.

    Args:
        events (Iterable[DocumentEvent]): The events to replay.
        properties (Mapping[str, Any] | None): Output properties.
        serializer (Serializer | None): Dispatcher to use; a fresh one by default.

    Returns:
        str: Everything the writer wrote.
    """
    ser: Serializer = serializer or Serializer()
    out = io.StringIO()
    try:
        ser.serialize(events, out, properties)
    finally:
        ser.reset()
    return out.getvalue()
