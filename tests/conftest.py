# topmark:header:start
#
#   project      : HoconRender
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the HoconRender test suite.

Notes:
    Tests should respect the immutable/mutable options split:

    - Build options with `hoconrender.config.options.MutableRenderOptions`
      (or `make_options`) and `freeze()` them before rendering.
    - Do **not** mutate a frozen `RenderOptions`. Use `RenderOptions.replace`
      or `thaw()` → edit → `freeze()`.
    - Most expectations are written with ``\\n``; use `make_options`, which
      defaults to `LineSeparator.LF`, so tests do not depend on the platform.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from hoconrender.config import logging
from hoconrender.config.options import LineSeparator, MutableRenderOptions, RenderOptions

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.mark.parametrize(*args, **kwargs))


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_hoconrender_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture used to scrub the environment.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE for all tests so layout decisions show up in failure output.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_mutable_options(**overrides: Any) -> MutableRenderOptions:
    """Return a builder with ``overrides`` set and LF line endings by default.

    Args:
        **overrides (Any): Field values applied to the builder.

    Returns:
        MutableRenderOptions: The builder, not yet frozen.
    """
    m = MutableRenderOptions(line_separator=LineSeparator.LF)
    for k, v in overrides.items():
        setattr(m, k, v)
    return m


def make_options(**overrides: Any) -> RenderOptions:
    """Return frozen options built from defaults, LF line endings and ``overrides``.

    Args:
        **overrides (Any): Field values applied before freezing.

    Returns:
        RenderOptions: An immutable options snapshot.
    """
    return make_mutable_options(**overrides).freeze()
