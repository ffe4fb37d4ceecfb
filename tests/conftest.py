# topmark:header:start
#
#   project      : SchemaMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the SchemaMark test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `schemamark.config.MutableRenderConfig` (mutable), then
      `freeze()` into a `schemamark.config.RenderConfig` for renderer and
      manager calls.
    - Do **not** mutate a frozen `RenderConfig`. If you need to tweak one,
      call `RenderConfig.thaw()`, edit the returned draft, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from schemamark.config import MutableRenderConfig, logging
from schemamark.core.entity import SchemaEntity

if TYPE_CHECKING:
    from pathlib import Path

    from schemamark.config import RenderConfig

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
mark_rendering: DecoratorType[Any] = as_typed_mark(pytest.mark.rendering)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_config: DecoratorType[Any] = as_typed_mark(pytest.mark.config)
mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


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


@pytest.fixture(autouse=True)
def silence_schemamark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure SchemaMark's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    SCHEMAMARK_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("SCHEMAMARK_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so renderer walks are visible on failures.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated, empty project directory.

    Config discovery looks at the working directory, so tests that must not pick
    up a ``schemamark.toml`` or ``pyproject.toml`` from the repository run here.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> RenderConfig:
    """Return a frozen `RenderConfig` built from defaults and overrides.

    Args:
        **overrides (Any): Keys accepted by `MutableRenderConfig.apply_overrides`.

    Returns:
        RenderConfig: The frozen configuration.
    """
    draft: MutableRenderConfig = MutableRenderConfig.from_defaults()
    draft.apply_overrides(overrides)
    return draft.freeze()


def person(name: str = "Ada Lovelace", **props: Any) -> SchemaEntity:
    """Return a ``Person`` entity named ``name`` with extra properties appended."""
    return SchemaEntity("Person", {"name": name, **props})
