"""Shared fixtures for CLI tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
from typer.testing import CliRunner

from arraytable.cli import app

if TYPE_CHECKING:
    from click.testing import Result


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logger():
    """Undo the handler and propagation changes the --log-level callback makes."""
    logger = logging.getLogger("arraytable")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "ARRAYTABLE_CAPACITY",
        "ARRAYTABLE_GROWTH",
        "ARRAYTABLE_LOW",
        "ARRAYTABLE_FORMAT",
        "ARRAYTABLE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def invoke(runner: CliRunner, args: list[str], env: dict[str, str] | None = None) -> "Result":
    """Invoke the CLI without swallowing unexpected exceptions."""
    return runner.invoke(app, args, env=env, catch_exceptions=False)
