"""Shared fixtures for CLI tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from typer.testing import CliRunner

from cloudstore.cli import app, state

if TYPE_CHECKING:
    from click.testing import Result


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_state():
    yield
    state.json_output = False


def invoke(runner: CliRunner, args: list[str], env: dict[str, str] | None = None) -> "Result":
    """Invoke the CLI with only the given CLOUDSTORE_* variables set."""
    result = runner.invoke(app, args, env=env, catch_exceptions=False)
    return result
