"""Shared test fixtures for querier."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
from typer.testing import CliRunner

from querier.cli.main import app
from querier.core.models import build


@pytest.fixture
def runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def cli_runner(runner):
    """Invoke the CLI app with the given arguments."""

    def invoke(*args: str, **kwargs):
        return runner.invoke(app, list(args), **kwargs)

    return invoke


@pytest.fixture
def temp_dir():
    """Temporary directory for test files."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def users_result():
    """Two users, the second with a NULL name."""
    return build(
        ["id", "name"],
        [(1, "alice"), (2, None)],
        statement="SELECT id, name FROM users",
    )

