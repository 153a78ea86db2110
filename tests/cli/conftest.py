"""Shared fixtures for CLI tests."""

import pytest
from typer.testing import CliRunner

import cli.cli


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Keep the CLI from re-pointing loguru at the runner's output streams."""
    monkeypatch.setattr(cli.cli, "setup_logger", lambda **_kwargs: None)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
