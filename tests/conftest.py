"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from ipnorm.cli import cli


@pytest.fixture(autouse=True)
def clear_log_env(monkeypatch):
    """Keep a developer's IPNORM_LOG from leaking into tests."""
    monkeypatch.delenv("IPNORM_LOG", raising=False)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["parse", "10.0.0.1:80"])
        result = invoke(["parse"], input_data="10.0.0.1\\n[::1]:22\\n")
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def sample_inputs():
    """Provide endpoint lines as they might appear in a config dump."""
    return "10.0.0.1\n\n  tcp6:[::1]:22  \n"
