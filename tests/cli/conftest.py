"""Fixtures for CLI tests."""

import pytest
from click.testing import CliRunner

from stitch.config import Settings
from stitch.frontends.cli import root


@pytest.fixture
def settings():
    """Settings the root group sees; tests may replace them."""
    return Settings()


@pytest.fixture
def runner(monkeypatch, settings):
    """CLI runner with settings pinned and logging left alone."""
    monkeypatch.setattr(root, "load_settings", lambda: settings)
    monkeypatch.setattr(root, "configure_logging", lambda **kwargs: None)
    return CliRunner()


@pytest.fixture
def cli():
    return root.cli
