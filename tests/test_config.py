"""Tests for settings loading."""

import pytest

from stitch.config import Settings, load_settings

ENV_NAMES = ("STITCH_LOG_LEVEL", "STITCH_LOG_FORMAT", "STITCH_LOG_FILE", "STITCH_STRICT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run each test in an empty directory with no stitch variables set."""
    for name in ENV_NAMES:
        # setenv first so values a .env file loads are removed afterwards
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self, tmp_path):
        """With nothing configured, defaults apply."""
        (tmp_path / "pyproject.toml").write_text("")
        assert load_settings() == Settings()

    def test_environment(self, monkeypatch):
        """Environment variables are read and normalized."""
        monkeypatch.setenv("STITCH_LOG_LEVEL", "debug")
        monkeypatch.setenv("STITCH_LOG_FORMAT", "JSON")
        monkeypatch.setenv("STITCH_LOG_FILE", "/tmp/stitch.log")
        monkeypatch.setenv("STITCH_STRICT", "yes")
        settings = load_settings(env_file="/nonexistent/.env")
        assert settings == Settings(
            log_level="DEBUG", log_format="json", log_file="/tmp/stitch.log", strict=True
        )

    def test_unknown_format_is_text(self, monkeypatch):
        """Anything but json means text."""
        monkeypatch.setenv("STITCH_LOG_FORMAT", "xml")
        assert load_settings(env_file="/nonexistent/.env").log_format == "text"

    @pytest.mark.parametrize(
        "value, expected", [("1", True), ("on", True), ("0", False), ("", False)]
    )
    def test_strict_values(self, monkeypatch, value, expected):
        """STITCH_STRICT accepts the usual truthy spellings."""
        monkeypatch.setenv("STITCH_STRICT", value)
        assert load_settings(env_file="/nonexistent/.env").strict is expected

    def test_env_file(self, tmp_path):
        """A .env file in the working directory is loaded."""
        (tmp_path / ".env").write_text("STITCH_LOG_LEVEL=WARNING\nSTITCH_STRICT=true\n")
        settings = load_settings()
        assert settings.log_level == "WARNING"
        assert settings.strict is True

    def test_env_file_does_not_override(self, monkeypatch, tmp_path):
        """Variables already set win over the .env file."""
        monkeypatch.setenv("STITCH_LOG_LEVEL", "ERROR")
        env_file = tmp_path / "custom.env"
        env_file.write_text("STITCH_LOG_LEVEL=DEBUG\n")
        assert load_settings(env_file=env_file).log_level == "ERROR"

    def test_search_stops_at_project_root(self, tmp_path, monkeypatch):
        """.env files above the project root are not read."""
        (tmp_path / ".env").write_text("STITCH_LOG_LEVEL=CRITICAL\n")
        project = tmp_path / "project"
        project.mkdir()
        (project / "pyproject.toml").write_text("")
        monkeypatch.chdir(project)
        assert load_settings().log_level == "INFO"
