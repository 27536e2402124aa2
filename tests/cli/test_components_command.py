"""Tests for the components command and the root group."""

import json

from stitch import __version__
from stitch.core.types import ComponentType


class TestComponentsCommand:
    """Tests for stitch components."""

    def test_table(self, runner, cli):
        """Every kind is listed in a table."""
        result = runner.invoke(cli, ["components"])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0].split() == ["TYPE", "NAME", "CATEGORY", "OUTPUTS"]
        for kind in ComponentType:
            assert kind.value in result.stdout

    def test_category_filter(self, runner, cli):
        """--category limits the listing, case-insensitively."""
        result = runner.invoke(cli, ["components", "--category", "authentication", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [d["type"] for d in data] == ["BEARER_AUTH", "BASIC_AUTH", "API_KEY_AUTH"]

    def test_json(self, runner, cli):
        """--json lists definitions with their ports."""
        result = runner.invoke(cli, ["components", "--json"])
        data = {d["type"]: d for d in json.loads(result.stdout)}
        assert data["POST_REQUEST"]["outputs"] == ["response", "status", "body", "id"]
        assert data["VARIABLE_EXTRACTOR"]["inputs"] == ["response"]

    def test_unknown_category(self, runner, cli):
        """Unknown categories are a usage error."""
        result = runner.invoke(cli, ["components", "--category", "MISC"])
        assert result.exit_code == 2


class TestRootGroup:
    """Tests for the root command group."""

    def test_version(self, runner, cli):
        """--version prints the package version."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_log_level_passed_to_logging(self, runner, cli, flow_file, monkeypatch):
        """--log-level overrides the configured level."""
        from stitch.frontends.cli import root

        calls = []
        monkeypatch.setattr(root, "configure_logging", lambda **kwargs: calls.append(kwargs))
        result = runner.invoke(cli, ["--log-level", "DEBUG", "validate", str(flow_file)])
        assert result.exit_code == 0
        assert calls[0]["level"] == "DEBUG"
