"""Integration tests for config commands."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from meshctl.app import app
from meshctl.config.manager import ConfigManager

runner = CliRunner()


def _patch_manager(tmp_path: Path):
    """Patch ConfigManager to use a temp config file."""
    config_path = tmp_path / "config.toml"
    return patch(
        "meshctl.commands.config_cmd._get_manager",
        return_value=ConfigManager(config_path=config_path),
    )


class TestConfigCommands:
    def test_list_empty(self, tmp_path: Path):
        with _patch_manager(tmp_path):
            result = runner.invoke(app, ["config", "list"])
            assert result.exit_code == 0
            assert "No profiles configured" in result.output

    def test_add_and_list(self, tmp_path: Path):
        with _patch_manager(tmp_path):
            result = runner.invoke(app, ["config", "add", "dev", "--url", "http://cp:5681", "--token", "secret"])
            assert result.exit_code == 0
            assert "added" in result.output

            result = runner.invoke(app, ["config", "list"])
            assert result.exit_code == 0
            assert "dev" in result.output
            assert "secret" not in result.output

    def test_list_json_hides_token(self, tmp_path: Path):
        with _patch_manager(tmp_path):
            runner.invoke(app, ["config", "add", "dev", "--url", "http://cp:5681", "--token", "secret"])
            result = runner.invoke(app, ["config", "list", "-f", "json"])
            assert result.exit_code == 0
            assert '"url": "http://cp:5681"' in result.output
            assert "secret" not in result.output

    def test_add_invalid_url(self, tmp_path: Path):
        with _patch_manager(tmp_path):
            result = runner.invoke(app, ["config", "add", "dev", "--url", "cp:5681"])
            assert result.exit_code == 1

    def test_use(self, tmp_path: Path):
        with _patch_manager(tmp_path):
            runner.invoke(app, ["config", "add", "a", "--url", "http://a:5681"])
            runner.invoke(app, ["config", "add", "b", "--url", "http://b:5681"])
            result = runner.invoke(app, ["config", "use", "b"])
            assert result.exit_code == 0
            assert "Default profile set to 'b'" in result.output

    def test_use_nonexistent(self, tmp_path: Path):
        with _patch_manager(tmp_path):
            result = runner.invoke(app, ["config", "use", "nope"])
            assert result.exit_code == 1
            assert "not found" in result.output

    def test_remove(self, tmp_path: Path):
        with _patch_manager(tmp_path):
            runner.invoke(app, ["config", "add", "dev", "--url", "http://cp:5681"])
            result = runner.invoke(app, ["config", "remove", "dev"])
            assert result.exit_code == 0
            assert "removed" in result.output

    def test_remove_nonexistent(self, tmp_path: Path):
        with _patch_manager(tmp_path):
            result = runner.invoke(app, ["config", "remove", "nope"])
            assert result.exit_code == 1


class TestGlobalOptions:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "meshctl" in result.output

    def test_invalid_log_level(self):
        result = runner.invoke(app, ["--log-level", "LOUD", "config", "list"])
        assert result.exit_code != 0
