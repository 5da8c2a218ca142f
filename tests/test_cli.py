"""
Tests for CLI commands — configure, config check, and global options.
"""

import json
import textwrap
from pathlib import Path

from click.testing import CliRunner

from lombok_wiring.main import cli


def _make_build(tmp_path: Path) -> Path:
    """Create a build.yml without source directories.

    With no source directory on disk no lombok config query is run, so
    the commands do not need a Java installation.
    """
    content = textwrap.dedent("""\
        name: demo
        plugins:
          - java
          - io.freefair.lombok
        dependencies:
          annotationProcessor:
            - org.mapstruct:mapstruct-processor:1.4.1.Final
    """)
    config = tmp_path / "build.yml"
    config.write_text(content)
    return config


class TestCLIGlobal:
    """Tests for global CLI behavior."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Lombok" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestConfigureCommand:
    def test_configure(self, tmp_path: Path):
        config = _make_build(tmp_path)
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), "configure"])
        assert result.exit_code == 0
        assert "demo" in result.output
        assert "delombokTest" in result.output
        assert "lombok-mapstruct-binding:0.2.0" in result.output

    def test_configure_json(self, tmp_path: Path):
        config = _make_build(tmp_path)
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), "configure", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert [task["name"] for task in data["delombok_tasks"]] == ["delombok", "delombokTest"]
        assert "org.projectlombok:lombok-mapstruct-binding:0.2.0" in (
            data["dependencies"]["annotationProcessor"]
        )

    def test_configure_missing_config(self, tmp_path: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(tmp_path / "missing.yml"), "configure"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestConfigCheck:
    def test_valid(self, tmp_path: Path):
        config = _make_build(tmp_path)
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), "config", "check"])
        assert result.exit_code == 0
        assert "valid" in result.output

    def test_json(self, tmp_path: Path):
        config = _make_build(tmp_path)
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), "config", "check", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["valid"] is True
        assert data["plugin_count"] == 2

    def test_unknown_plugin(self, tmp_path: Path):
        config = tmp_path / "build.yml"
        config.write_text("name: demo\nplugins: [java, com.example.unknown]\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), "config", "check"])
        assert result.exit_code == 1
        assert "com.example.unknown" in result.output
