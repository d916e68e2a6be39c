"""Tests for the ``config`` command."""

import json
from pathlib import Path

from click.testing import CliRunner

from commontypes.cli import cli
from tests.conftest import write_config


class TestConfigCommand:
    def test_defaults(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "config"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert data["clock"] == {"fixed_now": None, "offset": "+00:00"}
        assert data["output"] == {"date_format": None, "instant_format": None}
        assert data["config_path"] is None
        assert data["config_source"] == "none"

    def test_discovered_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = write_config(tmp_path, '[clock]\noffset = "+02:00"\n')
        result = cli_runner.invoke(cli, ["--json", "config"])
        data = json.loads(result.output)["data"]
        assert data["clock"]["offset"] == "+02:00"
        assert Path(data["config_path"]).resolve() == path.resolve()
        assert data["config_source"] == "walk-up"

    def test_now_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--now", "2020-01-06T12:00:00+02:00", "--json", "config"])
        data = json.loads(result.output)["data"]
        assert data["clock"]["fixed_now"] == "2020-01-06T10:00:00+00:00"

    def test_explicit_config_flag(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        custom = tmp_path / "other.toml"
        custom.write_text('[output]\ndate_format = "%d/%m/%Y"\n')
        result = cli_runner.invoke(cli, ["-c", str(custom), "--json", "config"])
        data = json.loads(result.output)["data"]
        assert data["output"]["date_format"] == "%d/%m/%Y"
        assert data["config_source"] == "flag"

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["config"])
        assert result.exit_code == 0
        assert "OK" in result.output
        assert "config_path: None" in result.output
