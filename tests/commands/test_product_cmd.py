"""Tests for the product and config CLI commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from orderctl.cli import cli


@pytest.mark.usefixtures("_isolated_workdir")
class TestProductCreateCommand:
    def test_physical(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "product", "create", "FISICO", "Book", "75.90", "1.2"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["kind"] == "physical"
        assert data["data"]["weight"] == "1.2"
        assert data["data"]["price"] == "75.90"

    def test_digital_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["product", "create", "digital", "Antivirus Pro", "99.50", "http://example.com/key"]
        )
        assert result.exit_code == 0
        assert "Antivirus Pro" in result.stdout
        assert "http://example.com/key" in result.stdout

    def test_bad_weight_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "product", "create", "physical", "Book", "10", "heavy"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["weight"] == "0"
        assert len(data["warnings"]) == 1

    def test_unknown_kind(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "product", "create", "invalido", "X", "10.0"])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "INVALID_ARGUMENT"
        assert "invalido" in payload["error"]["message"]

    def test_bad_price(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["product", "create", "digital", "X", "free"])
        assert result.exit_code == 1
        assert "ERROR" in result.stderr

    @pytest.mark.parametrize("kind", ["[/x]", "[bold]gadget[/bold]"])
    def test_bracketed_kind_is_echoed_verbatim(self, cli_runner: CliRunner, kind: str) -> None:
        result = cli_runner.invoke(cli, ["product", "create", kind, "Book", "10"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert f"Unknown product kind: {kind}" in result.stderr

    def test_bracketed_kind_in_verbose_detail(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "product", "create", "[/x]", "Book", "10"])
        assert result.exit_code == 1
        assert "kind: [/x]" in result.stderr

    def test_bad_weight_warning_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["product", "create", "physical", "Book", "10", "heavy"])
        assert result.exit_code == 0
        assert "WARNING: Weight argument" in result.stderr
        assert "WARNING" not in result.stdout


@pytest.mark.usefixtures("_isolated_workdir")
class TestConfigCommands:
    def test_show_defaults(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "config", "show"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"] == {
            "max_items_per_order": 50,
            "default_currency": "BRL",
        }

    def test_set(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "config", "set", "--max-items", "10", "--currency", "USD"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["max_items_per_order"] == 10
        assert data["default_currency"] == "USD"

    def test_set_non_positive_ignored(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["config", "set", "--max-items", "0"])
        assert result.exit_code == 0
        assert "max_items_per_order: 50" in result.stdout
        assert "WARNING" in result.stderr

    def test_set_reports_process_scope(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["config", "set", "--currency", "USD"])
        assert result.exit_code == 0
        assert "not saved" in result.stdout

    def test_set_json_marks_not_persisted(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "config", "set", "--currency", "USD"])
        assert json.loads(result.stdout)["meta"] == {"persisted": False}

    def test_set_help_points_to_persistent_sources(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["config", "set", "--help"])
        assert result.exit_code == 0
        assert "orderctl.toml" in result.output
        assert "ORDERCTL_ORDERS__DEFAULT_CURRENCY" in result.output
