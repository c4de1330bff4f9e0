"""Tests for the root orderctl CLI."""

import pytest
from click.testing import CliRunner

from orderctl import __version__
from orderctl.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "orderctl" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_workdir")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


@pytest.mark.parametrize("group", ["product", "order", "config"])
def test_groups_registered(cli_runner: CliRunner, group: str) -> None:
    result = cli_runner.invoke(cli, [group, "--help"])
    assert result.exit_code == 0


@pytest.mark.usefixtures("_isolated_workdir")
@pytest.mark.parametrize(
    "args",
    [
        ["product", "--examples"],
        ["product", "create", "--examples"],
        ["order", "build", "--examples"],
        ["config", "set", "--examples"],
    ],
)
def test_examples_flag(cli_runner: CliRunner, args: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    assert "orderctl" in result.output
