# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from click.testing import CliRunner

from kgadget_lib import __version__, cli


def test_cli_prints_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert result.stdout.strip() == __version__


def test_cli_without_command_prints_help():
    result = CliRunner().invoke(cli, [])

    assert result.exit_code == 0
    assert "process-collector" in result.stdout
    assert "socket-collector" in result.stdout


def test_cli_registers_collector_commands():
    assert set(cli.commands) == {"process-collector", "socket-collector"}


def test_process_collector_help_lists_option_groups():
    result = CliRunner().invoke(cli, ["process-collector", "--help"])

    assert result.exit_code == 0
    assert "--threads" in result.stdout
    assert "--output" in result.stdout
    assert "--input" in result.stdout
