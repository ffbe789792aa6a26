"""Unit tests for the main CLI entry point."""

from unittest.mock import patch

from click.testing import CliRunner


def test_cli_group_invoked_without_command() -> None:
    """Tests that invoking the CLI without a command shows usage and exits."""
    from date_utilities.cli.__main__ import cli

    runner = CliRunner()
    result = runner.invoke(cli)
    assert result.exit_code != 0
    assert "Usage:" in result.output


def test_cli_group_help() -> None:
    """Tests that the --help option lists the commands."""
    from date_utilities.cli.__main__ import cli

    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "Formats and parses dates with named or custom patterns." in result.output
    for command in ("format", "parse", "patterns", "config"):
        assert command in result.output


def test_main_invokes_cli() -> None:
    """
    Tests that the main function calls the cli.
    """
    from date_utilities.cli.__main__ import main

    with patch("date_utilities.cli.__main__.cli") as mock_cli:
        main()
        mock_cli.assert_called_once()
