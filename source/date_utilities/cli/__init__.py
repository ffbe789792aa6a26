"""This module initializes the CLI application."""

import click
from date_utilities.cli.config import config_group
from date_utilities.cli.date import format_command, parse_command, patterns_command
from date_utilities.providers.logging import LoggingProvider


def create_cli() -> click.Group:
    """Create and configure the main CLI group with all subcommands.

    Returns:
        The main Click command group for the application.
    """

    @click.group()
    @click.option(
        "--log-level",
        type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
        help="Override the default log level for this command.",
    )
    def cli(log_level: str | None) -> None:
        """Formats and parses dates with named or custom patterns.

        Args:
            log_level: The desired logging level.
        """
        LoggingProvider().get_logger(level_override=log_level)

    cli.add_command(format_command)
    cli.add_command(parse_command)
    cli.add_command(patterns_command)
    cli.add_command(config_group)

    return cli
