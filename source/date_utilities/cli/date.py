"""This module defines the format and parse commands of the date-utilities CLI."""

from datetime import datetime

import click
from date_utilities.exceptions.date import DateFormatterError
from date_utilities.providers.date import DateFormatter, FormatPattern
from date_utilities.providers.logging import LoggingProvider

pattern_option = click.option(
    "--pattern",
    "pattern_name",
    type=click.Choice([member.name for member in FormatPattern], case_sensitive=False),
    default=FormatPattern.DEFAULT.name,
    show_default=True,
    help="The named pattern to use.",
)
custom_option = click.option(
    "--custom",
    "custom_pattern",
    help="A custom pattern string, e.g. 'yyyy/MM/dd HH:mm'. Takes precedence over --pattern.",
)


def _selected_pattern(pattern_name: str, custom_pattern: str | None) -> FormatPattern | str:
    """Returns the custom pattern when given, otherwise the named one.

    Args:
        pattern_name: The name of a FormatPattern member.
        custom_pattern: A custom pattern string, if any.

    Returns:
        The pattern to hand to the formatter.
    """
    if custom_pattern is not None:
        return custom_pattern
    return FormatPattern[pattern_name.upper()]


@click.command("format")
@click.argument("value")
@pattern_option
@custom_option
def format_command(value: str, pattern_name: str, custom_pattern: str | None) -> None:
    """Formats an ISO 8601 date and time with a pattern.

    Args:
        value: The date and time to format, e.g. 2017-04-19T09:05:00.
        pattern_name: The name of a FormatPattern member.
        custom_pattern: A custom pattern string, if any.
    """
    logger = LoggingProvider().get_logger()
    try:
        moment = datetime.fromisoformat(value)
    except ValueError as e:
        raise click.BadParameter(f"{value!r} is not an ISO 8601 date and time.", param_hint="VALUE") from e

    pattern = _selected_pattern(pattern_name, custom_pattern)
    logger.debug(f"Formatting {moment.isoformat()} with pattern {str(pattern)!r}")
    try:
        click.echo(DateFormatter.get_instance().format(moment, pattern))
    except DateFormatterError as e:
        click.secho(f"An error occurred: {e}", fg="red")
        raise click.Abort()


@click.command("parse")
@click.argument("text")
@pattern_option
@custom_option
def parse_command(text: str, pattern_name: str, custom_pattern: str | None) -> None:
    """Parses a date and time with a pattern and prints it in ISO 8601.

    Args:
        text: The text to parse, e.g. "Apr 19 2017 09:05".
        pattern_name: The name of a FormatPattern member.
        custom_pattern: A custom pattern string, if any.
    """
    logger = LoggingProvider().get_logger()
    pattern = _selected_pattern(pattern_name, custom_pattern)
    logger.debug(f"Parsing {text!r} with pattern {str(pattern)!r}")
    try:
        click.echo(DateFormatter.get_instance().parse(text, pattern).isoformat())
    except DateFormatterError as e:
        click.secho(f"An error occurred: {e}", fg="red")
        raise click.Abort()


@click.command("patterns")
def patterns_command() -> None:
    """Lists the named patterns."""
    for member in FormatPattern:
        click.echo(f"{member.name}: {member.pattern}")
