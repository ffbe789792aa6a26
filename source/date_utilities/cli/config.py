"""This module defines the 'config' command group for the date-utilities CLI."""

import click
from date_utilities.providers.config import ConfigProvider


@click.group("config")
def config_group() -> None:
    """Groups commands related to configuration."""
    pass


@config_group.command("show")
def show() -> None:
    """Shows the effective configuration values."""
    config = ConfigProvider.get_config()
    for key, value in config.model_dump().items():
        click.echo(f"{key}: {value}")
