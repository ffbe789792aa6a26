"""This module defines the configuration management for the package.

It uses Pydantic's BaseSettings to create a strongly-typed configuration
class that reads from environment variables and .env files.
"""

from babel import Locale, UnknownLocaleError
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_locale(identifier: str) -> Locale:
    """Parses a locale identifier written with either `_` or `-` separators.

    Args:
        identifier: The locale identifier, e.g. ``en_US`` or ``pt-BR``.

    Returns:
        The babel Locale for the identifier.
    """
    return Locale.parse(identifier, sep="-" if "-" in identifier else "_")


class Config(BaseSettings):
    """A Pydantic model for managing the package settings.

    It automatically loads configuration from environment variables and .env files.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = "INFO"

    DATE_LOCALE: str = "en_US"

    @field_validator("DATE_LOCALE")
    @classmethod
    def validate_date_locale(cls, value: str) -> str:
        """Ensures the configured locale is known to babel.

        Args:
            value: The locale identifier, e.g. ``en_US`` or ``pt-BR``.

        Returns:
            The locale identifier, unchanged.

        Raises:
            ValueError: If babel has no data for the identifier.
        """
        try:
            parse_locale(value)
        except (UnknownLocaleError, ValueError) as e:
            raise ValueError(f"Unknown locale: {value!r}") from e
        return value


class ConfigProvider:
    """A provider class that acts as a factory for the package configuration.

    It does not hold state but provides a method to create fresh config instances.
    """

    @staticmethod
    def get_config() -> Config:
        """Factory method that instantiates and returns a new Config object.

        Returns:
            A new, validated Config object.
        """
        return Config()
