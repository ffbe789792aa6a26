"""This module contains shared fixtures for all unit tests."""

from collections.abc import Generator
from logging import NOTSET, getLogger

import pytest
from date_utilities.providers.date import DateFormatter
from date_utilities.providers.logging import LOGGER_NAME, LoggingProvider
from date_utilities.providers.pattern import compile_pattern


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Gives every test default settings and freshly created singletons.

    Environment overrides of the settings are removed so the defaults
    (``INFO`` logging, ``en_US`` locale) apply, and the formatter and logging
    singletons are discarded before and after the test.
    """
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DATE_LOCALE", raising=False)
    _reset_singletons()
    yield
    _reset_singletons()


def _reset_singletons() -> None:
    """Drops the cached formatter, logger and compiled patterns."""
    DateFormatter._instance = None
    LoggingProvider._instance = None
    compile_pattern.cache_clear()
    logger = getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(NOTSET)
