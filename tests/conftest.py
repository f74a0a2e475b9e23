"""Pytest configuration for all tests."""

import pytest

from passwarden.core.config import Settings, get_settings
from passwarden.domain.services.dictionary_searcher import WordList

WORDS = [
    "apple",
    "pass",
    "passage",
    "password",
    "Secret",
    "sunshine",
    "drowssap",
    "dragon",
    "zebra",
]


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Make sure no test sees settings cached by another test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Default settings, isolated from any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def case_sensitive_words() -> WordList:
    """A small case-sensitive word list."""
    return WordList.from_words(WORDS, case_sensitive=True)


@pytest.fixture
def case_insensitive_words() -> WordList:
    """A small case-insensitive word list."""
    return WordList.from_words(WORDS, case_sensitive=False)
