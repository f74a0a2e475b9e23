"""Tests for settings loading and validation."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from passwarden.core.config import Settings, get_settings


def test_settings_defaults():
    """Test that settings load with correct defaults."""
    settings = Settings(_env_file=None)

    assert settings.app_name == "Passwarden"
    assert settings.environment == "development"
    assert settings.min_length == 8
    assert settings.max_length == 64
    assert settings.sequence_length == 5
    assert settings.repeat_length == 4
    assert settings.dictionary_case_sensitive is False
    assert settings.dictionary_match_backwards is True
    assert settings.is_development is True
    assert settings.is_production is False
    assert settings.is_testing is False


def test_settings_env_override():
    """Test that environment variables override defaults."""
    with patch.dict(os.environ, {
        "PASSWARDEN_ENVIRONMENT": "production",
        "PASSWARDEN_MIN_LENGTH": "12",
        "PASSWARDEN_SEQUENCE_LENGTH": "4",
        "PASSWARDEN_DICTIONARY_CASE_SENSITIVE": "true",
    }):
        settings = Settings(_env_file=None)

        assert settings.is_production is True
        assert settings.min_length == 12
        assert settings.sequence_length == 4
        assert settings.dictionary_case_sensitive is True


def test_min_length_above_max_length_rejected():
    """Test that inverted length bounds fail at load time."""
    with pytest.raises(ValidationError) as exc_info:
        Settings(_env_file=None, min_length=20, max_length=10)
    assert "min_length" in str(exc_info.value)


def test_short_sequence_length_rejected():
    """Test that sequence lengths below 3 are rejected."""
    with pytest.raises(ValidationError):
        Settings(_env_file=None, sequence_length=2)


def test_short_repeat_length_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, repeat_length=1)


def test_settings_are_immutable():
    """Test that settings cannot be changed after loading."""
    settings = Settings(_env_file=None)
    with pytest.raises(ValidationError):
        settings.min_length = 4


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
