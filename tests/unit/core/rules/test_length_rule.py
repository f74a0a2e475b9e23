"""Unit tests for LengthRule."""

import pytest

from passwarden.core.rules import LengthRule, RuleConfigurationError
from passwarden.domain.entities import CountCategory, PasswordData


class TestLengthRule:
    """Test suite for LengthRule."""

    def test_too_short(self):
        result = LengthRule(8, 20).evaluate(PasswordData("Secur3!"))

        assert result.valid is False
        assert len(result.details) == 1
        detail = result.details[0]
        assert detail.message_key == "TOO_SHORT"
        assert dict(detail.parameters) == {"min": 8, "max": 20, "actual": 7}

    def test_minimum_is_inclusive(self):
        result = LengthRule(8, 20).evaluate(PasswordData("Secur3!!"))
        assert result.valid is True
        assert result.details == ()

    def test_too_long(self):
        result = LengthRule(1, 4).evaluate(PasswordData("abcde"))
        assert result.message_keys == ["TOO_LONG"]
        assert result.details[0].parameters["actual"] == 5

    def test_length_metadata(self):
        result = LengthRule(1, 4).evaluate(PasswordData("abc"))
        assert result.metadata[CountCategory.LENGTH] == 3

    def test_exact_length(self):
        rule = LengthRule.exact(4)
        assert rule.evaluate(PasswordData("abcd")).valid is True
        assert rule.evaluate(PasswordData("abc")).valid is False
        assert rule.evaluate(PasswordData("abcde")).valid is False

    def test_default_accepts_empty_password(self):
        assert LengthRule().evaluate(PasswordData("")).valid is True

    def test_inverted_bounds_rejected(self):
        with pytest.raises(RuleConfigurationError) as exc_info:
            LengthRule(10, 5)
        assert exc_info.value.option == "max_length"

    def test_negative_minimum_rejected(self):
        with pytest.raises(ValueError):
            LengthRule(-1)
