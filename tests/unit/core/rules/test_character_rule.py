"""Unit tests for character class rules."""

import pytest

from passwarden.core.rules import (
    DIGIT,
    LOWERCASE,
    SPECIAL,
    UPPERCASE,
    CharacterCharacteristicsRule,
    CharacterRule,
    RuleConfigurationError,
)
from passwarden.core.rules.character import CYRILLIC_UPPERCASE, GERMAN_LOWERCASE
from passwarden.domain.entities import CountCategory, PasswordData


def characteristics_rule(required: int = 3, **kwargs) -> CharacterCharacteristicsRule:
    return CharacterCharacteristicsRule(
        [
            CharacterRule.of(LOWERCASE),
            CharacterRule.of(UPPERCASE),
            CharacterRule.of(DIGIT),
            CharacterRule.of(SPECIAL),
        ],
        required=required,
        **kwargs,
    )


class TestCharacterData:
    """Test suite for CharacterData catalogs."""

    def test_count(self):
        assert DIGIT.count("a1b22") == 3

    def test_matching_stops_at_limit(self):
        assert UPPERCASE.matching("AbCdEf", 2) == "AC"

    def test_special_covers_latin1_and_currency_symbols(self):
        assert SPECIAL.count("!§€") == 3

    def test_localized_catalogs(self):
        assert GERMAN_LOWERCASE.count("straße") == 6
        assert CYRILLIC_UPPERCASE.count("ПРИВЕТ") == 6


class TestCharacterRule:
    """Test suite for CharacterRule."""

    def test_minimum_met(self):
        result = CharacterRule.of(DIGIT, 2).evaluate(PasswordData("ab12"))
        assert result.valid is True
        assert result.metadata[CountCategory.DIGIT] == 2

    def test_minimum_unmet(self):
        result = CharacterRule.of(DIGIT, 2).evaluate(PasswordData("abc1"))

        assert result.message_keys == ["INSUFFICIENT_DIGIT"]
        params = result.details[0].parameters
        assert params["minimum_required"] == 2
        assert params["matching_character_count"] == 1
        assert params["matching_characters"] == "1"
        assert params["valid_characters"] == "0123456789"

    def test_details_follow_configuration_order(self):
        rule = CharacterRule({UPPERCASE: 1, DIGIT: 1})
        result = rule.evaluate(PasswordData("abc"))
        assert result.message_keys == ["INSUFFICIENT_UPPERCASE", "INSUFFICIENT_DIGIT"]

    def test_empty_configuration_rejected(self):
        with pytest.raises(RuleConfigurationError):
            CharacterRule({})

    def test_zero_minimum_rejected(self):
        with pytest.raises(RuleConfigurationError):
            CharacterRule.of(DIGIT, 0)


class TestCharacterCharacteristicsRule:
    """Test suite for CharacterCharacteristicsRule."""

    def test_enough_characteristics(self):
        result = characteristics_rule(3).evaluate(PasswordData("Passw0rd"))
        assert result.valid is True
        assert result.details == ()

    def test_summary_detail_comes_first(self):
        result = characteristics_rule(3).evaluate(PasswordData("password"))

        assert result.valid is False
        assert result.message_keys == [
            "INSUFFICIENT_CHARACTERISTICS",
            "INSUFFICIENT_UPPERCASE",
            "INSUFFICIENT_DIGIT",
            "INSUFFICIENT_SPECIAL",
        ]
        assert dict(result.details[0].parameters) == {
            "success_count": 1,
            "minimum_required": 3,
            "rule_count": 4,
        }

    def test_child_failures_can_be_suppressed(self):
        rule = characteristics_rule(3, report_rule_failures=False)
        result = rule.evaluate(PasswordData("password"))
        assert result.message_keys == ["INSUFFICIENT_CHARACTERISTICS"]

    def test_summary_can_be_suppressed(self):
        rule = characteristics_rule(4, report_failure=False)
        result = rule.evaluate(PasswordData("Passw0rd"))
        assert result.valid is False
        assert result.message_keys == ["INSUFFICIENT_SPECIAL"]

    def test_metadata_collects_counts(self):
        result = characteristics_rule(1).evaluate(PasswordData("Ab1!x"))
        assert result.metadata[CountCategory.LOWERCASE] == 2
        assert result.metadata[CountCategory.UPPERCASE] == 1
        assert result.metadata[CountCategory.DIGIT] == 1
        assert result.metadata[CountCategory.SPECIAL] == 1

    @pytest.mark.parametrize("required", [0, 5])
    def test_required_out_of_range(self, required):
        with pytest.raises(RuleConfigurationError) as exc_info:
            characteristics_rule(required)
        assert exc_info.value.option == "required"
