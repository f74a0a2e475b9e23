"""Unit tests for rule result entities."""

import pytest

from passwarden.domain.entities import (
    AggregateResult,
    CountCategory,
    RuleResult,
    RuleResultDetail,
)


class TestRuleResultDetail:
    """Test suite for RuleResultDetail."""

    def test_error_codes_end_with_message_key(self):
        detail = RuleResultDetail("ILLEGAL_CHAR", {"illegal_character": "#"}, ("ILLEGAL_CHAR.35",))
        assert detail.error_codes == ("ILLEGAL_CHAR.35", "ILLEGAL_CHAR")

    def test_error_codes_default_to_message_key(self):
        assert RuleResultDetail("TOO_SHORT").error_codes == ("TOO_SHORT",)

    def test_empty_message_key_rejected(self):
        with pytest.raises(ValueError):
            RuleResultDetail("")

    def test_empty_error_code_rejected(self):
        with pytest.raises(ValueError):
            RuleResultDetail("TOO_SHORT", {}, ("",))

    def test_parameters_are_read_only(self):
        detail = RuleResultDetail("TOO_SHORT", {"min": 8})
        with pytest.raises(TypeError):
            detail.parameters["min"] = 4  # type: ignore[index]

    def test_equality(self):
        assert RuleResultDetail("TOO_SHORT", {"min": 8}) == RuleResultDetail("TOO_SHORT", {"min": 8})

    def test_to_dict(self):
        detail = RuleResultDetail("TOO_SHORT", {"min": 8, "max": 20, "actual": 7})
        assert detail.to_dict() == {
            "message_key": "TOO_SHORT",
            "parameters": {"min": 8, "max": 20, "actual": 7},
            "error_codes": ["TOO_SHORT"],
        }


class TestRuleResult:
    """Test suite for RuleResult."""

    def test_default_is_valid(self):
        result = RuleResult()
        assert result.valid is True
        assert result.details == ()

    def test_from_details_without_details_is_valid(self):
        assert RuleResult.from_details([]).valid is True

    def test_from_details_with_details_is_invalid(self):
        result = RuleResult.from_details([RuleResultDetail("TOO_SHORT")])
        assert result.valid is False
        assert result.message_keys == ["TOO_SHORT"]

    def test_to_dict_serializes_enum_keys(self):
        result = RuleResult(metadata={CountCategory.LENGTH: 5})
        assert result.to_dict() == {"valid": True, "details": [], "metadata": {"length": 5}}


class TestAggregateResult:
    """Test suite for AggregateResult."""

    def test_combine_all_valid(self):
        aggregate = AggregateResult.combine([RuleResult(), RuleResult()])
        assert aggregate.valid is True
        assert aggregate.details == ()
        assert len(aggregate.results) == 2

    def test_combine_keeps_detail_order(self):
        first = RuleResult.from_details([RuleResultDetail("A"), RuleResultDetail("B")])
        second = RuleResult()
        third = RuleResult.from_details([RuleResultDetail("C")])

        aggregate = AggregateResult.combine([first, second, third])

        assert aggregate.valid is False
        assert aggregate.message_keys == ["A", "B", "C"]
        assert aggregate.results == (first, second, third)

    def test_advisory_details_do_not_invalidate(self):
        """A rule may be valid while still reporting details."""
        advisory = RuleResult(valid=True, details=[RuleResultDetail("NOTE")])
        aggregate = AggregateResult.combine([advisory])
        assert aggregate.valid is True
        assert aggregate.message_keys == ["NOTE"]

    def test_combine_merges_metadata(self):
        aggregate = AggregateResult.combine([
            RuleResult(metadata={CountCategory.LENGTH: 5}),
            RuleResult(metadata={CountCategory.DIGIT: 2}),
        ])
        assert dict(aggregate.metadata) == {CountCategory.LENGTH: 5, CountCategory.DIGIT: 2}

    def test_combine_empty(self):
        aggregate = AggregateResult.combine([])
        assert aggregate.valid is True
        assert aggregate.results == ()
