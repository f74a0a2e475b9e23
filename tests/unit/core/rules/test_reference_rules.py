"""Unit tests for HistoryRule and SourceRule."""

from passwarden.core.rules import HistoryRule, SourceRule
from passwarden.domain.entities import PasswordData


class TestHistoryRule:
    """Test suite for HistoryRule."""

    def test_no_history(self):
        assert HistoryRule().evaluate(PasswordData("secret")).valid is True

    def test_new_password(self):
        data = PasswordData("fresh", history=["old1", "old2"])
        assert HistoryRule().evaluate(data).valid is True

    def test_reused_password_reports_every_match(self):
        data = PasswordData("old", history=["old", "new1", "old"])
        result = HistoryRule().evaluate(data)

        assert result.message_keys == ["HISTORY_VIOLATION", "HISTORY_VIOLATION"]
        assert dict(result.details[0].parameters) == {"history_size": 3}

    def test_report_first_only(self):
        data = PasswordData("old", history=["old", "new1", "old"])
        result = HistoryRule(report_all=False).evaluate(data)
        assert len(result.details) == 1

    def test_case_sensitivity(self):
        data = PasswordData("OLD", history=["old"])
        assert HistoryRule().evaluate(data).valid is True
        assert HistoryRule(ignore_case=True).evaluate(data).valid is False

    def test_custom_matcher(self):
        rule = HistoryRule(matcher=lambda password, reference: reference == password[::-1])
        data = PasswordData("abc", history=["cba"])
        assert rule.evaluate(data).valid is False


class TestSourceRule:
    """Test suite for SourceRule."""

    def test_matching_source_is_named(self):
        data = PasswordData(
            "5551234", sources={"email": "me@example.com", "phone": "5551234"}
        )
        result = SourceRule().evaluate(data)

        assert result.message_keys == ["SOURCE_VIOLATION"]
        assert dict(result.details[0].parameters) == {"source": "phone"}

    def test_no_matching_source(self):
        data = PasswordData("unrelated", sources={"email": "me@example.com"})
        assert SourceRule().evaluate(data).valid is True

    def test_report_first_only(self):
        data = PasswordData("same", sources={"a": "same", "b": "SAME"})
        result = SourceRule(report_all=False, ignore_case=True).evaluate(data)
        assert [d.parameters["source"] for d in result.details] == ["a"]
