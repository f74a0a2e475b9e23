"""Regular expression rules."""

import re

from passwarden.core.exceptions import RuleConfigurationError
from passwarden.domain.entities import PasswordData, RuleResult, RuleResultDetail

ILLEGAL_MATCH = "ILLEGAL_MATCH"
ALLOWED_MATCH = "ALLOWED_MATCH"


def _compile(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as e:
        raise RuleConfigurationError(f"invalid pattern {pattern!r}: {e}", option="pattern") from e


class IllegalRegexRule:
    """Rejects passwords matching a pattern, one detail per distinct match."""

    def __init__(self, pattern: str | re.Pattern[str], report_all: bool = True) -> None:
        self.pattern = _compile(pattern)
        self.report_all = report_all

    def evaluate(self, data: PasswordData) -> RuleResult:
        details = []
        seen: set[str] = set()
        for match in self.pattern.finditer(data.password):
            text = match.group(0)
            if text in seen:
                continue
            seen.add(text)
            details.append(
                RuleResultDetail(ILLEGAL_MATCH, {"match": text, "pattern": self.pattern.pattern})
            )
            if not self.report_all:
                break
        return RuleResult.from_details(details)


class AllowedRegexRule:
    """Requires that a pattern matches somewhere in the password."""

    def __init__(self, pattern: str | re.Pattern[str]) -> None:
        self.pattern = _compile(pattern)

    def evaluate(self, data: PasswordData) -> RuleResult:
        if self.pattern.search(data.password):
            return RuleResult()
        return RuleResult.from_details(
            [RuleResultDetail(ALLOWED_MATCH, {"pattern": self.pattern.pattern})]
        )
