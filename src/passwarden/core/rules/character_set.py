"""Character set rules.

IllegalCharacterRule rejects listed characters, AllowedCharacterRule
rejects everything not listed, and NumberRangeRule rejects numbers of a
range appearing in the password.
"""

from passwarden.core.rules.base import MatchBehavior
from passwarden.domain.entities import (
    CountCategory,
    PasswordData,
    RuleResult,
    RuleResultDetail,
)

ILLEGAL_CHAR = "ILLEGAL_CHAR"
ALLOWED_CHAR = "ALLOWED_CHAR"
ILLEGAL_NUMBER_RANGE = "ILLEGAL_NUMBER_RANGE"


def _character_detail(key: str, char: str, behavior: MatchBehavior) -> RuleResultDetail:
    return RuleResultDetail(
        key,
        {"illegal_character": char, "match_behavior": behavior.value},
        error_codes=(f"{key}.{ord(char)}",),
    )


class IllegalCharacterRule:
    """Rejects passwords containing any of the given characters."""

    def __init__(
        self,
        characters: str,
        match_behavior: MatchBehavior = MatchBehavior.CONTAINS,
        report_all: bool = True,
    ) -> None:
        self.characters = "".join(dict.fromkeys(characters))
        self.match_behavior = MatchBehavior(match_behavior)
        self.report_all = report_all

    def evaluate(self, data: PasswordData) -> RuleResult:
        password = data.password
        details = []
        for char in self.characters:
            if self.match_behavior.matches(password, char):
                details.append(_character_detail(ILLEGAL_CHAR, char, self.match_behavior))
                if not self.report_all:
                    break
        count = sum(1 for c in password if c in self.characters)
        return RuleResult.from_details(details, {CountCategory.ILLEGAL: count})


class AllowedCharacterRule:
    """Rejects passwords containing characters outside the allowed set.

    With STARTS_WITH or ENDS_WITH only the first or last character is checked.
    """

    def __init__(
        self,
        characters: str,
        match_behavior: MatchBehavior = MatchBehavior.CONTAINS,
        report_all: bool = True,
    ) -> None:
        self.characters = "".join(dict.fromkeys(characters))
        self.match_behavior = MatchBehavior(match_behavior)
        self.report_all = report_all

    def evaluate(self, data: PasswordData) -> RuleResult:
        password = data.password
        details = []
        reported: set[str] = set()
        for char in password:
            if char in self.characters or char in reported:
                continue
            if not self.match_behavior.matches(password, char):
                continue
            details.append(_character_detail(ALLOWED_CHAR, char, self.match_behavior))
            if not self.report_all:
                break
            reported.add(char)
        count = sum(1 for c in password if c in self.characters)
        return RuleResult.from_details(details, {CountCategory.ALLOWED: count})


class NumberRangeRule:
    """Rejects passwords containing any integer in [start, stop)."""

    def __init__(
        self,
        start: int,
        stop: int,
        match_behavior: MatchBehavior = MatchBehavior.CONTAINS,
        report_all: bool = True,
    ) -> None:
        self.numbers = range(start, stop)
        self.match_behavior = MatchBehavior(match_behavior)
        self.report_all = report_all

    def evaluate(self, data: PasswordData) -> RuleResult:
        details = []
        for number in self.numbers:
            if self.match_behavior.matches(data.password, str(number)):
                details.append(
                    RuleResultDetail(
                        ILLEGAL_NUMBER_RANGE,
                        {"number": number, "match_behavior": self.match_behavior.value},
                    )
                )
                if not self.report_all:
                    break
        return RuleResult.from_details(details)
