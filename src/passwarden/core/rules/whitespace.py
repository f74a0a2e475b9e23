"""Whitespace rule."""

from typing import Iterable

from passwarden.core.exceptions import RuleConfigurationError
from passwarden.core.rules.base import MatchBehavior
from passwarden.domain.entities import (
    CountCategory,
    PasswordData,
    RuleResult,
    RuleResultDetail,
)

ILLEGAL_WHITESPACE = "ILLEGAL_WHITESPACE"

# Tab, line feed, vertical tab, form feed, carriage return and space
DEFAULT_WHITESPACE = "\t\n\x0b\x0c\r "


class WhitespaceRule:
    """Rejects passwords containing whitespace characters.

    One detail is reported per distinct whitespace character found, with the
    offsets where it occurs.
    """

    def __init__(
        self,
        characters: Iterable[str] = DEFAULT_WHITESPACE,
        match_behavior: MatchBehavior = MatchBehavior.CONTAINS,
        report_all: bool = True,
    ) -> None:
        self.characters: tuple[str, ...] = tuple(dict.fromkeys(characters))
        for char in self.characters:
            if len(char) != 1 or not char.isspace():
                raise RuleConfigurationError(
                    f"{char!r} is not a whitespace character", option="characters"
                )
        self.match_behavior = MatchBehavior(match_behavior)
        self.report_all = report_all

    def evaluate(self, data: PasswordData) -> RuleResult:
        password = data.password
        details = []
        for char in self.characters:
            if not self.match_behavior.matches(password, char):
                continue
            details.append(
                RuleResultDetail(
                    ILLEGAL_WHITESPACE,
                    {
                        "whitespace_character": char,
                        "match_behavior": self.match_behavior.value,
                        "positions": tuple(i for i, c in enumerate(password) if c == char),
                    },
                )
            )
            if not self.report_all:
                break
        count = sum(1 for c in password if c in self.characters)
        return RuleResult.from_details(details, {CountCategory.WHITESPACE: count})
