"""Rule contract shared by every password rule."""

from enum import Enum
from typing import Protocol, runtime_checkable

from passwarden.domain.entities import PasswordData, RuleResult


@runtime_checkable
class Rule(Protocol):
    """A single, independently evaluable password policy check.

    evaluate must be a pure function of the password data and the rule's own
    configuration. Policy violations are reported in the returned result,
    never raised.
    """

    def evaluate(self, data: PasswordData) -> RuleResult:
        ...


class MatchBehavior(str, Enum):
    """Where in the password a match counts."""

    STARTS_WITH = "starts with"
    ENDS_WITH = "ends with"
    CONTAINS = "contains"

    def matches(self, text: str, fragment: str) -> bool:
        """Check whether fragment occurs in text at the required place."""
        if self is MatchBehavior.STARTS_WITH:
            return text.startswith(fragment)
        if self is MatchBehavior.ENDS_WITH:
            return text.endswith(fragment)
        return fragment in text
