"""Length rule."""

import sys

from passwarden.core.exceptions import RuleConfigurationError
from passwarden.domain.entities import (
    CountCategory,
    PasswordData,
    RuleResult,
    RuleResultDetail,
)

TOO_SHORT = "TOO_SHORT"
TOO_LONG = "TOO_LONG"


class LengthRule:
    """Rejects passwords shorter than min_length or longer than max_length."""

    def __init__(self, min_length: int = 0, max_length: int = sys.maxsize) -> None:
        """Initialize the rule.

        Args:
            min_length: Minimum number of characters (inclusive).
            max_length: Maximum number of characters (inclusive).

        Raises:
            RuleConfigurationError: If the bounds are negative or inverted.
        """
        if min_length < 0:
            raise RuleConfigurationError(f"must be >= 0, got {min_length}", option="min_length")
        if min_length > max_length:
            raise RuleConfigurationError(
                f"min_length ({min_length}) exceeds max_length ({max_length})",
                option="max_length",
            )
        self.min_length = min_length
        self.max_length = max_length

    @classmethod
    def exact(cls, length: int) -> "LengthRule":
        """Require exactly length characters."""
        return cls(length, length)

    def evaluate(self, data: PasswordData) -> RuleResult:
        length = len(data.password)
        details = []
        if length < self.min_length:
            details.append(RuleResultDetail(TOO_SHORT, self._parameters(length)))
        elif length > self.max_length:
            details.append(RuleResultDetail(TOO_LONG, self._parameters(length)))
        return RuleResult.from_details(details, {CountCategory.LENGTH: length})

    def _parameters(self, length: int) -> dict[str, int]:
        return {"min": self.min_length, "max": self.max_length, "actual": length}

    def __repr__(self) -> str:
        return f"LengthRule(min_length={self.min_length}, max_length={self.max_length})"
