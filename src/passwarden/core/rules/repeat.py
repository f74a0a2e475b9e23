"""Repeated character rules."""

from passwarden.core.exceptions import RuleConfigurationError
from passwarden.domain.entities import PasswordData, RuleResult, RuleResultDetail

ILLEGAL_REPEATED_CHARS = "ILLEGAL_REPEATED_CHARS"
TOO_MANY_OCCURRENCES = "TOO_MANY_OCCURRENCES"

DEFAULT_SEQUENCE_LENGTH = 5
DEFAULT_SEQUENCE_COUNT = 1


class RepeatCharactersRule:
    """Rejects runs of one character repeated consecutively.

    The password fails when it contains at least sequence_count runs of
    sequence_length or more identical characters.
    """

    def __init__(
        self,
        sequence_length: int = DEFAULT_SEQUENCE_LENGTH,
        sequence_count: int = DEFAULT_SEQUENCE_COUNT,
    ) -> None:
        """Initialize the rule.

        Args:
            sequence_length: Run length that counts as a repeat.
            sequence_count: Number of runs needed to fail.

        Raises:
            RuleConfigurationError: If sequence_length < 2 or sequence_count < 1.
        """
        if sequence_length < 2:
            raise RuleConfigurationError(
                f"must be at least 2, got {sequence_length}", option="sequence_length"
            )
        if sequence_count < 1:
            raise RuleConfigurationError(
                f"must be at least 1, got {sequence_count}", option="sequence_count"
            )
        self.sequence_length = sequence_length
        self.sequence_count = sequence_count

    def _runs(self, password: str) -> list[str]:
        runs = []
        start = 0
        for index in range(1, len(password) + 1):
            if index == len(password) or password[index] != password[start]:
                if index - start >= self.sequence_length:
                    runs.append(password[start:index])
                start = index
        return runs

    def evaluate(self, data: PasswordData) -> RuleResult:
        runs = self._runs(data.password)
        details = []
        if len(runs) >= self.sequence_count:
            details.append(
                RuleResultDetail(
                    ILLEGAL_REPEATED_CHARS,
                    {
                        "sequence_length": self.sequence_length,
                        "sequence_count": self.sequence_count,
                        "matches_count": len(runs),
                        "matches": tuple(runs),
                    },
                )
            )
        return RuleResult.from_details(details)


class CharacterOccurrencesRule:
    """Rejects characters that occur more than max_occurrences times anywhere."""

    def __init__(self, max_occurrences: int) -> None:
        if max_occurrences < 1:
            raise RuleConfigurationError(
                f"must be at least 1, got {max_occurrences}", option="max_occurrences"
            )
        self.max_occurrences = max_occurrences

    def evaluate(self, data: PasswordData) -> RuleResult:
        counts: dict[str, int] = {}
        for char in data.password:
            counts[char] = counts.get(char, 0) + 1
        details = [
            RuleResultDetail(
                TOO_MANY_OCCURRENCES,
                {
                    "matching_character": char,
                    "matching_character_count": count,
                    "maximum_occurrences": self.max_occurrences,
                },
            )
            for char, count in sorted(counts.items())
            if count > self.max_occurrences
        ]
        return RuleResult.from_details(details)
