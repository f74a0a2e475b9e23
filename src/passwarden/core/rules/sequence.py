"""Illegal sequence rule."""

from typing import Iterable

from passwarden.core.exceptions import RuleConfigurationError
from passwarden.domain.entities import PasswordData, RuleResult, RuleResultDetail
from passwarden.domain.services.sequence_detector import (
    DEFAULT_SEQUENCE_LENGTH,
    SequenceDetector,
    SequenceTable,
)

MINIMUM_RULE_SEQUENCE_LENGTH = 3


class IllegalSequenceRule:
    """Rejects passwords containing alphabetical, numerical or keyboard runs.

    Every run found is reported with the message key of its table, unless
    report_all is off, in which case only the first run is reported.
    """

    def __init__(
        self,
        tables: Iterable[SequenceTable],
        length: int = DEFAULT_SEQUENCE_LENGTH,
        match_backwards: bool = True,
        wrap: bool = False,
        report_all: bool = True,
        ignore_case: bool = True,
    ) -> None:
        """Initialize the rule.

        Args:
            tables: Adjacency tables to check.
            length: Minimum run length that violates the rule.
            match_backwards: Also reject runs in reverse order.
            wrap: Treat tables as circular.
            report_all: Report every run instead of only the first.
            ignore_case: Compare characters case-insensitively. When False a
                run must stay within one letter case or keyboard shift state.

        Raises:
            RuleConfigurationError: If length is below 3.
        """
        if length < MINIMUM_RULE_SEQUENCE_LENGTH:
            raise RuleConfigurationError(
                f"must be at least {MINIMUM_RULE_SEQUENCE_LENGTH}, got {length}",
                option="length",
            )
        self.detector = SequenceDetector(
            tables,
            threshold=length,
            match_backwards=match_backwards,
            ignore_case=ignore_case,
            wrap=wrap,
        )
        self.report_all = report_all

    def evaluate(self, data: PasswordData) -> RuleResult:
        matches = self.detector.find_sequences(data.password)
        if not self.report_all:
            matches = matches[:1]
        details = [
            RuleResultDetail(
                match.message_key,
                {
                    "sequence": match.text,
                    "start": match.start,
                    "length": match.length,
                    "direction": match.direction.value,
                },
            )
            for match in matches
        ]
        return RuleResult.from_details(details)
