"""Length complexity rule.

Applies a different set of rules depending on how long the password is, so
that long passphrases can be held to fewer composition requirements than
short passwords.
"""

from typing import Iterable, Mapping

from passwarden.core.exceptions import RuleConfigurationError
from passwarden.core.rules.base import Rule
from passwarden.domain.entities import PasswordData, RuleResult, RuleResultDetail

INSUFFICIENT_COMPLEXITY = "INSUFFICIENT_COMPLEXITY"
INSUFFICIENT_COMPLEXITY_RULES = "INSUFFICIENT_COMPLEXITY_RULES"


def _overlaps(a: range, b: range) -> bool:
    return a.start < b.stop and b.start < a.stop


class LengthComplexityRule:
    """Requires every rule configured for the password's length to pass.

    Rule lists are keyed by half-open length ranges, e.g. ``range(8, 12)``
    covers passwords of 8 to 11 characters. A password whose length falls in
    no range yields INSUFFICIENT_COMPLEXITY_RULES.
    """

    def __init__(
        self,
        rules: Mapping[range, Iterable[Rule]] | None = None,
        report_failure: bool = True,
        report_rule_failures: bool = True,
    ) -> None:
        """Initialize the rule.

        Args:
            rules: Rules to apply, keyed by password length range.
            report_failure: Add an INSUFFICIENT_COMPLEXITY detail on failure.
            report_rule_failures: Include the details of failing nested rules.

        Raises:
            RuleConfigurationError: If a range is empty or overlaps another,
                or a rule list is empty.
        """
        self.rules: dict[range, tuple[Rule, ...]] = {}
        self.report_failure = report_failure
        self.report_rule_failures = report_rule_failures
        for interval, interval_rules in (rules or {}).items():
            self.add_rules(interval, interval_rules)

    def add_rules(self, interval: range, rules: Iterable[Rule]) -> None:
        """Register rules for passwords whose length is in interval.

        Raises:
            RuleConfigurationError: If interval is empty, has a step other
                than 1, overlaps a registered interval, or rules is empty.
        """
        rules = tuple(rules)
        if not rules:
            raise RuleConfigurationError(f"no rules given for {interval}", option="rules")
        if interval.step != 1 or len(interval) == 0:
            raise RuleConfigurationError(
                f"{interval} must be a non-empty range with step 1", option="rules"
            )
        for existing in self.rules:
            if _overlaps(existing, interval):
                raise RuleConfigurationError(
                    f"{interval} overlaps {existing}", option="rules"
                )
        self.rules[interval] = rules

    def rules_for_length(self, length: int) -> tuple[Rule, ...] | None:
        """Rules registered for a password of the given length, if any."""
        for interval, rules in self.rules.items():
            if length in interval:
                return rules
        return None

    def evaluate(self, data: PasswordData) -> RuleResult:
        length = len(data.password)
        rules = self.rules_for_length(length)
        if rules is None:
            return RuleResult.from_details(
                [RuleResultDetail(INSUFFICIENT_COMPLEXITY_RULES, self._parameters(length, 0, 0))]
            )

        success_count = 0
        child_details: list[RuleResultDetail] = []
        metadata = {}
        for rule in rules:
            result = rule.evaluate(data)
            metadata.update(result.metadata)
            if result.valid:
                success_count += 1
            elif self.report_rule_failures:
                child_details.extend(result.details)

        if success_count == len(rules):
            return RuleResult(valid=True, metadata=metadata)

        details = []
        if self.report_failure:
            details.append(
                RuleResultDetail(
                    INSUFFICIENT_COMPLEXITY,
                    self._parameters(length, success_count, len(rules)),
                )
            )
        details.extend(child_details)
        return RuleResult(valid=False, details=details, metadata=metadata)

    @staticmethod
    def _parameters(length: int, success_count: int, rule_count: int) -> dict[str, int]:
        return {
            "password_length": length,
            "success_count": success_count,
            "rule_count": rule_count,
        }
