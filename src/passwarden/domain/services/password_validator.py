"""Password validation service.

Evaluates an ordered, immutable collection of rules against one
PasswordData and folds the per-rule results into an AggregateResult.
"""

from typing import Iterable

from passwarden.core.config import Settings, get_settings
from passwarden.core.exceptions import RuleConfigurationError
from passwarden.core.logging import get_logger
from passwarden.core.rules import (
    DIGIT,
    LOWERCASE,
    SPECIAL,
    UPPERCASE,
    CharacterCharacteristicsRule,
    CharacterRule,
    DictionaryRule,
    HistoryRule,
    IllegalSequenceRule,
    LengthRule,
    RepeatCharactersRule,
    Rule,
    SourceRule,
    UsernameRule,
    WhitespaceRule,
)
from passwarden.domain.entities import AggregateResult, PasswordData
from passwarden.domain.services.dictionary_searcher import WordList
from passwarden.domain.services.message_resolver import MessageResolver
from passwarden.domain.services.sequence_detector import ALPHABETICAL, NUMERICAL, US_QWERTY

logger = get_logger(__name__)


class PasswordValidator:
    """Validates passwords against a fixed set of rules.

    Rules are evaluated independently and in registration order; the
    failure of one rule never affects another. The rule collection cannot
    change after construction, so one validator can be shared between
    threads. A validator is itself a rule and can be nested in another
    validator.
    """

    def __init__(
        self,
        rules: Iterable[Rule],
        message_resolver: MessageResolver | None = None,
    ) -> None:
        """Initialize the validator.

        Args:
            rules: Rules to evaluate, in reporting order.
            message_resolver: Resolver used by get_messages. Defaults to the
                built-in English catalog.

        Raises:
            RuleConfigurationError: If any entry does not implement Rule.
        """
        self._rules: tuple[Rule, ...] = tuple(rules)
        for index, rule in enumerate(self._rules):
            if not isinstance(rule, Rule):
                raise RuleConfigurationError(
                    f"entry {index} ({type(rule).__name__}) has no evaluate method",
                    option="rules",
                )
        self.message_resolver = message_resolver or MessageResolver()
        logger.debug(
            "Password validator created",
            rule_count=len(self._rules),
            rules=[type(rule).__name__ for rule in self._rules],
        )

    @property
    def rules(self) -> tuple[Rule, ...]:
        """The configured rules in registration order."""
        return self._rules

    def validate(self, data: PasswordData) -> AggregateResult:
        """Evaluate every rule against the password data.

        Args:
            data: Password and context to validate.

        Returns:
            AggregateResult: Valid only if every rule is valid, with all
            details in rule registration order.
        """
        result = AggregateResult.combine(rule.evaluate(data) for rule in self._rules)
        logger.debug(
            "Password validated",
            valid=result.valid,
            rule_count=len(self._rules),
            failed_rules=sum(1 for r in result.results if not r.valid),
            detail_count=len(result.details),
        )
        return result

    evaluate = validate

    def get_messages(self, result: AggregateResult) -> list[str]:
        """Resolve the messages of every detail of a result, in order."""
        return self.message_resolver.resolve_all(result.details)


def build_default_validator(
    settings: Settings | None = None,
    word_list: WordList | None = None,
    message_resolver: MessageResolver | None = None,
) -> PasswordValidator:
    """Build the recommended password policy from settings.

    Args:
        settings: Policy settings. Loaded from the environment if omitted.
        word_list: Optional dictionary; adds a substring dictionary rule.
        message_resolver: Optional resolver for the validator.

    Returns:
        PasswordValidator: Validator for the configured policy.
    """
    if settings is None:
        settings = get_settings()

    rules: list[Rule] = [
        LengthRule(settings.min_length, settings.max_length),
        CharacterCharacteristicsRule(
            [
                CharacterRule.of(LOWERCASE),
                CharacterRule.of(UPPERCASE),
                CharacterRule.of(DIGIT),
                CharacterRule.of(SPECIAL),
            ],
            required=settings.min_characteristics,
        ),
        WhitespaceRule(),
        IllegalSequenceRule(
            [ALPHABETICAL],
            length=settings.sequence_length,
            wrap=settings.sequence_wrap,
        ),
        IllegalSequenceRule(
            [NUMERICAL],
            length=settings.sequence_length,
            wrap=settings.sequence_wrap,
        ),
        IllegalSequenceRule(
            US_QWERTY,
            length=settings.sequence_length,
            wrap=settings.sequence_wrap,
        ),
        RepeatCharactersRule(settings.repeat_length),
        UsernameRule(
            match_backwards=settings.username_match_backwards,
            ignore_case=settings.username_ignore_case,
        ),
        HistoryRule(report_all=settings.history_report_all),
        SourceRule(report_all=settings.history_report_all),
    ]
    if word_list is not None:
        rules.append(
            DictionaryRule.substring_rule(
                word_list,
                match_backwards=settings.dictionary_match_backwards,
                case_sensitive=settings.dictionary_case_sensitive,
            )
        )
    return PasswordValidator(rules, message_resolver=message_resolver)
