"""Password rule catalog.

Every rule is a plain class with an ``evaluate(PasswordData) -> RuleResult``
method; see :class:`Rule`.
"""

from passwarden.core.exceptions import RuleConfigurationError, RuleError

from .base import MatchBehavior, Rule
from .character import (
    ALPHABETICAL,
    DIGIT,
    LOWERCASE,
    SPECIAL,
    UPPERCASE,
    WHITESPACE,
    CharacterCharacteristicsRule,
    CharacterData,
    CharacterRule,
)
from .character_set import AllowedCharacterRule, IllegalCharacterRule, NumberRangeRule
from .dictionary import DictionaryRule
from .length import LengthRule
from .length_complexity import LengthComplexityRule
from .reference import HistoryRule, SourceRule
from .regex import AllowedRegexRule, IllegalRegexRule
from .repeat import CharacterOccurrencesRule, RepeatCharactersRule
from .sequence import IllegalSequenceRule
from .username import UsernameRule
from .whitespace import WhitespaceRule

__all__ = [
    "ALPHABETICAL",
    "AllowedCharacterRule",
    "AllowedRegexRule",
    "CharacterCharacteristicsRule",
    "CharacterData",
    "CharacterOccurrencesRule",
    "CharacterRule",
    "DIGIT",
    "DictionaryRule",
    "HistoryRule",
    "IllegalCharacterRule",
    "IllegalRegexRule",
    "IllegalSequenceRule",
    "LOWERCASE",
    "LengthComplexityRule",
    "LengthRule",
    "MatchBehavior",
    "NumberRangeRule",
    "RepeatCharactersRule",
    "Rule",
    "RuleConfigurationError",
    "RuleError",
    "SPECIAL",
    "SourceRule",
    "UPPERCASE",
    "UsernameRule",
    "WHITESPACE",
    "WhitespaceRule",
]
