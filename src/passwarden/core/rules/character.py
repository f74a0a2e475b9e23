"""Character class rules.

CharacterRule enforces minimum counts for character classes such as
uppercase letters or digits. CharacterCharacteristicsRule requires that a
password satisfies at least N of M such classes.
"""

from dataclasses import dataclass
from typing import Iterable, Mapping

from passwarden.core.exceptions import RuleConfigurationError
from passwarden.domain.entities import (
    CountCategory,
    PasswordData,
    RuleResult,
    RuleResultDetail,
)

INSUFFICIENT_CHARACTERISTICS = "INSUFFICIENT_CHARACTERISTICS"


@dataclass(frozen=True)
class CharacterData:
    """A named character class.

    Attributes:
        name: Human readable class name.
        characters: Every character belonging to the class.
        message_key: Key reported when the class minimum is unmet.
        count_category: Metadata key for the class count, if any.
    """

    name: str
    characters: str
    message_key: str
    count_category: CountCategory | None = None

    def count(self, text: str) -> int:
        """Count characters of text that belong to this class."""
        return sum(1 for char in text if char in self.characters)

    def matching(self, text: str, limit: int) -> str:
        """Return up to limit characters of text that belong to this class."""
        found = []
        for char in text:
            if len(found) >= limit:
                break
            if char in self.characters:
                found.append(char)
        return "".join(found)


_LOWER = "abcdefghijklmnopqrstuvwxyz"
_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

LOWERCASE = CharacterData("lowercase", _LOWER, "INSUFFICIENT_LOWERCASE", CountCategory.LOWERCASE)
UPPERCASE = CharacterData("uppercase", _UPPER, "INSUFFICIENT_UPPERCASE", CountCategory.UPPERCASE)
DIGIT = CharacterData("digit", "0123456789", "INSUFFICIENT_DIGIT", CountCategory.DIGIT)
ALPHABETICAL = CharacterData("alphabetical", _UPPER + _LOWER, "INSUFFICIENT_ALPHABETICAL")
_LATIN1_SYMBOLS = "".join(chr(code) for code in range(0xA1, 0xC0)) + "×÷"
_CURRENCY_SYMBOLS = "".join(chr(code) for code in range(0x20A0, 0x20BF))

SPECIAL = CharacterData(
    "special",
    "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"
    + _LATIN1_SYMBOLS
    + "–—―‗‘’‚‛“”„†‡•…‰′″‹›‼‾⁄⁊"
    + _CURRENCY_SYMBOLS,
    "INSUFFICIENT_SPECIAL",
    CountCategory.SPECIAL,
)
WHITESPACE = CharacterData(
    "whitespace", "\t\n\x0b\x0c\r ", "INSUFFICIENT_WHITESPACE", CountCategory.WHITESPACE
)

GERMAN_LOWERCASE = CharacterData(
    "german lowercase", _LOWER + "äöüß", "INSUFFICIENT_LOWERCASE", CountCategory.LOWERCASE
)
GERMAN_UPPERCASE = CharacterData(
    "german uppercase", _UPPER + "ÄÖÜẞ", "INSUFFICIENT_UPPERCASE", CountCategory.UPPERCASE
)
POLISH_LOWERCASE = CharacterData(
    "polish lowercase",
    "aąbcćdeęfghijklłmnńoópqrsśtuvwxyzźż",
    "INSUFFICIENT_LOWERCASE",
    CountCategory.LOWERCASE,
)
POLISH_UPPERCASE = CharacterData(
    "polish uppercase",
    "AĄBCĆDEĘFGHIJKLŁMNŃOÓPQRSŚTUVWXYZŹŻ",
    "INSUFFICIENT_UPPERCASE",
    CountCategory.UPPERCASE,
)
CZECH_LOWERCASE = CharacterData(
    "czech lowercase",
    "aábcčdďeěéfghiíjklmnňoópqrřsštťuúůvwxyýzž",
    "INSUFFICIENT_LOWERCASE",
    CountCategory.LOWERCASE,
)
CZECH_UPPERCASE = CharacterData(
    "czech uppercase",
    "AÁBCČDĎEĚÉFGHIÍJKLMNŇOÓPQRŘSŠTŤUÚŮVWXYÝZŽ",
    "INSUFFICIENT_UPPERCASE",
    CountCategory.UPPERCASE,
)
CYRILLIC_LOWERCASE = CharacterData(
    "cyrillic lowercase",
    "абвгдеёжзийклмнопрстуфхцчшщъыьэюяіѣѳѵ",
    "INSUFFICIENT_LOWERCASE",
    CountCategory.LOWERCASE,
)
CYRILLIC_UPPERCASE = CharacterData(
    "cyrillic uppercase",
    "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯІѢѲѴ",
    "INSUFFICIENT_UPPERCASE",
    CountCategory.UPPERCASE,
)


class CharacterRule:
    """Requires minimum counts of one or more character classes.

    One detail is reported per unmet class, in configuration order.
    """

    def __init__(self, minimums: Mapping[CharacterData, int]) -> None:
        """Initialize the rule.

        Args:
            minimums: Required count per character class.

        Raises:
            RuleConfigurationError: If no class is given or a count is < 1.
        """
        if not minimums:
            raise RuleConfigurationError("at least one character class is required", option="minimums")
        for character_data, minimum in minimums.items():
            if minimum < 1:
                raise RuleConfigurationError(
                    f"minimum for {character_data.name} must be > 0, got {minimum}",
                    option="minimums",
                )
        self.minimums: dict[CharacterData, int] = dict(minimums)

    @classmethod
    def of(cls, character_data: CharacterData, minimum: int = 1) -> "CharacterRule":
        """Rule for a single character class."""
        return cls({character_data: minimum})

    def evaluate(self, data: PasswordData) -> RuleResult:
        password = data.password
        details = []
        metadata = {}
        for character_data, minimum in self.minimums.items():
            if character_data.count_category is not None:
                metadata[character_data.count_category] = character_data.count(password)
            matching = character_data.matching(password, minimum)
            if len(matching) < minimum:
                details.append(
                    RuleResultDetail(
                        character_data.message_key,
                        {
                            "minimum_required": minimum,
                            "matching_character_count": len(matching),
                            "valid_characters": character_data.characters,
                            "matching_characters": matching,
                        },
                    )
                )
        return RuleResult.from_details(details, metadata)


class CharacterCharacteristicsRule:
    """Requires that at least N of M character rules pass."""

    def __init__(
        self,
        rules: Iterable[CharacterRule],
        required: int = 1,
        report_failure: bool = True,
        report_rule_failures: bool = True,
    ) -> None:
        """Initialize the rule.

        Args:
            rules: Character rules to check.
            required: How many of the rules must pass.
            report_failure: Add an INSUFFICIENT_CHARACTERISTICS detail on failure.
            report_rule_failures: Include the details of failing child rules.

        Raises:
            RuleConfigurationError: If required is < 1 or exceeds the rule count.
        """
        self.rules: tuple[CharacterRule, ...] = tuple(rules)
        if required < 1:
            raise RuleConfigurationError(f"must be > 0, got {required}", option="required")
        if required > len(self.rules):
            raise RuleConfigurationError(
                f"{required} exceeds the number of rules ({len(self.rules)})",
                option="required",
            )
        self.required = required
        self.report_failure = report_failure
        self.report_rule_failures = report_rule_failures

    def evaluate(self, data: PasswordData) -> RuleResult:
        success_count = 0
        child_details: list[RuleResultDetail] = []
        metadata = {}
        for rule in self.rules:
            result = rule.evaluate(data)
            metadata.update(result.metadata)
            if result.valid:
                success_count += 1
            elif self.report_rule_failures:
                child_details.extend(result.details)

        if success_count >= self.required:
            return RuleResult(valid=True, metadata=metadata)

        details = []
        if self.report_failure:
            details.append(
                RuleResultDetail(
                    INSUFFICIENT_CHARACTERISTICS,
                    {
                        "success_count": success_count,
                        "minimum_required": self.required,
                        "rule_count": len(self.rules),
                    },
                )
            )
        details.extend(child_details)
        return RuleResult(valid=False, details=details, metadata=metadata)
