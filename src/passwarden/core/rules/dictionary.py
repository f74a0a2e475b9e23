"""Dictionary rule.

Rejects passwords that equal, or in substring mode contain, a word of a
word list. The reversed password is checked too when match_backwards is
enabled.
"""

from passwarden.domain.entities import PasswordData, RuleResult, RuleResultDetail
from passwarden.domain.services.dictionary_searcher import DictionarySearcher, WordList

ILLEGAL_WORD = "ILLEGAL_WORD"
ILLEGAL_WORD_REVERSED = "ILLEGAL_WORD_REVERSED"


class DictionaryRule:
    """Checks the password against a dictionary."""

    def __init__(
        self,
        word_list: WordList,
        match_backwards: bool = False,
        substring: bool = False,
        case_sensitive: bool | None = None,
    ) -> None:
        """Initialize the rule.

        Args:
            word_list: Words to reject. Shared read-only between rules.
            match_backwards: Also reject passwords whose reverse matches.
            substring: Reject passwords containing a word, not only equal to one.
            case_sensitive: Override the word list's case policy. The list
                is re-sorted into a new instance when the policy differs.
        """
        if case_sensitive is not None:
            word_list = word_list.with_case_sensitivity(case_sensitive)
        self.searcher = DictionarySearcher(
            word_list, substring=substring, match_backwards=match_backwards
        )

    @classmethod
    def substring_rule(
        cls,
        word_list: WordList,
        match_backwards: bool = False,
        case_sensitive: bool | None = None,
    ) -> "DictionaryRule":
        """Rule rejecting any password that contains a dictionary word."""
        return cls(word_list, match_backwards, substring=True, case_sensitive=case_sensitive)

    @property
    def word_list(self) -> WordList:
        return self.searcher.word_list

    @property
    def case_sensitive(self) -> bool:
        return self.searcher.case_sensitive

    def evaluate(self, data: PasswordData) -> RuleResult:
        details = []
        metadata = {}
        for match in self.searcher.matches(data.password):
            key = ILLEGAL_WORD_REVERSED if match.reversed else ILLEGAL_WORD
            details.append(RuleResultDetail(key, {"matching_word": match.word}))
            metadata.setdefault("matched_word", match.word)
        return RuleResult.from_details(details, metadata)
