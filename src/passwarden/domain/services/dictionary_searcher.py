"""Dictionary search service.

Looks up password-derived text in a large sorted word list. Two modes are
supported:

- exact: the text must equal a word (binary search, O(log n)).
- substring: the text must contain a word. For every suffix of the text a
  binary search locates the greatest word not above the suffix; if that
  word is not a prefix of the suffix the search narrows to the common
  prefix and repeats. Each round strictly shortens the needle, so the whole
  check is bounded by O(L^2 log n) and never scans the dictionary.

Word lists are immutable. Changing the list or its case policy produces a
new WordList and therefore a new searcher.
"""

from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from collections.abc import Sequence
from typing import Iterable

from passwarden.core.exceptions import RuleConfigurationError
from passwarden.core.logging import get_logger

logger = get_logger(__name__)


def _fold(text: str, case_sensitive: bool) -> str:
    return text if case_sensitive else text.lower()


def _common_prefix_length(left: str, right: str) -> int:
    limit = min(len(left), len(right))
    index = 0
    while index < limit and left[index] == right[index]:
        index += 1
    return index


class WordList(Sequence[str]):
    """Immutable word collection sorted under a declared case policy.

    Words are kept in their original form for reporting; comparisons use
    the case-folded keys when the list is case insensitive.
    """

    def __init__(self, words: Iterable[str], case_sensitive: bool = True) -> None:
        """Wrap an already sorted word collection.

        Args:
            words: Words sorted under the given case policy.
            case_sensitive: Whether comparisons respect case.

        Raises:
            RuleConfigurationError: If the words are not sorted.
        """
        self._words: tuple[str, ...] = tuple(words)
        self._case_sensitive = case_sensitive
        self._keys: tuple[str, ...] = tuple(
            _fold(word, case_sensitive) for word in self._words
        )
        for index in range(1, len(self._keys)):
            if self._keys[index - 1] > self._keys[index]:
                raise RuleConfigurationError(
                    f"word list is not sorted at index {index} "
                    f"({self._words[index - 1]!r} > {self._words[index]!r})",
                    option="words",
                )
        logger.debug(
            "Word list created",
            size=len(self._words),
            case_sensitive=case_sensitive,
        )

    @classmethod
    def from_words(cls, words: Iterable[str], case_sensitive: bool = True) -> "WordList":
        """Sort arbitrary words under the case policy and wrap them.

        Args:
            words: Words in any order.
            case_sensitive: Whether comparisons respect case.

        Returns:
            WordList: A new sorted word list.
        """
        if case_sensitive:
            ordered = sorted(words)
        else:
            ordered = sorted(words, key=lambda word: (word.lower(), word))
        return cls(ordered, case_sensitive=case_sensitive)

    @property
    def case_sensitive(self) -> bool:
        """Whether comparisons respect case."""
        return self._case_sensitive

    @property
    def keys(self) -> tuple[str, ...]:
        """Comparison keys aligned with the words."""
        return self._keys

    def with_case_sensitivity(self, case_sensitive: bool) -> "WordList":
        """Return a word list with the same words under another case policy."""
        if case_sensitive == self._case_sensitive:
            return self
        return WordList.from_words(self._words, case_sensitive=case_sensitive)

    def __getitem__(self, index):  # type: ignore[override]
        return self._words[index]

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return self.index_of(word) is not None

    def index_of(self, word: str) -> int | None:
        """Binary search for an exact word.

        Args:
            word: Word to look up, compared under the list's case policy.

        Returns:
            Index of the word or None if absent.
        """
        key = _fold(word, self._case_sensitive)
        index = bisect_left(self._keys, key)
        if index < len(self._keys) and self._keys[index] == key:
            return index
        return None

    def longest_prefix_of(self, text: str) -> int | None:
        """Find the longest word that is a prefix of text.

        Args:
            text: Text already folded under the list's case policy.

        Returns:
            Index of the longest word prefixing text, or None.
        """
        needle = text
        while True:
            index = bisect_right(self._keys, needle)
            if index == 0:
                return None
            candidate = self._keys[index - 1]
            if needle.startswith(candidate):
                return index - 1
            # Any prefix word of needle must be a prefix of the shared part
            shared = _common_prefix_length(candidate, needle)
            needle = needle[:shared]

    def __repr__(self) -> str:
        return f"WordList(size={len(self._words)}, case_sensitive={self._case_sensitive})"


@dataclass(frozen=True)
class DictionaryMatch:
    """A dictionary hit.

    Attributes:
        word: The word as stored in the word list.
        offset: Offset of the word in the searched text (0 for exact matches).
        reversed: Whether the hit was found in the reversed text.
    """

    word: str
    offset: int = 0
    reversed: bool = False


class DictionarySearcher:
    """Searches password-derived text against a WordList.

    Case sensitivity is a property of the word list, since the list must be
    sorted under the same policy it is searched with.
    """

    def __init__(
        self,
        word_list: WordList,
        substring: bool = False,
        match_backwards: bool = False,
    ) -> None:
        """Initialize the searcher.

        Args:
            word_list: Sorted words to search.
            substring: Match words contained in the text instead of equal to it.
            match_backwards: Also search the character-reversed text.
        """
        if not isinstance(word_list, WordList):
            raise RuleConfigurationError(
                f"expected a WordList, got {type(word_list).__name__}",
                option="word_list",
            )
        self.word_list = word_list
        self.substring = substring
        self.match_backwards = match_backwards

    @property
    def case_sensitive(self) -> bool:
        """Whether comparisons respect case."""
        return self.word_list.case_sensitive

    def lookup(self, text: str) -> DictionaryMatch | None:
        """Search text in its natural direction only.

        Args:
            text: Text to search.

        Returns:
            The first match or None. In substring mode the earliest offset
            wins, and at that offset the longest word.
        """
        if not text:
            return None
        if not self.substring:
            index = self.word_list.index_of(text)
            if index is None:
                return None
            return DictionaryMatch(word=self.word_list[index])

        folded = _fold(text, self.case_sensitive)
        for offset in range(len(folded)):
            index = self.word_list.longest_prefix_of(folded[offset:])
            if index is not None:
                return DictionaryMatch(word=self.word_list[index], offset=offset)
        return None

    def matches(self, candidate: str) -> list[DictionaryMatch]:
        """Search candidate forward and, when enabled, reversed.

        Args:
            candidate: Text to search, typically the password.

        Returns:
            Up to two matches: the forward one first, then the reversed one.
        """
        found: list[DictionaryMatch] = []
        forward = self.lookup(candidate)
        if forward is not None:
            found.append(forward)
        if self.match_backwards and len(candidate) > 1:
            backward = self.lookup(candidate[::-1])
            if backward is not None:
                found.append(
                    DictionaryMatch(word=backward.word, offset=backward.offset, reversed=True)
                )
        return found

    def search(self, candidate: str) -> str | None:
        """Return the first matching dictionary word, if any.

        Args:
            candidate: Text to search.

        Returns:
            The matched word as stored in the word list, or None.
        """
        found = self.matches(candidate)
        return found[0].word if found else None
