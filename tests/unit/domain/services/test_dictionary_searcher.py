"""Unit tests for the dictionary search service."""

import pytest

from passwarden.core.exceptions import RuleConfigurationError
from passwarden.domain.services.dictionary_searcher import (
    DictionaryMatch,
    DictionarySearcher,
    WordList,
)


class TestWordList:
    """Test suite for WordList."""

    def test_unsorted_words_rejected(self):
        with pytest.raises(RuleConfigurationError) as exc_info:
            WordList(["zebra", "apple"])
        assert exc_info.value.option == "words"

    def test_from_words_sorts(self):
        words = WordList.from_words(["zebra", "apple", "mango"])
        assert list(words) == ["apple", "mango", "zebra"]
        assert len(words) == 3

    def test_case_insensitive_ordering(self, case_insensitive_words):
        assert case_insensitive_words.keys == tuple(sorted(case_insensitive_words.keys))
        assert "Secret" in case_insensitive_words

    def test_case_sensitive_list_rejects_folded_order(self):
        with pytest.raises(RuleConfigurationError):
            WordList(["apple", "Banana"], case_sensitive=True)
        assert len(WordList(["apple", "Banana"], case_sensitive=False)) == 2

    def test_contains(self, case_insensitive_words, case_sensitive_words):
        assert "SUNSHINE" in case_insensitive_words
        assert "SUNSHINE" not in case_sensitive_words
        assert 42 not in case_sensitive_words

    def test_index_of(self, case_sensitive_words):
        index = case_sensitive_words.index_of("password")
        assert case_sensitive_words[index] == "password"
        assert case_sensitive_words.index_of("passw") is None

    def test_longest_prefix_of(self, case_sensitive_words):
        index = case_sensitive_words.longest_prefix_of("passwordxyz")
        assert case_sensitive_words[index] == "password"

        index = case_sensitive_words.longest_prefix_of("passx")
        assert case_sensitive_words[index] == "pass"

        assert case_sensitive_words.longest_prefix_of("pas") is None

    def test_with_case_sensitivity(self, case_sensitive_words):
        assert case_sensitive_words.with_case_sensitivity(True) is case_sensitive_words

        folded = case_sensitive_words.with_case_sensitivity(False)
        assert folded.case_sensitive is False
        assert sorted(folded) == sorted(case_sensitive_words)
        assert case_sensitive_words.case_sensitive is True

    def test_empty_word_list(self):
        words = WordList([])
        assert len(words) == 0
        assert DictionarySearcher(words, substring=True).search("anything") is None


class TestDictionarySearcher:
    """Test suite for DictionarySearcher."""

    def test_exact_lookup(self, case_insensitive_words):
        searcher = DictionarySearcher(case_insensitive_words)
        assert searcher.lookup("DRAGON") == DictionaryMatch(word="dragon")
        assert searcher.lookup("dragons") is None

    def test_substring_lookup_reports_offset(self, case_insensitive_words):
        searcher = DictionarySearcher(case_insensitive_words, substring=True)
        assert searcher.lookup("my-Zebra!") == DictionaryMatch(word="zebra", offset=3)

    def test_longest_word_at_earliest_offset(self, case_sensitive_words):
        searcher = DictionarySearcher(case_sensitive_words, substring=True)
        assert searcher.lookup("xpassword").word == "password"
        assert searcher.lookup("xpassage").word == "passage"

    def test_empty_text_never_matches(self, case_sensitive_words):
        searcher = DictionarySearcher(case_sensitive_words, substring=True, match_backwards=True)
        assert searcher.matches("") == []
        assert searcher.search("") is None

    def test_backward_match(self):
        searcher = DictionarySearcher(WordList(["drowssap"]), match_backwards=True)
        assert searcher.matches("password") == [
            DictionaryMatch(word="drowssap", reversed=True)
        ]

    def test_forward_match_comes_first(self, case_sensitive_words):
        searcher = DictionarySearcher(case_sensitive_words, match_backwards=True)
        found = searcher.matches("password")
        assert [m.reversed for m in found] == [False, True]
        assert searcher.search("password") == "password"

    def test_case_policy_comes_from_word_list(self, case_insensitive_words):
        assert DictionarySearcher(case_insensitive_words).case_sensitive is False

    def test_requires_word_list(self):
        with pytest.raises(RuleConfigurationError):
            DictionarySearcher(["apple"])  # type: ignore[arg-type]

    def test_large_word_list(self):
        words = WordList.from_words(f"w{n:06d}" for n in range(50_000))
        searcher = DictionarySearcher(words, substring=True)

        match = searcher.lookup("xx-w049999-yy")
        assert match == DictionaryMatch(word="w049999", offset=3)
        assert searcher.lookup("w05") is None

    def test_empty_word_matches_everything(self):
        searcher = DictionarySearcher(WordList(["", "apple"]), substring=True)
        assert searcher.lookup("zzz") == DictionaryMatch(word="", offset=0)
