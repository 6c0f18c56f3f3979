"""Tests for the suffix-array word index."""

import random

import pytest

from src.index import WordDictionary, WordIndex, WordListDS, build_suffix_array


WORDS = [
    "elephant", "envelope", "pen", "penguin", "people", "person",
    "personal", "prepositions", "repeat", "sheep", "sleep",
]


@pytest.fixture
def ds():
    return WordListDS(WORDS)


class TestSuffixArray:
    """Test the suffix array builder."""

    def test_banana(self):
        assert build_suffix_array("banana") == [5, 3, 1, 0, 4, 2]

    def test_empty(self):
        assert build_suffix_array("") == []

    def test_single_character(self):
        assert build_suffix_array("a") == [0]

    def test_matches_naive_sort(self):
        text = "$".join(WORDS)
        expected = sorted(range(len(text)), key=lambda i: text[i:])
        assert build_suffix_array(text) == expected

    def test_repetitive_text(self):
        text = "aaaa$aa$aaa"
        expected = sorted(range(len(text)), key=lambda i: text[i:])
        assert build_suffix_array(text) == expected


class TestConstruction:
    """Test buffer layout."""

    def test_data_is_separator_joined(self, ds):
        assert ds.data == "elephant$envelope$pen$penguin$people$person$personal$prepositions$repeat$sheep$sleep"

    def test_index_covers_buffer(self, ds):
        assert len(ds.suffix_array) == len(ds.data)

    def test_words_lower_cased(self):
        ds = WordListDS(["Cat", "DOG"])
        assert ds.words == ["cat", "dog"]
        assert ds.contains("cat")

    def test_separator_in_word_rejected(self):
        with pytest.raises(ValueError):
            WordListDS(["ca$t"])

    def test_satisfies_word_index_protocol(self, ds):
        assert isinstance(ds, WordIndex)


class TestGetGroups:
    """Test occurrence-based letter groups."""

    def test_empty_query_uses_initial_groups(self):
        ds = WordListDS(WORDS + ["zoo"])
        groups = ds.get_groups("")
        assert groups.prepend == ["e", "l", "n", "o", "p", "s", "t"]
        assert groups.append == ["e", "p", "r", "s", "z"]

    def test_empty_query_matches_naive_scan(self):
        """Initial groups equal a direct first/last letter scan of any corpus."""
        rng = random.Random(7)
        words = [
            "".join(rng.choice("abcdefgh") for _ in range(rng.randint(1, 6)))
            for _ in range(200)
        ]
        groups = WordListDS(words).get_groups("")
        assert groups.prepend == sorted({w[-1] for w in words})
        assert groups.append == sorted({w[0] for w in words})

    def test_single_character_query(self, ds):
        groups = ds.get_groups("e")
        assert groups.prepend == ["e", "h", "l", "p", "r", "v"]
        assert groups.append == ["a", "e", "l", "n", "o", "p", "r"]

    def test_multi_character_query(self, ds):
        groups = ds.get_groups("ep")
        assert groups.prepend == ["e", "l", "r"]
        assert groups.append == ["e", "h", "o"]

    def test_no_match(self, ds):
        groups = ds.get_groups("xyz")
        assert groups.prepend == []
        assert groups.append == []

    def test_entire_word(self, ds):
        """A whole word has no prepend letters; only longer words extend it."""
        groups = ds.get_groups("pen")
        assert groups.prepend == []
        assert groups.append == ["g"]

    def test_query_with_separator(self, ds):
        groups = ds.get_groups("t$e")
        assert groups.prepend == []
        assert groups.append == []


class TestGetSuggestionGroups:
    """Test word classification by occurrence position."""

    def test_classification(self):
        ds = WordListDS(["band", "an", "and", "can", "panda"])
        groups = ds.get_suggestion_groups("an")
        assert groups.append == ["and"]
        assert groups.prepend == ["can"]
        assert groups.middle == ["an", "band", "panda"]

    def test_exact_word_only_in_middle(self, ds):
        groups = ds.get_suggestion_groups("pen")
        assert "pen" not in groups.append
        assert "pen" not in groups.prepend
        assert "pen" in groups.middle
        assert groups.append == ["penguin"]

    def test_prefix_query(self, ds):
        groups = ds.get_suggestion_groups("pe")
        assert groups.append == ["pen", "penguin", "people", "person", "personal"]
        assert groups.prepend == ["envelope"]
        assert groups.middle == ["repeat"]

    def test_no_match(self, ds):
        groups = ds.get_suggestion_groups("qq")
        assert groups.append == groups.prepend == groups.middle == []

    def test_empty_query(self, ds):
        groups = ds.get_suggestion_groups("")
        assert groups.append == groups.prepend == groups.middle == []


class TestContains:
    """Test whole-word membership."""

    @pytest.mark.parametrize("word,expected", [
        ("people", True),       # middle of the buffer
        ("elephant", True),     # start of the buffer
        ("sleep", True),        # end of the buffer
        ("pen", True),
        ("grape", False),
        ("", False),
        ("ban", False),
        ("pe", False),          # partial word
        ("leep", False),        # tail of the last word
        ("Banana", False),
        ("pen$penguin", False),
    ])
    def test_contains(self, ds, word, expected):
        assert ds.contains(word) is expected
        assert (word in ds) is expected

    def test_word_ending_another_word(self):
        """A word is found whether or not a longer word ends with it."""
        ds = WordListDS(["cat", "at"])
        assert ds.contains("cat")
        assert ds.contains("at")
        assert not ds.contains("ca")

    def test_single_word_corpus(self):
        ds = WordListDS(["solo"])
        assert ds.contains("solo")
        assert not ds.contains("olo")

    def test_agrees_with_word_dictionary(self, ds):
        dictionary = WordDictionary(WORDS)
        for word in WORDS + ["absent", "pens", "sheeps"]:
            assert ds.contains(word) == dictionary.contains_word(word)


class TestWordIndexSurface:
    """Test the queries shared with WordDictionary."""

    @pytest.mark.parametrize("prefix", ["", "p", "pe", "pen", "person", "x"])
    def test_prefix_matches_dictionary(self, ds, prefix):
        dictionary = WordDictionary(WORDS)
        assert ds.find_words_with_prefix(prefix) == sorted(dictionary.find_words_with_prefix(prefix))

    @pytest.mark.parametrize("suffix", ["", "p", "ep", "eep", "n", "x"])
    def test_suffix_matches_dictionary(self, ds, suffix):
        dictionary = WordDictionary(WORDS)
        assert ds.find_words_with_suffix(suffix) == sorted(dictionary.find_words_with_suffix(suffix))

    @pytest.mark.parametrize("query", ["", "p", "pe", "pen", "per", "s", "x"])
    def test_next_letters_match_dictionary(self, ds, query):
        dictionary = WordDictionary(WORDS)
        assert ds.next_letters(query) == dictionary.next_letters(query)

    @pytest.mark.parametrize("query", ["", "p", "ep", "eep", "n", "on", "x"])
    def test_previous_letters_match_dictionary(self, ds, query):
        dictionary = WordDictionary(WORDS)
        assert ds.previous_letters(query) == dictionary.previous_letters(query)
