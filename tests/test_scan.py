"""Tests for the parallel embedded-substring scan."""

import pytest

from src.engine import ScanResult, merge_results, partition, scan_embedded, scan_partition


WORDS = ["band", "banana", "cat", "scatter", "an", "plan", "zebra"] * 5


class TestPartition:
    """Test splitting the word list across workers."""

    def test_even_split(self):
        parts = partition(list(range(10)), 3)
        assert [len(p) for p in parts] == [4, 4, 2]
        assert [x for p in parts for x in p] == list(range(10))

    def test_more_workers_than_words(self):
        parts = partition(["a", "b"], 8)
        assert parts == [["a"], ["b"]]

    def test_empty(self):
        assert partition([], 4) == []

    def test_single_worker(self):
        assert partition(["a", "b", "c"], 1) == [["a", "b", "c"]]


class TestScanPartition:
    """Test one worker's scan."""

    def test_embedded_occurrence(self):
        result = scan_partition(["band"], "an")
        assert result.prefix_letters == {"b"}
        assert result.suffix_letters == {"d"}
        assert result.found is True

    def test_every_occurrence_counted(self):
        """All occurrences within a word contribute, not just the first."""
        result = scan_partition(["bandana"], "an")
        assert result.prefix_letters == {"b", "d"}
        assert result.suffix_letters == {"d", "a"}

    def test_whole_word_match_is_found_without_letters(self):
        result = scan_partition(["an"], "an")
        assert result.found is True
        assert result.prefix_letters == frozenset()
        assert result.suffix_letters == frozenset()

    def test_no_occurrence(self):
        result = scan_partition(["cat", "dog"], "xyz")
        assert result == ScanResult()


class TestMerge:
    """Test the fan-in step."""

    def test_union_and_or(self):
        merged = merge_results([
            ScanResult(prefix_letters=frozenset("a"), suffix_letters=frozenset("x"), found=True),
            ScanResult(),
            ScanResult(prefix_letters=frozenset("b"), found=False),
        ])
        assert merged.prefix_letters == {"a", "b"}
        assert merged.suffix_letters == {"x"}
        assert merged.found is True

    def test_nothing_found(self):
        assert merge_results([ScanResult(), ScanResult()]).found is False

    def test_empty_input(self):
        assert merge_results([]) == ScanResult()


class TestScanEmbedded:
    """Test the full fan-out/fan-in scan."""

    @pytest.mark.parametrize("answer", ["an", "a", "at", "ban", "zz", "r"])
    def test_independent_of_worker_count(self, answer):
        """Merged results must not depend on how the list is partitioned."""
        baseline = scan_partition(WORDS, answer)
        for workers in (1, 2, 3, 4, 7, 64):
            assert scan_embedded(WORDS, answer, workers=workers) == baseline

    def test_default_workers(self):
        assert scan_embedded(WORDS, "an") == scan_partition(WORDS, "an")

    def test_process_pool(self):
        result = scan_embedded(WORDS, "an", workers=2, executor="process")
        assert result == scan_partition(WORDS, "an")

    def test_empty_word_list(self):
        assert scan_embedded([], "an", workers=4) == ScanResult()

    def test_empty_answer_rejected(self):
        with pytest.raises(ValueError):
            scan_embedded(WORDS, "", workers=2)
