"""
Tests for the frequency counter and analyzer
"""

import math

import pytest

from redrum.analyzers.digest import digest
from redrum.analyzers.frequency import FrequencyAnalyzer, frequency


class TestFrequency:
    def test_aabbcc(self):
        assert frequency("aabbcc") == {"a": 2, "b": 2, "c": 2}

    def test_empty_string(self):
        assert frequency("") == {}

    @pytest.mark.parametrize("text", ["", "x", "hello world", "REDRUM", "ÉÉé"])
    def test_counts_sum_to_length(self, text):
        assert sum(frequency(text).values()) == len(text)

    def test_digest_counts_sum_to_64_over_hex_only(self):
        counts = frequency(digest("REDRUM"))
        assert sum(counts.values()) == 64
        assert set(counts) <= set("0123456789abcdef")


class TestFrequencyAnalyzer:
    def test_empty_string_gives_defaults(self):
        result = FrequencyAnalyzer().analyze("")
        assert result.counts == {}
        assert result.total == 0
        assert result.shannon == 0.0
        assert result.chi_squared_p_value == 1.0
        assert result.most_common == []

    def test_basic_statistics(self):
        result = FrequencyAnalyzer().analyze("aabbcc")
        assert result.total == 6
        assert result.distinct == 3
        assert result.shannon == pytest.approx(math.log2(3))

    def test_uniform_hex_string(self):
        result = FrequencyAnalyzer().analyze("0123456789abcdef" * 4)
        assert result.shannon == pytest.approx(4.0)
        assert result.chi_squared == pytest.approx(0.0)
        assert result.chi_squared_p_value == pytest.approx(1.0)

    def test_skewed_hex_string_fails_uniformity(self):
        result = FrequencyAnalyzer().analyze("a" * 64)
        assert result.chi_squared == pytest.approx(960.0)
        assert result.chi_squared_p_value < 1e-6

    def test_non_hex_text_has_vacuous_chi_squared(self):
        result = FrequencyAnalyzer().analyze("xyz")
        assert result.chi_squared == 0.0
        assert result.chi_squared_p_value == 1.0

    def test_most_common_ranking_breaks_ties_by_character(self):
        result = FrequencyAnalyzer(top=3).analyze("ccbbbaa")
        assert result.most_common == [("b", 3), ("a", 2), ("c", 2)]

    def test_word_digest_entropy_is_bounded(self):
        result = FrequencyAnalyzer().analyze(digest("REDRUM"))
        assert result.total == 64
        assert 0.0 < result.shannon <= 4.0
        assert 0.0 <= result.chi_squared_p_value <= 1.0
