"""
Tests for the shift analyzer and guarded digest lookup
"""

import pytest

from redrum.analyzers.combined import analyze_combined
from redrum.analyzers.shifts import analyze_shifts, digest_char_at
from redrum.core.errors import InvalidCharacterError


class TestDigestCharAt:
    def test_in_range(self):
        assert digest_char_at("abc", 1) == "b"

    def test_wraps_around(self):
        assert digest_char_at("abc", 4) == "b"

    def test_empty_digest_gives_placeholder(self):
        assert digest_char_at("", 0) == "?"
        assert digest_char_at("", 10, placeholder="*") == "*"


class TestAnalyzeShifts:
    def test_mock_digests(self):
        shifts = analyze_shifts("TEST", "a" * 64, "b" * 64)
        assert len(shifts) == 4
        assert shifts[0].as_tuple() == ("T", 19, "a", "b")
        assert [s.alphabet_index for s in shifts] == [19, 4, 18, 19]

    def test_positions_follow_the_word(self):
        shifts = analyze_shifts("ABC", "0123", "wxyz")
        assert [s.position for s in shifts] == [0, 1, 2]
        assert [s.word_char for s in shifts] == ["0", "1", "2"]
        assert [s.combined_char for s in shifts] == ["w", "x", "y"]

    def test_empty_word(self):
        assert analyze_shifts("", "a" * 64, "b" * 64) == []
        assert analyze_shifts("", "", "") == []

    def test_long_word_wraps_digest(self):
        word = "AB" * 40
        word_digest = "0123456789abcdef" * 4
        shifts = analyze_shifts(word, word_digest, word_digest)
        assert len(shifts) == 80
        assert shifts[64].word_char == word_digest[0]
        assert shifts[79].combined_char == word_digest[15]

    def test_empty_digests_use_placeholder(self):
        shifts = analyze_shifts("AB", "", "")
        assert all(s.word_char == "?" and s.combined_char == "?" for s in shifts)

    def test_non_letter_gets_no_index(self):
        shifts = analyze_shifts("A1", "a" * 64, "b" * 64)
        assert shifts[0].alphabet_index == 0
        assert shifts[1].alphabet_index is None
        assert shifts[1].character == "1"

    @pytest.mark.parametrize("placeholder", ["", "--"])
    def test_placeholder_must_be_one_character(self, placeholder):
        with pytest.raises(ValueError, match="single character"):
            analyze_shifts("AB", "", "", placeholder=placeholder)

    def test_strict_mode_raises(self):
        with pytest.raises(InvalidCharacterError):
            analyze_shifts("A1", "a" * 64, "b" * 64, strict=True)

    def test_matches_flag(self):
        shifts = analyze_shifts("AB", "xy", "xz")
        assert shifts[0].matches
        assert not shifts[1].matches

    def test_real_digests(self):
        combined = analyze_combined("REDRUM")
        shifts = analyze_shifts("REDRUM", combined.word_digest, combined.combined_digest)
        assert len(shifts) == 6
        for i, shift in enumerate(shifts):
            assert shift.word_char == combined.word_digest[i]
            assert shift.combined_char == combined.combined_digest[i]

    def test_inputs_are_not_mutated(self):
        word, wd, cd = "TEST", "a" * 64, "b" * 64
        analyze_shifts(word, wd, cd)
        assert (word, wd, cd) == ("TEST", "a" * 64, "b" * 64)
