"""
Tests for the digest function and per-character digester
"""

import hashlib
import string

from redrum.analyzers.digest import digest, digest_bytes, digest_chars
from redrum.core.models import DIGEST_LENGTH

HEX = set(string.hexdigits.lower())


class TestDigest:
    def test_redrum_is_64_hex_chars(self):
        result = digest("REDRUM")
        assert len(result) == DIGEST_LENGTH
        assert set(result) <= HEX

    def test_known_vectors(self):
        assert digest("") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        assert digest("abc") == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

    def test_deterministic(self):
        assert digest("TEST") == digest("TEST")

    def test_text_is_utf8_encoded(self):
        assert digest("Éclair") == hashlib.sha256("Éclair".encode("utf-8")).hexdigest()

    def test_digest_bytes_matches_text_digest(self):
        assert digest_bytes(b"REDRUM") == digest("REDRUM")

    def test_lowercase_output(self):
        result = digest_bytes(bytes(range(256)))
        assert result == result.lower()
        assert len(result) == 64


class TestDigestChars:
    def test_abc_pairs_in_order(self):
        pairs = digest_chars("ABC")
        assert len(pairs) == 3
        assert [p.character for p in pairs] == ["A", "B", "C"]

    def test_each_pair_is_the_character_digest(self):
        for pair in digest_chars("REDRUM"):
            assert pair.digest == digest(pair.character)
            assert len(pair.digest) == 64

    def test_empty_word(self):
        assert digest_chars("") == []

    def test_iterates_by_code_point(self):
        pairs = digest_chars("ÉA")
        assert len(pairs) == 2
        assert pairs[0].character == "É"
        assert pairs[0].digest == hashlib.sha256("É".encode("utf-8")).hexdigest()

    def test_repeated_characters_share_a_digest(self):
        pairs = digest_chars("RR")
        assert pairs[0].digest == pairs[1].digest

    def test_as_tuple(self):
        pair = digest_chars("A")[0]
        assert pair.as_tuple() == ("A", digest("A"))
