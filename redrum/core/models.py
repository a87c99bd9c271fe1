"""
Redrum Core Data Models
========================

Pydantic models for the digest cross-analysis pipeline. Each model
mirrors one stage of the pipeline: per-character digests, frequency
statistics, alphabet indices, the combined digest and the positional
shift records, plus :class:`WordAnalysis` bundling a complete run.

All models are serialisable to JSON and designed for consumption by
both the Rich console output and the Markdown/JSON report generator.

References:
    - FIPS PUB 180-4 (2015). Secure Hash Standard (SHS).
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, computed_field

# Hex length of a SHA-256 digest
DIGEST_LENGTH: int = 64

# Returned by positional lookups into an empty digest
PLACEHOLDER: str = "?"


# ===================================================================== #
#  Digest Models
# ===================================================================== #


class CharacterDigest(BaseModel):
    """A single character of the word paired with its own digest.

    Attributes:
        character: One Unicode character of the word.
        digest: SHA-256 hex digest of the character's UTF-8 bytes.
    """

    character: str
    digest: str

    def as_tuple(self) -> tuple[str, str]:
        return self.character, self.digest


class CombinedAnalysis(BaseModel):
    """Word digest, per-character digests and the second-order digest.

    Attributes:
        word_digest: Digest of the whole word.
        char_digests: One :class:`CharacterDigest` per character, in word order.
        combined_digest: Digest of the in-order concatenation of
            every per-character digest string.
    """

    word_digest: str
    char_digests: list[CharacterDigest] = Field(default_factory=list)
    combined_digest: str

    @property
    def concatenated(self) -> str:
        """The string the combined digest was computed over."""
        return "".join(pair.digest for pair in self.char_digests)

    def as_tuple(self) -> tuple[str, list[tuple[str, str]], str]:
        return (
            self.word_digest,
            [pair.as_tuple() for pair in self.char_digests],
            self.combined_digest,
        )


# ===================================================================== #
#  Frequency Models
# ===================================================================== #


class FrequencyResult(BaseModel):
    """Character frequency statistics for a single string.

    Attributes:
        counts: Occurrences per distinct character.
        total: Length of the scanned string (sum of ``counts``).
        distinct: Number of distinct characters.
        shannon: Shannon entropy in bits per character.
        chi_squared: Chi-squared statistic against a uniform hex alphabet.
        chi_squared_p_value: P-value of the chi-squared test.
        most_common: ``(character, count)`` pairs, highest count first.
    """

    counts: dict[str, int] = Field(default_factory=dict)
    total: int = 0
    distinct: int = 0
    shannon: float = 0.0
    chi_squared: float = 0.0
    chi_squared_p_value: float = 1.0
    most_common: list[tuple[str, int]] = Field(default_factory=list)


# ===================================================================== #
#  Alphabet / Shift Models
# ===================================================================== #


class AlphabetIndex(BaseModel):
    """Tagged result of an alphabet lookup.

    Exactly one of ``index`` and ``error`` is set.

    Attributes:
        character: The looked-up input.
        index: Zero-based position in A-Z, when the input is a letter.
        error: Why the input has no position, otherwise.
    """

    character: str
    index: Optional[int] = Field(default=None, ge=0, le=25)
    error: Optional[str] = None

    @property
    def valid(self) -> bool:
        return self.index is not None


class ShiftRecord(BaseModel):
    """Positional correlation between one letter and two digests.

    Attributes:
        position: Zero-based position of the character in the word.
        character: The word's character at ``position``.
        alphabet_index: Its A-Z index, or ``None`` for non-letters.
        word_char: Word-digest character at ``position`` (cyclic).
        combined_char: Combined-digest character at ``position`` (cyclic).
    """

    position: int = Field(ge=0)
    character: str
    alphabet_index: Optional[int] = Field(default=None, ge=0, le=25)
    word_char: str
    combined_char: str

    @property
    def matches(self) -> bool:
        """Whether both digests carry the same character here."""
        return self.word_char == self.combined_char

    def as_tuple(self) -> tuple[str, Optional[int], str, str]:
        return self.character, self.alphabet_index, self.word_char, self.combined_char


# ===================================================================== #
#  Complete Run
# ===================================================================== #


class WordAnalysis(BaseModel):
    """Every artefact produced for one word.

    Attributes:
        word: The analysed word, after any case normalisation.
        word_digest: SHA-256 digest of the word.
        char_digests: Per-character digests in word order.
        frequency: Frequency statistics over ``word_digest``.
        combined_digest: Second-order digest of the per-character digests.
        shifts: One :class:`ShiftRecord` per character.
        invalid_characters: Characters with no alphabet index, in order
            of first appearance.
    """

    word: str
    word_digest: str
    char_digests: list[CharacterDigest] = Field(default_factory=list)
    frequency: FrequencyResult = Field(default_factory=FrequencyResult)
    combined_digest: str
    shifts: list[ShiftRecord] = Field(default_factory=list)
    invalid_characters: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def matching_positions(self) -> list[int]:
        """Word positions where both digests agree."""
        return [shift.position for shift in self.shifts if shift.matches]
