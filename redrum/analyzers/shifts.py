"""
Shift Analyzer
===============

Pairs every character of a word with its alphabet index and with the
characters found at the same position in two digests. Positions wrap
around the digest, so a word longer than 64 characters re-reads each
digest cyclically.
"""

from __future__ import annotations

from redrum.analyzers.alphabet import alphabet_index
from redrum.core.errors import InvalidCharacterError
from redrum.core.models import PLACEHOLDER, ShiftRecord


def digest_char_at(digest: str, position: int, placeholder: str = PLACEHOLDER) -> str:
    """Return ``digest[position % len(digest)]``, or *placeholder* if empty."""
    if not digest:
        return placeholder
    return digest[position % len(digest)]


def analyze_shifts(
    word: str,
    word_digest: str,
    combined_digest: str,
    *,
    strict: bool = False,
    placeholder: str = PLACEHOLDER,
) -> list[ShiftRecord]:
    """Build one :class:`ShiftRecord` per character of *word*.

    Args:
        word: The analysed word.
        word_digest: Digest of the word.
        combined_digest: Combined digest of the word.
        strict: Propagate :class:`InvalidCharacterError` for non-letters
            instead of recording ``alphabet_index=None``.
        placeholder: Character reported for lookups into an empty digest.

    Returns:
        Records in word order; empty for an empty word.

    Raises:
        ValueError: If *placeholder* is not exactly one character.
    """
    if len(placeholder) != 1:
        raise ValueError(f"placeholder must be a single character, got {placeholder!r}")

    records: list[ShiftRecord] = []
    for position, c in enumerate(word):
        try:
            index = alphabet_index(c)
        except InvalidCharacterError:
            if strict:
                raise
            index = None

        records.append(ShiftRecord(
            position=position,
            character=c,
            alphabet_index=index,
            word_char=digest_char_at(word_digest, position, placeholder),
            combined_char=digest_char_at(combined_digest, position, placeholder),
        ))
    return records
