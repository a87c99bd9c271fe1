"""
Alphabet Indexer
=================

Maps an ASCII letter to its zero-based position in A-Z, ignoring case.
Anything else (digits, punctuation, whitespace, accented or non-Latin
letters, empty or multi-character strings) is rejected with
:class:`~redrum.core.errors.InvalidCharacterError`.
"""

from __future__ import annotations

import string

from redrum.core.errors import InvalidCharacterError
from redrum.core.models import AlphabetIndex

_ASCII_LETTERS = frozenset(string.ascii_letters)


def alphabet_index(c: str) -> int:
    """Return the 0-25 position of the letter *c* (``'A'`` and ``'a'`` are 0).

    Raises:
        InvalidCharacterError: If *c* is not a single ASCII letter.
    """
    if len(c) != 1 or c not in _ASCII_LETTERS:
        raise InvalidCharacterError(c)
    return ord(c.upper()) - ord("A")


def lookup(c: str) -> AlphabetIndex:
    """Non-raising variant of :func:`alphabet_index`."""
    try:
        return AlphabetIndex(character=c, index=alphabet_index(c))
    except InvalidCharacterError as exc:
        return AlphabetIndex(character=c, error=str(exc))
