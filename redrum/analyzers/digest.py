"""
Digest Function and Per-Character Digester
===========================================

SHA-256 is fixed: outputs are bit-exact with any reference
implementation (FIPS PUB 180-4), always 64 lowercase hex characters.
"""

from __future__ import annotations

import hashlib

from redrum.core.models import CharacterDigest


def digest_bytes(data: bytes) -> str:
    """Return the SHA-256 hex digest of *data* (empty input allowed)."""
    return hashlib.sha256(data).hexdigest()


def digest(text: str) -> str:
    """Return the SHA-256 hex digest of the UTF-8 encoding of *text*.

    Example::

        >>> len(digest("REDRUM"))
        64
    """
    return digest_bytes(text.encode("utf-8"))


def digest_chars(word: str) -> list[CharacterDigest]:
    """Digest every character of *word* on its own.

    Iterates by code point, so a multi-byte character such as ``"É"`` is
    hashed as its full UTF-8 sequence. The result follows word order;
    an empty word yields an empty list.
    """
    return [CharacterDigest(character=c, digest=digest(c)) for c in word]
