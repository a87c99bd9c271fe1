"""
Combined-Digest Analyzer
=========================

Digests a word twice over: once directly, and once as the digest of
the concatenation of its per-character digests (a 64 * len(word)
character hex string, no separators, in word order). Reordering the
letters of a word changes the combined digest even though the set of
per-character digests is unchanged.
"""

from __future__ import annotations

from redrum.analyzers.digest import digest, digest_chars
from redrum.core.models import CombinedAnalysis


def analyze_combined(word: str) -> CombinedAnalysis:
    """Compute the word digest, per-character digests and combined digest.

    For an empty word the per-character list is empty and the combined
    digest equals ``digest("")``.
    """
    word_digest = digest(word)
    char_digests = digest_chars(word)
    concatenated = "".join(pair.digest for pair in char_digests)

    return CombinedAnalysis(
        word_digest=word_digest,
        char_digests=char_digests,
        combined_digest=digest(concatenated),
    )
