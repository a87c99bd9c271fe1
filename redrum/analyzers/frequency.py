"""
Frequency Analyzer
===================

Counts character occurrences in a string (typically a hex digest) and
derives summary statistics from the counts.

The analysis pipeline:
1. Count occurrences per distinct character
2. Shannon entropy of the character distribution
3. Chi-squared test of the hex-symbol counts against a uniform
   distribution over ``0-9a-f``
4. Rank the most common characters

A SHA-256 digest has 64 symbols drawn from 16, so a typical digest
scores close to (but below) the 4.0-bit maximum, and the chi-squared
p-value is rarely small.

References:
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
    - Pearson, K. (1900). On the criterion that a given system of
      deviations. Philosophical Magazine, 50(302), 157-175.
"""

from __future__ import annotations

from collections import Counter

import numpy as np

from shared.math_utils import chi_squared_test, shannon_entropy
from redrum.core.models import FrequencyResult

HEX_ALPHABET: str = "0123456789abcdef"


def frequency(s: str) -> dict[str, int]:
    """Count occurrences of each character in *s*.

    The values always sum to ``len(s)``; an empty string gives ``{}``.
    """
    return dict(Counter(s))


class FrequencyAnalyzer:
    """Frequency statistics over a single string.

    Usage::

        analyzer = FrequencyAnalyzer(top=5)
        result = analyzer.analyze(word_digest)
        print(f"H = {result.shannon:.4f} bits/char")
    """

    def __init__(self, top: int = 5, alphabet: str = HEX_ALPHABET) -> None:
        self.top = top
        self.alphabet = alphabet

    def analyze(self, s: str) -> FrequencyResult:
        """Count the characters of *s* and compute statistics.

        Args:
            s: String to scan.

        Returns:
            FrequencyResult with counts, entropy, chi-squared and ranking.
        """
        counts = frequency(s)
        if not counts:
            return FrequencyResult()

        chi2, p_value = self._uniformity(counts)
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))

        return FrequencyResult(
            counts=counts,
            total=len(s),
            distinct=len(counts),
            shannon=shannon_entropy(s),
            chi_squared=chi2,
            chi_squared_p_value=p_value,
            most_common=ranked[: self.top],
        )

    def _uniformity(self, counts: dict[str, int]) -> tuple[float, float]:
        """Chi-squared of the alphabet symbols against a flat distribution.

        Characters outside the alphabet are not part of the test. With no
        alphabet symbols present the test is vacuous: ``(0.0, 1.0)``.
        """
        observed = np.array([counts.get(c, 0) for c in self.alphabet], dtype=np.float64)
        n = observed.sum()
        if n == 0:
            return 0.0, 1.0

        expected = np.full(len(self.alphabet), n / len(self.alphabet))
        return chi_squared_test(observed, expected)
