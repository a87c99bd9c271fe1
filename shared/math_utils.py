"""
Redrum Mathematical Utilities
==============================

Entropy and goodness-of-fit helpers used by the frequency analyzer.

References:
    [1] Shannon, C. E. (1948). A Mathematical Theory of Communication.
        Bell System Technical Journal, 27(3), 379-423.
    [2] Pearson, K. (1900). On the Criterion that a Given System of
        Deviations ... Philosophical Magazine, 50(302), 157-175.
    [3] Press, W. H. et al. (2007). Numerical Recipes (3rd ed.).
        Cambridge University Press, Section 6.2.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Hashable, Iterable

import numpy as np
from numpy.typing import ArrayLike


# ========================== Entropy Measures ===============================


def shannon_entropy(symbols: Iterable[Hashable]) -> float:
    """Compute the Shannon entropy of a symbol sequence.

    .. math::

        H = -\\sum_i p_i \\, \\log_2(p_i)

    where :math:`p_i` is the relative frequency of symbol *i*. Works on
    ``str`` (characters), ``bytes`` (byte values) or any iterable of
    hashable symbols. For a hex digest the maximum is 4.0 bits per
    symbol (16 equiprobable symbols).

    Args:
        symbols: Sequence to analyse.

    Returns:
        Entropy in bits per symbol. Returns 0.0 for empty input.
    """
    counts = Counter(symbols)
    length = sum(counts.values())
    if length == 0:
        return 0.0

    entropy = 0.0
    for count in counts.values():
        p = count / length
        entropy -= p * math.log2(p)
    return entropy


# ======================== Statistical Tests ================================


def chi_squared_test(
    observed: ArrayLike, expected: ArrayLike
) -> tuple[float, float]:
    """Perform Pearson's chi-squared goodness-of-fit test.

    .. math::

        \\chi^2 = \\sum_i \\frac{(O_i - E_i)^2}{E_i}

    The p-value is computed with the regularised upper incomplete gamma
    function, matching ``scipy.stats.chi2.sf`` without requiring SciPy.

    Args:
        observed: Observed frequency counts (1-D, length *k*).
        expected: Expected frequency counts (1-D, length *k*).

    Returns:
        Tuple of ``(chi2_statistic, p_value)``.

    Raises:
        ValueError: If arrays differ in length or expected contains zeros.
    """
    observed = np.asarray(observed, dtype=np.float64)
    expected = np.asarray(expected, dtype=np.float64)

    if observed.shape != expected.shape:
        raise ValueError("Array shapes must match")
    if np.any(expected <= 0):
        raise ValueError("Expected values must be > 0")

    chi2 = float(np.sum((observed - expected) ** 2 / expected))
    dof = len(observed) - 1

    if dof <= 0:
        return chi2, 1.0

    # p-value via regularised upper incomplete gamma: Q(dof/2, chi2/2)
    return chi2, _upper_inc_gamma_reg(dof / 2.0, chi2 / 2.0)


# --------------- Incomplete gamma helpers (Numerical Recipes, Ch. 6) ------


def _upper_inc_gamma_reg(a: float, x: float) -> float:
    """Regularised upper incomplete gamma Q(a, x) = 1 - P(a, x).

    Series expansion for small *x*, Lentz continued fraction otherwise.
    """
    if x <= 0.0 or a <= 0.0:
        return 1.0

    if x < a + 1.0:
        return 1.0 - _gamma_p_series(a, x)
    return _gamma_q_cf(a, x)


def _gamma_p_series(a: float, x: float) -> float:
    """Lower regularised incomplete gamma P(a, x) by series expansion."""
    ap = a
    delta = 1.0 / a
    total = delta
    for _ in range(300):
        ap += 1.0
        delta *= x / ap
        total += delta
        if abs(delta) < abs(total) * 1e-15:
            break
    return total * math.exp(-x + a * math.log(x) - math.lgamma(a))


def _gamma_q_cf(a: float, x: float) -> float:
    """Upper regularised incomplete gamma Q(a, x) by Lentz continued fraction."""
    tiny = 1e-30
    b = x + 1.0 - a
    c = 1.0 / tiny
    d = 1.0 / b
    f = d
    for i in range(1, 300):
        an = -i * (i - a)
        b += 2.0
        d = an * d + b
        if abs(d) < tiny:
            d = tiny
        c = b + an / c
        if abs(c) < tiny:
            c = tiny
        d = 1.0 / d
        delta = d * c
        f *= delta
        if abs(delta - 1.0) < 1e-15:
            break
    return f * math.exp(-x + a * math.log(x) - math.lgamma(a))
