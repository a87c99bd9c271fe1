"""
Redrum Analyzers
=================

The digest-analysis pipeline. Every function here is pure and
deterministic: no I/O, no shared state.
"""

from redrum.analyzers.digest import digest, digest_bytes, digest_chars
from redrum.analyzers.frequency import FrequencyAnalyzer, frequency
from redrum.analyzers.alphabet import alphabet_index, lookup
from redrum.analyzers.combined import analyze_combined
from redrum.analyzers.shifts import analyze_shifts, digest_char_at

__all__ = [
    "FrequencyAnalyzer",
    "alphabet_index",
    "analyze_combined",
    "analyze_shifts",
    "digest",
    "digest_bytes",
    "digest_char_at",
    "digest_chars",
    "frequency",
    "lookup",
]
