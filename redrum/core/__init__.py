"""
Redrum Core Module
===================

Data models and errors shared by the analyzers, the engine and the
output layer. The engine lives in :mod:`redrum.core.engine`.
"""

from redrum.core.errors import InvalidCharacterError, RedrumError
from redrum.core.models import (
    DIGEST_LENGTH,
    PLACEHOLDER,
    AlphabetIndex,
    CharacterDigest,
    CombinedAnalysis,
    FrequencyResult,
    ShiftRecord,
    WordAnalysis,
)

__all__ = [
    "DIGEST_LENGTH",
    "PLACEHOLDER",
    "AlphabetIndex",
    "CharacterDigest",
    "CombinedAnalysis",
    "FrequencyResult",
    "InvalidCharacterError",
    "RedrumError",
    "ShiftRecord",
    "WordAnalysis",
]
