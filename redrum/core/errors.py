"""
Redrum Errors
==============

Exception hierarchy for the analysis pipeline. Digesting never fails;
the only input-contract violation is asking for the alphabet index of
something that is not an ASCII letter.
"""

from __future__ import annotations


class RedrumError(Exception):
    """Base class for all Redrum errors."""


class InvalidCharacterError(RedrumError, ValueError):
    """Raised when a character has no position in the A-Z alphabet.

    Attributes:
        character: The offending input, exactly as received.
    """

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(
            f"Invalid character {character!r}: expected a single ASCII letter (A-Z, a-z)"
        )
