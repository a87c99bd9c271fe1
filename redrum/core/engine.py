"""
Redrum Analysis Engine
=======================

Central orchestrator for the digest cross-analysis pipeline. The
:class:`RedrumEngine` applies the configured case normalisation, runs
the analyzers in order and wraps the outcome in a
:class:`~shared.models.ScanResult` envelope with findings.

Pipeline for one word::

    word -> analyze_combined -> (word digest, char digests, combined digest)
         -> FrequencyAnalyzer over the word digest
         -> analyze_shifts(word, word digest, combined digest)
"""

from __future__ import annotations

from typing import Optional

from shared.config import Config
from shared.logger import RedrumLogger
from shared.models import Finding, ScanResult, Severity

from redrum.analyzers.alphabet import lookup
from redrum.analyzers.combined import analyze_combined
from redrum.analyzers.frequency import FrequencyAnalyzer
from redrum.analyzers.shifts import analyze_shifts
from redrum.core.models import AlphabetIndex, FrequencyResult, WordAnalysis


class RedrumEngine:
    """Orchestrates the digest analysis of a word.

    Usage::

        engine = RedrumEngine()
        analysis = engine.analyze_word("redrum")   # WordAnalysis for "REDRUM"
        result = engine.analyze("redrum")          # ScanResult envelope

    Attributes:
        config: Configuration instance.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        logger: Optional[RedrumLogger] = None,
    ) -> None:
        self.config = config or Config()
        settings = self.config.global_settings
        self.logger = logger or RedrumLogger(
            "engine",
            log_level=settings.log_level,
            log_file=settings.log_file or None,
            json_logs=settings.log_json,
        )
        self._frequency_analyzer = FrequencyAnalyzer(top=self.config.redrum.top_frequencies)

    def normalize(self, word: str) -> str:
        """Apply the configured case normalisation."""
        return word.upper() if self.config.redrum.normalize_case else word

    # ------------------------------------------------------------------ #
    #  Word Analysis
    # ------------------------------------------------------------------ #

    def analyze_word(self, word: str) -> WordAnalysis:
        """Run the full pipeline over *word*.

        Raises:
            InvalidCharacterError: If ``strict_alphabet`` is enabled and
                the word contains a character outside A-Z / a-z.
        """
        opts = self.config.redrum
        word = self.normalize(word)

        with self.logger.timed(f"digest analysis of {word!r}"):
            with self.logger.operation("combined_digest"):
                combined = analyze_combined(word)
                self.logger.debug(
                    "Hashed %d characters, combined digest %s",
                    len(combined.char_digests),
                    combined.combined_digest,
                )

            with self.logger.operation("frequency"):
                freq = self._frequency_analyzer.analyze(combined.word_digest)

            with self.logger.operation("shift_analysis"):
                shifts = analyze_shifts(
                    word,
                    combined.word_digest,
                    combined.combined_digest,
                    strict=opts.strict_alphabet,
                    placeholder=opts.placeholder,
                )

        invalid = list(dict.fromkeys(
            shift.character for shift in shifts if shift.alphabet_index is None
        ))
        if invalid:
            self.logger.warning(
                "Characters outside A-Z have no alphabet index: %s",
                ", ".join(repr(c) for c in invalid),
            )

        return WordAnalysis(
            word=word,
            word_digest=combined.word_digest,
            char_digests=combined.char_digests,
            frequency=freq,
            combined_digest=combined.combined_digest,
            shifts=shifts,
            invalid_characters=invalid,
        )

    def analyze(self, word: str) -> ScanResult:
        """Analyse *word* and wrap the outcome with findings.

        The :class:`WordAnalysis` payload is stored in ``metadata``.
        """
        result = ScanResult(tool_name="redrum", target=self.normalize(word))
        self.logger.info("Starting digest analysis: %r", result.target)

        analysis = self.analyze_word(word)
        result.metadata = analysis.model_dump(mode="json")

        result.add_finding(Finding(
            severity=Severity.INFO,
            title="Digest Analysis Complete",
            description=(
                f"Word of {len(analysis.word)} characters hashed to "
                f"{analysis.word_digest}; combined digest "
                f"{analysis.combined_digest}. Word-digest entropy "
                f"{analysis.frequency.shannon:.4f} bits/char over "
                f"{analysis.frequency.distinct} distinct hex digits."
            ),
            evidence={
                "word_digest": analysis.word_digest,
                "combined_digest": analysis.combined_digest,
                "shannon": analysis.frequency.shannon,
                "chi_squared_p_value": analysis.frequency.chi_squared_p_value,
            },
        ))

        matches = analysis.matching_positions
        if matches:
            result.add_finding(Finding(
                severity=Severity.INFO,
                title="Positional Digest Matches",
                description=(
                    f"Word digest and combined digest carry the same character "
                    f"at {len(matches)} word position(s): "
                    f"{', '.join(str(p) for p in matches)}."
                ),
                evidence={"positions": matches},
            ))

        if analysis.invalid_characters:
            result.add_finding(Finding(
                severity=Severity.LOW,
                title="Non-Letter Characters",
                description=(
                    "The word contains characters outside A-Z; their alphabet "
                    "index is reported as empty: "
                    f"{', '.join(repr(c) for c in analysis.invalid_characters)}."
                ),
                evidence={"characters": analysis.invalid_characters},
                recommendation="Restrict the word to ASCII letters for a complete shift table.",
            ))

        result.finalize(
            f"Digest analysis of {analysis.word!r}: {len(analysis.shifts)} positions, "
            f"{len(matches)} digest match(es)"
        )
        self.logger.info("Digest analysis completed in %.3fs", result.duration_seconds or 0.0)
        return result

    # ------------------------------------------------------------------ #
    #  Single-operation helpers
    # ------------------------------------------------------------------ #

    def analyze_frequency(self, text: str) -> FrequencyResult:
        """Frequency statistics of *text*, taken verbatim."""
        with self.logger.operation("frequency"):
            self.logger.debug("Counting %d characters", len(text))
            return self._frequency_analyzer.analyze(text)

    def index(self, character: str) -> AlphabetIndex:
        """Tagged alphabet lookup of *character*."""
        entry = lookup(character)
        if not entry.valid:
            self.logger.warning("%s", entry.error)
        return entry
