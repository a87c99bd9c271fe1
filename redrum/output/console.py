"""
Redrum Console Output
======================

Rich-based renderers for analysis results. The five sections of a word
analysis follow the order of the pipeline: full hash, per-character
hashes, frequency of the full hash, word vs. combined hash, and the
character shifting table.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import RedrumConsole
from redrum.core.models import AlphabetIndex, FrequencyResult, WordAnalysis


def _table(title: str) -> Table:
    return Table(
        title=title,
        border_style="bright_cyan",
        header_style="bold bright_magenta",
        show_lines=False,
    )


class RedrumConsoleOutput:
    """Console output formatters for Redrum results.

    Usage::

        console = RedrumConsole()
        output = RedrumConsoleOutput(console)
        output.display_analysis(engine.analyze_word("REDRUM"))
    """

    def __init__(self, console: Optional[RedrumConsole] = None) -> None:
        self.console = console or RedrumConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Full Word Analysis
    # ------------------------------------------------------------------ #

    def display_analysis(self, analysis: WordAnalysis) -> None:
        """Render all five sections of a word analysis."""
        self._rich.print(Text(f'Hash Analysis of "{analysis.word}"', style="bold bright_white"))
        self.console.blank()

        self.console.section("1. Full SHA-256 Hash")
        self._rich.print(Panel(Text(analysis.word_digest, style="bright_green"), border_style="cyan"))

        self.console.section("2. Individual Character Hashes")
        self.console.table(
            "Individual Character Hashes",
            ["Character", "SHA-256 Hash"],
            [pair.as_tuple() for pair in analysis.char_digests],
            styles=["bold", "green"],
        )

        self.console.section("3. Frequency Analysis of Full Hash")
        self.display_frequency(analysis.frequency)

        self.console.section("4. Combined Hash Analysis")
        self._display_combined(analysis)

        self.console.section("5. Character Shifting Analysis")
        self._display_shifts(analysis)

    def _display_combined(self, analysis: WordAnalysis) -> None:
        text = Text()
        text.append("Word Hash:     ", style="bold")
        text.append(f"{analysis.word_digest}\n", style="bright_green")
        text.append("Combined Hash: ", style="bold")
        text.append(analysis.combined_digest, style="bright_yellow")
        self._rich.print(Panel(text, title="Word Hash vs. Combined Hash", border_style="cyan"))

    def _display_shifts(self, analysis: WordAnalysis) -> None:
        tbl = _table("Character Shifting Analysis")
        tbl.add_column("Character", style="bold")
        tbl.add_column("Alphabet Index", justify="right")
        tbl.add_column("Word Hash Char", justify="center")
        tbl.add_column("Combined Hash Char", justify="center")

        for shift in analysis.shifts:
            index = "-" if shift.alphabet_index is None else str(shift.alphabet_index)
            style = "bold bright_yellow" if shift.matches else ""
            tbl.add_row(
                Text(shift.character),
                index,
                Text(shift.word_char, style=style),
                Text(shift.combined_char, style=style),
            )

        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Frequency Display
    # ------------------------------------------------------------------ #

    def display_frequency(self, result: FrequencyResult) -> None:
        """Render a frequency table plus entropy / chi-squared summary."""
        tbl = _table("Character Frequency")
        tbl.add_column("Character", style="bold")
        tbl.add_column("Frequency", justify="right")
        tbl.add_column("Share", justify="right")

        for char, count in sorted(result.counts.items()):
            share = count / result.total if result.total else 0.0
            tbl.add_row(Text(char), str(count), f"{share:.1%}")

        self._rich.print(tbl)

        summary = Text()
        summary.append("Characters: ", style="bold")
        summary.append(f"{result.total} ({result.distinct} distinct)\n")
        summary.append("Shannon Entropy: ", style="bold")
        summary.append(f"{result.shannon:.4f} bits/char\n")
        summary.append("Chi-Squared (hex uniform): ", style="bold")
        summary.append(f"{result.chi_squared:.4f} (p = {result.chi_squared_p_value:.4f})\n")
        summary.append("Most Common: ", style="bold")
        summary.append(", ".join(f"{c!r} x{n}" for c, n in result.most_common) or "-")
        self._rich.print(Panel(summary, title="Overview", border_style="cyan"))

    # ------------------------------------------------------------------ #
    #  Single Operations
    # ------------------------------------------------------------------ #

    def display_digest(self, text: str, digest: str) -> None:
        """Render a single digest with its input."""
        self._rich.print(Panel(
            Text(digest, style="bright_green"),
            title=Text(f"SHA-256 of {text!r}"),
            border_style="cyan",
        ))

    def display_index(self, entry: AlphabetIndex) -> None:
        """Render a tagged alphabet lookup."""
        if entry.valid:
            self.console.success(f"{entry.character!r} has alphabet index {entry.index}")
        else:
            self.console.error(entry.error or f"{entry.character!r} has no alphabet index")
