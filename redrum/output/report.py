"""
Redrum Report Generator
========================

Generates Markdown and JSON reports from analysis results.

The Markdown report is the canonical textual form of a word analysis
(five numbered sections with pipe tables), suitable for pasting into
issues or notes. The JSON report carries the full
:class:`~shared.models.ScanResult` envelope for automated processing.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from shared.models import ScanResult
from redrum.core.models import FrequencyResult, WordAnalysis


def _cell(value: Any) -> str:
    """Render a Markdown table cell on one line, escaping the column separator."""
    if value is None:
        return "-"
    text = str(value).replace("|", "\\|")
    return text.replace("\r", "\\r").replace("\n", "\\n")


class RedrumReportGenerator:
    """Generates Markdown and JSON reports.

    Usage::

        generator = RedrumReportGenerator()
        print(generator.render_markdown(analysis))
        generator.generate_json(scan_result, Path("report.json"))
    """

    def __init__(self, version: str = "1.0.0") -> None:
        self.version = version

    # ------------------------------------------------------------------ #
    #  Markdown
    # ------------------------------------------------------------------ #

    def render_markdown(self, analysis: WordAnalysis) -> str:
        """Render the five-section Markdown report for *analysis*."""
        lines: list[str] = [f'# Hash Analysis of "{analysis.word}"', ""]

        lines += ["## 1. Full SHA-256 Hash", "```", analysis.word_digest, "```", ""]

        lines += [
            "## 2. Individual Character Hashes",
            "| Character | SHA-256 Hash |",
            "|-----------|--------------|",
        ]
        lines += [f"| {_cell(p.character)} | {p.digest} |" for p in analysis.char_digests]
        lines.append("")

        lines.append("## 3. Frequency Analysis of Full Hash")
        lines.append(self.render_frequency_markdown(analysis.frequency))

        lines += [
            "## 4. Combined Hash Analysis",
            "### Word Hash vs. Combined Hash",
            f"Word Hash: `{analysis.word_digest}`",
            f"Combined Hash: `{analysis.combined_digest}`",
            "",
        ]

        lines += [
            "## 5. Character Shifting Analysis",
            "| Character | Alphabet Index | Word Hash Char | Combined Hash Char |",
            "|-----------|----------------|----------------|-------------------|",
        ]
        lines += [
            f"| {_cell(s.character)} | {_cell(s.alphabet_index)} "
            f"| {_cell(s.word_char)} | {_cell(s.combined_char)} |"
            for s in analysis.shifts
        ]

        return "\n".join(lines) + "\n"

    @staticmethod
    def render_frequency_markdown(result: FrequencyResult) -> str:
        """Render a two-column frequency table, rows sorted by character."""
        lines = ["| Character | Frequency |", "|-----------|-----------|"]
        lines += [f"| {_cell(c)} | {n} |" for c, n in sorted(result.counts.items())]
        return "\n".join(lines) + "\n"

    def generate_markdown(self, analysis: WordAnalysis, output_path: Path) -> Path:
        """Write :meth:`render_markdown` output to *output_path*."""
        return self.write_text(self.render_markdown(analysis), output_path)

    @staticmethod
    def write_text(text: str, output_path: Path) -> Path:
        """Write a rendered report to *output_path*, creating parent directories.

        Returns:
            The path written to.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
        return output_path

    # ------------------------------------------------------------------ #
    #  JSON
    # ------------------------------------------------------------------ #

    def build_json(self, result: ScanResult) -> dict[str, Any]:
        """Assemble the JSON report structure for *result*."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "target": result.target,
                "version": self.version,
            },
            "summary": {
                "total_findings": result.finding_count,
                "severity_counts": result.severity_counts,
                "duration_seconds": result.duration_seconds,
                "description": result.summary,
            },
            "findings": [f.model_dump(mode="json") for f in result.findings],
            "analysis": result.metadata,
        }

    def to_json(self, result: ScanResult) -> str:
        """Serialise the JSON report to a string."""
        return json.dumps(self.build_json(result), indent=2, ensure_ascii=False, default=str)

    def generate_json(self, result: ScanResult, output_path: Path) -> Path:
        """Write the JSON report for *result* to *output_path*."""
        return self.write_text(self.to_json(result), output_path)
