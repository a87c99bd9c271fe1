"""
Redrum Console Interface
=========================

Rich-powered console abstraction providing a consistent presentation
layer: banner, section headers, severity-coloured messages and tables.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_REDRUM_THEME = Theme(
    {
        "redrum.banner": "bold bright_red",
        "redrum.section": "bold bright_magenta",
        "redrum.success": "bold green",
        "redrum.error": "bold red",
        "redrum.dim": "dim white",
        "redrum.highlight": "bold bright_white",
        "redrum.critical": "bold white on red",
        "redrum.high": "bold red",
        "redrum.medium": "bold yellow",
        "redrum.low": "bold bright_cyan",
        "redrum.informational": "bold bright_blue",
    }
)

BANNER_ART = r"""
.______       _______  _______     .______       __    __  .___  ___.
|   _  \     |   ____||       \    |   _  \     |  |  |  | |   \/   |
|  |_)  |    |  |__   |  .--.  |   |  |_)  |    |  |  |  | |  \  /  |
|      /     |   __|  |  |  |  |   |      /     |  |  |  | |  |\/|  |
|  |\  \----.|  |____ |  '--'  |   |  |\  \----.|  `--'  | |  |  |  |
| _| `._____||_______||_______/    | _| `._____| \______/  |__|  |__|
"""

_TAGLINE = "SHA-256 Digest Cross-Analysis"


class RedrumConsole:
    """Unified console interface.

    Usage::

        con = RedrumConsole()
        con.banner()
        con.section("Full SHA-256 Hash")
        con.success("Report written")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet: Suppress all output (useful in library / test mode).
        """
        self._console = Console(
            theme=_REDRUM_THEME,
            quiet=quiet,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the ASCII-art banner.

        Args:
            version: Version string shown beneath the logo.
        """
        body = Text(BANNER_ART, style="redrum.banner")
        body.append(f"\n{_TAGLINE}\n", style="redrum.highlight")
        body.append(f"Version: {version}", style="redrum.dim")
        panel = Panel(
            Align.center(body),
            border_style="bright_red",
            padding=(0, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {escape(title)}  ",
            style="redrum.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(
            f"[redrum.success][✔] SUCCESS:[/redrum.success] {escape(message)}"
        )

    def error(self, message: str) -> None:
        """Print an error message."""
        self._console.print(
            f"[redrum.error][✘] ERROR:[/redrum.error] {escape(message)}"
        )

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=False,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(escape(str(cell)) for cell in row))

        self._console.print(tbl)

    def findings_table(self, findings: Sequence[Any]) -> None:
        """Render a findings table with automatic severity colouring.

        Expects objects with ``severity``, ``title``, and ``description``
        attributes (e.g. :class:`shared.models.Finding`).
        """
        if not findings:
            return

        severity_style_map: dict[str, str] = {
            "CRITICAL": "redrum.critical",
            "HIGH": "redrum.high",
            "MEDIUM": "redrum.medium",
            "LOW": "redrum.low",
            "INFO": "redrum.informational",
        }

        tbl = Table(
            title="Findings",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Severity", width=10)
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)

        for idx, finding in enumerate(findings, start=1):
            sev = getattr(finding, "severity", "INFO")
            sev_name = sev.value if hasattr(sev, "value") else str(sev).upper()
            sev_style = severity_style_map.get(sev_name, "")
            sev_cell = f"[{sev_style}]{sev_name}[/{sev_style}]" if sev_style else sev_name
            tbl.add_row(
                str(idx),
                sev_cell,
                escape(str(getattr(finding, "title", ""))),
                escape(str(getattr(finding, "description", ""))),
            )

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def blank(self, count: int = 1) -> None:
        """Print *count* blank lines."""
        for _ in range(count):
            self._console.print()

