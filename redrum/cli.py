"""
Redrum CLI
===========

Click-based command-line interface for the digest cross-analysis
pipeline.

Usage::

    python -m redrum analyze                 # analyses the default word, REDRUM
    python -m redrum analyze --word shining
    python -m redrum -o markdown analyze -w overlook
    python -m redrum -o json -f report.json analyze -w torrance
    python -m redrum hash "All work and no play"
    python -m redrum frequency 5d41402abc4b2a76b9719d911017c592
    python -m redrum index q

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import click

from shared.config import Config
from shared.console import RedrumConsole

from redrum import __version__
from redrum.analyzers.digest import digest
from redrum.core.engine import RedrumEngine
from redrum.core.errors import RedrumError
from redrum.core.models import WordAnalysis
from redrum.output.console import RedrumConsoleOutput
from redrum.output.report import RedrumReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="redrum")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "markdown", "json"]),
    default=None,
    help="Output format (default from config: console).",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the Markdown/JSON report to this file instead of stdout.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the banner.",
)
@click.option(
    "--log-level", "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
@click.option(
    "--preserve-case",
    is_flag=True,
    default=False,
    help="Analyse the word as given instead of uppercasing it.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: Optional[str],
    output_file: Optional[str],
    quiet: bool,
    log_level: Optional[str],
    preserve_case: bool,
) -> None:
    """Redrum -- SHA-256 digest cross-analysis of a word.

    Hashes the word and each of its characters, counts hex-digit
    frequencies, derives a combined digest and lines the letters up
    against both digests.
    """
    ctx.ensure_object(dict)

    try:
        app_config = Config.load(config)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc
    if log_level:
        app_config.global_settings.log_level = log_level.upper()
    if preserve_case:
        app_config.redrum.normalize_case = False

    output_format = output or app_config.redrum.output_format
    ctx.obj["config"] = app_config
    ctx.obj["output_format"] = output_format
    ctx.obj["output_file"] = output_file

    console = RedrumConsole()
    ctx.obj["console"] = console
    ctx.obj["engine"] = RedrumEngine(app_config)
    ctx.obj["display"] = RedrumConsoleOutput(console)
    ctx.obj["reporter"] = RedrumReportGenerator(version=__version__)

    if not quiet and output_format != "json":
        console.banner(version=__version__)


def _emit(ctx: click.Context, text: str) -> None:
    """Write *text* to the requested output file, or stdout."""
    output_file = ctx.obj["output_file"]
    if output_file:
        reporter: RedrumReportGenerator = ctx.obj["reporter"]
        path = reporter.write_text(text, Path(output_file))
        ctx.obj["console"].success(f"Report saved to: {path}")
    else:
        click.echo(text, nl=not text.endswith("\n"))


def _emit_json(ctx: click.Context, payload: Any) -> None:
    _emit(ctx, json.dumps(payload, indent=2, ensure_ascii=False, default=str))


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.option(
    "--word", "-w",
    default=None,
    help="The word to analyse (default: REDRUM).",
)
@click.pass_context
def analyze(ctx: click.Context, word: Optional[str]) -> None:
    """Run the full five-section digest analysis of a word."""
    engine: RedrumEngine = ctx.obj["engine"]
    console: RedrumConsole = ctx.obj["console"]
    reporter: RedrumReportGenerator = ctx.obj["reporter"]
    if word is None:
        word = ctx.obj["config"].redrum.default_word

    try:
        result = engine.analyze(word)
    except RedrumError as exc:
        console.error(str(exc))
        ctx.exit(1)

    analysis = WordAnalysis.model_validate(result.metadata)
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]

    if output_format == "console":
        ctx.obj["display"].display_analysis(analysis)
        console.findings_table(result.findings)
    elif output_file:
        if output_format == "markdown":
            path = reporter.generate_markdown(analysis, Path(output_file))
        else:
            path = reporter.generate_json(result, Path(output_file))
        console.success(f"Report saved to: {path}")
    elif output_format == "markdown":
        click.echo(reporter.render_markdown(analysis), nl=False)
    else:
        click.echo(reporter.to_json(result))


@cli.command("hash")
@click.argument("text")
@click.pass_context
def hash_(ctx: click.Context, text: str) -> None:
    """Print the SHA-256 digest of TEXT, exactly as given."""
    value = digest(text)
    output_format = ctx.obj["output_format"]

    if output_format == "console":
        ctx.obj["display"].display_digest(text, value)
    elif output_format == "markdown":
        _emit(ctx, f"```\n{value}\n```\n")
    else:
        _emit_json(ctx, {"text": text, "digest": value})


@cli.command()
@click.argument("text")
@click.pass_context
def frequency(ctx: click.Context, text: str) -> None:
    """Count how often each character occurs in TEXT."""
    engine: RedrumEngine = ctx.obj["engine"]
    result = engine.analyze_frequency(text)
    output_format = ctx.obj["output_format"]

    if output_format == "console":
        ctx.obj["display"].display_frequency(result)
    elif output_format == "markdown":
        _emit(ctx, ctx.obj["reporter"].render_frequency_markdown(result))
    else:
        _emit_json(ctx, result.model_dump(mode="json"))


@cli.command()
@click.argument("letter")
@click.pass_context
def index(ctx: click.Context, letter: str) -> None:
    """Show the 0-based alphabet index of LETTER (A=0 ... Z=25)."""
    engine: RedrumEngine = ctx.obj["engine"]
    entry = engine.index(letter)
    output_format = ctx.obj["output_format"]

    if output_format == "console":
        ctx.obj["display"].display_index(entry)
    elif output_format == "json":
        _emit_json(ctx, entry.model_dump(mode="json"))
    elif entry.valid:
        _emit(ctx, f"{entry.index}\n")
    else:
        ctx.obj["console"].error(entry.error or "invalid character")

    if not entry.valid:
        ctx.exit(1)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Redrum CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
