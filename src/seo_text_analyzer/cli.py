"""
Command-line interface for SEO Text Analyzer.

Provides commands to analyze a text and to insert a keyword into it.
"""

import json
import logging
import random
import sys
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .insertion import InsertionPlanner
from .metrics import MetricsEngine
from .models import AnalysisResult, SuggestionPriority
from .validation import InternalError, ValidationError

console = Console()

PRIORITY_STYLES = {
    SuggestionPriority.HIGH: "red",
    SuggestionPriority.MEDIUM: "yellow",
    SuggestionPriority.LOW: "green",
}


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def _make_rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


def _fail(message: str, error, verbose: bool) -> None:
    console.print(f"[red]{message}:[/red] {error}")
    if verbose:
        import traceback
        console.print(traceback.format_exc())
    sys.exit(1)


def _read_source(source, verbose: bool) -> str:
    try:
        return source.read()
    except UnicodeDecodeError as e:
        _fail("Error", f"Input is not valid UTF-8 text ({e.reason})", verbose)


seed_option = click.option(
    "--seed",
    type=int,
    envvar="SEO_TEXT_SEED",
    default=None,
    help="Seed for the random source (reproducible output). Can also be set via SEO_TEXT_SEED.",
)
json_option = click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the result as JSON.",
)
verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output.",
)


@click.group()
def main() -> None:
    """
    SEO Text Analyzer - readability metrics and keyword suggestions.

    Examples:

        seo-text analyze article.txt

        seo-text insert article.txt --keyword "content strategy"

        cat article.txt | seo-text analyze --json
    """


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@seed_option
@json_option
@verbose_option
def analyze(source, seed: Optional[int], as_json: bool, verbose: bool) -> None:
    """Analyze text from SOURCE (a file, or - for stdin)."""
    _configure_logging(verbose)
    text = _read_source(source, verbose)

    try:
        result = MetricsEngine(rng=_make_rng(seed)).analyze(text)
    except ValidationError as e:
        _fail("Error", e, verbose)
    except InternalError as e:
        _fail("Unexpected error", e, verbose)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    _display_analysis(result)


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--keyword",
    "-k",
    type=str,
    required=True,
    help="Keyword phrase to insert.",
)
@seed_option
@json_option
@verbose_option
def insert(source, keyword: str, seed: Optional[int], as_json: bool, verbose: bool) -> None:
    """Insert KEYWORD into text from SOURCE (a file, or - for stdin)."""
    _configure_logging(verbose)
    text = _read_source(source, verbose)

    try:
        result = InsertionPlanner(rng=_make_rng(seed)).insert_keyword(text, keyword)
    except ValidationError as e:
        _fail("Error", e, verbose)
    except InternalError as e:
        _fail("Unexpected error", e, verbose)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if result.inserted:
        console.print(f"[bold green]Inserted[/bold green] '{keyword}'")
    else:
        console.print(f"[yellow]Not inserted:[/yellow] '{keyword}' is already present")
    click.echo(result.updated_text)


def _display_analysis(result: AnalysisResult) -> None:
    """Display analysis metrics, keywords and suggestions."""
    metrics = result.metrics

    console.print(Panel.fit(
        f"[bold blue]Readability: {metrics.readability_score}/100[/bold blue] "
        f"({metrics.readability_level})",
        border_style="blue",
    ))

    metrics_table = Table(title="Text Metrics", show_header=True)
    metrics_table.add_column("Metric", style="cyan")
    metrics_table.add_column("Value", style="green", justify="right")
    metrics_table.add_row("Words", str(metrics.word_count))
    metrics_table.add_row("Sentences", str(metrics.sentence_count))
    metrics_table.add_row("Paragraphs", str(metrics.paragraph_count))
    metrics_table.add_row("Avg words/sentence", str(metrics.avg_words_per_sentence))
    metrics_table.add_row("Avg sentences/paragraph", str(metrics.avg_sentences_per_paragraph))
    console.print(metrics_table)

    kw_table = Table(title="Keyword Suggestions", show_header=True)
    kw_table.add_column("Keyword", style="green")
    kw_table.add_column("Source", style="cyan")
    kw_table.add_column("Frequency", justify="right")
    kw_table.add_column("Relevance", justify="right")
    kw_table.add_column("Volume", justify="right")
    kw_table.add_column("Difficulty", justify="right")
    for kw in result.keywords:
        kw_table.add_row(
            kw.keyword,
            kw.source.value,
            str(kw.frequency),
            f"{round(kw.relevance)}%",
            f"{kw.search_volume:,}",
            f"{kw.difficulty}/100",
        )
    console.print(kw_table)

    console.print("\n[bold]Suggestions[/bold]")
    for suggestion in result.suggestions:
        style = PRIORITY_STYLES[suggestion.priority]
        console.print(
            f"  [{style}]{suggestion.priority.value.upper()}[/{style}] "
            f"{suggestion.type.value}: {suggestion.message}"
        )


def run_cli() -> None:
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run_cli()
