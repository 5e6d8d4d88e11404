from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from fuzzypick import __version__
from fuzzypick.benchmark import run_benchmark
from fuzzypick.candidates import read_candidates, read_candidates_from_path
from fuzzypick.rendering import format_choice_line, render_benchmark_report
from fuzzypick.search import rank_choices
from fuzzypick.tui import FuzzyPickTui

__all__ = [
    "FuzzyPickTui",
    "cli",
    "run",
]

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f"fuzzypick {__version__}")
    raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _reattach_terminal() -> None:
    # Candidates were read from a pipe; the picker needs keyboard input.
    terminal = os.open("/dev/tty", os.O_RDONLY)
    try:
        os.dup2(terminal, sys.__stdin__.fileno())
    finally:
        os.close(terminal)


def _load_candidates(file: Path | None) -> list[str]:
    if file is not None:
        return read_candidates_from_path(file)
    return read_candidates(sys.stdin)


cli = typer.Typer(
    add_completion=False,
    help="Fuzzy-find lines read from stdin or a file.",
)


@cli.callback(invoke_without_command=True)
def run(
    search: str | None = typer.Option(
        None,
        "--search",
        "-s",
        help="Print matches for QUERY instead of starting the picker.",
    ),
    file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        dir_okay=False,
        help="Read candidates from a file instead of stdin.",
    ),
    limit: int | None = typer.Option(
        None,
        "--limit",
        "-n",
        min=0,
        envvar="FUZZYPICK_LIMIT",
        help="Keep at most this many matches.",
    ),
    show_scores: bool = typer.Option(
        False,
        "--show-scores",
        help="Prefix every printed match with its score.",
    ),
    benchmark: int | None = typer.Option(
        None,
        "--benchmark",
        "-b",
        min=1,
        help=(
            "Score the --search query against every matching candidate this many "
            "times and print timings."
        ),
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug output to stderr.",
    ),
    _version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    _configure_logging(verbose)

    if benchmark is not None and search is None:
        typer.echo("--benchmark requires a --search query.", err=True)
        raise typer.Exit(code=1)

    if file is None and sys.stdin.isatty():
        typer.echo("No candidates: pipe lines on stdin or pass --file.", err=True)
        raise typer.Exit(code=1)

    try:
        candidates = _load_candidates(file)
    except OSError as exc:
        typer.echo(f"Failed to read candidates: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    logger.debug("Loaded %d candidates", len(candidates))

    if benchmark is not None and search is not None:
        result = run_benchmark(search, candidates, iterations=benchmark)
        typer.echo(render_benchmark_report(result))
        return

    if search is not None:
        choices = rank_choices(search, candidates, limit=limit)
        for choice in choices:
            typer.echo(format_choice_line(choice, show_score=show_scores))
        if not choices:
            raise typer.Exit(code=1)
        return

    if file is None:
        try:
            _reattach_terminal()
        except OSError as exc:
            typer.echo(f"No terminal available for the picker: {exc}", err=True)
            raise typer.Exit(code=1) from exc

    selection = FuzzyPickTui(candidates, limit=limit).run()
    if selection is None:
        raise typer.Exit(code=1)
    typer.echo(selection)


if __name__ == "__main__":
    cli()
