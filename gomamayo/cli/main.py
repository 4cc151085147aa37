"""
Command-line interface: analyze phrases given as arguments, on stdin, or in a file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

import typer
from tqdm import tqdm

from gomamayo.core.classify import junctions
from gomamayo.core.errors import GomamayoError, InputError
from gomamayo.core.models import AnalyzerConfig, GomamayoAnalysis
from gomamayo.processing.analyze import analyze_many, format_error, format_result, get_tokenizer, normalize_text

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def _echo_details(analysis: GomamayoAnalysis) -> None:
    typer.echo(f"  読み: {' / '.join(analysis.readings)}")
    for junction in junctions(analysis.readings):
        typer.echo(f"  {junction.left} | {junction.right}: {junction.degree}")


def _run(
    phrases: Iterable[str],
    config: AnalyzerConfig,
    verbose: bool,
    total: Optional[int] = None,
    progress: bool = False,
) -> int:
    """Analyze phrases and print results; return the number of failures."""
    try:
        tokenizer = get_tokenizer(config)
    except GomamayoError as exc:
        typer.echo(format_error("", exc), err=True)
        return 1

    failures = 0
    results = analyze_many(phrases, tokenizer=tokenizer, config=config)
    for phrase, result in tqdm(results, total=total, disable=not progress, file=sys.stderr, unit="phrase"):
        if isinstance(result, GomamayoError):
            failures += 1
            typer.echo(format_error(phrase, result), err=True)
            continue
        typer.echo(format_result(normalize_text(phrase), result))
        if verbose:
            _echo_details(result)
    return failures


@app.command()
def analyze(
    phrases: Optional[List[str]] = typer.Argument(
        None, help="Phrases to analyze (reads one line from stdin if omitted)"
    ),
    user_dict: Optional[Path] = typer.Option(
        None, "--user-dict", "-u", exists=True, readable=True, help="Compiled MeCab user dictionary"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show readings and junction overlaps"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    _configure_logging(debug)
    if not phrases:
        line = typer.get_text_stream("stdin").readline()
        if not line.strip():
            typer.echo(format_error("", InputError("No input was given.", source="stdin")), err=True)
            raise typer.Exit(code=1)
        phrases = [line]

    config = AnalyzerConfig(user_dictionary=user_dict)
    if _run(phrases, config, verbose):
        raise typer.Exit(code=1)


@app.command()
def batch(
    input_path: Path = typer.Argument(..., help="Text file with one phrase per line"),
    user_dict: Optional[Path] = typer.Option(
        None, "--user-dict", "-u", exists=True, readable=True, help="Compiled MeCab user dictionary"
    ),
    progress: bool = typer.Option(True, "--progress/--no-progress", help="Show a progress bar"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show readings and junction overlaps"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    _configure_logging(debug)
    try:
        text = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        typer.echo(format_error("", InputError(str(exc), source=str(input_path))), err=True)
        raise typer.Exit(code=1)

    phrases = [line for line in text.splitlines() if line.strip()]
    config = AnalyzerConfig(user_dictionary=user_dict)
    if _run(phrases, config, verbose, total=len(phrases), progress=progress):
        raise typer.Exit(code=1)


def run() -> None:  # entry point for module execution
    app()


if __name__ == "__main__":
    run()
