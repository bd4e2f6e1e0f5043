"""
Main Typer app and command definitions for Complexity CLI.
"""

from typing import Optional

import typer

from .completions import Completions
from .decorators import with_error_handling
from .handlers import CommandHandlers
from .options import resolve_options

app = typer.Typer(
    help="Complexity CLI - heuristic time/space complexity estimates for JS/TS/Python functions",
    add_completion=True,
    rich_markup_mode="markdown",
)


# ---- Commands ----


@app.command()
@with_error_handling
def scan(
    path: str = typer.Argument(..., help="Source file to scan"),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Language id (defaults to the file extension)",
        autocompletion=Completions.languages,
    ),
    json_output: bool = typer.Option(False, "--json", help="Print JSON"),
    config: Optional[str] = typer.Option(None, "--config", help="Config file"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    log_file: Optional[str] = typer.Option(
        None, "--log-file", help="Also write debug logs to this file"
    ),
):
    """List the functions, methods and classes found in a file."""
    options = resolve_options(
        language_override=language,
        config_override=config,
        debug_override=debug,
        verbose_override=verbose,
        log_file_override=log_file,
        json_override=json_output,
    )

    CommandHandlers.handle_scan(options, path)


@app.command()
@with_error_handling
def analyze(
    path: str = typer.Argument(..., help="Source file to analyze"),
    function: Optional[str] = typer.Option(
        None, "--function", "-f", help="Function name (default: every function)"
    ),
    start: Optional[str] = typer.Option(
        None, "--start", help="Zero-based first line of an explicit span"
    ),
    end: Optional[str] = typer.Option(
        None, "--end", help="Zero-based end line of an explicit span, as reported by scan"
    ),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Language id (defaults to the file extension)",
        autocompletion=Completions.languages,
    ),
    json_output: bool = typer.Option(False, "--json", help="Print JSON"),
    no_store: bool = typer.Option(False, "--no-store", help="Do not persist results"),
    config: Optional[str] = typer.Option(None, "--config", help="Config file"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    log_file: Optional[str] = typer.Option(
        None, "--log-file", help="Also write debug logs to this file"
    ),
):
    """Estimate time and space complexity for one or all functions in a file."""
    options = resolve_options(
        language_override=language,
        config_override=config,
        debug_override=debug,
        verbose_override=verbose,
        log_file_override=log_file,
        json_override=json_output,
        no_store_override=no_store,
    )

    CommandHandlers.handle_analyze(options, path, function, start, end)


@app.command()
@with_error_handling
def lens(
    path: str = typer.Argument(..., help="Source file to show"),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Language id (defaults to the file extension)",
        autocompletion=Completions.languages,
    ),
    config: Optional[str] = typer.Option(None, "--config", help="Config file"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    log_file: Optional[str] = typer.Option(
        None, "--log-file", help="Also write debug logs to this file"
    ),
):
    """Show each function with its analyze anchor and stored result."""
    options = resolve_options(
        language_override=language,
        config_override=config,
        debug_override=debug,
        verbose_override=verbose,
        log_file_override=log_file,
    )

    CommandHandlers.handle_lens(options, path)


@app.command()
@with_error_handling
def results(
    path: Optional[str] = typer.Argument(None, help="Only show results for this file"),
    json_output: bool = typer.Option(False, "--json", help="Print JSON"),
    config: Optional[str] = typer.Option(None, "--config", help="Config file"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    log_file: Optional[str] = typer.Option(
        None, "--log-file", help="Also write debug logs to this file"
    ),
):
    """List stored analysis results."""
    options = resolve_options(
        config_override=config,
        debug_override=debug,
        verbose_override=verbose,
        log_file_override=log_file,
        json_override=json_output,
    )

    CommandHandlers.handle_results(options, path)


def main():
    app()


if __name__ == "__main__":
    main()
