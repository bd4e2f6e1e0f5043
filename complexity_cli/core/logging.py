"""
Logging for Complexity CLI.

A single ``complexity_cli`` logger writes to stderr through rich. While a
document or function is being analyzed its name is attached to every
record, and the optional log file prints it as a prefix such as
``[document=app.js, function=render]``.
"""

import logging
import time
from contextlib import contextmanager
from functools import wraps
from pathlib import Path
from typing import Dict, List, Optional, Union

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)

LOGGER_NAME = "complexity_cli"
LOG_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(analysis_context)s%(message)s"
CONTEXT_FIELDS = ("document", "function", "language")

logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.DEBUG)
logger.propagate = False

_handlers: List[logging.Handler] = []


class AnalysisContext(logging.Filter):
    """Stamps each record with the document/function/language in scope."""

    def __init__(self):
        super().__init__()
        self.values: Dict[str, Optional[str]] = {}

    def describe(self) -> str:
        parts = [
            f"{name}={self.values[name]}" for name in CONTEXT_FIELDS if self.values.get(name)
        ]
        return f"[{', '.join(parts)}] " if parts else ""

    def filter(self, record):
        record.analysis_context = self.describe()
        return True


_context = AnalysisContext()
logger.addFilter(_context)


def configure_logging(
    debug: bool = False,
    verbose: bool = False,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """
    Replace the logger's handlers for one CLI invocation.

    The console shows warnings by default, info with verbose and everything
    with debug. A log file, when given, always receives debug records.
    """
    for handler in _handlers:
        logger.removeHandler(handler)
        handler.close()
    _handlers.clear()

    console_handler = RichHandler(
        console=console,
        show_time=False,
        show_path=debug,
        rich_tracebacks=True,
        markup=False,
    )
    if debug:
        console_handler.setLevel(logging.DEBUG)
    elif verbose:
        console_handler.setLevel(logging.INFO)
    else:
        console_handler.setLevel(logging.WARNING)
    _handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(Path(log_file).expanduser(), encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT))
        _handlers.append(file_handler)

    for handler in _handlers:
        logger.addHandler(handler)


def _ensure_configured() -> None:
    if not _handlers:
        configure_logging()


@contextmanager
def log_context(**fields):
    """
    Attach analysis context to records logged inside the block.

    Example:
        with log_context(document="app.js", function="render"):
            log_info("Analyzing")
    """
    previous = dict(_context.values)
    _context.values.update(fields)
    try:
        yield
    finally:
        _context.values = previous


def _log(level: int, message: str, exc_info=None, **fields) -> None:
    _ensure_configured()
    with log_context(**fields):
        logger.log(level, message, exc_info=exc_info)


def log_debug(message: str, **fields):
    _log(logging.DEBUG, message, **fields)


def log_info(message: str, **fields):
    _log(logging.INFO, message, **fields)


def log_warning(message: str, **fields):
    _log(logging.WARNING, message, **fields)


def log_error(message: str, exc_info=None, **fields):
    _log(logging.ERROR, message, exc_info=exc_info, **fields)


def log_file_operation(operation: str, path: Path):
    log_debug(f"File {operation}: {path}")


def logged_operation(operation_name: str):
    """
    Decorator that logs how long a command handler took, or how it failed.

    The language is taken from the resolved options passed first.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            language = getattr(args[0], "language", None) if args else None

            with log_context(language=language):
                log_debug(f"Starting {operation_name}")
                started = time.perf_counter()
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    log_error(
                        f"Failed {operation_name} after {time.perf_counter() - started:.3f}s: {e}"
                    )
                    raise
                log_debug(f"Completed {operation_name} in {time.perf_counter() - started:.3f}s")
                return result

        return wrapper

    return decorator
