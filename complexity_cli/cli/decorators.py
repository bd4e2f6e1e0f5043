"""
Decorators for Complexity CLI commands.
"""

import traceback
from functools import wraps
from typing import Callable

import typer
from rich.console import Console
from rich.markup import escape

from complexity_cli.core.exceptions import ComplexityCLIError, ValidationError
from complexity_cli.core.logging import log_error, log_warning

console = Console(stderr=True)


def with_error_handling(func: Callable) -> Callable:
    """Decorator to turn CLI errors into a message and exit code 1."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except ValidationError as e:
            # Bad request parameters only abort this one request
            log_warning(f"Rejected {func.__name__} request: {e}")
            console.print(f"[bold yellow]Warning:[/bold yellow] {escape(str(e))}")
            raise typer.Exit(code=1)
        except ComplexityCLIError as e:
            log_error(f"{func.__name__} failed: {e}")
            console.print(f"[bold red]Error in {func.__name__}:[/bold red] {escape(str(e))}")
            if kwargs.get("debug"):
                console.print(traceback.format_exc())
            raise typer.Exit(code=1)

    return wrapper
