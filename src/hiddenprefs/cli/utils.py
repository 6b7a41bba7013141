"""
CLI Utilities

Shared utilities for CLI commands including logging setup, input loading
and error display.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from hiddenprefs.core.exceptions import ContentValidationError, ErrorCode, ErrorContext, HiddenPrefsError

console = Console()


def setup_logging(level: str = "WARNING", rich_tracebacks: bool = True) -> None:
    """Route log records through rich, replacing any earlier handlers."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=rich_tracebacks, show_path=False)],
        force=True,
    )


def load_json_file(path: Path, description: str = "input") -> Any:
    """
    Read a JSON document.

    Raises:
        ContentValidationError: If the file is missing or not valid JSON
    """
    context = ErrorContext(operation=f"load_{description}", file_path=str(path))
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise ContentValidationError(
            f"{description.capitalize()} file not found: {path}",
            error_code=ErrorCode.VALIDATION_MISSING_FIELD,
            context=context,
            cause=e,
        )
    except (OSError, json.JSONDecodeError) as e:
        raise ContentValidationError(
            f"Could not read {description} file {path}: {e}",
            context=context,
            cause=e,
        )


def validate_user_id(value: Optional[int]) -> Optional[int]:
    """Validate user id is positive."""
    if value is not None and value < 1:
        raise typer.BadParameter("User id must be a positive integer")
    return value


def print_header(title: str, subtitle: Optional[str] = None) -> None:
    """Print a formatted header for a command."""
    header_text = f"[bold cyan]{title}[/bold cyan]"
    if subtitle:
        header_text += f"\n[dim]{subtitle}[/dim]"
    console.print(Panel(header_text, expand=False))


def handle_fatal_error(error: Exception, debug: bool = False) -> None:
    """Print an error and exit with status 1."""
    if isinstance(error, HiddenPrefsError):
        console.print(f"[bold red]{escape(error.get_user_message())}[/bold red]", highlight=False)
    else:
        console.print(f"[bold red]Error:[/bold red] {escape(str(error))}", highlight=False)
    if debug:
        console.print_exception()
    raise typer.Exit(1)


def confirm_overwrite(path: Path) -> bool:
    """Ask before replacing an existing file."""
    return typer.confirm(f"{path} exists. Overwrite?", default=False)
