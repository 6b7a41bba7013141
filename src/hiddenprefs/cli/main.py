#!/usr/bin/env python3
"""
hiddenprefs CLI Main Application

Typer-based command-line interface for applying hidden preferences to
content lists exported from the platform.
"""

import sys
from typing import Optional

import typer

from hiddenprefs.cli import __version__
from hiddenprefs.cli.commands import apply, config
from hiddenprefs.cli.utils import console

app = typer.Typer(
    name="hiddenprefs",
    help="Apply a viewer's hidden preferences and browsing level to content lists",
    context_settings={"help_option_names": ["-h", "--help"]},
    rich_markup_mode="rich",
    no_args_is_help=True,
)

app.command("apply", help="Filter a content list and output the visible items")(apply.apply_command)
app.command("explain", help="Show which rule decided each item")(apply.explain_command)
app.add_typer(config.app, name="config", help="Inspect and create configuration files")


def version_callback(value: bool):
    """Show version information."""
    if value:
        console.print(f"[bold cyan]hiddenprefs[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def app_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information and exit"
    ),
):
    """
    hiddenprefs - hidden preferences for content feeds

    [bold]Quick Start:[/bold]

    • Filter models: [cyan]hiddenprefs apply models models.json -r hidden.json[/cyan]
    • Explain decisions: [cyan]hiddenprefs explain posts posts.json -u 42[/cyan]
    • Create config: [cyan]hiddenprefs config init[/cyan]
    """
    pass


def main():
    """Entry point for the hiddenprefs console script."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(1)


if __name__ == "__main__":
    main()
