"""
Configuration Utilities for CLI Commands

Shared helpers for loading configuration in CLI commands and displaying it.
"""

from typing import Any, Dict, Optional

import typer
from rich.markup import escape
from rich.table import Table

from hiddenprefs.cli.utils import console, setup_logging
from hiddenprefs.core.config import AppConfig, ConfigManager
from hiddenprefs.core.exceptions import ConfigurationError
from hiddenprefs.flags import to_instances


def load_config_from_cli(
    config_file: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None
) -> AppConfig:
    """
    Load configuration from CLI arguments and set up logging.

    Args:
        config_file: Optional path to configuration file
        cli_args: Dictionary of CLI arguments to override config

    Returns:
        Validated AppConfig instance

    Raises:
        typer.Exit: If configuration is invalid
    """
    try:
        config_manager = ConfigManager(config_file=config_file)
        app_config = config_manager.load_config(cli_args=cli_args or {})
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {escape(e.get_user_message())}[/red]", highlight=False)
        raise typer.Exit(1)

    setup_logging(app_config.get_effective_log_level(), app_config.logging.rich_tracebacks)

    warnings = config_manager.validate_config(app_config)
    if warnings and app_config.verbose:
        console.print("[yellow]Configuration warnings:[/yellow]")
        for warning in warnings:
            console.print(f"  • {warning}")

    return app_config


def print_config_summary(config: AppConfig) -> None:
    """Print the effective configuration as a table."""
    levels = ', '.join(level.name for level in to_instances(config.viewer.browsing_level)) or "none"

    table = Table(title="Configuration", show_header=True, header_style="bold cyan")
    table.add_column("Setting")
    table.add_column("Value")
    table.add_row("Viewer", str(config.viewer.user_id) if config.viewer.user_id else "anonymous")
    table.add_row("Moderator", str(config.viewer.is_moderator))
    table.add_row("Browsing level", f"{config.viewer.browsing_level} ({levels})")
    table.add_row("Show hidden", str(config.filters.show_hidden))
    table.add_row("Disabled", str(config.filters.disabled))
    table.add_row("Log level", config.get_effective_log_level())
    console.print(table)
