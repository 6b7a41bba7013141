"""
Config Command

Commands for inspecting and creating hiddenprefs configuration files.
"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from hiddenprefs.cli.config_utils import load_config_from_cli, print_config_summary
from hiddenprefs.cli.utils import confirm_overwrite, console, print_header
from hiddenprefs.core.config import ConfigManager
from hiddenprefs.filters.factory import FilterFactory

app = typer.Typer(
    name="config",
    help="Inspect and create configuration files",
    no_args_is_help=True,
)

PROFILES = ("default", "moderator", "review")


@app.command("show")
def show_config(
    config: Annotated[Optional[str], typer.Option("--config", "-c", help="Configuration file path")] = None,
):
    """Show the effective configuration and the registered content types."""
    app_config = load_config_from_cli(config)
    print_header("hiddenprefs configuration", str(config) if config else "discovered from search paths")
    print_config_summary(app_config)

    console.print("\n[bold]Content types:[/bold]")
    for content_type, info in FilterFactory.get_available_filters().items():
        console.print(f"  [cyan]{content_type}[/cyan]: {info['description']}", highlight=False)


@app.command("init")
def init_config(
    output: Annotated[Path, typer.Argument(help="Where to write the configuration")] = Path("hiddenprefs.yaml"),
    profile: Annotated[str, typer.Option("--profile", "-p", help=f"Template profile: {', '.join(PROFILES)}")] = "default",
    force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite an existing file")] = False,
):
    """Write an example configuration file."""
    if profile not in PROFILES:
        raise typer.BadParameter(f"Profile must be one of: {', '.join(PROFILES)}", param_hint="--profile")

    if output.exists() and not force and not confirm_overwrite(output):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit(1)

    ConfigManager().create_example_config(output, profile=profile)
    console.print(f"[green]Wrote {profile} configuration to {output}[/green]", highlight=False)


@app.command("schema")
def config_schema(
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write the schema to this file")] = None,
):
    """Print the JSON schema of the configuration file."""
    schema = ConfigManager().generate_schema(output)
    if output:
        console.print(f"[green]Schema written to {output}[/green]", highlight=False)
    else:
        console.print_json(json.dumps(schema))
