"""
Apply Commands

Run the visibility filter over a JSON content list: ``apply`` writes the
visible items, ``explain`` shows the rule that decided each item.
"""

import json
from pathlib import Path
from typing import Annotated, Any, Dict, List, Optional

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.table import Table

from hiddenprefs.apply import apply_hidden_preferences, explain_hidden_preferences
from hiddenprefs.cli.config_utils import load_config_from_cli
from hiddenprefs.cli.utils import console, handle_fatal_error, load_json_file, validate_user_id
from hiddenprefs.content import parse_items
from hiddenprefs.core.config import AppConfig
from hiddenprefs.core.exceptions import ContentValidationError, ErrorContext, HiddenPrefsError
from hiddenprefs.filters.factory import FilterFactory
from hiddenprefs.preferences import HiddenRegistries


def _content_type_help() -> str:
    return f"Content type: {', '.join(FilterFactory.available_types())}"


def _load_items(items_file: Path) -> List[Any]:
    """Accept either a bare JSON list or an object with an ``items`` list."""
    data = load_json_file(items_file, "items")
    if isinstance(data, dict):
        data = data.get('items')
    if not isinstance(data, list):
        raise ContentValidationError(
            f"Items file {items_file} must contain a JSON list or an object with an 'items' list",
            field_name="items",
            context=ErrorContext(operation="load_items", file_path=str(items_file)),
        )
    return data


def _load_registries(registries_file: Optional[Path]) -> HiddenRegistries:
    if registries_file is None:
        return HiddenRegistries()
    data = load_json_file(registries_file, "registries")
    try:
        return HiddenRegistries.model_validate(data)
    except PydanticValidationError as e:
        raise ContentValidationError(
            f"Invalid registries file {registries_file}: {e.errors()[0]['msg']}",
            context=ErrorContext(operation="load_registries", file_path=str(registries_file)),
            cause=e,
        )


def _cli_args(**kwargs) -> Dict[str, Any]:
    return {key: value for key, value in kwargs.items() if value is not None}


def apply_command(
    content_type: Annotated[str, typer.Argument(help=_content_type_help())],
    items_file: Annotated[Path, typer.Argument(help="JSON file with the content list")],
    registries_file: Annotated[Optional[Path], typer.Option("--registries", "-r", help="JSON file with hidden registries")] = None,
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write visible items to this file instead of stdout")] = None,
    user_id: Annotated[Optional[int], typer.Option("--user-id", "-u", callback=validate_user_id, help="Viewer user id")] = None,
    moderator: Annotated[Optional[bool], typer.Option("--moderator/--no-moderator", help="Viewer is a moderator")] = None,
    browsing_level: Annotated[Optional[str], typer.Option("--browsing-level", "-b", help="Bitmask, preset (sfw, nsfw, all) or names like PG,PG13")] = None,
    show_hidden: Annotated[Optional[bool], typer.Option("--show-hidden", help="Reveal self-hidden models and images")] = None,
    disabled: Annotated[Optional[bool], typer.Option("--disabled", help="Bypass hidden preferences")] = None,
    config: Annotated[Optional[str], typer.Option("--config", "-c", help="Configuration file path")] = None,
    verbose: Annotated[Optional[bool], typer.Option("--verbose", "-v", help="Enable verbose output")] = None,
    debug: Annotated[Optional[bool], typer.Option("--debug", help="Enable debug logging")] = None,
):
    """
    Filter a content list and output the visible items.

    [bold]Examples:[/bold]

    • [cyan]hiddenprefs apply models models.json -r hidden.json -u 5[/cyan]
    • [cyan]hiddenprefs apply posts feed.json -b sfw -o visible.json[/cyan]
    """
    app_config = load_config_from_cli(config, _cli_args(
        user_id=user_id,
        moderator=moderator,
        browsing_level=browsing_level,
        show_hidden=show_hidden,
        disabled=disabled,
        verbose=verbose,
        debug=debug,
    ))

    try:
        result = _run_apply(content_type, items_file, registries_file, app_config)
    except HiddenPrefsError as e:
        handle_fatal_error(e, debug=app_config.debug)

    if output:
        with open(output, 'w', encoding='utf-8') as f:
            json.dump(result.items, f, indent=2)
    else:
        console.print_json(data=result.items)

    console.print(
        f"[green]{len(result.items)} visible[/green], "
        f"[yellow]hidden: {result.hidden_count}[/yellow]",
        highlight=False
    )


def _run_apply(content_type: str, items_file: Path, registries_file: Optional[Path], app_config: AppConfig):
    FilterFactory.get_filter_class(content_type)
    return apply_hidden_preferences(
        content_type,
        _load_items(items_file),
        registries=_load_registries(registries_file),
        viewer=app_config.viewer.to_context(),
        options=app_config.filters.to_options(),
    )


def explain_command(
    content_type: Annotated[str, typer.Argument(help=_content_type_help())],
    items_file: Annotated[Path, typer.Argument(help="JSON file with the content list")],
    registries_file: Annotated[Optional[Path], typer.Option("--registries", "-r", help="JSON file with hidden registries")] = None,
    user_id: Annotated[Optional[int], typer.Option("--user-id", "-u", callback=validate_user_id, help="Viewer user id")] = None,
    moderator: Annotated[Optional[bool], typer.Option("--moderator/--no-moderator", help="Viewer is a moderator")] = None,
    browsing_level: Annotated[Optional[str], typer.Option("--browsing-level", "-b", help="Bitmask, preset (sfw, nsfw, all) or names like PG,PG13")] = None,
    show_hidden: Annotated[Optional[bool], typer.Option("--show-hidden", help="Reveal self-hidden models and images")] = None,
    config: Annotated[Optional[str], typer.Option("--config", "-c", help="Configuration file path")] = None,
    debug: Annotated[Optional[bool], typer.Option("--debug", help="Enable debug logging")] = None,
):
    """
    Show which rule decided the visibility of each item.
    """
    app_config = load_config_from_cli(config, _cli_args(
        user_id=user_id,
        moderator=moderator,
        browsing_level=browsing_level,
        show_hidden=show_hidden,
        debug=debug,
    ))

    try:
        FilterFactory.get_filter_class(content_type)
        items = parse_items(content_type, _load_items(items_file))
        decisions = explain_hidden_preferences(
            content_type,
            items,
            registries=_load_registries(registries_file),
            viewer=app_config.viewer.to_context(),
            options=app_config.filters.to_options(),
        )
    except HiddenPrefsError as e:
        handle_fatal_error(e, debug=app_config.debug)

    table = Table(title=f"Hidden preferences: {content_type}", show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right")
    table.add_column("Id", justify="right")
    table.add_column("Visible")
    table.add_column("Rule", no_wrap=True)
    table.add_column("Reason")

    for index, (item, decision) in enumerate(zip(items, decisions), 1):
        table.add_row(
            str(index),
            str(getattr(item, 'id', '')),
            "[green]yes[/green]" if decision.passed else "[red]no[/red]",
            decision.rule,
            decision.reason,
        )

    console.print(table)
    hidden = sum(1 for decision in decisions if not decision.passed)
    console.print(f"{len(decisions) - hidden} visible, hidden: {hidden}", highlight=False)
