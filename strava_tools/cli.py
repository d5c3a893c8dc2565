"""Command line entry point for strava tools.

Runs a tool the same way a tool host would: arguments go through the
registry, so validation and error reporting match production.
"""

import asyncio
import json
from typing import Any

import typer
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.text import Text

from strava_tools.config.settings import settings
from strava_tools.core.logger import setup_logger
from strava_tools.tools.registry import call_tool, list_tools

console = Console()

app = typer.Typer(
    name="strava-tools",
    help="Strava activity tools",
    add_completion=False,
)


def _collect_arguments(
    activity_id: int,
    name: str | None,
    activity_type: str | None,
    sport_type: str | None,
    description: str | None,
    is_private: bool | None,
    is_commute: bool | None,
    gear_id: str | None,
    remove_gear: bool,
) -> dict[str, Any]:
    """Build tool arguments from the options that were actually passed."""
    arguments: dict[str, Any] = {"activityId": activity_id}
    options = {
        "name": name,
        "type": activity_type,
        "sportType": sport_type,
        "description": description,
        "private": is_private,
        "commute": is_commute,
        "gearId": gear_id,
    }
    arguments.update({key: value for key, value in options.items() if value is not None})
    if remove_gear:
        arguments["gearId"] = None
    return arguments


@app.command("update-activity")
def update_activity_command(
    activity_id: int = typer.Argument(..., help="ID of the activity to update"),
    name: str | None = typer.Option(None, "--name", help="New activity name"),
    activity_type: str | None = typer.Option(None, "--type", help="New activity type ('Run', 'Ride', ...)"),
    sport_type: str | None = typer.Option(None, "--sport-type", help="New sport type"),
    description: str | None = typer.Option(None, "--description", help="New description"),
    is_private: bool | None = typer.Option(None, "--private/--public", help="Activity visibility"),
    is_commute: bool | None = typer.Option(None, "--commute/--no-commute", help="Commute flag"),
    gear_id: str | None = typer.Option(None, "--gear-id", help="Gear to associate with the activity"),
    remove_gear: bool = typer.Option(False, "--remove-gear", help="Remove the gear association"),
    token: str | None = typer.Option(None, "--token", help="Strava access token (default: STRAVA_ACCESS_TOKEN)"),
    log_file: str | None = typer.Option(None, "--log-file", help="Also write logs to this file (default: LOG_FILE)"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Update one activity. Only the options given are changed."""
    setup_logger(level="DEBUG" if debug else settings.log_level, log_file=log_file or settings.log_file or None)

    if gear_id is not None and remove_gear:
        console.print("[red]--gear-id and --remove-gear cannot be combined[/red]")
        raise typer.Exit(code=2)

    arguments = _collect_arguments(
        activity_id,
        name,
        activity_type,
        sport_type,
        description,
        is_private,
        is_commute,
        gear_id,
        remove_gear,
    )
    result = asyncio.run(call_tool("update-activity", arguments, access_token=token))

    console.print(
        Panel(
            Text(result.text),
            title="update-activity",
            border_style="red" if result.is_error else "green",
        )
    )
    if result.is_error:
        raise typer.Exit(code=1)


@app.command("list-tools")
def list_tools_command() -> None:
    """Print the available tools and their input schemas."""
    console.print(JSON(json.dumps(list_tools())))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
