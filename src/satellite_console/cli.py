"""
Satellite Console CLI
=====================

Main entry point for the satellite console.
Provides commands for running an interactive command session and inspecting configuration.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from satellite_console.config import AppConfig, Constants, LoggingParams, load_config
from satellite_console.core.exceptions import ConfigurationError
from satellite_console.core.satellite import Satellite
from satellite_console.mission.prompts import ConsolePrompter, MenuPrompter
from satellite_console.mission.session import CommandSession
from satellite_console.utils.logging_config import setup_logging

app = typer.Typer(
    help="Satellite Console - interactive satellite orientation, panel and data simulator",
    add_completion=False,
)
console = Console()


def _resolve_config(
    config_path: Optional[Path], overrides: Optional[Dict[str, Dict[str, Any]]] = None
) -> AppConfig:
    """Load configuration and apply CLI overrides, exiting with code 1 on failure."""
    try:
        app_config = load_config(config_path)
        if overrides:
            app_config = app_config.create_with_overrides(overrides)
    except (ConfigurationError, ValueError) as e:
        console.print(f"[bold red]Configuration Error:[/bold red] {e}")
        raise typer.Exit(code=1)
    return app_config


def _environment_timezone() -> Optional[str]:
    """
    Read the display timezone from the environment.

    An unknown name only affects log timestamps, so it is reported and
    ignored instead of stopping the session.
    """
    value = os.environ.get(Constants.CONFIG_ENV_TIMEZONE)
    if not value:
        return None
    try:
        return LoggingParams(timezone=value).timezone
    except ValueError:
        console.print(
            f"[yellow]Warning: ignoring {Constants.CONFIG_ENV_TIMEZONE}={escape(repr(value))} "
            "(unknown timezone), using the configured timezone or UTC[/yellow]"
        )
        return None


@app.command()
def run(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="JSON configuration file"
    ),
    menu: bool = typer.Option(
        False, "--menu", "-m", help="Use arrow-key menus instead of typed answers"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", "-l", help="Log level for stderr (DEBUG, INFO, WARNING, ...)"
    ),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write logs to a file"),
    tz: Optional[str] = typer.Option(
        None,
        "--timezone",
        help=f"Display timezone for log timestamps (or {Constants.CONFIG_ENV_TIMEZONE})",
    ),
    echo_status: bool = typer.Option(
        False, "--echo-status", help="Log the status line after every command"
    ),
    increment: Optional[int] = typer.Option(
        None, "--increment", help="Data collected per round while panels are active"
    ),
):
    """
    Run an interactive satellite command session.
    """
    if tz is None:
        tz = _environment_timezone()

    overrides: Dict[str, Dict[str, Any]] = {
        "satellite": {"data_increment": increment},
        "logging": {
            "level": log_level,
            "timezone": tz,
            "log_file": str(log_file) if log_file else None,
        },
        "session": {
            "menu_prompts": True if menu else None,
            "echo_status_after_command": True if echo_status else None,
        },
    }
    app_config = _resolve_config(config_path, overrides)

    log_params = app_config.logging
    setup_logging(
        level=log_params.numeric_level,
        log_file=log_params.log_file,
        simple_format=log_params.simple_format,
        timezone=log_params.timezone,
    )

    satellite = Satellite.from_params(app_config.satellite, console=console)
    prompter = MenuPrompter() if app_config.session.menu_prompts else ConsolePrompter()
    session = CommandSession(satellite, prompter, console=console, params=app_config.session)

    try:
        rounds = session.run()
    except KeyboardInterrupt:
        console.print("\n[yellow]Session stopping (KeyboardInterrupt)...[/yellow]")
        rounds = session.rounds_completed

    console.print(
        Panel.fit(
            f"Rounds completed: {rounds}\n{satellite.status_line()}",
            title="Session Summary",
            style="bold blue",
        )
    )


@app.command()
def config(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="JSON configuration file"
    ),
    dump: bool = typer.Option(False, "--dump", help="Dump current effective config"),
):
    """
    Inspect or validate configuration.
    """
    app_config = _resolve_config(config_path)

    if dump:
        console.print_json(app_config.model_dump_json())
    else:
        console.print("[bold green]✓ Configuration is valid.[/bold green]")
        console.print(
            f"Start: {app_config.satellite.initial_orientation}, "
            f"panels {app_config.satellite.initial_panel_status}, "
            f"+{app_config.satellite.data_increment} per collection"
        )


if __name__ == "__main__":
    app()
