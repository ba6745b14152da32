"""Interact command implementation."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import Config, save_preferences
from ..config.loader import DEFAULT_CONFIG_DIR
from ..interactions import InteractionClient, InteractionError, InteractionType, record_interaction
from ..interactions.client import REMOTE_ACTIONS
from .rank import load_viewer_preferences

console = Console()


def interact_command(
    post_id: str = typer.Argument(..., help="Post ID"),
    action: InteractionType = typer.Argument(..., help="Interaction", case_sensitive=False),
    undo: bool = typer.Option(False, "--undo", help="Reverse the interaction (e.g. un-like)"),
    seconds: Optional[float] = typer.Option(
        None,
        "--seconds",
        help="Time spent on the post (views only)",
        min=0.0,
    ),
    remote: bool = typer.Option(
        False,
        "--remote/--local",
        help="Also send the interaction to the platform API",
    ),
    config_path: Path = typer.Option(
        DEFAULT_CONFIG_DIR / "config.yaml",
        "--config",
        help="Configuration file",
    ),
) -> None:
    """Record a viewer interaction in the stored preferences."""
    config = Config(config_path)
    active = not undo

    try:
        preferences = load_viewer_preferences(config)

        if remote and action in REMOTE_ACTIONS:
            client = InteractionClient.from_config(config.get_source_config())
            response = asyncio.run(client.send(post_id, action))
            active = response.active

        preferences = record_interaction(preferences, post_id, action, active, seconds)
        save_preferences(preferences, config.preferences_path)
    except InteractionError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Failed to update preferences: {e}[/red]")
        raise typer.Exit(1)

    verb = "Recorded" if active else "Removed"
    console.print(f"[green]✅ {verb} {action.value} on post {post_id}[/green]")
