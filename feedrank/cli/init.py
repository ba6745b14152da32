"""Init command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import ConfigModel, save_config, save_preferences
from ..config.loader import DEFAULT_CONFIG_DIR
from ..ingestion import default_preferences
from ..models import UserPreferences

console = Console()


def init_command(
    config_dir: Path = typer.Option(
        DEFAULT_CONFIG_DIR,
        "--config-dir",
        "-c",
        help="Configuration directory",
    ),
    posts_url: str = typer.Option(
        "http://localhost:3000/api/posts",
        "--posts-url",
        help="Posts listing endpoint",
    ),
    api_token_env: Optional[str] = typer.Option(
        "FEEDRANK_API_TOKEN",
        "--api-token-env",
        help="Environment variable holding the API token",
    ),
    seed_preferences: bool = typer.Option(
        True,
        "--seed-preferences/--no-seed-preferences",
        help="Seed the sample viewer preferences",
    ),
) -> None:
    """Initialize feed ranker configuration and viewer preferences."""
    console.print(Panel.fit("Feed Ranker - Initialization", style="bold blue"))

    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = config_dir / "config.yaml"

    base_url = posts_url.rstrip("/")
    config = ConfigModel(
        source={
            "posts_url": base_url,
            "interact_url": base_url + "/{post_id}/interact",
            "api_token_env": api_token_env,
        },
    )

    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    preferences_path = config_dir / config.preferences_file
    if seed_preferences:
        save_preferences(default_preferences(), preferences_path)
        console.print(f"✅ Created preferences: {preferences_path} (seeded with sample viewer)")
    else:
        save_preferences(UserPreferences(), preferences_path)
        console.print(f"✅ Created preferences: {preferences_path} (empty)")

    console.print(
        Panel(
            f"[green]✅ Feed ranker initialized successfully![/green]\n\n"
            f"Configuration: {config_path}\n"
            f"Preferences: {preferences_path}\n\n"
            f"Next steps:\n"
            f"1. Set the API token if needed: [bold]export {api_token_env or 'FEEDRANK_API_TOKEN'}=your_token[/bold]\n"
            f"2. Run: [bold]feedrank rank --mode intelligent[/bold]",
            style="green",
        )
    )
