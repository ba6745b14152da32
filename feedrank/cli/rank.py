"""Rank command implementation."""

import asyncio
import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from ..config import Config, load_preferences
from ..config.loader import DEFAULT_CONFIG_DIR
from ..ingestion import PostSource, default_preferences, load_posts_file, sample_posts
from ..models import Post, UserPreferences
from ..ranking import FeedMode, FeedRanker, print_ranking_summary

console = Console()
err_console = Console(stderr=True)


def load_viewer_preferences(config: Config) -> UserPreferences:
    """Load stored viewer preferences, or the sample viewer when none are stored."""
    path = config.preferences_path
    if not path.exists():
        err_console.print(f"[dim]No preferences at {path}, using sample viewer.[/dim]")
        return default_preferences()
    return load_preferences(path)


def _load_posts(config: Config, source: str) -> List[Post]:
    """Load candidate posts from the API, the sample set, or a file."""
    if source == "sample":
        return sample_posts()

    if source != "api":
        return load_posts_file(Path(source).expanduser())

    post_source = PostSource.from_config(config.get_source_config())
    result = asyncio.run(post_source.fetch_posts())

    if result.used_fallback:
        err_console.print(f"[yellow]⚠️  Posts API unavailable ({result.error}); showing sample posts.[/yellow]")
    elif not result.success:
        raise RuntimeError(f"Could not fetch posts: {result.error}")
    elif result.skipped:
        err_console.print(f"[yellow]⚠️  Skipped {result.skipped} malformed posts.[/yellow]")

    return result.posts


def rank_command(
    mode: Optional[FeedMode] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Ranking mode. Default: from config",
        case_sensitive=False,
    ),
    source: str = typer.Option(
        "api",
        "--source",
        "-s",
        help="Where posts come from: 'api', 'sample', or a JSON/YAML file path",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        help="Number of posts to show",
        min=1,
    ),
    json_output: bool = typer.Option(False, "--json", help="Print ranked posts as JSON"),
    config_path: Path = typer.Option(
        DEFAULT_CONFIG_DIR / "config.yaml",
        "--config",
        help="Configuration file",
    ),
) -> None:
    """Rank candidate posts for the configured viewer."""
    try:
        config = Config(config_path)

        if mode is None:
            mode = FeedMode(config.config.feed.default_mode)

        if limit is None:
            limit = config.config.feed.limit

        preferences = load_viewer_preferences(config)
        posts = _load_posts(config, source)

        ranker = FeedRanker(config.config.ranking)
        result = ranker.rank(posts, preferences, mode)
    except KeyboardInterrupt:
        console.print("\n[yellow]Ranking interrupted by user[/yellow]")
        raise typer.Exit(1)
    except Exception as e:
        err_console.print(f"[red]Ranking failed: {e}[/red]")
        raise typer.Exit(1)

    if json_output:
        payload = {
            "mode": result.mode.value,
            "total": result.total_posts,
            "posts": [scored.annotated() for scored in result.ranked_posts[:limit]],
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    print_ranking_summary(result, limit=limit)
