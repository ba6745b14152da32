"""Main CLI application."""

import logging

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

# Load .env file if it exists
load_dotenv()

from .init import init_command
from .interact import interact_command
from .rank import rank_command

app = typer.Typer(
    name="feedrank",
    help="Feed ranking engine - rank creator posts for a viewer",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )


# Register commands
app.command("init")(init_command)
app.command("rank")(rank_command)
app.command("interact")(interact_command)


if __name__ == "__main__":
    app()
