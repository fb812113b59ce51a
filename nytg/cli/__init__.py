"""
CLI commands for the NYT games client.
"""

import typer

from .cache import main as cache
from .play import main as play
from .reset import main as reset

app = typer.Typer(help="Wordle, Connections and Strands in the terminal.")
app.command("play")(play)
app.command("cache")(cache)
app.command("reset")(reset)


def cli():
    """Entry point for CLI."""
    app()


__all__ = [
    "app",
    "cli",
    "play",
    "cache",
    "reset",
]
