from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..core.env import load_settings
from ..core.log import setup_logging
from ..puzzles import GameKind
from ..state import load_or_default

app = typer.Typer()
console = Console()


def kind_label(kind: int) -> str:
    try:
        return GameKind(kind).label
    except ValueError:
        return f"unknown ({kind})"


@app.command()
def main(
    state_path: Optional[Path] = typer.Option(None, help="State file to inspect"),
    debug: bool = False,
):
    """
    List the puzzles stored in the saved state.
    """
    setup_logging(debug)
    path = state_path or load_settings().state_path
    state = load_or_default(path)

    if not len(state.game_cache):
        console.print(f"[yellow]No cached puzzles in[/] {path}")
        return

    table = Table("game", "date", "bytes")
    for entry in sorted(state.game_cache, key=lambda e: (e.day, e.kind)):
        table.add_row(kind_label(entry.kind), entry.day.isoformat(), str(len(entry.raw)))
    console.print(table)
    console.print(f"[bold]{len(state.game_cache)}[/] cached puzzles in {path}")


if __name__ == "__main__":
    app()
