from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..core.env import load_settings
from ..core.log import setup_logging
from ..session import SessionState
from ..state import load_or_default, save_state

app = typer.Typer()
console = Console()


@app.command()
def main(
    state_path: Optional[Path] = typer.Option(None, help="State file to reset"),
    keep_cache: bool = typer.Option(False, help="Keep downloaded puzzles"),
    debug: bool = False,
):
    """
    Forget all progress. The next `play` starts on today's Wordle.
    """
    setup_logging(debug)
    path = state_path or load_settings().state_path

    if not keep_cache:
        if path.exists():
            path.unlink()
            console.print(f"[green]Removed[/] {path}")
        else:
            console.print(f"[yellow]Nothing to remove at[/] {path}")
        return

    old = load_or_default(path)
    save_state(SessionState(game_cache=old.game_cache), path)
    console.print(f"[green]Reset[/] {path}, kept {len(old.game_cache)} cached puzzles")


if __name__ == "__main__":
    app()
