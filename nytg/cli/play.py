from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.live import Live

from ..clients import get_client
from ..core.env import describe_settings, load_settings
from ..core.log import setup_logging
from ..session import Session
from ..state import load_or_default, save_state
from ..ui import POLL_INTERVAL, KeyReader, render_frame
from ..words import load_words

app = typer.Typer()
console = Console()
logger = logging.getLogger(__name__)


def run(session: Session, reader, console: Console = console, screen: bool = True) -> None:
    """Redraw, poll for one key, apply it; until the session asks to quit."""
    with Live(render_frame(session.state), console=console, screen=screen, auto_refresh=False) as live:
        while not session.should_quit:
            live.update(render_frame(session.state), refresh=True)
            try:
                event = reader.read(POLL_INTERVAL)
                if event is not None:
                    session.handle(event)
            except KeyboardInterrupt:
                session.quit()


@app.command()
def main(
    day: Optional[datetime] = typer.Option(None, "--date", formats=["%Y-%m-%d"], help="Open the puzzles of this day"),
    state_path: Optional[Path] = typer.Option(None, help="State file (default: NYTG_STATE_PATH or ~/.config/nytg_cli/state.json)"),
    puzzle_dir: Optional[Path] = typer.Option(None, help="Read puzzles from <dir>/<game>/<date>.json instead of the network"),
    debug: bool = False,
):
    """
    Play Wordle, Connections and Strands in the terminal.
    """
    settings = load_settings()
    if debug:
        from rich import print as rprint
        rprint(describe_settings(settings))

    if not sys.stdin.isatty():
        console.print("[red]nytg play needs an interactive terminal[/]")
        raise SystemExit(1)

    setup_logging(debug, settings.log_path)
    path = state_path or settings.state_path

    state = load_or_default(path)
    client = get_client(settings.base_url, settings.timeout, puzzle_dir or settings.puzzle_dir)
    session = Session(state, client, words=load_words(settings.words_path))
    logger.info("starting on %s %s", state.page.current, state.day)

    if day is not None and day.date() != state.day:
        state.day = day.date()
        session.refresh()
    else:
        session.start()

    try:
        with KeyReader() as reader:
            run(session, reader)
    finally:
        save_state(state, path)


if __name__ == "__main__":
    app()
