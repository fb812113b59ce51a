from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from ..errors import MalformedResponse, NetworkFailure
from ..puzzles import GameKind

logger = logging.getLogger(__name__)


class LocalClient:
    """
    Serves puzzles from a directory laid out as ``<root>/<game>/<YYYY-MM-DD>.json``.
    Useful offline and for replaying saved responses.
    """

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def path_for(self, kind: GameKind, day: date) -> Path:
        return self.root / kind.endpoint / f"{day.isoformat()}.json"

    def fetch(self, kind: GameKind, day: date) -> str:
        path = self.path_for(kind, day)
        logger.debug("reading %s", path)
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise MalformedResponse(f"{path} is not UTF-8: {e}") from e
        except OSError as e:
            raise NetworkFailure(f"Cannot read {path}: {e}") from e
