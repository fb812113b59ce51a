from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterator, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    kind: int
    day: date
    raw: str


@dataclass
class PuzzleCache:
    """
    Append-only store of raw puzzle responses keyed by (game, day).

    Lookups return the first matching entry, so duplicates carried over from
    older sessions are harmless.
    """
    entries: List[CacheEntry] = field(default_factory=list)

    def lookup(self, kind: int, day: date) -> Optional[str]:
        for entry in self.entries:
            if entry.kind == kind and entry.day == day:
                logger.debug("cache hit kind=%s day=%s", kind, day)
                return entry.raw
        logger.debug("cache miss kind=%s day=%s", kind, day)
        return None

    def store(self, kind: int, day: date, raw: str) -> None:
        self.entries.append(CacheEntry(int(kind), day, raw))

    def discard(self, kind: int, day: date) -> int:
        """Remove every entry for (kind, day); returns how many were dropped."""
        kept = [e for e in self.entries if not (e.kind == kind and e.day == day)]
        dropped = len(self.entries) - len(kept)
        self.entries = kept
        return dropped

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CacheEntry]:
        return iter(self.entries)

    def to_list(self) -> List[List[Any]]:
        return [[e.kind, e.day.isoformat(), e.raw] for e in self.entries]

    @classmethod
    def from_list(cls, rows: Any) -> "PuzzleCache":
        """Rebuild from persisted rows, dropping any row that does not parse."""
        entries = []
        for row in rows if isinstance(rows, list) else []:
            try:
                kind, day, raw = row
                entries.append(CacheEntry(int(kind), date.fromisoformat(day), str(raw)))
            except (TypeError, ValueError):
                logger.warning("dropping unreadable cache row %r", row)
        return cls(entries)
