from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .puzzles import GameKind


def default_labels() -> List[str]:
    return [kind.label for kind in GameKind]


@dataclass
class Tabber:
    """Cyclic index over the tab labels."""
    index: int = 0
    values: List[str] = field(default_factory=default_labels)

    def next(self) -> None:
        self.index = (self.index + 1) % len(self.values)

    def prev(self) -> None:
        if self.index != 0:
            self.index -= 1
        else:
            self.index = len(self.values) - 1

    @property
    def current(self) -> str:
        return self.values[self.index]

    def to_dict(self) -> Dict[str, Any]:
        return {"index": self.index, "values": list(self.values)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tabber":
        values = data.get("values")
        if not isinstance(values, list) or len(values) != len(GameKind):
            values = default_labels()
        index = data.get("index", 0)
        if not isinstance(index, int) or not 0 <= index < len(values):
            index = 0
        return cls(index=index, values=[str(v) for v in values])
