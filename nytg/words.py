"""
Known five-letter words accepted as Wordle guesses.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Optional

logger = logging.getLogger(__name__)

BUNDLED_WORDS = Path(__file__).parent / "assets" / "words.txt"


def load_words(path: Optional[str | Path] = None) -> FrozenSet[str]:
    """
    Load a newline-separated word list, lowercased and stripped.

    Falls back to the bundled list when ``path`` is not given. A missing file
    yields an empty set, which disables the known-word check.
    """
    p = Path(path) if path else BUNDLED_WORDS
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning("word list %s not found, accepting every guess", p)
        return frozenset()
    words = frozenset(w.strip().lower() for w in text.splitlines() if w.strip())
    logger.debug("loaded %d words from %s", len(words), p)
    return words
