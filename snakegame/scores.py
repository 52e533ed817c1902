"""High score storage: one small text file per level."""

from __future__ import annotations

import re
from pathlib import Path

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def score_path(level: int, directory: str | Path = ".") -> Path:
    """Return the file that holds the high score for ``level``."""
    return Path(directory) / f"highscore{level}.txt"


def get_high_score(level: int, directory: str | Path = ".") -> int:
    """Read the stored high score, or 0 when none can be read."""
    try:
        text = score_path(level, directory).read_text()
    except OSError:
        return 0
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def save_high_score(level: int, score: int, directory: str | Path = ".") -> None:
    """Store ``score`` as the high score; a file that cannot be written is skipped."""
    try:
        score_path(level, directory).write_text(str(score))
    except OSError:
        pass