# src/game/persistence.py
"""
High-score storage. One integer in one named slot.

Storage is best effort: anything unreadable counts as "no high score yet"
and a failed write is logged and dropped, never raised into the game loop.
"""
from __future__ import annotations
import json
import logging
import math
from pathlib import Path
from typing import Optional, Protocol, Union

from .config import HIGHSCORE_KEY

log = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    def read_high_score(self) -> int: ...
    def write_high_score(self, value: int) -> None: ...


def _as_score(value) -> int:
    # bool is an int subclass; "true" is not a score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float):
        # 120.0 is a score, 3.5 and nan are not
        if not math.isfinite(value) or not value.is_integer():
            return 0
        value = int(value)
    return value if value >= 0 else 0


class MemoryHighScoreStore:
    """In-process slot (tests, headless environments)."""

    def __init__(self, value: Optional[int] = None):
        self._value = value

    def read_high_score(self) -> int:
        return _as_score(self._value)

    def write_high_score(self, value: int) -> None:
        self._value = int(value)


class FileHighScoreStore:
    """JSON file holding {HIGHSCORE_KEY: N}.

    After the first failed write the store goes read-only for the rest of the
    session: one warning, no retries.
    """

    def __init__(self, path: Union[str, Path], key: str = HIGHSCORE_KEY):
        self.path = Path(path).expanduser()
        self.key = key
        self._last_written: Optional[int] = None
        self.write_failed = False

    def read_high_score(self) -> int:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as e:
            log.warning("Ignoring unreadable high score file %s: %s", self.path, e)
            return 0
        if not isinstance(data, dict):
            return 0
        return _as_score(data.get(self.key))

    def write_high_score(self, value: int) -> None:
        value = int(value)
        if self.write_failed or value == self._last_written:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp.write_text(json.dumps({self.key: value}), encoding="utf-8")
            tmp.replace(self.path)
        except OSError as e:
            self.write_failed = True
            log.warning("Could not save high score to %s, not retrying: %s", self.path, e)
            return
        self._last_written = value
