from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Optional, Set

logger = logging.getLogger(__name__)

LEDGER_KEY = "queens-completed-puzzles"


class CompletionLedger:
    """Durable set of solved level indices.

    File: ~/.queens/progress.json, one entry under ``LEDGER_KEY`` holding a JSON
    array of indices. Unreadable content counts as "nothing solved yet";
    completion tracking never blocks play.
    """

    def __init__(self, file_path: Optional[Path] = None) -> None:
        self._file_path = file_path or Path.home() / ".queens" / "progress.json"

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> Set[int]:
        if not self._file_path.exists():
            return set()
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (ValueError, OSError) as e:
            # ValueError covers both JSONDecodeError and UnicodeDecodeError.
            logger.warning("Could not load completed puzzles from %s: %s", self._file_path, e)
            return set()

        if not isinstance(payload, dict):
            logger.warning("Ignoring unexpected ledger content in %s", self._file_path)
            return set()
        entries = payload.get(LEDGER_KEY, [])
        if not isinstance(entries, list):
            logger.warning("Ignoring non-list %r entry in %s", LEDGER_KEY, self._file_path)
            return set()
        return {int(item) for item in entries if isinstance(item, int) and not isinstance(item, bool)}

    def save(self, completed: Iterable[int]) -> None:
        payload = {LEDGER_KEY: sorted(set(completed))}
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save completed puzzles to %s: %s", self._file_path, e)

    def mark_completed(self, level_index: int) -> None:
        """Add *level_index* to the stored set (read, add, write back)."""
        completed = self.load()
        completed.add(level_index)
        self.save(completed)
        logger.info("Marked level %d as completed", level_index)

    def is_completed(self, level_index: int) -> bool:
        return level_index in self.load()

    def completed(self) -> Set[int]:
        return self.load()
