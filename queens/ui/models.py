"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Dict, List, Tuple

from queens.core.levels import LevelDefinition


@dataclass
class LevelState:
    """Selector state for a single level: its catalog index and whether it was solved."""

    index: int
    level: LevelDefinition
    completed: bool = False

    @property
    def number(self) -> int:
        """1-based number shown to the player."""
        return self.index + 1


def group_level_states(
    groups: Dict[int, List[Tuple[int, LevelDefinition]]],
    completed: AbstractSet[int],
) -> Dict[int, List[LevelState]]:
    """Turn ``LevelCatalog.by_size()`` output into selector states, keeping its order."""
    return {
        size: [LevelState(index=index, level=level, completed=index in completed) for index, level in entries]
        for size, entries in groups.items()
    }
