from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, List, Tuple

Coord = Tuple[int, int]


class Mark(str, Enum):
    QUEEN = "queen"
    EXCLUDED = "x"
    EMPTY = "empty"


class SquareState:
    """Sparse mapping of cell coordinate to mark. Unset cells read as ``Mark.EMPTY``.

    Coordinates are not bounds-checked; callers only pass on-board cells.
    """

    def __init__(self) -> None:
        self._marks: Dict[Coord, Mark] = {}

    def __len__(self) -> int:
        return len(self._marks)

    def get(self, coord: Coord) -> Mark:
        return self._marks.get(coord, Mark.EMPTY)

    def set(self, coord: Coord, mark: Mark) -> None:
        if mark is Mark.EMPTY:
            self._marks.pop(coord, None)
        else:
            self._marks[coord] = mark

    def clear(self) -> None:
        self._marks.clear()

    def items(self) -> Iterator[Tuple[Coord, Mark]]:
        return iter(self._marks.items())

    def count(self, mark: Mark) -> int:
        return sum(1 for value in self._marks.values() if value is mark)

    def queens(self) -> List[Coord]:
        return sorted(coord for coord, mark in self._marks.items() if mark is Mark.QUEEN)
