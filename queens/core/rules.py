"""Win condition for the queens puzzle."""

from __future__ import annotations

from itertools import combinations
from typing import Iterable, Mapping, Optional, Tuple

from queens.core.squares import SquareState

Coord = Tuple[int, int]

# Any two queens at this Manhattan distance or closer touch orthogonally or diagonally.
MIN_QUEEN_DISTANCE = 2


def queens_conflict(a: Coord, b: Coord) -> bool:
    """Return True if two queens share a row or column, or touch."""
    if a[0] == b[0] or a[1] == b[1]:
        return True
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) <= MIN_QUEEN_DISTANCE


def is_solved(
    squares: SquareState,
    size: int,
    regions: Optional[Mapping[str, Iterable[Coord]]] = None,
) -> bool:
    """Return True if the queens on *squares* solve a *size* x *size* puzzle.

    Solved means: at least one queen, no two queens in the same row or column
    or touching, exactly *size* queens, and, when *regions* is given, exactly
    one queen in every region. *squares* is only read.
    """
    queens = squares.queens()
    if not queens:
        return False

    for a, b in combinations(queens, 2):
        if queens_conflict(a, b):
            return False

    if len(queens) != size:
        return False

    if regions is not None:
        placed = set(queens)
        for cells in regions.values():
            if sum(1 for coord in cells if coord in placed) != 1:
                return False
    return True
