"""Board model derived from a level definition: per-cell region and display color."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Set, Tuple

from queens.core.levels import LevelDefinition

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]

# Region A takes the first color, B the second, and so on, wrapping around.
PALETTE: Tuple[str, ...] = (
    "#FF6B6B",
    "#FFD93D",
    "#6BCF7F",
    "#4D96FF",
    "#FF8E72",
    "#A8E6CF",
    "#FFB3BA",
    "#00AECC",
    "#FF69B4",
    "#9370DB",
    "#FFDDBB",
)


class MalformedLevel(ValueError):
    """The level has no region grid, or the grid is not ``size`` x ``size`` labels."""


def region_color(region: str) -> str:
    """Return the display color for a region label. Same label, same color, always."""
    return PALETTE[(ord(region) - ord("A")) % len(PALETTE)]


@dataclass(frozen=True)
class Cell:
    region: str
    color: str


@dataclass(frozen=True)
class Board:
    cells: Tuple[Tuple[Cell, ...], ...]

    @classmethod
    def empty(cls) -> Board:
        return cls(cells=())

    @property
    def size(self) -> int:
        return len(self.cells)

    @property
    def is_empty(self) -> bool:
        return not self.cells

    def cell(self, coord: Coord) -> Cell:
        row, col = coord
        return self.cells[row][col]

    def region_at(self, coord: Coord) -> str:
        return self.cell(coord).region

    def regions(self) -> Dict[str, Set[Coord]]:
        """Map each region label to the coordinates it covers."""
        result: Dict[str, Set[Coord]] = {}
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                result.setdefault(cell.region, set()).add((r, c))
        return result


def build_board(level: Optional[LevelDefinition]) -> Board:
    """Build the display board for *level*.

    Raises :class:`MalformedLevel` when the level is missing or its region grid
    is not a proper ``size`` x ``size`` grid of single uppercase letters.
    """
    if level is None:
        raise MalformedLevel("no level given")
    grid = level.region_grid
    if not grid:
        raise MalformedLevel(f"{level.key}: missing region grid")
    if len(grid) != level.size:
        raise MalformedLevel(f"{level.key}: expected {level.size} rows, got {len(grid)}")

    rows = []
    for r, labels in enumerate(grid):
        if len(labels) != level.size:
            raise MalformedLevel(
                f"{level.key}: row {r} has {len(labels)} cells, expected {level.size}"
            )
        row = []
        for label in labels:
            if len(label) != 1 or not ("A" <= label <= "Z"):
                raise MalformedLevel(f"{level.key}: invalid region label {label!r} in row {r}")
            row.append(Cell(region=label, color=region_color(label)))
        rows.append(tuple(row))

    board = Board(cells=tuple(rows))
    logger.debug("Built %dx%d board for %s", board.size, board.size, level.key)
    return board
