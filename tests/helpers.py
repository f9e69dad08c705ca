"""Level data and builders shared by the test modules."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from queens.core.levels import LevelDefinition

LEVEL0_ROWS = [
    "AAAAABB",
    "ABBBBBB",
    "CCCCCDD",
    "CDDDDDD",
    "EEEFFFF",
    "EEFFFFG",
    "EGGGGGG",
]

# One queen per row, column and region; no two touching.
SOLUTION_7 = [(0, 0), (1, 2), (2, 4), (3, 6), (4, 1), (5, 3), (6, 5)]


def make_level(rows: List[str], key: str = "level0", size: Optional[int] = None) -> LevelDefinition:
    return LevelDefinition(
        key=key,
        name="Test",
        size=len(rows) if size is None else size,
        region_grid=tuple(tuple(row) for row in rows),
    )


def write_level(levels_dir: Path, name: str, size: int, rows: Optional[List[str]]) -> None:
    lines = [f"size: {size}"]
    if rows is not None:
        lines.append("regions:")
        lines.extend(f"  - {row}" for row in rows)
    (levels_dir / f"{name}.yaml").write_text("\n".join(lines) + "\n", encoding="utf-8")
