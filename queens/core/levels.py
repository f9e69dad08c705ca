from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

RegionGrid = Tuple[Tuple[str, ...], ...]


class _LevelLoader(yaml.SafeLoader):
    """SafeLoader without YAML 1.1 booleans, so rows like TRUE or NO stay strings."""


_LevelLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:bool"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


@dataclass(frozen=True)
class LevelDefinition:
    key: str
    name: str
    size: int
    region_grid: Optional[RegionGrid]

    @property
    def region_labels(self) -> List[str]:
        if not self.region_grid:
            return []
        return sorted({label for row in self.region_grid for label in row})

    @property
    def region_count(self) -> int:
        return len(self.region_labels)


def _coerce_region_grid(raw: object) -> Optional[RegionGrid]:
    """Turn YAML rows ("AABB" strings or label lists) into a tuple grid.

    Shape is not checked here; ``build_board`` owns that decision.
    """
    if not isinstance(raw, list) or not raw:
        return None
    rows = []
    for row in raw:
        if isinstance(row, str):
            rows.append(tuple(row.strip()))
        elif isinstance(row, list):
            rows.append(tuple(str(label).strip() for label in row))
        else:
            return None
    return tuple(rows)


class LevelCatalog:
    """Ordered, read-only set of puzzle levels. A level's index is its identifier."""

    def __init__(self, levels_dir: Optional[Path] = None) -> None:
        self._levels_dir = levels_dir or Path(__file__).resolve().parent.parent / "data" / "levels"
        self._levels = self._load_levels()

    def __len__(self) -> int:
        return len(self._levels)

    def all(self) -> List[LevelDefinition]:
        return list(self._levels)

    def get(self, index: int) -> LevelDefinition:
        if index < 0:
            raise IndexError(f"level index out of range: {index}")
        return self._levels[index]

    def by_size(self) -> Dict[int, List[Tuple[int, LevelDefinition]]]:
        """Group ``(index, level)`` pairs by board size, smallest size first."""
        groups: Dict[int, List[Tuple[int, LevelDefinition]]] = {}
        for index, level in enumerate(self._levels):
            groups.setdefault(level.size, []).append((index, level))
        return {size: groups[size] for size in sorted(groups)}

    def _load_levels(self) -> List[LevelDefinition]:
        base_dir = self._levels_dir
        if not base_dir.exists():
            raise FileNotFoundError(f"Levels directory not found: {base_dir}")

        def _sort_key(p: Path) -> tuple[int, str]:
            m = re.match(r"^level(\d+)$", p.stem)
            if m:
                return (int(m.group(1)), p.stem)
            return (10**9, p.stem)

        levels: List[LevelDefinition] = []
        for level_path in sorted(base_dir.glob("level*.yaml"), key=_sort_key):
            raw = yaml.load(level_path.read_text(encoding="utf-8"), Loader=_LevelLoader)
            if not raw or not isinstance(raw, dict):
                raise ValueError(f"{level_path.name}: expected YAML with 'size' and 'regions'")
            size = raw.get("size")
            if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
                raise ValueError(f"{level_path.name}: missing or invalid 'size'")
            region_grid = _coerce_region_grid(raw.get("regions"))
            if region_grid is None:
                logger.warning("%s: no usable 'regions' grid", level_path.name)
            name = raw.get("name")
            if not name or not isinstance(name, str):
                name = f"Puzzle {len(levels) + 1}"
            levels.append(
                LevelDefinition(
                    key=level_path.stem,
                    name=name.strip(),
                    size=size,
                    region_grid=region_grid,
                )
            )

        if not levels:
            raise ValueError("No level files (level*.yaml) found in data/levels")
        logger.info("Loaded %d levels from %s", len(levels), base_dir)
        return levels
