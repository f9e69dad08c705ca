"""Tests for queens.core.levels – YAML-based level catalog."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from queens.core.board import build_board
from queens.core.levels import LevelCatalog, LevelDefinition
from tests.helpers import LEVEL0_ROWS, write_level


def _write_yaml(path: Path, data: object) -> None:
    path.write_text(yaml.dump(data, allow_unicode=True, default_flow_style=False), encoding="utf-8")


# ---------------------------------------------------------------------------
# LevelDefinition dataclass
# ---------------------------------------------------------------------------

class TestLevelDefinition:
    def test_creation(self):
        lv = LevelDefinition(key="level0", name="First", size=2, region_grid=(("A", "B"), ("A", "B")))
        assert lv.key == "level0"
        assert lv.size == 2
        assert lv.region_grid == (("A", "B"), ("A", "B"))

    def test_frozen(self):
        lv = LevelDefinition(key="level0", name="First", size=1, region_grid=(("A",),))
        with pytest.raises(AttributeError):
            lv.size = 3  # type: ignore[misc]

    def test_region_labels_sorted_and_distinct(self):
        lv = LevelDefinition(key="k", name="n", size=2, region_grid=(("B", "A"), ("B", "B")))
        assert lv.region_labels == ["A", "B"]
        assert lv.region_count == 2

    def test_region_labels_without_grid(self):
        lv = LevelDefinition(key="k", name="n", size=7, region_grid=None)
        assert lv.region_labels == []
        assert lv.region_count == 0


# ---------------------------------------------------------------------------
# LevelCatalog – happy paths
# ---------------------------------------------------------------------------

class TestLevelCatalogHappy:
    def test_single_level(self, levels_dir: Path):
        write_level(levels_dir, "level0", 7, LEVEL0_ROWS)
        catalog = LevelCatalog(levels_dir)
        assert len(catalog) == 1
        lv = catalog.get(0)
        assert lv.size == 7
        assert lv.region_grid[0] == tuple("AAAAABB")
        assert lv.region_count == 7

    def test_numeric_order(self, levels_dir: Path):
        for n in (10, 2, 0, 1):
            _write_yaml(levels_dir / f"level{n}.yaml", {"name": f"L{n}", "size": 1, "regions": ["A"]})
        catalog = LevelCatalog(levels_dir)
        assert [lv.key for lv in catalog.all()] == ["level0", "level1", "level2", "level10"]

    def test_regions_as_label_lists(self, levels_dir: Path):
        _write_yaml(levels_dir / "level0.yaml", {"size": 2, "regions": [["A", "B"], ["A", "B"]]})
        assert LevelCatalog(levels_dir).get(0).region_grid == (("A", "B"), ("A", "B"))

    def test_name_stripped(self, levels_dir: Path):
        _write_yaml(levels_dir / "level0.yaml", {"name": "  Padded  ", "size": 1, "regions": ["A"]})
        assert LevelCatalog(levels_dir).get(0).name == "Padded"

    def test_default_name(self, levels_dir: Path):
        _write_yaml(levels_dir / "level0.yaml", {"size": 1, "regions": ["A"]})
        _write_yaml(levels_dir / "level1.yaml", {"size": 1, "regions": ["A"]})
        assert [lv.name for lv in LevelCatalog(levels_dir).all()] == ["Puzzle 1", "Puzzle 2"]

    def test_missing_regions_is_not_a_catalog_error(self, levels_dir: Path):
        write_level(levels_dir, "level0", 7, None)
        assert LevelCatalog(levels_dir).get(0).region_grid is None

    def test_ragged_regions_are_kept_as_is(self, levels_dir: Path):
        _write_yaml(levels_dir / "level0.yaml", {"size": 2, "regions": ["AB", "A"]})
        assert LevelCatalog(levels_dir).get(0).region_grid == (("A", "B"), ("A",))

    @pytest.mark.parametrize("word", ["TRUE", "FALSE", "YES", "OFF", "NO"])
    def test_boolean_looking_rows_stay_labels(self, levels_dir: Path, word: str):
        write_level(levels_dir, "level0", len(word), [word] * len(word))
        level = LevelCatalog(levels_dir).get(0)
        assert level.region_grid == tuple(tuple(word) for _ in word)
        assert build_board(level).region_at((0, 0)) == word[0]

    def test_by_size_groups_and_orders(self, levels_dir: Path):
        _write_yaml(levels_dir / "level0.yaml", {"size": 2, "regions": ["AB", "AB"]})
        _write_yaml(levels_dir / "level1.yaml", {"size": 1, "regions": ["A"]})
        _write_yaml(levels_dir / "level2.yaml", {"size": 2, "regions": ["AA", "BB"]})
        groups = LevelCatalog(levels_dir).by_size()
        assert list(groups) == [1, 2]
        assert [index for index, _ in groups[2]] == [0, 2]
        assert [index for index, _ in groups[1]] == [1]

    def test_bundled_levels_load(self):
        catalog = LevelCatalog()
        assert len(catalog) >= 1
        for level in catalog.all():
            assert level.region_grid is not None
            assert len(level.region_grid) == level.size


# ---------------------------------------------------------------------------
# LevelCatalog – error paths
# ---------------------------------------------------------------------------

class TestLevelCatalogErrors:
    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            LevelCatalog(tmp_path / "nope")

    def test_no_yaml_files(self, levels_dir: Path):
        with pytest.raises(ValueError, match="No level files"):
            LevelCatalog(levels_dir)

    def test_empty_yaml(self, levels_dir: Path):
        (levels_dir / "level0.yaml").write_text("", encoding="utf-8")
        with pytest.raises(ValueError, match="expected YAML"):
            LevelCatalog(levels_dir)

    def test_yaml_not_dict(self, levels_dir: Path):
        (levels_dir / "level0.yaml").write_text("- item\n", encoding="utf-8")
        with pytest.raises(ValueError, match="expected YAML"):
            LevelCatalog(levels_dir)

    def test_missing_size(self, levels_dir: Path):
        _write_yaml(levels_dir / "level0.yaml", {"regions": ["A"]})
        with pytest.raises(ValueError, match="invalid 'size'"):
            LevelCatalog(levels_dir)

    def test_size_not_int(self, levels_dir: Path):
        _write_yaml(levels_dir / "level0.yaml", {"size": "seven", "regions": ["A"]})
        with pytest.raises(ValueError, match="invalid 'size'"):
            LevelCatalog(levels_dir)

    def test_size_not_positive(self, levels_dir: Path):
        _write_yaml(levels_dir / "level0.yaml", {"size": 0, "regions": []})
        with pytest.raises(ValueError, match="invalid 'size'"):
            LevelCatalog(levels_dir)

    def test_get_out_of_range(self, levels_dir: Path):
        write_level(levels_dir, "level0", 7, LEVEL0_ROWS)
        catalog = LevelCatalog(levels_dir)
        with pytest.raises(IndexError):
            catalog.get(1)
        with pytest.raises(IndexError):
            catalog.get(-1)
