from __future__ import annotations

from pathlib import Path

import pytest

from queens.core.board import Board, build_board
from queens.core.game import GameController
from queens.core.ledger import CompletionLedger
from queens.core.levels import LevelCatalog, LevelDefinition
from queens.core.session import GameSession
from tests.helpers import LEVEL0_ROWS, make_level, write_level


@pytest.fixture()
def level7() -> LevelDefinition:
    return make_level(LEVEL0_ROWS)


@pytest.fixture()
def board7(level7: LevelDefinition) -> Board:
    return build_board(level7)


@pytest.fixture()
def session7(level7: LevelDefinition, board7: Board) -> GameSession:
    return GameSession(level_index=0, level=level7, board=board7)


@pytest.fixture()
def ledger(tmp_path: Path) -> CompletionLedger:
    """Ledger backed by a temp file so tests don't touch ~/.queens."""
    return CompletionLedger(tmp_path / "home" / "progress.json")


@pytest.fixture()
def levels_dir(tmp_path: Path) -> Path:
    d = tmp_path / "levels"
    d.mkdir()
    return d


@pytest.fixture()
def controller(levels_dir: Path, ledger: CompletionLedger) -> GameController:
    """Controller over two playable 7x7 levels and one level without regions."""
    write_level(levels_dir, "level0", 7, LEVEL0_ROWS)
    write_level(levels_dir, "level1", 7, LEVEL0_ROWS)
    write_level(levels_dir, "level2", 7, None)
    return GameController(LevelCatalog(levels_dir), ledger)
