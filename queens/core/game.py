from __future__ import annotations

import logging
from typing import Optional, Set, Tuple

from queens.core.board import Board, MalformedLevel, build_board
from queens.core.gestures import DOUBLE_PRESS_WINDOW_MS, GestureController
from queens.core.ledger import CompletionLedger
from queens.core.levels import LevelCatalog
from queens.core.session import GameSession

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


class GameController:
    """Owns the active session and its gesture controller, and records wins.

    Choosing a level always starts a fresh session, replacing whatever was
    being played, won or not.
    """

    def __init__(
        self,
        catalog: LevelCatalog,
        ledger: CompletionLedger,
        double_press_window_ms: int = DOUBLE_PRESS_WINDOW_MS,
    ) -> None:
        self._catalog = catalog
        self._ledger = ledger
        self._window_ms = double_press_window_ms
        self._session: Optional[GameSession] = None
        self._gestures: Optional[GestureController] = None

    @property
    def catalog(self) -> LevelCatalog:
        return self._catalog

    @property
    def session(self) -> Optional[GameSession]:
        return self._session

    @property
    def gestures(self) -> Optional[GestureController]:
        return self._gestures

    def start_level(self, level_index: int) -> GameSession:
        """Start a new session on the level at *level_index*."""
        level = self._catalog.get(level_index)
        error: Optional[MalformedLevel] = None
        try:
            board = build_board(level)
        except MalformedLevel as e:
            logger.warning("Level %d cannot be played: %s", level_index, e)
            board = Board.empty()
            error = e

        self._session = GameSession(
            level_index=level_index,
            level=level,
            board=board,
            on_won=self._record_win,
            error=error,
        )
        self._gestures = GestureController(self._session, self._window_ms)
        logger.info("Started level %d (%s, %dx%d)", level_index, level.name, level.size, level.size)
        return self._session

    def end_session(self) -> None:
        """Return to the menu: drop the session and any gesture in progress."""
        self._session = None
        self._gestures = None

    def press(self, coord: Coord, timestamp_ms: int) -> None:
        if self._gestures is not None:
            self._gestures.press(coord, timestamp_ms)

    def enter(self, coord: Coord) -> None:
        if self._gestures is not None:
            self._gestures.enter(coord)

    def release(self) -> None:
        if self._gestures is not None:
            self._gestures.release()

    def leave(self) -> None:
        if self._gestures is not None:
            self._gestures.leave()

    def is_completed(self, level_index: int) -> bool:
        return self._ledger.is_completed(level_index)

    def completed_levels(self) -> Set[int]:
        """Solved level indices that exist in the catalog."""
        total = len(self._catalog)
        return {index for index in self._ledger.completed() if 0 <= index < total}

    def _record_win(self, level_index: int) -> None:
        self._ledger.mark_completed(level_index)
