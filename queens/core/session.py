from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Callable, Optional, Tuple

from queens.core.board import Board, MalformedLevel
from queens.core.levels import LevelDefinition
from queens.core.rules import is_solved
from queens.core.squares import Mark, SquareState

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


class SessionPhase(str, Enum):
    PLAYING = "playing"
    WON = "won"


def format_time(seconds: float) -> str:
    """Format a duration as ``m:ss``."""
    total = max(0, int(seconds))
    mins, secs = divmod(total, 60)
    return f"{mins}:{secs:02d}"


class GameSession:
    """One attempt at one level: board, marks, move count and phase.

    Every accepted mark change is counted as a move and immediately followed by
    a win check. Once the session is won it accepts no further changes.
    """

    def __init__(
        self,
        level_index: int,
        level: LevelDefinition,
        board: Board,
        on_won: Optional[Callable[[int], None]] = None,
        error: Optional[MalformedLevel] = None,
    ) -> None:
        """Start a session on *board*. *error* is set when the level could not be built."""
        self._level_index = level_index
        self._level = level
        self._board = board
        self._on_won = on_won
        self._error = error
        self._squares = SquareState()
        self._regions = board.regions()
        self._move_count = 0
        self._phase = SessionPhase.PLAYING
        self._started_at = time.time()
        self._won_at: Optional[float] = None

    @property
    def level_index(self) -> int:
        return self._level_index

    @property
    def level(self) -> LevelDefinition:
        return self._level

    @property
    def board(self) -> Board:
        return self._board

    @property
    def squares(self) -> SquareState:
        return self._squares

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def started_at(self) -> float:
        """Unix timestamp when the session started."""
        return self._started_at

    @property
    def error(self) -> Optional[MalformedLevel]:
        return self._error

    @property
    def is_playable(self) -> bool:
        return self._phase is SessionPhase.PLAYING and not self._board.is_empty

    @property
    def queen_count(self) -> int:
        return self._squares.count(Mark.QUEEN)

    def mark(self, coord: Coord) -> Mark:
        return self._squares.get(coord)

    def set_mark(self, coord: Coord, mark: Mark) -> bool:
        """Replace the mark at *coord*, count the move and check for a win.

        Returns False without changing anything when the session is already won
        or has no board to play on.
        """
        if not self.is_playable:
            return False
        self._squares.set(coord, mark)
        self._move_count += 1
        if is_solved(self._squares, self._level.size, self._regions):
            self._phase = SessionPhase.WON
            self._won_at = time.time()
            logger.info(
                "Level %d solved in %d moves (%s)",
                self._level_index,
                self._move_count,
                format_time(self.elapsed_seconds()),
            )
            if self._on_won is not None:
                self._on_won(self._level_index)
        return True

    def elapsed_seconds(self, now: Optional[float] = None) -> float:
        """Seconds since start; frozen at the moment the puzzle was solved."""
        if self._won_at is not None:
            end = self._won_at
        else:
            end = time.time() if now is None else now
        return max(0.0, end - self._started_at)
