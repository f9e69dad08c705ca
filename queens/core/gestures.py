"""Pointer gestures on the board: double-press toggles a queen, press-and-drag paints.

A press on a cell either completes a double-press (same cell, within the
window) or starts a drag. The drag action is fixed by the mark the first cell
had: an empty cell starts painting exclusions, an excluded cell or a queen
starts erasing. Cells entered while the pointer is held get the same action,
except queens, which a drag never removes.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Tuple

from queens.core.session import GameSession
from queens.core.squares import Mark

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]

DOUBLE_PRESS_WINDOW_MS = 300


class DragAction(str, Enum):
    PAINT = "paint"
    ERASE = "erase"


class GesturePhase(str, Enum):
    IDLE = "idle"
    ARMED_SINGLE = "armed_single"
    DRAGGING = "dragging"


class GestureController:
    def __init__(
        self,
        session: GameSession,
        double_press_window_ms: int = DOUBLE_PRESS_WINDOW_MS,
    ) -> None:
        self._session = session
        self._window_ms = double_press_window_ms
        self._last_press_time: Optional[int] = None
        self._last_press_cell: Optional[Coord] = None
        # Mark the remembered cell had before that press changed it.
        self._mark_before_press: Mark = Mark.EMPTY
        self._drag_action: Optional[DragAction] = None

    @property
    def phase(self) -> GesturePhase:
        if self._drag_action is not None:
            return GesturePhase.DRAGGING
        if self._last_press_time is not None:
            return GesturePhase.ARMED_SINGLE
        return GesturePhase.IDLE

    @property
    def drag_action(self) -> Optional[DragAction]:
        return self._drag_action

    @property
    def double_press_window_ms(self) -> int:
        return self._window_ms

    def press(self, coord: Coord, timestamp_ms: int) -> None:
        """Handle a pointer press on *coord* at *timestamp_ms* (monotonic, milliseconds)."""
        if self._drag_action is not None:
            # A release got lost (e.g. the pointer was released off-window).
            self.release()

        if self._is_double_press(coord, timestamp_ms):
            # The first press of the pair already cleared a queen; toggle against
            # what the cell held before it.
            had_queen = self._mark_before_press is Mark.QUEEN
            self._last_press_time = None
            self._last_press_cell = None
            self._mark_before_press = Mark.EMPTY
            self._session.set_mark(coord, Mark.EMPTY if had_queen else Mark.QUEEN)
            return

        current = self._session.mark(coord)
        self._mark_before_press = current
        if current is Mark.EMPTY:
            self._drag_action = DragAction.PAINT
            self._session.set_mark(coord, Mark.EXCLUDED)
        else:
            self._drag_action = DragAction.ERASE
            self._session.set_mark(coord, Mark.EMPTY)
        self._last_press_time = timestamp_ms
        self._last_press_cell = coord

    def enter(self, coord: Coord) -> None:
        """Handle the held pointer moving onto *coord*."""
        if self._drag_action is None:
            return
        if self._session.mark(coord) is Mark.QUEEN:
            return
        if self._drag_action is DragAction.ERASE:
            self._session.set_mark(coord, Mark.EMPTY)
        else:
            self._session.set_mark(coord, Mark.EXCLUDED)

    def release(self) -> None:
        """End any drag. The last press is still remembered for double-press detection."""
        self._drag_action = None

    def leave(self) -> None:
        self.release()

    def _is_double_press(self, coord: Coord, timestamp_ms: int) -> bool:
        if self._last_press_time is None or self._last_press_cell != coord:
            return False
        return timestamp_ms - self._last_press_time < self._window_ms
