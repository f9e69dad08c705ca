"""Game stats bar: level, queens placed, moves and elapsed time."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from queens.core.session import GameSession, format_time
from queens.ui.colors import HomeColors


class _StatItem(QWidget):
    def __init__(self, label: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        caption = QLabel(label)
        caption.setAlignment(Qt.AlignCenter)
        caption.setStyleSheet(f"color: {HomeColors.TEXT_MUTED}; font-size: 12px; font-weight: 700;")
        self.value = QLabel("")
        self.value.setAlignment(Qt.AlignCenter)
        self.value.setStyleSheet(f"color: {HomeColors.PRIMARY}; font-size: 22px; font-weight: 900;")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 6, 12, 6)
        layout.setSpacing(2)
        layout.addWidget(caption)
        layout.addWidget(self.value)


class GameStatsBar(QWidget):
    """Shows the session's numbers. The clock ticks once a second while a session runs."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._session: Optional[GameSession] = None
        self._level = _StatItem("Level")
        self._queens = _StatItem("Queens")
        self._moves = _StatItem("Moves")
        self._time = _StatItem("Time")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)
        for item in (self._level, self._queens, self._moves, self._time):
            layout.addWidget(item, 1)

        self._timer = QTimer(self)
        self._timer.setInterval(1000)
        self._timer.timeout.connect(self._tick)

    def attach(self, session: GameSession) -> None:
        """Show *session* and start the clock."""
        self._session = session
        self.refresh()
        self._timer.start()

    def detach(self) -> None:
        """Stop the clock; the session is over or gone."""
        self._timer.stop()
        self._session = None

    def stop_clock(self) -> None:
        self._timer.stop()
        self._tick()

    def refresh(self) -> None:
        session = self._session
        if session is None:
            return
        self._level.value.setText(str(session.level_index + 1))
        self._queens.value.setText(f"{session.queen_count}/{session.level.size}")
        self._moves.value.setText(str(session.move_count))
        self._tick()

    def _tick(self) -> None:
        if self._session is not None:
            self._time.value.setText(format_time(self._session.elapsed_seconds()))
