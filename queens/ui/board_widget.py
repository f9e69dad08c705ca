"""Board UI: paints the colored regions and marks, forwards pointer gestures."""

from __future__ import annotations

from typing import Optional, Tuple

from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QColor, QFont, QPainter, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from queens.core.game import GameController
from queens.core.squares import Mark
from queens.ui.colors import HomeColors

Coord = Tuple[int, int]


class BoardWidget(QWidget):
    """Square grid of region-colored cells.

    Press, move-while-held and release are translated to board coordinates and
    handed to the game controller; ``changed`` fires after each of them so the
    rest of the window can refresh.
    """

    changed = Signal()

    def __init__(self, controller: GameController, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._held_cell: Optional[Coord] = None
        self.setMinimumSize(320, 320)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMouseTracking(False)

    def _geometry(self) -> Tuple[float, float, float, int]:
        """Return (left, top, cell size, board size) for the current widget size."""
        session = self._controller.session
        n = session.board.size if session is not None else 0
        if n == 0:
            return 0.0, 0.0, 0.0, 0
        side = min(self.width(), self.height()) - 8
        cell = side / n
        left = (self.width() - cell * n) / 2.0
        top = (self.height() - cell * n) / 2.0
        return left, top, cell, n

    def cell_at(self, pos: QPointF) -> Optional[Coord]:
        left, top, cell, n = self._geometry()
        if n == 0:
            return None
        col = int((pos.x() - left) // cell)
        row = int((pos.y() - top) // cell)
        if 0 <= row < n and 0 <= col < n:
            return row, col
        return None

    def mousePressEvent(self, event) -> None:
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return
        coord = self.cell_at(event.position())
        if coord is None:
            return
        self._held_cell = coord
        self._controller.press(coord, int(event.timestamp()))
        self._after_gesture()

    def mouseMoveEvent(self, event) -> None:
        if not (event.buttons() & Qt.LeftButton) or self._held_cell is None:
            return
        coord = self.cell_at(event.position())
        if coord is None:
            self._held_cell = None
            self._controller.leave()
            self._after_gesture()
            return
        if coord != self._held_cell:
            self._held_cell = coord
            self._controller.enter(coord)
            self._after_gesture()

    def mouseReleaseEvent(self, event) -> None:
        if event.button() != Qt.LeftButton:
            super().mouseReleaseEvent(event)
            return
        self._held_cell = None
        self._controller.release()
        self._after_gesture()

    def leaveEvent(self, event) -> None:
        self._held_cell = None
        self._controller.leave()
        super().leaveEvent(event)

    def _after_gesture(self) -> None:
        self.update()
        self.changed.emit()

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        session = self._controller.session
        left, top, cell, n = self._geometry()
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        if session is None or n == 0:
            painter.setPen(QColor(HomeColors.TEXT_MUTED))
            painter.drawText(self.rect(), Qt.AlignCenter, "No puzzle to show")
            return

        thin = QPen(QColor(HomeColors.GRID_LINE))
        thin.setWidthF(0.6)
        thick = QPen(QColor(HomeColors.GRID_LINE))
        thick.setWidthF(2.4)

        glyph_font = QFont(painter.font())
        glyph_font.setPixelSize(max(10, int(cell * 0.55)))
        glyph_font.setBold(True)
        painter.setFont(glyph_font)

        board = session.board
        for r in range(n):
            for c in range(n):
                rect = QRectF(left + c * cell, top + r * cell, cell, cell)
                painter.fillRect(rect, QColor(board.cell((r, c)).color))
                painter.setPen(thin)
                painter.drawRect(rect)

                mark = session.mark((r, c))
                if mark is Mark.QUEEN:
                    painter.setPen(QColor(HomeColors.TEXT_PRIMARY))
                    painter.drawText(rect, Qt.AlignCenter, "♛")
                elif mark is Mark.EXCLUDED:
                    painter.setPen(QColor(HomeColors.EXCLUDED_MARK))
                    painter.drawText(rect, Qt.AlignCenter, "✗")

        # Thick borders between different regions.
        painter.setPen(thick)
        for r in range(n):
            for c in range(n):
                region = board.region_at((r, c))
                x = left + c * cell
                y = top + r * cell
                if c + 1 < n and board.region_at((r, c + 1)) != region:
                    painter.drawLine(QPointF(x + cell, y), QPointF(x + cell, y + cell))
                if r + 1 < n and board.region_at((r + 1, c)) != region:
                    painter.drawLine(QPointF(x, y + cell), QPointF(x + cell, y + cell))
        painter.drawRect(QRectF(left, top, cell * n, cell * n))
