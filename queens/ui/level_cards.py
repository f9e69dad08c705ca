"""Level selection UI: PuzzleCard and LevelSelectorWidget."""

from __future__ import annotations

import math
from typing import Callable, Dict, List, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QGraphicsDropShadowEffect,
    QGridLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from queens.ui.colors import HomeColors, blend_hex, size_color
from queens.ui.models import LevelState


class PuzzleCard(QWidget):
    """A clickable square showing the puzzle number, with a check once solved."""

    def __init__(
        self,
        *,
        on_click: Callable[[int], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._on_click = on_click
        self._level_index: int = -1

        self.setObjectName("puzzleCard")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setAttribute(Qt.WidgetAttribute.WA_Hover, True)
        self.setCursor(Qt.PointingHandCursor)
        self.setFixedSize(64, 64)

        self._check = QLabel("✓")
        self._check.setObjectName("puzzleCardCheck")
        self._check.setAlignment(Qt.AlignRight | Qt.AlignTop)

        self._number = QLabel("")
        self._number.setObjectName("puzzleCardNumber")
        self._number.setAlignment(Qt.AlignCenter)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 2, 6, 6)
        layout.setSpacing(0)
        layout.addWidget(self._check, 0)
        layout.addWidget(self._number, 1)

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(12)
        shadow.setOffset(0, 4)
        shadow.setColor(QColor(0, 0, 0, 50))
        self.setGraphicsEffect(shadow)

    def _apply_styles(self, base_color: str, border_color: str) -> None:
        top = blend_hex(base_color, "#FFFFFF", 0.15)
        bottom = blend_hex(base_color, "#000000", 0.08)
        self.setStyleSheet(
            f"""
            QWidget#puzzleCard {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {top},
                    stop:1 {bottom}
                );
                border-radius: 10px;
                border: 2px solid {border_color};
            }}
            QWidget#puzzleCard:hover {{
                border: 2px solid #FFFFFF;
            }}
            QLabel#puzzleCardCheck {{
                color: white;
                font-size: 10px;
                background: transparent;
            }}
            QLabel#puzzleCardNumber {{
                color: white;
                font-size: 18px;
                font-weight: 800;
                background: transparent;
            }}
            """
        )

    def set_state(self, state: LevelState) -> None:
        self._level_index = state.index
        size = state.level.size
        self._number.setText(str(state.number))
        self._check.setVisible(state.completed)
        if state.completed:
            self._apply_styles(HomeColors.COMPLETED, HomeColors.COMPLETED_BORDER)
        else:
            base = size_color(size)
            self._apply_styles(base, base)
        status = "solved" if state.completed else "not solved yet"
        self.setToolTip(
            f"Puzzle #{state.number} - {size}×{size} board, "
            f"{state.level.region_count} regions ({status})"
        )

    def mousePressEvent(self, event) -> None:
        if self._level_index >= 0:
            self._on_click(self._level_index)
        super().mousePressEvent(event)


class LevelSelectorWidget(QWidget):
    """Puzzle cards grouped by board size, with a solved-count summary."""

    def __init__(
        self,
        *,
        on_level_clicked: Callable[[int], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._on_level_clicked = on_level_clicked
        self._cards: List[PuzzleCard] = []

        self._title = QLabel("Choose a Puzzle")
        self._title.setAlignment(Qt.AlignCenter)
        self._title.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 24px; font-weight: 900;")

        self._summary = QLabel("")
        self._summary.setAlignment(Qt.AlignCenter)
        self._summary.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 14px;")

        self._groups = QVBoxLayout()
        self._groups.setSpacing(18)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 16, 24, 16)
        layout.setSpacing(12)
        layout.addWidget(self._title)
        layout.addWidget(self._summary)
        layout.addLayout(self._groups)
        layout.addStretch(1)

    def set_level_states(self, grouped: Dict[int, List[LevelState]]) -> None:
        """Rebuild the cards from states grouped by board size, in the given order."""
        self._clear_groups()
        states = [state for group in grouped.values() for state in group]
        solved = sum(1 for state in states if state.completed)
        self._summary.setText(f"{solved} of {len(states)} puzzles completed")

        for size, group_states in grouped.items():
            header = QLabel(f"{size}×{size} Puzzles ({len(group_states)})")
            header.setAlignment(Qt.AlignCenter)
            header.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 16px; font-weight: 800;")
            self._groups.addWidget(header)

            grid_host = QWidget()
            grid = QGridLayout(grid_host)
            grid.setSpacing(10)
            per_row = max(1, math.ceil(math.sqrt(len(group_states))))
            for i, state in enumerate(group_states):
                card = PuzzleCard(on_click=self._on_level_clicked, parent=grid_host)
                card.set_state(state)
                self._cards.append(card)
                grid.addWidget(card, i // per_row, i % per_row)
            self._groups.addWidget(grid_host, 0, Qt.AlignHCenter)

    def _clear_groups(self) -> None:
        self._cards = []
        while self._groups.count():
            item = self._groups.takeAt(0)
            w = item.widget()
            if w is not None:
                w.setParent(None)
                w.deleteLater()
