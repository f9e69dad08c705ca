from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QLabel,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from queens.core.game import GameController
from queens.core.session import SessionPhase, format_time
from queens.ui.board_widget import BoardWidget
from queens.ui.colors import HomeColors
from queens.ui.level_cards import LevelSelectorWidget
from queens.ui.models import LevelState, group_level_states
from queens.ui.stats import GameStatsBar

RULES_TEXT = (
    "<b>Rules:</b><ul>"
    "<li>Place 1 queen on each row, column, and color region</li>"
    "<li>2 queens cannot be adjacent horizontally, vertically, or diagonally</li>"
    "</ul>"
    "👑 Double click to place/remove a queen<br>"
    "✗ Single click or drag to mark a square as impossible"
)


def _button(text: str) -> QPushButton:
    button = QPushButton(text)
    button.setCursor(Qt.PointingHandCursor)
    button.setStyleSheet(
        f"""
        QPushButton {{
            background: {HomeColors.PRIMARY};
            color: white;
            border: none;
            border-radius: 14px;
            padding: 8px 22px;
            font-size: 14px;
            font-weight: 800;
        }}
        QPushButton:hover {{
            background: {HomeColors.PRIMARY_DARK};
        }}
        """
    )
    return button


class MainWindow(QMainWindow):
    """Main application window: puzzle menu, game screen and win screen.

    All game state lives in the :class:`GameController`; the window only
    starts and ends sessions and redraws after each gesture.
    """

    def __init__(self, controller: GameController) -> None:
        super().__init__()
        self._controller = controller
        self.setWindowTitle("Queens Puzzle")
        self.setStyleSheet(
            f"""
            QMainWindow {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {HomeColors.BG_TOP}, stop:1 {HomeColors.BG_BOTTOM});
            }}
            """
        )
        self._build_ui()
        self._show_menu()

    def _build_ui(self) -> None:
        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        # Menu
        self._selector = LevelSelectorWidget(on_level_clicked=self._start_level)
        self._menu_screen = QScrollArea()
        self._menu_screen.setWidgetResizable(True)
        self._menu_screen.setFrameShape(QScrollArea.NoFrame)
        self._menu_screen.setWidget(self._selector)
        self._stack.addWidget(self._menu_screen)

        # Game
        self._game_screen = QWidget()
        game_layout = QVBoxLayout(self._game_screen)
        game_layout.setContentsMargins(24, 16, 24, 16)
        game_layout.setSpacing(12)
        self._stats = GameStatsBar()
        self._board = BoardWidget(self._controller)
        self._board.changed.connect(self._on_board_changed)
        self._error_label = QLabel("")
        self._error_label.setAlignment(Qt.AlignCenter)
        self._error_label.setStyleSheet("color: #C62828; font-weight: 700;")
        self._error_label.setVisible(False)
        rules = QLabel(RULES_TEXT)
        rules.setTextFormat(Qt.RichText)
        rules.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 13px;")
        back = _button("Back to Menu")
        back.clicked.connect(self._show_menu)
        game_layout.addWidget(self._stats)
        game_layout.addWidget(self._error_label)
        game_layout.addWidget(self._board, 1)
        game_layout.addWidget(rules)
        game_layout.addWidget(back, 0, Qt.AlignHCenter)
        self._stack.addWidget(self._game_screen)

        # Won
        self._won_screen = QWidget()
        won_layout = QVBoxLayout(self._won_screen)
        won_layout.addStretch(1)
        title = QLabel("🎉 Congratulations! 🎉")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {HomeColors.PRIMARY}; font-size: 32px; font-weight: 900;")
        self._won_label = QLabel("")
        self._won_label.setAlignment(Qt.AlignCenter)
        self._won_label.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 16px;")
        again = _button("Play Again")
        again.clicked.connect(self._show_menu)
        won_layout.addWidget(title)
        won_layout.addWidget(self._won_label)
        won_layout.addWidget(again, 0, Qt.AlignHCenter)
        won_layout.addStretch(1)
        self._stack.addWidget(self._won_screen)

        self._menu_shortcut = QShortcut(QKeySequence(Qt.Key_Escape), self)
        self._menu_shortcut.activated.connect(self._show_menu)

    def _build_level_states(self) -> dict[int, list[LevelState]]:
        return group_level_states(
            self._controller.catalog.by_size(),
            self._controller.completed_levels(),
        )

    def _show_menu(self) -> None:
        """End any session and show the puzzle selector with fresh completion badges."""
        self._stats.detach()
        self._controller.end_session()
        self._selector.set_level_states(self._build_level_states())
        self._stack.setCurrentWidget(self._menu_screen)

    def _start_level(self, level_index: int) -> None:
        session = self._controller.start_level(level_index)
        if session.error is not None:
            self._error_label.setText(f"This puzzle could not be loaded: {session.error}")
            self._error_label.setVisible(True)
        else:
            self._error_label.setVisible(False)
        self._stats.attach(session)
        self._board.update()
        self._stack.setCurrentWidget(self._game_screen)

    def _on_board_changed(self) -> None:
        session = self._controller.session
        if session is None:
            return
        self._stats.refresh()
        if session.phase is SessionPhase.WON:
            self._stats.stop_clock()
            self._won_label.setText(
                f"You solved the puzzle in {format_time(session.elapsed_seconds())} "
                f"with {session.move_count} moves!"
            )
            self._stack.setCurrentWidget(self._won_screen)

    def closeEvent(self, event: QCloseEvent) -> None:
        """Stop the clock before the window goes away."""
        self._stats.detach()
        self._controller.end_session()
        super().closeEvent(event)
