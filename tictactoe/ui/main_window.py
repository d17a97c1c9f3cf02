import logging

from ..game_logic import GameEngine, Play, Position, Restart
from ..view_model import render
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QPushButton, QLabel, QMenuBar, QMenu,
    QMessageBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

RESTART_BUTTON_STYLE = "background-color: lightblue; color: black;"


class TicTacToeWindow(QMainWindow):
    """
    main window: holds the current GameState and feeds it messages
    """
    def __init__(self, game_over=None, parent=None):
        """
        game_over(msg) is called when a move ends the game;
        defaults to a modal "Game over" box
        """
        super().__init__(parent)
        self._game_over = game_over or self._show_game_over
        self._pending_game_over = []   # filled by the engine during update
        self.engine = GameEngine(on_game_over=self._pending_game_over.append)
        self.state = self.engine.init()
        self.board_widget = BoardWidget(parent=self)

        self._setup_ui()
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        # status + restart
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.main_layout.addWidget(self.message_label)
        self.restart_button = QPushButton("Restart game")
        self.restart_button.setStyleSheet(RESTART_BUTTON_STYLE)
        self.restart_button.clicked.connect(self.restart_game)
        self.main_layout.addWidget(self.restart_button)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        restart_action = QAction("Restart Game", self)
        restart_action.triggered.connect(self.restart_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(restart_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _show_game_over(self, msg):
        QMessageBox.information(self, "Game over", msg)

    def _refresh(self):
        # push the new snapshot to the widgets
        view = render(self.state)
        self.board_widget.set_view(view)
        self.message_label.setText(view.status)
        if view.game_over:
            self.message_label.setStyleSheet("color: lime; font-weight: bold;")
        else:
            self.message_label.setStyleSheet("color: #8acaff; font-weight: bold;")

    def dispatch(self, msg):
        """
        run one message through the engine and redraw
        """
        self.state = self.engine.update(msg, self.state)
        self._refresh()
        # announce only once the board shows the finishing move
        while self._pending_game_over:
            self._game_over(self._pending_game_over.pop(0))

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        pos = Position(r, c)
        # engine does not reject illegal moves, so gate here
        if not self.engine.can_play(self.state, pos):
            logger.debug("ignored click at (%d, %d)", r, c)
            return
        logger.debug("play (%d, %d) as %s", r, c, self.state.next_up)
        self.dispatch(Play(pos))

    @Slot()
    def restart_game(self):
        self.dispatch(Restart())
