"""Tests for the main window wiring, run on the offscreen Qt platform."""

import pytest
from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QMouseEvent

from tictactoe.game_logic import Cell, GameResult, Player, Position, init
from tictactoe.view_model import render
from tictactoe.ui.board_widget import BoardWidget
from tictactoe.ui.main_window import TicTacToeWindow
from helpers import play_moves


@pytest.fixture
def window(qapp, game_over_calls):
    win = TicTacToeWindow(game_over=game_over_calls.append)
    yield win
    win.close()


def click_all(window, coords):
    for row, col in coords:
        window.board_widget.cell_clicked.emit(row, col)


def test_starts_fresh(window):
    assert window.state == init()
    assert window.message_label.text() == "X's turn"
    assert window.board_widget.view.status == "X's turn"


def test_click_plays_move(window):
    click_all(window, [(0, 0)])
    assert window.state.board[Position(0, 0)] == Cell.full(Player.X)
    assert window.message_label.text() == "O's turn"
    assert window.board_widget.view.cell(Position(0, 0)).glyph == "X"
    assert not window.board_widget.view.cell(Position(0, 0)).playable


def test_click_on_taken_cell_is_ignored(window):
    click_all(window, [(1, 1), (1, 1)])
    assert window.state.board[Position(1, 1)] == Cell.full(Player.X)
    assert window.state.next_up is Player.O


def test_win_calls_handler_once_and_locks_board(window, game_over_calls):
    click_all(window, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    assert game_over_calls == ["X wins!"]
    assert window.message_label.text() == "X wins!"
    assert window.engine.get_game_result(window.state) is GameResult.X_WINS
    # later clicks do nothing
    before = window.state
    click_all(window, [(2, 2)])
    assert window.state == before
    assert game_over_calls == ["X wins!"]


def test_restart_button(window, game_over_calls):
    click_all(window, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    window.restart_button.click()
    assert window.state == init()
    assert window.message_label.text() == "X's turn"
    assert all(c.playable for c in window.board_widget.view.cells)
    assert game_over_calls == ["X wins!"]


def test_cell_at_maps_coords(qapp):
    board = BoardWidget()
    board.resize(400, 300)
    # 300px square centered, so 50px margin on each side
    assert board.cell_at(60, 10) == (0, 0)
    assert board.cell_at(200, 150) == (1, 1)
    assert board.cell_at(349, 299) == (2, 2)
    assert board.cell_at(10, 10) is None


def test_game_over_sees_final_board(qapp):
    seen = []

    def on_game_over(msg):
        # what the user sees while the dialog is up
        seen.append((msg, win.message_label.text(),
                     win.board_widget.view.cell(Position(0, 2)).glyph,
                     win.state.board[Position(0, 2)]))

    win = TicTacToeWindow(game_over=on_game_over)
    click_all(win, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    assert seen == [("X wins!", "X wins!", "X", Cell.full(Player.X))]
    win.close()


def test_draw_announced_after_refresh(qapp):
    seen = []
    win = TicTacToeWindow(game_over=lambda msg: seen.append((msg, win.message_label.text())))
    click_all(win, [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)])
    assert seen == [("It is a draw!", "It is a draw!")]
    win.close()


def release_at(board, x, y):
    event = QMouseEvent(QEvent.MouseButtonRelease, QPointF(x, y), QPointF(x, y),
                        Qt.LeftButton, Qt.LeftButton, Qt.NoModifier)
    board.mouseReleaseEvent(event)


@pytest.fixture
def board(qapp):
    widget = BoardWidget()
    widget.resize(300, 300)   # 100px squares
    clicks = []
    widget.cell_clicked.connect(lambda r, c: clicks.append((r, c)))
    widget.clicks = clicks
    yield widget
    widget.close()


def test_release_on_empty_cell_emits(board):
    release_at(board, 150, 250)
    assert board.clicks == [(2, 1)]


def test_release_on_taken_cell_is_swallowed(board):
    board.set_view(render(play_moves([(1, 1)])))
    release_at(board, 150, 150)
    assert board.clicks == []
    release_at(board, 50, 50)
    assert board.clicks == [(0, 0)]


def test_release_on_finished_board_is_swallowed(board):
    board.set_view(render(play_moves([(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])))
    for x, y in [(250, 250), (50, 250), (150, 150)]:
        release_at(board, x, y)
    assert board.clicks == []


def test_release_outside_grid(qapp):
    widget = BoardWidget()
    widget.resize(400, 300)
    clicks = []
    widget.cell_clicked.connect(lambda r, c: clicks.append((r, c)))
    release_at(widget, 10, 10)
    assert clicks == []


def test_paint_won_board(board):
    view = render(play_moves([(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]))
    board.set_view(view)
    assert view.winning_line is not None
    pixmap = board.grab()
    assert not pixmap.isNull()
    assert pixmap.width() == 300
