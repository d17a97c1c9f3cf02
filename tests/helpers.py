"""Shared test helpers."""

from tictactoe.game_logic import (
    EMPTY, Board, Cell, GameState, Play, Player, Position, init, update,
)


def play_moves(coords, state=None, game_over=None):
    """Play (row, col) pairs in order starting from init() or the given state."""
    state = state or init()
    for row, col in coords:
        state = update(game_over, Play(Position(row, col)), state)
    return state


def board_from_rows(rows):
    """Board from 3 strings like "XO "; space or '.' is an empty square."""
    cells = []
    for row in rows:
        for ch in row:
            cells.append(EMPTY if ch in " ." else Cell.full(Player(ch)))
    return Board(tuple(cells))


def state_from_rows(rows, next_up=Player.X):
    """GameState from 3 strings like ["XO ", " X ", "  O"]."""
    return GameState(next_up=next_up, board=board_from_rows(rows))
