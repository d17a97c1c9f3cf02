from dataclasses import dataclass
from typing import Optional, Tuple

from .game_logic import (
    WIN_LINES, GameResult, Player, Position,
    can_play, get_game_result, get_line_winner, get_message,
)

ROW_NAMES = ("T", "M", "B")
COL_NAMES = ("L", "C", "R")


def cell_glyph(cell):
    # "" for an empty square
    return cell.player.value if cell.player is not None else ""


def position_label(position):
    """'TL', 'MC', 'BR', ..."""
    return ROW_NAMES[position.row] + COL_NAMES[position.col]


@dataclass(frozen=True)
class CellView:
    position: Position
    glyph: str
    label: str
    playable: bool


@dataclass(frozen=True)
class BoardView:
    cells: Tuple[CellView, ...]
    status: str
    result: GameResult
    next_up: Player
    winning_line: Optional[Tuple[Position, ...]] = None

    def cell(self, position):
        return self.cells[position.index]

    @property
    def game_over(self):
        return self.result.is_terminal


def find_winning_line(state):
    """first complete line for the reported winner, same X-first order as the result"""
    result = get_game_result(state)
    if result not in (GameResult.X_WINS, GameResult.O_WINS):
        return None
    for line in WIN_LINES:
        if get_line_winner(state.board, line) is result:
            return line
    return None


def render(state):
    """
    snapshot the widgets draw: 9 squares in row-major order plus the status line
    """
    cells = tuple(
        CellView(
            position=pos,
            glyph=cell_glyph(cell),
            label=position_label(pos),
            playable=can_play(state, pos),
        )
        for pos, cell in state.board.items()
    )
    return BoardView(
        cells=cells,
        status=get_message(state),
        result=get_game_result(state),
        next_up=state.next_up,
        winning_line=find_winning_line(state),
    )
