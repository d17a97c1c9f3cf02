import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple, Union

logger = logging.getLogger(__name__)

BOARD_SIZE = 3  # fixed 3x3 grid


class GameError(Exception):
    """
    base for engine errors
    """


class InvalidPositionError(GameError, ValueError):
    """
    row/col outside the 3x3 grid
    """
    def __init__(self, row, col):
        super().__init__(f"invalid position ({row}, {col}), must be 0-{BOARD_SIZE - 1}")
        self.row = row
        self.col = col


class IllegalMoveError(GameError, ValueError):
    """
    move into a taken cell or after game over (strict mode only)
    """
    def __init__(self, position, reason):
        super().__init__(f"illegal move at {position}: {reason}")
        self.position = position
        self.reason = reason


class Player(Enum):
    X = "X"   # moves first
    O = "O"

    def swap(self):
        return Player.O if self is Player.X else Player.X

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Cell:
    """
    contents of one square: empty or full of a player
    """
    player: Optional[Player] = None

    @classmethod
    def full(cls, player):
        return cls(player)

    @property
    def can_play(self):
        return self.player is None


EMPTY = Cell()


@dataclass(frozen=True)
class Position:
    """
    (row, col) on the board, checked on construction
    """
    row: int
    col: int

    def __post_init__(self):
        if not (isinstance(self.row, int) and isinstance(self.col, int)
                and 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE):
            raise InvalidPositionError(self.row, self.col)

    @property
    def index(self):
        # row-major slot in the board tuple
        return self.row * BOARD_SIZE + self.col


# the closed set of squares, row-major
POSITIONS: Tuple[Position, ...] = tuple(
    Position(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)
)


def _win_lines():
    lines = []
    # rows
    for r in range(BOARD_SIZE):
        lines.append(tuple(Position(r, c) for c in range(BOARD_SIZE)))
    # cols
    for c in range(BOARD_SIZE):
        lines.append(tuple(Position(r, c) for r in range(BOARD_SIZE)))
    # main diag, anti-diag
    lines.append(tuple(Position(i, i) for i in range(BOARD_SIZE)))
    lines.append(tuple(Position(i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE)))
    return tuple(lines)


WIN_LINES: Tuple[Tuple[Position, ...], ...] = _win_lines()


@dataclass(frozen=True)
class Board:
    """
    total map Position -> Cell over all 9 squares
    """
    cells: Tuple[Cell, ...] = (EMPTY,) * len(POSITIONS)

    def __post_init__(self):
        if len(self.cells) != len(POSITIONS):
            raise ValueError(f"board needs {len(POSITIONS)} cells, got {len(self.cells)}")

    def __getitem__(self, pos):
        return self.cells[pos.index]

    def items(self):
        return zip(POSITIONS, self.cells)

    def with_cell(self, pos, cell):
        """
        copy of the board with one square replaced
        """
        cells = list(self.cells)
        cells[pos.index] = cell
        return Board(tuple(cells))


class GameResult(Enum):
    STILL_PLAYING = "still_playing"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"

    @property
    def is_terminal(self):
        return self is not GameResult.STILL_PLAYING


@dataclass(frozen=True)
class GameState:
    next_up: Player = Player.X
    board: Board = Board()


@dataclass(frozen=True)
class Play:
    position: Position


@dataclass(frozen=True)
class Restart:
    pass


Msg = Union[Play, Restart]
GameOverHandler = Callable[[str], None]


def init():
    """
    fresh game, X to move
    """
    return GameState(next_up=Player.X, board=Board())


def any_more_moves(state):
    # at least one blank square left
    return any(cell == EMPTY for cell in state.board.cells)


def get_line_winner(board, line):
    """
    X_WINS / O_WINS if the line is full of one player, else STILL_PLAYING
    """
    if all(board[p] == Cell.full(Player.X) for p in line):
        return GameResult.X_WINS
    if all(board[p] == Cell.full(Player.O) for p in line):
        return GameResult.O_WINS
    return GameResult.STILL_PLAYING


def get_game_result(state):
    """
    scan every line for X first, then for O, then check for a full board
    """
    line_results = [get_line_winner(state.board, line) for line in WIN_LINES]
    # X is checked over all lines before O, so a board with both wins reports X
    if GameResult.X_WINS in line_results:
        return GameResult.X_WINS
    if GameResult.O_WINS in line_results:
        return GameResult.O_WINS
    if any_more_moves(state):
        return GameResult.STILL_PLAYING
    return GameResult.DRAW


def get_message(state):
    """
    status line for the current state
    """
    result = get_game_result(state)
    if result is GameResult.STILL_PLAYING:
        return f"{state.next_up}'s turn"
    if result is GameResult.X_WINS:
        return "X wins!"
    if result is GameResult.O_WINS:
        return "O wins!"
    return "It is a draw!"


def can_play(state, position):
    """
    true if the square is empty and nobody has won or drawn yet
    """
    if not state.board[position].can_play:
        return False
    return get_game_result(state) is GameResult.STILL_PLAYING


def apply_move(state: GameState, position: Position,
               game_over: Optional[GameOverHandler] = None,
               strict: bool = False) -> GameState:
    """
    place next_up's mark at position and hand the turn over.

    not gated by default: the caller is expected to check can_play first.
    with strict=True an illegal move raises IllegalMoveError instead.
    game_over(message) is called once if the move ends the game.
    """
    if strict and not can_play(state, position):
        reason = "game is over" if state.board[position].can_play else "cell taken"
        raise IllegalMoveError(position, reason)

    new_state = GameState(
        next_up=state.next_up.swap(),
        board=state.board.with_cell(position, Cell.full(state.next_up)),
    )

    result = get_game_result(new_state)
    if result.is_terminal:
        msg = get_message(new_state)
        logger.info("game over: %s", msg)
        if game_over is not None:
            game_over(msg)
    return new_state


def restart(state=None):
    # history is dropped, no game over announcement
    return init()


def update(game_over: Optional[GameOverHandler], msg: Msg, state: GameState,
           strict: bool = False) -> GameState:
    """
    apply one message to the state and return the next state
    """
    if isinstance(msg, Play):
        new_state = apply_move(state, msg.position, game_over, strict=strict)
    elif isinstance(msg, Restart):
        new_state = restart(state)
    else:
        raise TypeError(f"unknown message: {msg!r}")
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("%s -> %s", msg, get_message(new_state))
    return new_state


class GameEngine:
    """
    binds the game over handler once so callers only pass messages + state
    """
    def __init__(self, on_game_over: Optional[GameOverHandler] = None, strict: bool = False):
        self.on_game_over = on_game_over
        self.strict = strict

    def init(self):
        return init()

    def can_play(self, state, position):
        return can_play(state, position)

    def apply_move(self, state, position):
        return apply_move(state, position, self.on_game_over, strict=self.strict)

    def restart(self, state=None):
        return restart(state)

    def get_game_result(self, state):
        return get_game_result(state)

    def get_status_message(self, state):
        return get_message(state)

    def update(self, msg, state):
        return update(self.on_game_over, msg, state, strict=self.strict)
