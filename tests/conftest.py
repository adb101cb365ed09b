"""Shared fixtures and move sequences for the c4engine tests."""

import pytest

from c4engine.config import GameConfig
from c4engine.debug import debug, DebugLevel
from c4engine.game.board import Board
from c4engine.game.state import GameState
from c4engine.session import GameSession
from c4engine.stats import StatsTracker

# Player 1 stacks four in column 0
VERTICAL_WIN_MOVES = [0, 1, 0, 1, 0, 1, 0]

# Player 1 fills the bottom row from column 0 to 3
HORIZONTAL_WIN_MOVES = [0, 0, 1, 1, 2, 2, 3]

# Player 1 completes (0,0) (1,1) (2,2) (3,3) on the 11th ply
DIAGONAL_UP_RIGHT_MOVES = [0, 1, 1, 2, 2, 3, 2, 3, 3, 5, 3]

# Mirror image: Player 1 completes (0,6) (1,5) (2,4) (3,3)
DIAGONAL_UP_LEFT_MOVES = [6 - col for col in DIAGONAL_UP_RIGHT_MOVES]

# Fills all 42 cells without ever forming a line of four
TIE_MOVES = (
    [0, 1, 0, 1, 1, 0, 1, 0, 0, 1, 1, 0]
    + [2, 3, 2, 3, 3, 2, 3, 2, 2, 3, 3, 2]
    + [4, 5, 4, 5, 5, 4, 5, 4, 6, 5, 6, 6, 4, 6, 5, 4, 6, 6]
)

ROW_A = [1, 2, 1, 2, 1, 2, 1]
ROW_B = [2, 1, 2, 1, 2, 1, 2]

# Full boards with 21 pieces each whose bottom row opens with a line of four
PLAYER1_LINE_FULL_ROWS = [[1, 1, 1, 1, 2, 2, 2], ROW_A, ROW_B, ROW_B, ROW_A, ROW_B]
PLAYER2_LINE_FULL_ROWS = [[2, 2, 2, 2, 1, 1, 1], ROW_A, ROW_B, ROW_A, ROW_A, ROW_B]


def full_board_cells(*rows):
    """Flatten rows given bottom row first."""
    return [value for row in rows for value in row]


@pytest.fixture(autouse=True)
def restore_debug():
    """Put the shared debug manager back the way each test found it."""
    level = debug.level
    yield
    debug.configure(level=level, enabled=True, components=[], log_file="")


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def stats():
    return StatsTracker()


@pytest.fixture
def game(stats):
    return GameState(stats=stats)


@pytest.fixture
def session():
    return GameSession()


@pytest.fixture
def tie_session():
    return GameSession(GameConfig(record_ties=True))


def play_all(target, columns):
    """Play ``columns`` on a GameState or GameSession, returning the landing rows."""
    return [target.play_piece(column) for column in columns]
