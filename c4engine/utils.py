"""
utils.py - Constants, enumerations and helper functions for c4engine

Row 0 is the bottom row of the board. Cells can be addressed either by
(row, column) or by the flattened index ``row * COLS + column``.
"""

from enum import Enum, auto
from typing import Tuple, Optional

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CELLS = ROWS * COLS
CONNECT_N = 4  # Number of pieces in a row to win
MIN_PIECES_FOR_WIN = 7  # No line of four can exist with fewer plies on the board


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player
    
    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY
    
    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class WinState(Enum):
    """Outcome of evaluating a board."""
    NO_WINNER = 0
    PLAYER1_WINS = 1
    PLAYER2_WINS = 2
    TIE = 3
    
    def is_game_over(self) -> bool:
        """Check if the state is terminal."""
        return self != WinState.NO_WINNER
    
    def is_win(self) -> bool:
        return self in (WinState.PLAYER1_WINS, WinState.PLAYER2_WINS)
    
    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None for a tie or an unfinished game."""
        if self == WinState.PLAYER1_WINS:
            return Player.ONE
        if self == WinState.PLAYER2_WINS:
            return Player.TWO
        return None
    
    @classmethod
    def for_player(cls, player: Player) -> 'WinState':
        """Get the winning state for a player."""
        if player == Player.ONE:
            return cls.PLAYER1_WINS
        if player == Player.TWO:
            return cls.PLAYER2_WINS
        raise ValueError(f"No win state for {player!r}")


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    RIGHT = auto()
    UP = auto()
    DIAGONAL_UP_RIGHT = auto()  # "/" seen from the bottom-left
    DIAGONAL_UP_LEFT = auto()  # "\" seen from the bottom-right


# Direction vectors (row, col) for each direction, in scan order
DIRECTION_VECTORS = {
    Direction.RIGHT: (0, 1),
    Direction.UP: (1, 0),
    Direction.DIAGONAL_UP_RIGHT: (1, 1),
    Direction.DIAGONAL_UP_LEFT: (1, -1)
}


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.
    
    Args:
        row: Row index
        col: Column index
    
    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def is_valid_column(column) -> bool:
    """Check that ``column`` is an integer column index on the board."""
    if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
        return False
    return 0 <= column < COLS


def to_index(row: int, col: int) -> int:
    """Convert a (row, col) position to its flattened index."""
    if not is_valid_position(row, col):
        raise IndexError(f"Position ({row}, {col}) is outside the board")
    return row * COLS + col


def to_position(index: int) -> Tuple[int, int]:
    """Convert a flattened index back to its (row, col) position."""
    if not 0 <= index < CELLS:
        raise IndexError(f"Index {index} is outside the board")
    return divmod(index, COLS)


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the board as ASCII art, top row first.
    
    Args:
        grid: The board grid with row 0 at the bottom
    
    Returns:
        ASCII representation of the board
    """
    result = ["|" + "-" * (COLS * 2 - 1) + "|"]
    
    for row in range(ROWS - 1, -1, -1):
        cells = [str(Player(int(grid[row, col]))) for col in range(COLS)]
        result.append("|" + " ".join(cells) + "|")
    
    result.append("|" + "-" * (COLS * 2 - 1) + "|")
    result.append("|" + " ".join(str(i) for i in range(COLS)) + "|")
    
    return "\n".join(result)
