"""
errors.py - Exceptions raised by the game engine

All of them are local, synchronous failures: the board, game state and
stats are left exactly as they were before the failing call.
"""

from typing import Any, Optional


class ConnectFourError(Exception):
    """Base exception for all game engine errors."""

    pass


class InvalidColumnError(ConnectFourError, ValueError):
    """Raised when a column index is outside the board."""

    def __init__(self, column: Any, message: Optional[str] = None):
        self.column = column
        if message is None:
            message = f"Invalid column: {column!r}"
        super().__init__(message)


class ColumnFullError(ConnectFourError):
    """Raised when a piece is dropped into a column with no empty cell."""

    def __init__(self, column: int, message: Optional[str] = None):
        self.column = column
        if message is None:
            message = f"Column {column} is full. Please choose another column."
        super().__init__(message)


class GameOverError(ConnectFourError):
    """
    Raised when a piece is played after the game reached a terminal result.

    The game has to be reset before any further placement is accepted.
    """

    def __init__(self, result: Any, message: Optional[str] = None):
        self.result = result
        if message is None:
            message = f"Game is over ({getattr(result, 'name', result)}). Reset to start a new game."
        super().__init__(message)
