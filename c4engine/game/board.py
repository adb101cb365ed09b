"""
board.py - Board representation and gravity-drop placement for Connect Four

This module implements the Board class which holds cell occupancy for the
6x7 grid and owns the rule that a piece always comes to rest in the lowest
open cell of its column.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from c4engine.debug import debug
from c4engine.errors import ColumnFullError, InvalidColumnError
from c4engine.utils import (ROWS, COLS, CELLS, Player, is_valid_column,
                            to_index, to_position, render_board_ascii)


class Board:
    """
    Represents a Connect Four game board.
    
    The grid is a ``(ROWS, COLS)`` numpy array with row 0 at the bottom.
    Cells are only ever written by ``place_at``, so a cell above an empty
    cell in the same column is always empty.
    """
    
    def __init__(self):
        """Initialize an empty Connect Four board."""
        debug.trace("Initializing new Board", "board")
        self.grid = np.zeros((ROWS, COLS), dtype=np.int8)
        self.last_move: Optional[Tuple[int, int]] = None
    
    def clear(self) -> None:
        """Reset every cell to empty."""
        debug.debug("Clearing board", "board")
        self.grid.fill(Player.EMPTY.value)
        self.last_move = None
    
    def copy(self) -> 'Board':
        """
        Create a deep copy of the current board.
        
        Returns:
            A new Board instance with the same cells
        """
        new_board = Board()
        new_board.grid = self.grid.copy()
        new_board.last_move = self.last_move
        return new_board
    
    @classmethod
    def from_moves(cls, columns: Iterable[int]) -> 'Board':
        """
        Build a board by dropping pieces into ``columns`` with alternating players.
        
        Player ONE drops first. No win checking is done, so the sequence may
        continue past a winning line.
        """
        board = cls()
        player = Player.ONE
        for column in columns:
            board.place_at(column, player)
            player = player.other()
        return board
    
    @classmethod
    def from_cells(cls, values: Sequence[int]) -> 'Board':
        """
        Build a board from flattened cell values (index ``row * COLS + col``).
        
        Args:
            values: CELLS values, each 0, 1 or 2
            
        Raises:
            ValueError: If the values are malformed, pieces float above empty cells
                or the piece counts cannot come from alternating play
        """
        grid = np.asarray(values, dtype=np.int64)
        if grid.size != CELLS:
            raise ValueError(f"Board needs {CELLS} values, got {grid.size}")
        if not np.isin(grid, [p.value for p in Player]).all():
            raise ValueError("Cell values must be 0, 1 or 2")
        
        grid = grid.reshape(ROWS, COLS)
        occupied = grid != Player.EMPTY.value
        # Occupied cells resting on empty ones break gravity
        if (occupied[1:] & ~occupied[:-1]).any():
            raise ValueError("Pieces cannot rest above an empty cell")
        
        # Player ONE moves first, so it is never behind and at most one ahead
        lead = (int(np.count_nonzero(grid == Player.ONE.value))
                - int(np.count_nonzero(grid == Player.TWO.value)))
        if lead not in (0, 1):
            raise ValueError(f"Player ONE must have as many pieces as TWO or one more, not {lead:+d}")
        
        board = cls()
        board.grid = grid.astype(np.int8)
        return board
    
    def cell(self, row: int, col: int) -> Player:
        """Get the occupant of ``(row, col)``."""
        to_index(row, col)  # bounds check
        return Player(int(self.grid[row, col]))
    
    def cell_at(self, index: int) -> Player:
        """Get the occupant of the cell at a flattened index."""
        row, col = to_position(index)
        return Player(int(self.grid[row, col]))
    
    def cells(self) -> List[int]:
        """Get all cell values in flattened index order."""
        return [int(value) for value in self.grid.ravel()]
    
    def column_height(self, column: int) -> int:
        """Get the number of pieces in a column."""
        if not is_valid_column(column):
            raise InvalidColumnError(column)
        return int(np.count_nonzero(self.grid[:, column]))
    
    def is_column_full(self, column: int) -> bool:
        return self.column_height(column) == ROWS
    
    def valid_columns(self) -> List[int]:
        """Get the columns that can still take a piece."""
        return [col for col in range(COLS) if self.grid[ROWS - 1, col] == Player.EMPTY.value]
    
    def piece_count(self) -> int:
        """Get the number of occupied cells."""
        return int(np.count_nonzero(self.grid))
    
    def is_full(self) -> bool:
        """Check if all cells are occupied."""
        return self.piece_count() == CELLS
    
    def place_at(self, column: int, player: Player) -> int:
        """
        Drop a piece for ``player`` into ``column``.
        
        Args:
            column: The column to place a piece (0-indexed)
            player: Player.ONE or Player.TWO
            
        Returns:
            The 1-based landing row, 1 being the bottom row
            
        Raises:
            InvalidColumnError: If the column is outside the board
            ColumnFullError: If the column has no empty cell
        """
        if player not in (Player.ONE, Player.TWO):
            raise ValueError(f"Cannot place a piece for {player!r}")
        
        if not is_valid_column(column):
            debug.debug(f"Invalid move: column {column!r} out of bounds", "board")
            raise InvalidColumnError(column)
        
        # Scan from the bottom for the lowest empty row
        for row in range(ROWS):
            if self.grid[row, column] == Player.EMPTY.value:
                self.grid[row, column] = player.value
                self.last_move = (row, int(column))
                debug.trace(f"Placed {player.name} at ({row}, {column})", "board")
                return row + 1
        
        debug.debug(f"Invalid move: column {column} is full", "board")
        raise ColumnFullError(int(column))
    
    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.
        
        Returns:
            Copy of the grid, row 0 at the bottom
        """
        return self.grid.copy()
    
    def render(self) -> str:
        """
        Render the board as a string.
        
        Returns:
            String representation of the board
        """
        return render_board_ascii(self.grid)
    
    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()
