"""
rules.py - Win and tie detection for Connect Four

Every straight line of CONNECT_N cells that fits on the board is enumerated
once, at import time. Lines are ordered row-major by their starting cell and
then by direction (right, up, up-right, up-left), so the first winning line
found for a given board is always the same one.
"""

from typing import List, Optional, Tuple

import numpy as np

from c4engine.debug import debug
from c4engine.utils import (ROWS, COLS, CONNECT_N, MIN_PIECES_FOR_WIN,
                            DIRECTION_VECTORS, Direction, Player, WinState,
                            is_valid_position)

Line = Tuple[Tuple[int, int], ...]


def calculate_winning_lines() -> List[Tuple[Direction, Line]]:
    """
    Enumerate every group of CONNECT_N cells forming a straight line.
    
    Returns:
        (direction, cells) pairs, each cells tuple listing (row, col) positions
        from the starting cell outward
    """
    lines = []
    for row in range(ROWS):
        for col in range(COLS):
            for direction, (dr, dc) in DIRECTION_VECTORS.items():
                end_row = row + dr * (CONNECT_N - 1)
                end_col = col + dc * (CONNECT_N - 1)
                if not is_valid_position(end_row, end_col):
                    continue
                lines.append((direction, tuple((row + dr * i, col + dc * i)
                                               for i in range(CONNECT_N))))
    return lines


WINNING_LINES = calculate_winning_lines()


def find_winning_line(grid: np.ndarray) -> Optional[Tuple[Player, Direction, Line]]:
    """
    Find the first line of CONNECT_N cells held by a single player.
    
    Args:
        grid: Board grid, row 0 at the bottom
        
    Returns:
        (player, direction, cells) for the first winning line, or None
    """
    for direction, cells in WINNING_LINES:
        first = grid[cells[0]]
        if first == Player.EMPTY.value:
            continue
        if all(grid[cell] == first for cell in cells[1:]):
            return Player(int(first)), direction, cells
    return None


def evaluate_grid(grid: np.ndarray, early_exit: bool = True) -> WinState:
    """
    Evaluate a board position.
    
    A winning line takes precedence over a full board.
    
    Args:
        grid: Board grid, row 0 at the bottom
        early_exit: Report NO_WINNER without scanning while fewer than
            MIN_PIECES_FOR_WIN pieces are down
            
    Returns:
        The WinState of the position
    """
    pieces = int(np.count_nonzero(grid))
    if early_exit and pieces < MIN_PIECES_FOR_WIN:
        return WinState.NO_WINNER
    
    debug.start_timer("win_check")
    found = find_winning_line(grid)
    debug.end_timer("win_check", "rules")
    
    if found is not None:
        player, direction, cells = found
        debug.trace(f"{player.name} holds {direction.name} line {cells}", "rules")
        return WinState.for_player(player)
    
    if pieces == grid.size:
        return WinState.TIE
    
    return WinState.NO_WINNER
