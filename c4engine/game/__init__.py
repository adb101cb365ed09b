"""
c4engine.game - Core game mechanics for Connect Four

This package contains the board representation, win detection
and game state management.
"""

from c4engine.game.board import Board
from c4engine.game.state import GameState

__all__ = ['Board', 'GameState']
