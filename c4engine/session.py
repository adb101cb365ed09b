"""
session.py - One player session: a game and the stats that outlive it

A host creates a GameSession when a session starts and drops it when the
session ends. Nothing in the package keeps a session globally; every
consumer receives the session it works on.
"""

import functools
import threading
from contextlib import nullcontext
from typing import Optional, Tuple

from c4engine.config import GameConfig
from c4engine.debug import debug
from c4engine.game.state import GameState
from c4engine.stats import GameResult, StatsTracker, StateChangedHandler
from c4engine.utils import WinState


def _serialized(method):
    """Run a session method while holding the session lock, if any."""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper


class GameSession:
    """
    Owns a GameState and the StatsTracker it reports to.
    
    With ``config.thread_safe`` every public operation runs under a
    re-entrant lock, for hosts that attach several callers to one session.
    Otherwise the session, like the objects it owns, assumes exclusive access.
    """
    
    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.config.validate()
        self.stats = StatsTracker()
        self.game = GameState(stats=self.stats, config=self.config)
        self._lock = threading.RLock() if self.config.thread_safe else nullcontext()
        debug.debug(f"Session created with {self.config}", "session")
    
    # Mutating calls
    
    @_serialized
    def play_piece(self, column: int) -> int:
        """Drop the current player's piece; returns the 1-based landing row."""
        return self.game.play_piece(column)
    
    @_serialized
    def play_and_check(self, column: int) -> Tuple[int, WinState]:
        """Drop a piece and evaluate the board in one step."""
        row = self.game.play_piece(column)
        return row, self.game.check_for_win()
    
    @_serialized
    def reset(self) -> None:
        self.game.reset()
    
    @_serialized
    def reset_stats(self) -> None:
        self.stats.reset_stats()
    
    # Queries
    
    @_serialized
    def current_player_turn(self) -> int:
        return self.game.player_turn
    
    @_serialized
    def current_turn_count(self) -> int:
        return self.game.current_turn
    
    @_serialized
    def check_for_win(self) -> WinState:
        return self.game.check_for_win()
    
    @_serialized
    def player1_wins(self) -> int:
        return self.stats.player1_wins
    
    @_serialized
    def player2_wins(self) -> int:
        return self.stats.player2_wins
    
    @_serialized
    def game_history(self) -> Tuple[GameResult, ...]:
        return self.stats.history
    
    @_serialized
    def render(self) -> str:
        return self.game.render()
    
    # Subscription
    
    def on_state_changed(self, handler: StateChangedHandler) -> StateChangedHandler:
        """Register a zero-argument handler fired whenever the stats change."""
        return self.stats.on_state_changed(handler)
    
    def remove_handler(self, handler: StateChangedHandler) -> bool:
        return self.stats.remove_handler(handler)
