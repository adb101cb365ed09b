"""
stats.py - Cross-game statistics for a Connect Four session

The StatsTracker keeps win counters and a chronological history of concluded
games, and broadcasts a change notification to registered handlers every
time either is mutated.
"""

import datetime
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Tuple

from c4engine.debug import debug

StateChangedHandler = Callable[[], Any]

TIE_WINNER = 0  # GameResult.winner for a recorded tie


@dataclass(frozen=True)
class GameResult:
    """One concluded game: the winning player (1 or 2, 0 for a tie) and when."""
    winner: int
    timestamp: datetime.datetime
    
    @property
    def is_tie(self) -> bool:
        return self.winner == TIE_WINNER


class StatsTracker:
    """
    Win counters and game history that outlive individual games.
    
    Callers are responsible for recording each concluded game only once;
    GameState does this by comparing against its cached result.
    """
    
    def __init__(self):
        self.player1_wins = 0
        self.player2_wins = 0
        self.ties = 0
        self._history: List[GameResult] = []
        self._handlers: List[StateChangedHandler] = []
    
    @property
    def history(self) -> Tuple[GameResult, ...]:
        """Concluded games, oldest first."""
        return tuple(self._history)
    
    @property
    def total_games(self) -> int:
        return len(self._history)
    
    def on_state_changed(self, handler: StateChangedHandler) -> StateChangedHandler:
        """
        Register a zero-argument handler called after every stats mutation.
        
        Returns the handler so this can be used as a decorator.
        """
        if not callable(handler):
            raise TypeError("handler must be callable")
        self._handlers.append(handler)
        return handler
    
    def remove_handler(self, handler: StateChangedHandler) -> bool:
        """
        Unregister a handler.
        
        Returns:
            True if the handler was registered
        """
        try:
            self._handlers.remove(handler)
        except ValueError:
            return False
        return True
    
    def _notify_state_changed(self) -> None:
        # Runs synchronously; a raising handler stops the broadcast.
        for handler in list(self._handlers):
            handler()
    
    def record_win(self, player: int) -> GameResult:
        """
        Count a win for ``player`` and append it to the history.
        
        Args:
            player: 1 or 2
            
        Returns:
            The recorded GameResult
        """
        if isinstance(player, bool) or player not in (1, 2):
            raise ValueError(f"Winner must be 1 or 2, got {player!r}")

        player = int(player)
        if player == 1:
            self.player1_wins += 1
        else:
            self.player2_wins += 1

        result = GameResult(winner=player, timestamp=datetime.datetime.now())
        self._history.append(result)
        debug.info(f"Recorded win for player {player} "
                   f"({self.player1_wins}-{self.player2_wins})", "stats")
        self._notify_state_changed()
        return result
    
    def record_tie(self) -> GameResult:
        """Count a tie and append it to the history."""
        self.ties += 1
        result = GameResult(winner=TIE_WINNER, timestamp=datetime.datetime.now())
        self._history.append(result)
        debug.info(f"Recorded tie ({self.ties} total)", "stats")
        self._notify_state_changed()
        return result
    
    def reset_stats(self) -> None:
        """Zero the counters and clear the history."""
        self.player1_wins = 0
        self.player2_wins = 0
        self.ties = 0
        self._history.clear()
        debug.info("Stats reset", "stats")
        self._notify_state_changed()
    
    def summary(self) -> Dict[str, Any]:
        """Counters plus the most recent result, for display."""
        last = self._history[-1] if self._history else None
        return {
            'player1_wins': self.player1_wins,
            'player2_wins': self.player2_wins,
            'ties': self.ties,
            'games': self.total_games,
            'last_winner': last.winner if last else None,
            'last_played': last.timestamp.isoformat() if last else None,
        }
