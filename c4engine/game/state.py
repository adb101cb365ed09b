"""
state.py - Game state management for Connect Four

GameState wraps a Board, derives whose turn it is from the pieces on it,
rejects placements once the game is over and hands newly concluded games to
a StatsTracker exactly once.
"""

from typing import List, Optional, Tuple

from c4engine.config import GameConfig
from c4engine.debug import debug
from c4engine.errors import GameOverError
from c4engine.game.board import Board
from c4engine.game.rules import evaluate_grid, find_winning_line
from c4engine.stats import StatsTracker
from c4engine.utils import Player, WinState


class GameState:
    """
    A single game of Connect Four.
    
    ``check_for_win`` may be called any number of times (for example once per
    render); a concluded game is reported to the stats tracker only the first
    time its result is seen.
    """
    
    def __init__(self, stats: Optional[StatsTracker] = None,
                 config: Optional[GameConfig] = None):
        """
        Initialize a new game.
        
        Args:
            stats: Tracker that receives concluded games (a private one if omitted)
            config: Session configuration (defaults if omitted)
        """
        debug.debug("Initializing GameState", "state")
        self.config = config or GameConfig()
        self.stats = stats if stats is not None else StatsTracker()
        self.board = Board()
        self._result = WinState.NO_WINNER
    
    @property
    def player_turn(self) -> int:
        """The player to move: 1 when an even number of pieces is down, else 2."""
        return 1 if self.board.piece_count() % 2 == 0 else 2
    
    @property
    def current_player(self) -> Player:
        return Player(self.player_turn)
    
    @property
    def current_turn(self) -> int:
        """Number of pieces played so far."""
        return self.board.piece_count()
    
    @property
    def result(self) -> WinState:
        """The last result computed by ``check_for_win``."""
        return self._result
    
    @property
    def last_move(self) -> Optional[Tuple[int, int]]:
        return self.board.last_move
    
    @property
    def winner(self) -> Optional[Player]:
        return self._result.winner
    
    def is_game_over(self) -> bool:
        return self._result.is_game_over()
    
    def play_piece(self, column: int) -> int:
        """
        Drop the current player's piece into ``column``.
        
        Args:
            column: The column to place a piece (0-indexed)
            
        Returns:
            The 1-based landing row, 1 being the bottom row
            
        Raises:
            GameOverError: If the game already has a winner or is tied
            InvalidColumnError: If the column is outside the board
            ColumnFullError: If the column has no empty cell
        """
        if self._result.is_game_over():
            debug.debug(f"Rejecting move in column {column}: game is over", "state")
            raise GameOverError(self._result)
        
        player = self.current_player
        row = self.board.place_at(column, player)
        debug.debug(f"Turn {self.current_turn}: {player.name} dropped into column {column}, row {row}", "state")
        return row
    
    def check_for_win(self) -> WinState:
        """
        Check the board for a win or tie and record newly concluded games.
        
        Returns:
            The current WinState
        """
        result = evaluate_grid(self.board.grid, early_exit=self.config.early_exit)

        # Cached before recording so a raising stats handler cannot cause a recount
        previous, self._result = self._result, result

        if result != previous:
            if result.is_win():
                debug.info(f"{result.winner.name} wins on turn {self.current_turn}", "state")
                self.stats.record_win(result.winner.value)
            elif result == WinState.TIE:
                debug.info("Game ends in a tie", "state")
                if self.config.record_ties:
                    self.stats.record_tie()

        return result
    
    def winning_line(self) -> List[Tuple[int, int]]:
        """
        Get the cells of the winning line if the game is won.
        
        Returns:
            (row, col) positions of the first winning line, or an empty list
        """
        found = find_winning_line(self.board.grid)
        if found is None:
            return []
        return list(found[2])
    
    def reset(self) -> None:
        """Clear the board for a new game. Stats are untouched."""
        debug.debug("Resetting game", "state")
        self.board.clear()
        self._result = WinState.NO_WINNER
    
    def render(self) -> str:
        """
        Render the game as a string.
        
        Returns:
            String representation of the board
        """
        return self.board.render()
