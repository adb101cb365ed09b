"""
env.py - Gymnasium environment over a Connect Four session

Each episode is one game on the wrapped GameSession. Resetting the
environment clears the board but keeps the session's stats, so a host can
watch the running tally across episodes through the usual notifications.
"""

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from c4engine.debug import debug
from c4engine.errors import ConnectFourError
from c4engine.session import GameSession
from c4engine.utils import ROWS, COLS, WinState


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.
    
    Both players act through the same ``step``; rewards are given from the
    point of view of the player who just moved.
    """
    
    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}
    
    def __init__(self, session: Optional[GameSession] = None,
                 render_mode: Optional[str] = None):
        """
        Initialize the environment.
        
        Args:
            session: Session to play on (a fresh one if omitted)
            render_mode: Mode for rendering the environment
        """
        debug.debug("Initializing ConnectFourEnv", "env")
        
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")
        
        self.action_space = spaces.Discrete(COLS)
        
        # Observation space: 6x7 board with 3 possible values (0, 1, 2)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(ROWS, COLS), dtype=np.int8
        )
        
        self.session = session if session is not None else GameSession()
        self.render_mode = render_mode
        
        self.reward_win = 1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01
    
    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Start a new game on the session.
        
        Returns:
            Initial observation and info dictionary
        """
        super().reset(seed=seed)
        self.session.reset()
        
        if self.render_mode == "human":
            self.render()
        
        return self._get_observation(), self._get_info()
    
    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a piece for the player to move.
        
        Args:
            action: Column to place a piece (0-indexed)
            
        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")
        
        try:
            _, result = self.session.play_and_check(int(action))
        except ConnectFourError as e:
            debug.warning(f"Invalid action {action}: {e}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            info['error'] = type(e).__name__
            return self._get_observation(), self.reward_invalid_move, False, True, info
        
        if result.is_win():
            reward = self.reward_win
        elif result == WinState.TIE:
            reward = self.reward_draw
        else:
            reward = self.reward_step
        terminated = result.is_game_over()
        
        if self.render_mode == "human":
            self.render()
        
        return self._get_observation(), reward, terminated, False, self._get_info()
    
    def render(self) -> Optional[str]:
        """
        Render the current state of the environment.
        
        Returns:
            The board as text in "ascii" mode, otherwise None
        """
        if self.render_mode == "ascii":
            return self.session.render()
        if self.render_mode == "human":
            print(self.session.render())
        return None
    
    def _get_observation(self) -> np.ndarray:
        return self.session.game.board.get_state()
    
    def _get_info(self) -> Dict[str, Any]:
        game = self.session.game
        valid_moves = [] if game.is_game_over() else game.board.valid_columns()
        return {
            'valid_moves': valid_moves,
            'current_player': game.player_turn,
            'turn': game.current_turn,
            'game_result': game.result.name,
            'winning_line': game.winning_line() if game.result.is_win() else [],
            'last_move': game.last_move,
            'stats': self.session.stats.summary(),
        }
    
    def close(self):
        """Nothing to release; the session belongs to the caller."""
        pass
