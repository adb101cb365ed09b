"""
cli.py - Command-line interface for Connect Four

A hot-seat terminal front end: two people share the keyboard, the session
keeps score across games, and board positions can be loaded and evaluated.
"""

import argparse
import sys
from typing import List, Optional

from c4engine.config import GameConfig
from c4engine.debug import debug
from c4engine.errors import ConnectFourError
from c4engine.game.board import Board
from c4engine.game.rules import evaluate_grid, find_winning_line
from c4engine.session import GameSession
from c4engine.utils import COLS, CELLS, Player, WinState

# Special command codes returned by get_human_move
QUIT = -1
RESTART = -2
SHOW_STATS = -3
RESET_STATS = -4

COMMANDS = {'q': QUIT, 'r': RESTART, 's': SHOW_STATS, 'x': RESET_STATS}


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser shared by the CLI and run.py."""
    parser = argparse.ArgumentParser(description='Connect Four')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--debug_level', default='info',
                        help='Log level: none, error, warning, info, debug, trace')
    parser.add_argument('--log_file', default=None, help='Also write log output to this file')
    parser.add_argument('--debug_components', default=None,
                        help='Comma-separated components to log for, e.g. state,stats (default: all)')
    parser.add_argument('--record_ties', action='store_true',
                        help='Count ties in the stats and history')
    parser.add_argument('--full_scan', action='store_true',
                        help='Always scan for winning lines, even early in the game')
    
    subparsers = parser.add_subparsers(dest='command', help='Command to run')
    subparsers.add_parser('play', help='Play a two-player game in the terminal')
    test_parser = subparsers.add_parser('test', help='Evaluate a board position')
    test_parser.add_argument('--position', type=str,
                             help=f'{CELLS} comma-separated cell values, bottom row first')
    return parser


class SimpleCLI:
    """Simple command-line interface for two players at one terminal."""
    
    def __init__(self, session: Optional[GameSession] = None):
        """Initialize the CLI."""
        self.session = session
        self.args = None
    
    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = build_parser().parse_args(argv)
        config = GameConfig.from_args(self.args)
        config.apply_logging()
        if self.session is None:
            self.session = GameSession(config)
    
    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args(argv)
        
        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'test':
            return self.test_position()
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0
    
    def play_game(self) -> None:
        """Play games until the players quit."""
        print("Starting a new Connect Four game!")
        print(f"Enter column number (0-{COLS - 1}) to make a move.")
        print("Other commands: 'q' quit, 'r' restart, 's' stats, 'x' reset stats.")
        
        session = self.session
        session.on_state_changed(self.show_stats)
        print(session.render())
        
        while True:
            result = session.check_for_win()
            if result.is_game_over():
                self.announce_result(result)
                answer = input("Play again? (y/n): ").strip().lower()
                if answer != 'y':
                    return
                session.reset()
                print(session.render())
                continue
            
            move = self.get_human_move(session.current_player_turn())
            if move is None:
                continue
            elif move == QUIT:
                print("Quitting game.")
                return
            elif move == RESTART:
                session.reset()
                print("Game restarted.")
                print(session.render())
                continue
            elif move == SHOW_STATS:
                self.show_stats()
                continue
            elif move == RESET_STATS:
                session.reset_stats()
                continue
            
            try:
                session.play_piece(move)
            except ConnectFourError as e:
                print(str(e))
                continue
            print(session.render())
    
    def get_human_move(self, player: int) -> Optional[int]:
        """
        Get a move from the player to move.
        
        Returns:
            Column index, special command code, or None if the input was invalid
        """
        user_input = input(f"Player {player} ({Player(player)}) move: ").strip().lower()
        
        if user_input in COMMANDS:
            return COMMANDS[user_input]
        
        try:
            move = int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or command.")
            return None
        
        if 0 <= move < COLS:
            return move
        print(f"Column must be between 0 and {COLS - 1}.")
        return None
    
    def announce_result(self, result: WinState) -> None:
        print("Game over!")
        if result == WinState.TIE:
            print("It's a tie!")
        else:
            print(f"Player {result.winner.value} ({result.winner}) wins!")
    
    def show_stats(self) -> None:
        """Print the running tally."""
        summary = self.session.stats.summary()
        line = f"Player 1: {summary['player1_wins']}  Player 2: {summary['player2_wins']}"
        if self.session.config.record_ties:
            line += f"  Ties: {summary['ties']}"
        print(line)
    
    def test_position(self) -> int:
        """Evaluate a position given as flattened cell values."""
        if not self.args.position:
            print("Please provide a position string with --position")
            return 1
        
        try:
            board = Board.from_cells([int(c) for c in self.args.position.split(',')])
        except ValueError as e:
            print(f"Error parsing position: {e}")
            return 1
        
        print("Loaded position:")
        print(board.render())
        
        result = evaluate_grid(board.grid, early_exit=self.session.config.early_exit)
        print(f"Result: {result.name}")
        found = find_winning_line(board.grid) if result.is_win() else None
        if found is not None:
            player, direction, cells = found
            print(f"Winning line for {player.name} ({direction.name}): {list(cells)}")
        else:
            print(f"Pieces: {board.piece_count()}, valid moves: {board.valid_columns()}")
        debug.debug(f"Tested position with {board.piece_count()} pieces", "cli")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
