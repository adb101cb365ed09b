#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine

Examples:

    # Two players at one terminal
    python run.py play

    # Count ties in the running tally
    python run.py --record_ties play

    # Evaluate a position (42 values, bottom row first)
    python run.py test --position 1,1,1,1,2,2,2,0,...
"""

import sys

from c4engine.interfaces.cli import SimpleCLI


def main(argv=None) -> int:
    """Main entry point for the Connect Four engine."""
    cli = SimpleCLI()
    try:
        return cli.run(argv)
    except (KeyboardInterrupt, EOFError):
        print("\nQuitting game.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
