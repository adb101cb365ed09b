"""
c4engine - Two-player Connect Four game engine

This package provides the board, turn and win-detection rules of Connect
Four, cross-game statistics with change notifications, a per-session owner
for both, and terminal and Gymnasium front ends.
"""

# Version number
__version__ = '0.1.0'
