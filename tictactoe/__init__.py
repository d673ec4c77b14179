"""Two-player tic-tac-toe with move history."""

__version__ = "0.1.0"
