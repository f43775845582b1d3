"""Broadside: single-player Battleship against a hunt/target AI."""

__version__ = "0.1.0"
