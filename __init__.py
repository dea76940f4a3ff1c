"""
Console TicTacToe
=================
Two players take turns on a 3x3 board in the terminal: a human typing
positions 0-8, and an automated player that picks random open cells
after a short "thinking" delay.

Positions: 0 1 2 / 3 4 5 / 6 7 8
"""

__version__ = "1.0.0"
