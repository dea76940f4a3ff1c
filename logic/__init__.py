"""
Logic module for console TicTacToe.
Handles the board, the two kinds of player, and the game loop.
"""

from .board import Board, Symbol
from .config import GameConfig
from .player import Player
from .human_player import HumanPlayer
from .automated_player import AutomatedPlayer
from .game import Game, GameResult, Move
