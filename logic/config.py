"""
Game configuration for console TicTacToe.
All the settings for players and the automated opponent.
"""

from .board import Symbol


class GameConfig:
    """
    Configuration class for game settings.
    The command line overrides these on an instance.
    """

    # ==================== PLAYER SETTINGS ====================
    AUTOMATED_PLAYER_NAME = "AI Player"
    HUMAN_PLAYER_NAME = "Human Player"

    # Must differ; Game refuses two players with the same symbol
    AUTOMATED_SYMBOL = Symbol.X
    HUMAN_SYMBOL = Symbol.O

    # The automated player moves first unless the human asks to
    AUTOMATED_FIRST = True

    # ==================== AUTOMATED PLAYER SETTINGS ====================
    # Simulated "thinking" delay before each automated move (seconds)
    THINK_TIME_SEC = 1.0

    # Seed for the automated player's random generator (None = fresh entropy)
    RANDOM_SEED = None

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
