"""
Main entry point for console TicTacToe.

This script ties together:
- Board (cells, move rules, win/draw detection)
- Players (human at the console, random automated opponent)
- Game (turn loop and result)

Run this script to play TicTacToe against the computer!
"""

import asyncio
from typing import Optional

import numpy as np

from logic.config import GameConfig
from logic.board import Board
from logic.human_player import HumanPlayer
from logic.automated_player import AutomatedPlayer
from logic.game import Game, GameResult


def build_game(config: Optional[GameConfig] = None) -> Game:
    """
    Create the players and the game from the configuration.

    Args:
        config: Game configuration. Uses defaults if not provided.

    Returns:
        A new game, ready to start.
    """
    config = config or GameConfig()

    automated = AutomatedPlayer(
        name=config.AUTOMATED_PLAYER_NAME,
        symbol=config.AUTOMATED_SYMBOL,
        think_time=config.THINK_TIME_SEC,
        rng=np.random.default_rng(config.RANDOM_SEED),
        verbose=config.DEBUG_MODE,
    )
    human = HumanPlayer(name=config.HUMAN_PLAYER_NAME, symbol=config.HUMAN_SYMBOL)

    if config.AUTOMATED_FIRST:
        return Game(automated, human, Board())
    return Game(human, automated, Board())


async def run(config: Optional[GameConfig] = None) -> GameResult:
    """Play one full game."""
    game = build_game(config)
    return await game.start()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Console TicTacToe")
    parser.add_argument(
        "--think-time",
        type=float,
        default=GameConfig.THINK_TIME_SEC,
        help="Seconds the automated player waits before each move"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=GameConfig.RANDOM_SEED,
        help="Seed for the automated player's random moves"
    )
    parser.add_argument(
        "--human-first",
        action="store_true",
        help="Let the human move first (symbols stay the same)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print debug information about automated moves"
    )

    args = parser.parse_args()

    config = GameConfig()
    config.THINK_TIME_SEC = args.think_time
    config.RANDOM_SEED = args.seed
    config.AUTOMATED_FIRST = not args.human_first
    config.DEBUG_MODE = args.verbose

    try:
        asyncio.run(run(config))
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
