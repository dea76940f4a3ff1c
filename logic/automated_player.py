"""
Automated player for console TicTacToe.
Waits a moment to "think", then plays a random open cell.
"""

import asyncio
from dataclasses import dataclass, field

import numpy as np

from .board import Board, Symbol, BOARD_CELLS
from .config import GameConfig


@dataclass(frozen=True)
class AutomatedPlayer:
    """
    A computer opponent that moves at random.

    After the thinking delay it draws positions uniformly from all 9 cells
    and keeps drawing until one is free. Occupied draws are simply retried,
    so later moves take more draws than early ones.
    """

    name: str
    symbol: Symbol
    think_time: float = GameConfig.THINK_TIME_SEC
    rng: np.random.Generator = field(default_factory=np.random.default_rng, repr=False, compare=False)
    verbose: bool = False

    async def take_turn(self, board: Board) -> int:
        """
        Wait out the thinking delay, then take a random free cell.

        Args:
            board: The shared game board. Must have at least one empty cell.

        Returns:
            The position that was taken.
        """
        print(f"{self.name}'s turn ({self.symbol.value}).")
        await asyncio.sleep(self.think_time)

        attempts = 0
        while True:
            attempts += 1
            position = int(self.rng.integers(0, BOARD_CELLS))
            if board.make_move(position, self.symbol):
                break

        if self.verbose:
            print(f"{self.name} needed {attempts} draw(s) to find an open cell.")

        print(f"{self.name} chose position: {position}")
        return position
