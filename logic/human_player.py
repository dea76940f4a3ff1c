"""
Human player for console TicTacToe.
Reads positions typed on the console until a legal one is entered.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Callable, Optional

from .board import Board, Symbol, BOARD_CELLS


@dataclass(frozen=True)
class HumanPlayer:
    """
    A person at the keyboard.

    Every attempt prints a prompt and waits for one line of input.
    Bad input never ends the turn: the player is asked again until
    the move lands on an empty cell.
    """

    name: str
    symbol: Symbol
    # Called with the prompt text, returns one line (builtin input if not set)
    input_func: Optional[Callable[[str], str]] = field(default=None, repr=False, compare=False)

    async def take_turn(self, board: Board) -> int:
        """
        Ask for a move until one is applied to the board.

        Args:
            board: The shared game board.

        Returns:
            The position that was taken.
        """
        while True:
            print(f"{self.name}'s turn ({self.symbol.value}). Please enter a position (0-8):")
            print(f"Open positions: {', '.join(str(p) for p in board.get_empty_cells())}")

            # input() blocks, so keep it off the event loop
            read_line = self.input_func or input
            line = await asyncio.to_thread(read_line, "")
            position = self.parse_position(line)

            if position is None:
                print(f"Invalid input. Please enter a position between 0 and {BOARD_CELLS - 1}.")
                continue

            if not board.make_move(position, self.symbol):
                print("Position already taken, try again.")
                continue

            return position

    @staticmethod
    def parse_position(line: str) -> Optional[int]:
        """
        Turn a line of input into a board position.

        Returns:
            Position 0-8, or None if the text is not a number in range.
        """
        try:
            position = int(line.strip())
        except ValueError:
            return None

        if not 0 <= position < BOARD_CELLS:
            return None

        return position
