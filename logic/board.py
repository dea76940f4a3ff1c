"""
Board for the console TicTacToe game.
Holds the 9 cells, applies moves, and checks for a winner or a full board.
"""

from enum import Enum
from typing import Optional, List, Tuple


class Symbol(Enum):
    """The two markers a player can own."""
    X = "X"
    O = "O"

    def opposite(self) -> "Symbol":
        """Get the other symbol."""
        return Symbol.O if self == Symbol.X else Symbol.X


# All possible winning lines, checked in this order
WINNING_LINES: List[Tuple[int, int, int]] = [
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
]

BOARD_CELLS = 9


class Board:
    """
    The 3x3 TicTacToe board, stored as a flat list of 9 cells.

    Positions are numbered left to right, top to bottom:

         0 | 1 | 2
         3 | 4 | 5
         6 | 7 | 8

    None means empty, otherwise the cell holds a Symbol.
    A filled cell is never cleared.
    """

    def __init__(self):
        self.cells: List[Optional[Symbol]] = [None] * BOARD_CELLS

    def make_move(self, position: int, symbol: Symbol) -> bool:
        """
        Place a symbol on the board.

        Args:
            position: Cell index (0-8).
            symbol: Symbol to place.

        Returns:
            True if the cell was empty and is now taken, False otherwise.
        """
        # Negative indices must not wrap around
        if not 0 <= position < BOARD_CELLS:
            return False

        if self.cells[position] is not None:
            return False

        self.cells[position] = symbol
        return True

    def check_win(self) -> Optional[Symbol]:
        """
        Check if there's a winner.

        Returns:
            The Symbol on the first completed line, or None.
        """
        line = self.winning_line()
        if line is None:
            return None
        return self.cells[line[0]]

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        """Get the first completed line, or None if nobody has won."""
        for line in WINNING_LINES:
            a, b, c = line
            if self.cells[a] is not None and self.cells[a] == self.cells[b] == self.cells[c]:
                return line
        return None

    def is_full(self) -> bool:
        """True when no empty cell is left."""
        return all(cell is not None for cell in self.cells)

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of open positions, lowest first.
        """
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def render(self) -> str:
        """Build a printable 3x3 grid."""
        marks = [cell.value if cell is not None else " " for cell in self.cells]
        rows = []
        for row in range(3):
            a, b, c = marks[row * 3:row * 3 + 3]
            rows.append(f"  {a} | {b} | {c}")
        return "\n" + "\n -----------\n".join(rows) + "\n"


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board()
    for position, symbol in [(0, Symbol.X), (3, Symbol.O), (1, Symbol.X), (4, Symbol.O), (2, Symbol.X)]:
        board.make_move(position, symbol)

    print(board.render())
    print(f"Winner: {board.check_win()}")
    assert board.check_win() == Symbol.X
    assert board.winning_line() == (0, 1, 2)

    print("\nBoard test done!")
