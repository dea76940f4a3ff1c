"""
Player protocol for TicTacToe.
Anything that can take a turn on the shared board.
"""

from typing import Protocol, runtime_checkable

from .board import Board, Symbol


@runtime_checkable
class Player(Protocol):
    """
    A participant in the game.

    take_turn() must apply exactly one successful board.make_move() with
    the player's own symbol before it returns, and return that position.
    The game loop never places pieces itself.
    """

    @property
    def name(self) -> str:
        ...

    @property
    def symbol(self) -> Symbol:
        ...

    async def take_turn(self, board: Board) -> int:
        ...
