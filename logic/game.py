"""
Game loop for console TicTacToe.
Alternates turns between two players on one board until someone wins
or the board fills up.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Tuple

from .board import Board, Symbol
from .player import Player


@dataclass
class Move:
    """
    A move in the game.
    """
    player_name: str        # Who made the move
    symbol: Symbol          # Which symbol was placed
    position: int           # Cell (0-8)
    move_number: int        # Which move of the game this is (0-8)


@dataclass
class GameResult:
    """How a finished game ended."""
    winner: Optional[Symbol] = None
    winning_line: Optional[Tuple[int, int, int]] = None
    moves: List[Move] = field(default_factory=list)

    @property
    def is_draw(self) -> bool:
        return self.winner is None


class Game:
    """
    Runs a single game between two players.

    Game flow:
    1. Show the board
    2. The current player takes a turn (and places its own piece)
    3. Stop if that move won the game or filled the board
    4. Otherwise hand the turn to the other player and repeat
    """

    def __init__(self, player1: Player, player2: Player, board: Optional[Board] = None):
        """
        Set up a new game.

        Args:
            player1: Moves first.
            player2: Moves second. Must use a different symbol.
            board: Starting board. A fresh empty board if not provided.
        """
        if player1.symbol == player2.symbol:
            raise ValueError(
                f"Both players use {player1.symbol.value}; each player needs its own symbol"
            )

        self.board = board if board is not None else Board()
        self.players = [player1, player2]
        self.current_player_index = 0

        # Move history
        self.moves: List[Move] = []

        # Game result
        self.winner: Optional[Symbol] = None
        self.is_draw = False
        self.is_game_over = False

        # A board handed in may already be finished
        self._update_status()

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    async def start(self) -> GameResult:
        """
        Play the game to the end.

        Returns:
            The final result, including the full move history.
        """
        print("Starting Tic Tac Toe game!")

        while not self.is_game_over:
            print(self.board.render())
            await self._play_turn()

        self._show_game_result()
        return GameResult(
            winner=self.winner,
            winning_line=self.board.winning_line(),
            moves=list(self.moves),
        )

    async def _play_turn(self):
        """Let the current player move, then update the game status."""
        player = self.current_player

        position = await player.take_turn(self.board)
        self.moves.append(Move(
            player_name=player.name,
            symbol=player.symbol,
            position=position,
            move_number=len(self.moves),
        ))

        self._update_status()
        if not self.is_game_over:
            self.current_player_index = 1 - self.current_player_index

    def _update_status(self):
        """Mark the game over if the board has a winner or no empty cell."""
        winner = self.board.check_win()
        if winner is not None:
            self.winner = winner
            self.is_game_over = True
        elif self.board.is_full():
            self.is_draw = True
            self.is_game_over = True

    def _show_game_result(self):
        """Show the final board and who won."""
        print(self.board.render())

        if self.winner is not None:
            print(f"{self.winner.value} wins!")
        else:
            print("It's a draw!")
