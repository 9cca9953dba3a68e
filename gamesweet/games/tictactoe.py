"""
Tic-tac-toe.

Players are "X" and "O", X moves first. Actions are cell indices 0-8 in
row-major order. A full board without three in a row is a draw.
"""
from __future__ import annotations
from typing import List, Optional

from gamesweet.core.game import Game

PLAYERS = ("X", "O")
EMPTY = "."

LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


class TicTacToe(Game):
    """A tic-tac-toe position."""

    players = PLAYERS

    def __init__(self, board: Optional[str] = None, player: str = "X"):
        """
        Create a position.

        Args:
            board: Optional 9-character string of "X", "O" and "."
            player: Player to move
        """
        self.board: List[str] = list(board) if board is not None else [EMPTY] * 9
        if len(self.board) != 9:
            raise ValueError("board must have exactly 9 cells")
        if player not in PLAYERS:
            raise ValueError(f"Unknown player {player!r}")
        self.player = player

    def current_player(self) -> str:
        return self.player

    def get_valid_actions(self) -> List[int]:
        if self.is_game_over():
            return []
        return [i for i, cell in enumerate(self.board) if cell == EMPTY]

    def apply_action(self, action: int) -> bool:
        if self.is_game_over():
            return False
        if not isinstance(action, int) or not 0 <= action < 9 or self.board[action] != EMPTY:
            return False

        self.board[action] = self.player
        self.player = PLAYERS[1] if self.player == PLAYERS[0] else PLAYERS[0]
        return True

    def is_game_over(self) -> bool:
        return self.get_winner() is not None or EMPTY not in self.board

    def get_winner(self) -> Optional[str]:
        for a, b, c in LINES:
            if self.board[a] != EMPTY and self.board[a] == self.board[b] == self.board[c]:
                return self.board[a]
        return None

    def clone(self) -> 'TicTacToe':
        return TicTacToe("".join(self.board), self.player)

    def __str__(self) -> str:
        rows = [" ".join(self.board[r * 3:r * 3 + 3]) for r in range(3)]
        return "\n".join(rows) + f"\n{self.player} to move"
