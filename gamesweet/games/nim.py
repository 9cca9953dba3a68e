"""
Nim.

Two players (1 and 2) alternately take stones from one of the heaps. An action
is a (heap, count) pair. Whoever takes the last stone wins, so the game can
never end in a draw.
"""
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from gamesweet.core.game import Game

NimAction = Tuple[int, int]


class Nim(Game):
    """A Nim position."""

    players = (1, 2)

    def __init__(self, heaps: Sequence[int] = (3, 4, 5), max_take: Optional[int] = None, player: int = 1):
        """
        Create a position.

        Args:
            heaps: Number of stones in each heap
            max_take: Optional cap on stones taken per move
            player: Player to move (1 or 2)
        """
        if any(h < 0 for h in heaps):
            raise ValueError("heaps must be non-negative")
        if max_take is not None and max_take < 1:
            raise ValueError("max_take must be at least 1")
        self.heaps = list(heaps)
        self.max_take = max_take
        self.player = player
        self.last_mover: Optional[int] = None

    def current_player(self) -> int:
        return self.player

    def get_valid_actions(self) -> List[NimAction]:
        actions = []
        for heap, size in enumerate(self.heaps):
            limit = size if self.max_take is None else min(size, self.max_take)
            actions.extend((heap, count) for count in range(1, limit + 1))
        return actions

    def apply_action(self, action: NimAction) -> bool:
        try:
            heap, count = action
        except (TypeError, ValueError):
            return False
        if not 0 <= heap < len(self.heaps) or not 1 <= count <= self.heaps[heap]:
            return False
        if self.max_take is not None and count > self.max_take:
            return False

        self.heaps[heap] -= count
        self.last_mover = self.player
        self.player = 2 if self.player == 1 else 1
        return True

    def is_game_over(self) -> bool:
        return not any(self.heaps)

    def get_winner(self) -> Optional[int]:
        return self.last_mover if self.is_game_over() else None

    def clone(self) -> 'Nim':
        game = Nim(self.heaps, self.max_take, self.player)
        game.last_mover = self.last_mover
        return game

    def __str__(self) -> str:
        lines = [f"Heap {i}: {'|' * size} ({size})" for i, size in enumerate(self.heaps)]
        return "\n".join(lines) + f"\nPlayer {self.player} to move"
