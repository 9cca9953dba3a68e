"""
Abstract game interface for gamesweet.

This module defines the Game base class that every concrete game implements.
The search engine, the random baseline and the match loop only ever talk to
a game through this interface:
- current_player: who moves from this state
- get_valid_actions: ordered legal actions
- apply_action: play an action in place
- is_game_over / get_winner: terminal queries
- clone: an independent deep copy
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, List, Optional
import copy

# Players and actions are opaque to the engine; they are only compared with ==
Player = Any
Action = Any


class Game(ABC):
    """
    A deterministic, turn-based, perfect-information game state.

    Implementations mutate themselves in apply_action(). Anything that needs
    to explore alternatives (rollouts, tree expansion) works on clones.
    """

    @abstractmethod
    def current_player(self) -> Player:
        """Get the player who is about to move from this state."""

    @abstractmethod
    def get_valid_actions(self) -> List[Action]:
        """
        Get all legal actions from this state.

        Returns:
            Ordered list of actions; never empty while the game is not over
        """

    @abstractmethod
    def apply_action(self, action: Action) -> bool:
        """
        Play an action, mutating this state.

        Args:
            action: Action to play

        Returns:
            True if the action was applied, False if it was rejected
        """

    @abstractmethod
    def is_game_over(self) -> bool:
        """Check if the game has reached a terminal state."""

    @abstractmethod
    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of a finished game.

        Returns:
            The winning player, or None for a draw
        """

    def clone(self) -> 'Game':
        """
        Create an independent copy of this state.

        Returns:
            Deep copy sharing no mutable data with this state
        """
        return copy.deepcopy(self)
