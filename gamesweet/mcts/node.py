"""
Monte Carlo Tree Search Node.

This module defines the Node class which represents one vertex of the search
tree. Nodes do not reference each other directly: parent and children are
integer handles into the SearchTree arena that owns them.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import math
import random

from gamesweet.core.game import Action, Game, Player
from gamesweet.mcts.config import MCTSConfig

# Parent handle of the root; never a valid index into the arena
NULL_INDEX = -1


@dataclass
class Node:
    """
    A single state in the game tree.

    Attributes:
        idx: Handle of this node in its tree
        parent: Handle of the parent node (NULL_INDEX for the root)
        state: Game state owned exclusively by this node
        action: Action that led here from the parent (None for the root)
        children: Handles of child nodes, in action enumeration order
        wins: Simulations credited as wins to the player who moved here
        sims: Simulations that passed through this node
    """
    idx: int
    parent: int
    state: Game
    action: Optional[Action] = None
    children: List[int] = field(default_factory=list)
    wins: int = 0
    sims: int = 0

    @property
    def is_root(self) -> bool:
        return self.parent == NULL_INDEX

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def win_rate(self) -> float:
        """Fraction of simulations won, 0.0 if never simulated."""
        if self.sims == 0:
            return 0.0
        return self.wins / self.sims

    def priority(self, parent_sims: int, exploration_weight: float = 1.414) -> float:
        """
        Calculate the UCB1 priority of this node.

        UCB1 = wins / sims + C * sqrt(ln(parent_sims) / sims)

        A node that has never been simulated gets infinite priority, so every
        unvisited sibling is tried before any visited one is revisited.

        Args:
            parent_sims: Simulation count of the parent node
            exploration_weight: Exploration constant C

        Returns:
            UCB1 score
        """
        # ln(parent_sims) is undefined below 1 visit
        if self.sims == 0 or parent_sims <= 0:
            return MCTSConfig.INFINITE_VALUE

        exploit = self.wins / self.sims
        explore = exploration_weight * math.sqrt(math.log(parent_sims) / self.sims)
        value = exploit + explore
        return value if math.isfinite(value) else MCTSConfig.INFINITE_VALUE

    def simulate(self, rng: Optional[random.Random] = None) -> Optional[Player]:
        """
        Run a random playout from this node to the end of the game.

        The node's own state is left untouched.

        Args:
            rng: Source of randomness for picking actions

        Returns:
            The winner of the playout, or None for a draw
        """
        rng = rng or random.Random()
        state = self.state.clone()

        while not state.is_game_over():
            # Policy: select a random move
            action = rng.choice(state.get_valid_actions())
            if not state.apply_action(action):
                raise RuntimeError(f"Game rejected legal action {action!r} during simulation")

        return state.get_winner()

    def __str__(self) -> str:
        return (f"Node(idx={self.idx}, "
                f"parent={self.parent}, "
                f"action={self.action}, "
                f"sims={self.sims}, "
                f"wins={self.wins}, "
                f"children={len(self.children)})")
