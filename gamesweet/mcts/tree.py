"""
The MCTS game tree.

SearchTree is an append-only arena of Nodes addressed by integer handles.
One tree is built per decision and thrown away afterwards; it never shrinks
while a search is running, so memory grows with the number of expanded
nodes times the branching factor.
"""
from __future__ import annotations
from typing import Iterator, List, Optional

from loguru import logger

from gamesweet.core.game import Game, Player
from gamesweet.mcts.config import MCTSConfig
from gamesweet.mcts.node import NULL_INDEX, Node


class SearchTree:
    """
    The game tree from the current position.

    The root always has handle 0 and wraps a clone of the state the tree
    was created from.
    """

    def __init__(self, state: Game, config: Optional[MCTSConfig] = None):
        """
        Create a new tree holding only the root.

        Args:
            state: Current game state (cloned, the caller keeps its copy)
            config: MCTS configuration parameters
        """
        self.config = config or MCTSConfig()
        self.nodes: List[Node] = [Node(idx=0, parent=NULL_INDEX, state=state.clone())]
        self.root = 0

    def __getitem__(self, idx: int) -> Node:
        return self.nodes[idx]

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def parent_sims(self, idx: int) -> int:
        """Simulation count of a node's parent."""
        return self.nodes[self.nodes[idx].parent].sims

    def select(self) -> int:
        """
        Descend from the root to a leaf.

        At every level the child with the highest UCB1 priority is taken;
        the first child wins ties.

        Returns:
            Handle of the selected leaf
        """
        node = self.nodes[self.root]

        while not node.is_leaf:
            best_idx = node.children[0]
            best_priority = None
            for idx in node.children:
                priority = self.nodes[idx].priority(node.sims, self.config.exploration_weight)
                logger.trace("{:03}: {:.6f}", idx, priority)
                if best_priority is None or priority > best_priority:
                    best_idx, best_priority = idx, priority
            node = self.nodes[best_idx]
            logger.trace("{:03} selected", node.idx)

        return node.idx

    def expand(self, idx: int) -> List[int]:
        """
        Create one child per legal action of a node.

        Args:
            idx: Handle of the node to expand

        Returns:
            Handles of the new children
        """
        parent = self.nodes[idx]
        if parent.children:
            raise ValueError(f"Node {idx} has already been expanded")

        for action in parent.state.get_valid_actions():
            # Clone state and play action
            state = parent.state.clone()
            if not state.apply_action(action):
                raise RuntimeError(f"Game rejected legal action {action!r} during expansion")

            child = Node(idx=len(self.nodes), parent=idx, state=state, action=action)
            self.nodes.append(child)
            parent.children.append(child.idx)

        return list(parent.children)

    def backpropagate(self, idx: int, winner: Optional[Player]) -> None:
        """
        Update statistics from a simulated node up to the root.

        A node's state stores the player about to move, while the node itself
        stands for the move that produced it; a win is therefore credited to
        every node whose player to move is not the winner.

        Draws are booked as a win for the root's player to move.

        Args:
            idx: Handle of the simulated node
            winner: Winner of the simulation, or None for a draw
        """
        if winner is None:
            winner = self.nodes[self.root].state.current_player()

        while idx != NULL_INDEX:
            node = self.nodes[idx]
            if winner != node.state.current_player():
                node.wins += 1
            node.sims += 1
            idx = node.parent

    def walk(self, idx: Optional[int] = None) -> Iterator[Node]:
        """
        Iterate over a subtree depth-first, parents before children.

        Args:
            idx: Handle of the subtree root (defaults to the tree root)
        """
        stack = [self.root if idx is None else idx]
        while stack:
            node = self.nodes[stack.pop()]
            yield node
            stack.extend(reversed(node.children))

    def __str__(self) -> str:
        return f"SearchTree(nodes={len(self.nodes)}, root_sims={self.nodes[self.root].sims})"
