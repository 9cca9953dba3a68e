"""
Monte Carlo Tree Search (MCTS) algorithm.

This module implements the search loop with the four standard phases:
1. Selection: Descend the tree by UCB1 priority to a leaf
2. Expansion: Materialize all children of a leaf once it has been
   simulated more than the expansion threshold
3. Simulation: Run a random playout to the end of the game
4. Backpropagation: Update statistics up to the root

The loop runs until a wall-clock budget is spent and then plays the most
simulated move from the root.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple
import random
import time

from loguru import logger

from gamesweet.core.game import Action, Game
from gamesweet.mcts.config import MCTSConfig
from gamesweet.mcts.node import Node
from gamesweet.mcts.tree import SearchTree

Clock = Callable[[], float]


@dataclass
class SearchResult:
    """Outcome of one search: the chosen action and the tree behind it."""
    action: Action
    tree: SearchTree
    iterations: int = 0
    time_elapsed: float = 0.0
    forced: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Summary statistics of the search, without the tree itself."""
        return {
            "iterations": self.iterations,
            "time_elapsed": self.time_elapsed,
            "node_count": len(self.tree),
            "forced_move": self.forced,
            "iterations_per_second": self.iterations / max(0.001, self.time_elapsed),
        }


def mcts_search(
    state: Game,
    config: Optional[MCTSConfig] = None,
    rng: Optional[random.Random] = None,
    clock: Optional[Clock] = None
) -> SearchResult:
    """
    Run Monte Carlo Tree Search to find the best action.

    Args:
        state: Current game state (not modified)
        config: MCTS configuration parameters
        rng: Source of randomness for playouts and post-expansion picks
        clock: Monotonic clock in seconds used for the time budget

    Returns:
        SearchResult holding the chosen action and the search tree
    """
    config = config or MCTSConfig()
    rng = rng or random.Random()
    clock = clock or time.monotonic

    # Record time MCTS was started
    start_time = clock()

    # Create the game tree and expand at root
    tree = SearchTree(state, config)
    tree.expand(tree.root)
    root = tree[tree.root]

    if not root.children:
        raise ValueError("No valid actions available")

    # Return immediately if only one valid action
    if len(root.children) == 1:
        return SearchResult(action=tree[root.children[0]].action, tree=tree, forced=True)

    iterations = 0
    while clock() - start_time < config.time_limit:
        leaf = select_node(tree)

        # Expand the leaf once it's been simulated more than the threshold
        if tree[leaf].sims > config.expansion_threshold:
            children = expand_node(tree, leaf)
            if children:
                leaf = rng.choice(children)

        winner = simulate_game(tree[leaf], rng)
        backpropagate(tree, leaf, winner)
        iterations += 1

    best = best_child(tree)
    result = SearchResult(
        action=best.action,
        tree=tree,
        iterations=iterations,
        time_elapsed=clock() - start_time,
    )
    log_root_statistics(tree)
    logger.debug(
        "Searched {} iterations over {} nodes in {:.3f}s, playing {}",
        result.iterations, len(tree), result.time_elapsed, best.action
    )
    return result


def choose_action(
    state: Game,
    config: Optional[MCTSConfig] = None,
    rng: Optional[random.Random] = None,
    clock: Optional[Clock] = None
) -> Action:
    """
    Choose the next action for the player to move.

    Args:
        state: Current game state (not modified)
        config: MCTS configuration parameters
        rng: Source of randomness
        clock: Monotonic clock in seconds

    Returns:
        The action of the most simulated root child
    """
    return mcts_search(state, config, rng, clock).action


def select_node(tree: SearchTree) -> int:
    """
    Select a leaf for expansion or simulation.

    Args:
        tree: Search tree

    Returns:
        Handle of the selected leaf
    """
    return tree.select()


def expand_node(tree: SearchTree, idx: int) -> List[int]:
    """
    Expand a node by adding one child per legal action.

    Args:
        tree: Search tree
        idx: Handle of the node to expand

    Returns:
        Handles of the new children (empty for a terminal state)
    """
    return tree.expand(idx)


def simulate_game(node: Node, rng: Optional[random.Random] = None):
    """
    Run a random playout from a node.

    Args:
        node: Node to simulate from
        rng: Source of randomness

    Returns:
        Winner of the playout, or None for a draw
    """
    return node.simulate(rng)


def backpropagate(tree: SearchTree, idx: int, winner) -> None:
    """
    Update statistics from a simulated node up to the root.

    Args:
        tree: Search tree
        idx: Handle of the simulated node
        winner: Winner of the playout, or None for a draw
    """
    tree.backpropagate(idx, winner)


def best_child(tree: SearchTree) -> Node:
    """
    Get the most simulated child of the root.

    The first child in action order wins ties.

    Args:
        tree: Search tree with an expanded root

    Returns:
        Best root child
    """
    root = tree[tree.root]
    return max((tree[idx] for idx in root.children), key=lambda node: node.sims)


def log_root_statistics(tree: SearchTree) -> None:
    """Emit one debug line per root child."""
    root = tree[tree.root]
    logger.debug("idx: sims, wins%, priority")
    for idx in root.children:
        node = tree[idx]
        logger.debug(
            "{:03}: {:4}, {:4.1f}%, {:.6f}",
            idx,
            node.sims,
            100.0 * node.win_rate,
            node.priority(tree.parent_sims(idx), tree.config.exploration_weight),
        )


def get_action_statistics(tree: SearchTree) -> Dict[str, Dict[str, float]]:
    """
    Get statistics for all actions from the root.

    This is useful for analysis and debugging.

    Args:
        tree: Search tree

    Returns:
        Dictionary mapping action strings to statistics
    """
    root = tree[tree.root]
    result = {}

    for idx in root.children:
        child = tree[idx]
        result[str(child.action)] = {
            "visits": child.sims,
            "wins": child.wins,
            "value": child.win_rate,
            "priority": child.priority(tree.parent_sims(idx), tree.config.exploration_weight),
        }

    return result


def get_principal_variation(tree: SearchTree, max_depth: int = 10) -> List[Tuple[Action, float]]:
    """
    Get the principal variation (most visited path) from the root.

    Args:
        tree: Search tree
        max_depth: Maximum depth to explore

    Returns:
        List of (action, win rate) pairs along the principal variation
    """
    result = []
    current = tree[tree.root]

    while current.children and len(result) < max_depth:
        current = max((tree[idx] for idx in current.children), key=lambda node: node.sims)
        result.append((current.action, current.win_rate))

    return result
