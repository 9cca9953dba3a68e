"""
Monte Carlo Tree Search (MCTS) implementation.

This package provides a game-agnostic MCTS player. Every decision builds a
fresh tree from the current state and runs, until a time budget is spent:

1. Selection: Starting from the root, follow the child with the highest UCB1
   priority until reaching a leaf.
2. Expansion: Once a leaf has been simulated more than the expansion
   threshold, create all of its children and pick one at random.
3. Simulation: Play uniformly random moves from that node to the end of the game.
4. Backpropagation: Update win/simulation counts up to the root.

The most simulated root child is played.
"""

from gamesweet.mcts.node import Node, NULL_INDEX
from gamesweet.mcts.tree import SearchTree
from gamesweet.mcts.agent import MCTSAgent, MCTSAgentFactory
from gamesweet.mcts.search import (
    SearchResult,
    mcts_search,
    choose_action,
    select_node,
    expand_node,
    simulate_game,
    backpropagate,
    get_action_statistics,
    get_principal_variation,
)
from gamesweet.mcts.config import MCTSConfig

# Default configuration
DEFAULT_CONFIG = MCTSConfig(
    time_limit=0.995,         # Search budget per move in seconds
    expansion_threshold=3,    # Simulations before a leaf is expanded
    exploration_weight=1.414  # UCB1 exploration parameter (~sqrt(2))
)

__all__ = [
    'MCTSAgent',
    'MCTSAgentFactory',
    'MCTSConfig',
    'Node',
    'NULL_INDEX',
    'SearchTree',
    'SearchResult',
    'mcts_search',
    'choose_action',
    'select_node',
    'expand_node',
    'simulate_game',
    'backpropagate',
    'get_action_statistics',
    'get_principal_variation',
    'DEFAULT_CONFIG'
]
