"""
Monte Carlo Tree Search Agent.

This module provides the MCTSAgent class, a ready-to-use player that runs a
fresh tree search for every decision. The agent can be configured with
different parameters and keeps statistics about its searches.
"""
from typing import Any, Callable, Dict, List, Optional, Tuple
import random

from rich.console import Console
from rich.table import Table

from gamesweet.core.game import Action, Game
from gamesweet.mcts.config import MCTSConfig
from gamesweet.mcts.search import (
    Clock, SearchResult, get_action_statistics, mcts_search
)


class MCTSAgent:
    """
    Monte Carlo Tree Search agent.

    Each call to select_action() builds a new search tree from the given
    state; nothing is carried over between decisions except statistics.
    """

    def __init__(
        self,
        config: Optional[MCTSConfig] = None,
        name: str = "MCTS Agent",
        verbose: bool = False,
        seed: Optional[int] = None,
        clock: Optional[Clock] = None,
        console: Optional[Console] = None
    ):
        """
        Initialize an MCTS agent.

        Args:
            config: MCTS configuration parameters
            name: Name of the agent
            verbose: Whether to print a summary after every search
            seed: Optional seed for the agent's random number generator
            clock: Optional clock override (mostly for tests)
            console: Console used for verbose output
        """
        self.config = config or MCTSConfig()
        self.name = name
        self.verbose = verbose
        self.rng = random.Random(seed)
        self.clock = clock
        self.console = console or Console()

        # Statistics from the most recent search
        self.last_stats: Dict[str, Any] = {}

        # History of all actions and their statistics
        self.action_history: List[Tuple[Action, Dict[str, Any]]] = []

        # Result of the last search, tree included
        self.last_result: Optional[SearchResult] = None

    def select_action(self, state: Game) -> Action:
        """
        Select an action using Monte Carlo Tree Search.

        Args:
            state: Current game state

        Returns:
            Selected action
        """
        result = mcts_search(state, self.config, self.rng, self.clock)

        self.last_result = result
        self.last_stats = result.to_dict()
        self.action_history.append((result.action, self.last_stats))

        if self.verbose:
            self._print_search_info(result)

        return result.action

    def _print_search_info(self, result: SearchResult) -> None:
        """
        Print information about the search.

        Args:
            result: Result of the search
        """
        stats = result.to_dict()
        self.console.print(f"\n[bold]{self.name}[/bold] selected: {result.action}")
        if result.forced:
            self.console.print("Forced move, no search performed")
            return

        self.console.print(
            f"Iterations: {stats['iterations']}  "
            f"Time: {stats['time_elapsed']:.3f}s ({stats['iterations_per_second']:.1f} it/s)  "
            f"Nodes: {stats['node_count']}"
        )

        table = Table(title="Top actions")
        table.add_column("Action")
        table.add_column("Visits", justify="right")
        table.add_column("Win %", justify="right")
        table.add_column("Priority", justify="right")

        actions = sorted(
            get_action_statistics(result.tree).items(),
            key=lambda item: item[1]["visits"],
            reverse=True
        )
        for action_str, action_stats in actions[:5]:
            table.add_row(
                action_str,
                str(action_stats["visits"]),
                f"{100 * action_stats['value']:.1f}",
                f"{action_stats['priority']:.4f}",
            )
        self.console.print(table)

    def get_action_callback(self) -> Callable[[Game], Action]:
        """
        Get a callback function for selecting actions.

        This is the policy shape expected by MatchConfig.

        Returns:
            Callback that takes a game state and returns an action
        """
        return self.select_action

    def get_last_statistics(self) -> Dict[str, Any]:
        """Get statistics from the most recent search."""
        return self.last_stats

    def get_action_statistics(self) -> Dict[str, Dict[str, float]]:
        """
        Get statistics for all actions from the last search.

        Returns:
            Dictionary mapping action strings to statistics
        """
        if self.last_result is None:
            return {}

        return get_action_statistics(self.last_result.tree)

    def reset_statistics(self) -> None:
        """Reset all statistics."""
        self.last_stats = {}
        self.action_history = []
        self.last_result = None

    def __str__(self) -> str:
        return f"{self.name} (MCTS, {self.config.time_limit:.3f}s per move)"


class MCTSAgentFactory:
    """
    Factory for creating MCTS agents with different configurations.
    """

    @staticmethod
    def create_fast() -> MCTSAgent:
        """Create a fast MCTS agent with a short budget."""
        return MCTSAgent(config=MCTSConfig.fast(), name="Fast MCTS")

    @staticmethod
    def create_standard() -> MCTSAgent:
        """Create a standard MCTS agent with balanced parameters."""
        return MCTSAgent(config=MCTSConfig.default(), name="Standard MCTS")

    @staticmethod
    def create_strong() -> MCTSAgent:
        """Create a strong MCTS agent with a long budget."""
        return MCTSAgent(config=MCTSConfig.deep(), name="Strong MCTS")

    @staticmethod
    def create_custom(
        time_limit: float = 0.995,
        expansion_threshold: int = 3,
        exploration_weight: float = 1.414,
        name: str = "Custom MCTS",
        seed: Optional[int] = None
    ) -> MCTSAgent:
        """
        Create a custom MCTS agent.

        Args:
            time_limit: Search budget per move in seconds
            expansion_threshold: Progressive-widening threshold
            exploration_weight: UCB1 exploration parameter
            name: Name of the agent
            seed: Optional random seed

        Returns:
            MCTSAgent
        """
        config = MCTSConfig(
            time_limit=time_limit,
            expansion_threshold=expansion_threshold,
            exploration_weight=exploration_weight
        )
        return MCTSAgent(config=config, name=name, seed=seed)
