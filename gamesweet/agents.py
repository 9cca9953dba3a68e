"""
Baseline agents.

The random agent picks any legal action uniformly at random. It is the
simplest possible opponent and the reference MCTS agents are measured
against.
"""
from typing import Callable, Optional
import random

from gamesweet.core.game import Action, Game


def random_action(state: Game, rng: Optional[random.Random] = None) -> Action:
    """
    Select a legal action uniformly at random.

    Args:
        state: Current game state
        rng: Source of randomness (defaults to the module-level generator)

    Returns:
        Randomly selected action
    """
    valid_actions = state.get_valid_actions()
    if not valid_actions:
        raise ValueError(f"No valid actions for player {state.current_player()}")

    return (rng or random).choice(valid_actions)


class RandomAgent:
    """
    Agent that selects actions randomly.

    This agent serves as a baseline for comparison with more sophisticated agents.
    """

    def __init__(self, name: str = "Random Agent", seed: Optional[int] = None):
        """
        Initialize the random agent.

        Args:
            name: Name of the agent
            seed: Optional seed for the agent's random number generator
        """
        self.name = name
        self.rng = random.Random(seed)

    def select_action(self, state: Game) -> Action:
        """Select a random valid action."""
        return random_action(state, self.rng)

    def get_action_callback(self) -> Callable[[Game], Action]:
        return self.select_action

    def __str__(self) -> str:
        return f"{self.name} (random)"
