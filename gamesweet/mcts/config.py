"""
Configuration for Monte Carlo Tree Search (MCTS).

This module defines the tunable constants of the search: the wall-clock
budget per decision, the progressive-widening threshold and the UCB1
exploration constant.
"""
from dataclasses import dataclass, fields
from typing import ClassVar


@dataclass
class MCTSConfig:
    """
    Configuration parameters for Monte Carlo Tree Search.

    This class defines all tunable parameters for the MCTS algorithm,
    with validation and sensible defaults.
    """
    time_limit: float = 0.995
    """Wall-clock search budget per decision, in seconds"""

    expansion_threshold: int = 3
    """A leaf is expanded once its simulation count exceeds this value"""

    exploration_weight: float = 1.414
    """UCB1 exploration constant C"""

    # Constants
    INFINITE_VALUE: ClassVar[float] = float('inf')
    """Priority of a node that has never been simulated"""

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.time_limit <= 0:
            raise ValueError("time_limit must be positive")

        if self.expansion_threshold < 0:
            raise ValueError("expansion_threshold must be non-negative")

        if self.exploration_weight <= 0:
            raise ValueError("exploration_weight must be positive")

    @classmethod
    def default(cls) -> 'MCTSConfig':
        """
        Get the default configuration.

        Returns:
            Default MCTSConfig object
        """
        return cls()

    @classmethod
    def fast(cls) -> 'MCTSConfig':
        """
        Get a configuration optimized for speed (short budget).

        Returns:
            Fast MCTSConfig object
        """
        return cls(time_limit=0.1)

    @classmethod
    def deep(cls) -> 'MCTSConfig':
        """
        Get a configuration optimized for deep search.

        Returns:
            Deep MCTSConfig object
        """
        return cls(
            time_limit=5.0,
            expansion_threshold=5,
            exploration_weight=1.2  # Slightly less exploration
        )

    @classmethod
    def from_dict(cls, config_dict: dict) -> 'MCTSConfig':
        """
        Create a configuration from a dictionary.

        Args:
            config_dict: Dictionary of configuration parameters

        Returns:
            MCTSConfig object
        """
        # Filter out any keys that aren't valid parameters
        names = {f.name for f in fields(cls)}
        valid_params = {k: v for k, v in config_dict.items() if k in names}
        return cls(**valid_params)

    def to_dict(self) -> dict:
        """
        Convert the configuration to a dictionary.

        Returns:
            Dictionary of configuration parameters
        """
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __str__(self) -> str:
        params = ", ".join(f"{name}={value}" for name, value in self.to_dict().items())
        return f"MCTSConfig({params})"
