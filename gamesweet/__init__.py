"""
gamesweet - a common interface for turn-based board games, with a
Monte Carlo Tree Search player and a random baseline.
"""

__version__ = "0.1.0"
__author__ = "gamesweet developers"

from loguru import logger

# Silent as a library; applications opt in through setup_logging()
logger.disable("gamesweet")

# Make key components available at package level
from gamesweet.core.game import Game
from gamesweet.core.match import MatchConfig, play_match
from gamesweet.mcts.search import choose_action
from gamesweet.agents import RandomAgent, random_action

# Version info as a tuple for programmatic access
VERSION_INFO = tuple(map(int, __version__.split('.')))
