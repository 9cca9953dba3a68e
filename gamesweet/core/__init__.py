"""
gamesweet core package

This package contains the game-facing pieces that are independent of any
search algorithm:
- The abstract Game interface
- Match orchestration between two policies
"""

from gamesweet.core.game import Game, Player, Action
from gamesweet.core.match import (
    MatchConfig, MatchResult, IllegalActionError, Policy, play_match
)

__all__ = [
    'Game', 'Player', 'Action',
    'MatchConfig', 'MatchResult', 'IllegalActionError', 'Policy', 'play_match'
]
