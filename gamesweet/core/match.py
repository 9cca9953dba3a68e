"""
Match orchestration.

This module runs a game between two policies: it alternates turns, prints
the state before every move, retries actions the game rejects and reports
the winner at the end.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from loguru import logger
from rich.console import Console

from gamesweet.core.game import Action, Game, Player

# A policy maps a game state to the action its player wants to play
Policy = Callable[[Game], Action]


class IllegalActionError(ValueError):
    """A policy kept proposing actions the game rejected."""


class MatchConfig:
    """
    Pairing of two players with the policies that choose their moves.
    """

    def __init__(self, player1: Tuple[Player, Policy], player2: Tuple[Player, Policy]):
        """
        Create a match configuration.

        Args:
            player1: (player, policy) for the first player
            player2: (player, policy) for the second player
        """
        if player1[0] == player2[0]:
            raise ValueError(f"Both seats are assigned to player {player1[0]}")
        self.player1 = player1
        self.player2 = player2

    def turn(self, game: Game) -> Action:
        """
        Get an action from the policy of the player to move.

        Args:
            game: Current game state

        Returns:
            Action proposed by that player's policy
        """
        player = game.current_player()
        if self.player1[0] == player:
            return self.player1[1](game)
        elif self.player2[0] == player:
            return self.player2[1](game)
        raise ValueError(f"No policy configured for player {player}")


@dataclass
class MatchResult:
    """Outcome of a finished match."""
    winner: Optional[Player]
    turns: int

    @property
    def is_draw(self) -> bool:
        return self.winner is None


def play_match(
    game: Game,
    config: MatchConfig,
    console: Optional[Console] = None,
    max_attempts: int = 100
) -> MatchResult:
    """
    Play a game to the end.

    Args:
        game: Initial game state (mutated in place)
        config: Players and their policies
        console: Console to print the game on (None = play quietly)
        max_attempts: Rejected actions tolerated per turn before giving up

    Returns:
        MatchResult with the winner and the number of turns played
    """
    turns = 0
    while not game.is_game_over():
        if console is not None:
            console.print(str(game), markup=False)

        for _ in range(max_attempts):
            if game.apply_action(config.turn(game)):
                break
            logger.error("could not play turn")
        else:
            raise IllegalActionError(
                f"Player {game.current_player()} failed to play a legal action "
                f"in {max_attempts} attempts"
            )
        turns += 1

    winner = game.get_winner()
    if console is not None:
        console.print(str(game), markup=False)
        if winner is not None:
            console.print(f"Winner: {winner}")
        else:
            console.print("It's a tie!")

    return MatchResult(winner=winner, turns=turns)
