#!/usr/bin/env python
"""
Command-line interface for watching agents play each other.

Example usage:
    # MCTS against a random player at tic-tac-toe
    gamesweet-play --game tictactoe --player1 mcts --player2 random

    # A quiet series of 50 Nim games between two MCTS agents
    gamesweet-play --game nim --player1 mcts --player2 mcts --games 50 --time-limit 0.05
"""
import argparse
import sys
from collections import Counter
from typing import Optional

from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from gamesweet.agents import RandomAgent
from gamesweet.core.match import MatchConfig, play_match
from gamesweet.games import GAMES
from gamesweet.mcts.agent import MCTSAgent
from gamesweet.mcts.config import MCTSConfig
from gamesweet.utils.logging import setup_logging


def parse_args(argv=None):
    """Parse command-line arguments for game configuration."""
    parser = argparse.ArgumentParser(description="Play a board game between two agents")

    # Game configuration
    parser.add_argument("--game", type=str, default="tictactoe",
                        choices=sorted(GAMES),
                        help="Game to play")
    parser.add_argument("--player1", type=str, default="mcts",
                        choices=["mcts", "random"],
                        help="Agent for the player who moves first")
    parser.add_argument("--player2", type=str, default="random",
                        choices=["mcts", "random"],
                        help="Agent for the player who moves second")
    parser.add_argument("--games", type=int, default=1,
                        help="Number of games to play (more than one plays quietly)")

    # MCTS configuration
    parser.add_argument("--time-limit", type=float, default=0.995,
                        help="MCTS search budget per move in seconds")
    parser.add_argument("--threshold", type=int, default=3,
                        help="Simulations before an MCTS leaf is expanded")
    parser.add_argument("--exploration", type=float, default=1.414,
                        help="UCB1 exploration constant")

    # Misc
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible games")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Minimum log level")
    parser.add_argument("--verbose", action="store_true",
                        help="Print MCTS search statistics after every move")

    return parser.parse_args(argv)


def create_agent(kind: str, name: str, args, seed: Optional[int], console: Console):
    """Create an agent based on command-line arguments."""
    if kind == "random":
        return RandomAgent(name=name, seed=seed)

    config = MCTSConfig(
        time_limit=args.time_limit,
        expansion_threshold=args.threshold,
        exploration_weight=args.exploration
    )
    return MCTSAgent(config=config, name=name, verbose=args.verbose, seed=seed, console=console)


def print_results(console: Console, results: Counter, agents: dict, total: int) -> None:
    """Print a summary table of a series."""
    table = Table(title=f"Results over {total} games")
    table.add_column("Player")
    table.add_column("Agent")
    table.add_column("Wins", justify="right")
    table.add_column("Win %", justify="right")

    for player, agent in agents.items():
        wins = results[player]
        table.add_row(str(player), agent.name, str(wins), f"{100 * wins / total:.1f}")
    table.add_row("-", "draws", str(results[None]), f"{100 * results[None] / total:.1f}")

    console.print(table)


def main(argv=None):
    """Main function."""
    args = parse_args(argv)
    setup_logging(level=args.log_level)
    console = Console()

    if args.games < 1:
        console.print("[red]Error:[/red] --games must be at least 1")
        sys.exit(1)

    game_cls = GAMES[args.game]
    first, second = game_cls.players
    seed2 = None if args.seed is None else args.seed + 1
    try:
        agents = {
            first: create_agent(args.player1, f"Player {first} ({args.player1})", args, args.seed, console),
            second: create_agent(args.player2, f"Player {second} ({args.player2})", args, seed2, console),
        }
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    config = MatchConfig(
        (first, agents[first].get_action_callback()),
        (second, agents[second].get_action_callback()),
    )

    try:
        if args.games == 1:
            play_match(game_cls(), config, console=console)
            return

        results = Counter()
        for _ in tqdm(range(args.games), desc=f"Playing {args.game}"):
            results[play_match(game_cls(), config).winner] += 1
        print_results(console, results, agents, args.games)
    except KeyboardInterrupt:
        console.print("\nGame interrupted by user.")
        sys.exit(0)


if __name__ == "__main__":
    main()
