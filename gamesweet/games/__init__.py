"""
Small concrete games used by the command-line player and the tests.
"""

from gamesweet.games.tictactoe import TicTacToe
from gamesweet.games.nim import Nim

GAMES = {
    "tictactoe": TicTacToe,
    "nim": Nim,
}

__all__ = ['TicTacToe', 'Nim', 'GAMES']
