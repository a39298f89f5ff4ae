"""
Leaf evaluation for the alpha-beta search.

Terminal leaves are scored exactly from their winner set. Leaves cut off
by the depth limit are estimated with random playouts.
"""

from __future__ import annotations

from typing import Any

from ..games.base import Game, opponent_of
from .playout import PlayoutSimulator
from .scores import score_terminal


def starting_player(player: int, maximizing: bool) -> int:
    """
    Map the search's maximizing flag to the player assumed to move next.

    The maximizing side is the agent, the minimizing side its opponent.
    This only holds for two-player games with strict alternation; the
    flag carries no information about the actual mover in other games.
    """
    return player if maximizing else opponent_of(player)


class LeafEvaluator:
    """
    Scores positions where the search stops.

    Args:
        game: Game instance
        player: Agent's player identity
        simulator: Playout simulator used for non-terminal leaves
    """

    def __init__(self, game: Game, player: int, simulator: PlayoutSimulator):
        self.game = game
        self.player = player
        self.simulator = simulator

    def evaluate(self, state: Any, maximizing: bool) -> float:
        if self.game.is_terminal(state):
            return score_terminal(self.game, state, self.player)
        return self.simulator.evaluate(state, starting_player(self.player, maximizing))
