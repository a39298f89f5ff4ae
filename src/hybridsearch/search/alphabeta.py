"""
Depth-limited minimax with alpha-beta pruning.

Fail-hard variant: every node returns the extremum of the children it
actually searched, so a pruned node's value is a bound, never a clipped
window edge. Leaves (depth 0 or terminal) are scored by a LeafEvaluator.
"""

from __future__ import annotations

from typing import Any

from ..games.base import Game
from .evaluator import LeafEvaluator, starting_player
from .scores import MAX, MIN


class AlphaBetaSearch:
    """
    Alpha-beta minimax over a generic game tree.

    Scores a single subtree per call; choosing among root moves is left to
    the caller (see IterativeDeepening).

    Args:
        game: Game instance
        player: Agent's player identity (the maximizing side)
        evaluator: Object with evaluate(state, maximizing) -> float
    """

    def __init__(self, game: Game, player: int, evaluator: LeafEvaluator):
        self.game = game
        self.player = player
        self.evaluator = evaluator

        # Nodes visited since the last reset
        self.nodes = 0

    def search(
        self,
        state: Any,
        depth: int,
        alpha: float = MIN,
        beta: float = MAX,
        maximizing: bool = True,
    ) -> float:
        """
        Minimax value of `state` searched `depth` plies deep.

        Args:
            state: Position to search (not modified)
            depth: Remaining plies before leaf evaluation
            alpha: Best score the maximizer is already guaranteed
            beta: Best score the minimizer is already guaranteed
            maximizing: True if the agent's side is to move

        Returns:
            Backed-up score in [MIN, MAX]
        """
        self.nodes += 1
        game = self.game

        if depth == 0 or game.is_terminal(state):
            return self.evaluator.evaluate(state, maximizing)

        actions = self._actions(state, maximizing)

        if maximizing:
            max_value = MIN
            for action in actions:
                child = game.next_state(state, action)
                value = self.search(child, depth - 1, alpha, beta, False)
                max_value = max(max_value, value)
                if max_value >= beta:
                    break
                alpha = max(alpha, max_value)
            return max_value
        else:
            min_value = MAX
            for action in actions:
                child = game.next_state(state, action)
                value = self.search(child, depth - 1, alpha, beta, True)
                min_value = min(min_value, value)
                if min_value <= alpha:
                    break
                beta = min(beta, min_value)
            return min_value

    def actor_for(self, maximizing: bool) -> int:
        """Player treated as acting at a node with the given flag."""
        return starting_player(self.player, maximizing)

    def _actions(self, state: Any, maximizing: bool) -> list:
        if self.game.is_alternating:
            return self.game.legal_actions(state)
        return self.game.legal_actions_for(state, self.actor_for(maximizing))
