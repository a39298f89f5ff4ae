"""
Random playout simulation.

A playout plays uniformly random legal moves from a position until the
game ends or a ply limit is reached, then scores the final position by its
winners. Averaging many playouts gives a cheap, heuristic-free estimate of
a position's value.
"""

from __future__ import annotations

from typing import Any, Optional
import numpy as np

from ..games.base import Game, opponent_of
from .scores import score_terminal


DEFAULT_EVALUATION_PLAYOUTS = 25
DEFAULT_MAX_PLAYOUT_DEPTH = 50

# Process-wide generator used when no explicit one is supplied
_default_rng = np.random.default_rng()


def default_rng() -> np.random.Generator:
    """Return the process-wide playout generator."""
    return _default_rng


class PlayoutSimulator:
    """
    Estimates position values by averaging random playouts.

    Args:
        game: Game instance
        player: Player whose point of view scores are given from
        evaluation_playouts: Number of playouts averaged per estimate
        max_playout_depth: Maximum plies per playout
        rng: Random generator (default: process-wide generator)
    """

    def __init__(
        self,
        game: Game,
        player: int,
        evaluation_playouts: int = DEFAULT_EVALUATION_PLAYOUTS,
        max_playout_depth: int = DEFAULT_MAX_PLAYOUT_DEPTH,
        rng: Optional[np.random.Generator] = None,
    ):
        if evaluation_playouts < 1:
            raise ValueError("evaluation_playouts must be at least 1")
        if max_playout_depth < 0:
            raise ValueError("max_playout_depth must be non-negative")

        self.game = game
        self.player = player
        self.evaluation_playouts = evaluation_playouts
        self.max_playout_depth = max_playout_depth
        self.rng = rng if rng is not None else default_rng()

        # Diagnostics
        self.playouts_run = 0

    def evaluate(self, state: Any, starting_player: int) -> float:
        """
        Average score of `evaluation_playouts` playouts from `state`.

        Args:
            state: Position to estimate (not modified)
            starting_player: Player assumed to move first in the playouts

        Returns:
            Mean playout score in [MIN, MAX]
        """
        total = 0.0
        for _ in range(self.evaluation_playouts):
            total += self.playout(state, starting_player)
        return total / self.evaluation_playouts

    def playout(self, state: Any, starting_player: int) -> float:
        """
        Play one random game from a copy of `state` and score the result.

        The acting player is complemented after every move. A playout cut
        off by max_playout_depth is scored like any other final state, so
        an unfinished game counts as NEUTRAL.
        """
        game = self.game
        current = game.copy_state(state)
        mover = starting_player
        depth = 0

        while not game.is_terminal(current) and depth < self.max_playout_depth:
            action = self._random_action(current, mover)
            if action is None:
                break
            current = game.apply_action(current, action)
            mover = opponent_of(mover)
            depth += 1

        self.playouts_run += 1
        return score_terminal(game, current, self.player)

    def _random_action(self, state: Any, mover: int) -> Optional[Any]:
        """Uniformly random legal action for `mover`, or None if there is none."""
        if self.game.is_alternating:
            actions = self.game.legal_actions(state)
        else:
            actions = self.game.legal_actions_for(state, mover)

        if not actions:
            return None
        return actions[int(self.rng.integers(len(actions)))]
