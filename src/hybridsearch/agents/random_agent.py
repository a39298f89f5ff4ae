from __future__ import annotations

from typing import Any, Optional
import numpy as np

from ..games.base import Game
from ..search.deepening import NoLegalMovesError
from .base import Agent


class RandomAgent(Agent):
    """Plays a uniformly random legal move."""

    def __init__(self, rng: Optional[np.random.Generator] = None):
        super().__init__()
        self.rng = rng if rng is not None else np.random.default_rng()

    def decide(
        self,
        game: Game,
        state: Any,
        max_seconds: float,
        max_iterations: int = -1,
        max_depth: int = -1,
    ) -> Any:
        if game.is_alternating:
            moves = game.legal_actions(state)
        else:
            moves = game.legal_actions_for(state, self.player)
        if not moves:
            raise NoLegalMovesError("No legal moves available")
        return moves[int(self.rng.integers(len(moves)))]
