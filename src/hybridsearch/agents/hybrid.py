"""
Hybrid minimax / Monte Carlo agent.

Iterative-deepening alpha-beta search whose leaves are scored by averaging
random playouts instead of a handcrafted evaluation function. The only
game knowledge it needs is the Game interface: legal moves, move
application, terminality and winners.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Optional
import time
import numpy as np

from ..games.base import Game
from ..search import (
    AlphaBetaSearch,
    IterativeDeepening,
    LeafEvaluator,
    PlayoutSimulator,
    SearchResult,
)
from ..stats import StatisticsTracker
from ..utils.config import AgentConfig
from .base import Agent


class HybridMinimaxAgent(Agent):
    """
    Alpha-beta agent with playout-based leaf evaluation.

    Only the time budget bounds the search: decide() accepts
    max_iterations and max_depth for interface compatibility and ignores
    them.

    Args:
        config: Playout settings (default: AgentConfig())
        rng: Generator for playouts (default: process-wide generator)
        clock: Time source in seconds
    """

    friendly_name = "Hybrid Minimax-MCTS"

    def __init__(
        self,
        config: Optional[AgentConfig] = None,
        rng: Optional[np.random.Generator] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        super().__init__()
        self.config = config if config is not None else AgentConfig()
        self.rng = rng
        self.clock = clock

        self.stats = StatisticsTracker()
        self.last_result: Optional[SearchResult] = None

    # --- Configuration ---

    @property
    def evaluation_playouts(self) -> int:
        return self.config.evaluation_playouts

    def set_evaluation_playouts(self, evaluation_playouts: int) -> None:
        self.config = replace(self.config, evaluation_playouts=evaluation_playouts)

    @property
    def max_playout_depth(self) -> int:
        return self.config.max_playout_depth

    def set_max_playout_depth(self, max_playout_depth: int) -> None:
        self.config = replace(self.config, max_playout_depth=max_playout_depth)

    # --- Agent interface ---

    def initialize(self, game: Game, player: int) -> None:
        super().initialize(game, player)
        self.stats.clear()
        self.last_result = None

    def decide(
        self,
        game: Game,
        state: Any,
        max_seconds: float,
        max_iterations: int = -1,
        max_depth: int = -1,
    ) -> Any:
        return self.search(game, state, max_seconds).move

    def search(self, game: Game, state: Any, max_seconds: float) -> SearchResult:
        """Run one timed decision and return the full result."""
        self._require_initialized()
        controller = self.build_controller(game)
        self.last_result = controller.run(state, max_seconds)
        return self.last_result

    def build_controller(self, game: Game) -> IterativeDeepening:
        """Assemble the search stack for the bound player."""
        simulator = PlayoutSimulator(
            game,
            self.player,
            evaluation_playouts=self.config.evaluation_playouts,
            max_playout_depth=self.config.max_playout_depth,
            rng=self.rng,
        )
        evaluator = LeafEvaluator(game, self.player, simulator)
        engine = AlphaBetaSearch(game, self.player, evaluator)
        return IterativeDeepening(engine, stats=self.stats, clock=self.clock)

    # --- Diagnostics ---

    @property
    def first_reached_depth(self) -> int:
        return self.stats.first_reached_depth

    @property
    def mean_reached_depth(self) -> float:
        return self.stats.mean_reached_depth

    @property
    def mean_spent_time_seconds(self) -> float:
        return self.stats.mean_spent_time_seconds
