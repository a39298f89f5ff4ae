"""
Iterative deepening under a wall-clock budget.

Each iteration runs a complete root search one ply deeper than the last.
A started iteration is never interrupted; before starting another one the
controller extrapolates its cost from the growth between the last two
iterations:

    predicted = spent + last + (last - second_to_last)

and only starts it if the prediction fits in the budget. The first
iteration (depth 0) always runs, so a legal move is always returned, but
total time can overshoot the budget.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple
import time

from ..stats import StatisticsTracker
from .alphabeta import AlphaBetaSearch
from .scores import MAX, MIN


class NoLegalMovesError(ValueError):
    """Raised when asked to choose a move in a position with none."""


@dataclass
class SearchResult:
    """Result of one decision."""

    move: Any
    score: float
    depth: int  # Completed iterations
    elapsed_seconds: float
    iteration_times: list[float] = field(default_factory=list)
    nodes: int = 0

    @property
    def elapsed_millis(self) -> int:
        return int(self.elapsed_seconds * 1000)


def predicted_total(spent: float, last: float, second_to_last: float) -> float:
    """Extrapolated cumulative time after one more iteration."""
    return spent + last + (last - second_to_last)


class IterativeDeepening:
    """
    Drives AlphaBetaSearch with increasing depth until the budget runs out.

    Args:
        search: Alpha-beta engine bound to the agent's player
        stats: Optional tracker; one DecisionRecord is appended per run()
        clock: Monotonic time source in seconds
    """

    def __init__(
        self,
        search: AlphaBetaSearch,
        stats: Optional[StatisticsTracker] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.search = search
        self.stats = stats
        self.clock = clock

    @property
    def game(self):
        return self.search.game

    def root_actions(self, state: Any) -> list:
        """Agent's legal moves at the root."""
        game = self.game
        if game.is_alternating:
            actions = game.legal_actions(state)
        else:
            actions = game.legal_actions_for(state, self.search.player)
        if not actions:
            raise NoLegalMovesError("No legal moves available")
        return actions

    def run(self, state: Any, max_seconds: float) -> SearchResult:
        """
        Search `state` as deep as the budget allows.

        Args:
            state: Root position (not modified)
            max_seconds: Time budget; only consulted between iterations

        Returns:
            SearchResult of the deepest completed iteration
        """
        if max_seconds < 0:
            raise ValueError("max_seconds must be non-negative")

        actions = self.root_actions(state)
        self.search.nodes = 0

        start = self.clock()
        spent = 0.0
        iteration_time = 0.0
        last_iteration_time = 0.0
        depth = 0
        iteration_times = []

        best_move, best_score = actions[0], MIN
        while predicted_total(spent, iteration_time, last_iteration_time) <= max_seconds:
            last_iteration_time = iteration_time
            iteration_start = self.clock()

            best_move, best_score = self.search_depth(state, depth, actions)

            depth += 1
            now = self.clock()
            iteration_time = now - iteration_start
            spent = now - start
            iteration_times.append(iteration_time)

        result = SearchResult(
            move=best_move,
            score=best_score,
            depth=depth,
            elapsed_seconds=spent,
            iteration_times=iteration_times,
            nodes=self.search.nodes,
        )
        if self.stats is not None:
            self.stats.record(result.depth, result.elapsed_millis)
        return result

    def search_depth(
        self,
        state: Any,
        depth: int,
        actions: Optional[list] = None,
    ) -> Tuple[Any, float]:
        """
        One full root iteration at a fixed depth.

        Every root move gets its own full window. Only a strictly better
        score replaces the current best, so ties keep the earliest move.

        Returns:
            (best_move, best_score)
        """
        if actions is None:
            actions = self.root_actions(state)

        best_move = actions[0]
        best_score = MIN
        for action in actions:
            child = self.game.next_state(state, action)
            score = self.search.search(child, depth, MIN, MAX, False)
            if score > best_score:
                best_move = action
                best_score = score
        return best_move, best_score
