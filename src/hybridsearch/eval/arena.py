"""
Arena for evaluating the hybrid agent through head-to-head matches.

Plays a series of matches against an opponent agent, swapping seats every
game, and collects the hybrid agent's search statistics per match.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence

from ..agents.base import Agent
from ..agents.hybrid import HybridMinimaxAgent
from ..games.base import Game
from ..stats import EmptyStatisticsError
from ..utils.logging import MatchLogger, MatchMetrics


@dataclass
class MatchOutcome:
    """Result of a single match."""

    winners: frozenset[int]
    steps: int
    finished: bool
    moves: list = field(default_factory=list)

    def outcome_for(self, player: int) -> str:
        """'win', 'loss', 'draw' or 'unfinished' from `player`'s view."""
        if not self.finished:
            return "unfinished"
        if player in self.winners:
            return "win"
        if self.winners:
            return "loss"
        return "draw"


@dataclass
class ArenaResult:
    """Results from arena evaluation, from the hybrid agent's view."""

    wins: int
    losses: int
    draws: int
    unfinished: int
    total_games: int
    matches: list[MatchMetrics] = field(default_factory=list)

    @property
    def win_rate(self) -> float:
        return self.wins / self.total_games if self.total_games > 0 else 0.0

    @property
    def score(self) -> float:
        """Win rate counting draws as half."""
        return (self.wins + 0.5 * self.draws) / self.total_games if self.total_games > 0 else 0.0


def play_match(
    game: Game,
    agents: Sequence[Agent],
    max_steps: int = 100,
    thinking_time: float = 5.0,
    state: Optional[Any] = None,
) -> MatchOutcome:
    """
    Play one match.

    Args:
        game: Game instance
        agents: agents[p] plays as player p
        max_steps: Maximum number of moves before the match is abandoned
        thinking_time: Seconds per decision
        state: Starting position (default: game.initial_state())

    Returns:
        MatchOutcome
    """
    if len(agents) != 2:
        raise ValueError("A match needs exactly two agents")

    for player, agent in enumerate(agents):
        agent.initialize(game, player)

    if state is None:
        state = game.initial_state()

    moves = []
    steps = 0
    while not game.is_terminal(state) and steps < max_steps:
        agent = agents[game.current_player(state)]
        action = agent.decide(game, game.copy_state(state), thinking_time)
        state = game.next_state(state, action)
        moves.append(action)
        steps += 1

    finished = game.is_terminal(state)
    return MatchOutcome(
        winners=game.winners(state) if finished else frozenset(),
        steps=steps,
        finished=finished,
        moves=moves,
    )


class Arena:
    """
    Arena for hybrid-vs-opponent match series.

    Args:
        hybrid: The hybrid agent under evaluation
        opponent: Opponent agent
        max_steps: Move cap per match
        thinking_time: Seconds per decision for both agents
        logger: Optional logger receiving one MatchMetrics per match
    """

    def __init__(
        self,
        hybrid: HybridMinimaxAgent,
        opponent: Agent,
        max_steps: int = 100,
        thinking_time: float = 5.0,
        logger: Optional[MatchLogger] = None,
    ):
        self.hybrid = hybrid
        self.opponent = opponent
        self.max_steps = max_steps
        self.thinking_time = thinking_time
        self.logger = logger

    def evaluate(
        self,
        game: Game,
        num_games: int = 20,
        progress_callback: Callable[[int, str], None] = None,
    ) -> ArenaResult:
        """
        Play num_games matches, alternating who goes first.

        The hybrid agent plays as player 0 in even-numbered matches and as
        player 1 in odd-numbered ones.

        Args:
            game: Game instance
            num_games: Number of matches to play
            progress_callback: Optional callback(games_completed, outcome)

        Returns:
            ArenaResult from the hybrid agent's perspective
        """
        counts = {"win": 0, "loss": 0, "draw": 0, "unfinished": 0}
        matches = []

        for i in range(num_games):
            hybrid_player = i % 2
            agents = [self.opponent, self.opponent]
            agents[hybrid_player] = self.hybrid

            result = play_match(game, agents, self.max_steps, self.thinking_time)
            outcome = result.outcome_for(hybrid_player)
            counts[outcome] += 1

            metrics = self._metrics(game, i, hybrid_player, outcome, result.steps)
            matches.append(metrics)
            if self.logger is not None:
                self.logger.log_match(metrics)

            if progress_callback:
                progress_callback(i + 1, outcome)

        return ArenaResult(
            wins=counts["win"],
            losses=counts["loss"],
            draws=counts["draw"],
            unfinished=counts["unfinished"],
            total_games=num_games,
            matches=matches,
        )

    def _metrics(
        self,
        game: Game,
        index: int,
        hybrid_player: int,
        outcome: str,
        steps: int,
    ) -> MatchMetrics:
        metrics = MatchMetrics(
            game=game.name,
            match_index=index,
            hybrid_player=hybrid_player,
            opponent=self.opponent.name,
            outcome=outcome,
            steps=steps,
        )
        # The hybrid agent may not have moved at all (e.g. max_steps=0)
        try:
            metrics.first_reached_depth = self.hybrid.first_reached_depth
            metrics.mean_reached_depth = self.hybrid.mean_reached_depth
            metrics.mean_spent_time_seconds = self.hybrid.mean_spent_time_seconds
        except EmptyStatisticsError:
            pass
        return metrics
