from __future__ import annotations

import abc
from typing import Any, Optional

from ..games.base import Game


class Agent(abc.ABC):
    """
    A game-playing agent.

    The harness calls initialize() once per match, then decide() whenever
    it is the agent's turn.
    """

    friendly_name: Optional[str] = None

    def __init__(self):
        self.game: Optional[Game] = None
        self.player = -1

    def initialize(self, game: Game, player: int) -> None:
        """Bind the agent to a game and player for a new match."""
        self.game = game
        self.player = player

    @abc.abstractmethod
    def decide(
        self,
        game: Game,
        state: Any,
        max_seconds: float,
        max_iterations: int = -1,
        max_depth: int = -1,
    ) -> Any:
        """Return the action this agent wants to play in `state`."""

    @property
    def name(self) -> str:
        return self.friendly_name or self.__class__.__name__

    def _require_initialized(self) -> None:
        if self.player < 0:
            raise RuntimeError(f"{self.name} must be initialized before deciding")
