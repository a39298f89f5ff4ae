"""
UCT Monte Carlo Tree Search with random rollouts.

Baseline opponent for the hybrid agent. Each iteration:
1. Select: descend with UCB1 while every action of the node has been tried
2. Expand: add one untried child
3. Rollout: play random moves to the end (or a ply limit)
4. Backup: credit each node's mover with the rollout result

UCB1 selection formula:
U(a) = Q(a) + c * sqrt(ln(sum_b N(b)) / N(a))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional
import math
import time
import numpy as np

from ..games.base import Game
from ..search.deepening import NoLegalMovesError
from ..search.scores import score_terminal
from .base import Agent


@dataclass
class UCTNode:
    """
    UCT tree node.

    Statistics are stored per action index; W is from the point of view
    of `mover`, the player choosing at this node.
    """

    state: Any
    actions: list
    mover: int

    N: np.ndarray = field(default=None)  # Visit counts
    W: np.ndarray = field(default=None)  # Total value

    # Child nodes (lazily created), keyed by action index
    children: Dict[int, UCTNode] = field(default_factory=dict)

    def __post_init__(self):
        if self.N is None:
            self.N = np.zeros(len(self.actions), dtype=np.float64)
        if self.W is None:
            self.W = np.zeros(len(self.actions), dtype=np.float64)

    @property
    def Q(self) -> np.ndarray:
        """Mean action value Q(a) = W(a) / N(a)."""
        with np.errstate(divide="ignore", invalid="ignore"):
            q = self.W / self.N
            q = np.nan_to_num(q, nan=0.0)
        return q

    @property
    def total_visits(self) -> int:
        return int(np.sum(self.N))

    @property
    def is_fully_expanded(self) -> bool:
        return len(self.children) == len(self.actions)

    def untried_index(self) -> int:
        """First action index without a child."""
        for index in range(len(self.actions)):
            if index not in self.children:
                return index
        return -1

    def best_index(self) -> int:
        """Most visited action index."""
        return int(np.argmax(self.N))

    def __repr__(self) -> str:
        return f"UCTNode(visits={self.total_visits}, children={len(self.children)})"


class UCTAgent(Agent):
    """
    UCT agent with uniformly random rollouts.

    Args:
        exploration: UCB1 exploration constant
        max_playout_depth: Ply limit per rollout (unfinished = draw)
        max_iterations: Iteration cap used when decide() gets no hint
            (-1 = bounded by time only)
        rng: Random generator
        clock: Time source in seconds
    """

    friendly_name = "UCT"

    def __init__(
        self,
        exploration: float = math.sqrt(2),
        max_playout_depth: int = 100,
        max_iterations: int = -1,
        rng: Optional[np.random.Generator] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        super().__init__()
        self.exploration = exploration
        self.max_playout_depth = max_playout_depth
        self.max_iterations = max_iterations
        self.rng = rng if rng is not None else np.random.default_rng()
        self.clock = clock
        self.last_iterations = 0

    def decide(
        self,
        game: Game,
        state: Any,
        max_seconds: float,
        max_iterations: int = -1,
        max_depth: int = -1,
    ) -> Any:
        root = self._make_node(game, game.copy_state(state))
        if not root.actions:
            raise NoLegalMovesError("No legal moves available")

        limit = max_iterations if max_iterations > 0 else self.max_iterations
        start = self.clock()
        iterations = 0
        while True:
            self._iterate(game, root)
            iterations += 1
            if limit > 0 and iterations >= limit:
                break
            if self.clock() - start >= max_seconds:
                break

        self.last_iterations = iterations
        return root.actions[root.best_index()]

    def _iterate(self, game: Game, root: UCTNode) -> None:
        """Run one select -> expand -> rollout -> backup pass."""
        node = root
        path = []

        # Selection
        while node.actions and node.is_fully_expanded:
            index = self._select_index(node)
            path.append((node, index))
            node = node.children[index]

        # Expansion
        if node.actions:
            index = node.untried_index()
            child_state = game.next_state(node.state, node.actions[index])
            child = self._make_node(game, child_state)
            node.children[index] = child
            path.append((node, index))
            node = child

        winners = self._rollout(game, node.state)
        self._backup(game, path, winners)

    def _select_index(self, node: UCTNode) -> int:
        """Select action index using UCB1."""
        log_total = math.log(node.total_visits)
        ucb = node.Q + self.exploration * np.sqrt(log_total / node.N)
        return int(np.argmax(ucb))

    def _rollout(self, game: Game, state: Any) -> Any:
        """Play random moves from a copy of `state`; return the final state."""
        current = game.copy_state(state)
        depth = 0
        while not game.is_terminal(current) and depth < self.max_playout_depth:
            actions = game.legal_actions(current)
            if not actions:
                break
            action = actions[int(self.rng.integers(len(actions)))]
            current = game.apply_action(current, action)
            depth += 1
        return current

    def _backup(self, game: Game, path: list, final_state: Any) -> None:
        for node, index in path:
            node.N[index] += 1
            node.W[index] += score_terminal(game, final_state, node.mover)

    def _make_node(self, game: Game, state: Any) -> UCTNode:
        mover = game.current_player(state)
        if game.is_terminal(state):
            actions = []
        elif game.is_alternating:
            actions = game.legal_actions(state)
        else:
            actions = game.legal_actions_for(state, mover)
        return UCTNode(state=state, actions=actions, mover=mover)
