"""Shared fixtures: small hand-built games for exercising the search."""

from __future__ import annotations

import itertools
from typing import Any, Union

import numpy as np
import pytest

from hybridsearch.games.base import Game, GameSpec
from hybridsearch.games.tictactoe import TicTacToeGame


WIN_0 = frozenset({0})
WIN_1 = frozenset({1})
DRAW = frozenset()

# A tree is either a list of subtrees or a frozenset of winners (terminal)
Tree = Union[list, frozenset]


class TreeGame(Game[tuple, int]):
    """
    Game over an explicit tree.

    States are paths (tuples of child indices) from the root. Player 0
    moves at even depths, player 1 at odd depths.
    """

    def __init__(self, tree: Tree):
        self.tree = tree
        self._spec = GameSpec(name="tree", board_shape=(1,), num_actions=0)

    @property
    def spec(self) -> GameSpec:
        return self._spec

    def node(self, path: tuple) -> Tree:
        node = self.tree
        for index in path:
            node = node[index]
        return node

    def initial_state(self) -> tuple:
        return ()

    def current_player(self, state: tuple) -> int:
        return len(state) % 2

    def legal_actions(self, state: tuple) -> list[int]:
        node = self.node(state)
        if isinstance(node, frozenset):
            return []
        return list(range(len(node)))

    def apply_action(self, state: tuple, action: int) -> tuple:
        if action not in self.legal_actions(state):
            raise ValueError(f"Illegal action {action}")
        return state + (action,)

    def is_terminal(self, state: tuple) -> bool:
        return isinstance(self.node(state), frozenset)

    def winners(self, state: tuple) -> frozenset[int]:
        node = self.node(state)
        return node if isinstance(node, frozenset) else frozenset()


class RaceGame(Game[dict, tuple]):
    """
    Non-alternating race: both players may move in any state.

    Actions are (player, step) with step 1 or 2; the first player to
    reach `target` wins.
    """

    is_alternating = False

    def __init__(self, target: int = 3):
        self.target = target
        self._spec = GameSpec(name="race", board_shape=(2,), num_actions=4)

    @property
    def spec(self) -> GameSpec:
        return self._spec

    def initial_state(self) -> dict:
        return {"counts": [0, 0], "turn": 0}

    def copy_state(self, state: dict) -> dict:
        return {"counts": list(state["counts"]), "turn": state["turn"]}

    def current_player(self, state: dict) -> int:
        return state["turn"] % 2

    def legal_actions(self, state: dict) -> list[tuple]:
        if self.is_terminal(state):
            return []
        return [(p, step) for p in (0, 1) for step in (1, 2)]

    def action_player(self, state: dict, action: tuple) -> int:
        return action[0]

    def apply_action(self, state: dict, action: tuple) -> dict:
        player, step = action
        state["counts"][player] += step
        state["turn"] += 1
        return state

    def is_terminal(self, state: dict) -> bool:
        return bool(self.winners(state))

    def winners(self, state: dict) -> frozenset[int]:
        return frozenset(
            p for p in (0, 1) if state["counts"][p] >= self.target
        )


class PathEvaluator:
    """Deterministic stand-in for playout evaluation on TreeGame."""

    def __init__(self, game: TreeGame, player: int = 0):
        self.game = game
        self.player = player

    def evaluate(self, state: tuple, maximizing: bool) -> float:
        winners = self.game.winners(state)
        if self.game.is_terminal(state):
            if self.player in winners:
                return 1.0
            return -1.0 if winners else 0.0
        return ((hash(state) % 201) - 100) / 100


def random_tree(rng: np.random.Generator, depth: int, branching: int) -> Tree:
    """Random tree with terminals at the bottom and some early terminals."""
    outcomes = [WIN_0, WIN_1, DRAW]
    if depth == 0 or rng.random() < 0.15:
        return outcomes[int(rng.integers(3))]
    width = int(rng.integers(1, branching + 1))
    return [random_tree(rng, depth - 1, branching) for _ in range(width)]


def minimax(game: Game, evaluator: Any, state: Any, depth: int, maximizing: bool) -> float:
    """Plain minimax without pruning."""
    if depth == 0 or game.is_terminal(state):
        return evaluator.evaluate(state, maximizing)
    values = [
        minimax(game, evaluator, game.next_state(state, a), depth - 1, not maximizing)
        for a in game.legal_actions(state)
    ]
    return max(values) if maximizing else min(values)


class TickingClock:
    """Fake clock that advances by `step` seconds on every call."""

    def __init__(self, step: float = 1.0):
        self.step = step
        self._ticks = itertools.count()

    def __call__(self) -> float:
        return next(self._ticks) * self.step


@pytest.fixture
def tictactoe() -> TicTacToeGame:
    return TicTacToeGame()


@pytest.fixture
def one_winning_move(tictactoe):
    """
    X to move; only cell 8 wins on the spot.

     X | O | X
    -----------
     O | O | X
    -----------
     . | . | .
    """
    return tictactoe.from_string("XOX OOX ...")
