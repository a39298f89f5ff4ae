"""
Score scale shared by the search and the leaf evaluation.

All scores are from the searching agent's point of view and lie in
[MIN, MAX].
"""

from __future__ import annotations

from typing import Any

from ..games.base import Game


MAX = 1.0
MIN = -MAX
NEUTRAL = (MIN + MAX) / 2


def score_terminal(game: Game, state: Any, player: int) -> float:
    """
    Score a state by its winner set.

    Returns MAX if `player` won, MIN if someone else won and NEUTRAL when
    nobody has won. The winner set of an unfinished game is empty, so a
    state that is not actually over scores NEUTRAL.
    """
    winners = game.winners(state)
    if player in winners:
        return MAX
    if winners:
        return MIN
    return NEUTRAL
