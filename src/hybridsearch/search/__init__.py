"""
Hybrid minimax search: alpha-beta with playout-based leaf evaluation.
"""

from .scores import MAX, MIN, NEUTRAL, score_terminal
from .playout import PlayoutSimulator, default_rng
from .evaluator import LeafEvaluator, starting_player
from .alphabeta import AlphaBetaSearch
from .deepening import IterativeDeepening, NoLegalMovesError, SearchResult

__all__ = [
    "MAX",
    "MIN",
    "NEUTRAL",
    "score_terminal",
    "PlayoutSimulator",
    "default_rng",
    "LeafEvaluator",
    "starting_player",
    "AlphaBetaSearch",
    "IterativeDeepening",
    "NoLegalMovesError",
    "SearchResult",
]
