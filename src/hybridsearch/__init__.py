"""
Hybridsearch - Minimax search with Monte Carlo leaf evaluation.

Plays any two-player perfect-information game that implements the Game
interface, using iterative-deepening alpha-beta search whose leaves are
scored by averaging random playouts.

Supported games:
- Tic-Tac-Toe
- Connect 4

Usage:
    from hybridsearch.games import get_game
    from hybridsearch.agents import HybridMinimaxAgent

    game = get_game('tictactoe')
    agent = HybridMinimaxAgent()
    agent.initialize(game, player=0)
    move = agent.decide(game, game.initial_state(), max_seconds=1.0)

    print(agent.first_reached_depth, agent.mean_spent_time_seconds)
"""

__version__ = "0.1.0"

from . import games
from . import search
from . import agents
from . import eval

__all__ = [
    "games",
    "search",
    "agents",
    "eval",
    "__version__",
]
