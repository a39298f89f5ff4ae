"""
Game-playing agents.
"""

from .base import Agent
from .hybrid import HybridMinimaxAgent
from .random_agent import RandomAgent
from .uct import UCTAgent, UCTNode

__all__ = [
    "Agent",
    "HybridMinimaxAgent",
    "RandomAgent",
    "UCTAgent",
    "UCTNode",
]
