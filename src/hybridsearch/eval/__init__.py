"""Evaluation module."""

from .arena import Arena, ArenaResult, MatchOutcome, play_match

__all__ = [
    "Arena",
    "ArenaResult",
    "MatchOutcome",
    "play_match",
]
