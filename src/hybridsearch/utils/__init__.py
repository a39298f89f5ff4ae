"""Utilities module."""

from .config import (
    Config,
    AgentConfig,
    UCTConfig,
    MatchConfig,
    get_default_config,
)
from .seed import make_rng
from .logging import (
    MatchLogger,
    MatchMetrics,
    console,
    create_progress,
    print_config,
    print_board,
)

__all__ = [
    "Config",
    "AgentConfig",
    "UCTConfig",
    "MatchConfig",
    "get_default_config",
    "make_rng",
    "MatchLogger",
    "MatchMetrics",
    "console",
    "create_progress",
    "print_config",
    "print_board",
]
