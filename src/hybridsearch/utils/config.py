"""
Configuration management for the hybrid search agent and match runner.

Uses dataclasses for clean configuration with sensible defaults.
Supports loading from YAML files.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Optional
import yaml


@dataclass
class AgentConfig:
    """Hybrid agent configuration."""

    evaluation_playouts: int = 25  # Playouts averaged per leaf
    max_playout_depth: int = 50    # Plies before a playout is cut off

    def __post_init__(self):
        if self.evaluation_playouts < 1:
            raise ValueError("evaluation_playouts must be at least 1")
        if self.max_playout_depth < 0:
            raise ValueError("max_playout_depth must be non-negative")


@dataclass
class UCTConfig:
    """Baseline UCT opponent configuration."""

    exploration: float = 1.4142135623730951  # sqrt(2)
    max_iterations: int = -1  # -1 = bounded by time only
    max_playout_depth: int = 100


@dataclass
class MatchConfig:
    """Match series configuration."""

    games: list[str] = field(default_factory=lambda: ["tictactoe", "connect4"])
    num_games: int = 20
    max_steps: int = 100
    thinking_time: float = 5.0
    opponent: str = "uct"

    def __post_init__(self):
        if self.num_games < 1:
            raise ValueError("num_games must be at least 1")
        if self.thinking_time < 0:
            raise ValueError("thinking_time must be non-negative")
        if self.opponent not in ("uct", "random"):
            raise ValueError(f"Unknown opponent '{self.opponent}'. Available: uct, random")


@dataclass
class Config:
    """Full configuration."""

    # Component configs
    agent: AgentConfig = field(default_factory=AgentConfig)
    uct: UCTConfig = field(default_factory=UCTConfig)
    match: MatchConfig = field(default_factory=MatchConfig)

    # Global settings
    log_dir: str = "runs"

    # Random seed (None = unseeded)
    seed: Optional[int] = 42

    def save(self, path: str) -> None:
        """Save config to YAML file."""
        with open(path, "w") as f:
            yaml.dump(asdict(self), f, default_flow_style=False)

    @classmethod
    def load(cls, path: str) -> Config:
        """Load config from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        # Parse nested configs; unknown keys surface as TypeError
        try:
            return cls(
                agent=AgentConfig(**data.get("agent", {})),
                uct=UCTConfig(**data.get("uct", {})),
                match=MatchConfig(**data.get("match", {})),
                log_dir=data.get("log_dir", "runs"),
                seed=data.get("seed", 42),
            )
        except TypeError as e:
            raise ValueError(f"Invalid config {path}: {e}") from None


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
