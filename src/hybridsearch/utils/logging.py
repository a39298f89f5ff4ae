"""
Logging utilities with rich formatting.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Optional, Any

from rich.console import Console
from rich.table import Table
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    TimeElapsedColumn,
    MofNCompleteColumn,
)
from rich.panel import Panel


console = Console()


@dataclass
class MatchMetrics:
    """Metrics for one match."""

    game: str
    match_index: int
    hybrid_player: int
    opponent: str
    outcome: str  # "win", "loss", "draw" or "unfinished" for the hybrid agent
    steps: int
    first_reached_depth: Optional[int] = None
    mean_reached_depth: Optional[float] = None
    mean_spent_time_seconds: Optional[float] = None
    timestamp: str = ""

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now().isoformat()


class MatchLogger:
    """
    Match logger with rich output and JSON logging.

    Args:
        log_dir: Directory for log files (None = console only)
        verbose: Whether to print to console
    """

    def __init__(self, log_dir: Optional[str] = "runs", verbose: bool = True):
        self.verbose = verbose
        self.log_file: Optional[Path] = None

        if log_dir is not None:
            self.log_dir = Path(log_dir)
            self.log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.log_file = self.log_dir / f"match_{timestamp}.jsonl"

    def log_match(self, metrics: MatchMetrics) -> None:
        """Log metrics for one match."""
        # Write to JSON log
        if self.log_file is not None:
            with open(self.log_file, "a") as f:
                f.write(json.dumps(asdict(metrics)) + "\n")

        # Print to console
        if self.verbose:
            self._print_match(metrics)

    def _print_match(self, m: MatchMetrics) -> None:
        """Print match summary to console."""
        table = Table(title=f"{m.game} #{m.match_index}", show_header=False, box=None)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="white")

        styles = {"win": "green", "loss": "red", "draw": "yellow", "unfinished": "white"}
        table.add_row("Hybrid seat", f"Player {m.hybrid_player}")
        table.add_row("Opponent", m.opponent)
        table.add_row("Outcome", f"[{styles[m.outcome]}]{m.outcome}[/]")
        table.add_row("Steps", str(m.steps))

        if m.first_reached_depth is not None:
            table.add_row("First reached depth", str(m.first_reached_depth))
            table.add_row("Mean reached depth", f"{m.mean_reached_depth:.2f}")
            table.add_row("Mean spent time", f"{m.mean_spent_time_seconds:.3f}s")

        console.print(table)
        console.print()

    def log_message(self, message: str, style: str = "white") -> None:
        """Log a message."""
        if self.verbose:
            console.print(f"[{style}]{message}[/]")

    def log_info(self, message: str) -> None:
        """Log info message."""
        self.log_message(message, "blue")

    def log_success(self, message: str) -> None:
        """Log success message."""
        self.log_message(message, "green")

    def log_warning(self, message: str) -> None:
        """Log warning message."""
        self.log_message(message, "yellow")


def create_progress() -> Progress:
    """Create a rich progress bar with elapsed time."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_config(config: Any) -> None:
    """Print configuration in a nice format."""
    table = Table(title="Configuration", show_header=True)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="white")

    def add_dict(d: dict, prefix: str = "") -> None:
        for k, v in d.items():
            key = f"{prefix}{k}" if prefix else k
            if isinstance(v, dict):
                add_dict(v, f"{key}.")
            else:
                table.add_row(key, str(v))

    add_dict(asdict(config))
    console.print(table)


def print_board(board_str: str, title: str = "Board") -> None:
    """Print a game board in a panel."""
    console.print(Panel(board_str, title=title, border_style="blue"))
