"""
Per-decision search statistics.

One DecisionRecord is appended for every decision an agent makes. The
list grows for the lifetime of a match and is cleared when the agent is
re-initialized.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
import numpy as np


class EmptyStatisticsError(LookupError):
    """Raised when statistics are queried before any decision was recorded."""


@dataclass(frozen=True)
class DecisionRecord:
    """Outcome of one decision: completed search depth and wall time."""

    reached_depth: int
    elapsed_millis: int

    def __post_init__(self):
        if self.reached_depth < 0:
            raise ValueError("reached_depth must be non-negative")
        if self.elapsed_millis < 0:
            raise ValueError("elapsed_millis must be non-negative")


class StatisticsTracker:
    """Append-only sequence of DecisionRecords with summary queries."""

    def __init__(self):
        self._records: list[DecisionRecord] = []

    def record(self, reached_depth: int, elapsed_millis: int) -> DecisionRecord:
        """Append a record and return it."""
        entry = DecisionRecord(reached_depth, elapsed_millis)
        self._records.append(entry)
        return entry

    def clear(self) -> None:
        self._records.clear()

    @property
    def records(self) -> tuple[DecisionRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    @property
    def first_reached_depth(self) -> int:
        """Depth reached by the first recorded decision."""
        self._require_records()
        return self._records[0].reached_depth

    @property
    def mean_reached_depth(self) -> float:
        self._require_records()
        return float(np.mean([r.reached_depth for r in self._records]))

    @property
    def mean_spent_time_seconds(self) -> float:
        self._require_records()
        return float(np.mean([r.elapsed_millis for r in self._records])) / 1000.0

    def summary(self) -> dict:
        """Summary dict for logging (empty if nothing was recorded)."""
        if not self._records:
            return {}
        return {
            "decisions": len(self._records),
            "first_reached_depth": self.first_reached_depth,
            "mean_reached_depth": self.mean_reached_depth,
            "mean_spent_time_seconds": self.mean_spent_time_seconds,
            "records": [asdict(r) for r in self._records],
        }

    def _require_records(self) -> None:
        if not self._records:
            raise EmptyStatisticsError("No decisions have been recorded")
