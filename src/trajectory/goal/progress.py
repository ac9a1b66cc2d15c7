"""
Progress Tracker

Computes progress percentages and combines progress reports into a
goal's current value according to its progress mode.
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any, List, Optional

from .modes import ProgressMode
from .parser import ParsedGoal


logger = logging.getLogger(__name__)


def _is_finite(value) -> bool:
    try:
        return math.isfinite(value)
    except (TypeError, OverflowError):
        return False


def calc_progress_percent(current: float, target: float) -> int:
    """
    Percentage of a target reached, clamped to [0, 100].

    Non-finite inputs give 0. A target of zero or below counts as 1 and
    negative progress counts as 0.
    """
    if not _is_finite(current) or not _is_finite(target):
        return 0
    safe_target = target if target > 0 else 1
    normalized_current = max(0, current)
    ratio = normalized_current / safe_target * 100
    if not math.isfinite(ratio):
        return 100
    raw = math.floor(ratio + 0.5)
    return max(0, min(100, raw))


def apply_progress(current: float, reported: float, mode: ProgressMode) -> float:
    """
    Combine a progress report with the stored value.

    Args:
        current: Value stored so far
        reported: Newly reported value
        mode: How the goal accumulates progress

    Returns:
        New stored value, never negative. A non-finite report leaves the
        stored value unchanged.
    """
    if not _is_finite(current):
        current = 0.0
    if not _is_finite(reported):
        return max(0.0, current)

    if mode == ProgressMode.INCREMENT:
        value = current + reported
    elif mode == ProgressMode.BEST:
        value = max(current, reported)
    else:
        value = reported
    return max(0.0, value)


@dataclass
class ProgressEntry:
    """A single progress report"""
    reported: float
    value: float
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reported": self.reported,
            "value": self.value,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProgressEntry":
        data = data.copy()
        data["timestamp"] = datetime.fromisoformat(data["timestamp"])
        return cls(**data)


@dataclass
class ProgressSnapshot:
    """Complete progress state of one goal"""
    goal_title: str
    target_value: float
    unit: str
    progress_mode: ProgressMode
    current_value: float = 0.0
    entries: List[ProgressEntry] = field(default_factory=list)
    completed_at: Optional[datetime] = None

    @property
    def progress_percent(self) -> int:
        return calc_progress_percent(self.current_value, self.target_value)

    @property
    def is_completed(self) -> bool:
        return self.current_value >= self.target_value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "goal_title": self.goal_title,
            "target_value": self.target_value,
            "unit": self.unit,
            "progress_mode": self.progress_mode.value,
            "current_value": self.current_value,
            "progress_percent": self.progress_percent,
            "entries": [e.to_dict() for e in self.entries],
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProgressSnapshot":
        data = data.copy()
        data["progress_mode"] = ProgressMode(data["progress_mode"])
        data["entries"] = [ProgressEntry.from_dict(e) for e in data.get("entries", [])]
        if data.get("completed_at"):
            data["completed_at"] = datetime.fromisoformat(data["completed_at"])
        # Remove computed properties
        data.pop("progress_percent", None)
        return cls(**data)


class ProgressTracker:
    """
    Tracks progress reports for a single goal.

    Each report is combined with the current value by the goal's
    progress mode and kept in the history.
    """

    def __init__(
        self,
        title: str,
        target_value: float,
        unit: str,
        progress_mode: ProgressMode = ProgressMode.INCREMENT,
        current_value: float = 0.0,
    ):
        """
        Initialize tracker.

        Args:
            title: Goal title
            target_value: Value at which the goal is reached
            unit: Canonical unit of the goal
            progress_mode: How reports combine
            current_value: Progress already made
        """
        if not _is_finite(target_value) or target_value <= 0:
            raise ValueError(f"Target value must be a positive number, got {target_value!r}")

        self._snapshot = ProgressSnapshot(
            goal_title=title,
            target_value=target_value,
            unit=unit,
            progress_mode=progress_mode,
            current_value=max(0.0, current_value) if _is_finite(current_value) else 0.0,
        )

    @classmethod
    def from_parsed(cls, goal: ParsedGoal, current_value: float = 0.0) -> "ProgressTracker":
        """Create a tracker for a parsed goal; a missing target counts as 1."""
        return cls(
            title=goal.title,
            target_value=goal.target_value or 1,
            unit=goal.unit,
            progress_mode=goal.progress_mode,
            current_value=current_value,
        )

    @classmethod
    def from_snapshot(cls, snapshot: ProgressSnapshot) -> "ProgressTracker":
        tracker = cls(
            title=snapshot.goal_title,
            target_value=snapshot.target_value,
            unit=snapshot.unit,
            progress_mode=snapshot.progress_mode,
        )
        tracker._snapshot = snapshot
        return tracker

    @property
    def snapshot(self) -> ProgressSnapshot:
        """Get current progress snapshot."""
        return self._snapshot

    @property
    def current_value(self) -> float:
        return self._snapshot.current_value

    @property
    def percent(self) -> int:
        return self._snapshot.progress_percent

    @property
    def is_completed(self) -> bool:
        return self._snapshot.is_completed

    def record(self, reported: float, timestamp: Optional[datetime] = None) -> ProgressEntry:
        """
        Record a progress report.

        Args:
            reported: Value reported by the user
            timestamp: When it was reported, defaults to now

        Returns:
            The created ProgressEntry
        """
        s = self._snapshot
        was_completed = s.is_completed
        s.current_value = apply_progress(s.current_value, reported, s.progress_mode)

        entry = ProgressEntry(
            reported=reported,
            value=s.current_value,
            timestamp=timestamp or datetime.now(),
        )
        s.entries.append(entry)

        if s.is_completed and not was_completed:
            s.completed_at = entry.timestamp
            logger.info(f"Goal completed: {s.goal_title}")
        elif not s.is_completed:
            s.completed_at = None

        logger.info(
            f"Progress for '{s.goal_title}': reported {reported}, "
            f"now {s.current_value:g}/{s.target_value:g} {s.unit} ({s.progress_percent}%)"
        )
        return entry

    def get_history(self, last_n: Optional[int] = None) -> List[ProgressEntry]:
        """
        Get report history.

        Args:
            last_n: Only return last N entries

        Returns:
            List of ProgressEntry
        """
        entries = self._snapshot.entries
        if last_n:
            return entries[-last_n:]
        return entries

    def get_summary(self) -> str:
        """Get a text summary of progress."""
        s = self._snapshot
        lines = [
            f"Goal: {s.goal_title}",
            f"Mode: {s.progress_mode.value}",
            f"Progress: {s.current_value:g}/{s.target_value:g} {s.unit} ({s.progress_percent}%)",
            f"Reports: {len(s.entries)}",
        ]

        if s.completed_at:
            lines.append(f"Completed: {s.completed_at.isoformat()}")

        return "\n".join(lines)
