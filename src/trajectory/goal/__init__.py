"""Goal Input Parsing and Progress"""

from .config import GoalConfig
from .modes import ProgressMode, infer_progress_mode
from .parser import GoalInputParser, ParsedGoal, parse_goal_input
from .progress import (
    ProgressTracker,
    ProgressSnapshot,
    ProgressEntry,
    apply_progress,
    calc_progress_percent,
)
from .validator import GoalFormValidator, GoalForm, GoalDraft, ValidationResult

__all__ = [
    "GoalConfig",
    "ProgressMode",
    "infer_progress_mode",
    "GoalInputParser",
    "ParsedGoal",
    "parse_goal_input",
    "ProgressTracker",
    "ProgressSnapshot",
    "ProgressEntry",
    "apply_progress",
    "calc_progress_percent",
    "GoalFormValidator",
    "GoalForm",
    "GoalDraft",
    "ValidationResult",
]
