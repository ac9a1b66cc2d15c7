"""
Trajectory Goals - Goal input parsing and progress computation

Core of the "Траектория" goal tracker:
- Free-text goal parsing ("Отжимания 100 раз", "накопить 50 тыс руб")
- Progress percentages
- Progress modes (increment, absolute, best)
- Goal form validation
"""

__version__ = "1.0.0"

from .goal.config import GoalConfig
from .goal.modes import ProgressMode
from .goal.parser import GoalInputParser, ParsedGoal, parse_goal_input
from .goal.progress import ProgressTracker, apply_progress, calc_progress_percent
from .goal.validator import GoalFormValidator, GoalForm, GoalDraft

__all__ = [
    "GoalConfig",
    "ProgressMode",
    "GoalInputParser",
    "ParsedGoal",
    "parse_goal_input",
    "ProgressTracker",
    "apply_progress",
    "calc_progress_percent",
    "GoalFormValidator",
    "GoalForm",
    "GoalDraft",
]
