"""
Progress Modes

How successive progress reports combine into a goal's current value,
and the heuristics that pick a mode from a goal description.
"""

from enum import Enum
from typing import Callable, Tuple

from .lexicon import UNIT_RUB, UNIT_REPS, UNIT_KG, UNIT_USD, UNIT_EUR


class ProgressMode(Enum):
    """Rule for combining progress reports"""
    INCREMENT = "increment"  # sum reports
    ABSOLUTE = "absolute"  # latest report replaces the value
    BEST = "best"  # keep the maximum report


ACCUMULATION_STEMS = (
    "накоп", "коплю", "сбереж", "капитал", "доход", "выруч", "заработ",
    "руб", "₽", "$", "usd", "eur", "евро",
)

PERSONAL_BEST_STEMS = (
    "отжим", "подтяг", "присед", "повтор", "рекорд", "максимум", "макс",
    "жим", "планк",
)


def _mentions(stems: Tuple[str, ...]) -> Callable[[str, str], bool]:
    return lambda text, unit: any(stem in text for stem in stems)


def _unit_in(*units: str) -> Callable[[str, str], bool]:
    return lambda text, unit: unit in units


# (predicate over lowercased text and unit, mode); first match wins
PROGRESS_MODE_RULES: Tuple[Tuple[Callable[[str, str], bool], ProgressMode], ...] = (
    (_mentions(ACCUMULATION_STEMS), ProgressMode.INCREMENT),
    (_mentions(PERSONAL_BEST_STEMS), ProgressMode.BEST),
    (_unit_in(UNIT_REPS, UNIT_KG), ProgressMode.BEST),
    (_unit_in(UNIT_RUB, UNIT_USD, UNIT_EUR), ProgressMode.INCREMENT),
)


def infer_progress_mode(text: str, unit: str) -> ProgressMode:
    """
    Infer the progress mode of a goal.

    Args:
        text: Goal description
        unit: Canonical unit already chosen for the goal

    Returns:
        ProgressMode, ABSOLUTE when no rule matches
    """
    lowered = text.lower()
    for predicate, mode in PROGRESS_MODE_RULES:
        if predicate(lowered, unit):
            return mode
    return ProgressMode.ABSOLUTE
