"""
Goal Form Validator

Validates a goal creation form and merges the fields the user typed
explicitly with what the parser infers from the goal title.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Union

from .modes import ProgressMode
from .parser import GoalInputParser, ParsedGoal
from .units import resolve_unit_token


Number = Union[int, float]

NUMBER_PATTERN = re.compile(r"^[+-]?(?:[0-9]+(?:[.,][0-9]*)?|[.,][0-9]+)")

TITLE_REQUIRED = "Введите название цели"
TARGET_REQUIRED = 'Укажите число в поле "Цель" или в названии (например: "Отжимания 100 раз")'
CURRENT_INVALID = "Введите корректный прогресс"
MODE_INVALID = "Неизвестный режим прогресса"


@dataclass
class GoalForm:
    """Raw values of the goal creation form"""
    title: str
    target_value: Union[str, Number, None] = ""
    current_value: Union[str, Number, None] = "0"
    unit: str = ""
    progress_mode: Union[str, ProgressMode, None] = None


@dataclass
class GoalDraft:
    """Merged goal values ready to be stored"""
    title: str
    target_value: float
    current_value: float
    unit: str
    progress_mode: ProgressMode

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "targetValue": self.target_value,
            "currentValue": self.current_value,
            "unit": self.unit,
            "progressMode": self.progress_mode.value,
        }


@dataclass
class ValidationResult:
    """Form validation result"""
    errors: Dict[str, str] = field(default_factory=dict)
    parsed: Optional[ParsedGoal] = None

    @property
    def is_valid(self) -> bool:
        return not self.errors


def parse_number(value: Union[str, Number, None]) -> Optional[float]:
    """
    Read a number typed into a form field.

    Accepts a leading number followed by anything ("12 км" -> 12.0) and
    a comma as decimal separator. Returns None when no finite number is
    present.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return float(value) if math.isfinite(value) else None
        except OverflowError:
            return None

    match = NUMBER_PATTERN.match(str(value).strip())
    if not match:
        return None
    number = float(match.group(0).replace(",", "."))
    return number if math.isfinite(number) else None


class GoalFormValidator:
    """
    Validates goal forms.

    Explicit form values win over parsed ones; the parser fills in
    whatever the user left blank.
    """

    def __init__(self, parser: Optional[GoalInputParser] = None):
        self.parser = parser or GoalInputParser()

    def validate(self, form: GoalForm) -> ValidationResult:
        """
        Validate a goal form.

        Args:
            form: Form values

        Returns:
            ValidationResult with one message per invalid field
        """
        parsed = self.parser.parse(form.title or "")
        errors: Dict[str, str] = {}

        if not (form.title or "").strip():
            errors["title"] = TITLE_REQUIRED

        if self._resolve_target(form, parsed) is None:
            errors["target_value"] = TARGET_REQUIRED

        current = self._typed_current(form)
        if current is None or current < 0:
            errors["current_value"] = CURRENT_INVALID

        if form.progress_mode and self._explicit_mode(form) is None:
            errors["progress_mode"] = MODE_INVALID

        return ValidationResult(errors=errors, parsed=parsed)

    def build(self, form: GoalForm) -> GoalDraft:
        """
        Merge form values with parser inference.

        Args:
            form: Form values

        Returns:
            GoalDraft

        Raises:
            ValueError: If the form is invalid
        """
        result = self.validate(form)
        if not result.is_valid:
            details = "; ".join(f"{k}: {v}" for k, v in result.errors.items())
            raise ValueError(f"Invalid goal form: {details}")

        parsed = result.parsed
        target = self._resolve_target(form, parsed) or 1
        current = max(0.0, min(self._typed_current(form) or 0.0, target))

        typed_unit = (form.unit or "").strip()
        unit = resolve_unit_token(typed_unit, tolerance=0) or typed_unit or parsed.unit

        return GoalDraft(
            title=(parsed.title or form.title).strip(),
            target_value=target,
            current_value=current,
            unit=unit,
            progress_mode=self._explicit_mode(form) or parsed.progress_mode,
        )

    def _resolve_target(self, form: GoalForm, parsed: ParsedGoal) -> Optional[float]:
        typed = parse_number(form.target_value)
        if typed is not None and typed > 0:
            return typed
        if parsed.target_value is not None:
            return float(parsed.target_value)
        return None

    def _typed_current(self, form: GoalForm) -> Optional[float]:
        if form.current_value is None or form.current_value == "":
            return 0.0
        return parse_number(form.current_value)

    def _explicit_mode(self, form: GoalForm) -> Optional[ProgressMode]:
        if isinstance(form.progress_mode, ProgressMode):
            return form.progress_mode
        try:
            return ProgressMode(str(form.progress_mode).strip().lower())
        except ValueError:
            return None
