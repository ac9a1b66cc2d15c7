"""
Tests for goal form validation

Tests:
1. test_build_from_title_only
2. test_typed_target_wins
3. test_missing_target
4. test_current_clamped
5. test_invalid_fields
"""

import pytest

from trajectory.goal.modes import ProgressMode
from trajectory.goal.validator import GoalForm, GoalFormValidator, parse_number


class TestGoalFormBuild:
    """Tests for merging form values with parsed values"""

    def test_build_from_title_only(self, validator):
        draft = validator.build(GoalForm(title="Отжимания 100 раз"))

        assert draft.title == "Отжимания"
        assert draft.target_value == 100
        assert draft.current_value == 0
        assert draft.unit == "раз"
        assert draft.progress_mode == ProgressMode.BEST

    def test_typed_target_wins(self, validator):
        draft = validator.build(GoalForm(title="Отжимания 100 раз", target_value="150"))

        assert draft.target_value == 150

    def test_non_positive_typed_target_ignored(self, validator):
        draft = validator.build(GoalForm(title="Отжимания 100 раз", target_value="0"))

        assert draft.target_value == 100

    def test_decimal_comma_target(self, validator):
        draft = validator.build(GoalForm(title="Пробежать", target_value="2,5"))

        assert draft.target_value == 2.5

    def test_travel_goal_defaults(self, validator):
        draft = validator.build(GoalForm(title="Поездка в Дубай"))

        assert draft.target_value == 1
        assert draft.unit == "поездка"

    def test_current_clamped(self, validator):
        draft = validator.build(GoalForm(title="Отжимания 100 раз", current_value="150"))

        assert draft.current_value == 100

    def test_typed_unit(self, validator):
        draft = validator.build(GoalForm(title="Прочитать 12 книг", unit="рублей"))
        assert draft.unit == "руб"

        draft = validator.build(GoalForm(title="Прочитать 12 книг", unit="страниц"))
        assert draft.unit == "страниц"

    def test_explicit_mode(self, validator):
        draft = validator.build(
            GoalForm(title="Отжимания 100 раз", progress_mode="increment")
        )
        assert draft.progress_mode == ProgressMode.INCREMENT

        draft = validator.build(
            GoalForm(title="Отжимания 100 раз", progress_mode=ProgressMode.ABSOLUTE)
        )
        assert draft.progress_mode == ProgressMode.ABSOLUTE

    def test_draft_to_dict(self, validator):
        data = validator.build(GoalForm(title="накопить 50 тыс руб")).to_dict()

        assert data["targetValue"] == 50_000
        assert data["progressMode"] == "increment"


class TestGoalFormValidation:
    """Tests for form errors"""

    def test_valid_form(self, validator):
        result = validator.validate(GoalForm(title="Отжимания 100 раз"))

        assert result.is_valid
        assert result.parsed.target_value == 100

    def test_missing_target(self, validator):
        form = GoalForm(title="Выучить английский")
        result = validator.validate(form)

        assert not result.is_valid
        assert set(result.errors) == {"target_value"}
        with pytest.raises(ValueError, match="target_value"):
            validator.build(form)

    def test_empty_title(self, validator):
        result = validator.validate(GoalForm(title="   "))

        assert "title" in result.errors
        assert "target_value" in result.errors

    def test_invalid_fields(self, validator):
        result = validator.validate(
            GoalForm(title="Отжимания 100 раз", current_value="-5", progress_mode="weekly")
        )

        assert set(result.errors) == {"current_value", "progress_mode"}

    def test_non_numeric_current(self, validator):
        result = validator.validate(GoalForm(title="Отжимания 100 раз", current_value="abc"))

        assert "current_value" in result.errors

    def test_blank_current_is_zero(self, validator):
        assert validator.validate(GoalForm(title="Отжимания 100 раз", current_value="")).is_valid


class TestParseNumber:
    """Tests for lenient number reading"""

    def test_parse_number(self):
        assert parse_number("12 км") == 12.0
        assert parse_number(" 3,5") == 3.5
        assert parse_number("-4") == -4.0
        assert parse_number(7) == 7.0

    def test_parse_number_rejects(self):
        assert parse_number("") is None
        assert parse_number("км") is None
        assert parse_number(None) is None
        assert parse_number(True) is None
        assert parse_number(float("nan")) is None
        assert parse_number(10**400) is None
