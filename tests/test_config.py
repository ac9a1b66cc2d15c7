"""
Tests for configuration

Tests:
1. test_config_defaults
2. test_config_validation
3. test_config_from_yaml
"""

from pathlib import Path

import pytest

from trajectory.goal.config import GoalConfig
from trajectory.goal.parser import GoalInputParser


class TestGoalConfig:
    """Tests for GoalConfig"""

    def test_config_defaults(self, default_config):
        assert default_config.default_unit == "шаг"
        assert default_config.min_target == 1
        assert default_config.max_target == 1_000_000
        assert default_config.fuzzy_tolerance == 1

    def test_config_roundtrip(self):
        config = GoalConfig(default_unit="км", max_target=1000)

        assert GoalConfig.from_dict(config.to_dict()) == config

    def test_config_validation(self):
        with pytest.raises(ValueError, match="default unit"):
            GoalConfig(default_unit="литр")
        with pytest.raises(ValueError):
            GoalConfig(min_target=10, max_target=5)
        with pytest.raises(ValueError):
            GoalConfig(min_target=0)
        with pytest.raises(ValueError):
            GoalConfig(fuzzy_tolerance=-1)
        with pytest.raises(ValueError):
            GoalConfig(max_target=10, travel_default_target=20)
        with pytest.raises(ValueError, match="max_target"):
            GoalConfig(max_target=2_000_000)

    def test_config_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown config keys"):
            GoalConfig.from_dict({"colour": "red"})

    def test_config_from_yaml(self, config_file):
        config = GoalConfig.from_yaml(config_file)

        assert config.default_unit == "км"
        assert config.max_target == 5000
        assert config.log_level == "DEBUG"

    def test_config_from_flat_yaml(self, temp_dir):
        path = Path(temp_dir) / "flat.yaml"
        path.write_text("fuzzy_tolerance: 0\n", encoding="utf-8")

        config = GoalConfig.from_yaml(str(path))

        assert config.fuzzy_tolerance == 0

    def test_config_from_empty_yaml(self, temp_dir):
        path = Path(temp_dir) / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert GoalConfig.from_yaml(str(path)) == GoalConfig()

    def test_config_missing_file(self):
        with pytest.raises(FileNotFoundError):
            GoalConfig.from_yaml("/nonexistent/trajectory.yaml")

    def test_parser_uses_config(self, config_file):
        parser = GoalInputParser(GoalConfig.from_yaml(config_file))

        assert parser.parse("Накопить 10000 руб").target_value == 5000
        assert parser.parse("").unit == "км"
