"""
Pytest configuration and shared fixtures
"""

import pytest
import tempfile
from pathlib import Path

# Add src to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from trajectory.goal.config import GoalConfig
from trajectory.goal.parser import GoalInputParser
from trajectory.goal.validator import GoalFormValidator


@pytest.fixture
def parser():
    """Parser with default configuration"""
    return GoalInputParser()


@pytest.fixture
def validator(parser):
    """Form validator backed by the default parser"""
    return GoalFormValidator(parser=parser)


@pytest.fixture
def goal_inputs():
    """Assorted goal descriptions, including odd and hostile ones"""
    return [
        "",
        "   ",
        "\u00a0",
        "Отжимания 100 раз",
        "накопить 50 тыс руб",
        "Поездка в Дубай",
        "пробежать двадцать километров",
        "Прочитать 12 книг",
        "Заработать 1,5 млн",
        "Накопить 300к",
        "Пробежать 100 км",
        "Пройти 10 000 шагов",
        "Накопить 2000000 руб",
        "Сделать 0 раз",
        "Сделать тысяча приседаний",
        "Накопить тысяча и один рубль",
        "три миллиона",
        "100 раз",
        "5",
        "и",
        "и и и",
        "$",
        "€€€ 7 €",
        "Отжимания, 100 раз",
        "Медитация 20 мн",
        "Сделать 10 20",
        "目标 学习 100",
        "مرحبا بالعالم",
        "😀 10 😀",
        "1.2.3.4",
        ",,,",
        "- 5 -",
        "Сделать " + "9" * 400 + " раз",
        "ноль",
        "сорок два и",
    ]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def config_file(temp_dir):
    """Create a YAML config file with a goals section"""
    config_path = Path(temp_dir) / "trajectory.yaml"
    config_path.write_text(
        "goals:\n"
        "  default_unit: км\n"
        "  max_target: 5000\n"
        "  log_level: DEBUG\n",
        encoding="utf-8",
    )
    return str(config_path)


@pytest.fixture
def default_config():
    return GoalConfig()
