"""
Configuration

Tunable parameters of the goal parser and the command-line tool.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional

from .lexicon import CANONICAL_UNITS, DEFAULT_UNIT, MIN_TARGET, MAX_TARGET


@dataclass
class GoalConfig:
    """Configuration for goal parsing"""
    default_unit: str = DEFAULT_UNIT
    min_target: int = MIN_TARGET
    max_target: int = MAX_TARGET
    fuzzy_tolerance: int = 1
    travel_default_target: int = 1

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self):
        if self.default_unit not in CANONICAL_UNITS:
            raise ValueError(f"Unknown default unit: {self.default_unit}")
        if self.min_target < 1:
            raise ValueError("min_target must be at least 1")
        if self.max_target > MAX_TARGET:
            raise ValueError(f"max_target must not exceed {MAX_TARGET}")
        if self.min_target > self.max_target:
            raise ValueError(
                f"min_target ({self.min_target}) exceeds max_target ({self.max_target})"
            )
        if self.fuzzy_tolerance < 0:
            raise ValueError("fuzzy_tolerance must not be negative")
        if not self.min_target <= self.travel_default_target <= self.max_target:
            raise ValueError("travel_default_target is outside the target range")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "default_unit": self.default_unit,
            "min_target": self.min_target,
            "max_target": self.max_target,
            "fuzzy_tolerance": self.fuzzy_tolerance,
            "travel_default_target": self.travel_default_target,
            "log_level": self.log_level,
            "log_file": self.log_file,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GoalConfig":
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str) -> "GoalConfig":
        """Load config from YAML file"""
        import yaml
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data.get("goals", data))
