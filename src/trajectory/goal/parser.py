"""
Goal Input Parser

Parses a free-text goal description ("Отжимания 100 раз",
"накопить 50 тыс руб", "пробежать двадцать километров") into a
structured goal: title, numeric target, unit and progress mode.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Dict, Any, List, Optional

from .config import GoalConfig
from .lexicon import MULTIPLIERS, TRAVEL_UNIT
from .modes import ProgressMode, infer_progress_mode
from .numerals import find_word_number
from .units import normalize_token, resolve_unit_token, infer_unit_by_context


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedGoal:
    """Structured goal extracted from free text"""
    title: str
    target_value: Optional[int]
    unit: str
    progress_mode: ProgressMode

    @property
    def has_target(self) -> bool:
        return self.target_value is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "targetValue": self.target_value,
            "unit": self.unit,
            "progressMode": self.progress_mode.value,
        }


class GoalInputParser:
    """
    Parser for free-text goal descriptions.

    Recognition is tried in order, first success wins:
    1. Digit quantity with optional scale word and unit ("50 тыс руб")
    2. Spelled-out Russian numeral ("двадцать километров")
    3. No quantity: unit and mode inferred from vocabulary only

    The parser never raises; an unrecognized quantity yields
    target_value=None (or 1 for travel goals).
    """

    # digits [thousands groups] [fraction] [scale word] [trailing token]
    DIGIT_PATTERN = re.compile(
        r"((?:[0-9]{1,3}(?: [0-9]{3})+|[0-9]+)(?:[.,][0-9]+)?)"
        r"\s*((?:тыс\.|млн\.|(?:тыс|тысяч|к|k|млн|миллион(?:а|ов)?|м|m)(?![0-9a-zа-яё])))?"
        r"\s*([^\s,.;:!?]+)?",
        re.IGNORECASE,
    )

    WHITESPACE_PATTERN = re.compile(r"\s+")
    TRAILING_SEPARATOR_PATTERN = re.compile(r"[,-]\s*$")
    WORD_PATTERN = re.compile(r"[a-zа-яё]")
    SHORT_NOISE_PATTERN = re.compile(r"[a-zа-яё]{1,2}")

    def __init__(self, config: Optional[GoalConfig] = None):
        self.config = config or GoalConfig()

    def parse(self, raw_input: str) -> ParsedGoal:
        """
        Parse a goal description.

        Args:
            raw_input: Text typed by the user

        Returns:
            ParsedGoal
        """
        if not isinstance(raw_input, str):
            raw_input = "" if raw_input is None else str(raw_input)

        text = raw_input.replace("\u00a0", " ").strip()
        if not text:
            return ParsedGoal(
                title="",
                target_value=None,
                unit=self.config.default_unit,
                progress_mode=ProgressMode.ABSOLUTE,
            )

        parsed = self._parse_digits(text)
        if parsed is None:
            parsed = self._parse_words(text)
        if parsed is None:
            parsed = self._parse_context_only(text)
        return parsed

    def _parse_digits(self, text: str) -> Optional[ParsedGoal]:
        """Recognize a digit quantity such as "1,5 млн" or "100 раз"."""
        match = self.DIGIT_PATTERN.search(text)
        if not match:
            return None

        literal = self.WHITESPACE_PATTERN.sub("", match.group(1)).replace(",", ".", 1)
        base = float(literal)
        if not math.isfinite(base):
            logger.debug(f"Non-finite quantity {match.group(1)!r}, trying numeral words")
            return None

        multiplier = self._multiplier(match.group(2))
        target = self._clamp_target(base * multiplier)

        token = match.group(3)
        explicit_unit = resolve_unit_token(token, self.config.fuzzy_tolerance)
        unit = explicit_unit or infer_unit_by_context(text, self.config.default_unit)

        title = self._remove_span(text, match.start(), match.end())
        if not explicit_unit and token and self._looks_like_word(token):
            # Not a unit, so it belongs to the description
            title = self._normalize_title(f"{title} {token}")

        logger.debug(
            f"Digit quantity {match.group(0)!r}: target={target}, unit={unit}"
        )
        return ParsedGoal(
            title=title or text,
            target_value=target,
            unit=unit,
            progress_mode=infer_progress_mode(text, unit),
        )

    def _parse_words(self, text: str) -> Optional[ParsedGoal]:
        """Recognize a spelled-out numeral such as "двадцать пять"."""
        words = text.split()
        numeral = find_word_number(words)
        if numeral is None:
            return None

        next_word = words[numeral.end] if numeral.end < len(words) else None
        explicit_unit = resolve_unit_token(next_word, self.config.fuzzy_tolerance)
        unit = explicit_unit or infer_unit_by_context(text, self.config.default_unit)
        remove_end = numeral.end + 1 if explicit_unit else numeral.end

        title = self._join_words(words, numeral.start, remove_end)

        logger.debug(
            f"Numeral words {' '.join(words[numeral.start:numeral.end])!r}: "
            f"value={numeral.value}, unit={unit}"
        )
        return ParsedGoal(
            title=title or text,
            target_value=self._clamp_target(numeral.value),
            unit=unit,
            progress_mode=infer_progress_mode(text, unit),
        )

    def _parse_context_only(self, text: str) -> ParsedGoal:
        unit = infer_unit_by_context(text, self.config.default_unit)
        target = self.config.travel_default_target if unit == TRAVEL_UNIT else None

        logger.debug(f"No quantity in {text!r}, inferred unit={unit}")
        return ParsedGoal(
            title=text,
            target_value=target,
            unit=unit,
            progress_mode=infer_progress_mode(text, unit),
        )

    def _multiplier(self, scale_word: Optional[str]) -> int:
        if not scale_word:
            return 1
        return MULTIPLIERS.get(scale_word.strip().lower(), 1)

    def _clamp_target(self, value: float) -> int:
        if math.isnan(value):
            return self.config.min_target
        if math.isinf(value):
            return self.config.max_target if value > 0 else self.config.min_target
        rounded = math.floor(value + 0.5)
        return max(self.config.min_target, min(self.config.max_target, rounded))

    def _looks_like_word(self, token: str) -> bool:
        key = normalize_token(token)
        if not self.WORD_PATTERN.search(key):
            return False
        return not self.SHORT_NOISE_PATTERN.fullmatch(key)

    def _normalize_title(self, value: str) -> str:
        value = self.WHITESPACE_PATTERN.sub(" ", value)
        value = self.TRAILING_SEPARATOR_PATTERN.sub("", value)
        return value.strip()

    def _remove_span(self, text: str, start: int, end: int) -> str:
        return self._normalize_title(f"{text[:start]} {text[end:]}")

    def _join_words(self, words: List[str], start: int, end: int) -> str:
        kept = [word for idx, word in enumerate(words) if idx < start or idx >= end]
        return self._normalize_title(" ".join(kept))


_default_parser = GoalInputParser()


def parse_goal_input(raw_input: str) -> ParsedGoal:
    """Parse a goal description with the default configuration."""
    return _default_parser.parse(raw_input)
