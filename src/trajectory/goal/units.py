"""
Unit Resolution

Maps raw tokens onto canonical unit tokens, either by exact alias lookup
or by edit-distance fuzzy matching, and infers a unit from the vocabulary
of a whole goal description when no explicit unit is present.
"""

import re
from typing import Optional, Tuple

from .lexicon import (
    UNIT_ALIASES,
    DEFAULT_UNIT,
    UNIT_RUB,
    UNIT_REPS,
    UNIT_TRIP,
)


_LEADING_JUNK = re.compile(r"^[^0-9a-zа-яё$€₽]+")
_TRAILING_JUNK = re.compile(r"[^0-9a-zа-яё$€₽]+$")

# (keyword stems, unit); first rule with a matching stem wins
CONTEXT_UNIT_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("руб", "₽", "деньг", "сбереж", "накоп", "капитал", "доход"), UNIT_RUB),
    (("отжим", "подтяг", "присед", "повтор", "раз"), UNIT_REPS),
    (("поездк", "путешеств", "тайланд", "дубай", "тур", "отпуск"), UNIT_TRIP),
)


def normalize_token(value: str) -> str:
    """Lowercase a token and strip surrounding punctuation."""
    value = value.lower()
    value = _LEADING_JUNK.sub("", value)
    return _TRAILING_JUNK.sub("", value)


def levenshtein_distance(a: str, b: str) -> int:
    """
    Compute the edit distance between two strings.

    Insertions, deletions and substitutions all cost 1.
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    row = list(range(len(b) + 1))
    for i in range(1, len(a) + 1):
        prev = row[0]
        row[0] = i
        for j in range(1, len(b) + 1):
            temp = row[j]
            cost = 0 if a[i - 1] == b[j - 1] else 1
            row[j] = min(row[j] + 1, row[j - 1] + 1, prev + cost)
            prev = temp
    return row[len(b)]


def resolve_unit_token(value: Optional[str], tolerance: int = 1) -> Optional[str]:
    """
    Resolve a raw token to a canonical unit.

    Args:
        value: Token as it appears in the input
        tolerance: Maximum edit distance accepted for a fuzzy match

    Returns:
        Canonical unit token, or None if nothing matches
    """
    if not value:
        return None
    key = normalize_token(value)
    if not key:
        return None

    exact = UNIT_ALIASES.get(key)
    if exact:
        return exact

    # Small typos right after a quantity, e.g. "аз" -> "раз"
    best_alias = None
    best_distance = None
    for alias in UNIT_ALIASES:
        distance = levenshtein_distance(key, alias)
        if distance > tolerance:
            continue
        if best_distance is None or distance < best_distance:
            best_alias, best_distance = alias, distance
            if distance == 0:
                break

    if best_alias is None:
        return None
    return UNIT_ALIASES[best_alias]


def infer_unit_by_context(text: str, default_unit: str = DEFAULT_UNIT) -> str:
    """Pick a unit from keywords found anywhere in the text."""
    lowered = text.lower()
    for stems, unit in CONTEXT_UNIT_RULES:
        if any(stem in lowered for stem in stems):
            return unit
    return default_unit
