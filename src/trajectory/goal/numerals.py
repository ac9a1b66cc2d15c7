"""
Russian Numeral Words

Reads spelled-out cardinal numbers ("двадцать пять", "сто тысяч",
"тысяча и один") from a list of words.
"""

from dataclasses import dataclass
from typing import List, Optional

from .lexicon import (
    NUMBER_WORD_UNITS,
    NUMBER_WORD_TENS,
    NUMBER_WORD_HUNDREDS,
    NUMBER_WORD_SCALES,
    CONNECTORS,
)
from .units import normalize_token


@dataclass(frozen=True)
class NumeralMatch:
    """A numeral phrase found in a word list"""
    value: int
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


_ADDITIVE_TABLES = (NUMBER_WORD_UNITS, NUMBER_WORD_TENS, NUMBER_WORD_HUNDREDS)


def _additive_value(token: str) -> Optional[int]:
    for table in _ADDITIVE_TABLES:
        if token in table:
            return table[token]
    return None


def parse_word_number(words: List[str], start: int = 0) -> Optional[NumeralMatch]:
    """
    Read a numeral phrase beginning at words[start].

    Units, tens and hundreds add into a running sub-total. A scale word
    multiplies the sub-total (or 1 when it is empty) and moves it into the
    total. The connector "и" is consumed only after a numeral word.

    Returns:
        NumeralMatch, or None if words[start] does not begin a numeral
    """
    total = 0
    current = 0
    consumed = 0
    saw_number_word = False

    for word in words[start:]:
        token = normalize_token(word)
        if not token:
            break

        if token in CONNECTORS and saw_number_word:
            consumed += 1
            continue

        additive = _additive_value(token)
        if additive is not None:
            current += additive
            consumed += 1
            saw_number_word = True
            continue

        scale = NUMBER_WORD_SCALES.get(token)
        if scale is not None:
            total += (current or 1) * scale
            current = 0
            consumed += 1
            saw_number_word = True
            continue

        break

    if not saw_number_word:
        return None
    return NumeralMatch(value=total + current, start=start, length=consumed)


def find_word_number(words: List[str]) -> Optional[NumeralMatch]:
    """Find the first numeral phrase in a word list."""
    for idx in range(len(words)):
        match = parse_word_number(words, idx)
        if match:
            return match
    return None
