"""
Goal Lexicon

Static lookup tables used by the goal input parser: canonical units,
unit aliases, scale words and Russian numeral words.
"""

from types import MappingProxyType
from typing import Mapping


# Canonical unit tokens
UNIT_RUB = "руб"
UNIT_REPS = "раз"
UNIT_KM = "км"
UNIT_KG = "кг"
UNIT_STEP = "шаг"
UNIT_TRIP = "поездка"
UNIT_USD = "usd"
UNIT_EUR = "eur"

DEFAULT_UNIT = UNIT_STEP
TRAVEL_UNIT = UNIT_TRIP

CANONICAL_UNITS = frozenset({
    UNIT_RUB,
    UNIT_REPS,
    UNIT_KM,
    UNIT_KG,
    UNIT_STEP,
    UNIT_TRIP,
    UNIT_USD,
    UNIT_EUR,
})

MIN_TARGET = 1
MAX_TARGET = 1_000_000

MULTIPLIERS: Mapping[str, int] = MappingProxyType({
    "тыс": 1_000,
    "тыс.": 1_000,
    "тысяч": 1_000,
    "к": 1_000,
    "k": 1_000,
    "млн": 1_000_000,
    "млн.": 1_000_000,
    "миллион": 1_000_000,
    "миллиона": 1_000_000,
    "миллионов": 1_000_000,
    "м": 1_000_000,
    "m": 1_000_000,
})

# Order matters: fuzzy lookup keeps the first alias on ties.
UNIT_ALIASES: Mapping[str, str] = MappingProxyType({
    "руб": UNIT_RUB,
    "р": UNIT_RUB,
    "р.": UNIT_RUB,
    "руб.": UNIT_RUB,
    "рубль": UNIT_RUB,
    "рубля": UNIT_RUB,
    "рублей": UNIT_RUB,
    "₽": UNIT_RUB,
    "раз": UNIT_REPS,
    "раза": UNIT_REPS,
    "км": UNIT_KM,
    "километр": UNIT_KM,
    "километра": UNIT_KM,
    "километров": UNIT_KM,
    "кг": UNIT_KG,
    "килограмм": UNIT_KG,
    "килограмма": UNIT_KG,
    "килограммов": UNIT_KG,
    "шаг": UNIT_STEP,
    "шага": UNIT_STEP,
    "шагов": UNIT_STEP,
    "$": UNIT_USD,
    "usd": UNIT_USD,
    "доллар": UNIT_USD,
    "доллара": UNIT_USD,
    "долларов": UNIT_USD,
    "€": UNIT_EUR,
    "eur": UNIT_EUR,
    "евро": UNIT_EUR,
})

NUMBER_WORD_UNITS: Mapping[str, int] = MappingProxyType({
    "ноль": 0,
    "один": 1,
    "одна": 1,
    "одно": 1,
    "два": 2,
    "две": 2,
    "три": 3,
    "четыре": 4,
    "пять": 5,
    "шесть": 6,
    "семь": 7,
    "восемь": 8,
    "девять": 9,
    "десять": 10,
    "одиннадцать": 11,
    "двенадцать": 12,
    "тринадцать": 13,
    "четырнадцать": 14,
    "пятнадцать": 15,
    "шестнадцать": 16,
    "семнадцать": 17,
    "восемнадцать": 18,
    "девятнадцать": 19,
})

NUMBER_WORD_TENS: Mapping[str, int] = MappingProxyType({
    "двадцать": 20,
    "тридцать": 30,
    "сорок": 40,
    "пятьдесят": 50,
    "шестьдесят": 60,
    "семьдесят": 70,
    "восемьдесят": 80,
    "девяносто": 90,
})

NUMBER_WORD_HUNDREDS: Mapping[str, int] = MappingProxyType({
    "сто": 100,
    "двести": 200,
    "триста": 300,
    "четыреста": 400,
    "пятьсот": 500,
    "шестьсот": 600,
    "семьсот": 700,
    "восемьсот": 800,
    "девятьсот": 900,
})

NUMBER_WORD_SCALES: Mapping[str, int] = MappingProxyType({
    "тысяча": 1_000,
    "тысячи": 1_000,
    "тысяч": 1_000,
    "миллион": 1_000_000,
    "миллиона": 1_000_000,
    "миллионов": 1_000_000,
})

CONNECTORS = frozenset({"и"})
