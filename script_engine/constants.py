"""Speaking-rate constants and the rounding used for seconds and frames"""

import math

# Average short-form delivery speed, words per second
WORDS_PER_SECOND = 2.8

HOOK_SECONDS = 3
CTA_SECONDS = 4


def round_half_up(value: float) -> int:
    """Round .5 upward (7 / 2.8 = 2.5 -> 3), unlike Python's banker's rounding"""
    return math.floor(value + 0.5)


def word_count(text: str) -> int:
    return len(text.split())


def words_for(seconds: float) -> int:
    return round_half_up(seconds * WORDS_PER_SECOND)


def seconds_for(text: str) -> int:
    return round_half_up(word_count(text) / WORDS_PER_SECOND)
