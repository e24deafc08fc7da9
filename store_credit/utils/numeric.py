"""Numeric helpers shared by the category scorers"""

import math

SCORE_MIN = 0
SCORE_MAX = 100


def round_half_up(value: float) -> int:
    """Round to nearest integer with .5 going up (built-in round() is banker's rounding)"""
    return math.floor(value + 0.5)


def clamp_score(value: float, low: int = SCORE_MIN, high: int = SCORE_MAX) -> int:
    """
    Round a raw score and force it into [low, high].

    NaN resolves to 0 so a bad intermediate never escapes the score domain.
    """
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return high if value > 0 else low
    return min(max(round_half_up(value), low), high)


def safe_ratio(numerator: float, denominator: float, default: float) -> float:
    """Divide, returning default when the denominator is zero"""
    if denominator == 0:
        return default
    return numerator / denominator
