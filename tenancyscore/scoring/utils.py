import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Rounds .5 away from zero for positive values, matching report rounding."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def finite_or(value, default: float = 0.0) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number):
        return default
    return number


def clamp_score(value, low: float = 0.0, high: float = 100.0) -> float:
    """
    Clamp into [low, high]. NaN collapses to ``low``; infinities to the
    nearest bound.
    """
    number = finite_or(value, low)
    return max(low, min(high, number))


def to_score(value) -> int:
    """Clamp to [0, 100] and round to the nearest integer."""
    return int(round_half_up(clamp_score(value)))


def to_amount(value) -> int:
    """Currency amounts: finite, non-negative, whole units."""
    number = finite_or(value, 0.0)
    if math.isinf(number) or number < 0:
        return 0
    return int(round_half_up(number))
