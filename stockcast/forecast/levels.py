"""Support/resistance, trend label and the confidence heuristic"""

import math
from typing import Optional, Sequence

from ..config.defaults import ZERO_DIVISION_EPSILON
from ..models.forecast import Trend


def find_support_resistance(
    closes: Sequence[float],
    support_quantile: float = 0.25,
    resistance_quantile: float = 0.75,
) -> tuple[float, float]:
    """
    Read support and resistance off the sorted closes.

    Returns:
        Tuple of (sorted[floor(n * support_quantile)],
                  sorted[floor(n * resistance_quantile)])
    """
    ordered = sorted(closes)
    last = len(ordered) - 1
    support = ordered[min(math.floor(len(ordered) * support_quantile), last)]
    resistance = ordered[min(math.floor(len(ordered) * resistance_quantile), last)]
    return support, resistance


def determine_trend(
    closes: Sequence[float],
    lookback: int = 10,
    threshold_pct: float = 3.0,
) -> Trend:
    """
    Label recent price movement.

    Compares the first and last close of the trailing `lookback` bars.
    """
    recent = closes[-lookback:]
    start_price = recent[0]
    end_price = recent[-1]
    percent_change = (end_price - start_price) / start_price * 100

    if percent_change > threshold_pct:
        return Trend.BULLISH
    if percent_change < -threshold_pct:
        return Trend.BEARISH
    return Trend.NEUTRAL


def calculate_confidence(
    actual: Sequence[float],
    predicted: Sequence[float],
    min_samples: int = 10,
    error_ratio: float = 0.2,
    default: float = 0.5,
    epsilon: float = ZERO_DIVISION_EPSILON,
) -> float:
    """
    Score how closely predictions tracked the actual prices.

    confidence = clamp(1 - mse / (error_ratio * last_actual) ** 2, 0, 1)

    The normalization treats an error of `error_ratio` of the latest price
    as worthless; it is a heuristic, not a statistical interval.

    Args:
        actual: Actual prices, aligned with `predicted`
        predicted: Predicted prices
        min_samples: Fewer comparisons than this return `default`

    Returns:
        Confidence in [0, 1]
    """
    if not predicted or len(actual) < min_samples:
        return default

    squared_errors = [(pred - act) ** 2 for pred, act in zip(predicted, actual)]
    mse = sum(squared_errors) / len(predicted)

    max_mse = (actual[-1] * error_ratio) ** 2
    return max(0.0, min(1.0, 1 - mse / (max_mse or epsilon)))


def backfit_confidence(
    closes: Sequence[float],
    predicted: Sequence[Optional[float]],
    min_samples: int = 10,
    error_ratio: float = 0.2,
    default: float = 0.5,
    epsilon: float = ZERO_DIVISION_EPSILON,
) -> float:
    """
    Confidence of a padded back-fit series against the closes it tracks.

    Undefined back-fit positions are dropped and the defined values are
    compared with the same number of trailing closes.
    """
    defined = [value for value in predicted if value is not None]
    if not defined:
        return default

    actual = list(closes[-len(defined):])
    return calculate_confidence(actual, defined, min_samples, error_ratio, default, epsilon)
