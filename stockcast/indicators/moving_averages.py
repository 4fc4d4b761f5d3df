"""Simple, exponential and Wilder moving averages"""

from typing import Optional, Sequence


def calculate_sma(values: Sequence[float], period: int) -> list[Optional[float]]:
    """
    Calculate Simple Moving Average

    Args:
        values: Price series in chronological order
        period: Lookback period

    Returns:
        Series aligned with `values`; None for the first period - 1 positions
        or everywhere when the series is shorter than the period
    """
    result: list[Optional[float]] = [None] * len(values)
    if period < 1:
        return result

    for i in range(period - 1, len(values)):
        window = values[i - period + 1:i + 1]
        result[i] = sum(window) / period

    return result


def calculate_ema(values: Sequence[float], period: int) -> list[Optional[float]]:
    """
    Calculate Exponential Moving Average

    EMA[t] = value[t] * k + EMA[t-1] * (1 - k), k = 2 / (period + 1)

    The series is seeded with the SMA of the first `period` values, placed
    at index period - 1.

    Args:
        values: Price series in chronological order
        period: Lookback period

    Returns:
        Series aligned with `values`, None before the seed index
    """
    count = len(values)
    if period < 1 or count < period:
        return [None] * count

    multiplier = 2 / (period + 1)
    ema = sum(values[:period]) / period

    result: list[Optional[float]] = [None] * (period - 1)
    result.append(ema)

    for value in values[period:]:
        ema = value * multiplier + ema * (1 - multiplier)
        result.append(ema)

    return result


def wilder_smooth(values: Sequence[float], period: int) -> list[float]:
    """
    Wilder smoothing without padding.

    The first output is the mean of the first `period` values; each later
    output is (previous * (period - 1) + value) / period. The result has
    len(values) - period + 1 entries, or none if the input is too short.
    """
    if period < 1 or len(values) < period:
        return []

    average = sum(values[:period]) / period
    result = [average]

    for value in values[period:]:
        average = (average * (period - 1) + value) / period
        result.append(average)

    return result
