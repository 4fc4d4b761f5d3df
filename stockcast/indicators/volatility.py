"""Bollinger Bands"""

import math
from typing import Optional, Sequence

from ..models.indicators import BollingerBands
from .moving_averages import calculate_sma


def calculate_bollinger_bands(
    closes: Sequence[float],
    period: int = 20,
    std_dev: float = 2.0,
) -> BollingerBands:
    """
    Calculate Bollinger Bands.

    Middle band is the SMA; the half-width is `std_dev` population standard
    deviations of the trailing window around the middle value.

    Args:
        closes: Close price series
        period: Lookback period (default 20)
        std_dev: Standard deviation multiplier (default 2)

    Returns:
        BollingerBands aligned with `closes`, None wherever the SMA is undefined
    """
    middle = calculate_sma(closes, period)
    upper: list[Optional[float]] = []
    lower: list[Optional[float]] = []

    for i, mean in enumerate(middle):
        if mean is None:
            upper.append(None)
            lower.append(None)
            continue

        window = closes[i - period + 1:i + 1]
        variance = sum((value - mean) ** 2 for value in window) / period
        half_width = std_dev * math.sqrt(variance)

        upper.append(mean + half_width)
        lower.append(mean - half_width)

    return BollingerBands(upper=tuple(upper), middle=tuple(middle), lower=tuple(lower))
