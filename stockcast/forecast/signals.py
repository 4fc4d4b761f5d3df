"""
Momentum helpers computed alongside a forecast.

They follow different conventions from the indicator engine: the rolling mean is
unpadded, the EMA is seeded with the first price rather than an SMA, and
RSI averages gains and losses with a plain rolling mean.
"""

from typing import Optional, Sequence

from ..config.defaults import ZERO_DIVISION_EPSILON
from ..models.forecast import MomentumSnapshot


def rolling_mean(values: Sequence[float], window: int) -> list[float]:
    """Unpadded rolling mean; len(values) - window + 1 entries."""
    return [
        sum(values[i - window + 1:i + 1]) / window
        for i in range(window - 1, len(values))
    ]


def seeded_ema(values: Sequence[float], window: int) -> list[float]:
    """EMA seeded with the first value, one entry per input value."""
    if not values:
        return []

    k = 2 / (window + 1)
    result = [values[0]]
    for value in values[1:]:
        result.append(value * k + result[-1] * (1 - k))
    return result


def simple_rsi(
    values: Sequence[float],
    window: int = 14,
    epsilon: float = ZERO_DIVISION_EPSILON,
) -> list[Optional[float]]:
    """RSI from rolling-mean gains and losses, front-padded with `window` Nones."""
    deltas = [values[i] - values[i - 1] for i in range(1, len(values))]
    gains = [delta if delta > 0 else 0.0 for delta in deltas]
    losses = [-delta if delta < 0 else 0.0 for delta in deltas]

    rsi: list[Optional[float]] = [None] * window
    for gain, loss in zip(rolling_mean(gains, window), rolling_mean(losses, window)):
        rs = gain / (loss or epsilon)
        rsi.append(100 - (100 / (1 + rs)))
    return rsi


def momentum_snapshot(
    closes: Sequence[float],
    sma_window: int = 20,
    fast_ema: int = 12,
    slow_ema: int = 26,
    rsi_window: int = 14,
    epsilon: float = ZERO_DIVISION_EPSILON,
) -> MomentumSnapshot:
    """
    Latest SMA, fast and slow EMA, their MACD spread and RSI of a close series.

    Values whose window exceeds the history are None.
    """
    sma = rolling_mean(closes, sma_window)
    fast = seeded_ema(closes, fast_ema)
    slow = seeded_ema(closes, slow_ema)
    rsi = simple_rsi(closes, rsi_window, epsilon)

    latest_fast = fast[-1] if fast else None
    latest_slow = slow[-1] if slow else None
    macd = None
    if latest_fast is not None and latest_slow is not None:
        macd = latest_fast - latest_slow

    return MomentumSnapshot(
        sma=sma[-1] if sma else None,
        fast_ema=latest_fast,
        slow_ema=latest_slow,
        macd=macd,
        rsi=rsi[-1] if len(rsi) > rsi_window else None,
    )
