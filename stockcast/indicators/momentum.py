"""MACD and RSI momentum oscillators"""

from typing import Optional, Sequence

from ..config.defaults import ZERO_DIVISION_EPSILON
from ..models.indicators import MacdSeries
from .moving_averages import calculate_ema, wilder_smooth


def calculate_macd(
    closes: Sequence[float],
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
) -> MacdSeries:
    """
    Calculate MACD line, signal line and histogram.

    The signal line is an EMA over the defined stretch of the MACD line,
    written back into the original index space from the first defined
    MACD value onward.

    Args:
        closes: Close price series
        fast_period: Fast EMA period (default 12)
        slow_period: Slow EMA period (default 26)
        signal_period: Signal line EMA period (default 9)

    Returns:
        MacdSeries with all three lines aligned with `closes`
    """
    count = len(closes)
    fast_ema = calculate_ema(closes, fast_period)
    slow_ema = calculate_ema(closes, slow_period)

    line: list[Optional[float]] = [
        fast - slow if fast is not None and slow is not None else None
        for fast, slow in zip(fast_ema, slow_ema)
    ]

    signal: list[Optional[float]] = [None] * count
    defined = [value for value in line if value is not None]
    if defined:
        start = next(i for i, value in enumerate(line) if value is not None)
        for offset, value in enumerate(calculate_ema(defined, signal_period)):
            signal[start + offset] = value

    histogram: list[Optional[float]] = [
        macd - sig if macd is not None and sig is not None else None
        for macd, sig in zip(line, signal)
    ]

    return MacdSeries(line=tuple(line), signal=tuple(signal), histogram=tuple(histogram))


def relative_strength(avg_gain: float, avg_loss: float,
                      epsilon: float = ZERO_DIVISION_EPSILON) -> float:
    """RSI from average gain and loss; a zero loss is replaced by epsilon."""
    rs = avg_gain / (avg_loss or epsilon)
    return 100 - (100 / (1 + rs))


def calculate_rsi(
    closes: Sequence[float],
    period: int = 14,
    epsilon: float = ZERO_DIVISION_EPSILON,
) -> list[Optional[float]]:
    """
    Calculate Relative Strength Index with Wilder smoothing.

    RSI = 100 - 100 / (1 + avg_gain / avg_loss)

    Args:
        closes: Close price series
        period: Lookback period (default 14)
        epsilon: Substitute for a zero average loss

    Returns:
        Series aligned with `closes`; the first value sits at index `period`
    """
    count = len(closes)
    if period < 1 or count <= period:
        return [None] * count

    changes = [closes[i] - closes[i - 1] for i in range(1, count)]
    gains = [change if change > 0 else 0.0 for change in changes]
    losses = [-change if change < 0 else 0.0 for change in changes]

    avg_gains = wilder_smooth(gains, period)
    avg_losses = wilder_smooth(losses, period)

    result: list[Optional[float]] = [None] * period
    result.extend(
        relative_strength(gain, loss, epsilon)
        for gain, loss in zip(avg_gains, avg_losses)
    )
    return result
