"""Data models for indicator results"""

from dataclasses import asdict, dataclass
from typing import Any, Optional

Series = tuple[Optional[float], ...]


def last_defined(values: Series) -> Optional[float]:
    """Latest non-None value of a series, None if there is none."""
    for value in reversed(values):
        if value is not None:
            return value
    return None


@dataclass(frozen=True)
class MacdSeries:
    """MACD line, signal line and histogram"""
    line: Series
    signal: Series
    histogram: Series


@dataclass(frozen=True)
class BollingerBands:
    """Upper, middle and lower Bollinger bands"""
    upper: Series
    middle: Series
    lower: Series


@dataclass(frozen=True)
class IndicatorSeries:
    """Full indicator battery aligned with the input bars"""
    dates: tuple[str, ...]
    volumes: tuple[int, ...]
    sma: Series
    ema: Series
    macd: MacdSeries
    rsi: Series
    bollinger_bands: BollingerBands
    adx: Series
    parabolic_sar: Series

    def __len__(self) -> int:
        return len(self.dates)

    def latest(self) -> dict[str, Optional[float]]:
        """Most recent defined value of every indicator line"""
        return {
            "sma": last_defined(self.sma),
            "ema": last_defined(self.ema),
            "macd_line": last_defined(self.macd.line),
            "macd_signal": last_defined(self.macd.signal),
            "macd_histogram": last_defined(self.macd.histogram),
            "rsi": last_defined(self.rsi),
            "bollinger_upper": last_defined(self.bollinger_bands.upper),
            "bollinger_middle": last_defined(self.bollinger_bands.middle),
            "bollinger_lower": last_defined(self.bollinger_bands.lower),
            "adx": last_defined(self.adx),
            "parabolic_sar": last_defined(self.parabolic_sar),
        }

    def as_dict(self) -> dict[str, Any]:
        """Nested plain-dict representation with lists instead of tuples"""
        def convert(value: Any) -> Any:
            if isinstance(value, dict):
                return {key: convert(item) for key, item in value.items()}
            if isinstance(value, tuple):
                return list(value)
            return value

        return convert(asdict(self))
