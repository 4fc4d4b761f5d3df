"""Data models for statistical forecasts"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Trend(str, Enum):
    """Direction of recent price movement"""
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class MomentumSnapshot:
    """Latest values of the helper indicators computed alongside a forecast"""
    sma: Optional[float] = None
    fast_ema: Optional[float] = None
    slow_ema: Optional[float] = None
    macd: Optional[float] = None
    rsi: Optional[float] = None


@dataclass(frozen=True)
class ForecastResult:
    """Short-horizon statistical forecast for one bar sequence"""
    dates: tuple[str, ...]
    actual: tuple[float, ...]
    predicted: tuple[Optional[float], ...]
    next_day_prediction: float
    next_week_prediction: float
    confidence: float
    trend: Trend
    support_level: float
    resistance_level: float
    next_day_date: Optional[str] = None
    next_week_date: Optional[str] = None
    signals: MomentumSnapshot = field(default_factory=MomentumSnapshot)

    @property
    def last_close(self) -> float:
        """Latest actual close"""
        return self.actual[-1]

    def expected_change_pct(self, horizon: str = "day") -> float:
        """
        Projected percent change from the last close.

        Args:
            horizon: "day" for the next-day projection, "week" for next week
        """
        if horizon == "day":
            target = self.next_day_prediction
        elif horizon == "week":
            target = self.next_week_prediction
        else:
            raise ValueError(f"Unknown horizon: {horizon}")

        return (target - self.last_close) / self.last_close * 100
