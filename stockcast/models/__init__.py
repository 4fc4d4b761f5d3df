"""
Result models.

Immutable containers for indicator series and forecasts. Every sequence is
a tuple index-aligned with the input bars; warm-up positions hold None.
"""
from .forecast import ForecastResult, MomentumSnapshot, Trend
from .indicators import BollingerBands, IndicatorSeries, MacdSeries

__all__ = [
    "BollingerBands",
    "ForecastResult",
    "IndicatorSeries",
    "MacdSeries",
    "MomentumSnapshot",
    "Trend",
]
