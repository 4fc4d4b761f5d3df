"""Technical indicator engine"""

from .calculator import IndicatorCalculator, compute_indicators
from .momentum import calculate_macd, calculate_rsi
from .moving_averages import calculate_ema, calculate_sma, wilder_smooth
from .trend import (
    SarState,
    calculate_adx,
    calculate_parabolic_sar,
    calculate_true_range,
    scan_parabolic_sar,
    step_sar,
)
from .volatility import calculate_bollinger_bands

__all__ = [
    "IndicatorCalculator",
    "SarState",
    "calculate_adx",
    "calculate_bollinger_bands",
    "calculate_ema",
    "calculate_macd",
    "calculate_parabolic_sar",
    "calculate_rsi",
    "calculate_sma",
    "calculate_true_range",
    "compute_indicators",
    "scan_parabolic_sar",
    "step_sar",
    "wilder_smooth",
]
