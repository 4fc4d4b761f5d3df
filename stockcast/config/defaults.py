"""Default configuration parameters for the indicator and forecast engines."""

from dataclasses import dataclass

ZERO_DIVISION_EPSILON = 0.001


@dataclass(frozen=True)
class IndicatorParams:
    """Indicator periods and multipliers."""
    # Moving averages
    sma_period: int = 20
    ema_period: int = 20

    # MACD
    macd_fast: int = 12
    macd_slow: int = 26
    macd_signal: int = 9

    # Oscillators
    rsi_period: int = 14

    # Bands
    bollinger_period: int = 20
    bollinger_std_dev: float = 2.0                   # Band half-width in std devs

    # Trend strength
    adx_period: int = 14

    # Stop and reverse
    sar_initial_step: float = 0.02                   # Initial and incremental AF
    sar_max_step: float = 0.2                        # AF cap


@dataclass(frozen=True)
class ForecastParams:
    """Statistical forecast parameters."""
    min_bars: int = 30                               # Below this predict() refuses
    training_window: int = 20                        # Back-fit regression window
    ar_window: int = 5                               # Differences per AR fit

    # Horizons in trading days
    short_horizon: int = 1
    long_horizon: int = 7

    # Trend label
    trend_lookback: int = 10
    trend_threshold_pct: float = 3.0

    # Support / resistance quantiles of sorted closes
    support_quantile: float = 0.25
    resistance_quantile: float = 0.75

    # Confidence heuristic
    confidence_min_samples: int = 10
    confidence_error_ratio: float = 0.2              # Fraction of last close treated as max error
    default_confidence: float = 0.5

    # Momentum snapshot attached to forecasts
    signal_sma_window: int = 20
    signal_fast_ema: int = 12
    signal_slow_ema: int = 26
    signal_rsi_window: int = 14


@dataclass(frozen=True)
class NumericParams:
    """Numerical guards."""
    epsilon: float = ZERO_DIVISION_EPSILON           # Substituted for zero denominators


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    indicators: IndicatorParams
    forecast: ForecastParams
    numeric: NumericParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        indicators=IndicatorParams(),
        forecast=ForecastParams(),
        numeric=NumericParams(),
    )
