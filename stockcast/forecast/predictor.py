"""Statistical stock price predictor"""

from typing import Optional, Sequence

from ..config.defaults import DefaultConfig, get_default_config
from ..data.models import PriceBar
from ..data.validators import BarValidator
from ..errors import CalculationError, DataQualityError, InsufficientDataError
from ..logging.config import get_engine_logger, log_computation
from ..models.forecast import ForecastResult
from ..utils.time import next_trading_dates
from .levels import backfit_confidence, determine_trend, find_support_resistance
from .regression import autoregressive_forecast, backfit_predictions
from .signals import momentum_snapshot

logger = get_engine_logger(__name__, "forecast")


class StockPredictor:
    """
    Produces short-horizon statistical forecasts from daily bars.

    Pipeline: back-fit regression, first-difference autoregressive
    projection, quantile support/resistance, trend label, confidence.
    """

    def __init__(self, config: Optional[DefaultConfig] = None, validate: bool = True):
        self.config = config or get_default_config()
        self.validator = BarValidator() if validate else None

    def predict(self, bars: Sequence[PriceBar]) -> ForecastResult:
        """
        Forecast the next trading day and the next trading week.

        Args:
            bars: Daily bars in ascending date order

        Returns:
            ForecastResult for the sequence

        Raises:
            InsufficientDataError: If fewer than `min_bars` bars are supplied
            MalformedDataError, TemporalDataError: If validation is enabled and fails
            CalculationError: On an unexpected failure inside the pipeline
        """
        params = self.config.forecast
        epsilon = self.config.numeric.epsilon

        if len(bars) < params.min_bars:
            raise InsufficientDataError(
                f"Insufficient data for prediction. Need at least {params.min_bars} data points.",
                required_count=params.min_bars,
                available_count=len(bars),
            )

        if self.validator is not None:
            self.validator.validate(bars)

        closes = tuple(bar.close for bar in bars)
        dates = tuple(bar.date for bar in bars)

        try:
            predicted = backfit_predictions(closes, params.training_window, epsilon)

            # Both horizons start from the original closes
            next_day = autoregressive_forecast(closes, params.short_horizon, params.ar_window, epsilon)[-1]
            next_week = autoregressive_forecast(closes, params.long_horizon, params.ar_window, epsilon)[-1]

            support, resistance = find_support_resistance(
                closes, params.support_quantile, params.resistance_quantile
            )
            trend = determine_trend(closes, params.trend_lookback, params.trend_threshold_pct)
            confidence = backfit_confidence(
                closes,
                predicted,
                min_samples=params.confidence_min_samples,
                error_ratio=params.confidence_error_ratio,
                default=params.default_confidence,
                epsilon=epsilon,
            )
            future_dates = next_trading_dates(dates[-1], max(params.short_horizon, params.long_horizon))
            signals = momentum_snapshot(
                closes,
                sma_window=params.signal_sma_window,
                fast_ema=params.signal_fast_ema,
                slow_ema=params.signal_slow_ema,
                rsi_window=params.signal_rsi_window,
                epsilon=epsilon,
            )
        except DataQualityError:
            raise
        except Exception as e:
            raise CalculationError(
                f"Forecast calculation failed: {str(e)}",
                metric_name="forecast",
                calculation_input={"bar_count": len(bars)}
            ) from e

        result = ForecastResult(
            dates=dates,
            actual=closes,
            predicted=tuple(predicted),
            next_day_prediction=next_day,
            next_week_prediction=next_week,
            confidence=confidence,
            trend=trend,
            support_level=support,
            resistance_level=resistance,
            next_day_date=future_dates[params.short_horizon - 1],
            next_week_date=future_dates[params.long_horizon - 1],
            signals=signals,
        )

        log_computation(logger, "predict", len(bars), {
            "trend": trend.value,
            "confidence": round(confidence, 4),
        })
        return result


def predict(bars: Sequence[PriceBar], config: Optional[DefaultConfig] = None) -> ForecastResult:
    """Forecast with default or supplied configuration."""
    return StockPredictor(config).predict(bars)
