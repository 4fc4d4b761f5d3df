"""Indicator calculator coordinating the full indicator battery"""

from typing import Optional, Sequence

from ..config.defaults import DefaultConfig, get_default_config
from ..data.models import PriceBar
from ..data.validators import BarValidator
from ..errors import CalculationError, DataQualityError, MissingDataError
from ..logging.config import get_engine_logger, log_computation
from ..models.indicators import IndicatorSeries
from .momentum import calculate_macd, calculate_rsi
from .moving_averages import calculate_ema, calculate_sma
from .trend import calculate_adx, calculate_parabolic_sar
from .volatility import calculate_bollinger_bands

logger = get_engine_logger(__name__, "indicators")


class IndicatorCalculator:
    """
    Computes every indicator for a bar sequence with configured periods.

    Stateless between calls; one instance may serve many symbols and threads.
    """

    def __init__(self, config: Optional[DefaultConfig] = None, validate: bool = True):
        self.config = config or get_default_config()
        self.validator = BarValidator() if validate else None

    def compute(self, bars: Sequence[PriceBar]) -> IndicatorSeries:
        """
        Calculate all indicators for a bar sequence.

        Args:
            bars: Daily bars in ascending date order

        Returns:
            IndicatorSeries aligned with `bars`

        Raises:
            MissingDataError: If `bars` is empty
            MalformedDataError, TemporalDataError: If validation is enabled and fails
            CalculationError: On an unexpected failure inside an indicator
        """
        if not bars:
            raise MissingDataError("Indicators require at least one bar", data_type="bars")

        if self.validator is not None:
            self.validator.validate(bars)

        params = self.config.indicators
        epsilon = self.config.numeric.epsilon

        closes = [bar.close for bar in bars]
        highs = [bar.high for bar in bars]
        lows = [bar.low for bar in bars]

        try:
            series = IndicatorSeries(
                dates=tuple(bar.date for bar in bars),
                volumes=tuple(bar.volume for bar in bars),
                sma=tuple(calculate_sma(closes, params.sma_period)),
                ema=tuple(calculate_ema(closes, params.ema_period)),
                macd=calculate_macd(closes, params.macd_fast, params.macd_slow, params.macd_signal),
                rsi=tuple(calculate_rsi(closes, params.rsi_period, epsilon)),
                bollinger_bands=calculate_bollinger_bands(
                    closes, params.bollinger_period, params.bollinger_std_dev
                ),
                adx=tuple(calculate_adx(highs, lows, closes, params.adx_period, epsilon)),
                parabolic_sar=tuple(calculate_parabolic_sar(
                    highs, lows, closes, params.sar_initial_step, params.sar_max_step
                )),
            )
        except DataQualityError:
            raise
        except Exception as e:
            raise CalculationError(
                f"Indicator calculation failed: {str(e)}",
                metric_name="indicators",
                calculation_input={"bar_count": len(bars)}
            ) from e

        log_computation(logger, "compute_indicators", len(bars), {"warmup_bars": self.get_warmup_period()})
        return series

    def get_warmup_period(self) -> int:
        """Get the number of bars needed before every indicator is defined"""
        params = self.config.indicators
        return max(
            params.sma_period,
            params.ema_period,
            params.bollinger_period,
            params.rsi_period + 1,
            params.macd_slow + params.macd_signal - 1,
            2 * params.adx_period,
            2,
        )

    def is_warmed_up(self, bars: Sequence[PriceBar]) -> bool:
        """Check if the sequence is long enough for every indicator"""
        return len(bars) >= self.get_warmup_period()


def compute_indicators(bars: Sequence[PriceBar],
                       config: Optional[DefaultConfig] = None) -> IndicatorSeries:
    """Calculate all indicators with default or supplied configuration."""
    return IndicatorCalculator(config).compute(bars)
