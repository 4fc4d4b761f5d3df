"""
Analysis engine coordinator.

Validates a bar sequence once, then runs the indicator and forecast engines
on it. Batches of symbols are analyzed concurrently; the engines share no
state, so each symbol gets its own task.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Union

from .config.loader import ConfigLoader
from .data.models import PriceBar
from .data.validators import BarValidator
from .errors import (
    CalculationError,
    ConfigurationError,
    DataQualityError,
    InsufficientDataError,
    SystemFailureError,
)
from .forecast.predictor import StockPredictor
from .indicators.calculator import IndicatorCalculator
from .logging.config import get_engine_logger
from .models.forecast import ForecastResult
from .models.indicators import IndicatorSeries

logger = get_engine_logger(__name__, "analysis")

AnalysisFailure = Union[DataQualityError, SystemFailureError]


@dataclass(frozen=True)
class AnalysisReport:
    """Indicators and forecast for one symbol"""
    symbol: str
    indicators: IndicatorSeries
    forecast: Optional[ForecastResult]  # None when history is too short and not required


@dataclass(frozen=True)
class BatchAnalysis:
    """Per-symbol reports and failures of a batch run"""
    reports: dict[str, AnalysisReport] = field(default_factory=dict)
    failures: dict[str, AnalysisFailure] = field(default_factory=dict)

    @property
    def succeeded(self) -> list[str]:
        return sorted(self.reports)

    @property
    def failed(self) -> list[str]:
        return sorted(self.failures)


class AnalysisEngine:
    """
    Main coordinator for per-symbol technical analysis.

    Pipeline: Bars → Validation → Indicators + Forecast → AnalysisReport
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None) -> None:
        """Initialize the analysis engine."""
        self.logger = logger
        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        self.validator = BarValidator()

        self.logger.info("Analysis engine initialized", config_dir=str(self.config_loader.config_dir))

    def analyze(
        self,
        symbol: str,
        bars: Sequence[PriceBar],
        overrides: Optional[dict[str, Any]] = None,
        require_forecast: bool = True,
    ) -> AnalysisReport:
        """
        Compute indicators and a forecast for one symbol.

        Args:
            symbol: Ticker symbol, used to look up configuration overrides
            bars: Daily bars in ascending date order
            overrides: Per-call parameter overrides
            require_forecast: When False, a history shorter than `min_bars`
                still yields its indicators, with `forecast` set to None

        Returns:
            AnalysisReport for the symbol

        Raises:
            DataQualityError: If the bars are invalid, or too short to forecast
                while `require_forecast` is set
            ConfigurationError: If the merged configuration is invalid
            CalculationError: On an unexpected engine failure
        """
        config = self.config_loader.build_config(symbol, overrides)

        # Copy once so later mutation of the caller's list cannot reach the engines
        snapshot = tuple(bars)
        self.validator.validate(snapshot)

        calculator = IndicatorCalculator(config, validate=False)
        predictor = StockPredictor(config, validate=False)

        indicators = calculator.compute(snapshot)

        if not require_forecast and len(snapshot) < config.forecast.min_bars:
            self.logger.info(
                "Forecast skipped",
                symbol=symbol,
                bar_count=len(snapshot),
                required_count=config.forecast.min_bars,
            )
            return AnalysisReport(symbol=symbol, indicators=indicators, forecast=None)

        forecast = predictor.predict(snapshot)

        self.logger.info(
            "Symbol analyzed",
            symbol=symbol,
            bar_count=len(snapshot),
            trend=forecast.trend.value,
            confidence=round(forecast.confidence, 4),
            next_day_prediction=round(forecast.next_day_prediction, 4),
        )

        return AnalysisReport(symbol=symbol, indicators=indicators, forecast=forecast)

    def analyze_many(
        self,
        bars_by_symbol: Mapping[str, Sequence[PriceBar]],
        overrides: Optional[dict[str, Any]] = None,
        max_workers: Optional[int] = None,
        require_forecast: bool = True,
    ) -> BatchAnalysis:
        """
        Analyze several symbols concurrently.

        A failing symbol does not stop the batch; its exception is recorded
        under `failures` instead of a report.

        Args:
            bars_by_symbol: Bars keyed by symbol
            overrides: Per-call parameter overrides applied to every symbol
            max_workers: Thread pool size (executor default when None)
            require_forecast: Passed to `analyze` for every symbol

        Returns:
            BatchAnalysis with one entry per symbol in either mapping
        """
        result = BatchAnalysis()
        if not bars_by_symbol:
            return result

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {
                symbol: executor.submit(self.analyze, symbol, bars, overrides, require_forecast)
                for symbol, bars in bars_by_symbol.items()
            }

            for symbol, future in futures.items():
                try:
                    result.reports[symbol] = future.result()
                except InsufficientDataError as e:
                    self.logger.warning(
                        "Insufficient history for forecast",
                        symbol=symbol,
                        required_count=e.required_count,
                        available_count=e.available_count,
                    )
                    result.failures[symbol] = e
                except DataQualityError as e:
                    self.logger.warning("Invalid price data", symbol=symbol, error=str(e))
                    result.failures[symbol] = e
                except (CalculationError, ConfigurationError) as e:
                    self.logger.error("Analysis failed", symbol=symbol, error=str(e))
                    result.failures[symbol] = e

        self.logger.info(
            "Batch analysis complete",
            symbols=len(bars_by_symbol),
            succeeded=len(result.reports),
            failed=len(result.failures),
        )
        return result
