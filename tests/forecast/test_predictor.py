"""Tests for the statistical predictor"""

from dataclasses import replace

import pytest
from stockcast.config.defaults import get_default_config
from stockcast.errors import (
    InsufficientDataError,
    MalformedDataError,
    TemporalDataError,
)
from stockcast.forecast import StockPredictor, predict
from stockcast.models.forecast import ForecastResult, Trend


class TestPredictLinear:
    """Test forecasts of a steadily rising series"""

    @pytest.fixture
    def result(self, linear_bars):
        return StockPredictor().predict(linear_bars)

    def test_result_type(self, result):
        """Test a ForecastResult is returned"""
        assert isinstance(result, ForecastResult)

    def test_series_alignment(self, result, linear_bars):
        """Test dates, actual and predicted align with the input"""
        assert len(result.dates) == len(linear_bars)
        assert len(result.actual) == len(linear_bars)
        assert len(result.predicted) == len(linear_bars)
        assert result.dates[0] == "2024-01-01"
        assert result.actual[-1] == 139.0

    def test_backfit_matches_line(self, result):
        """Test the back-fit reproduces a linear history"""
        assert result.predicted[:20] == (None,) * 20
        for predicted, actual in zip(result.predicted[20:], result.actual[20:]):
            assert predicted == pytest.approx(actual)

    def test_projections(self, result):
        """Test next day and next week continue the line"""
        assert result.next_day_prediction == pytest.approx(140.0)
        assert result.next_week_prediction == pytest.approx(146.0)

    def test_projection_dates_skip_weekends(self, result):
        """Test horizons are counted in trading days"""
        assert result.dates[-1] == "2024-02-23"  # Friday
        assert result.next_day_date == "2024-02-26"
        assert result.next_week_date == "2024-03-05"

    def test_levels_and_trend(self, result):
        """Test support, resistance and trend"""
        assert result.support_level == 110.0
        assert result.resistance_level == 130.0
        assert result.trend == Trend.BULLISH

    def test_confidence(self, result):
        """Test an exact back-fit is fully confident"""
        assert result.confidence == pytest.approx(1.0)

    def test_signals(self, result):
        """Test the momentum snapshot is attached"""
        assert result.signals.sma == pytest.approx(129.5)
        assert result.signals.rsi == pytest.approx(100 - 100 / 1001)

    def test_expected_change(self, result):
        """Test percent change helpers"""
        assert result.expected_change_pct("day") == pytest.approx(100 / 139)
        assert result.expected_change_pct("week") == pytest.approx(700 / 139)

        with pytest.raises(ValueError):
            result.expected_change_pct("month")


class TestPredictEdgeCases:
    """Test predictor edge cases"""

    def test_flat_series(self, flat_bars):
        """Test a flat series forecasts flat"""
        result = predict(flat_bars)

        assert result.next_day_prediction == pytest.approx(50.0)
        assert result.next_week_prediction == pytest.approx(50.0)
        assert result.support_level == result.resistance_level == 50.0
        assert result.trend == Trend.NEUTRAL
        assert result.confidence == pytest.approx(1.0)

    def test_declining_series(self, bar_factory):
        """Test a falling series is bearish"""
        bars = bar_factory([200.0 - i for i in range(40)])
        result = predict(bars)

        assert result.trend == Trend.BEARISH
        assert result.next_day_prediction == pytest.approx(160.0)

    def test_insufficient_data(self, bar_factory):
        """Test fewer than 30 bars is rejected"""
        bars = bar_factory([100.0 + i for i in range(29)])

        with pytest.raises(InsufficientDataError) as exc_info:
            predict(bars)

        assert exc_info.value.required_count == 30
        assert exc_info.value.available_count == 29
        assert "Need at least 30 data points" in str(exc_info.value)

    def test_exact_minimum(self, bar_factory):
        """Test exactly 30 bars is accepted"""
        result = predict(bar_factory([100.0 + i for i in range(30)]))
        assert result.next_day_prediction == pytest.approx(130.0)

    def test_custom_min_bars(self, bar_factory):
        """Test the minimum follows configuration"""
        config = get_default_config()
        config = replace(config, forecast=replace(config.forecast, min_bars=50))

        with pytest.raises(InsufficientDataError) as exc_info:
            StockPredictor(config).predict(bar_factory([100.0 + i for i in range(40)]))
        assert exc_info.value.required_count == 50

    def test_unordered_dates(self, linear_bars):
        """Test validation rejects out-of-order bars"""
        bars = list(linear_bars)
        bars[5], bars[6] = bars[6], bars[5]

        with pytest.raises(TemporalDataError):
            predict(bars)

    def test_invalid_price(self, linear_bars):
        """Test validation rejects non-positive prices"""
        bars = list(linear_bars)
        bars[3] = replace(bars[3], close=-1.0, low=-2.0)

        with pytest.raises(MalformedDataError):
            predict(bars)

    def test_input_untouched(self, random_walk_bars):
        """Test prediction never mutates the caller's bars"""
        original = list(random_walk_bars)
        predict(random_walk_bars)
        assert random_walk_bars == original

    def test_repeatable(self, random_walk_bars):
        """Test identical input yields identical forecasts"""
        assert predict(random_walk_bars) == predict(random_walk_bars)

    def test_confidence_bounds(self, random_walk_bars):
        """Test confidence stays within [0, 1]"""
        result = predict(random_walk_bars)
        assert 0.0 <= result.confidence <= 1.0
        assert result.support_level <= result.resistance_level

    def test_signal_windows_from_config(self, linear_bars):
        """Test the momentum snapshot follows forecast configuration"""
        config = get_default_config()
        config = replace(config, forecast=replace(config.forecast, signal_sma_window=4))

        result = StockPredictor(config).predict(linear_bars)

        assert result.signals.sma == pytest.approx(137.5)
