"""Tests for IndicatorCalculator integration"""

from dataclasses import replace

import pytest
from stockcast.config.defaults import get_default_config
from stockcast.data.models import PriceBar
from stockcast.errors import MissingDataError, TemporalDataError
from stockcast.indicators.calculator import IndicatorCalculator, compute_indicators
from stockcast.indicators.moving_averages import calculate_sma


class TestIndicatorCalculator:
    """Test IndicatorCalculator integration"""

    def test_calculator_initialization(self):
        """Test IndicatorCalculator defaults"""
        calc = IndicatorCalculator()
        assert calc.config == get_default_config()
        assert calc.validator is not None

    def test_calculator_with_custom_config(self):
        """Test IndicatorCalculator keeps a supplied config"""
        config = get_default_config()
        calc = IndicatorCalculator(config)
        assert calc.config is config

    def test_all_series_aligned(self, random_walk_bars):
        """Test every series has one entry per bar"""
        series = compute_indicators(random_walk_bars)
        count = len(random_walk_bars)

        assert len(series) == count
        for values in (
            series.sma, series.ema, series.rsi, series.adx, series.parabolic_sar,
            series.macd.line, series.macd.signal, series.macd.histogram,
            series.bollinger_bands.upper, series.bollinger_bands.middle,
            series.bollinger_bands.lower,
        ):
            assert len(values) == count

    def test_dates_and_volumes_echoed(self, linear_bars):
        """Test dates and volumes pass through unchanged"""
        series = compute_indicators(linear_bars)
        assert series.dates == tuple(bar.date for bar in linear_bars)
        assert series.volumes == tuple(bar.volume for bar in linear_bars)

    def test_default_periods(self, linear_bars, linear_closes):
        """Test the default SMA period is 20"""
        series = compute_indicators(linear_bars)
        assert list(series.sma) == calculate_sma(linear_closes, 20)

    def test_custom_periods(self, linear_bars):
        """Test configured periods reach the indicators"""
        config = get_default_config()
        config = replace(config, indicators=replace(config.indicators, sma_period=5, rsi_period=3))

        series = IndicatorCalculator(config).compute(linear_bars)

        assert series.sma[3] is None
        assert series.sma[4] == pytest.approx(102.0)
        assert series.rsi[2] is None
        assert series.rsi[3] is not None

    def test_single_bar(self, bar_factory):
        """Test one bar yields undefined indicators rather than an error"""
        series = compute_indicators(bar_factory([100.0]))

        assert series.sma == (None,)
        assert series.parabolic_sar == (None,)
        assert series.adx == (None,)

    def test_empty_input(self):
        """Test empty input is rejected"""
        with pytest.raises(MissingDataError):
            compute_indicators([])

    def test_unordered_input_rejected(self, linear_bars):
        """Test descending dates fail validation"""
        with pytest.raises(TemporalDataError):
            compute_indicators(list(reversed(linear_bars)))

    def test_validation_can_be_disabled(self, linear_bars):
        """Test a calculator without validation accepts unordered bars"""
        series = IndicatorCalculator(validate=False).compute(list(reversed(linear_bars)))
        assert len(series) == len(linear_bars)

    def test_flat_series_does_not_raise(self, flat_bars):
        """Test flat prices compute without division errors"""
        series = compute_indicators(flat_bars)
        assert series.rsi[-1] == 0.0
        assert series.adx[-1] == 0.0

    def test_result_independent_of_input_mutation(self, linear_bars):
        """Test later changes to the input list do not reach the result"""
        bars = list(linear_bars)
        series = compute_indicators(bars)
        before = series.sma

        bars.append(PriceBar(date="2024-12-31", open=1.0, high=1.0, low=1.0, close=1.0, volume=0))
        bars[0] = bars[-1]

        assert series.sma == before
        assert len(series) == len(linear_bars)

    def test_latest_values(self, random_walk_bars):
        """Test latest() picks the last defined value of each line"""
        series = compute_indicators(random_walk_bars)
        latest = series.latest()

        assert latest["sma"] == series.sma[-1]
        assert latest["parabolic_sar"] == series.parabolic_sar[-1]
        assert all(value is not None for value in latest.values())

    def test_latest_values_undefined_when_short(self, bar_factory):
        """Test latest() reports None for indicators still warming up"""
        latest = compute_indicators(bar_factory([100.0, 101.0, 102.0])).latest()
        assert latest["sma"] is None
        assert latest["parabolic_sar"] is not None

    def test_as_dict(self, linear_bars):
        """Test nested dict conversion"""
        data = compute_indicators(linear_bars).as_dict()
        assert isinstance(data["sma"], list)
        assert isinstance(data["macd"]["signal"], list)
        assert data["dates"][0] == "2024-01-01"

    def test_warmup_period(self, random_walk_bars, bar_factory):
        """Test warm-up covers the slowest indicator (MACD signal)"""
        calc = IndicatorCalculator()
        assert calc.get_warmup_period() == 34
        assert calc.is_warmed_up(random_walk_bars)
        assert not calc.is_warmed_up(bar_factory([100.0] * 33))
