"""Tests for the momentum helpers attached to forecasts"""

import pytest
from stockcast.forecast.signals import (
    momentum_snapshot,
    rolling_mean,
    seeded_ema,
    simple_rsi,
)
from stockcast.models.forecast import MomentumSnapshot


class TestHelpers:
    """Test the unpadded helper series"""

    def test_rolling_mean(self):
        """Test rolling mean is unpadded"""
        assert rolling_mean([1.0, 2.0, 3.0, 4.0], 2) == [1.5, 2.5, 3.5]

    def test_rolling_mean_short_input(self):
        """Test a window longer than the input yields nothing"""
        assert rolling_mean([1.0, 2.0], 3) == []

    def test_seeded_ema(self):
        """Test EMA starts from the first value"""
        # k = 2 / (3 + 1) = 0.5
        assert seeded_ema([10.0, 20.0, 20.0], 3) == pytest.approx([10.0, 15.0, 17.5])

    def test_seeded_ema_empty(self):
        """Test an empty input yields an empty EMA"""
        assert seeded_ema([], 12) == []

    def test_simple_rsi_padding(self):
        """Test RSI is padded with `window` Nones and aligned with input"""
        rsi = simple_rsi([1.0, 2.0, 3.0, 4.0, 5.0], window=2)

        assert len(rsi) == 5
        assert rsi[:2] == [None, None]
        assert rsi[2:] == pytest.approx([100 - 100 / 1001] * 3)

    def test_simple_rsi_mixed(self):
        """Test RSI from equal average gains and losses"""
        rsi = simple_rsi([10.0, 12.0, 10.0], window=2)
        assert rsi[-1] == pytest.approx(50.0)


class TestMomentumSnapshot:
    """Test the latest-value snapshot"""

    def test_linear_closes(self, linear_closes):
        """Test snapshot of a steadily rising series"""
        snapshot = momentum_snapshot(linear_closes)

        assert snapshot.sma == pytest.approx(129.5)
        assert snapshot.rsi == pytest.approx(100 - 100 / 1001)
        assert snapshot.fast_ema < linear_closes[-1]
        assert snapshot.slow_ema < snapshot.fast_ema
        assert snapshot.macd == pytest.approx(snapshot.fast_ema - snapshot.slow_ema)
        assert snapshot.macd > 0

    def test_short_history(self):
        """Test undefined values on short history"""
        snapshot = momentum_snapshot([100.0 + i for i in range(10)])

        assert snapshot.sma is None
        assert snapshot.rsi is None
        assert snapshot.fast_ema is not None
        assert snapshot.macd is not None

    def test_empty_history(self):
        """Test an empty series gives an empty snapshot"""
        assert momentum_snapshot([]) == MomentumSnapshot()

    def test_custom_windows(self, linear_closes):
        """Test window lengths are parameters"""
        snapshot = momentum_snapshot(linear_closes, sma_window=4, fast_ema=1, slow_ema=3, rsi_window=2)

        assert snapshot.sma == pytest.approx(137.5)
        # a 1-period EMA tracks the closes exactly
        assert snapshot.fast_ema == pytest.approx(139.0)
        assert snapshot.rsi == pytest.approx(100 - 100 / 1001)

    def test_rsi_needs_window_plus_one(self):
        """Test RSI is undefined until window + 1 closes exist"""
        assert momentum_snapshot([1.0, 2.0, 3.0], rsi_window=3).rsi is None
        assert momentum_snapshot([1.0, 2.0, 3.0, 4.0], rsi_window=3).rsi is not None
