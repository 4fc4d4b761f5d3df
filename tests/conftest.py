"""Pytest configuration and shared fixtures."""

import random
from datetime import date, timedelta
from typing import Callable, List, Optional, Sequence

import pytest

from stockcast.data.models import PriceBar


def weekday_dates(count: int, start: date = date(2024, 1, 1)) -> List[str]:
    """ISO dates of `count` consecutive weekdays from `start`."""
    dates = []
    current = start
    while len(dates) < count:
        if current.weekday() < 5:
            dates.append(current.isoformat())
        current += timedelta(days=1)
    return dates


def build_bars(closes: Sequence[float], spread: float = 1.0,
               volumes: Optional[Sequence[int]] = None) -> List[PriceBar]:
    """Bars on weekday dates whose high/low sit `spread` around open/close."""
    bars = []
    for i, (day, close) in enumerate(zip(weekday_dates(len(closes)), closes)):
        open_price = closes[i - 1] if i > 0 else close
        bars.append(PriceBar(
            date=day,
            open=open_price,
            high=max(open_price, close) + spread,
            low=min(open_price, close) - spread,
            close=close,
            volume=volumes[i] if volumes is not None else 1_000_000 + i * 1_000,
        ))
    return bars


@pytest.fixture
def bar_factory() -> Callable[..., List[PriceBar]]:
    """Factory building bars from a list of closes."""
    return build_bars


@pytest.fixture
def linear_closes() -> List[float]:
    """40 closes rising linearly from 100.00 to 139.00."""
    return [100.0 + i for i in range(40)]


@pytest.fixture
def linear_bars(linear_closes: List[float]) -> List[PriceBar]:
    """40 bars with closes 100..139 on weekdays starting 2024-01-01."""
    return build_bars(linear_closes)


@pytest.fixture
def flat_bars() -> List[PriceBar]:
    """60 bars where every price equals 50."""
    return build_bars([50.0] * 60, spread=0.0)


@pytest.fixture
def random_walk_closes() -> List[float]:
    """250 closes of a seeded multiplicative random walk starting at 100."""
    rng = random.Random(42)
    closes = [100.0]
    for _ in range(249):
        closes.append(closes[-1] * (1 + rng.uniform(-0.02, 0.021)))
    return closes


@pytest.fixture
def random_walk_bars(random_walk_closes: List[float]) -> List[PriceBar]:
    """250 random-walk bars with a 0.5 spread."""
    return build_bars(random_walk_closes, spread=0.5)
