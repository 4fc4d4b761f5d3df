#!/usr/bin/env python3
"""
Basic Usage Example - stockcast

Shows how to turn raw daily quote records into bars, compute the indicator
battery, and produce a next-day / next-week forecast.

Run: python examples/basic_usage.py
"""

import math

from stockcast.data.models import PriceBar
from stockcast.engine import AnalysisEngine
from stockcast.errors import DataQualityError
from stockcast.logging import configure_logging
from stockcast.utils.time import next_trading_dates


def create_sample_records(count: int = 120) -> list[dict]:
    """Quote records as a market data API would return them."""
    records = []
    close = 150.0
    for i, day in enumerate(next_trading_dates("2023-12-29", count)):
        open_price = close
        close = open_price + 1.5 * math.sin(i / 6) + 0.2
        records.append({
            "date": day,
            "open": f"{open_price:.2f}",
            "high": f"{max(open_price, close) + 0.8:.2f}",
            "low": f"{min(open_price, close) - 0.8:.2f}",
            "close": f"{close:.2f}",
            "volume": str(2_000_000 + 10_000 * i),
        })
    return records


def print_report(report) -> None:
    """Print the headline numbers of an analysis report."""
    forecast = report.forecast
    print(f"📈 {report.symbol}: {len(report.indicators)} bars, last close {forecast.last_close:.2f}")

    for name, value in report.indicators.latest().items():
        shown = f"{value:.2f}" if value is not None else "n/a"
        print(f"  {name:<18} {shown}")

    print(f"  Next day ({forecast.next_day_date}): {forecast.next_day_prediction:.2f} "
          f"({forecast.expected_change_pct('day'):+.2f}%)")
    print(f"  Next week ({forecast.next_week_date}): {forecast.next_week_prediction:.2f} "
          f"({forecast.expected_change_pct('week'):+.2f}%)")
    print(f"  Trend: {forecast.trend.value}, confidence {forecast.confidence:.0%}")
    print(f"  Support {forecast.support_level:.2f} / resistance {forecast.resistance_level:.2f}")


def main():
    configure_logging(level="INFO")

    bars = [PriceBar.from_dict(record) for record in create_sample_records()]
    engine = AnalysisEngine()

    print_report(engine.analyze("DEMO", bars))

    # A short history cannot be forecast
    try:
        engine.analyze("DEMO", bars[:10])
    except DataQualityError as e:
        print(f"⚠️  {e}")

    batch = engine.analyze_many({"DEMO": bars, "TSLA": bars, "SHORT": bars[:10]})
    print(f"\n✅ Batch: {batch.succeeded} succeeded, {batch.failed} failed")


if __name__ == "__main__":
    main()
