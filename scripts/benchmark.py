#!/usr/bin/env python3
"""Performance benchmark for the indicator and forecast engines."""

import random
import sys
import time
from pathlib import Path
from typing import Dict, List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from stockcast.data.models import PriceBar
from stockcast.engine import AnalysisEngine
from stockcast.utils.time import next_trading_dates


def generate_sample_bars(count: int, seed: int = 7) -> List[PriceBar]:
    """Generate a random-walk bar history for benchmarking."""
    rng = random.Random(seed)
    dates = next_trading_dates("2015-01-01", count)

    bars = []
    close = 100.0
    for day in dates:
        open_price = close
        close = open_price * (1 + rng.uniform(-0.02, 0.02))
        bars.append(PriceBar(
            date=day,
            open=open_price,
            high=max(open_price, close) * 1.005,
            low=min(open_price, close) * 0.995,
            close=close,
            volume=rng.randint(100_000, 5_000_000),
        ))
    return bars


def benchmark_analysis(bar_count: int, symbols: int = 20) -> Dict[str, float]:
    """Time a batch analysis of `symbols` histories of `bar_count` bars."""
    print(f"🏃 Benchmarking {symbols} symbols x {bar_count} bars...")

    engine = AnalysisEngine()
    batch = {f"SYM{i}": generate_sample_bars(bar_count, seed=i) for i in range(symbols)}

    # Warm up
    engine.analyze("SYM0", batch["SYM0"])

    start_time = time.perf_counter()
    engine.analyze("SYM0", batch["SYM0"])
    single_time = time.perf_counter() - start_time

    start_time = time.perf_counter()
    result = engine.analyze_many(batch)
    batch_time = time.perf_counter() - start_time

    return {
        "single_time": single_time,
        "batch_time": batch_time,
        "symbols_per_second": len(result.reports) / batch_time,
    }


def main():
    """Main benchmark function."""
    print("⚡ stockcast Performance Benchmark")
    print("=" * 40)

    for size in [250, 1000, 2500]:
        results = benchmark_analysis(size)

        print(f"\n📊 Results for {size} bars:")
        print(f"   Single symbol: {results['single_time'] * 1000:.1f}ms")
        print(f"   Batch of 20: {results['batch_time']:.3f}s")
        print(f"   Symbols/second: {results['symbols_per_second']:.1f}")


if __name__ == "__main__":
    main()
