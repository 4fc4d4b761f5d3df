"""
Canonical data models for daily price history.

Bars are immutable; engines read them and never keep a reference after
returning.
"""

import math
from dataclasses import dataclass
from typing import Any, Mapping

from ..errors import MalformedDataError


@dataclass(frozen=True)
class PriceBar:
    """One trading day of OHLCV data."""
    date: str          # Calendar date, YYYY-MM-DD
    open: float        # Opening price
    high: float        # High price
    low: float         # Low price
    close: float       # Closing price
    volume: int        # Shares traded

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "PriceBar":
        """
        Build a bar from a plain mapping.

        Numeric fields may be numbers or numeric strings, as delivered by
        most market data APIs.

        Raises:
            MalformedDataError: If a field is missing or not numeric, or the
                volume is not a finite whole number
        """
        try:
            date = str(record["date"])
        except KeyError:
            raise MalformedDataError("Bar record missing date", field="date") from None

        values = {}
        for name in ("open", "high", "low", "close", "volume"):
            if name not in record:
                raise MalformedDataError(f"Bar record missing {name}", field=name)
            raw = record[name]
            try:
                values[name] = float(raw)
            except (TypeError, ValueError):
                raise MalformedDataError(
                    f"Non-numeric {name}: {raw!r}", field=name, value=raw
                ) from None

        # Volume must be a whole share count
        volume = values["volume"]
        if not math.isfinite(volume) or not volume.is_integer():
            raise MalformedDataError(
                f"Volume is not a whole number: {record['volume']!r}", field="volume", value=record["volume"]
            )

        return cls(
            date=date,
            open=values["open"],
            high=values["high"],
            low=values["low"],
            close=values["close"],
            volume=int(volume),
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain dict representation."""
        return {
            "date": self.date,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "volume": self.volume,
        }
