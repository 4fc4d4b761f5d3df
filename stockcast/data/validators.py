"""
Validation of price bar sequences before they reach the engines.

Checks field sanity on each bar and the strictly ascending date invariant
across the sequence.
"""

import math
from typing import Sequence

from ..errors import MalformedDataError, MissingDataError, TemporalDataError
from ..utils.time import parse_bar_date
from .models import PriceBar


class BarValidator:
    """Validates price bars against data quality rules."""

    def __init__(self, check_ohlc_consistency: bool = True):
        """
        Initialize validator.

        Args:
            check_ohlc_consistency: Require low <= open/close <= high
        """
        self.check_ohlc_consistency = check_ohlc_consistency

    def validate(self, bars: Sequence[PriceBar]) -> None:
        """
        Validate a full bar sequence.

        Raises:
            MissingDataError: If the sequence is empty
            MalformedDataError: If a bar holds an invalid field
            TemporalDataError: If dates are not strictly ascending
        """
        if not bars:
            raise MissingDataError("Price bar sequence is empty", data_type="bars")

        previous = None
        for bar in bars:
            self.validate_bar(bar)
            current = parse_bar_date(bar.date)
            if previous is not None and current <= previous:
                raise TemporalDataError(
                    f"Bar dates must be strictly ascending: {bar.date} follows {previous.isoformat()}",
                    date=bar.date,
                    previous_date=previous.isoformat(),
                )
            previous = current

    def validate_bar(self, bar: PriceBar) -> None:
        """Validate a single bar's fields."""
        for name in ("open", "high", "low", "close"):
            price = getattr(bar, name)
            if not isinstance(price, (int, float)) or isinstance(price, bool):
                raise MalformedDataError(f"Invalid {name} type: {type(price)}", field=name, value=price)
            if math.isnan(price) or math.isinf(price):
                raise MalformedDataError(f"Invalid {name} value: {price}", field=name, value=price)
            if price <= 0:
                raise MalformedDataError(f"Non-positive {name}: {price}", field=name, value=price)

        if self.check_ohlc_consistency:
            if bar.high < max(bar.open, bar.close, bar.low):
                raise MalformedDataError(
                    f"High {bar.high} below open/close/low on {bar.date}", field="high", value=bar.high
                )
            if bar.low > min(bar.open, bar.close):
                raise MalformedDataError(
                    f"Low {bar.low} above open/close on {bar.date}", field="low", value=bar.low
                )

        if not isinstance(bar.volume, int) or isinstance(bar.volume, bool):
            raise MalformedDataError(f"Invalid volume type: {type(bar.volume)}", field="volume", value=bar.volume)
        if bar.volume < 0:
            raise MalformedDataError(f"Negative volume: {bar.volume}", field="volume", value=bar.volume)


def validate_bars(bars: Sequence[PriceBar]) -> None:
    """Validate a bar sequence with default rules."""
    BarValidator().validate(bars)
