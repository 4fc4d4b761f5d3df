"""
Calendar helpers for daily bar sequences.

Bars carry ISO calendar dates without a time component. Forecast horizons
are counted in trading days, which skip Saturdays and Sundays.
"""

from datetime import date, datetime, timedelta

from ..errors import MalformedDataError

BAR_DATE_FORMAT = "%Y-%m-%d"
WEEKEND_DAYS = (5, 6)  # Saturday, Sunday


def parse_bar_date(value: str) -> date:
    """
    Parse a bar date string.

    Args:
        value: Date in YYYY-MM-DD format

    Returns:
        Parsed calendar date

    Raises:
        MalformedDataError: If the string is not an ISO calendar date
    """
    try:
        if len(value) != 10:
            raise ValueError(value)
        return datetime.strptime(value, BAR_DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise MalformedDataError(
            f"Invalid bar date: {value!r}", field="date", value=value,
            context={"expected_format": "YYYY-MM-DD"}
        ) from None


def is_trading_day(day: date) -> bool:
    """Check whether a calendar date falls on a weekday."""
    return day.weekday() not in WEEKEND_DAYS


def next_trading_dates(last_date: str, count: int) -> list[str]:
    """
    List the trading dates following a bar date.

    Args:
        last_date: Date of the latest bar (YYYY-MM-DD)
        count: Number of trading dates to produce

    Returns:
        ISO date strings of the next `count` weekdays after `last_date`
    """
    current = parse_bar_date(last_date)
    result = []

    while len(result) < count:
        current += timedelta(days=1)
        if is_trading_day(current):
            result.append(current.isoformat())

    return result
