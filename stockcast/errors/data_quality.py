"""
Data quality error classifications for price bar sequences.

These exceptions describe problems with the input handed to the engines:
missing bars, malformed fields, ordering violations and short history.
"""

from typing import Any, Dict, Optional


class DataQualityError(Exception):
    """Base class for problems with the supplied price data."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class TemporalDataError(DataQualityError):
    """Bar dates are not strictly ascending."""

    def __init__(self, message: str, date: Optional[str] = None,
                 previous_date: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.date = date
        self.previous_date = previous_date


class MissingDataError(DataQualityError):
    """Required data is completely missing."""

    def __init__(self, message: str, data_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.data_type = data_type


class MalformedDataError(DataQualityError):
    """Data exists but a field holds an invalid value."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class InsufficientDataError(DataQualityError):
    """Not enough historical bars for the requested calculation."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count
