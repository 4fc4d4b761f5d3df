"""
Error classification for indicator and forecast computation.

Data quality errors describe problems with the supplied bar sequence and are
the caller's to fix. System failures describe problems inside the engines or
their configuration.
"""

from .data_quality import (
    DataQualityError,
    TemporalDataError,
    MissingDataError,
    MalformedDataError,
    InsufficientDataError,
)
from .system_failures import (
    SystemFailureError,
    CalculationError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "TemporalDataError",
    "MissingDataError",
    "MalformedDataError",
    "InsufficientDataError",
    # System Failures
    "SystemFailureError",
    "CalculationError",
    "ConfigurationError",
]
