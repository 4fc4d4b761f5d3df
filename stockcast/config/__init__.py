"""Configuration defaults, YAML overrides and validation."""

from .defaults import (
    DefaultConfig,
    ForecastParams,
    IndicatorParams,
    NumericParams,
    get_default_config,
)
from .loader import ConfigLoader

__all__ = [
    "ConfigLoader",
    "DefaultConfig",
    "ForecastParams",
    "IndicatorParams",
    "NumericParams",
    "get_default_config",
]
