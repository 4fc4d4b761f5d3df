"""
Price bar data models and validation.
"""
from .models import PriceBar
from .validators import BarValidator, validate_bars

__all__ = ["BarValidator", "PriceBar", "validate_bars"]
