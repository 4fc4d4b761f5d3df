"""Statistical forecast engine"""

from .levels import backfit_confidence, calculate_confidence, determine_trend, find_support_resistance
from .predictor import StockPredictor, predict
from .regression import autoregressive_forecast, backfit_predictions, linear_regression

__all__ = [
    "StockPredictor",
    "autoregressive_forecast",
    "backfit_confidence",
    "backfit_predictions",
    "calculate_confidence",
    "determine_trend",
    "find_support_resistance",
    "linear_regression",
    "predict",
]
