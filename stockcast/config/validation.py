"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import ForecastParams, IndicatorParams, NumericParams


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    INDICATOR_PERIODS = (
        "sma_period",
        "ema_period",
        "macd_fast",
        "macd_slow",
        "macd_signal",
        "rsi_period",
        "bollinger_period",
        "adx_period",
    )

    FORECAST_COUNTS = (
        "min_bars",
        "training_window",
        "ar_window",
        "short_horizon",
        "long_horizon",
        "trend_lookback",
        "signal_sma_window",
        "signal_fast_ema",
        "signal_slow_ema",
        "signal_rsi_window",
    )

    @staticmethod
    def _unknown_fields(params: dict[str, Any], section_type: type) -> list[ValidationError]:
        known = {f.name for f in fields(section_type)}
        return [
            ValidationError(field=name, message="Unknown parameter", value=params[name])
            for name in params
            if name not in known
        ]

    @staticmethod
    def validate_indicator_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate indicator parameters."""
        errors = ConfigValidator._unknown_fields(params, IndicatorParams)

        for name in ConfigValidator.INDICATOR_PERIODS:
            if name in params:
                value = params[name]
                if not _is_int(value) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive integer",
                        value=value
                    ))

        # MACD needs a faster fast line
        fast = params.get("macd_fast")
        slow = params.get("macd_slow")
        if _is_int(fast) and _is_int(slow) and fast >= slow:
            errors.append(ValidationError(
                field="macd_fast",
                message="Must be smaller than macd_slow",
                value=fast
            ))

        # Validate bollinger_std_dev
        if "bollinger_std_dev" in params:
            value = params["bollinger_std_dev"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="bollinger_std_dev",
                    message="Must be a non-negative number",
                    value=value
                ))

        # Validate SAR steps
        for name in ("sar_initial_step", "sar_max_step"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value <= 0 or value > 1:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive number not above 1",
                        value=value
                    ))

        initial = params.get("sar_initial_step")
        maximum = params.get("sar_max_step")
        if _is_number(initial) and _is_number(maximum) and initial > maximum:
            errors.append(ValidationError(
                field="sar_initial_step",
                message="Must not exceed sar_max_step",
                value=initial
            ))

        return errors

    @staticmethod
    def validate_forecast_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate forecast parameters."""
        errors = ConfigValidator._unknown_fields(params, ForecastParams)

        for name in ConfigValidator.FORECAST_COUNTS:
            if name in params:
                value = params[name]
                if not _is_int(value) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive integer",
                        value=value
                    ))

        min_bars = params.get("min_bars")
        for name in ("training_window", "ar_window", "trend_lookback"):
            window = params.get(name)
            if _is_int(min_bars) and _is_int(window) and window >= min_bars:
                errors.append(ValidationError(
                    field=name,
                    message="Must be smaller than min_bars",
                    value=window
                ))

        # Validate quantiles
        for name in ("support_quantile", "resistance_quantile"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0 or value >= 1:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a number in [0, 1)",
                        value=value
                    ))

        support = params.get("support_quantile")
        resistance = params.get("resistance_quantile")
        if _is_number(support) and _is_number(resistance) and support > resistance:
            errors.append(ValidationError(
                field="support_quantile",
                message="Must not exceed resistance_quantile",
                value=support
            ))

        # Validate confidence heuristic
        if "confidence_min_samples" in params:
            value = params["confidence_min_samples"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="confidence_min_samples",
                    message="Must be a non-negative integer",
                    value=value
                ))

        if "confidence_error_ratio" in params:
            value = params["confidence_error_ratio"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="confidence_error_ratio",
                    message="Must be a positive number",
                    value=value
                ))

        if "default_confidence" in params:
            value = params["default_confidence"]
            if not _is_number(value) or value < 0 or value > 1:
                errors.append(ValidationError(
                    field="default_confidence",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        fast_ema = params.get("signal_fast_ema")
        slow_ema = params.get("signal_slow_ema")
        if _is_int(fast_ema) and _is_int(slow_ema) and fast_ema >= slow_ema:
            errors.append(ValidationError(
                field="signal_fast_ema",
                message="Must be smaller than signal_slow_ema",
                value=fast_ema
            ))

        if "trend_threshold_pct" in params:
            value = params["trend_threshold_pct"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="trend_threshold_pct",
                    message="Must be a non-negative number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_numeric_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate numerical guard parameters."""
        errors = ConfigValidator._unknown_fields(params, NumericParams)

        if "epsilon" in params:
            value = params["epsilon"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="epsilon",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        validators = {
            "indicators": ConfigValidator.validate_indicator_params,
            "forecast": ConfigValidator.validate_forecast_params,
            "numeric": ConfigValidator.validate_numeric_params,
        }

        for section, params in config.items():
            if section not in validators:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=params
                ))
            elif not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping of parameters",
                    value=params
                ))
            else:
                errors.extend(validators[section](params))

        return errors
