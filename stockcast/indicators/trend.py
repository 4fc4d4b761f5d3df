"""
Trend indicators: ADX and Parabolic SAR.

ADX measures trend strength from directional movement. Parabolic SAR tracks
a trailing stop that flips side when price crosses it; its scan state is an
explicit SarState record advanced by step_sar.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from ..config.defaults import ZERO_DIVISION_EPSILON
from .moving_averages import wilder_smooth


def calculate_true_range(high: float, low: float, previous_close: float) -> float:
    """
    Calculate True Range for a single bar

    TR = max(high - low, abs(high - prev_close), abs(low - prev_close))
    """
    return max(high - low, abs(high - previous_close), abs(low - previous_close))


def calculate_directional_movement(
    high: float, low: float, previous_high: float, previous_low: float
) -> tuple[float, float]:
    """
    Calculate (+DM, -DM) for a single bar.

    Only the larger of the up move and down move counts, and only if positive.
    """
    up_move = high - previous_high
    down_move = previous_low - low

    plus_dm = up_move if up_move > down_move and up_move > 0 else 0.0
    minus_dm = down_move if down_move > up_move and down_move > 0 else 0.0

    return plus_dm, minus_dm


def calculate_adx(
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float],
    period: int = 14,
    epsilon: float = ZERO_DIVISION_EPSILON,
) -> list[Optional[float]]:
    """
    Calculate Average Directional Index.

    True range and directional movement start at the second bar and are
    Wilder-smoothed; the DX series derived from them is Wilder-smoothed
    again, so the first ADX value lands at index 2 * period - 1.

    Args:
        highs: High price series
        lows: Low price series
        closes: Close price series
        period: Smoothing period (default 14)
        epsilon: Substitute for zero true range or zero DI sum

    Returns:
        Series aligned with the input, None before index 2 * period - 1
    """
    count = len(closes)
    if period < 1 or count < 2 * period:
        return [None] * count

    true_ranges = []
    plus_dms = []
    minus_dms = []
    for i in range(1, count):
        true_ranges.append(calculate_true_range(highs[i], lows[i], closes[i - 1]))
        plus_dm, minus_dm = calculate_directional_movement(
            highs[i], lows[i], highs[i - 1], lows[i - 1]
        )
        plus_dms.append(plus_dm)
        minus_dms.append(minus_dm)

    smoothed_tr = wilder_smooth(true_ranges, period)
    smoothed_plus = wilder_smooth(plus_dms, period)
    smoothed_minus = wilder_smooth(minus_dms, period)

    dx_values = []
    for tr, plus_dm, minus_dm in zip(smoothed_tr, smoothed_plus, smoothed_minus):
        plus_di = plus_dm / (tr or epsilon) * 100
        minus_di = minus_dm / (tr or epsilon) * 100
        dx_values.append(abs(plus_di - minus_di) / ((plus_di + minus_di) or epsilon) * 100)

    result: list[Optional[float]] = [None] * (2 * period - 1)
    result.extend(wilder_smooth(dx_values, period))
    return result


@dataclass(frozen=True)
class SarState:
    """Parabolic SAR scan state carried from one bar to the next"""
    uptrend: bool
    sar: float
    extreme_point: float
    accel_factor: float
    reversed: bool = False   # True if the step that produced this state flipped the trend


def initial_sar_state(
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float],
    initial_step: float = 0.02,
) -> SarState:
    """
    Seed the SAR scan from the first two bars.

    The trend starts up if the second close is above the first. SAR starts
    at the opposing extreme of the first bar and the extreme point at the
    trend-side extreme.
    """
    uptrend = closes[1] > closes[0]
    return SarState(
        uptrend=uptrend,
        sar=lows[0] if uptrend else highs[0],
        extreme_point=highs[0] if uptrend else lows[0],
        accel_factor=initial_step,
    )


def step_sar(
    state: SarState,
    index: int,
    highs: Sequence[float],
    lows: Sequence[float],
    initial_step: float = 0.02,
    max_step: float = 0.2,
) -> tuple[SarState, float]:
    """
    Advance the SAR scan by one bar.

    On a reversal the next SAR restarts from the extreme point of the trend
    that just ended. Implementations that restart from the reversal bar's
    low or high instead produce different values after every flip.

    Args:
        state: State left by the previous bar
        index: Position of the current bar (>= 1)
        highs: High price series
        lows: Low price series
        initial_step: Initial and incremental acceleration factor
        max_step: Acceleration factor cap

    Returns:
        Tuple of (state for the next bar, SAR value emitted at `index`)
    """
    sar = state.sar + state.accel_factor * (state.extreme_point - state.sar)

    # SAR may not penetrate the prior one or two bars
    if state.uptrend:
        sar = min(sar, lows[index - 1])
        if index >= 2:
            sar = min(sar, lows[index - 2])
    else:
        sar = max(sar, highs[index - 1])
        if index >= 2:
            sar = max(sar, highs[index - 2])

    crossed = lows[index] < sar if state.uptrend else highs[index] > sar
    if crossed:
        uptrend = not state.uptrend
        next_state = SarState(
            uptrend=uptrend,
            sar=state.extreme_point,
            extreme_point=highs[index] if uptrend else lows[index],
            accel_factor=initial_step,
            reversed=True,
        )
        return next_state, sar

    extreme_point = state.extreme_point
    accel_factor = state.accel_factor
    if state.uptrend and highs[index] > extreme_point:
        extreme_point = highs[index]
        accel_factor = min(accel_factor + initial_step, max_step)
    elif not state.uptrend and lows[index] < extreme_point:
        extreme_point = lows[index]
        accel_factor = min(accel_factor + initial_step, max_step)

    next_state = SarState(
        uptrend=state.uptrend,
        sar=sar,
        extreme_point=extreme_point,
        accel_factor=accel_factor,
    )
    return next_state, sar


def scan_parabolic_sar(
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float],
    initial_step: float = 0.02,
    max_step: float = 0.2,
) -> list[tuple[SarState, float]]:
    """
    Run the SAR scan over every bar after the first.

    Returns:
        One (state after the bar, emitted SAR) pair per bar from index 1;
        empty when fewer than two bars are supplied
    """
    if len(closes) < 2:
        return []

    state = initial_sar_state(highs, lows, closes, initial_step)
    steps = []
    for index in range(1, len(closes)):
        state, value = step_sar(state, index, highs, lows, initial_step, max_step)
        steps.append((state, value))

    return steps


def calculate_parabolic_sar(
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float],
    initial_step: float = 0.02,
    max_step: float = 0.2,
) -> list[Optional[float]]:
    """
    Calculate Parabolic SAR.

    Returns:
        Series aligned with the input; index 0 is always None
    """
    result: list[Optional[float]] = [None] * len(closes)
    for index, (_state, value) in enumerate(
        scan_parabolic_sar(highs, lows, closes, initial_step, max_step), start=1
    ):
        result[index] = value

    return result
