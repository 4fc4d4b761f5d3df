"""
Linear regression building blocks for the forecast pipeline.

Back-fit: a least-squares line through each trailing training window,
evaluated one step past the window.

Forward projection: a first-difference autoregression. The latest
differences are regressed on their positions, the fitted line is evaluated
one step ahead, and the projected difference is added to the last price.
"""

from typing import Optional, Sequence

from ..config.defaults import ZERO_DIVISION_EPSILON


def linear_regression(
    x_values: Sequence[float],
    y_values: Sequence[float],
    at: float,
    epsilon: float = ZERO_DIVISION_EPSILON,
) -> float:
    """
    Fit an ordinary least-squares line and evaluate it.

    Args:
        x_values: Independent variable
        y_values: Dependent variable, same length as `x_values`
        at: Point at which to evaluate the fitted line
        epsilon: Substitute for a zero slope denominator

    Returns:
        slope * at + intercept
    """
    n = len(x_values)
    sum_x = sum(x_values)
    sum_y = sum(y_values)
    sum_xy = sum(x * y for x, y in zip(x_values, y_values))
    sum_xx = sum(x * x for x in x_values)

    denominator = n * sum_xx - sum_x * sum_x
    slope = (n * sum_xy - sum_x * sum_y) / (denominator or epsilon)
    intercept = (sum_y - slope * sum_x) / n

    return slope * at + intercept


def backfit_predictions(
    closes: Sequence[float],
    window: int = 20,
    epsilon: float = ZERO_DIVISION_EPSILON,
) -> list[Optional[float]]:
    """
    One-step-ahead regression predictions over the price history.

    The value at index i comes from regressing closes[i - window:i] on
    positions 1..window and evaluating at window + 1.

    Returns:
        Series aligned with `closes`, None for the first `window` positions
    """
    count = len(closes)
    if window < 1 or count <= window:
        return [None] * count

    positions = list(range(1, window + 1))
    result: list[Optional[float]] = [None] * window

    for i in range(window, count):
        result.append(linear_regression(positions, closes[i - window:i], window + 1, epsilon))

    return result


def autoregressive_forecast(
    closes: Sequence[float],
    steps: int,
    window: int = 5,
    epsilon: float = ZERO_DIVISION_EPSILON,
) -> list[float]:
    """
    Project prices forward with a first-difference autoregression.

    Each step regresses the latest `window` differences on their positions,
    evaluates one position ahead, and appends both the projected difference
    and the reconstructed price so the next step sees them. The input is
    copied, never extended in place.

    Args:
        closes: Close price series
        steps: Number of trading days to project
        window: Differences per regression fit

    Returns:
        `steps` projected prices, nearest first
    """
    prices = list(closes)
    differences = [prices[i] - prices[i - 1] for i in range(1, len(prices))]
    projections = []

    for _ in range(steps):
        recent = differences[-window:]
        if recent:
            positions = list(range(1, len(recent) + 1))
            next_difference = linear_regression(positions, recent, len(recent) + 1, epsilon)
        else:
            next_difference = 0.0

        differences.append(next_difference)
        next_price = prices[-1] + next_difference
        prices.append(next_price)
        projections.append(next_price)

    return projections
