"""Square root by Newton's method."""

import math


def _ieee_div(numerator: float, denominator: float) -> float:
    """Divide with IEEE 754 semantics instead of raising on zero."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def sqrt(x: float) -> float:
    """Return an approximation to the square root of x (1000 Newton steps from 1.0)."""
    z = 1.0
    for _ in range(1000):
        z -= _ieee_div(z * z - x, 2 * z)
    return z