"""Integer factorial and the Taylor order bound derived from it."""

from __future__ import annotations

import numpy as np

#: Largest supported Taylor order. 20! fits a signed 64-bit integer, 21! does not.
MAX_ORDER = 20


def factorial(n: int) -> int:
    """Return ``n!`` as an exact integer.

    Parameters
    ----------
    n : int
        Non-negative integer.

    Returns
    -------
    int
        ``n!``; ``factorial(0) == 1``.

    Raises
    ------
    TypeError
        If *n* is not an integer.
    ValueError
        If *n* is negative.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise TypeError(f"factorial() requires an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"factorial() not defined for negative values, got {n}")

    result = 1
    for i in range(2, int(n) + 1):
        result *= i
    return result


def _validate_order(order) -> int:
    """Check that *order* is an int in ``[0, MAX_ORDER]`` and return it as int."""
    if isinstance(order, bool) or not isinstance(order, (int, np.integer)):
        raise TypeError(f"order must be int, got {type(order).__name__}")
    if order < 0 or order > MAX_ORDER:
        raise ValueError(
            f"order must be in [0, {MAX_ORDER}], got {order} "
            f"({MAX_ORDER + 1}! overflows a 64-bit integer)"
        )
    return int(order)


def _validate_derivative_order(order) -> int:
    """Check that *order* is a non-negative int and return it as int."""
    if isinstance(order, bool) or not isinstance(order, (int, np.integer)):
        raise TypeError(f"derivative order must be int, got {type(order).__name__}")
    if order < 0:
        raise ValueError(f"derivative order must be >= 0, got {order}")
    return int(order)
