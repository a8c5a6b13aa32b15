"""Sample grids and plot-ready point lists.

A plotting front end samples ``[-max_x, max_x]`` once per redraw and
feeds the grid through a function (or a Taylor polynomial). Points
outside the function's domain, and points whose value is not finite,
never reach the renderer.
"""

from __future__ import annotations

import math
from typing import Callable, Optional

import numpy as np


def samples(max_x: float, number_of_samples: int) -> np.ndarray:
    """Return the uniform sample grid on ``[-max_x, max_x]``.

    The step is ``max_x / number_of_samples``, so the grid holds
    ``2 * number_of_samples + 1`` values. Both endpoints are included
    exactly.

    Parameters
    ----------
    max_x : float
        Largest absolute x value. Must be positive and finite.
    number_of_samples : int
        Number of steps between 0 and ``max_x``. Must be >= 1.

    Returns
    -------
    ndarray of shape (2 * number_of_samples + 1,)
        Ascending sample points.

    Examples
    --------
    >>> samples(2, 4).tolist()
    [-2.0, -1.5, -1.0, -0.5, 0.0, 0.5, 1.0, 1.5, 2.0]
    """
    if isinstance(number_of_samples, bool) or not isinstance(
        number_of_samples, (int, np.integer)
    ):
        raise TypeError(
            f"number_of_samples must be int, got {type(number_of_samples).__name__}"
        )
    if number_of_samples < 1:
        raise ValueError(f"number_of_samples must be >= 1, got {number_of_samples}")
    max_x = float(max_x)
    if not math.isfinite(max_x) or max_x <= 0:
        raise ValueError(f"max_x must be positive and finite, got {max_x}")

    # linspace pins both endpoints instead of accumulating the step
    return np.linspace(-max_x, max_x, 2 * int(number_of_samples) + 1)


def graph(
    xs,
    eval: Callable[[float], float],
    in_domain: Optional[Callable[[float], bool]] = None,
) -> np.ndarray:
    """Evaluate *eval* over *xs* and keep only drawable points.

    Parameters
    ----------
    xs : array_like
        Sample points, e.g. from :func:`samples`.
    eval : callable
        ``eval(x) -> float``.
    in_domain : callable, optional
        ``in_domain(x) -> bool``. Points failing the predicate are
        skipped without being evaluated. Default keeps every point.

    Returns
    -------
    ndarray of shape (m, 2)
        ``(x, y)`` rows, in the order of *xs*, with finite ``y``.
    """
    points = []
    for x in np.asarray(xs, dtype=float).ravel():
        x = float(x)
        if in_domain is not None and not in_domain(x):
            continue
        y = float(eval(x))
        if math.isfinite(y):
            points.append((x, y))

    if not points:
        return np.empty((0, 2))
    return np.array(points, dtype=float)
