"""Secant and tangent lines.

A secant through ``(x0, f(x0))`` and ``(x1, f(x1))`` has the slope of the
difference quotient. Letting ``x1 -> x0`` turns it into the tangent,
whose slope is the first derivative.
"""

from __future__ import annotations

from typing import Callable

import numpy as np


class Line:
    """Affine line through ``(x0, y0)`` with a given slope.

    Parameters
    ----------
    slope : float
        Rise per unit run.
    x0, y0 : float
        A point on the line.
    """

    def __init__(self, slope: float, x0: float, y0: float):
        self.slope = float(slope)
        self.x0 = float(x0)
        self.y0 = float(y0)

    @property
    def intercept(self) -> float:
        """Value at ``x = 0``."""
        return self.y0 - self.slope * self.x0

    def eval(self, x: float) -> float:
        return self.y0 + self.slope * (float(x) - self.x0)

    def vectorized_eval(self, xs) -> np.ndarray:
        return self.y0 + self.slope * (np.asarray(xs, dtype=float) - self.x0)

    def __call__(self, x):
        if np.ndim(x) == 0:
            return self.eval(x)
        return self.vectorized_eval(x)

    def __repr__(self) -> str:
        return f"Line(slope={self.slope}, x0={self.x0}, y0={self.y0})"


def difference_quotient(eval: Callable[[float], float], x: float, h: float) -> float:
    """Return ``(f(x + h) - f(x)) / h``.

    Raises
    ------
    ValueError
        If *h* is 0.
    """
    if h == 0:
        raise ValueError("h must be nonzero")
    return (float(eval(x + h)) - float(eval(x))) / h


def secant(eval: Callable[[float], float], x0: float, x1: float) -> Line:
    """Line through ``(x0, f(x0))`` and ``(x1, f(x1))``.

    Raises
    ------
    ValueError
        If ``x0 == x1``; use :func:`tangent` for that limit.
    """
    if x0 == x1:
        raise ValueError(f"Secant needs two distinct points, got x0 == x1 == {x0}")
    slope = difference_quotient(eval, x0, x1 - x0)
    return Line(slope, x0, eval(x0))


def tangent(function, x: float) -> Line:
    """Tangent line of *function* at *x*.

    *function* must expose ``eval(x)`` and ``derivative(x, order)``; the
    slope is ``derivative(x, 1)``.
    """
    return Line(function.derivative(x, 1), x, function.eval(x))
