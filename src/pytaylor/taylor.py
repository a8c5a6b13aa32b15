"""Truncated Taylor polynomials built from a closed-form derivative oracle.

Given a derivative oracle ``f^(n)(x)``, an expansion point ``a`` and an
order ``N``, the Taylor polynomial is

.. math::

    T_N(x) = \\sum_{n=0}^{N} \\frac{f^{(n)}(a)}{n!} (x - a)^n

The order is capped at :data:`~pytaylor._factorial.MAX_ORDER` (20): the
``n!`` normalisation is defined in terms of a 64-bit integer, and 21!
does not fit.

References
----------
- Apostol (1967), "Calculus, Vol. 1", 2nd ed., Wiley, Chapter 7:
  Polynomial approximations to functions
"""

from __future__ import annotations

import math
import warnings
from typing import Callable, List

import numpy as np
from numpy.polynomial import polynomial as P

from pytaylor._factorial import MAX_ORDER, _validate_order, factorial
from pytaylor.sampling import graph as _graph


class TaylorExpansion:
    """Taylor polynomial of a function around an expansion point.

    Coefficients are computed once at construction and never change:
    ``coefficients[n] = derivative(point, n) / n!``. The object then
    behaves like any other function of one variable (``eval``,
    ``derivative``, ``is_in_domain``, ``graph``).

    Parameters
    ----------
    point : float
        Expansion point ``a``.
    order : int
        Truncation degree, in ``[0, 20]``.
    derivative : callable
        Derivative oracle. Signature: ``derivative(x, n) -> float``,
        with ``derivative(x, 0) == f(x)``.

    Raises
    ------
    TypeError
        If *order* is not an int.
    ValueError
        If *order* is outside ``[0, 20]``.

    Warns
    -----
    RuntimeWarning
        If a coefficient is not finite, which happens when *point* lies
        outside the function's domain. The coefficients are kept as is.

    Examples
    --------
    >>> from pytaylor.functions import Exp
    >>> t = TaylorExpansion(0.0, 3, Exp.derivative)
    >>> [round(float(c), 4) for c in t.coefficients]
    [1.0, 1.0, 0.5, 0.1667]
    >>> round(t.eval(1.0), 4)
    2.6667
    """

    def __init__(
        self,
        point: float,
        order: int,
        derivative: Callable[[float, int], float],
    ):
        order = _validate_order(order)
        point = float(point)

        coefficients = np.empty(order + 1)
        for n in range(order + 1):
            coefficients[n] = derivative(point, n) / factorial(n)

        self._init(point, coefficients)

    def _init(self, point: float, coefficients: np.ndarray) -> None:
        coefficients = np.array(coefficients, dtype=float)
        coefficients.setflags(write=False)
        self._point = point
        self._order = len(coefficients) - 1
        self._coefficients = coefficients

        if not np.all(np.isfinite(coefficients)):
            warnings.warn(
                f"Taylor expansion around {point} has non-finite coefficients; "
                f"the expansion point is likely outside the function's domain.",
                RuntimeWarning,
                stacklevel=3,
            )

    @classmethod
    def from_function(cls, function, point: float, order: int) -> "TaylorExpansion":
        """Expand any object exposing ``derivative(x, order)``.

        Works with :class:`~pytaylor.functions.MathFunction` variants,
        :class:`~pytaylor.functions.Function` records and other
        expansions.
        """
        return cls(point, order, function.derivative)

    @classmethod
    def from_coefficients(cls, point: float, coefficients) -> "TaylorExpansion":
        """Create an expansion from precomputed coefficients.

        Parameters
        ----------
        point : float
            Expansion point ``a``.
        coefficients : array_like
            ``coefficients[i]`` multiplies ``(x - a)^i``. Length must be
            between 1 and ``MAX_ORDER + 1``.

        Returns
        -------
        TaylorExpansion
        """
        coefficients = np.asarray(coefficients, dtype=float)
        if coefficients.ndim != 1 or len(coefficients) == 0:
            raise ValueError(
                f"coefficients must be a non-empty 1-D sequence, got shape "
                f"{coefficients.shape}"
            )
        _validate_order(len(coefficients) - 1)

        obj = cls.__new__(cls)
        obj._init(float(point), coefficients)
        return obj

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------

    @property
    def point(self) -> float:
        """Expansion point ``a``."""
        return self._point

    @property
    def order(self) -> int:
        """Truncation degree."""
        return self._order

    @property
    def coefficients(self) -> np.ndarray:
        """Read-only array of ``order + 1`` coefficients, lowest degree first."""
        return self._coefficients

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def eval(self, x: float) -> float:
        """Evaluate the polynomial at a single point.

        Terms are summed lowest degree first, so ``eval(point)`` returns
        ``coefficients[0]`` exactly.
        """
        dx = np.float64(x) - self._point
        result = 0.0
        with np.errstate(over="ignore", invalid="ignore"):
            for i, c in enumerate(self._coefficients):
                result += c * dx ** i
        return float(result)

    def vectorized_eval(self, xs) -> np.ndarray:
        """Evaluate the polynomial at every point of *xs*.

        Parameters
        ----------
        xs : array_like
            Evaluation points.

        Returns
        -------
        ndarray
            Values with the shape of *xs*.
        """
        dx = np.asarray(xs, dtype=float) - self._point
        result = np.zeros_like(dx)
        power = np.ones_like(dx)
        for c in self._coefficients:
            result += c * power
            power = power * dx
        return result

    def __call__(self, x):
        if np.ndim(x) == 0:
            return self.eval(x)
        return self.vectorized_eval(x)

    def derivative(self, x: float, order: int) -> float:
        """Evaluate the ``order``-th derivative of the polynomial at *x*.

        Derivatives above the polynomial's degree are 0.
        """
        if order < 0:
            raise ValueError(f"Derivative order must be >= 0, got {order}")
        if order == 0:
            return self.eval(x)
        deriv = P.polyder(self._coefficients, m=order)
        return float(P.polyval(float(x) - self._point, deriv))

    def is_in_domain(self, x) -> bool:
        return True

    def graph(self, xs) -> np.ndarray:
        """``(x, T(x))`` points with finite values, shape (m, 2)."""
        return _graph(xs, self.eval)

    def error(self, function, xs) -> float:
        """Sup-norm error against a reference function over sample points.

        Points outside the reference's domain, or where either value is
        not finite, are ignored.

        Parameters
        ----------
        function : MathFunction, Function or callable
            Reference. Objects with ``eval`` (and optionally
            ``is_in_domain``) are used through those; a bare callable is
            treated as ``f(x)``.
        xs : array_like
            Sample points.

        Returns
        -------
        float
            ``max |T(x) - f(x)|`` over the usable points.

        Raises
        ------
        ValueError
            If no sample point is usable.
        """
        f = getattr(function, "eval", function)
        in_domain = getattr(function, "is_in_domain", None)

        worst = None
        for x, y in _graph(xs, f, in_domain):
            approx = self.eval(x)
            if not math.isfinite(approx):
                continue
            diff = abs(approx - y)
            if worst is None or diff > worst:
                worst = diff

        if worst is None:
            raise ValueError("No finite in-domain sample points to compare")
        return float(worst)

    # ------------------------------------------------------------------
    # Arithmetic operators
    # ------------------------------------------------------------------

    def __add__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        from pytaylor._algebra import _check_compatible
        _check_compatible(self, other)
        return TaylorExpansion.from_coefficients(
            self._point, self._coefficients + other._coefficients
        )

    def __sub__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        from pytaylor._algebra import _check_compatible
        _check_compatible(self, other)
        return TaylorExpansion.from_coefficients(
            self._point, self._coefficients - other._coefficients
        )

    def __mul__(self, scalar):
        from pytaylor._algebra import _is_scalar
        if not _is_scalar(scalar):
            return NotImplemented
        return TaylorExpansion.from_coefficients(
            self._point, self._coefficients * float(scalar)
        )

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        from pytaylor._algebra import _is_scalar
        if not _is_scalar(scalar):
            return NotImplemented
        return self.__mul__(1.0 / float(scalar))

    def __neg__(self):
        return self.__mul__(-1.0)

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        return (
            f"TaylorExpansion("
            f"point={self._point}, "
            f"order={self._order})"
        )

    def __str__(self) -> str:
        max_display = 6
        shown = ", ".join(
            f"{c:.6g}" for c in self._coefficients[:max_display]
        )
        if self._order + 1 > max_display:
            shown += ", ..."

        lines = [
            f"TaylorExpansion (order {self._order}, point {self._point})",
            f"  Coefficients: [{shown}]",
            f"  Max order:    {MAX_ORDER}",
        ]
        return "\n".join(lines)


def taylor_errors(
    function,
    point: float,
    x: float,
    max_order: int = MAX_ORDER,
    verbose: bool = False,
) -> List[float]:
    """Approximation error at *x* for every order from 0 to *max_order*.

    Parameters
    ----------
    function : MathFunction or Function
        Function exposing ``eval`` and ``derivative``.
    point : float
        Expansion point.
    x : float
        Where to compare ``T_n(x)`` against ``f(x)``.
    max_order : int, optional
        Highest order to build. Default is 20.
    verbose : bool, optional
        If True, print one line per order. Default is False.

    Returns
    -------
    list of float
        ``errors[n] = |T_n(x) - f(x)|``.
    """
    max_order = _validate_order(max_order)
    exact = float(function.eval(x))

    if verbose:
        print(f"Taylor errors at x={x} around a={point} "
              f"(orders 0..{max_order}, f(x)={exact:.10g})")

    errors = []
    for n in range(max_order + 1):
        expansion = TaylorExpansion(point, n, function.derivative)
        err = abs(expansion.eval(x) - exact)
        errors.append(err)
        if verbose:
            print(f"  order {n:2d}: {err:.3e}")

    return errors
