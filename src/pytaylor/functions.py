"""Mathematical functions with closed-form derivative oracles.

Every function exposes the same capability set:

- ``eval(x)`` -- the value ``f(x)``
- ``derivative(x, order)`` -- the ``order``-th derivative ``f^(order)(x)``,
  with ``derivative(x, 0) == eval(x)``
- ``is_in_domain(x)`` -- whether ``f`` is defined at ``x``

Derivatives are closed-form and O(1) per call, so a Taylor polynomial of
order ``n`` costs ``n + 1`` oracle calls.

Nothing here raises for points outside the domain. Such evaluations
return NaN or an infinity, and callers drop them before drawing (see
:func:`pytaylor.sampling.graph`).
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from pytaylor._factorial import _validate_derivative_order, factorial
from pytaylor.sampling import graph as _graph

#: Half-width of the excluded neighbourhood of 0 for :class:`Reciprocal`.
RECIPROCAL_DOMAIN_GAP = 0.01


def _result(value):
    """Return a Python float for 0-d results, the array otherwise."""
    value = np.asarray(value, dtype=float)
    if value.ndim == 0:
        return float(value)
    return value


def _everywhere(x):
    return True


class MathFunction:
    """Base capability set for a real function of one variable.

    Subclasses override :meth:`eval` and usually :meth:`derivative` and
    :meth:`is_in_domain`. All members are static or class-level; a
    function carries no state.

    The defaults mirror a function that only knows its values: every
    derivative is 0 and the domain is the whole real line.
    """

    identifier = "f"
    default_taylor_point = 0.0

    @staticmethod
    def eval(x):
        raise NotImplementedError

    @staticmethod
    def derivative(x, order: int):
        return 0.0

    @staticmethod
    def is_in_domain(x) -> bool:
        return True

    @classmethod
    def graph(cls, xs) -> np.ndarray:
        """In-domain ``(x, f(x))`` points with finite values, shape (m, 2)."""
        return _graph(xs, cls.eval, cls.is_in_domain)


class Sine(MathFunction):
    """``sin(x)``; derivatives cycle with period 4."""

    identifier = "Sine"

    @staticmethod
    def eval(x):
        return _result(np.sin(x))

    @staticmethod
    def derivative(x, order: int):
        kind = _validate_derivative_order(order) % 4
        if kind == 0:
            return Sine.eval(x)
        elif kind == 1:
            return Cosine.eval(x)
        elif kind == 2:
            return -Sine.eval(x)
        else:
            return -Cosine.eval(x)


class Cosine(MathFunction):
    """``cos(x)``; derivatives cycle with period 4."""

    identifier = "Cosine"

    @staticmethod
    def eval(x):
        return _result(np.cos(x))

    @staticmethod
    def derivative(x, order: int):
        kind = _validate_derivative_order(order) % 4
        if kind == 0:
            return Cosine.eval(x)
        elif kind == 1:
            return -Sine.eval(x)
        elif kind == 2:
            return -Cosine.eval(x)
        else:
            return Sine.eval(x)


class Exp(MathFunction):
    """``e^x``, its own derivative of every order."""

    identifier = "Exp"

    @staticmethod
    def eval(x):
        with np.errstate(over="ignore"):
            return _result(np.exp(x))

    @staticmethod
    def derivative(x, order: int):
        _validate_derivative_order(order)
        return Exp.eval(x)


class LogXPlus1(MathFunction):
    """``ln(x + 1)``, defined for ``x > -1``.

    For ``n >= 1``:

    .. math::

        f^{(n)}(x) = (-1)^{n+1} \\frac{(n-1)!}{(1+x)^n}

    The Maclaurin series only converges on ``(-1, 1]``; past ``x = 1``
    raising the order makes the approximation worse, not better.
    """

    identifier = "Log(x+1)"

    @staticmethod
    def eval(x):
        with np.errstate(divide="ignore", invalid="ignore"):
            return _result(np.log1p(x))

    @staticmethod
    def derivative(x, order: int):
        order = _validate_derivative_order(order)
        if order == 0:
            return LogXPlus1.eval(x)
        sign = -1.0 if order % 2 == 0 else 1.0
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return _result(
                sign * float(factorial(order - 1))
                / np.power(1.0 + np.asarray(x, dtype=float), order)
            )

    @staticmethod
    def is_in_domain(x) -> bool:
        return x > -1


class Reciprocal(MathFunction):
    """``1/x``, restricted to ``x < -0.01``.

    For ``n >= 1``:

    .. math::

        f^{(n)}(x) = (-1)^n \\, n! \\, x^{-1-n}

    Only the negative branch is drawn, so the default expansion point
    sits at -1.
    """

    identifier = "Custom"
    default_taylor_point = -1.0

    @staticmethod
    def eval(x):
        with np.errstate(divide="ignore", invalid="ignore"):
            return _result(np.divide(1.0, np.asarray(x, dtype=float)))

    @staticmethod
    def derivative(x, order: int):
        order = _validate_derivative_order(order)
        if order == 0:
            return Reciprocal.eval(x)
        sign = 1.0 if order % 2 == 0 else -1.0
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return _result(
                sign * np.power(np.asarray(x, dtype=float), -1.0 - order)
                * float(factorial(order))
            )

    @staticmethod
    def is_in_domain(x) -> bool:
        return -x > RECIPROCAL_DOMAIN_GAP


class Function:
    """Immutable bundle of a function's evaluators plus catalog metadata.

    This is the unit a :class:`~pytaylor.registry.FunctionRegistry`
    stores and hands to callers: three plain callables, the name shown
    to the user, and the expansion point to fall back to when a chosen
    point lies outside the domain.

    Parameters
    ----------
    identifier : str
        Catalog key, e.g. ``"Sine"``.
    eval : callable
        ``eval(x) -> float``.
    derivative : callable
        ``derivative(x, order) -> float``.
    in_domain : callable, optional
        ``in_domain(x) -> bool``. Default accepts every x.
    default_taylor_point : float, optional
        Fallback expansion point. Default is 0.0.

    Examples
    --------
    >>> f = Function.from_math_function(Exp)
    >>> f.identifier, f.derivative(0.0, 3)
    ('Exp', 1.0)
    """

    __slots__ = ("_identifier", "_eval", "_derivative", "_in_domain",
                 "_default_taylor_point")

    def __init__(
        self,
        identifier: str,
        eval: Callable[[float], float],
        derivative: Callable[[float, int], float],
        in_domain: Callable[[float], bool] | None = None,
        default_taylor_point: float = 0.0,
    ):
        if not isinstance(identifier, str) or not identifier:
            raise ValueError(f"identifier must be a non-empty str, got {identifier!r}")
        object.__setattr__(self, "_identifier", identifier)
        object.__setattr__(self, "_eval", eval)
        object.__setattr__(self, "_derivative", derivative)
        object.__setattr__(self, "_in_domain", in_domain or _everywhere)
        object.__setattr__(self, "_default_taylor_point", float(default_taylor_point))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # copy and pickle rebuild through __init__, never through setattr
        return (
            type(self),
            (self._identifier, self._eval, self._derivative, self._in_domain,
             self._default_taylor_point),
        )

    @classmethod
    def from_math_function(
        cls,
        math_function: type[MathFunction],
        identifier: str | None = None,
        default_taylor_point: float | None = None,
    ) -> "Function":
        """Wrap a :class:`MathFunction` variant.

        *identifier* and *default_taylor_point* default to the
        variant's own class attributes.
        """
        return cls(
            identifier if identifier is not None else math_function.identifier,
            math_function.eval,
            math_function.derivative,
            math_function.is_in_domain,
            default_taylor_point
            if default_taylor_point is not None
            else math_function.default_taylor_point,
        )

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def default_taylor_point(self) -> float:
        return self._default_taylor_point

    def eval(self, x):
        return self._eval(x)

    def derivative(self, x, order: int):
        return self._derivative(x, order)

    def is_in_domain(self, x):
        """Domain test; a bool for scalar *x*, a boolean array shaped like *x* otherwise."""
        if np.ndim(x) == 0:
            return bool(self._in_domain(x))
        xs = np.asarray(x, dtype=float)
        return np.broadcast_to(np.asarray(self._in_domain(xs)), xs.shape).astype(bool)

    def graph(self, xs) -> np.ndarray:
        """In-domain ``(x, f(x))`` points with finite values, shape (m, 2)."""
        return _graph(xs, self.eval, self.is_in_domain)

    def __repr__(self) -> str:
        return (
            f"Function(identifier={self._identifier!r}, "
            f"default_taylor_point={self._default_taylor_point})"
        )
