"""Fixed catalog of functions a front end can pick from.

The catalog always holds ``"Exp"``, ``"Cosine"``, ``"Sine"`` and
``"Log(x+1)"``, in that order, optionally followed by one custom
function supplied at construction. It never changes afterwards.

All lookups go through the identifier, which is what a front end stores
for the currently selected button.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

import numpy as np

from pytaylor.functions import Cosine, Exp, Function, LogXPlus1, Sine
from pytaylor.sampling import graph as _graph
from pytaylor.taylor import TaylorExpansion


def _builtin_functions() -> List[Function]:
    return [
        Function.from_math_function(Exp),
        Function.from_math_function(Cosine),
        Function.from_math_function(Sine),
        Function.from_math_function(LogXPlus1),
    ]


class FunctionRegistry:
    """Catalog of :class:`~pytaylor.functions.Function` records keyed by identifier.

    Parameters
    ----------
    custom_function : Function, optional
        Extra function appended after the builtins.

    Raises
    ------
    TypeError
        If *custom_function* is not a :class:`Function`.
    ValueError
        If *custom_function* reuses a builtin identifier.

    Examples
    --------
    >>> registry = FunctionRegistry()
    >>> registry.identifiers
    ['Exp', 'Cosine', 'Sine', 'Log(x+1)']
    >>> t = registry.expand("Cosine", 0.0, 4)
    >>> round(registry.eval_expansion(t, 0.5), 4)
    0.8776
    """

    def __init__(self, custom_function: Optional[Function] = None):
        functions = _builtin_functions()
        if custom_function is not None:
            if not isinstance(custom_function, Function):
                raise TypeError(
                    f"custom_function must be a Function, got "
                    f"{type(custom_function).__name__}"
                )
            functions.append(custom_function)

        self._functions = {}
        for function in functions:
            if function.identifier in self._functions:
                raise ValueError(
                    f"Duplicate function identifier {function.identifier!r}"
                )
            self._functions[function.identifier] = function

    # ------------------------------------------------------------------
    # Catalog access
    # ------------------------------------------------------------------

    @property
    def identifiers(self) -> List[str]:
        """Identifiers in catalog order."""
        return list(self._functions)

    def get(self, identifier: str) -> Function:
        """Return the function registered as *identifier*.

        Raises
        ------
        KeyError
            If no such function exists.
        """
        try:
            return self._functions[identifier]
        except KeyError:
            raise KeyError(
                f"Unknown function {identifier!r}; "
                f"available: {self.identifiers}"
            ) from None

    def __getitem__(self, identifier: str) -> Function:
        return self.get(identifier)

    def __contains__(self, identifier) -> bool:
        return identifier in self._functions

    def __iter__(self) -> Iterator[Function]:
        return iter(self._functions.values())

    def __len__(self) -> int:
        return len(self._functions)

    # ------------------------------------------------------------------
    # Evaluation by identifier
    # ------------------------------------------------------------------

    def eval(self, identifier: str, x: float) -> float:
        return self.get(identifier).eval(x)

    def derivative(self, identifier: str, x: float, order: int) -> float:
        return self.get(identifier).derivative(x, order)

    def is_in_domain(self, identifier: str, x: float):
        """A bool for scalar *x*, a boolean array shaped like *x* otherwise."""
        return self.get(identifier).is_in_domain(x)

    def expansion_point(self, identifier: str, point: float) -> float:
        """Return *point*, or the function's default point if *point* is outside its domain."""
        function = self.get(identifier)
        if function.is_in_domain(point):
            return float(point)
        return function.default_taylor_point

    def expand(self, identifier: str, point: float, order: int) -> TaylorExpansion:
        """Build the Taylor expansion of a catalog function.

        An expansion point outside the function's domain is replaced by
        the function's ``default_taylor_point``.

        Parameters
        ----------
        identifier : str
            Catalog key.
        point : float
            Requested expansion point.
        order : int
            Truncation degree, in ``[0, 20]``.

        Returns
        -------
        TaylorExpansion
        """
        function = self.get(identifier)
        return TaylorExpansion(
            self.expansion_point(identifier, point), order, function.derivative
        )

    @staticmethod
    def eval_expansion(expansion: TaylorExpansion, x: float) -> float:
        return expansion.eval(x)

    # ------------------------------------------------------------------
    # Plot data
    # ------------------------------------------------------------------

    def graph(self, identifier: str, xs) -> np.ndarray:
        """In-domain ``(x, f(x))`` points with finite values, shape (m, 2)."""
        return self.get(identifier).graph(xs)

    def taylor_graph(
        self, identifier: str, point: float, order: int, xs
    ) -> np.ndarray:
        """``(x, T(x))`` points of the expansion, restricted to the function's domain.

        The polynomial itself is defined everywhere, but it is only drawn
        where the function it approximates is.
        """
        function = self.get(identifier)
        expansion = self.expand(identifier, point, order)
        return _graph(xs, expansion.eval, function.is_in_domain)

    def __repr__(self) -> str:
        return f"FunctionRegistry(identifiers={self.identifiers})"


def default_registry() -> FunctionRegistry:
    """Return a registry holding only the builtin functions."""
    return FunctionRegistry()
