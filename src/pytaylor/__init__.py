"""pytaylor: Taylor polynomials from closed-form derivative oracles.

Provides the :class:`MathFunction` variants (:class:`Sine`,
:class:`Cosine`, :class:`Exp`, :class:`LogXPlus1`, :class:`Reciprocal`)
with exact nth-derivative formulas, the :class:`TaylorExpansion` class
for building and evaluating truncated Taylor polynomials around any
point, the :class:`FunctionRegistry` catalog a plotting front end
selects functions from, and sampling, secant and tangent helpers.

Example
-------
>>> from pytaylor import TaylorExpansion, Cosine
>>> t = TaylorExpansion(0.0, 4, Cosine.derivative)
>>> round(t.eval(0.5), 4)
0.8776
"""

from pytaylor._factorial import MAX_ORDER, factorial
from pytaylor._version import __version__
from pytaylor.functions import (
    Cosine,
    Exp,
    Function,
    LogXPlus1,
    MathFunction,
    Reciprocal,
    Sine,
)
from pytaylor.lines import Line, difference_quotient, secant, tangent
from pytaylor.registry import FunctionRegistry, default_registry
from pytaylor.sampling import graph, samples
from pytaylor.taylor import TaylorExpansion, taylor_errors

__all__ = [
    "Cosine", "Exp", "Function", "FunctionRegistry", "Line", "LogXPlus1",
    "MAX_ORDER", "MathFunction", "Reciprocal", "Sine", "TaylorExpansion",
    "__version__", "default_registry", "difference_quotient", "factorial",
    "graph", "samples", "secant", "tangent", "taylor_errors",
]
