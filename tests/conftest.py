"""Shared test fixtures for pytaylor tests."""

import math

import numpy as np
import pytest

from pytaylor import (
    Cosine,
    Exp,
    Function,
    FunctionRegistry,
    Reciprocal,
    TaylorExpansion,
    samples,
)


# ---------------------------------------------------------------------------
# Test functions
# ---------------------------------------------------------------------------

def square(x):
    """x^2"""
    return x * x


def square_derivative(x, order):
    """Closed-form derivatives of x^2."""
    if order == 0:
        return x * x
    if order == 1:
        return 2.0 * x
    if order == 2:
        return 2.0
    return 0.0


def central_difference(f, x, h=1e-5):
    """Second-order central difference of a scalar function."""
    return (f(x + h) - f(x - h)) / (2.0 * h)


# ---------------------------------------------------------------------------
# Catalog Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="module")
def custom_function():
    """1/x restricted to x < -0.01, default expansion point -1."""
    return Function.from_math_function(Reciprocal)


@pytest.fixture(scope="module")
def registry():
    """Builtin catalog only."""
    return FunctionRegistry()


@pytest.fixture(scope="module")
def registry_with_custom(custom_function):
    """Builtin catalog plus the 1/x custom entry."""
    return FunctionRegistry(custom_function)


# ---------------------------------------------------------------------------
# Expansion Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="module")
def cos_taylor_4():
    """Order-4 Maclaurin polynomial of cos(x): 1 - x^2/2 + x^4/24."""
    return TaylorExpansion(0.0, 4, Cosine.derivative)


@pytest.fixture(scope="module")
def exp_taylor_3():
    """Order-3 Maclaurin polynomial of e^x: 1 + x + x^2/2 + x^3/6."""
    return TaylorExpansion(0.0, 3, Exp.derivative)


@pytest.fixture(scope="module")
def plot_grid():
    """Default playground grid: max_x = 2*pi + 0.2, 100 samples."""
    return samples(2 * math.pi + 0.2, 100)


@pytest.fixture
def unit_grid():
    """[-1, 1] in steps of 0.05."""
    return np.linspace(-1.0, 1.0, 41)
