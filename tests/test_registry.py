"""Tests for FunctionRegistry (catalog lookups, expansion, plot data)."""

import math

import numpy as np
import pytest

from pytaylor import (
    Function,
    FunctionRegistry,
    Reciprocal,
    TaylorExpansion,
    default_registry,
    samples,
)
from conftest import square, square_derivative


BUILTINS = ["Exp", "Cosine", "Sine", "Log(x+1)"]


class TestCatalog:

    def test_builtin_order(self, registry):
        assert registry.identifiers == BUILTINS

    def test_custom_appended_last(self, registry_with_custom):
        assert registry_with_custom.identifiers == BUILTINS + ["Custom"]

    def test_len(self, registry, registry_with_custom):
        assert len(registry) == 4
        assert len(registry_with_custom) == 5

    def test_contains(self, registry):
        assert "Sine" in registry
        assert "Tangent" not in registry

    def test_iter_yields_functions(self, registry):
        items = list(registry)
        assert all(isinstance(f, Function) for f in items)
        assert [f.identifier for f in items] == BUILTINS

    def test_get_and_getitem(self, registry):
        assert registry.get("Exp") is registry["Exp"]

    def test_unknown_identifier(self, registry):
        with pytest.raises(KeyError, match="Unknown function 'Tan'"):
            registry.get("Tan")

    def test_duplicate_identifier(self):
        clash = Function("Sine", square, square_derivative)
        with pytest.raises(ValueError, match="Duplicate"):
            FunctionRegistry(clash)

    def test_custom_must_be_function(self):
        with pytest.raises(TypeError, match="custom_function"):
            FunctionRegistry(Reciprocal)

    def test_default_registry(self):
        assert default_registry().identifiers == BUILTINS

    def test_independent_instances(self):
        a = FunctionRegistry()
        b = FunctionRegistry(Function("Square", square, square_derivative))
        assert "Square" not in a
        assert "Square" in b

    def test_repr(self, registry):
        assert repr(registry).startswith("FunctionRegistry(identifiers=['Exp'")


class TestEvaluationByIdentifier:

    def test_eval(self, registry):
        assert math.isclose(registry.eval("Sine", 0.5), math.sin(0.5))
        assert math.isclose(registry.eval("Log(x+1)", 2.0), math.log(3.0))

    def test_derivative(self, registry):
        assert math.isclose(registry.derivative("Cosine", 0.5, 1), -math.sin(0.5))
        assert registry.derivative("Exp", 0.0, 7) == 1.0

    def test_is_in_domain(self, registry, registry_with_custom):
        assert registry.is_in_domain("Exp", -100.0)
        assert not registry.is_in_domain("Log(x+1)", -1.5)
        assert registry_with_custom.is_in_domain("Custom", -1.0)
        assert not registry_with_custom.is_in_domain("Custom", 0.5)

    def test_is_in_domain_array(self, registry_with_custom):
        mask = registry_with_custom.is_in_domain("Log(x+1)", np.array([-2.0, 0.0]))
        assert mask.tolist() == [False, True]
        mask = registry_with_custom.is_in_domain("Custom", [-1.0, 0.0, 1.0])
        assert mask.tolist() == [True, False, False]

    def test_custom_eval(self, registry_with_custom):
        assert registry_with_custom.eval("Custom", -4.0) == -0.25


class TestExpand:

    def test_cosine_scenario(self, registry):
        t = registry.expand("Cosine", 0.0, 4)
        assert isinstance(t, TaylorExpansion)
        np.testing.assert_allclose(t.coefficients, [1, 0, -0.5, 0, 1 / 24], atol=1e-15)
        assert round(registry.eval_expansion(t, 0.5), 3) == round(math.cos(0.5), 3)

    def test_exp_scenario(self, registry):
        t = registry.expand("Exp", 0.0, 3)
        np.testing.assert_allclose(t.coefficients, [1, 1, 0.5, 1 / 6])
        assert math.isclose(registry.eval_expansion(t, 1.0), 8 / 3)

    def test_in_domain_point_kept(self, registry):
        assert registry.expand("Sine", 1.25, 3).point == 1.25

    def test_out_of_domain_point_falls_back(self, registry):
        """Log(x+1) at x = -2 falls back to its default point 0."""
        t = registry.expand("Log(x+1)", -2.0, 5)
        assert t.point == 0.0
        assert np.all(np.isfinite(t.coefficients))

    def test_custom_default_point(self, registry_with_custom):
        """1/x tapped at x = 0.5 expands around -1 instead."""
        t = registry_with_custom.expand("Custom", 0.5, 3)
        assert t.point == -1.0
        np.testing.assert_allclose(t.coefficients, [-1, -1, -1, -1])

    def test_expansion_point(self, registry_with_custom):
        assert registry_with_custom.expansion_point("Custom", -3.0) == -3.0
        assert registry_with_custom.expansion_point("Custom", 0.0) == -1.0
        assert registry_with_custom.expansion_point("Exp", 9.0) == 9.0

    def test_order_bound_enforced(self, registry):
        with pytest.raises(ValueError):
            registry.expand("Sine", 0.0, 21)

    def test_unknown_identifier(self, registry):
        with pytest.raises(KeyError):
            registry.expand("Tan", 0.0, 3)


class TestPlotData:

    def test_graph_log_domain(self, registry):
        pts = registry.graph("Log(x+1)", samples(2, 4))
        assert pts[:, 0].tolist() == [-0.5, 0.0, 0.5, 1.0, 1.5, 2.0]
        assert np.all(np.isfinite(pts[:, 1]))

    def test_graph_custom_domain(self, registry_with_custom):
        pts = registry_with_custom.graph("Custom", samples(2, 4))
        assert pts[:, 0].tolist() == [-2.0, -1.5, -1.0, -0.5]

    def test_graph_full_line(self, registry, plot_grid):
        pts = registry.graph("Sine", plot_grid)
        assert len(pts) == len(plot_grid)

    def test_taylor_graph_restricted_to_domain(self, registry):
        pts = registry.taylor_graph("Log(x+1)", 0.0, 3, samples(2, 4))
        assert pts[:, 0].tolist() == [-0.5, 0.0, 0.5, 1.0, 1.5, 2.0]

    def test_taylor_graph_values(self, registry):
        xs = samples(1, 2)
        pts = registry.taylor_graph("Exp", 0.0, 3, xs)
        expected = 1 + xs + xs ** 2 / 2 + xs ** 3 / 6
        np.testing.assert_allclose(pts[:, 1], expected)

    def test_taylor_graph_uses_fallback_point(self, registry_with_custom):
        xs = samples(2, 4)
        a = registry_with_custom.taylor_graph("Custom", 1.0, 4, xs)
        b = registry_with_custom.taylor_graph("Custom", -1.0, 4, xs)
        np.testing.assert_array_equal(a, b)

    def test_taylor_graph_high_order_finite(self, registry):
        """Order-20 Log(x+1) polynomial around 0.9 stays finite on the domain."""
        xs = samples(2, 40)
        pts = registry.taylor_graph("Log(x+1)", 0.9, 20, xs)
        assert np.all(np.isfinite(pts[:, 1]))
        assert len(pts) == int(np.sum(xs > -1))
