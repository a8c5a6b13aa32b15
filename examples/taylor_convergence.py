"""Catalog walk-through: how the error reacts to the order for every function."""

from pytaylor import Function, FunctionRegistry, Reciprocal, samples, taylor_errors

registry = FunctionRegistry(Function.from_math_function(Reciprocal))
grid = samples(2.0, 40)

for function in registry:
    point = function.default_taylor_point
    print(f"\n{function.identifier} around a={point}")
    for order in (1, 5, 10, 20):
        taylor = registry.expand(function.identifier, point, order)
        print(f"  order {order:2d}: sup error on [-2, 2] = "
              f"{taylor.error(function, grid):.3e}")

# ln(1+x) only converges on (-1, 1]: past x = 1 more terms make it worse
print()
taylor_errors(registry["Log(x+1)"], 0.0, 2.0, max_order=20, verbose=True)
