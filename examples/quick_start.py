"""Quick start example: expand cos(x) around a point and compare."""

import math

from pytaylor import Cosine, TaylorExpansion, samples

# Order-4 expansion around 0
taylor = TaylorExpansion(0.0, 4, Cosine.derivative)
print(taylor)

# Evaluate at a test point
x = 0.5
exact = Cosine.eval(x)
approx = taylor.eval(x)

print(f"\nExact:  {exact:.10f}")
print(f"Approx: {approx:.10f}")
print(f"Error:  {abs(approx - exact):.2e}")

# Worst error over the playground grid
grid = samples(2 * math.pi + 0.2, 100)
print(f"\nSup error on [-2pi-0.2, 2pi+0.2]: {taylor.error(Cosine, grid):.2e}")

# Same order, expanded closer to the far end
shifted = TaylorExpansion(math.pi, 4, Cosine.derivative)
print(f"Around pi, error at x=3: {abs(shifted.eval(3.0) - Cosine.eval(3.0)):.2e}")
