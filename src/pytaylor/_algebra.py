"""Shared helpers for Taylor expansion arithmetic operators."""

from __future__ import annotations

import numpy as np


def _is_scalar(value) -> bool:
    """Return True if *value* is a numeric scalar (int, float, or numpy scalar)."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def _check_compatible(a, b) -> None:
    """Validate that two Taylor expansions can be combined arithmetically.

    Both operands must:
    - be the same type
    - share the expansion point
    - share the order
    """
    if type(a) is not type(b):
        raise TypeError(
            f"Cannot combine {type(a).__name__} with {type(b).__name__}; "
            f"operands must be the same type."
        )

    if a.point != b.point:
        raise ValueError(
            f"Expansion point mismatch: {a.point} vs {b.point}"
        )

    if a.order != b.order:
        raise ValueError(
            f"Order mismatch: {a.order} vs {b.order}"
        )
