"""
Numeric equality helpers shared by every geometric predicate.

Floating-point values are compared with the machine epsilon of their
type, integral values are compared exactly. The tolerance is absolute,
not relative to the magnitude of the operands.
"""

from __future__ import annotations

import numbers

import numpy as np


def is_integral(value) -> bool:
    """Return True for Python and numpy integers (booleans excluded)."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def machine_epsilon(*values) -> float:
    """
    Machine epsilon of the widest floating type among the given values.

    Integral values do not take part in the promotion. Python floats count
    as float64, numpy floating scalars keep their own precision.

    Args:
        values: Scalars participating in a comparison.

    Returns:
        The epsilon of the promoted floating type, 0.0 if all are integral.
    """
    # deduplicated, np.result_type caps its argument count
    dtypes = {
        v.dtype if isinstance(v, np.floating) else np.dtype(np.float64)
        for v in values
        if not is_integral(v)
    }
    if not dtypes:
        return 0.0
    return float(np.finfo(np.result_type(*dtypes)).eps)


def equals(a, b) -> bool:
    """
    Compare two scalars, tolerating floating-point rounding.

    Args:
        a: First value.
        b: Second value.

    Returns:
        a == b for integral operands, b - eps <= a <= b + eps otherwise.
    """
    if is_integral(a) and is_integral(b):
        return a == b
    epsilon = machine_epsilon(a, b)
    return (b - epsilon <= a) and (a <= b + epsilon)
