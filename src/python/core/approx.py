"""Approximate floating-point equality for single-precision geometry.

A single fixed epsilon is too loose near zero and too tight for large
coordinates, so ``is_equal`` switches between an absolute tolerance for
magnitudes below one and a relative tolerance above it.

All values are compared in single precision (``REAL``), the numeric
precision used throughout the kernel.

Example:
    >>> from src.python.core.approx import is_equal
    >>> is_equal(0.1 + 0.2, 0.3)
    True
    >>> is_equal(float("nan"), float("nan"))
    False
"""

import numpy as np

# Scalar type of every component in the kernel
REAL = np.float32

# Absolute tolerance near zero, and the relative scale above 1.0
EPSILON = REAL(1e-8)


def is_equal(a: float, b: float) -> bool:
    """Compare two values for approximate equality with an adaptive epsilon.

    Args:
        a: First value (any real, including infinities and NaN).
        b: Second value.

    Returns:
        True if the values are equal within tolerance. NaN never equals
        anything, and infinities only equal an infinity of the same sign.
    """
    # Out-of-range doubles saturate to infinity like any other f32 overflow
    with np.errstate(over="ignore"):
        a = REAL(a)
        b = REAL(b)

    # Exact match covers equal zeros, equal infinities and identical values
    if a == b:
        return True

    if np.isnan(a) or np.isnan(b):
        return False

    # Differing infinities, or one infinite and one finite
    if np.isinf(a) or np.isinf(b):
        return False

    with np.errstate(over="ignore"):
        diff = abs(a - b)
    largest = max(abs(a), abs(b))

    if largest < 1.0:
        return bool(diff < EPSILON)

    relative_epsilon = EPSILON * largest
    return bool(diff < max(EPSILON, relative_epsilon))
