"""Closed interval over one real axis.

Intervals bound ray parameters (``t_min``/``t_max``) and, later, the slabs of
bounding volumes. Every operation is total: the empty interval is encoded
as ``(+inf, -inf)`` so its ``size()`` is negative instead of an error, and
NaN simply compares false against both bounds.

Example:
    >>> from src.python.core.interval import Interval
    >>> hit_range = Interval(0.001, float("inf"))
    >>> hit_range.surrounds(0.0)
    False
    >>> Interval(0.0, 10.0).clamp(15.0)
    10.0
    >>> Interval.empty().size() < 0
    True
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from src.python.core.approx import REAL


def _to_real(value: float) -> float:
    with np.errstate(over="ignore"):
        return float(REAL(value))


@dataclass(frozen=True)
class Interval:
    """An inclusive range ``[min, max]`` of single-precision reals.

    ``min`` may exceed ``max``; such an interval contains nothing. A
    default-constructed interval is the canonical empty one.

    Attributes:
        min: Lower bound.
        max: Upper bound.
    """

    min: float = float("inf")
    max: float = float("-inf")

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", _to_real(self.min))
        object.__setattr__(self, "max", _to_real(self.max))

    @classmethod
    def empty(cls) -> Interval:
        """The interval containing no values: ``(+inf, -inf)``."""
        return cls(float("inf"), float("-inf"))

    @classmethod
    def universe(cls) -> Interval:
        """The interval containing every real: ``(-inf, +inf)``."""
        return cls(float("-inf"), float("inf"))

    @classmethod
    def from_range(cls, bounds: tuple[float, float]) -> Interval:
        """Build an interval from a ``(lo, hi)`` closed-range pair."""
        lo, hi = bounds
        return cls(lo, hi)

    def to_range(self) -> tuple[float, float]:
        return (self.min, self.max)

    def size(self) -> float:
        """Return ``max - min``.

        Negative for the empty interval, NaN when both bounds are the same
        infinity. Callers test the sign rather than catching an error.
        """
        with np.errstate(all="ignore"):
            return float(REAL(self.max) - REAL(self.min))

    def clamp(self, x: float) -> float:
        """Clamp ``x`` into ``[min, max]``.

        The lower bound is applied first, so clamping a finite value against
        the empty interval returns ``+inf``. NaN passes through unchanged.
        """
        x = _to_real(x)
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def contains(self, x: float) -> bool:
        """Inclusive test ``min <= x <= max``."""
        x = _to_real(x)
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        """Strict test ``min < x < max``."""
        x = _to_real(x)
        return self.min < x < self.max

    def __contains__(self, x: float) -> bool:
        return self.contains(x)
