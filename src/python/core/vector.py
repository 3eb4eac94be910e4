"""Single-precision 3D vector type and the generic axis enumeration.

``Vector3`` is an immutable value type holding three ``float32`` components.
Arithmetic follows plain IEEE semantics: dividing by zero produces
infinities or NaN rather than raising, which is what ``unit()`` relies on
for the zero vector. NumPy floating-point warnings are silenced for every
operation so degenerate inputs stay quiet.

``Point3`` is an alias of ``Vector3``; positions and displacements share the
same algebra.

Example:
    >>> from src.python.core.vector import Axis, Vector3
    >>> v = Vector3(3.0, 4.0, 0.0)
    >>> v.length()
    5.0
    >>> Vector3.X.cross(Vector3.Y) == Vector3.Z
    True
    >>> v[Axis.Y]
    4.0
    >>> f"{v.unit():.2f}"
    '[0.60, 0.80, 0.00]'
"""

from __future__ import annotations

import numbers
from collections.abc import Iterator
from enum import IntEnum
from typing import ClassVar

import numpy as np
import numpy.typing as npt
import taichi.math as tm

from src.python.core.approx import REAL


class Axis(IntEnum):
    """The three coordinate axes, usable as component indices.

    ``next()`` cycles X -> Y -> Z -> X, which lets axis-agnostic code
    (bounding-box slabs, splitting heuristics) walk every axis from any
    starting point.
    """

    X = 0
    Y = 1
    Z = 2

    def next(self) -> Axis:
        """Return the following axis, wrapping from Z back to X."""
        return Axis((self.value + 1) % 3)


class Vector3:
    """An immutable 3-component single-precision vector.

    Components are stored in a read-only ``float32`` array. Compound
    assignment (``+=``, ``*=``, ``/=``) rebinds the name to a new vector.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
    """

    __slots__ = ("_e",)

    # Make NumPy scalars defer to __rmul__ instead of broadcasting over us
    __array_ufunc__ = None

    AXES: ClassVar[tuple[Vector3, Vector3, Vector3]]
    INFINITY: ClassVar[Vector3]
    MAX: ClassVar[Vector3]
    MIN: ClassVar[Vector3]
    NAN: ClassVar[Vector3]
    NEG_INFINITY: ClassVar[Vector3]
    NEG_ONE: ClassVar[Vector3]
    NEG_X: ClassVar[Vector3]
    NEG_Y: ClassVar[Vector3]
    NEG_Z: ClassVar[Vector3]
    ONE: ClassVar[Vector3]
    X: ClassVar[Vector3]
    Y: ClassVar[Vector3]
    Z: ClassVar[Vector3]
    ZERO: ClassVar[Vector3]

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        with np.errstate(over="ignore"):
            e = np.array((x, y, z), dtype=REAL)
        e.flags.writeable = False
        self._e = e

    @classmethod
    def splat(cls, value: float) -> Vector3:
        """Create a vector with all components set to ``value``."""
        return cls(value, value, value)

    @classmethod
    def _from_array(cls, e: npt.NDArray[np.float32]) -> Vector3:
        v = cls.__new__(cls)
        e = e.astype(REAL, copy=False)
        e.flags.writeable = False
        v._e = e
        return v

    # -------------------------------------------------------------------------
    # Component access
    # -------------------------------------------------------------------------

    @property
    def x(self) -> float:
        return float(self._e[0])

    @property
    def y(self) -> float:
        return float(self._e[1])

    @property
    def z(self) -> float:
        return float(self._e[2])

    def get(self, axis: Axis) -> float:
        """Return the component along ``axis``."""
        return float(self._e[Axis(axis).value])

    def __getitem__(self, index: int) -> float:
        """Return component 0, 1 or 2 (x, y, z).

        Raises:
            IndexError: For any other index. Negative indices do not wrap.
            TypeError: If ``index`` is not an integer.
        """
        if not isinstance(index, numbers.Integral):
            raise TypeError(f"Vector3 indices must be integers, not {type(index).__name__}")
        if not 0 <= index <= 2:
            raise IndexError(f"Vector3 index out of range: {index} (expected 0, 1 or 2)")
        return float(self._e[index])

    def __iter__(self) -> Iterator[float]:
        return (float(c) for c in self._e)

    def __len__(self) -> int:
        return 3

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Return a writable ``float32`` copy of the components."""
        return self._e.copy()

    def to_taichi(self) -> tm.vec3:
        """Convert to a Taichi ``vec3`` for use as a kernel argument."""
        return tm.vec3(self.x, self.y, self.z)

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    def length_squared(self) -> float:
        """Squared Euclidean length; avoids the square root of ``length()``."""
        with np.errstate(all="ignore"):
            return float(np.dot(self._e, self._e))

    def length(self) -> float:
        with np.errstate(all="ignore"):
            return float(np.sqrt(REAL(self.length_squared())))

    def dot(self, other: Vector3) -> float:
        with np.errstate(all="ignore"):
            return float(np.dot(self._e, other._e))

    def cross(self, other: Vector3) -> Vector3:
        """Right-handed cross product ``self x other``."""
        a, b = self._e, other._e
        with np.errstate(all="ignore"):
            return Vector3._from_array(
                np.array(
                    (
                        a[1] * b[2] - a[2] * b[1],
                        a[2] * b[0] - a[0] * b[2],
                        a[0] * b[1] - a[1] * b[0],
                    ),
                    dtype=REAL,
                )
            )

    def unit(self) -> Vector3:
        """Return the vector scaled to unit length.

        The zero vector has no direction; dividing by its zero length yields
        NaN components instead of raising, so callers that can see
        degenerate input must check ``isfinite`` themselves.

        Returns:
            ``self / self.length()``.
        """
        return self / self.length()

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vector3._from_array(self._e + other._e)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vector3._from_array(self._e - other._e)

    def __neg__(self) -> Vector3:
        return Vector3._from_array(-self._e)

    def __mul__(self, other: Vector3 | float) -> Vector3:
        """Component-wise product with a vector, or scaling by a scalar."""
        if isinstance(other, Vector3):
            rhs = other._e
        elif isinstance(other, numbers.Real):
            with np.errstate(over="ignore"):
                rhs = REAL(other)
        else:
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vector3._from_array(self._e * rhs)

    def __rmul__(self, other: float) -> Vector3:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vector3._from_array(REAL(other) * self._e)

    def __truediv__(self, other: Vector3 | float) -> Vector3:
        if isinstance(other, Vector3):
            rhs = other._e
        elif isinstance(other, numbers.Real):
            with np.errstate(over="ignore"):
                rhs = REAL(other)
        else:
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vector3._from_array(self._e / rhs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(np.array_equal(self._e, other._e))

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def __format__(self, format_spec: str) -> str:
        """Render as ``[x, y, z]``; the format spec applies to each component.

        An empty format spec uses three decimals, so ``f"{v}"`` and ``f"{v:.5f}"``
        differ only in precision.
        """
        spec = format_spec or ".3f"
        return f"[{self.x:{spec}}, {self.y:{spec}}, {self.z:{spec}}]"

    def __str__(self) -> str:
        return format(self, "")

    def __repr__(self) -> str:
        return f"Vector3({self._e[0]!s}, {self._e[1]!s}, {self._e[2]!s})"


# A point in space shares the vector algebra
Point3 = Vector3

_F32 = np.finfo(REAL)

Vector3.ZERO = Vector3.splat(0.0)
Vector3.ONE = Vector3.splat(1.0)
Vector3.NEG_ONE = Vector3.splat(-1.0)
Vector3.X = Vector3(1.0, 0.0, 0.0)
Vector3.Y = Vector3(0.0, 1.0, 0.0)
Vector3.Z = Vector3(0.0, 0.0, 1.0)
Vector3.NEG_X = Vector3(-1.0, 0.0, 0.0)
Vector3.NEG_Y = Vector3(0.0, -1.0, 0.0)
Vector3.NEG_Z = Vector3(0.0, 0.0, -1.0)
Vector3.AXES = (Vector3.X, Vector3.Y, Vector3.Z)
Vector3.MIN = Vector3.splat(float(_F32.min))
Vector3.MAX = Vector3.splat(float(_F32.max))
Vector3.INFINITY = Vector3.splat(float("inf"))
Vector3.NEG_INFINITY = Vector3.splat(float("-inf"))
Vector3.NAN = Vector3.splat(float("nan"))
