"""Linear RGB color type and plain-text pixel serialization.

``Color3`` has the same shape and operator algebra as ``Vector3`` but is a
separate type: adding a color to a vector raises ``TypeError``. Use
``Color3.from_vector`` / ``Color3.to_vector`` when a conversion is intended.

Byte conversion:
    - Float to byte clamps each component to ``[0, 0.999]`` and scales by
      256, so 1.0 maps to 255 and never overflows to 256.
    - Byte to float divides by 255.

Example:
    >>> from src.python.core.color import Color3, write_colors_batch
    >>> import io
    >>> Color3.from_hex("#FF00FF").to_bytes()
    (255, 0, 255)
    >>> out = io.StringIO()
    >>> write_colors_batch(out, [Color3.RED, Color3.GREEN])
    >>> out.getvalue()
    '255 0 0\\n0 255 0\\n'
"""

from __future__ import annotations

import functools
import numbers
import operator
import string
from collections.abc import Iterable, Iterator, Sequence
from typing import ClassVar, TextIO

import numpy as np
import numpy.typing as npt

from src.python.core.approx import REAL
from src.python.core.vector import Vector3

# Upper clamp before scaling; keeps 1.0 * 256 below 256
MAX_BYTE_COMPONENT = REAL(0.999)
FLOAT_TO_BYTE_SCALE = REAL(256.0)
BYTE_TO_FLOAT_SCALE = REAL(255.0)

HEX_COLOR_LENGTH = 7


def _parse_hex_component(src: str, name: str) -> int:
    if len(src) != 2 or any(c not in string.hexdigits for c in src):
        raise ValueError(f"Invalid {name} component '{src}' (expected 00-FF)")
    return int(src, 16)


class Color3:
    """An immutable linear RGB color with single-precision components.

    Components are conceptually in ``[0, 1]`` but are not clamped at
    construction; HDR values survive arithmetic and are only clamped when
    converted to bytes.

    Attributes:
        r: Red component.
        g: Green component.
        b: Blue component.
    """

    __slots__ = ("_e",)

    __array_ufunc__ = None

    BLACK: ClassVar[Color3]
    BLUE: ClassVar[Color3]
    CYAN: ClassVar[Color3]
    GREEN: ClassVar[Color3]
    PINK: ClassVar[Color3]
    RED: ClassVar[Color3]
    WHITE: ClassVar[Color3]
    YELLOW: ClassVar[Color3]

    def __init__(self, r: float = 0.0, g: float = 0.0, b: float = 0.0) -> None:
        with np.errstate(over="ignore"):
            e = np.array((r, g, b), dtype=REAL)
        e.flags.writeable = False
        self._e = e

    @classmethod
    def splat(cls, value: float) -> Color3:
        """Create a gray with all components set to ``value``."""
        return cls(value, value, value)

    @classmethod
    def _from_array(cls, e: npt.NDArray[np.float32]) -> Color3:
        c = cls.__new__(cls)
        e = e.astype(REAL, copy=False)
        e.flags.writeable = False
        c._e = e
        return c

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    @classmethod
    def from_bytes(cls, rgb: bytes | bytearray | Sequence[int]) -> Color3:
        """Create a color from three 8-bit components.

        Args:
            rgb: Red, green and blue bytes in ``[0, 255]``, either as a
                bytes-like object or as a sequence of integers.

        Returns:
            The color with each byte divided by 255.

        Raises:
            ValueError: If ``rgb`` does not hold exactly three values or a
                value does not fit in a byte.
            TypeError: If a value is not an integer.
        """
        if isinstance(rgb, (bytes, bytearray, memoryview)):
            data = np.frombuffer(bytes(rgb), dtype=np.uint8)
        else:
            values = [operator.index(c) for c in rgb]
            if any(not 0 <= v <= 255 for v in values):
                raise ValueError(f"Byte components must be in [0, 255], got {tuple(values)}")
            data = np.array(values, dtype=np.uint8)
        if data.shape != (3,):
            raise ValueError(f"Expected 3 byte components, got {data.size}")
        return cls._from_array(data.astype(REAL) / BYTE_TO_FLOAT_SCALE)

    @classmethod
    def from_hex(cls, value: str | bytes) -> Color3:
        """Parse a ``#RRGGBB`` hex literal (hex digits are case-insensitive).

        Args:
            value: The literal as text or as raw bytes.

        Returns:
            The parsed color, each component divided by 255.

        Raises:
            ValueError: If the bytes are not valid UTF-8, the leading ``#``
                is missing, the literal is not 7 bytes long, or the red,
                green or blue group is not a 2-digit hex number. The
                message names the stage or component that failed.
        """
        try:
            raw = value.encode("utf-8") if isinstance(value, str) else bytes(value)
            src = raw.decode("utf-8")
        except UnicodeError as e:
            raise ValueError(f"Invalid UTF-8 in hex color: {value!r}") from e

        if not src.startswith("#"):
            raise ValueError(f"Hex color must start with '#', got: {src}")

        n_bytes = len(raw)
        if n_bytes != HEX_COLOR_LENGTH:
            raise ValueError(
                f"Hex color must be {HEX_COLOR_LENGTH} bytes ('#RRGGBB'), got {n_bytes}: {src}"
            )

        rgb = (
            _parse_hex_component(src[1:3], "red"),
            _parse_hex_component(src[3:5], "green"),
            _parse_hex_component(src[5:7], "blue"),
        )
        return cls.from_bytes(rgb)

    def to_bytes(self) -> tuple[int, int, int]:
        """Convert to 8-bit components for display or file output.

        Each component is clamped to ``[0, 0.999]``, scaled by 256 and
        truncated. NaN maps to 0 and infinities to the nearest end.
        """
        finite = np.nan_to_num(self._e, nan=0.0)
        with np.errstate(all="ignore"):
            scaled = np.clip(finite, REAL(0.0), MAX_BYTE_COMPONENT) * FLOAT_TO_BYTE_SCALE
        r, g, b = (int(c) for c in scaled.astype(np.uint8))
        return (r, g, b)

    @classmethod
    def from_vector(cls, v: Vector3) -> Color3:
        return cls(v.x, v.y, v.z)

    def to_vector(self) -> Vector3:
        return Vector3(self.r, self.g, self.b)

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Return a writable ``float32`` copy of the components."""
        return self._e.copy()

    # -------------------------------------------------------------------------
    # Component access
    # -------------------------------------------------------------------------

    @property
    def r(self) -> float:
        return float(self._e[0])

    @property
    def g(self) -> float:
        return float(self._e[1])

    @property
    def b(self) -> float:
        return float(self._e[2])

    def __iter__(self) -> Iterator[float]:
        return (float(c) for c in self._e)

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: Color3) -> Color3:
        if not isinstance(other, Color3):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Color3._from_array(self._e + other._e)

    def __sub__(self, other: Color3) -> Color3:
        if not isinstance(other, Color3):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Color3._from_array(self._e - other._e)

    def __mul__(self, other: Color3 | float) -> Color3:
        """Component-wise product (filtering), or scaling by a scalar."""
        if isinstance(other, Color3):
            rhs = other._e
        elif isinstance(other, numbers.Real):
            with np.errstate(over="ignore"):
                rhs = REAL(other)
        else:
            return NotImplemented
        with np.errstate(all="ignore"):
            return Color3._from_array(self._e * rhs)

    def __rmul__(self, other: float) -> Color3:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Color3._from_array(REAL(other) * self._e)

    def __truediv__(self, other: Color3 | float) -> Color3:
        if isinstance(other, Color3):
            rhs = other._e
        elif isinstance(other, numbers.Real):
            with np.errstate(over="ignore"):
                rhs = REAL(other)
        else:
            return NotImplemented
        with np.errstate(all="ignore"):
            return Color3._from_array(self._e / rhs)

    @staticmethod
    def sum(colors: Iterable[Color3]) -> Color3:
        """Add up colors, starting from black (the additive identity)."""
        return functools.reduce(operator.add, colors, Color3.BLACK)

    @staticmethod
    def product(colors: Iterable[Color3]) -> Color3:
        """Multiply colors together, starting from white (the multiplicative identity)."""
        return functools.reduce(operator.mul, colors, Color3.WHITE)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color3):
            return NotImplemented
        return bool(np.array_equal(self._e, other._e))

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __str__(self) -> str:
        r, g, b = self.to_bytes()
        return f"{r} {g} {b}"

    def __repr__(self) -> str:
        return f"Color3({self._e[0]!s}, {self._e[1]!s}, {self._e[2]!s})"


Color3.BLACK = Color3.splat(0.0)
Color3.WHITE = Color3.splat(1.0)
Color3.RED = Color3(1.0, 0.0, 0.0)
Color3.GREEN = Color3(0.0, 1.0, 0.0)
Color3.BLUE = Color3(0.0, 0.0, 1.0)
Color3.CYAN = Color3(0.0, 1.0, 1.0)
Color3.PINK = Color3(1.0, 0.0, 1.0)
Color3.YELLOW = Color3(1.0, 1.0, 0.0)


def write_colors_batch(out: TextIO, colors: Iterable[Color3]) -> None:
    """Write one ``"R G B"`` line per color with a single write call.

    All lines are built in memory first, which is much faster than
    writing each pixel separately on unbuffered sinks such as a pipe.

    Args:
        out: Text sink owned by the caller (opened, flushed and closed
            outside this function).
        colors: Colors in output order.

    Raises:
        OSError: Propagated unchanged from ``out.write``; no retry.
    """
    buffer = "".join(f"{color}\n" for color in colors)
    out.write(buffer)
