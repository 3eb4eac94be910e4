"""Ray primitive for Python scope and for Taichi kernels.

``Ray`` is the immutable value type used by host code (camera setup, tests,
scene construction). ``KernelRay`` is its GPU-side counterpart: a Taichi
dataclass evaluated with ``ray_at`` inside kernels. Both compute the same
parametric point ``origin + t * direction``.

Example:
    >>> from src.python.core.ray import Ray
    >>> from src.python.core.vector import Point3, Vector3
    >>> ray = Ray(Point3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0))
    >>> ray.at(5.0)
    Vector3(5.0, 0.0, 0.0)

Inside a kernel, pass the components as ``vec3`` arguments:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> @ti.kernel
    ... def march(origin: vec3, direction: vec3, t: ti.f32) -> vec3:
    ...     return ray_at(make_ray(origin, direction), t)
    >>> march(ray.origin.to_taichi(), ray.direction.to_taichi(), 5.0)
"""

from dataclasses import dataclass

import taichi as ti
import taichi.math as tm

from src.python.core.vector import Point3, Vector3

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3


@dataclass(frozen=True)
class Ray:
    """A half-line from ``origin`` along ``direction``.

    No validation is done: a zero direction is legal and gives a degenerate
    ray whose every point is the origin. The direction need not be unit
    length, so ``t`` is measured in multiples of ``direction``.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray.
    """

    origin: Point3
    direction: Vector3

    def at(self, t: float) -> Point3:
        """Return the point ``origin + t * direction``.

        Args:
            t: Ray parameter. Negative values lie behind the origin.
        """
        return self.origin + t * self.direction


@ti.dataclass
class KernelRay:
    """Taichi-side ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray (vec3).
        direction: The direction vector of the ray (vec3).
    """

    origin: vec3
    direction: vec3


@ti.func
def ray_at(ray: KernelRay, t: ti.f32) -> vec3:
    """Compute the point along a kernel ray at parameter t."""
    return ray.origin + t * ray.direction


@ti.func
def make_ray(origin: vec3, direction: vec3) -> KernelRay:
    """Create a kernel ray from origin and direction."""
    return KernelRay(origin=origin, direction=direction)
