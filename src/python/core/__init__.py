"""Core numeric module.

This module contains the value types every other renderer component builds
on:

Components:
    approx: Adaptive-epsilon floating-point equality
    vector: Vector3/Point3 and the Axis enumeration
    interval: Closed intervals for ray parameter ranges
    color: Color3 with byte/hex conversion and pixel serialization
    ray: Ray value type and its Taichi kernel counterpart

All components are single precision (float32) and immutable, so values can
be shared freely between threads.
"""

from .approx import EPSILON, REAL, is_equal
from .color import Color3, write_colors_batch
from .interval import Interval
from .ray import KernelRay, Ray, make_ray, ray_at, vec3
from .vector import Axis, Point3, Vector3

__all__ = [
    "EPSILON",
    "REAL",
    "is_equal",
    "Axis",
    "Vector3",
    "Point3",
    "Interval",
    "Color3",
    "write_colors_batch",
    "Ray",
    "KernelRay",
    "make_ray",
    "ray_at",
    "vec3",
]
