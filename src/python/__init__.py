"""Python implementation of the raytracer's numeric kernel.

This package provides the single-precision value types a ray tracer is built
on, with Taichi interop for GPU kernels:
- 3D vectors and points with the usual algebra
- Adaptive-epsilon float comparison
- Closed intervals for ray parameter ranges
- Linear RGB colors with byte, hex and PPM conversion
- Rays with parametric point evaluation

Subpackages:
    core: Vector, interval, color and ray value types
    preview: PPM and PNG image export
"""

__version__ = "0.1.0"
