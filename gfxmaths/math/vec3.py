# -*- coding: utf-8 -*-
"""
Трёхмерный вектор на базе NumPy (float32).
"""
import numpy as np

from gfxmaths.math.base import DTYPE, Vector, component, ieee
from gfxmaths.math.vec4 import Vec4


class Vec3(Vector):
    __slots__ = ()
    _fields = ("x", "y", "z")

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._v = np.array([x, y, z], dtype=DTYPE)

    x = component(0)
    y = component(1)
    z = component(2)

    @ieee
    def cross(self, other) -> "Vec3":
        """Правое векторное произведение."""
        a, b = self._v, other._v
        return Vec3(
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        )

    def extend(self, w: float) -> Vec4:
        """(x, y, z) -> (x, y, z, w)"""
        return Vec4(self._v[0], self._v[1], self._v[2], w)


Vec3.ZERO = Vec3.zero().frozen()
Vec3.ONE = Vec3.one().frozen()
