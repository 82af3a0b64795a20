# gfxmaths/math/vec2.py
import numpy as np

from gfxmaths.math.base import DTYPE, Vector, component
from gfxmaths.math.vec3 import Vec3


class Vec2(Vector):
    """Двумерный вектор (float32), например UV или экранные координаты."""

    __slots__ = ()
    _fields = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self._v = np.array([x, y], dtype=DTYPE)

    x = component(0)
    y = component(1)

    def extend(self, z: float) -> Vec3:
        return Vec3(self._v[0], self._v[1], z)


Vec2.ZERO = Vec2.zero().frozen()
Vec2.ONE = Vec2.one().frozen()
