# gfxmaths/math/vec4.py
"""
4‑мерный вектор (float32). Годится и для однородных координат.
"""

import numpy as np

from gfxmaths.math.base import DTYPE, Vector, component


class Vec4(Vector):
    """Короткий и быстрый вектор‑4 (float32)."""

    __slots__ = ()
    _fields = ("x", "y", "z", "w")

    def __init__(self, x: float = 0.0, y: float = 0.0,
                 z: float = 0.0, w: float = 0.0):
        self._v = np.array([x, y, z, w], dtype=DTYPE)

    x = component(0)
    y = component(1)
    z = component(2)
    w = component(3)


Vec4.ZERO = Vec4.zero().frozen()
Vec4.ONE = Vec4.one().frozen()
