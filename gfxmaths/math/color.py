# gfxmaths/math/color.py
"""
RGBA‑цвет (float32), каналы номинально в [0; 1].

Тип ничего не зажимает: Color(2, -1, 0, 1) – вполне законное значение,
а сложение/вычитание могут выйти за диапазон.
"""

import numpy as np

from gfxmaths.math.base import DTYPE, Float32Struct, component, ieee

_BYTE_MAX = DTYPE(255.0)


def _byte(hex_value: int, shift: int) -> np.float32:
    return DTYPE((hex_value >> shift) & 0xFF) / _BYTE_MAX


class Color(Float32Struct):
    __slots__ = ()
    _fields = ("r", "g", "b", "a")

    def __init__(self, r: float = 0.0, g: float = 0.0,
                 b: float = 0.0, a: float = 1.0):
        self._v = np.array([r, g, b, a], dtype=DTYPE)

    r = component(0, "Красный канал [0.0, 1.0]")
    g = component(1, "Зелёный канал [0.0, 1.0]")
    b = component(2, "Синий канал [0.0, 1.0]")
    a = component(3, "Альфа [0.0, 1.0]")

    # -----------------------------------------------------------------
    # из hex‑чисел
    # -----------------------------------------------------------------
    @staticmethod
    def from_hex_rgb(hex_value: int) -> "Color":
        """0xRRGGBB, старший байт игнорируется, a = 1.0."""
        return Color(_byte(hex_value, 16), _byte(hex_value, 8), _byte(hex_value, 0), 1.0)

    @staticmethod
    def from_hex_bgr(hex_value: int) -> "Color":
        """0xBBGGRR, старший байт игнорируется, a = 1.0."""
        return Color(_byte(hex_value, 0), _byte(hex_value, 8), _byte(hex_value, 16), 1.0)

    @staticmethod
    def from_hex_rgba(hex_value: int) -> "Color":
        """0xRRGGBBAA."""
        return Color(_byte(hex_value, 24), _byte(hex_value, 16),
                     _byte(hex_value, 8), _byte(hex_value, 0))

    @staticmethod
    def from_hex_argb(hex_value: int) -> "Color":
        """0xAARRGGBB."""
        return Color(_byte(hex_value, 16), _byte(hex_value, 8),
                     _byte(hex_value, 0), _byte(hex_value, 24))

    # -----------------------------------------------------------------
    # массивы: 3 элемента (a = 1.0) или 4
    # -----------------------------------------------------------------
    @classmethod
    def from_array(cls, data) -> "Color":
        arr = np.array(data, dtype=DTYPE)
        if arr.shape == (3,):
            arr = np.append(arr, DTYPE(1.0))
        if arr.shape != (4,):
            raise ValueError(f"Color expects 3 or 4 values, got shape {arr.shape}")
        return cls._wrap(arr)

    def to_rgb_array(self) -> np.ndarray:
        """[r, g, b] без альфы."""
        return self._v[:3].copy()

    # -----------------------------------------------------------------
    # арифметика (без зажима)
    # -----------------------------------------------------------------
    @ieee
    def __add__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return self._wrap(self._v + other._v)

    @ieee
    def __sub__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return self._wrap(self._v - other._v)

    @ieee
    def __iadd__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        self._v += other._v
        return self

    @ieee
    def __isub__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        self._v -= other._v
        return self

    def __str__(self) -> str:
        # кратчайшая запись float32: 0.2, а не 0.20000000298023224
        r, g, b, a = (np.format_float_positional(c, trim="-") for c in self._v)
        return f"({r}, {g}, {b}, {a})"


# Базовые CSS‑цвета для быстрого прототипирования
# (https://www.w3.org/wiki/CSS/Properties/color/keywords)
Color.BLACK = Color(0.0, 0.0, 0.0, 1.0).frozen()
Color.SILVER = Color(0.75, 0.75, 0.75, 1.0).frozen()
Color.GRAY = Color(0.5, 0.5, 0.5, 1.0).frozen()
Color.WHITE = Color(1.0, 1.0, 1.0, 1.0).frozen()
Color.MAROON = Color(0.5, 0.0, 0.0, 1.0).frozen()
Color.RED = Color(1.0, 0.0, 0.0, 1.0).frozen()
Color.PURPLE = Color(0.5, 0.0, 0.5, 1.0).frozen()
Color.FUCHSIA = Color(1.0, 0.0, 1.0, 1.0).frozen()
Color.GREEN = Color(0.0, 0.5, 0.0, 1.0).frozen()
Color.LIME = Color(0.0, 1.0, 0.0, 1.0).frozen()
Color.OLIVE = Color(0.5, 0.5, 0.0, 1.0).frozen()
Color.YELLOW = Color(1.0, 1.0, 0.0, 1.0).frozen()
Color.NAVY = Color(0.0, 0.0, 0.5, 1.0).frozen()
Color.NAVI = Color.NAVY
Color.BLUE = Color(0.0, 0.0, 1.0, 1.0).frozen()
Color.TEAL = Color(0.0, 0.5, 0.5, 1.0).frozen()
Color.AQUA = Color(0.0, 1.0, 1.0, 1.0).frozen()
