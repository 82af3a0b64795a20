# gfxmaths/math/quat.py
# ---------------------------------------------------------------
# Кватернион (x, y, z, w) с поддержкой:
# - создания из оси/угла и из углов Эйлера (порядок ZYX),
# - умножения (Гамильтон) и вращения Vec3,
# - сопряжения через унарный минус,
# - базисных векторов right/up/forward.
#
# Норма НЕ контролируется: поля можно менять как угодно.
# ---------------------------------------------------------------

import numpy as np

from gfxmaths.math.base import DTYPE, Float32Struct, component, ieee
from gfxmaths.math.vec3 import Vec3


class Quaternion(Float32Struct):
    __slots__ = ()
    _fields = ("x", "y", "z", "w")

    def __init__(self, x=0.0, y=0.0, z=0.0, w=1.0):
        self._v = np.array([x, y, z, w], dtype=DTYPE)

    x = component(0)
    y = component(1)
    z = component(2)
    w = component(3)

    @staticmethod
    def identity() -> "Quaternion":
        """Поворот «ничего не делать»: (0, 0, 0, 1)."""
        return Quaternion()

    @staticmethod
    @ieee
    def axis_angle(axis: Vec3, radians: float) -> "Quaternion":
        """Поворот на `radians` против часовой стрелки, если смотреть вдоль `axis`.

        Ось нормализуется; нулевая ось даёт NaN.
        """
        if not isinstance(axis, Vec3):
            axis = Vec3.from_array(axis)
        half = DTYPE(radians) * DTYPE(0.5)
        v = axis.normalized() * np.sin(half)
        return Quaternion(v.x, v.y, v.z, np.cos(half))

    # -----------------------------------------------------------
    #  Углы Эйлера: сначала Z, потом Y, потом X
    # -----------------------------------------------------------
    @staticmethod
    @ieee
    def from_euler_radians_zyx(euler: Vec3) -> "Quaternion":
        """euler.x – вокруг X, euler.y – вокруг Y, euler.z – вокруг Z (радианы).

        Как и в axis_angle, вместо Vec3 подойдёт любая тройка чисел.
        """
        if not isinstance(euler, Vec3):
            euler = Vec3.from_array(euler)
        hx, hy, hz = euler.to_array() * DTYPE(0.5)
        cx, sx = np.cos(hx), np.sin(hx)
        cy, sy = np.cos(hy), np.sin(hy)
        cz, sz = np.cos(hz), np.sin(hz)

        return Quaternion(
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
            cx * cy * cz + sx * sy * sz,
        )

    @staticmethod
    def from_euler_angles_zyx(euler: Vec3) -> "Quaternion":
        """То же, что from_euler_radians_zyx, но в градусах."""
        if not isinstance(euler, Vec3):
            euler = Vec3.from_array(euler)
        return Quaternion.from_euler_radians_zyx(
            Vec3.from_array(np.radians(euler.to_array()))
        )

    @ieee
    def to_euler_radians_zyx(self) -> Vec3:
        """Обратно в углы Эйлера (радианы).

        У полюсов (±π/2 по Y) аргумент asin может чуть выйти за [-1, 1]
        из‑за округления – тогда y == NaN.
        """
        x, y, z, w = self._v

        sinr_cosp = 2 * (w * x + y * z)
        cosr_cosp = 1 - 2 * (x * x + y * y)
        roll = np.arctan2(sinr_cosp, cosr_cosp)

        sinp = 2 * (w * y - z * x)
        pitch = np.arcsin(sinp)

        siny_cosp = 2 * (w * z + x * y)
        cosy_cosp = 1 - 2 * (y * y + z * z)
        yaw = np.arctan2(siny_cosp, cosy_cosp)

        return Vec3(roll, pitch, yaw)

    def to_euler_angles_zyx(self) -> Vec3:
        return Vec3.from_array(np.degrees(self.to_euler_radians_zyx().to_array()))

    # -----------------------------------------------------------
    #  Базис после поворота
    # -----------------------------------------------------------
    @ieee
    def right(self) -> Vec3:
        """Повёрнутый (1, 0, 0)."""
        x, y, z, w = self._v
        return Vec3(1 - 2 * (y * y + z * z), 2 * (x * y + w * z), 2 * (x * z - w * y))

    @ieee
    def up(self) -> Vec3:
        """Повёрнутый (0, 1, 0)."""
        x, y, z, w = self._v
        return Vec3(2 * (x * y - w * z), 1 - 2 * (x * x + z * z), 2 * (y * z + w * x))

    @ieee
    def forward(self) -> Vec3:
        """Повёрнутый (0, 0, 1)."""
        x, y, z, w = self._v
        return Vec3(2 * (x * z + w * y), 2 * (y * z - w * x), 1 - 2 * (x * x + y * y))

    # -----------------------------------------------------------
    #  Операторы
    # -----------------------------------------------------------
    @ieee
    def __mul__(self, other):
        """q * q – произведение Гамильтона, q * Vec3 – поворот вектора."""
        if isinstance(other, Quaternion):
            ax, ay, az, aw = self._v
            bx, by, bz, bw = other._v
            return Quaternion(
                aw * bx + ax * bw + ay * bz - az * by,
                aw * by - ax * bz + ay * bw + az * bx,
                aw * bz + ax * by - ay * bx + az * bw,
                aw * bw - ax * bx - ay * by - az * bz,
            )
        if isinstance(other, Vec3):
            u = Vec3.from_array(self._v[:3])
            s = self._v[3]
            return (u * (2 * u.dot(other))
                    + other * (s * s - u.dot(u))
                    + u.cross(other) * (2 * s))
        return NotImplemented

    def __neg__(self) -> "Quaternion":
        """Сопряжение: для единичного кватерниона это обратный поворот."""
        x, y, z, w = self._v
        return Quaternion(-x, -y, -z, w)

    conjugate = __neg__


Quaternion.IDENTITY = Quaternion.identity().frozen()
