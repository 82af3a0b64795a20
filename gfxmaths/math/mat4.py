# gfxmaths/math/mat4.py
"""
Матрица 4×4 (float32).

Значения лежат в плоском массиве `values` из 16 чисел. По умолчанию –
column‑major, как ждёт OpenGL (и принимают остальные API). Переключатель
`mat-row-major` меняет раскладку на row‑major; выбор делается один раз
при импорте, в рантайме ветвления нет.

Все индексы – (column, row).
"""

import ctypes

import numpy as np

from gfxmaths.math.base import DTYPE, ieee
from gfxmaths.math.quat import Quaternion
from gfxmaths.math.vec3 import Vec3
from gfxmaths.math.vec4 import Vec4
from gfxmaths.utils.config import config
from gfxmaths.utils.logger import logger


def column_major(column: int, row: int) -> int:
    return row + column * 4


def row_major(column: int, row: int) -> int:
    return row * 4 + column


cr = row_major if config["mat_row_major"] else column_major
logger.debug(f"[Mat4] Storage layout: {cr.__name__}")

# _ROWS[r, c] – смещение элемента (row r, column c) в `values`.
_ROWS = np.array([[cr(c, r) for c in range(4)] for r in range(4)], dtype=np.intp)


def _check_index(column: int, row: int) -> None:
    if not (0 <= column < 4 and 0 <= row < 4):
        raise IndexError(f"Mat4 index (column={column}, row={row}) out of range")


class Mat4:
    __slots__ = ("values",)

    def __init__(self, values=None):
        """Без аргументов – единичная матрица, иначе прямая копия 16 чисел."""
        if values is None:
            self.values = np.identity(4, dtype=DTYPE).reshape(16)
        else:
            self.values = np.array(values, dtype=DTYPE)
            if self.values.shape != (16,):
                raise ValueError(
                    f"Mat4 expects 16 flat values, got shape {self.values.shape}"
                )

    # -----------------------------------------------------------------
    # внутренние преобразования «строки ↔ хранилище»
    # -----------------------------------------------------------------
    def _rows(self) -> np.ndarray:
        """Математическая матрица [row][column] (копия)."""
        return self.values[_ROWS]

    @staticmethod
    def _from_rows(rows: np.ndarray) -> "Mat4":
        res = Mat4.__new__(Mat4)
        res.values = np.empty(16, dtype=DTYPE)
        res.values[_ROWS] = rows
        return res

    # -----------------------------------------------------------------
    # конструкторы
    # -----------------------------------------------------------------
    @staticmethod
    def identity() -> "Mat4":
        return Mat4()

    @staticmethod
    def from_array(values) -> "Mat4":
        """Из плоского массива в 16 чисел (прямая копия, без перестановки)."""
        return Mat4(values)

    @staticmethod
    def from_rows(rows) -> "Mat4":
        """Из вложенного 4×4 массива rows[row][column]."""
        arr = np.array(rows, dtype=DTYPE)
        if arr.shape != (4, 4):
            raise ValueError(f"Mat4.from_rows expects 4x4 values, got shape {arr.shape}")
        return Mat4._from_rows(arr)

    @staticmethod
    def translate(t: Vec3) -> "Mat4":
        res = Mat4()
        res.values[cr(3, 0)] = t.x
        res.values[cr(3, 1)] = t.y
        res.values[cr(3, 2)] = t.z
        return res

    @staticmethod
    def rotate(r: Quaternion) -> "Mat4":
        """Столбцы верхнего 3×3 блока – right/up/forward кватерниона."""
        res = Mat4()
        for column, axis in enumerate((r.right(), r.up(), r.forward())):
            res.values[cr(column, 0)] = axis.x
            res.values[cr(column, 1)] = axis.y
            res.values[cr(column, 2)] = axis.z
        return res

    @staticmethod
    def scale(s: Vec3) -> "Mat4":
        res = Mat4()
        res.values[cr(0, 0)] = s.x
        res.values[cr(1, 1)] = s.y
        res.values[cr(2, 2)] = s.z
        return res

    @staticmethod
    def local_to_world(t: Vec3, r: Quaternion, s: Vec3) -> "Mat4":
        """Вектор сначала масштабируется на `s`, потом поворачивается на `r`,
        потом сдвигается на `t`."""
        return Mat4.translate(t) * Mat4.rotate(r) * Mat4.scale(s)

    @staticmethod
    def world_to_local(t: Vec3, r: Quaternion, s: Vec3) -> "Mat4":
        """Обратное к local_to_world(). Нулевой масштаб даёт inf/NaN."""
        return Mat4.scale(1.0 / s) * Mat4.rotate(-r) * Mat4.translate(-t)

    # -----------------------------------------------------------------
    # проекции (view space левый: +z вперёд, w_clip = z_view)
    # -----------------------------------------------------------------
    @staticmethod
    @ieee
    def orthographic_vulkan(left, right, bottom, top, near, far) -> "Mat4":
        """Ортографическая проекция, z -> [0; 1] (Vulkan, D3D)."""
        l, r, b, t, n, f = map(DTYPE, (left, right, bottom, top, near, far))
        res = Mat4()
        res.values[cr(0, 0)] = 2 / (r - l)
        res.values[cr(3, 0)] = -(r + l) / (r - l)
        res.values[cr(1, 1)] = 2 / (t - b)
        res.values[cr(3, 1)] = -(t + b) / (t - b)
        res.values[cr(2, 2)] = 1 / (f - n)
        res.values[cr(3, 2)] = -n / (f - n)
        return res

    @staticmethod
    @ieee
    def inverse_orthographic_vulkan(left, right, bottom, top, near, far) -> "Mat4":
        """Из clip space orthographic_vulkan() обратно в view space."""
        l, r, b, t, n, f = map(DTYPE, (left, right, bottom, top, near, far))
        res = Mat4()
        res.values[cr(0, 0)] = (r - l) / 2
        res.values[cr(3, 0)] = (r + l) / 2
        res.values[cr(1, 1)] = (t - b) / 2
        res.values[cr(3, 1)] = (t + b) / 2
        res.values[cr(2, 2)] = f - n
        res.values[cr(3, 2)] = n
        return res

    @staticmethod
    @ieee
    def orthographic_opengl(left, right, bottom, top, near, far) -> "Mat4":
        """Ортографическая проекция, z -> [-1; 1] (OpenGL)."""
        l, r, b, t, n, f = map(DTYPE, (left, right, bottom, top, near, far))
        res = Mat4()
        res.values[cr(0, 0)] = 2 / (r - l)
        res.values[cr(3, 0)] = -(r + l) / (r - l)
        res.values[cr(1, 1)] = 2 / (t - b)
        res.values[cr(3, 1)] = -(t + b) / (t - b)
        res.values[cr(2, 2)] = 2 / (f - n)
        res.values[cr(3, 2)] = -(f + n) / (f - n)
        return res

    @staticmethod
    @ieee
    def inverse_orthographic_opengl(left, right, bottom, top, near, far) -> "Mat4":
        l, r, b, t, n, f = map(DTYPE, (left, right, bottom, top, near, far))
        res = Mat4()
        res.values[cr(0, 0)] = (r - l) / 2
        res.values[cr(3, 0)] = (r + l) / 2
        res.values[cr(1, 1)] = (t - b) / 2
        res.values[cr(3, 1)] = (t + b) / 2
        res.values[cr(2, 2)] = (f - n) / 2
        res.values[cr(3, 2)] = (f + n) / 2
        return res

    @staticmethod
    @ieee
    def perspective_vulkan(fov_rad, near, far, aspect) -> "Mat4":
        """Перспективная проекция, z -> [0; 1] (Vulkan, D3D).

        `fov_rad` – вертикальный угол обзора, `aspect` – ширина / высота.
        """
        n, f, a = DTYPE(near), DTYPE(far), DTYPE(aspect)
        thfov = np.tan(DTYPE(fov_rad) * DTYPE(0.5))
        res = Mat4()
        res.values[cr(0, 0)] = 1 / (thfov * a)
        res.values[cr(1, 1)] = 1 / thfov
        res.values[cr(2, 2)] = f / (f - n)
        res.values[cr(3, 2)] = (-f * n) / (f - n)
        res.values[cr(2, 3)] = 1
        res.values[cr(3, 3)] = 0
        return res

    @staticmethod
    @ieee
    def inverse_perspective_vulkan(fov_rad, near, far, aspect) -> "Mat4":
        """Из clip space perspective_vulkan() обратно в view space (до деления на w)."""
        n, f, a = DTYPE(near), DTYPE(far), DTYPE(aspect)
        thfov = np.tan(DTYPE(fov_rad) * DTYPE(0.5))
        res = Mat4()
        res.values[cr(0, 0)] = thfov * a
        res.values[cr(1, 1)] = thfov
        res.values[cr(2, 2)] = 0
        res.values[cr(3, 2)] = 1
        res.values[cr(2, 3)] = (n - f) / (f * n)
        res.values[cr(3, 3)] = 1 / n
        return res

    @staticmethod
    @ieee
    def perspective_opengl(fov_rad, near, far, aspect) -> "Mat4":
        """Перспективная проекция, z -> [-1; 1] (OpenGL)."""
        n, f, a = DTYPE(near), DTYPE(far), DTYPE(aspect)
        thfov = np.tan(DTYPE(fov_rad) * DTYPE(0.5))
        res = Mat4()
        res.values[cr(0, 0)] = 1 / (thfov * a)
        res.values[cr(1, 1)] = 1 / thfov
        res.values[cr(2, 2)] = (f + n) / (f - n)
        res.values[cr(3, 2)] = (-2 * f * n) / (f - n)
        res.values[cr(2, 3)] = 1
        res.values[cr(3, 3)] = 0
        return res

    @staticmethod
    @ieee
    def inverse_perspective_opengl(fov_rad, near, far, aspect) -> "Mat4":
        n, f, a = DTYPE(near), DTYPE(far), DTYPE(aspect)
        thfov = np.tan(DTYPE(fov_rad) * DTYPE(0.5))
        res = Mat4()
        res.values[cr(0, 0)] = thfov * a
        res.values[cr(1, 1)] = thfov
        res.values[cr(2, 2)] = 0
        res.values[cr(3, 2)] = 1
        res.values[cr(2, 3)] = (n - f) / (2 * f * n)
        res.values[cr(3, 3)] = (f + n) / (2 * f * n)
        return res

    # -----------------------------------------------------------------
    # доступ к элементам
    # -----------------------------------------------------------------
    def get(self, column: int, row: int) -> float:
        _check_index(column, row)
        return float(self.values[cr(column, row)])

    def set(self, column: int, row: int, value: float) -> None:
        _check_index(column, row)
        self.values[cr(column, row)] = value

    def __getitem__(self, index):
        column, row = index
        return self.get(column, row)

    def __setitem__(self, index, value):
        column, row = index
        self.set(column, row, value)

    def transposed(self) -> "Mat4":
        return Mat4._from_rows(self._rows().T)

    # -----------------------------------------------------------------
    # умножение
    # -----------------------------------------------------------------
    @ieee
    def __mul__(self, other):
        """Mat4 * Mat4, Mat4 * Vec4 (однородное), Mat4 * Vec3 (только 3×3 блок)."""
        if isinstance(other, Mat4):
            return Mat4._from_rows(self._rows() @ other._rows())
        if isinstance(other, Vec4):
            return Vec4.from_array(self._rows() @ other.to_array())
        if isinstance(other, Vec3):
            # перенос не применяется: Vec3 – это направление
            return Vec3.from_array(self._rows()[:3, :3] @ other.to_array())
        return NotImplemented

    __matmul__ = __mul__

    def frozen(self) -> "Mat4":
        self.values.flags.writeable = False
        return self

    def copy(self) -> "Mat4":
        return Mat4(self.values)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return bool(np.array_equal(self.values, other.values))

    def __ne__(self, other) -> bool:
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    __hash__ = None

    def __repr__(self):
        return f"Mat4({self._rows()})"

    # -----------------------------------------------------------------
    # приведение к массивам
    # -----------------------------------------------------------------
    def to_array(self) -> np.ndarray:
        """Копия `values` в текущей раскладке."""
        return self.values.copy()

    def to_rows(self) -> np.ndarray:
        """Вложенный 4×4 массив [row][column]."""
        return self._rows()

    def to_gl(self) -> np.ndarray:
        """Плоский column‑major массив для glUniformMatrix4fv (независимо от раскладки)."""
        return np.ascontiguousarray(self._rows().T).reshape(16)


def _as_ptr(self):
    """Указатель на 16 подряд идущих float (только для чтения по смыслу)."""
    return self.values.ctypes.data_as(ctypes.POINTER(ctypes.c_float))


def _as_mut_ptr(self):
    """Изменяемый указатель на 16 float; у замороженной матрицы – ValueError."""
    if not self.values.flags.writeable:
        raise ValueError("Mat4 storage is read-only")
    return self.values.ctypes.data_as(ctypes.POINTER(ctypes.c_float))


def _legacy_orthographic(l, r, b, t, n, f) -> Mat4:
    """Старая ортографическая Vulkan‑проекция.

    Масштаб считается как 2*(r-l) и 2*(t-b), а не 2/(r-l); это НЕ то же
    самое, что orthographic_vulkan(). Оставлено ради совместимости.
    """
    l, r, b, t, n, f = map(DTYPE, (l, r, b, t, n, f))
    res = Mat4()
    res.values[cr(0, 0)] = 2 * (r - l)
    res.values[cr(3, 0)] = (-l - r) / (r - l)
    res.values[cr(1, 1)] = 2 * (t - b)
    res.values[cr(3, 1)] = (-b - t) / (t - b)
    res.values[cr(2, 2)] = 1 / (f - n)
    res.values[cr(3, 2)] = -n / (f - n)
    return res


def _legacy_perspective(fov_rad, near, far, aspect) -> Mat4:
    """Старое имя perspective_vulkan()."""
    return Mat4.perspective_vulkan(fov_rad, near, far, aspect)


if config["mat_pointer"]:
    Mat4.as_ptr = _as_ptr
    Mat4.as_mut_ptr = _as_mut_ptr

if config["mat_vulkan"]:
    Mat4.orthographic = staticmethod(ieee(_legacy_orthographic))
    Mat4.perspective = staticmethod(_legacy_perspective)

Mat4.IDENTITY = Mat4.identity().frozen()
