# gfxmaths/math/base.py
# ---------------------------------------------------------------
# Общая основа всех типов: хранение компонент в np.float32‑массиве,
# сравнение, копирование, перевод в массивы/кортежи и поэлементная
# арифметика векторов.
#
# Вся арифметика идёт по правилам IEEE‑754: деление на ноль и
# нормализация нулевого вектора дают inf/NaN, а не исключение.
# ---------------------------------------------------------------

import functools
import numbers
from typing import Iterable, Tuple

import numpy as np

DTYPE = np.float32


def ieee(func):
    """Выполнить `func` с выключенными предупреждениями numpy о inf/NaN."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with np.errstate(all="ignore"):
            return func(*args, **kwargs)
    return wrapper


def is_scalar(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def component(index: int, doc: str = None) -> property:
    """Свойство‑компонента с сеттером (v.x, v.x = 1.0)."""

    def getter(self) -> float:
        return float(self._v[index])

    def setter(self, value: float) -> None:
        self._v[index] = value

    return property(getter, setter, doc=doc)


class Float32Struct:
    """Фиксированный набор float32‑полей (_fields) в одном ndarray."""

    __slots__ = ("_v",)
    _fields: Tuple[str, ...] = ()

    # numpy‑скаляры слева (np.float32(2) * v) должны отдавать операцию нам
    __array_ufunc__ = None

    @classmethod
    def _wrap(cls, array: np.ndarray):
        """Создать объект поверх уже готового массива (без копии)."""
        obj = cls.__new__(cls)
        obj._v = array
        return obj

    @classmethod
    def from_array(cls, data: Iterable[float]):
        """Из массива/последовательности ровно len(_fields) чисел."""
        arr = np.array(data, dtype=DTYPE)
        if arr.shape != (len(cls._fields),):
            raise ValueError(
                f"{cls.__name__} expects {len(cls._fields)} values, got shape {arr.shape}"
            )
        return cls._wrap(arr)

    def frozen(self):
        """Сделать хранилище только‑для‑чтения (для констант класса)."""
        self._v.flags.writeable = False
        return self

    def copy(self):
        return self._wrap(self._v.copy())

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    # -----------------------------------------------------------------
    # приведение к массивам
    # -----------------------------------------------------------------
    def to_array(self) -> np.ndarray:
        """Копия компонент (float32) в порядке полей."""
        return self._v.copy()

    as_np = to_array

    def to_tuple(self) -> Tuple[float, ...]:
        return tuple(self._v.tolist())

    def to_list(self):
        return self._v.tolist()

    # -----------------------------------------------------------------
    # протокол последовательности
    # -----------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self):
        return iter(self._v.tolist())

    def __getitem__(self, index: int) -> float:
        return float(self._v[index])

    # -----------------------------------------------------------------
    # сравнение (как IEEE: NaN != NaN)
    # -----------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __ne__(self, other) -> bool:
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    __hash__ = None

    def __repr__(self) -> str:
        body = ", ".join(f"{float(c):.3f}" for c in self._v)
        return f"{type(self).__name__}({body})"


class Vector(Float32Struct):
    """Поэлементная арифметика для Vec2/Vec3/Vec4."""

    __slots__ = ()

    @classmethod
    def zero(cls):
        return cls._wrap(np.zeros(len(cls._fields), dtype=DTYPE))

    @classmethod
    def one(cls):
        return cls._wrap(np.ones(len(cls._fields), dtype=DTYPE))

    # -----------------------------------------------------------------
    # длина / нормализация
    # -----------------------------------------------------------------
    @ieee
    def sqr_magnitude(self) -> float:
        """Квадрат длины – дешевле, чем magnitude()."""
        return float(np.dot(self._v, self._v))

    @ieee
    def magnitude(self) -> float:
        return float(np.sqrt(np.dot(self._v, self._v)))

    @ieee
    def normalize(self):
        """Нормализует на месте и возвращает self.

        Нулевой вектор превращается в NaN – это не ошибка.
        """
        self._v /= DTYPE(self.magnitude())
        return self

    def normalized(self):
        return self.copy().normalize()

    @ieee
    def dot(self, other) -> float:
        return float(np.dot(self._v, other._v))

    # -----------------------------------------------------------------
    # арифметика (операторы возвращают новый объект)
    # -----------------------------------------------------------------
    def _operand(self, other):
        if type(other) is type(self):
            return other._v
        if is_scalar(other):
            return DTYPE(other)
        return None

    @ieee
    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._wrap(self._v + other._v)

    @ieee
    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._wrap(self._v - other._v)

    @ieee
    def __mul__(self, other):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self._wrap(self._v * rhs)

    @ieee
    def __rmul__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self._wrap(DTYPE(other) * self._v)

    @ieee
    def __truediv__(self, other):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self._wrap(self._v / rhs)

    @ieee
    def __rtruediv__(self, other):
        # k / v == (k / v.x, k / v.y, ...)
        if not is_scalar(other):
            return NotImplemented
        return self._wrap(DTYPE(other) / self._v)

    def __neg__(self):
        return self._wrap(-self._v)

    def __pos__(self):
        return self.copy()

    # -----------------------------------------------------------------
    # изменение на месте
    # -----------------------------------------------------------------
    @ieee
    def __iadd__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        self._v += other._v
        return self

    @ieee
    def __isub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        self._v -= other._v
        return self

    @ieee
    def __imul__(self, other):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        self._v *= rhs
        return self

    @ieee
    def __itruediv__(self, other):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        self._v /= rhs
        return self
