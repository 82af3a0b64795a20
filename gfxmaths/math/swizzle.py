# gfxmaths/math/swizzle.py
"""
Свизлы в духе GLSL: v.zxy(), c.bgra(), ...

Для каждой упорядоченной выборки (с повторами) из 2, 3 или 4 букв‑
компонент типа генерируется метод без аргументов. Результат – Vec2,
Vec3 или Vec4 по длине имени (у Color тоже вектор, а не Color).
"""

import itertools

from gfxmaths.utils.logger import logger

ARITIES = (2, 3, 4)


def _make_swizzle(name, indices, target):
    def swizzle(self):
        return target.from_array(self._v[list(indices)])

    swizzle.__name__ = name
    swizzle.__qualname__ = name
    swizzle.__doc__ = f"Компоненты в порядке '{name}' как {target.__name__}."
    return swizzle


def swizzle_names(letters: str, arity: int):
    """Все имена длины `arity` над `letters` в порядке itertools.product."""
    return ["".join(combo) for combo in itertools.product(letters, repeat=arity)]


def install_swizzles(cls, letters: str, targets) -> int:
    """Повесить на `cls` все свизлы над `letters`.

    `targets` – {2: Vec2, 3: Vec3, 4: Vec4}. Возвращает число методов.
    """
    count = 0
    for arity in ARITIES:
        target = targets[arity]
        for name in swizzle_names(letters, arity):
            combo = tuple(letters.index(ch) for ch in name)
            if name in cls.__dict__:
                raise RuntimeError(f"{cls.__name__}.{name} already defined")
            setattr(cls, name, _make_swizzle(name, combo, target))
            count += 1
    logger.debug(f"[Swizzle] {cls.__name__}: {count} accessors over '{letters}'")
    return count
