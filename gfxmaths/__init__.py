"""
gfxmaths – самые нужные графические примитивы для Python:
Vec2/Vec3/Vec4, Quaternion, Mat4 и Color на float32 (NumPy).
"""

from gfxmaths.utils import logger
from gfxmaths.utils.config import config
from gfxmaths.math import Vec2, Vec3, Vec4, Quaternion, Mat4, Color

__version__ = "0.2.9"

__all__ = [
    "Vec2",
    "Vec3",
    "Vec4",
    "Quaternion",
    "Mat4",
    "Color",
    "config",
    "logger",
]
