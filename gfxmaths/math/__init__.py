"""
Математический суб‑пакет: Vec2, Vec3, Vec4, Quaternion, Mat4, Color.

Здесь же, один раз при импорте, на готовые классы навешиваются свизлы и
serde – в зависимости от переключателей gfxmaths.utils.config.
"""

from gfxmaths.math.vec4 import Vec4
from gfxmaths.math.vec3 import Vec3
from gfxmaths.math.vec2 import Vec2
from gfxmaths.math.quat import Quaternion
from gfxmaths.math.mat4 import Mat4
from gfxmaths.math.color import Color
from gfxmaths.math.serde import install_serde
from gfxmaths.math.swizzle import install_swizzles
from gfxmaths.utils.config import config

if config["swizzle"]:
    _targets = {2: Vec2, 3: Vec3, 4: Vec4}
    install_swizzles(Vec2, "xy", _targets)
    install_swizzles(Vec3, "xyz", _targets)
    install_swizzles(Vec4, "xyzw", _targets)
    install_swizzles(Color, "rgba", _targets)

if config["serde"]:
    for _cls in (Vec2, Vec3, Vec4, Quaternion, Mat4, Color):
        install_serde(_cls)

__all__ = ["Vec2", "Vec3", "Vec4", "Quaternion", "Mat4", "Color"]
