import math

import gfxmaths as gm
from gfxmaths.utils import logger


def main():
    logger.setLevel("INFO")

    # куб: сдвиг, поворот вокруг Y, равномерный масштаб
    model = gm.Mat4.local_to_world(
        gm.Vec3(0.0, 0.0, 5.0),
        gm.Quaternion.axis_angle(gm.Vec3(0.0, 1.0, 0.0), math.radians(30)),
        gm.Vec3(2.0, 2.0, 2.0),
    )
    proj = gm.Mat4.perspective_vulkan(math.radians(60), 0.1, 100.0, 16 / 9)

    corner = gm.Vec4(0.5, 0.5, 0.5, 1.0)
    clip = proj * model * corner
    ndc = clip.xyz() / clip.w

    logger.info(f"corner {corner} -> ndc {ndc}")
    logger.info(f"tint {gm.Color.from_hex_rgb(0x3366CC)}")

    # в шейдер уходит плоский column-major массив
    return model.to_gl()


if __name__ == "__main__":
    main()
