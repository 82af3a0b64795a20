# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры для тестов gfxmaths.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from gfxmaths import Vec2, Vec3, Vec4
from gfxmaths.utils.config import Config

ROOT = Path(__file__).parent


@pytest.fixture(params=[Vec2(3, 4), Vec3(1, 2, 2), Vec4(1, 2, 3, 4)], ids=["vec2", "vec3", "vec4"])
def vector(request):
    """Ненулевой вектор каждой размерности (свежая копия на тест)."""
    return request.param.copy()


@pytest.fixture
def fresh_config():
    """Фабрика новых Config; после теста возвращаем прежний синглтон."""
    saved = Config._instance

    def make(path=None, features=""):
        Config.reset()
        return Config(path=path, features=features)

    yield make
    Config._instance = saved


@pytest.fixture
def run_with_features():
    """Выполнить код в отдельном интерпретаторе с GFXMATHS_FEATURES.

    Переключатели читаются только при импорте, поэтому иначе их не проверить.
    """

    def run(features: str, code: str) -> str:
        env = dict(os.environ)
        env["GFXMATHS_FEATURES"] = features
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT), env.get("PYTHONPATH")]))
        env.pop("GFXMATHS_CONFIG", None)
        proc = subprocess.run(
            [sys.executable, "-c", code],
            env=env, capture_output=True, text=True, check=True,
        )
        return proc.stdout.strip()

    return run
