# gfxmaths/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger – готовый объект logging.Logger ("gfxmaths")
    * Config – класс‑синглтон с переключателями

Сам синглтон живёт в gfxmaths.utils.config.config, имя подмодуля
не перекрываем.
"""

from .logger import logger
from .config import Config

__all__ = ["logger", "Config"]
