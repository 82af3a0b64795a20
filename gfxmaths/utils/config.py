"""
Переключатели сборки, читаемые один раз при импорте пакета.

Источники (по возрастанию приоритета):
    1. DEFAULT_CONFIG;
    2. JSON‑файл, путь к которому лежит в GFXMATHS_CONFIG;
    3. переменная окружения GFXMATHS_FEATURES, например
       ``GFXMATHS_FEATURES="mat-row-major,-swizzle"``.

После импорта значения менять бессмысленно: раскладка матрицы, свизлы
и serde уже собраны.
"""

import json
import os
from pathlib import Path

from gfxmaths.utils.logger import logger

DEFAULT_CONFIG = {
    "mat_row_major": False,
    "swizzle": True,
    "mat_vulkan": True,
    "mat_pointer": True,
    "serde": True,
}

CONFIG_ENV = "GFXMATHS_CONFIG"
FEATURES_ENV = "GFXMATHS_FEATURES"


def feature_key(name: str) -> str:
    """'mat-row-major' -> 'mat_row_major'."""
    return name.strip().lower().replace("-", "_")


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = None, features: str = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._load(path, features)
        return cls._instance

    @classmethod
    def reset(cls):
        """Сбросить синглтон (нужно только тестам)."""
        cls._instance = None

    def _load(self, path, features):
        self.data = DEFAULT_CONFIG.copy()

        path = path or os.environ.get(CONFIG_ENV)
        self.path = Path(path) if path else None
        if self.path is not None:
            self._load_file()

        if features is None:
            features = os.environ.get(FEATURES_ENV, "")
        self._apply_features(features)

        logger.info(f"[Config] Enabled features: {', '.join(self.enabled_features()) or '-'}")

    def _load_file(self):
        if not self.path.is_file():
            logger.error(f"[Config] Config file {self.path} not found – using defaults.")
            return
        try:
            with self.path.open("r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error(f"[Config] Failed to read config: {exc}")
            return
        if not isinstance(loaded, dict):
            logger.error(f"[Config] {self.path} must contain a JSON object – using defaults.")
            return

        for key, value in loaded.items():
            key = feature_key(key)
            if key not in DEFAULT_CONFIG:
                logger.warning(f"[Config] Unknown option '{key}' ignored.")
                continue
            if not isinstance(value, bool):
                logger.warning(f"[Config] Option '{key}' must be true/false, got {value!r} – ignored.")
                continue
            self.data[key] = value
        logger.info(f"[Config] Loaded configuration from {self.path}.")

    def _apply_features(self, features: str):
        for raw in features.split(","):
            raw = raw.strip()
            if not raw:
                continue
            enabled = not raw.startswith("-")
            key = feature_key(raw.lstrip("+-"))
            if key not in DEFAULT_CONFIG:
                logger.warning(f"[Config] Unknown feature '{raw}' ignored.")
                continue
            self.data[key] = enabled

    def enabled_features(self):
        """Имена включённых переключателей в стиле Cargo ('mat-row-major')."""
        return [k.replace("_", "-") for k, v in self.data.items() if v]

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def get(self, key, default=None):
        return self.data.get(key, default)


config = Config()
