# gfxmaths/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета.
# Математика сама ничего не пишет в лог – только конфигурация и
# генерация свизлов/serde при импорте.
# ---------------------------------------------------------------

import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def init_logger(level=None):
    logging.basicConfig(format=LOG_FORMAT)
    log = logging.getLogger("gfxmaths")
    log.setLevel(level or os.environ.get("GFXMATHS_LOG_LEVEL", "WARNING").upper())
    return log


logger = init_logger()
