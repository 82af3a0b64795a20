# gfxmaths/math/serde.py
"""
Структурная (де)сериализация: объект <-> dict с именами полей.

Результат to_dict() состоит из обычных float и сразу годится для
json.dumps(); Mat4 пишется как {"values": [16 чисел]} в текущей раскладке.
"""

from gfxmaths.utils.logger import logger


def _struct_to_dict(self):
    return {name: float(value) for name, value in zip(self._fields, self._v)}


def _struct_from_dict(cls, data):
    return cls.from_array([data[name] for name in cls._fields])


def _mat4_to_dict(self):
    return {"values": self.values.tolist()}


def _mat4_from_dict(cls, data):
    return cls.from_array(data["values"])


def install_serde(cls) -> None:
    if hasattr(cls, "_fields"):
        cls.to_dict = _struct_to_dict
        cls.from_dict = classmethod(_struct_from_dict)
    else:
        cls.to_dict = _mat4_to_dict
        cls.from_dict = classmethod(_mat4_from_dict)
    logger.debug(f"[Serde] {cls.__name__}: to_dict/from_dict installed")
