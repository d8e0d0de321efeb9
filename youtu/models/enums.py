"""Перечисления для запросов Youtu"""
from enum import IntEnum


class DetectMode(IntEnum):
    """Режим детекции лиц"""

    NORMAL = 0
    BIG_FACE = 1  # Режим крупного лица

    @classmethod
    def from_flag(cls, is_big_face: bool) -> "DetectMode":
        return cls.BIG_FACE if is_big_face else cls.NORMAL


class IdCardSide(IntEnum):
    """Сторона удостоверения личности"""

    FRONT = 0
    BACK = 1
