"""
Клиент облачного API Youtu.

Модуль разбит на компоненты:
- core.py - подпись, хост, транспорт, debug
- face.py - детекция и сравнение лиц
- person.py - персоны, группы и их лица
- image.py - классификация изображений
- ocr.py - распознавание документов
"""
from __future__ import annotations

from .core import YoutuClientCore
from .face import FaceMixin
from .image import ImageMixin
from .ocr import OcrMixin
from .person import PersonMixin

__all__ = ["YoutuClient", "YoutuClientCore"]


class YoutuClient(
    YoutuClientCore,
    FaceMixin,
    PersonMixin,
    ImageMixin,
    OcrMixin,
):
    """
    Клиент Youtu.

    Композиция миксинов:
    - YoutuClientCore: подпись, транспорт, _call, set_debug
    - FaceMixin: detect_face, face_shape, face_compare, face_verify, face_identify
    - PersonMixin: new_person, del_person, add_face, del_face, set_info, get_info,
      get_group_ids, get_person_ids, get_face_ids, get_face_info
    - ImageMixin: fuzzy_detect, food_detect, image_tag, image_porn
    - OcrMixin: idcard_ocr, namecard_ocr
    """

    pass
