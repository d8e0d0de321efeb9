"""Детекция, сравнение и идентификация лиц."""
from __future__ import annotations

from youtu.images import ImageData, ImageSource, attach_image
from youtu.models import (
    DetectFaceResponse,
    DetectMode,
    FaceCompareResponse,
    FaceIdentifyResponse,
    FaceShapeResponse,
    FaceVerifyResponse,
)
from youtu.operations import (
    DETECT_FACE,
    FACE_COMPARE,
    FACE_IDENTIFY,
    FACE_SHAPE,
    FACE_VERIFY,
)


def _mode_payload(is_big_face: bool) -> dict:
    mode = DetectMode.from_flag(is_big_face)
    return {"mode": int(mode)} if mode else {}


class FaceMixin:
    """Миксин операций над лицами"""

    def detect_face(
        self,
        image: ImageData,
        is_big_face: bool = False,
        image_type: int = ImageSource.INLINE,
    ) -> DetectFaceResponse:
        """
        Найти все лица на изображении и их атрибуты

        Args:
            image: байты изображения или URL
            is_big_face: режим крупного лица
            image_type: 0 - байты изображения, 1 - URL

        Returns:
            Положение (x, y, w, h) и атрибуты каждого лица:
            пол, возраст, выражение, очки, поворот головы
        """
        payload = attach_image(_mode_payload(is_big_face), image, image_type)
        return self._call(DETECT_FACE, payload)

    def face_shape(
        self,
        image: ImageData,
        is_big_face: bool = False,
        image_type: int = ImageSource.INLINE,
    ) -> FaceShapeResponse:
        """Контур лица из 88 точек (брови, глаза, нос, рот, овал)"""
        payload = attach_image(_mode_payload(is_big_face), image, image_type)
        return self._call(FACE_SHAPE, payload)

    def face_compare(
        self,
        image_a: ImageData,
        image_b: ImageData,
        image_type: int = ImageSource.INLINE,
    ) -> FaceCompareResponse:
        """Сходство двух лиц"""
        payload = attach_image({}, image_a, image_type, "imageA", "urlA")
        attach_image(payload, image_b, image_type, "imageB", "urlB")
        return self._call(FACE_COMPARE, payload)

    def face_verify(
        self,
        person_id: str,
        image: ImageData,
        image_type: int = ImageSource.INLINE,
    ) -> FaceVerifyResponse:
        """Принадлежит ли лицо указанной персоне"""
        payload = attach_image({"person_id": person_id}, image, image_type)
        return self._call(FACE_VERIFY, payload)

    def face_identify(
        self,
        group_id: str,
        image: ImageData,
        image_type: int = ImageSource.INLINE,
    ) -> FaceIdentifyResponse:
        """Найти наиболее похожие персоны в группе (top-5 кандидатов)"""
        payload = attach_image({"group_id": group_id}, image, image_type)
        return self._call(FACE_IDENTIFY, payload)
