"""Классификация изображений (imageapi)."""
from __future__ import annotations

from youtu.images import ImageData, ImageSource, attach_image
from youtu.models import (
    FoodDetectResponse,
    FuzzyDetectResponse,
    ImagePornResponse,
    ImageTagResponse,
)
from youtu.operations import FOOD_DETECT, FUZZY_DETECT, IMAGE_PORN, IMAGE_TAG, Operation


class ImageMixin:
    """Миксин анализа изображений"""

    def _classify(self, op: Operation, image: ImageData, image_type: int, seq: str):
        payload = {"seq": seq} if seq else {}
        attach_image(payload, image, image_type)
        return self._call(op, payload)

    def fuzzy_detect(
        self, image: ImageData, image_type: int = ImageSource.INLINE, seq: str = ""
    ) -> FuzzyDetectResponse:
        """Оценить размытость изображения"""
        return self._classify(FUZZY_DETECT, image, image_type, seq)

    def food_detect(
        self, image: ImageData, image_type: int = ImageSource.INLINE, seq: str = ""
    ) -> FoodDetectResponse:
        """Есть ли на изображении еда"""
        return self._classify(FOOD_DETECT, image, image_type, seq)

    def image_tag(
        self, image: ImageData, image_type: int = ImageSource.INLINE, seq: str = ""
    ) -> ImageTagResponse:
        """Теги содержимого изображения"""
        return self._classify(IMAGE_TAG, image, image_type, seq)

    def image_porn(
        self, image: ImageData, image_type: int = ImageSource.INLINE, seq: str = ""
    ) -> ImagePornResponse:
        """Классификация изображения на недопустимое содержимое"""
        return self._classify(IMAGE_PORN, image, image_type, seq)
