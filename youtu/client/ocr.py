"""Распознавание документов (ocrapi)."""
from __future__ import annotations

from youtu.images import ImageData, ImageSource, attach_image
from youtu.models import IdCardOcrResponse, IdCardSide, NameCardOcrResponse
from youtu.operations import IDCARD_OCR, NAMECARD_OCR


class OcrMixin:
    """Миксин OCR"""

    def idcard_ocr(
        self,
        image: ImageData,
        image_type: int = ImageSource.INLINE,
        card_type: int = IdCardSide.FRONT,
        seq: str = "",
    ) -> IdCardOcrResponse:
        """
        Распознать удостоверение личности

        Args:
            image: байты или URL изображения
            image_type: 0 - байты изображения, 1 - URL
            card_type: 0 - лицевая сторона, 1 - оборотная
            seq: идентификатор запроса, уходит как session_id
        """
        payload = {}
        if card_type:
            payload["card_type"] = int(card_type)
        if seq:
            payload["session_id"] = seq
        attach_image(payload, image, image_type)
        return self._call(IDCARD_OCR, payload)

    def namecard_ocr(
        self,
        image: ImageData,
        image_type: int = ImageSource.INLINE,
        ret_image: bool = False,
        seq: str = "",
    ) -> NameCardOcrResponse:
        """Распознать визитку; ret_image - вернуть обработанное изображение"""
        payload = {}
        if ret_image:
            payload["retimage"] = True
        if seq:
            payload["session_id"] = seq
        attach_image(payload, image, image_type)
        return self._call(NAMECARD_OCR, payload)
