"""Выбор источника изображения: inline-байты или URL"""
from __future__ import annotations

import base64
from enum import IntEnum
from typing import Iterable, Union

from youtu.exceptions import ConfigError

ImageData = Union[bytes, bytearray, str]


class ImageSource(IntEnum):
    """Индикатор типа изображения в запросе"""

    INLINE = 0  # Байты изображения, передаются в base64
    URL = 1  # Байты содержат URL изображения


def _as_url(data: ImageData) -> str:
    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise ConfigError(f"image url is not valid UTF-8: {e}") from e


def _as_base64(data: ImageData) -> str:
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.b64encode(bytes(data)).decode("ascii")


def attach_image(
    payload: dict,
    image: ImageData,
    image_type: int = ImageSource.INLINE,
    image_key: str = "image",
    url_key: str = "url",
) -> dict:
    """
    Положить изображение в запрос

    Заполняется ровно один из ключей: image_key (base64) при image_type == 0,
    иначе url_key (байты трактуются как UTF-8 строка URL).
    """
    payload.pop(image_key, None)
    payload.pop(url_key, None)
    if image_type == ImageSource.INLINE:
        payload[image_key] = _as_base64(image)
    else:
        payload[url_key] = _as_url(image)
    return payload


def attach_images(
    payload: dict,
    images: Iterable[ImageData],
    image_type: int = ImageSource.INLINE,
    image_key: str = "images",
    url_key: str = "urls",
) -> dict:
    """Списочный вариант attach_image"""
    payload.pop(image_key, None)
    payload.pop(url_key, None)
    if image_type == ImageSource.INLINE:
        payload[image_key] = [_as_base64(img) for img in images]
    else:
        payload[url_key] = [_as_url(img) for img in images]
    return payload
