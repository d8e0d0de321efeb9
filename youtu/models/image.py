"""Модели ответов анализа изображений"""
from typing import List

from pydantic import Field

from youtu.models.base import WireModel, YoutuResponse


class ImageTag(WireModel):
    tag_name: str = ""
    tag_confidence: int = 0


class FuzzyDetectResponse(YoutuResponse):
    fuzzy: bool = False
    fuzzy_confidence: float = 0.0  # 0..1


class FoodDetectResponse(YoutuResponse):
    food: bool = False
    food_confidence: float = 0.0


class ImageTagResponse(YoutuResponse):
    seq: str = ""
    tags: List[ImageTag] = Field(default_factory=list)


class ImagePornResponse(YoutuResponse):
    seq: str = ""
    tags: List[ImageTag] = Field(default_factory=list)
