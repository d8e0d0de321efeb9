"""Модели ответов детекции и сравнения лиц"""
from typing import List

from pydantic import Field

from youtu.models.base import WireModel, YoutuResponse


class Face(WireModel):
    """Параметры обнаруженного лица"""

    face_id: str = ""
    x: int = 0  # Левый верхний угол рамки
    y: int = 0
    width: float = 0.0
    height: float = 0.0
    gender: int = 0  # 0 (female) ~ 100 (male)
    age: int = 0
    expression: int = 0  # 0 (normal) ~ 50 (smile) ~ 100 (laugh)
    glass: bool = False
    pitch: int = 0
    yaw: int = 0
    roll: int = 0
    beauty: int = 0


class Point(WireModel):
    x: int = 0
    y: int = 0


class FaceShape(WireModel):
    """88 точек контура лица"""

    face_profile: List[Point] = Field(default_factory=list)  # 21 точка
    left_eye: List[Point] = Field(default_factory=list)  # 8
    right_eye: List[Point] = Field(default_factory=list)  # 8
    left_eyebrow: List[Point] = Field(default_factory=list)  # 8
    right_eyebrow: List[Point] = Field(default_factory=list)  # 8
    mouth: List[Point] = Field(default_factory=list)  # 22
    nose: List[Point] = Field(default_factory=list)  # 13


class Candidate(WireModel):
    person_id: str = ""
    face_id: str = ""
    confidence: float = 0.0
    tag: str = ""


class DetectFaceResponse(YoutuResponse):
    session_id: str = ""
    image_width: int = 0
    image_height: int = 0
    face: List[Face] = Field(default_factory=list)


class FaceShapeResponse(YoutuResponse):
    session_id: str = ""
    face_shape: List[FaceShape] = Field(default_factory=list)
    image_width: int = 0
    image_height: int = 0


class FaceCompareResponse(YoutuResponse):
    session_id: str = ""
    similarity: float = 0.0


class FaceVerifyResponse(YoutuResponse):
    ismatch: bool = False
    confidence: float = 0.0
    session_id: str = ""


class FaceIdentifyResponse(YoutuResponse):
    session_id: str = ""
    candidates: List[Candidate] = Field(default_factory=list)  # top-5
