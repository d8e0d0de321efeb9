"""Модели запросов и ответов Youtu"""

from youtu.models.base import WireModel, YoutuResponse
from youtu.models.enums import DetectMode, IdCardSide
from youtu.models.face import (
    Candidate,
    DetectFaceResponse,
    Face,
    FaceCompareResponse,
    FaceIdentifyResponse,
    FaceShape,
    FaceShapeResponse,
    FaceVerifyResponse,
    Point,
)
from youtu.models.image import (
    FoodDetectResponse,
    FuzzyDetectResponse,
    ImagePornResponse,
    ImageTag,
    ImageTagResponse,
)
from youtu.models.ocr import IdCardOcrResponse, NameCardOcrResponse
from youtu.models.person import (
    AddFaceResponse,
    DelFaceResponse,
    DelPersonResponse,
    GetFaceIdsResponse,
    GetFaceInfoResponse,
    GetGroupIdsResponse,
    GetInfoResponse,
    GetPersonIdsResponse,
    NewPersonResponse,
    SetInfoResponse,
)

__all__ = [
    "WireModel",
    "YoutuResponse",
    "DetectMode",
    "IdCardSide",
    "Face",
    "Point",
    "FaceShape",
    "Candidate",
    "DetectFaceResponse",
    "FaceShapeResponse",
    "FaceCompareResponse",
    "FaceVerifyResponse",
    "FaceIdentifyResponse",
    "NewPersonResponse",
    "DelPersonResponse",
    "AddFaceResponse",
    "DelFaceResponse",
    "SetInfoResponse",
    "GetInfoResponse",
    "GetGroupIdsResponse",
    "GetPersonIdsResponse",
    "GetFaceIdsResponse",
    "GetFaceInfoResponse",
    "ImageTag",
    "FuzzyDetectResponse",
    "FoodDetectResponse",
    "ImageTagResponse",
    "ImagePornResponse",
    "IdCardOcrResponse",
    "NameCardOcrResponse",
]
