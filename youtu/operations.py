"""Таблица операций Youtu: имя, семейство API и модель ответа"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Type

from youtu.models import (
    AddFaceResponse,
    DelFaceResponse,
    DelPersonResponse,
    DetectFaceResponse,
    FaceCompareResponse,
    FaceIdentifyResponse,
    FaceShapeResponse,
    FaceVerifyResponse,
    FoodDetectResponse,
    FuzzyDetectResponse,
    GetFaceIdsResponse,
    GetFaceInfoResponse,
    GetGroupIdsResponse,
    GetInfoResponse,
    GetPersonIdsResponse,
    IdCardOcrResponse,
    ImagePornResponse,
    ImageTagResponse,
    NameCardOcrResponse,
    NewPersonResponse,
    SetInfoResponse,
    YoutuResponse,
)
from youtu.routing import ApiFamily


@dataclass(frozen=True)
class Operation:
    """Описание одной операции API"""

    name: str
    family: ApiFamily
    response_model: Type[YoutuResponse]


DETECT_FACE = Operation("detectface", ApiFamily.FACE, DetectFaceResponse)
FACE_SHAPE = Operation("faceshape", ApiFamily.FACE, FaceShapeResponse)
FACE_COMPARE = Operation("facecompare", ApiFamily.FACE, FaceCompareResponse)
FACE_VERIFY = Operation("faceverify", ApiFamily.FACE, FaceVerifyResponse)
FACE_IDENTIFY = Operation("faceidentify", ApiFamily.FACE, FaceIdentifyResponse)

NEW_PERSON = Operation("newperson", ApiFamily.FACE, NewPersonResponse)
DEL_PERSON = Operation("delperson", ApiFamily.FACE, DelPersonResponse)
ADD_FACE = Operation("addface", ApiFamily.FACE, AddFaceResponse)
DEL_FACE = Operation("delface", ApiFamily.FACE, DelFaceResponse)
SET_INFO = Operation("setinfo", ApiFamily.FACE, SetInfoResponse)
GET_INFO = Operation("getinfo", ApiFamily.FACE, GetInfoResponse)
GET_GROUP_IDS = Operation("getgroupids", ApiFamily.FACE, GetGroupIdsResponse)
GET_PERSON_IDS = Operation("getpersonids", ApiFamily.FACE, GetPersonIdsResponse)
GET_FACE_IDS = Operation("getfaceids", ApiFamily.FACE, GetFaceIdsResponse)
GET_FACE_INFO = Operation("getfaceinfo", ApiFamily.FACE, GetFaceInfoResponse)

FUZZY_DETECT = Operation("fuzzydetect", ApiFamily.IMAGE, FuzzyDetectResponse)
FOOD_DETECT = Operation("fooddetect", ApiFamily.IMAGE, FoodDetectResponse)
IMAGE_TAG = Operation("imagetag", ApiFamily.IMAGE, ImageTagResponse)
IMAGE_PORN = Operation("imageporn", ApiFamily.IMAGE, ImagePornResponse)

IDCARD_OCR = Operation("idcardocr", ApiFamily.OCR, IdCardOcrResponse)
NAMECARD_OCR = Operation("namecardocr", ApiFamily.OCR, NameCardOcrResponse)

OPERATIONS: Dict[str, Operation] = {
    op.name: op
    for op in (
        DETECT_FACE,
        FACE_SHAPE,
        FACE_COMPARE,
        FACE_VERIFY,
        FACE_IDENTIFY,
        NEW_PERSON,
        DEL_PERSON,
        ADD_FACE,
        DEL_FACE,
        SET_INFO,
        GET_INFO,
        GET_GROUP_IDS,
        GET_PERSON_IDS,
        GET_FACE_IDS,
        GET_FACE_INFO,
        FUZZY_DETECT,
        FOOD_DETECT,
        IMAGE_TAG,
        IMAGE_PORN,
        IDCARD_OCR,
        NAMECARD_OCR,
    )
}
