"""Модели ответов OCR документов"""
from typing import List

from pydantic import Field

from youtu.models.base import YoutuResponse


class IdCardOcrResponse(YoutuResponse):
    """Результат распознавания удостоверения личности.

    Каждое поле сопровождается списком посимвольных оценок уверенности.
    """

    session_id: str = ""
    name: str = ""
    name_confidence_all: List[int] = Field(default_factory=list)
    sex: str = ""
    sex_confidence_all: List[int] = Field(default_factory=list)
    nation: str = ""
    nation_confidence_all: List[int] = Field(default_factory=list)
    birth: str = ""
    birth_confidence_all: List[int] = Field(default_factory=list)
    address: str = ""
    address_confidence_all: List[int] = Field(default_factory=list)
    id: str = ""
    id_confidence_all: List[int] = Field(default_factory=list)
    front_image: str = Field("", alias="frontimage")
    front_image_confidence_all: List[int] = Field(
        default_factory=list, alias="frontimage_confidence_all"
    )
    watermask_status: int = 0
    watermask_confidence_all: List[int] = Field(default_factory=list)
    valid_date: str = ""
    valid_date_confidence_all: List[int] = Field(default_factory=list)
    authority: str = ""
    authority_confidence_all: List[int] = Field(default_factory=list)
    back_image: str = Field("", alias="backimage")
    back_image_confidence_all: List[int] = Field(
        default_factory=list, alias="backimage_confidence_all"
    )
    detail_errorcode: List[int] = Field(default_factory=list)
    detail_errormsg: List[str] = Field(default_factory=list)


class NameCardOcrResponse(YoutuResponse):
    session_id: str = ""
    phone: str = ""
    phone_confidence: float = 0.0
    name: str = ""
    name_confidence: float = 0.0
    image: str = ""  # Обработанное изображение (если запрошено retimage)
