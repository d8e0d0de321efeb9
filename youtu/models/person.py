"""Модели ответов управления персонами и группами"""
from typing import List

from pydantic import Field

from youtu.models.base import YoutuResponse
from youtu.models.face import Face


class NewPersonResponse(YoutuResponse):
    session_id: str = ""
    suc_group: int = 0
    suc_face: int = 0
    person_id: str = ""
    face_id: str = ""
    group_ids: List[str] = Field(default_factory=list)


class DelPersonResponse(YoutuResponse):
    session_id: str = ""
    deleted: int = 0
    person_id: str = ""


class AddFaceResponse(YoutuResponse):
    session_id: str = ""
    added: int = 0
    face_ids: List[str] = Field(default_factory=list)
    ret_codes: List[int] = Field(default_factory=list)  # Код результата для каждого изображения


class DelFaceResponse(YoutuResponse):
    session_id: str = ""
    deleted: int = 0
    face_ids: List[str] = Field(default_factory=list)


class SetInfoResponse(YoutuResponse):
    session_id: str = ""
    person_id: str = ""


class GetInfoResponse(YoutuResponse):
    person_name: str = ""
    person_id: str = ""
    group_ids: List[str] = Field(default_factory=list)
    face_ids: List[str] = Field(default_factory=list)
    session_id: str = ""


class GetGroupIdsResponse(YoutuResponse):
    group_ids: List[str] = Field(default_factory=list)


class GetPersonIdsResponse(YoutuResponse):
    person_ids: List[str] = Field(default_factory=list)


class GetFaceIdsResponse(YoutuResponse):
    face_ids: List[str] = Field(default_factory=list)


class GetFaceInfoResponse(YoutuResponse):
    face_info: Face = Field(default_factory=Face)
