"""Управление персонами, группами и лицами персон."""
from __future__ import annotations

from typing import List, Sequence

from youtu.images import ImageData, ImageSource, attach_image, attach_images
from youtu.models import (
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
from youtu.operations import (
    ADD_FACE,
    DEL_FACE,
    DEL_PERSON,
    GET_FACE_IDS,
    GET_FACE_INFO,
    GET_GROUP_IDS,
    GET_INFO,
    GET_PERSON_IDS,
    NEW_PERSON,
    SET_INFO,
)

# Максимум лиц у одной персоны
MAX_FACES_PER_PERSON = 10000


class PersonMixin:
    """Миксин для операций с персонами"""

    def new_person(
        self,
        person_id: str,
        person_name: str,
        group_ids: List[str],
        image: ImageData,
        tag: str = "",
        image_type: int = ImageSource.INLINE,
    ) -> NewPersonResponse:
        """
        Создать персону и добавить её в группы group_ids

        Args:
            person_id: ID новой персоны
            person_name: имя (опционально)
            group_ids: группы, в которые добавляется персона
            image: байты или URL изображения лица
            tag: примечание (опционально)
            image_type: 0 - байты изображения, 1 - URL
        """
        payload = {"person_id": person_id, "group_ids": list(group_ids)}
        if person_name:
            payload["person_name"] = person_name
        if tag:
            payload["tag"] = tag
        attach_image(payload, image, image_type)
        return self._call(NEW_PERSON, payload)

    def del_person(self, person_id: str) -> DelPersonResponse:
        """Удалить персону"""
        return self._call(DEL_PERSON, {"person_id": person_id})

    def add_face(
        self,
        person_id: str,
        images: Sequence[ImageData],
        tag: str = "",
        image_type: int = ImageSource.INLINE,
    ) -> AddFaceResponse:
        """
        Добавить лица персоне

        Одно лицо принадлежит только одной персоне,
        у персоны не больше MAX_FACES_PER_PERSON лиц.
        """
        payload = {"person_id": person_id}
        if tag:
            payload["tag"] = tag
        attach_images(payload, images, image_type)
        return self._call(ADD_FACE, payload)

    def del_face(self, person_id: str, face_ids: List[str]) -> DelFaceResponse:
        """Удалить лица персоны вместе с признаками"""
        return self._call(
            DEL_FACE, {"person_id": person_id, "face_ids": list(face_ids)}
        )

    def set_info(
        self, person_id: str, person_name: str = "", tag: str = ""
    ) -> SetInfoResponse:
        """Изменить имя и примечание персоны"""
        payload = {"person_id": person_id}
        if person_name:
            payload["person_name"] = person_name
        if tag:
            payload["tag"] = tag
        return self._call(SET_INFO, payload)

    def get_info(self, person_id: str) -> GetInfoResponse:
        """Имя, группы и лица персоны"""
        return self._call(GET_INFO, {"person_id": person_id})

    def get_group_ids(self) -> GetGroupIdsResponse:
        """Все группы приложения"""
        return self._call(GET_GROUP_IDS, {})

    def get_person_ids(self, group_id: str) -> GetPersonIdsResponse:
        return self._call(GET_PERSON_IDS, {"group_id": group_id})

    def get_face_ids(self, person_id: str) -> GetFaceIdsResponse:
        return self._call(GET_FACE_IDS, {"person_id": person_id})

    def get_face_info(self, face_id: str) -> GetFaceInfoResponse:
        """Атрибуты сохранённого лица"""
        return self._call(GET_FACE_INFO, {"face_id": face_id})
