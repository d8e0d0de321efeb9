"""Отправка типизированных запросов Youtu"""
from __future__ import annotations

import json
import logging
from typing import Optional, Type, TypeVar

from pydantic import ValidationError

from youtu.credential import AppSign
from youtu.exceptions import DecodeError
from youtu.models.base import YoutuResponse
from youtu.operations import Operation
from youtu.routing import ApiFamily, resolve_url
from youtu.signing import AppSigner, Signer
from youtu.transport import Transport

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=YoutuResponse)

# Поля с base64 данными, которые не пишем в debug лог целиком
_BULKY_KEYS = ("image", "images", "imageA", "imageB")
_PREVIEW_LEN = 32


def _preview(payload: dict) -> dict:
    """Копия запроса для лога с усечёнными изображениями"""
    shown = dict(payload)
    for key in _BULKY_KEYS:
        value = shown.get(key)
        if isinstance(value, str) and len(value) > _PREVIEW_LEN:
            shown[key] = f"{value[:_PREVIEW_LEN]}...({len(value)} chars)"
        elif isinstance(value, list):
            shown[key] = f"[{len(value)} images]"
    return shown


def decode_response(body: bytes, response_model: Type[R], debug: bool = False) -> R:
    """Разобрать тело ответа в модель"""
    try:
        data = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise DecodeError(f"invalid JSON: {e}", body, debug) from e

    if not isinstance(data, dict):
        raise DecodeError(
            f"expected JSON object, got {type(data).__name__}", body, debug
        )

    try:
        return response_model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(
            f"{response_model.__name__}: {e.error_count()} invalid field(s)", body, debug
        ) from e


class Dispatcher:
    """Сериализация, подпись, отправка и разбор ответа для одного вызова"""

    def __init__(
        self,
        credential: AppSign,
        host: str,
        transport: Transport,
        signer: Optional[Signer] = None,
        debug: bool = False,
    ):
        self.credential = credential
        self.host = host
        self.transport = transport
        self.signer = signer or AppSigner()
        self.debug = debug

    def send(
        self,
        operation: str,
        family: ApiFamily,
        payload: dict,
        response_model: Type[R],
    ) -> R:
        """
        Выполнить вызов API

        Args:
            operation: имя операции (detectface, idcardocr, ...)
            family: семейство API
            payload: тело запроса
            response_model: модель ответа

        Returns:
            Разобранный ответ. Ненулевой errorcode здесь не проверяется.
        """
        url = resolve_url(self.host, operation, family)
        context = {"operation": operation, "family": family.value}
        if self.debug:
            logger.info(f"req {operation}: {_preview(payload)}", extra=context)

        body = json.dumps(payload, ensure_ascii=False)
        auth = self.signer(self.credential)
        raw = self.transport.post(url, body, auth)

        if self.debug:
            logger.info(
                f"rsp {operation}: {raw.decode('utf-8', errors='replace')}",
                extra=context,
            )

        return decode_response(raw, response_model, self.debug)

    def call(self, op: Operation, payload: dict) -> YoutuResponse:
        """send() по записи из таблицы операций"""
        return self.send(op.name, op.family, payload, op.response_model)
