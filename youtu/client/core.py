"""Базовый клиент Youtu: подпись, хост, транспорт и debug флаг"""
from __future__ import annotations

import logging
from typing import Optional

import httpx

from youtu.config import Settings, load_settings
from youtu.credential import AppSign
from youtu.dispatcher import Dispatcher
from youtu.models.base import YoutuResponse
from youtu.operations import Operation
from youtu.routing import DEFAULT_HOST, resolve_host
from youtu.signing import Signer
from youtu.transport import DEFAULT_TIMEOUT, Transport

logger = logging.getLogger(__name__)


class YoutuClientCore:
    """
    Владеет подписью приложения, хостом и HTTP транспортом.

    Состояния запросов не хранит: один экземпляр можно использовать
    из нескольких потоков. set_debug() во время выполняющихся вызовов
    требует внешней синхронизации.
    """

    def __init__(
        self,
        credential: AppSign,
        host: str = DEFAULT_HOST,
        debug: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
        raise_on_error: bool = False,
        transport: Optional[httpx.BaseTransport] = None,
        signer: Optional[Signer] = None,
    ):
        self.credential = credential
        self.host = resolve_host(host)
        self.raise_on_error = raise_on_error
        self._transport = Transport(timeout=timeout, transport=transport)
        self._dispatcher = Dispatcher(
            credential, self.host, self._transport, signer=signer, debug=debug
        )
        logger.debug(
            f"YoutuClient initialized: host={self.host}, app_id={credential.app_id}, "
            f"timeout={timeout}"
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs):
        """Клиент по объекту настроек"""
        return cls(
            settings.credential(),
            host=settings.host,
            debug=settings.debug,
            timeout=settings.timeout,
            **kwargs,
        )

    @classmethod
    def from_env(cls, dotenv_path: str = None, **kwargs):
        """Клиент по переменным окружения YOUTU_* (и .env)"""
        return cls.from_settings(load_settings(dotenv_path), **kwargs)

    @property
    def debug(self) -> bool:
        return self._dispatcher.debug

    def set_debug(self, is_debug: bool) -> None:
        """Включить/выключить диагностический вывод запросов и ответов"""
        self._dispatcher.debug = is_debug

    @property
    def app_id(self) -> str:
        return self.credential.app_id_str

    def _call(self, op: Operation, payload: dict) -> YoutuResponse:
        """Добавить app_id и отправить запрос операции"""
        request = {"app_id": self.app_id}
        request.update(payload)
        rsp = self._dispatcher.call(op, request)
        if self.raise_on_error:
            rsp.raise_for_error(op.name)
        elif not rsp.ok:
            logger.debug(
                f"{op.name}: errorcode={rsp.error_code} {rsp.error_msg}",
                extra={"operation": op.name, "error_code": rsp.error_code},
            )
        return rsp

    def close(self) -> None:
        self._transport.close()

    def __enter__(self):
        return self

    def __exit__(self, *args) -> None:
        self.close()
