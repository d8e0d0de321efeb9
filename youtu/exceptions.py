"""Исключения клиента Youtu"""
from __future__ import annotations

from typing import Optional


class YoutuError(Exception):
    """Базовая ошибка клиента Youtu"""

    pass


class ConfigError(YoutuError):
    """Некорректная конфигурация (обнаруживается до любого сетевого запроса)"""

    pass


class UserIdTooLongError(ConfigError):
    """user_id длиннее допустимого"""

    def __init__(self, length: int, max_length: int):
        self.length = length
        self.max_length = max_length
        super().__init__(f"user id too long: {length} > {max_length}")


class NetworkError(YoutuError):
    """Обмен с сервером не завершён (соединение, DNS, обрыв)"""

    pass


class RequestTimeoutError(NetworkError):
    """Сервер не ответил за отведённый таймаут"""

    pass


class HttpStatusError(YoutuError):
    """Ответ со статусом, отличным от 200. Тело ответа не анализируется."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"httperrorcode: {status_code}")


class DecodeError(YoutuError):
    """Тело ответа не разбирается в ожидаемую структуру.

    Сырое тело хранится в ``body``, но попадает в текст ошибки
    только в debug-режиме.
    """

    def __init__(self, reason: str, body: bytes = b"", debug: bool = False):
        self.reason = reason
        self.body = body
        self.debug = debug
        message = f"failed to decode response: {reason}"
        if debug:
            message += f"; body: {body.decode('utf-8', errors='replace')}"
        super().__init__(message)


class ApplicationError(YoutuError):
    """Сервер вернул ненулевой errorcode в успешном HTTP ответе"""

    def __init__(self, code: int, message: str, operation: Optional[str] = None):
        self.code = code
        self.message = message
        self.operation = operation
        prefix = f"{operation}: " if operation else ""
        super().__init__(f"{prefix}errorcode {code}: {message}")
