"""
Python клиент облачного API Youtu (распознавание лиц, анализ изображений, OCR).

Компоненты:
- credential.py - AppSign (учётные данные приложения)
- signing.py - подпись запросов
- routing.py - хосты и семейства API
- transport.py - HTTP POST с таймаутом и проверкой статуса
- dispatcher.py - сериализация, отправка, разбор ответа
- client/ - YoutuClient со всеми операциями
- exceptions.py - YoutuError и наследники
"""

from youtu._metadata import __version__
from youtu.client import YoutuClient
from youtu.config import Settings, load_settings
from youtu.credential import USER_ID_MAX_LEN, AppSign, Credential, new_app_sign
from youtu.exceptions import (
    ApplicationError,
    ConfigError,
    DecodeError,
    HttpStatusError,
    NetworkError,
    RequestTimeoutError,
    UserIdTooLongError,
    YoutuError,
)
from youtu.images import ImageSource
from youtu.models import DetectMode, IdCardSide
from youtu.routing import DEFAULT_HOST, TENCENT_YUN_HOST, ApiFamily
from youtu.signing import AppSigner, sign

__all__ = [
    "__version__",
    "YoutuClient",
    "Settings",
    "load_settings",
    "AppSign",
    "Credential",
    "new_app_sign",
    "USER_ID_MAX_LEN",
    "sign",
    "AppSigner",
    "ApiFamily",
    "DEFAULT_HOST",
    "TENCENT_YUN_HOST",
    "ImageSource",
    "DetectMode",
    "IdCardSide",
    "YoutuError",
    "ConfigError",
    "UserIdTooLongError",
    "NetworkError",
    "RequestTimeoutError",
    "HttpStatusError",
    "DecodeError",
    "ApplicationError",
]
