"""Маршрутизация операций по семействам API"""
from __future__ import annotations

from enum import Enum

from youtu.exceptions import ConfigError

API_ROOT = "youtu"

# Хост по умолчанию
DEFAULT_HOST = "http://api.youtu.qq.com"
# Хост Tencent Cloud
TENCENT_YUN_HOST = "https://youtu.api.qcloud.com"

KNOWN_HOSTS = {
    "default": DEFAULT_HOST,
    "youtu": DEFAULT_HOST,
    "tencentyun": TENCENT_YUN_HOST,
    "qcloud": TENCENT_YUN_HOST,
}


class ApiFamily(Enum):
    """Семейство API: определяет только префикс пути"""

    FACE = "api"  # Распознавание лиц, персоны и группы
    IMAGE = "imageapi"  # Анализ изображений
    OCR = "ocrapi"  # Распознавание документов


def resolve_host(value: str) -> str:
    """Известный псевдоним хоста или произвольный base URL"""
    if not value:
        return DEFAULT_HOST
    alias = value.strip().lower()
    if alias in KNOWN_HOSTS:
        return KNOWN_HOSTS[alias]
    if not alias.startswith(("http://", "https://")):
        raise ConfigError(f"unknown host: {value!r}")
    return value.strip().rstrip("/")


def resolve_url(host: str, operation: str, family: ApiFamily) -> str:
    """{host}/youtu/{api|imageapi|ocrapi}/{operation}"""
    return f"{host.rstrip('/')}/{API_ROOT}/{family.value}/{operation}"
