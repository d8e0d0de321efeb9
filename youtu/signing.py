"""Подпись запросов к Youtu.

Токен строится из AppSign и текущего времени:

    plain = a=<app_id>&k=<secret_id>&e=<expired>&t=<now>&r=<nonce>&u=<user_id>&f=
    token = base64(hmac_sha1(secret_key, plain) + plain)

Модуль не обращается к сети и не хранит состояние.
"""
from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
import time
from typing import Callable, Optional, Protocol

from youtu.credential import AppSign

# Срок жизни подписи в секундах
EXPIRED_INTERVAL = 1000

_NONCE_RANGE = 1_000_000_000


def plain_text(credential: AppSign, now: int, nonce: int) -> str:
    """Каноническая строка для подписи"""
    expired = now + EXPIRED_INTERVAL
    return (
        f"a={credential.app_id}&k={credential.secret_id}&e={expired}"
        f"&t={now}&r={nonce}&u={credential.user_id}&f="
    )


def sign(
    credential: AppSign, now: Optional[int] = None, nonce: Optional[int] = None
) -> str:
    """
    Сформировать значение заголовка Authorization

    Args:
        credential: подпись приложения
        now: unix timestamp (по умолчанию текущее время)
        nonce: случайное число (по умолчанию генерируется)

    Returns:
        Токен в base64
    """
    if now is None:
        now = int(time.time())
    if nonce is None:
        nonce = secrets.randbelow(_NONCE_RANGE)

    plain = plain_text(credential, int(now), nonce).encode("utf-8")
    digest = hmac.new(credential.secret_key.encode("utf-8"), plain, hashlib.sha1).digest()
    return base64.b64encode(digest + plain).decode("ascii")


class Signer(Protocol):
    """Интерфейс схемы подписи (должна совпадать с ожиданиями сервера)"""

    def __call__(self, credential: AppSign) -> str:
        ...


class AppSigner:
    """Подпись по схеме Youtu с подменяемыми часами"""

    def __init__(self, clock: Callable[[], float] = time.time):
        self.clock = clock

    def __call__(self, credential: AppSign) -> str:
        return sign(credential, now=int(self.clock()))
