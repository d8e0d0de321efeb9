"""Учётные данные приложения Youtu"""
from __future__ import annotations

from dataclasses import dataclass, field

from youtu.exceptions import ConfigError, UserIdTooLongError

# Максимальная длина пользовательского ID
USER_ID_MAX_LEN = 110

_APP_ID_MAX = 2**32 - 1


@dataclass(frozen=True)
class AppSign:
    """
    Подпись приложения: долгоживущая идентичность для всех вызовов API

    Attributes:
        app_id: уникальный ID приложения, выданный при подключении к Youtu
        secret_id: идентификатор ключа, которым подписываются запросы
        secret_key: секретный ключ подписи, никогда не уходит в сеть
        user_id: ID пользователя, определяемый самим приложением
    """

    app_id: int
    secret_id: str
    secret_key: str = field(repr=False)
    user_id: str = ""

    def __post_init__(self):
        if isinstance(self.app_id, bool) or not isinstance(self.app_id, int):
            raise ConfigError(f"app id must be an integer, got {self.app_id!r}")
        if not 0 <= self.app_id <= _APP_ID_MAX:
            raise ConfigError(f"app id out of uint32 range: {self.app_id}")
        if len(self.user_id) > USER_ID_MAX_LEN:
            raise UserIdTooLongError(len(self.user_id), USER_ID_MAX_LEN)

    @property
    def app_id_str(self) -> str:
        """app_id в виде строки, как его ожидает сервер"""
        return str(self.app_id)


Credential = AppSign


def new_app_sign(
    app_id: int, secret_id: str, secret_key: str, user_id: str = ""
) -> AppSign:
    """Создать подпись приложения с проверкой полей"""
    return AppSign(
        app_id=app_id, secret_id=secret_id, secret_key=secret_key, user_id=user_id
    )
