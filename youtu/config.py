"""Настройки клиента Youtu из окружения и .env"""
from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from youtu.credential import AppSign
from youtu.exceptions import ConfigError
from youtu.routing import resolve_host
from youtu.transport import DEFAULT_TIMEOUT


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")


def _env_bool(name: str) -> bool:
    return os.getenv(name, "false").lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Settings:
    """Настройки подключения к Youtu"""

    app_id: int = field(default_factory=lambda: _env_int("YOUTU_APP_ID", 0))
    secret_id: str = field(default_factory=lambda: os.getenv("YOUTU_SECRET_ID", ""))
    secret_key: str = field(
        default_factory=lambda: os.getenv("YOUTU_SECRET_KEY", ""), repr=False
    )
    user_id: str = field(default_factory=lambda: os.getenv("YOUTU_USER_ID", ""))
    # Псевдоним (default, tencentyun) или base URL
    host: str = field(default_factory=lambda: resolve_host(os.getenv("YOUTU_HOST", "")))
    timeout: float = field(
        default_factory=lambda: _env_float("YOUTU_TIMEOUT", DEFAULT_TIMEOUT)
    )
    debug: bool = field(default_factory=lambda: _env_bool("YOUTU_DEBUG"))

    def credential(self) -> AppSign:
        """Проверенная подпись приложения"""
        return AppSign(
            app_id=self.app_id,
            secret_id=self.secret_id,
            secret_key=self.secret_key,
            user_id=self.user_id,
        )


def load_settings(dotenv_path: str = None) -> Settings:
    """Прочитать .env (если есть) и собрать настройки из окружения"""
    load_dotenv(dotenv_path)
    return Settings()
