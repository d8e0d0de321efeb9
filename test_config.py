"""Тесты настроек из окружения и конфигурации логирования"""
import json
import logging

import pytest

from youtu import ConfigError, UserIdTooLongError
from youtu.config import Settings, load_settings
from youtu.logging_config import JSONFormatter, setup_logging


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("YOUTU_APP_ID", "YOUTU_SECRET_ID", "YOUTU_SECRET_KEY",
                 "YOUTU_USER_ID", "YOUTU_HOST", "YOUTU_TIMEOUT", "YOUTU_DEBUG"):
        # setenv запоминает исходное значение для восстановления после теста
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings()
    assert settings.host == "http://api.youtu.qq.com"
    assert settings.timeout == 5.0
    assert settings.debug is False


def test_dotenv_file_is_loaded(clean_env, tmp_path):
    env = tmp_path / ".env"
    env.write_text("YOUTU_APP_ID=7\nYOUTU_SECRET_ID=x\nYOUTU_TIMEOUT=2.5\n", encoding="utf-8")

    settings = load_settings(str(env))

    assert settings.app_id == 7
    assert settings.timeout == 2.5
    assert settings.credential().app_id_str == "7"


def test_bad_number_is_config_error(clean_env):
    clean_env.setenv("YOUTU_APP_ID", "abc")
    with pytest.raises(ConfigError):
        Settings()


def test_long_user_id_fails_before_any_request(clean_env):
    clean_env.setenv("YOUTU_USER_ID", "u" * 111)
    with pytest.raises(UserIdTooLongError):
        Settings().credential()


def test_json_formatter_includes_operation():
    record = logging.LogRecord("youtu.dispatcher", logging.INFO, __file__, 1, "req", None, None)
    record.operation = "detectface"
    data = json.loads(JSONFormatter().format(record))
    assert data["message"] == "req"
    assert data["operation"] == "detectface"


def test_setup_logging_quiets_httpx(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "json")
    root = logging.getLogger()
    saved = (root.level, list(root.handlers))
    try:
        setup_logging(force=True)
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.setLevel(saved[0])
        root.handlers[:] = saved[1]
