"""Конфигурация логирования для приложений, использующих клиент Youtu.

Библиотека сама логирование не настраивает. Приложение вызывает:

    from youtu.logging_config import setup_logging
    setup_logging()

Переменные окружения:
    LOG_LEVEL - уровень логирования (DEBUG, INFO, WARNING, ERROR). По умолчанию: INFO
    LOG_FORMAT - формат логов (json, text). По умолчанию: text
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any


class JSONFormatter(logging.Formatter):
    """JSON formatter для structured logging."""

    # Поля, которые добавляются в extra для контекста
    EXTRA_FIELDS = frozenset({
        "operation",
        "family",
        "url",
        "status_code",
        "duration_ms",
        "error_code",
    })

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for field in self.EXTRA_FIELDS:
            if hasattr(record, field):
                value = getattr(record, field)
                if value is not None:
                    log_data[field] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Читаемый форматтер для локальной разработки."""

    FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

    def __init__(self) -> None:
        super().__init__(self.FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def get_log_level() -> int:
    """Получить уровень логирования из env."""
    level_str = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_str, logging.INFO)


def get_log_format() -> str:
    """Получить формат логов из env: 'json' или 'text'."""
    return os.getenv("LOG_FORMAT", "text").lower()


_logging_initialized = False


def setup_logging(force: bool = False) -> None:
    """Настроить логирование приложения.

    Повторный вызов ничего не делает, если не передан force=True.
    """
    global _logging_initialized
    if _logging_initialized and not force:
        return

    log_level = get_log_level()

    if get_log_format() == "json":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = HumanReadableFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Уровни для сторонних библиотек (уменьшаем шум)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    _logging_initialized = True

