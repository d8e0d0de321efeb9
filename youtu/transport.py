"""HTTP транспорт клиента Youtu"""
from __future__ import annotations

import logging
import time
from typing import Optional

import httpx
from httpx import Limits

from youtu._metadata import get_user_agent
from youtu.exceptions import HttpStatusError, NetworkError, RequestTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0


class Transport:
    """
    Один POST с JSON телом на один вызов API.

    Ретраев нет: результат либо тело ответа со статусом 200,
    либо ровно одно исключение.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.timeout = timeout
        self._client = httpx.Client(
            limits=Limits(max_connections=10, max_keepalive_connections=5),
            timeout=timeout,
            transport=transport,
        )

    def _headers(self, auth: str) -> dict:
        return {
            "Authorization": auth,
            "Content-Type": "text/json",
            "User-Agent": get_user_agent(),
            "Accept": "*/*",
            "Expect": "100-continue",
        }

    def post(self, url: str, body: str, auth: str) -> bytes:
        """
        Выполнить POST запрос

        Таймаут ограничивает весь обмен целиком: соединение, отправку
        и чтение тела ответа.

        Args:
            url: полный адрес операции
            body: JSON документ запроса
            auth: значение заголовка Authorization

        Returns:
            Сырое тело ответа (может быть пустым)
        """
        started = time.monotonic()
        deadline = started + self.timeout
        try:
            with self._client.stream(
                "POST",
                url,
                content=body.encode("utf-8"),
                headers=self._headers(auth),
                timeout=self.timeout,
            ) as resp:
                if resp.status_code != 200:
                    logger.debug(
                        f"POST {url} -> {resp.status_code}",
                        extra={"url": url, "status_code": resp.status_code},
                    )
                    raise HttpStatusError(resp.status_code)

                chunks = []
                for chunk in resp.iter_bytes():
                    chunks.append(chunk)
                    if time.monotonic() > deadline:
                        raise self._timed_out(url)
                if time.monotonic() > deadline:
                    raise self._timed_out(url)
        except httpx.TimeoutException as e:
            raise self._timed_out(url) from e
        except httpx.RequestError as e:
            logger.warning(f"Сетевая ошибка {url}: {e}", extra={"url": url})
            raise NetworkError(f"request to {url} failed: {e}") from e

        duration_ms = int((time.monotonic() - started) * 1000)
        logger.debug(
            f"POST {url} -> 200 за {duration_ms} мс",
            extra={"url": url, "status_code": 200, "duration_ms": duration_ms},
        )
        return b"".join(chunks)

    def _timed_out(self, url: str) -> RequestTimeoutError:
        logger.warning(f"Таймаут запроса {url} ({self.timeout}с)", extra={"url": url})
        return RequestTimeoutError(f"request to {url} timed out after {self.timeout}s")

    def close(self):
        self._client.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *args) -> None:
        self.close()
