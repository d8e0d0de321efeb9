"""Тесты HTTP транспорта: заголовки, статусы, таймауты"""
import logging
import time

import httpx
import pytest

from conftest import Recorder
from youtu import HttpStatusError, NetworkError, RequestTimeoutError
from youtu._metadata import get_user_agent
from youtu.transport import DEFAULT_TIMEOUT, Transport


def make_transport(handler, timeout=DEFAULT_TIMEOUT):
    return Transport(timeout=timeout, transport=httpx.MockTransport(handler))


def test_default_timeout_is_five_seconds():
    assert DEFAULT_TIMEOUT == 5.0


def test_post_sends_body_and_headers():
    rec = Recorder(body=b'{"ok": 1}')
    with make_transport(rec) as transport:
        raw = transport.post("http://h/youtu/api/x", '{"a": 1}', "TOKEN")

    assert raw == b'{"ok": 1}'
    req = rec.last
    assert req.method == "POST"
    assert req.content == b'{"a": 1}'
    assert req.headers["Authorization"] == "TOKEN"
    assert req.headers["Content-Type"] == "text/json"
    assert req.headers["Accept"] == "*/*"
    assert req.headers["Expect"] == "100-continue"
    assert req.headers["User-Agent"] == get_user_agent()


def test_status_200_with_empty_body_is_success():
    with make_transport(Recorder(body=b"")) as transport:
        assert transport.post("http://h/x", "{}", "t") == b""


@pytest.mark.parametrize("status", [201, 403, 500])
def test_non_200_is_http_status_error(status):
    rec = Recorder(status_code=status, body=b'{"errorcode": 0}')
    with make_transport(rec) as transport:
        with pytest.raises(HttpStatusError) as exc:
            transport.post("http://h/x", "{}", "t")
    assert exc.value.status_code == status
    assert len(rec.requests) == 1


def test_timeout_maps_to_request_timeout_error():
    calls = []

    def handler(request):
        calls.append(request)
        raise httpx.ReadTimeout("slow", request=request)

    with make_transport(handler) as transport:
        with pytest.raises(RequestTimeoutError):
            transport.post("http://h/x", "{}", "t")
    assert len(calls) == 1


def test_connect_error_maps_to_network_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with make_transport(handler) as transport:
        with pytest.raises(NetworkError) as exc:
            transport.post("http://h/x", "{}", "t")
    assert not isinstance(exc.value, RequestTimeoutError)


def test_silent_server_times_out_instead_of_hanging(silent_server, monkeypatch):
    for var in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(var, raising=False)
    with Transport(timeout=0.3) as transport:
        with pytest.raises(RequestTimeoutError):
            transport.post(f"{silent_server}/youtu/api/detectface", "{}", "t")


def test_timeout_bounds_whole_exchange_for_slow_body(trickling_server, monkeypatch):
    for var in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(var, raising=False)
    started = time.monotonic()
    with Transport(timeout=0.5) as transport:
        with pytest.raises(RequestTimeoutError):
            transport.post(f"{trickling_server}/youtu/api/detectface", "{}", "t")
    assert time.monotonic() - started < 3.0


def test_success_logs_status_and_duration(caplog):
    with make_transport(Recorder(body=b"{}")) as transport:
        with caplog.at_level(logging.DEBUG, logger="youtu.transport"):
            transport.post("http://h/youtu/api/x", "{}", "t")

    record = [r for r in caplog.records if r.name == "youtu.transport"][-1]
    assert record.url == "http://h/youtu/api/x"
    assert record.status_code == 200
    assert record.duration_ms >= 0
