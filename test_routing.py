"""Тесты маршрутизации по семействам API"""
import pytest

from youtu import DEFAULT_HOST, TENCENT_YUN_HOST, ApiFamily, ConfigError
from youtu.routing import resolve_host, resolve_url

PREFIXES = {
    ApiFamily.FACE: "/youtu/api/",
    ApiFamily.IMAGE: "/youtu/imageapi/",
    ApiFamily.OCR: "/youtu/ocrapi/",
}


@pytest.mark.parametrize("family", list(ApiFamily))
def test_each_family_has_exactly_one_prefix(family):
    url = resolve_url("http://h", "op", family)
    assert url == f"http://h{PREFIXES[family]}op"
    others = [p for f, p in PREFIXES.items() if f is not family]
    assert not any(p in url for p in others)


def test_trailing_slash_on_host():
    assert resolve_url("http://h/", "detectface", ApiFamily.FACE) == (
        "http://h/youtu/api/detectface"
    )


@pytest.mark.parametrize(
    "value,expected",
    [
        ("", DEFAULT_HOST),
        ("default", DEFAULT_HOST),
        ("TencentYun", TENCENT_YUN_HOST),
        ("https://custom.example/", "https://custom.example"),
    ],
)
def test_resolve_host(value, expected):
    assert resolve_host(value) == expected


def test_unknown_host_alias():
    with pytest.raises(ConfigError):
        resolve_host("nowhere")
