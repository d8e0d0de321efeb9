"""Тесты AppSign и подписи запросов"""
import base64
import hashlib
import hmac
from dataclasses import FrozenInstanceError

import pytest

from youtu import AppSign, ConfigError, UserIdTooLongError, new_app_sign, sign
from youtu.credential import USER_ID_MAX_LEN
from youtu.signing import EXPIRED_INTERVAL, AppSigner, plain_text


def test_user_id_at_limit_is_accepted():
    cred = new_app_sign(1, "A", "B", "u" * USER_ID_MAX_LEN)
    assert len(cred.user_id) == 110


def test_user_id_too_long_fails_at_construction():
    with pytest.raises(UserIdTooLongError) as exc:
        new_app_sign(1, "A", "B", "u" * (USER_ID_MAX_LEN + 1))
    assert isinstance(exc.value, ConfigError)
    assert exc.value.length == 111


@pytest.mark.parametrize("app_id", [-1, 2**32, "1", True])
def test_app_id_must_be_uint32(app_id):
    with pytest.raises(ConfigError):
        AppSign(app_id=app_id, secret_id="A", secret_key="B")


def test_credential_is_immutable_and_hides_secret(credential):
    with pytest.raises(FrozenInstanceError):
        credential.secret_key = "other"
    assert "secret_key" not in repr(credential)
    assert credential.app_id_str == "1"


def test_plain_text_layout(credential):
    assert plain_text(credential, 100, 7) == (
        f"a=1&k=A&e={100 + EXPIRED_INTERVAL}&t=100&r=7&u=&f="
    )


def test_token_is_hmac_sha1_followed_by_plain_text(credential):
    token = sign(credential, now=1_440_000_000, nonce=42)
    raw = base64.b64decode(token)
    digest, plain = raw[:20], raw[20:]

    assert plain == plain_text(credential, 1_440_000_000, 42).encode()
    assert digest == hmac.new(b"B", plain, hashlib.sha1).digest()


def test_same_inputs_give_same_token(credential):
    assert sign(credential, now=10, nonce=1) == sign(credential, now=10, nonce=1)


def test_different_times_give_different_tokens(credential):
    assert sign(credential, now=10, nonce=1) != sign(credential, now=11, nonce=1)


def test_app_signer_uses_clock(credential):
    signer = AppSigner(clock=lambda: 500.9)
    plain = base64.b64decode(signer(credential))[20:].decode()
    assert "&t=500&" in plain
    assert f"&e={500 + EXPIRED_INTERVAL}&" in plain
