"""Tests for key provisioning."""

import base64

import pytest

from vessot.errors import KeyEncodingError, KeyMissingError
from vessot.keys import CRYPT_KEY_ENV, generate_key, load_key


def _env(raw: bytes) -> dict:
    return {CRYPT_KEY_ENV: base64.b64encode(raw).decode()}


def test_load_valid_key(key):
    assert load_key(_env(key)) == key


def test_load_zero_key():
    env = {CRYPT_KEY_ENV: "A" * 43 + "="}
    assert load_key(env) == bytes(32)


@pytest.mark.parametrize("env", [{}, {CRYPT_KEY_ENV: ""}])
def test_missing_key(env):
    with pytest.raises(KeyMissingError):
        load_key(env)


@pytest.mark.parametrize("length", [31, 33, 16, 0])
def test_wrong_length_key(length):
    env = _env(b"\x01" * length) if length else {CRYPT_KEY_ENV: "===="}
    with pytest.raises(KeyEncodingError):
        load_key(env)


def test_invalid_base64_key():
    with pytest.raises(KeyEncodingError):
        load_key({CRYPT_KEY_ENV: "not a base64 key!"})


def test_load_key_reads_os_environ(monkeypatch, key):
    monkeypatch.setenv(CRYPT_KEY_ENV, base64.b64encode(key).decode())
    assert load_key() == key


def test_load_key_unset_os_environ(monkeypatch):
    monkeypatch.delenv(CRYPT_KEY_ENV, raising=False)
    with pytest.raises(KeyMissingError):
        load_key()


def test_generate_key_when_unset():
    generated = generate_key({})
    assert generated is not None
    assert len(base64.b64decode(generated)) == 32
    assert load_key({CRYPT_KEY_ENV: generated})


def test_generate_key_is_random():
    assert generate_key({}) != generate_key({})


def test_generate_key_when_provisioned(key):
    assert generate_key(_env(key)) is None


def test_key_error_message_does_not_leak_key():
    secret = base64.b64encode(b"\x07" * 31).decode()
    with pytest.raises(KeyEncodingError) as excinfo:
        load_key({CRYPT_KEY_ENV: secret})
    assert secret not in str(excinfo.value)


@pytest.mark.parametrize("suffix", ["\n", "\r\n", "  ", "\t\n"])
def test_key_with_trailing_whitespace(key, suffix):
    env = {CRYPT_KEY_ENV: base64.b64encode(key).decode() + suffix}
    assert load_key(env) == key


def test_key_wrapped_across_lines(key):
    encoded = base64.b64encode(key).decode()
    env = {CRYPT_KEY_ENV: encoded[:20] + "\n" + encoded[20:]}
    assert load_key(env) == key


def test_whitespace_only_key_is_invalid():
    with pytest.raises(KeyEncodingError):
        load_key({CRYPT_KEY_ENV: " \n"})
