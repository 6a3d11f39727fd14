"""
Vault — Leaf Encryption
AES-256-GCM sealing of a single byte string into a text envelope.

Envelope layout (base64 encoded as a whole):

    nonce (12 bytes) || tag (16 bytes) || ciphertext

The layout is shared with every other client of the remote store, so the
order of the three parts is fixed.
"""

import base64
import binascii
import os
from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from vessot.errors import (
    AuthenticationFailedError,
    BadEncodingError,
    KeyEncodingError,
    RandomUnavailableError,
    TruncatedError,
)


NONCE_SIZE = 12  # AES-256-GCM standard
TAG_SIZE = 16
KEY_SIZE = 32    # 256 bits
MIN_ENVELOPE_SIZE = NONCE_SIZE + TAG_SIZE


def _cipher(key: bytes) -> AESGCM:
    if not isinstance(key, bytes) or len(key) != KEY_SIZE:
        raise KeyEncodingError(f"Encryption key must be exactly {KEY_SIZE} bytes")
    return AESGCM(key)


def _random_nonce() -> bytes:
    try:
        return os.urandom(NONCE_SIZE)
    except (NotImplementedError, OSError) as e:
        raise RandomUnavailableError(f"Secure random source unavailable: {e}") from e


def seal(key: bytes, plaintext: bytes) -> str:
    """Encrypt bytes with AES-256-GCM. Returns base64(nonce + tag + ciphertext)."""
    aesgcm = _cipher(key)
    nonce = _random_nonce()
    # AESGCM appends the tag; the envelope wants it ahead of the ciphertext
    sealed = aesgcm.encrypt(nonce, plaintext, None)
    ciphertext, tag = sealed[:-TAG_SIZE], sealed[-TAG_SIZE:]
    return base64.b64encode(nonce + tag + ciphertext).decode("ascii")


def open_envelope(key: bytes, envelope: str) -> bytes:
    """
    Authenticate and decrypt an envelope produced by `seal`.

    Args:
        key: The 32-byte encryption key.
        envelope: Base64 text of nonce, tag and ciphertext.

    Returns:
        The plaintext bytes.

    Raises:
        BadEncodingError: The envelope is not valid base64 text.
        TruncatedError: The decoded envelope is too short to hold a nonce and tag.
        AuthenticationFailedError: The tag does not verify under this key.
    """
    aesgcm = _cipher(key)
    if not isinstance(envelope, (str, bytes)):
        raise BadEncodingError("Envelope must be base64 text")
    try:
        compact = envelope[:0].join(envelope.split())
        payload = base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as e:
        raise BadEncodingError("Invalid base64 encoded payload") from e

    if len(payload) < MIN_ENVELOPE_SIZE:
        raise TruncatedError("Encrypted payload is too short")

    nonce = payload[:NONCE_SIZE]
    tag = payload[NONCE_SIZE:MIN_ENVELOPE_SIZE]
    ciphertext = payload[MIN_ENVELOPE_SIZE:]
    try:
        return aesgcm.decrypt(nonce, ciphertext + tag, None)
    except InvalidTag as e:
        raise AuthenticationFailedError("Decryption failed or data was tampered with") from e
