"""
Key provisioning from the process environment.

The key is a base64 encoded 32-byte secret in VESSOT_CRYPT_KEY. It is read
fresh for every operation and never written anywhere by this package.
"""

import base64
import binascii
import logging
import os
from typing import Mapping, Optional

from vessot.errors import KeyEncodingError, KeyMissingError
from vessot.vault import KEY_SIZE

logger = logging.getLogger(__name__)

CRYPT_KEY_ENV = "VESSOT_CRYPT_KEY"


def load_key(environ: Optional[Mapping[str, str]] = None) -> bytes:
    """Read and validate the encryption key.

    Args:
        environ: Environment mapping to read from. Defaults to ``os.environ``.

    Returns:
        The raw 32-byte key.

    Raises:
        KeyMissingError: The variable is unset or empty.
        KeyEncodingError: The value is not base64 of exactly 32 bytes.
    """
    env = os.environ if environ is None else environ
    encoded = env.get(CRYPT_KEY_ENV, "")
    if not encoded:
        raise KeyMissingError(f"{CRYPT_KEY_ENV} environment variable not set")

    try:
        # env files and secret mounts often leave a trailing newline
        key = base64.b64decode("".join(encoded.split()), validate=True)
    except (binascii.Error, ValueError):
        key = None
    if key is None or len(key) != KEY_SIZE:
        raise KeyEncodingError(
            f"{CRYPT_KEY_ENV} must be a valid base64-encoded {KEY_SIZE}-byte key"
        )
    return key


def generate_key(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Create a fresh base64 key for first-time setup.

    Returns None when a key is already provisioned, so an existing secret
    is never replaced by accident.
    """
    env = os.environ if environ is None else environ
    if env.get(CRYPT_KEY_ENV):
        logger.debug("%s already set, not generating a key", CRYPT_KEY_ENV)
        return None
    return base64.b64encode(os.urandom(KEY_SIZE)).decode("ascii")
