"""
SecureData — the public entry point.

Each operation loads the key, encrypts the outgoing tree, hands it to a
connector and decrypts whatever comes back. Nothing raises past this
class: every outcome is an OperationResult.

Usage:
    from vessot import SecureData
    data = SecureData()
    data.store("profile", {"name": "alice", "age": 30})
    data.show("profile").value
"""

import logging
from typing import Any, Iterable, Mapping, Optional, Union

from vessot.config import ClientConfig
from vessot.connectors.base import StoreConnector
from vessot.connectors.http import HttpConnector
from vessot.errors import CryptKeyError, VessotError
from vessot.keys import generate_key, load_key
from vessot.result import OperationResult
from vessot.walker import decrypt_tree, encrypt_tree

logger = logging.getLogger(__name__)


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == [] or value == {}


class SecureData:
    """
    Client-side encrypting front end for a key/value store.

    Args:
        connector: Where encrypted trees are sent. Defaults to the HTTP API.
        config: Client configuration. Defaults to ``ClientConfig.from_env()``.
        environ: Environment mapping for the key and token. Defaults to ``os.environ``.
    """

    def __init__(
        self,
        connector: Optional[StoreConnector] = None,
        config: Optional[ClientConfig] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.config = config or ClientConfig.from_env(environ)
        self.connector = connector or HttpConnector(self.config, environ)
        self._environ = environ

    def crypt_key_generate(self) -> Optional[str]:
        """Return a new base64 key, or None if one is already provisioned."""
        return generate_key(self._environ)

    def _encrypt(self, key: bytes, value: Any) -> Any:
        return encrypt_tree(
            key, value,
            max_depth=self.config.max_depth, max_items=self.config.max_items,
        )

    def _decrypt(self, key: bytes, value: Any) -> Any:
        return decrypt_tree(
            key, value,
            max_depth=self.config.max_depth, max_items=self.config.max_items,
        )

    def show(self, key: str, attribute: Optional[str] = None) -> OperationResult:
        """
        Fetch and decrypt a stored value.

        Args:
            key: Store key.
            attribute: Optional top-level attribute to fetch instead of the whole value.

        Returns:
            OperationResult whose value is the decrypted tree, or "" when empty.
        """
        try:
            crypt_key = load_key(self._environ)
        except CryptKeyError as e:
            return OperationResult.failure(str(e))

        result = self.connector.show(key, attribute)
        if not result.success:
            return result
        if _is_empty(result.value):
            return OperationResult.ok(code=result.code)

        try:
            value = self._decrypt(crypt_key, result.value)
        except VessotError as e:
            logger.warning("Decryption of %s failed: %s", key, e)
            return OperationResult.failure(f"Decryption failed: {e}", code=result.code)
        return OperationResult.ok(code=result.code, value=value)

    def store(self, key: str, value: Any) -> OperationResult:
        """Encrypt every leaf of value and store it under key."""
        try:
            crypt_key = load_key(self._environ)
        except CryptKeyError as e:
            return OperationResult.failure(str(e))

        try:
            encrypted = self._encrypt(crypt_key, value)
        except VessotError as e:
            logger.warning("Encryption for %s failed: %s", key, e)
            return OperationResult.failure(f"Encryption failed: {e}")
        return self.connector.store(key, encrypted)

    def update(
        self,
        key: str,
        value: Any = None,
        attributes: Optional[dict] = None,
    ) -> OperationResult:
        """
        Replace a stored value, or merge attributes into it.

        When attributes is given, only those top-level attributes are sent
        (encrypted) as a partial update and value is ignored.
        """
        try:
            crypt_key = load_key(self._environ)
        except CryptKeyError as e:
            return OperationResult.failure(str(e))

        partial = attributes is not None
        try:
            encrypted = self._encrypt(crypt_key, attributes if partial else value)
        except VessotError as e:
            logger.warning("Encryption for %s failed: %s", key, e)
            return OperationResult.failure(f"Encryption failed: {e}")
        return self.connector.update(key, encrypted, partial)

    def destroy(
        self,
        key: str,
        attributes: Optional[Union[str, Iterable[str]]] = None,
    ) -> OperationResult:
        """Remove a key, or some of its attributes. No key material is needed."""
        return self.connector.destroy(key, attributes)
