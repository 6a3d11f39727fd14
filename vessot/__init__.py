"""
Vessot — Secure Portable Data
Client-side, structure-preserving encryption for a remote key/value store.

Every scalar leaf of a value is sealed on its own with AES-256-GCM before it
leaves the process. Mappings and lists keep their shape, so the store can
still address individual attributes without ever seeing plaintext. The key
is read from VESSOT_CRYPT_KEY and never sent anywhere.

Usage:
    from vessot import SecureData
    data = SecureData()
    data.store("profile", {"name": "alice", "age": 30})
    data.show("profile").value   # {"name": "alice", "age": 30}
"""

from vessot.client import SecureData
from vessot.config import ClientConfig
from vessot.connectors import HttpConnector, LocalConnector, StoreConnector
from vessot.keys import generate_key, load_key
from vessot.result import OperationResult
from vessot.vault import open_envelope, seal
from vessot.walker import decrypt_tree, encrypt_tree

__version__ = "0.1.0"
__all__ = [
    "SecureData",
    "ClientConfig",
    "OperationResult",
    "StoreConnector",
    "HttpConnector",
    "LocalConnector",
    "load_key",
    "generate_key",
    "seal",
    "open_envelope",
    "encrypt_tree",
    "decrypt_tree",
]
