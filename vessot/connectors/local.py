"""
Local Connector — a directory-backed store.

Stands in for the remote API when working offline or in tests. Each key
lives in its own ``<sha256(key)>.vault`` JSON file. Values reach this
connector already encrypted, so nothing here ever touches plaintext.
"""

import functools
import hashlib
import json
import logging
from pathlib import Path
from typing import Any, Iterable

from vessot.connectors.base import StoreConnector
from vessot.result import OperationResult

logger = logging.getLogger(__name__)


def _guarded(method):
    """Turn filesystem and parse errors into a failed result."""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning("Local store %s failed: %s", method.__name__, e)
            return OperationResult.failure(f"Local store error: {e}")
    return wrapper


class LocalConnector(StoreConnector):
    """
    Key/value store kept in a local directory.

    Args:
        vault_dir: Directory to store encrypted files. Created if it doesn't exist.
    """

    name = "local"

    def __init__(self, vault_dir: str | Path = "./vault-encrypted"):
        self.vault_dir = Path(vault_dir)
        self.vault_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.vault_dir / f"{digest}.vault"

    def _read(self, key: str) -> Any | None:
        path = self._path(key)
        if not path.exists():
            return None
        return json.loads(path.read_text())["value"]

    def _write(self, key: str, value: Any) -> None:
        self._path(key).write_text(json.dumps({"key": key, "value": value}, indent=2))

    @_guarded
    def show(self, key: str, attribute: str | None = None) -> OperationResult:
        value = self._read(key)
        if value is None:
            return OperationResult.failure("Key not found", code=404)
        if attribute is None:
            return OperationResult.ok(value=value)
        if not isinstance(value, dict) or attribute not in value:
            return OperationResult.failure("Attribute not found", code=404)
        return OperationResult.ok(value=value[attribute])

    @_guarded
    def store(self, key: str, value: Any) -> OperationResult:
        self._write(key, value)
        logger.debug("Stored %s in %s", key, self.vault_dir)
        return OperationResult.ok()

    @_guarded
    def update(self, key: str, value: Any, partial: bool = False) -> OperationResult:
        existing = self._read(key)
        if existing is None:
            return OperationResult.failure("Key not found", code=404)

        if partial:
            if not isinstance(existing, dict) or not isinstance(value, dict):
                return OperationResult.failure(
                    "Partial update requires a mapping value", code=422
                )
            existing.update(value)
            value = existing

        self._write(key, value)
        return OperationResult.ok()

    @_guarded
    def destroy(
        self,
        key: str,
        attributes: str | Iterable[str] | None = None,
    ) -> OperationResult:
        path = self._path(key)
        if not path.exists():
            return OperationResult.failure("Key not found", code=404)

        if attributes is None:
            path.unlink()
            return OperationResult.ok()

        value = self._read(key)
        if not isinstance(value, dict):
            return OperationResult.failure("Value has no attributes", code=422)
        names = [attributes] if isinstance(attributes, str) else list(attributes)
        for name in names:
            value.pop(name, None)
        self._write(key, value)
        return OperationResult.ok()

    def keys(self) -> list[str]:
        """List all stored keys. Unreadable files are skipped."""
        found = []
        for f in self.vault_dir.glob("*.vault"):
            try:
                found.append(json.loads(f.read_text())["key"])
            except (OSError, ValueError, KeyError, TypeError) as e:
                logger.warning("Skipping unreadable store file %s: %s", f.name, e)
        return sorted(found)

    def stats(self) -> dict:
        """Summarize how many keys the store holds and their size on disk."""
        sizes = [f.stat().st_size for f in self.vault_dir.glob("*.vault")]
        return {
            "vault_dir": str(self.vault_dir),
            "key_count": len(sizes),
            "ciphertext_bytes": sum(sizes),
            "largest_entry_bytes": max(sizes, default=0),
        }
