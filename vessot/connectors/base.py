"""
Base class for remote store connectors.

A connector only ever sees ciphertext: writes arrive already encrypted and
reads are decrypted by the caller after the connector returns.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Union

from vessot.result import OperationResult


class StoreConnector(ABC):
    """Key/value store reachable through show, store, update and destroy."""

    name: str = "base"

    @abstractmethod
    def show(self, key: str, attribute: Optional[str] = None) -> OperationResult:
        """Fetch the value stored under key, or one top-level attribute of it."""

    @abstractmethod
    def store(self, key: str, value: Any) -> OperationResult:
        """Create or replace the value stored under key."""

    @abstractmethod
    def update(self, key: str, value: Any, partial: bool = False) -> OperationResult:
        """Replace the value, or merge attributes into it when partial is True."""

    @abstractmethod
    def destroy(
        self,
        key: str,
        attributes: Optional[Union[str, Iterable[str]]] = None,
    ) -> OperationResult:
        """Remove the key, or only the named attributes of its value."""
