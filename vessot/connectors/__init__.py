"""
Store connectors for the encrypted key/value API.
Each connector implements communication with one kind of backing store.
"""

from vessot.connectors.base import StoreConnector
from vessot.connectors.http import HttpConnector
from vessot.connectors.local import LocalConnector

__all__ = [
    "StoreConnector",
    "HttpConnector",
    "LocalConnector",
]
