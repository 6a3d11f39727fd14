"""Client configuration."""

import os
from typing import Mapping, Optional

from vessot.walker import MAX_DEPTH, MAX_ITEMS

DEFAULT_API_URL = "https://vessot.tech/api"
DEFAULT_TIMEOUT = 30

API_URL_ENV = "VESSOT_API_URL"
TIMEOUT_ENV = "VESSOT_TIMEOUT"


class ClientConfig:
    """Configuration for a SecureData client.

    Attributes:
        api_url: Base URL of the remote store API, without trailing slash.
        timeout: Seconds to wait for each HTTP request.
        max_depth: Deepest container nesting accepted in a value tree.
        max_items: Most entries accepted in a single container.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_depth: int = MAX_DEPTH,
        max_items: int = MAX_ITEMS,
    ):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.max_depth = max_depth
        self.max_items = max_items

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """Build a config from VESSOT_API_URL and VESSOT_TIMEOUT, if set.

        Raises:
            ValueError: VESSOT_TIMEOUT is not a number.
        """
        env = os.environ if environ is None else environ
        api_url = env.get(API_URL_ENV) or DEFAULT_API_URL
        timeout = env.get(TIMEOUT_ENV)
        return cls(
            api_url=api_url,
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
        )

    def __repr__(self) -> str:
        return (
            f"ClientConfig(api_url={self.api_url!r}, timeout={self.timeout!r}, "
            f"max_depth={self.max_depth!r}, max_items={self.max_items!r})"
        )
