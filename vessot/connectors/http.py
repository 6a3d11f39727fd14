"""
HTTP Connector — the remote Vessot store API.

Every request carries a bearer token from VESSOT_INT_TOKEN. Responses are
folded into OperationResult records; transport errors never escape.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Iterable, Mapping, Optional, Union
from urllib.parse import quote

import requests

from vessot.config import ClientConfig
from vessot.connectors.base import StoreConnector
from vessot.result import OperationResult

logger = logging.getLogger(__name__)

TOKEN_ENV = "VESSOT_INT_TOKEN"


class HttpConnector(StoreConnector):
    """Connector for the hosted key/value API.

    Args:
        config: Client configuration (base URL and timeout).
        environ: Environment mapping holding the API token. Defaults to ``os.environ``.
    """

    name = "http"

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._config = config or ClientConfig.from_env(environ)
        self._environ = os.environ if environ is None else environ

    @property
    def api_url(self) -> str:
        return self._config.api_url

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, str]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> OperationResult:
        """Send one request and convert the response.

        Args:
            method: HTTP method.
            path: Path below the API base URL.
            params: Query string parameters.
            body: JSON request body.

        Returns:
            OperationResult with the response's ``value`` field on success.
        """
        token = self._environ.get(TOKEN_ENV, "")
        if not token:
            return OperationResult.failure(f"{TOKEN_ENV} environment variable not set")

        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }
        if body is not None:
            headers["Content-Type"] = "application/json"

        url = f"{self.api_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            resp = requests.request(
                method, url, headers=headers, params=params, json=body,
                timeout=self._config.timeout,
            )
        except requests.RequestException as e:
            logger.warning("Vessot API %s %s failed: %s", method, path, e)
            return OperationResult.failure(str(e))

        try:
            data = resp.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            data = {}

        if resp.status_code == 200:
            return OperationResult.ok(code=200, value=data.get("value", ""))

        error = data.get("error") or "API request failed"
        logger.warning("Vessot API %s %s: %s %s", method, path, resp.status_code, error)
        return OperationResult.failure(error, code=resp.status_code)

    def show(self, key: str, attribute: Optional[str] = None) -> OperationResult:
        params = {"attribute": attribute} if attribute is not None else None
        return self._request("GET", f"/show/{quote(key, safe='')}", params=params)

    def store(self, key: str, value: Any) -> OperationResult:
        result = self._request("POST", "/store", body={"key": key, "value": value})
        if result.success:
            result.value = ""
        return result

    def update(self, key: str, value: Any, partial: bool = False) -> OperationResult:
        field = "attributes" if partial else "value"
        result = self._request("PUT", "/update", body={"key": key, field: value})
        if result.success:
            result.value = ""
        return result

    def destroy(
        self,
        key: str,
        attributes: Optional[Union[str, Iterable[str]]] = None,
    ) -> OperationResult:
        body: Dict[str, Any] = {"key": key}
        if attributes is not None:
            body["attributes"] = [attributes] if isinstance(attributes, str) else list(attributes)
        result = self._request("DELETE", "/destroy", body=body)
        if result.success:
            result.value = ""
        return result
