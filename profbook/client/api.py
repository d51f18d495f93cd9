# profbook/client/api.py
"""
Thin HTTP layer over ``httpx`` shared by every client component.

Maps failures onto the client error taxonomy: transport problems become
``NetworkError``, ``success: false`` answers become ``BackendError``.
Nothing is retried.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from profbook.config import BACKEND_URL
from .errors import BackendError, NetworkError

logger = logging.getLogger(__name__)


class ApiClient:
    def __init__(self, backend_url: str = BACKEND_URL, http: Optional[httpx.Client] = None):
        self.backend_url = backend_url.rstrip("/")
        self.http = http or httpx.Client(timeout=30.0)

    def close(self):
        self.http.close()

    def get(self, path: str, headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        return self._send("GET", path, headers=headers)

    def post(
        self,
        path: str,
        payload: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        return self._send("POST", path, json=payload, headers=headers)

    def _send(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        url = self.backend_url + path
        try:
            response = self.http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, path, e)
            raise NetworkError(str(e) or e.__class__.__name__) from e

        try:
            data = response.json()
        except ValueError:
            logger.error("%s %s returned a non-JSON body (%s)", method, path, response.status_code)
            raise NetworkError(f"Request failed with status code {response.status_code}")

        if not isinstance(data, dict) or not data.get("success"):
            message = data.get("message") if isinstance(data, dict) else None
            logger.warning("%s %s rejected: %s", method, path, message)
            raise BackendError(message or f"Request failed with status code {response.status_code}")

        return data
