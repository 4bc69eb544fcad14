"""Shared HTTP transport for the task REST adapter.

This module provides a thin wrapper around ``requests.Session`` so the
adapter shares timeout policy, retry behavior, and API-key header
construction across verbs.

Dependencies:
    - ``requests`` for network I/O.
    - ``todoapp.adapters.api_errors.ApiTimeoutError`` for typed transport failures.

Call context:
    Constructed by ``todoapp/adapters/tasks_rest.py``; use-cases interact only
    through the repository port.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import requests
from requests import exceptions as req_exc

from todoapp.adapters.api_errors import ApiTimeoutError


@dataclass
class HttpConfig:
    """Timeout and retry configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Default timeout in seconds for JSON API calls.
        retries: Number of retry attempts after the initial request.
    """
    request_timeout_s: int = 10
    retries: int = 2


class RetryingSession:
    """Shared requests wrapper with API-key headers and retry loops.

    Transport-only: callers provide endpoint URLs and decide how to map
    non-2xx responses into repository errors.
    """

    def __init__(self, api_key: Optional[str], cfg: HttpConfig) -> None:
        """Create a retry-enabled session.

        Args:
            api_key: API key value to place in ``X-API-Key`` headers, or ``None``.
            cfg: Shared timeout and retry settings.
        """
        self.session = requests.Session()
        self.api_key = api_key
        self.cfg = cfg

    def _headers(self, json_body: bool = False) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["X-API-Key"] = self.api_key
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def get(self, url: str, *, timeout: Optional[int] = None) -> requests.Response:
        """Send a GET request with retries on timeout/connectivity failures."""
        return self._send(
            f"GET {url}",
            lambda: self.session.get(
                url, headers=self._headers(), timeout=timeout or self.cfg.request_timeout_s
            ),
        )

    def put(
        self,
        url: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> requests.Response:
        """Send a JSON PUT request with retries on transport failures."""
        data = None if json_body is None else json.dumps(json_body)
        return self._send(
            f"PUT {url}",
            lambda: self.session.put(
                url,
                data=data,
                headers=self._headers(json_body=json_body is not None),
                timeout=timeout or self.cfg.request_timeout_s,
            ),
        )

    def post(
        self,
        url: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> requests.Response:
        """Send a JSON POST request with retries on transport failures."""
        data = None if json_body is None else json.dumps(json_body)
        return self._send(
            f"POST {url}",
            lambda: self.session.post(
                url,
                data=data,
                headers=self._headers(json_body=json_body is not None),
                timeout=timeout or self.cfg.request_timeout_s,
            ),
        )

    def delete(self, url: str, *, timeout: Optional[int] = None) -> requests.Response:
        """Send a DELETE request with retries on transport failures."""
        return self._send(
            f"DELETE {url}",
            lambda: self.session.delete(
                url, headers=self._headers(), timeout=timeout or self.cfg.request_timeout_s
            ),
        )

    def _send(self, context: str, request: Callable[[], requests.Response]) -> requests.Response:
        last_err: ApiTimeoutError | None = None
        for _ in range(self.cfg.retries + 1):
            try:
                return request()
            except (req_exc.Timeout, req_exc.ConnectionError):
                last_err = ApiTimeoutError(f"Timeout during {context}", context=context)
        raise last_err


__all__ = ["HttpConfig", "RetryingSession"]
