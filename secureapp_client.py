"""SecureApp Customer API client.

A thin wrapper around the HTTP API using the ``requests`` library.
It exposes one method per endpoint:

* :meth:`health` and :meth:`info` – liveness probe and service metadata.
* :meth:`list_customers`, :meth:`active_customers`,
  :meth:`inactive_customers` – customer lists.
* :meth:`get_customer` and :meth:`search_customers` – single record and
  substring search.
* :meth:`get_command`, :meth:`send_command` and :meth:`list_commands` –
  the command table.

Every customer and command method accepts an ``output_format`` (``json``, ``text``,
``plain`` or ``html``).  JSON responses are returned decoded; text and
HTML responses are returned as strings.  Error responses raise
:class:`SecureAppAPIError` carrying the status code and the JSON error
body sent by the server.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Payload = Union[Dict[str, Any], str]


class SecureAppAPIError(Exception):
    """Raised when the API answers with a non-2xx status or cannot be reached."""

    def __init__(self, status_code: Optional[int], payload: Any) -> None:
        self.status_code = status_code
        self.payload = payload
        message = payload.get("error") if isinstance(payload, dict) else payload
        super().__init__(f"API request failed ({status_code}): {message}")


class SecureAppAPI:
    """Client for the SecureApp Customer API."""

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        output_format: Optional[str] = None,
        json_body: Any = None,
    ) -> Payload:
        url = f"{self.base_url}{path}"
        params = {"format": output_format} if output_format else None
        logger.debug("Sending %s request to %s", method, url)
        try:
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            raise SecureAppAPIError(None, str(exc)) from exc

        if response.status_code >= 400:
            try:
                payload: Any = response.json()
            except ValueError:
                payload = response.text
            logger.error("API request failed (%s): %s", response.status_code, payload)
            raise SecureAppAPIError(response.status_code, payload)

        content_type = response.headers.get("Content-Type", "")
        if content_type.startswith("application/json"):
            return response.json()
        return response.text

    # ------------------------------------------------------------------
    # Service
    # ------------------------------------------------------------------
    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/health")

    def info(self) -> Dict[str, Any]:
        return self._request("GET", "/")

    # ------------------------------------------------------------------
    # Customers
    # ------------------------------------------------------------------
    def list_customers(self, output_format: Optional[str] = None) -> Payload:
        return self._request("GET", "/customers", output_format=output_format)

    def active_customers(self, output_format: Optional[str] = None) -> Payload:
        return self._request("GET", "/customers/active", output_format=output_format)

    def inactive_customers(self, output_format: Optional[str] = None) -> Payload:
        return self._request("GET", "/customers/inactive", output_format=output_format)

    def get_customer(self, customer_id: Any, output_format: Optional[str] = None) -> Payload:
        """Retrieve a single customer.  Unknown ids raise with status 404."""
        return self._request("GET", f"/customers/{quote(str(customer_id), safe='')}", output_format=output_format)

    def search_customers(self, query: str, output_format: Optional[str] = None) -> Payload:
        return self._request("GET", f"/customers/search/{quote(query, safe='')}", output_format=output_format)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def get_command(self, name: str, output_format: Optional[str] = None) -> Payload:
        return self._request("GET", f"/command/{quote(name, safe='')}", output_format=output_format)

    def send_command(self, name: str, output_format: Optional[str] = None) -> Payload:
        """Look up ``name`` through ``POST /command``."""
        return self._request("POST", "/command", output_format=output_format, json_body={"command": name})

    def list_commands(self, output_format: Optional[str] = None) -> Payload:
        return self._request("GET", "/commands", output_format=output_format)
