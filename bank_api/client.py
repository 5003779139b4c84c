"""Bank Back Office API client.

A thin wrapper around the REST API for scripts and other services.
The client uses the ``requests`` library internally and exposes one
method per operation, each taking the resource name (``"Account"``,
``"Branch"``, ``"Customer"`` or ``"Employee"``):

* :meth:`list` – return all records of a resource.
* :meth:`get` – fetch a single record by its identifier.
* :meth:`create` – store a new record.
* :meth:`update` – overwrite an existing record.
* :meth:`delete` – remove a record.
* :meth:`lookup` / :meth:`lookups` – identifier and display text pairs.
* :meth:`index_data` – every table in one call.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is empty and ``error`` is a dictionary
with keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Optional[Dict[str, Any]]


class BankApiClient:
    """Client for the Bank Back Office API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_prefix: Prefix the resource routes are mounted under.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.api_prefix = "/" + api_prefix.strip("/") if api_prefix.strip("/") else ""
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Tuple[Optional[Any], Error]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url`.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` where ``data`` is the parsed JSON
            response (``None`` for empty bodies).
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, json=json_body, timeout=self.timeout)
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = str(err_json.get("detail") or err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _path(self, resource: str, record_id: Any | None = None) -> str:
        path = f"{self.api_prefix}/{resource}"
        if record_id is not None:
            path += f"/{record_id}"
        return path

    # ------------------------------------------------------------------
    # Resource operations
    # ------------------------------------------------------------------
    def list(self, resource: str) -> Tuple[List[Dict[str, Any]], Error]:
        data, error = self._request("GET", self._path(resource))
        if error:
            return [], error
        return data or [], None

    def get(self, resource: str, record_id: Any) -> Tuple[Optional[Dict[str, Any]], Error]:
        """Retrieve a single record.

        The server wraps the record in a one-element array; the record
        itself is returned here.
        """
        data, error = self._request("GET", self._path(resource, record_id))
        if error:
            return None, error
        if isinstance(data, list):
            return (data[0] if data else None), None
        return data, None

    def create(self, resource: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request("POST", self._path(resource), json_body=payload)

    def update(self, resource: str, record_id: Any, payload: Dict[str, Any]) -> Tuple[bool, Error]:
        """Overwrite a record.  Returns ``(True, None)`` on success."""
        _, error = self._request("PUT", self._path(resource, record_id), json_body=payload)
        return error is None, error

    def delete(self, resource: str, record_id: Any) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request("DELETE", self._path(resource, record_id))

    # ------------------------------------------------------------------
    # Lookups and index data
    # ------------------------------------------------------------------
    def lookup(self, resource: str, record_id: Any) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request("GET", self._path(f"{resource}Lookups", record_id))

    def lookups(self, resource: str) -> Tuple[List[Dict[str, Any]], Error]:
        data, error = self._request("GET", self._path(f"{resource}Lookups"))
        if error:
            return [], error
        return data or [], None

    def index_data(self) -> Tuple[Dict[str, List[Dict[str, Any]]], Error]:
        """Return every table keyed by its name (``"Accounts"``, ...)."""
        data, error = self._request("GET", "/indexdata")
        if error:
            return {}, error
        return {table["Name"]: table["Table"] for table in data or []}, None
