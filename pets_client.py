"""Pets API client.

This module defines a small client wrapper around the Pets HTTP API
(``/api/v1/pets`` and ``/api/v1/content``).  It uses the ``requests``
library internally and never raises for HTTP or network errors:
every method returns a tuple ``(data, error)`` where ``error`` is
``None`` on success or a dictionary with ``status_code``, ``code`` and
``message`` describing the failure.

* :meth:`list_pets` – the catalog, optionally filtered and sorted.
* :meth:`get_pet` – a single pet by id.
* :meth:`create_pet` / :meth:`update_pet` / :meth:`delete_pet`.
* :meth:`delete_all_pets` and :meth:`insert_dummy_pet` – catalog actions.
* :meth:`resolve` – how the server resolves a content URI.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header when the server sits behind a
gateway that requires one.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PetsAPI:
    """Client for the Pets HTTP API."""

    api_prefix = "/api/v1"

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_key: Optional API key sent as ``Bearer <api_key>``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` holds the parsed JSON
            response on success.  On failure ``data`` is ``None`` and
            ``error`` carries ``status_code``, ``code`` (the provider
            failure code, when the server sent one) and ``message``.
        """
        url = f"{self.base_url}{self.api_prefix}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            return None, self._http_error(exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "code": None, "message": str(exc)}

    @staticmethod
    def _http_error(exc: requests.HTTPError) -> Error:
        response = exc.response
        status = response.status_code if response is not None else None
        code = None
        message = ""
        if response is not None:
            try:
                detail = response.json().get("detail")
            except ValueError:
                detail = response.text
            if isinstance(detail, dict):
                code = detail.get("code")
                message = detail.get("message") or ""
            elif detail:
                message = str(detail)
        if not message:
            message = str(exc)
        logger.error("API request failed (%s): %s", status, message)
        return {"status_code": status, "code": code, "message": message}

    # ------------------------------------------------------------------
    # Catalog operations
    # ------------------------------------------------------------------
    def list_pets(
        self,
        *,
        columns: Optional[List[str]] = None,
        breed: Optional[str] = None,
        gender: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the pets in the catalog.

        Returns:
            A tuple ``(pets, error)``.  ``pets`` is empty on failure.
        """
        params: Dict[str, Any] = {}
        if columns:
            params["columns"] = ",".join(columns)
        if breed is not None:
            params["breed"] = breed
        if gender is not None:
            params["gender"] = int(gender)
        if sort:
            params["sort"] = sort
        data, error = self._request("GET", "/pets/", params=params or None)
        if error:
            return [], error
        return data or [], None

    def insert_dummy_pet(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/pets/dummy")

    def delete_all_pets(self) -> Tuple[int, Optional[Error]]:
        data, error = self._request("DELETE", "/pets/")
        if error:
            return 0, error
        return data.get("deleted", 0), None

    # ------------------------------------------------------------------
    # Single pet operations
    # ------------------------------------------------------------------
    def get_pet(self, pet_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/pets/{pet_id}")

    def create_pet(self, values: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a pet.

        Args:
            values: Field set with at least ``name`` and ``gender``.
        Returns:
            A tuple ``(pet, error)``; ``pet`` includes its ``id`` and ``uri``.
        """
        return self._request("POST", "/pets/", json_body=values)

    def update_pet(self, pet_id: Any, values: Dict[str, Any]) -> Tuple[int, Optional[Error]]:
        """Update the given fields of a pet.

        Returns:
            A tuple ``(updated, error)`` with the number of rows changed.
        """
        data, error = self._request("PATCH", f"/pets/{pet_id}", json_body=values)
        if error:
            return 0, error
        return data.get("updated", 0), None

    def delete_pet(self, pet_id: Any) -> Tuple[int, Optional[Error]]:
        data, error = self._request("DELETE", f"/pets/{pet_id}")
        if error:
            return 0, error
        return data.get("deleted", 0), None

    # ------------------------------------------------------------------
    # Content URIs
    # ------------------------------------------------------------------
    def resolve(self, uri: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Ask the server how it resolves ``uri`` (kind, id and MIME type)."""
        return self._request("GET", "/content/", params={"uri": uri})
