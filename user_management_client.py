"""User management API client.

A thin wrapper around the REST API served by ``user_management_api``.
It uses the ``requests`` library and is what the console front end
(:mod:`user_console`) talks to.

The client exposes one method per endpoint:

* :meth:`list_users` – return all users.
* :meth:`get_user` – fetch a single user by its identifier.
* :meth:`get_user_count` – the ``Total users: N`` text.
* :meth:`create_user` – register a new user.
* :meth:`update_user` – replace a user's name and email.
* :meth:`delete_user` – remove a user.
* :meth:`get_status` – the service status text.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.  The client never
raises for HTTP or transport errors.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080"

ApiError = Dict[str, Any]


class UserManagementAPI:
    """Client for the user management API."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API, e.g. ``http://localhost:8080``.
                Defaults to the ``USER_API_BASE_URL`` environment variable.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        base_url = base_url or os.getenv("USER_API_BASE_URL", DEFAULT_BASE_URL)
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.users_path = "/api/users"

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: Any | None = None,
        expect_json: bool = True,
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/users``).
            json_body: JSON body to send with the request.
            expect_json: Parse the body as JSON; otherwise return the text.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if not response.content:
                return None, None
            if expect_json:
                return response.json(), None
            return response.text, None
        except requests.HTTPError as exc:
            # A 4xx/5xx Response is falsy, so compare against None.
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = str(err_json.get("detail") or err_json.get("message") or err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all users.  ``users`` is empty on failure."""
        data, error = self._request("GET", self.users_path)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    def get_user(self, user_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", f"{self.users_path}/{user_id}")

    def get_user_count(self) -> Tuple[Optional[str], Optional[ApiError]]:
        """Return the count text, e.g. ``"Total users: 3"``."""
        return self._request("GET", f"{self.users_path}/count", expect_json=False)

    def create_user(self, name: str, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("POST", self.users_path, json_body={"name": name, "email": email})

    def update_user(
        self, user_id: int, name: str, email: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request(
            "PUT", f"{self.users_path}/{user_id}", json_body={"name": name, "email": email}
        )

    def delete_user(self, user_id: int) -> Tuple[bool, Optional[ApiError]]:
        """Delete a user.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"{self.users_path}/{user_id}")
        if error:
            return False, error
        return True, None

    def get_status(self) -> Tuple[Optional[str], Optional[ApiError]]:
        return self._request("GET", "/api/status", expect_json=False)
