"""Core tagfleet client with a raw-request escape hatch."""

from __future__ import annotations

import logging
import os
import warnings
from typing import Any, Optional

import requests

from .errors import ServerError, TransportError
from .resources.tags import Tags
from .resources.vendors import Vendors
from .session import SessionContext

DEFAULT_BASE_URL = os.environ.get("TAGFLEET_BASE_URL", "http://localhost:4000/api")
DEFAULT_TIMEOUT = int(os.environ.get("TAGFLEET_TIMEOUT", "20"))
ADMIN_PREFIX = "/admin"


class TagFleet:
    """Resource-grouped client for the tag fleet admin API."""

    tags: Tags
    vendors: Vendors

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        default_timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
        session_context: Optional[SessionContext] = None,
        raise_on_error: bool = False,
        admin_paths: bool = False,
    ) -> None:
        """Create a client bound to an API instance.

        Parameters
        ----------
        base_url
            API root, e.g. ``https://console.example.com/api``.
        default_timeout
            Default request timeout in seconds.
        session
            Optional requests session to reuse connections.
        session_context
            Login state whose token is sent with every request.
        raise_on_error
            If True, raise ``ServerError``/``TransportError`` instead of
            returning None.
        admin_paths
            Deprecated. Prefix every path with ``/admin`` as older console
            deployments expect.
        """
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.default_timeout = default_timeout or DEFAULT_TIMEOUT
        self.raise_on_error = raise_on_error
        self.session_context = session_context or SessionContext()
        self.admin_paths = admin_paths
        self._logger = logging.getLogger(__name__)
        self._session = session

        if admin_paths:
            warnings.warn(
                "admin_paths is deprecated; the canonical routes have no /admin prefix",
                DeprecationWarning,
                stacklevel=2,
            )

        self.tags: Tags = Tags(self)
        self.vendors: Vendors = Vendors(self)

    def _build_url(self, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        if self.admin_paths and not path.startswith(ADMIN_PREFIX + "/"):
            path = ADMIN_PREFIX + path
        return f"{self.base_url}{path}"

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any] | list[tuple[str, Any]]] = None,
        json: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
        raise_on_error: Optional[bool] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        """Send a raw request to the API.

        Parameters
        ----------
        method
            HTTP method (GET, PATCH, DELETE).
        path
            Endpoint path relative to ``base_url``.
        params
            Query parameters for the request.
        json
            JSON payload for the request.
        timeout
            Timeout in seconds for this request.
        raise_on_error
            Per-call override of the client's ``raise_on_error`` setting.

        Returns
        -------
        dict | list | None
            Parsed JSON payload, ``{}`` for a successful response without a
            JSON body, or None on error.
        """
        url = self._build_url(path)
        should_raise = self.raise_on_error if raise_on_error is None else raise_on_error

        requester = self._session or requests
        try:
            response = requester.request(
                method,
                url,
                params=params,
                json=json,
                headers=self.session_context.headers(),
                timeout=timeout or self.default_timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            server_message = _extract_server_message(response)
            error_msg = str(exc)
            if server_message:
                error_msg = f"{exc}\nServer message: {server_message}"
            self._logger.warning("Request failed for %s %s: %s", method, url, error_msg)
            if should_raise:
                raise ServerError(
                    error_msg,
                    message=server_message,
                    status_code=getattr(response, "status_code", None),
                ) from exc
            return None
        except requests.RequestException as exc:
            self._logger.warning("Request failed for %s %s: %s", method, url, exc)
            if should_raise:
                raise TransportError(str(exc)) from exc
            return None

        if not response.content:
            return {}
        try:
            payload = response.json()
        except ValueError:  # noqa: PERF203 - only attempt JSON when present
            self._logger.warning("Response from %s %s was not JSON", method, url)
            return {}
        if isinstance(payload, (dict, list)):
            return payload
        return {}


def _extract_server_message(response: Any) -> Optional[str]:
    """Pull a human-readable message out of an error response body."""
    try:
        error_body = response.json()
    except (ValueError, AttributeError):
        return None
    if not isinstance(error_body, dict):
        return None
    # Try common error message fields
    for key in ("message", "error", "detail"):
        value = error_body.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return None


__all__ = ["ADMIN_PREFIX", "DEFAULT_BASE_URL", "DEFAULT_TIMEOUT", "TagFleet"]
