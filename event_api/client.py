"""Event Registry API client.

A thin synchronous wrapper around the REST API built on ``requests``.
It knows the three resource collections (``events``, ``attendees`` and
``organizers``) and the statistics endpoint:

* :meth:`EventApiClient.list_items` – all records of a resource.
* :meth:`EventApiClient.get_item` – one record by id.
* :meth:`EventApiClient.create_item` – create a record.
* :meth:`EventApiClient.update_item` – partial update (``PATCH``).
* :meth:`EventApiClient.replace_event` – full replacement of an event (``PUT``).
* :meth:`EventApiClient.delete_item` – delete a record.
* :meth:`EventApiClient.get_stats` – event and attendee totals.

Every method returns a ``(data, error)`` tuple.  On success ``error`` is
``None``; on failure ``data`` is ``None`` (or an empty list for
listings) and ``error`` is a dictionary with ``status_code`` and
``message`` keys.  The client never raises for HTTP or transport errors.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

RESOURCES = ("events", "attendees", "organizers")

Error = Dict[str, Any]


class EventApiClient:
    """Client for interacting with the Event Registry API."""

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server root, e.g. ``http://localhost:3000``.  The
                ``/api`` prefix is added by the client.
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
    @staticmethod
    def _collection(resource: str) -> str:
        if resource not in RESOURCES:
            raise ValueError(f"Unknown resource {resource!r}; expected one of {', '.join(RESOURCES)}")
        return f"/api/{resource}"

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``, etc.).
            path: Path relative to :attr:`base_url` (e.g. ``/api/events``).
            json_body: JSON body to send with the request (for POST/PATCH/PUT).
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
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
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or str(err_json)
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
    # Resource operations
    # ------------------------------------------------------------------
    def list_items(self, resource: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve every record of ``resource`` in ascending id order."""
        data, error = self._request("GET", self._collection(resource))
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_item(self, resource: str, item_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"{self._collection(resource)}/{item_id}")

    def create_item(self, resource: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a record; the returned data carries the assigned ``id``."""
        return self._request("POST", self._collection(resource), json_body=payload)

    def update_item(
        self, resource: str, item_id: int, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Change only the fields present in ``payload``."""
        return self._request("PATCH", f"{self._collection(resource)}/{item_id}", json_body=payload)

    def replace_event(self, event_id: int, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace every field of an event; omitted fields are cleared."""
        return self._request("PUT", f"{self._collection('events')}/{event_id}", json_body=payload)

    def delete_item(self, resource: str, item_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a record.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"{self._collection(resource)}/{item_id}")
        return error is None, error

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------
    def get_stats(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Return ``{"totalEvents": ..., "totalAttendees": ...}``."""
        return self._request("GET", "/api/event-stats")
