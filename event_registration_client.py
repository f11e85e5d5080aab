"""Event Registration API client.

This module defines a small client wrapper around the Event
Registration REST API.  It uses the ``requests`` library internally
and exposes one method per route:

* :meth:`EventRegistrationClient.list_events` – every event.
* :meth:`EventRegistrationClient.get_event` – a single event.
* :meth:`EventRegistrationClient.add_event`, :meth:`update_event`,
  :meth:`remove_event` – administrative event operations.
* :meth:`EventRegistrationClient.registered_events` – events of one
  attendee.
* :meth:`EventRegistrationClient.registered_attendees` – roster of one
  event.
* :meth:`EventRegistrationClient.register_attendee`,
  :meth:`update_attendee`, :meth:`deregister_attendee` – attendee
  operations.

Methods never raise for HTTP or transport errors.  They return a
tuple ``(data, error)`` where ``error`` is ``None`` on success or a
dictionary with ``status_code`` and ``message`` keys.

Administrative event operations need the shared API key.  Initialise
the client with ``api_key='<key>'``; it is sent in the request body,
as the ``apikey`` field of event payloads or as the raw body of a
remove request.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class EventRegistrationClient:
    """Client for interacting with the Event Registration API."""

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
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
                The ``/eventreg`` prefix is added by the client.
            api_key: Shared key for administrative event operations.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
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
        json_body: Any | None = None,
        data: str | None = None,
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request against ``/eventreg<path>``.

        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed
            JSON response on success (or ``None`` for empty bodies) and
            ``error`` is ``None``.  On failure, ``data`` is ``None`` and
            ``error`` describes the issue.
        """
        url = f"{self.base_url}/eventreg{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                data=data,
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
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _with_key(self, event: Dict[str, Any]) -> Dict[str, Any]:
        payload = dict(event)
        if self.api_key is not None:
            payload["apikey"] = self.api_key
        return payload

    # ------------------------------------------------------------------
    # Event operations
    # ------------------------------------------------------------------
    def list_events(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/events/allEvents")
        if error:
            return [], error
        return data or [], None

    def get_event(self, event_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/events/{event_id}")

    def add_event(self, event: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        """Create an event from a payload using the API's field names
        (``eventID``, ``description``, ``capacity`` and so on)."""
        _, error = self._request("POST", "/events/addEvent", json_body=self._with_key(event))
        return error is None, error

    def update_event(self, event: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("PUT", "/events/updateEvent", json_body=self._with_key(event))
        return error is None, error

    def remove_event(self, event_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/events/removeEvent/{event_id}", data=self.api_key or "")
        return error is None, error

    def registered_events(self, attendee_id: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"/events/registeredEvents/{attendee_id}")
        if error:
            return [], error
        return data or [], None

    # ------------------------------------------------------------------
    # Attendee operations
    # ------------------------------------------------------------------
    def registered_attendees(self, event_id: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"/attendees/registeredAttendees/{event_id}")
        if error:
            return [], error
        return data or [], None

    def register_attendee(self, event_id: int, attendee: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        """Register an attendee (``uid``, ``name``, ``interests``) to an event."""
        _, error = self._request("POST", f"/attendees/registerAttendee/{event_id}", json_body=attendee)
        return error is None, error

    def update_attendee(self, event_id: int, attendee: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("PUT", f"/attendees/updateAttendee/{event_id}", json_body=attendee)
        return error is None, error

    def deregister_attendee(self, event_id: int, attendee_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/attendees/deregisterAttendee/{event_id}/{attendee_id}")
        return error is None, error
