"""
Event endpoints for API v1.

These routes expose the event catalogue: listing, lookup, the events
an attendee is registered to, and the administrative add, update and
remove operations.  Administrative routes require the shared API key,
which clients send in the request body.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from event_registration_api.app.api.deps import (
    abort,
    get_registration_service,
    get_settings,
    log_request,
    request_line,
)
from event_registration_api.app.core.config import Settings
from event_registration_api.app.core.security import api_key_matches
from event_registration_api.app.schemas.event import Event, EventRead
from event_registration_api.app.services.outcomes import Outcome
from event_registration_api.app.services.registration_service import RegistrationService


router = APIRouter()


@router.get("/allEvents", response_model=List[EventRead])
async def list_events(
    request: Request,
    service: RegistrationService = Depends(get_registration_service),
) -> List[EventRead]:
    """Return every event currently stored, in no particular order."""
    events = [EventRead.from_event(event) for event in service.get_all_events()]
    log_request(request_line(request), status.HTTP_200_OK, "OK")
    return events


@router.post("/addEvent", status_code=status.HTTP_201_CREATED)
async def add_event(
    event: Event,
    request: Request,
    service: RegistrationService = Depends(get_registration_service),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Create a new event.

    Responds with 401 if the payload's ``apikey`` is wrong and with
    400 if an event with the same ``eventID`` already exists.
    """
    line = request_line(request)
    if not api_key_matches(event.apikey, settings.api_key):
        abort(line, status.HTTP_401_UNAUTHORIZED, "UNAUTHORIZED", "Invalid API key")
    if not service.create_event(event).ok:
        abort(line, status.HTTP_400_BAD_REQUEST, "BAD REQUEST", "Event Already Exists")
    log_request(line, status.HTTP_201_CREATED, "CREATED")
    return Response(status_code=status.HTTP_201_CREATED)


@router.put("/updateEvent", status_code=status.HTTP_201_CREATED)
async def update_event(
    event: Event,
    request: Request,
    service: RegistrationService = Depends(get_registration_service),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Replace an event's details.

    The attendee roster of an existing event is kept regardless of
    any ``attendees`` in the payload.  Unknown ids are created.
    """
    line = request_line(request)
    if not api_key_matches(event.apikey, settings.api_key):
        abort(line, status.HTTP_401_UNAUTHORIZED, "UNAUTHORIZED", "Caller not authorized")
    service.update_event(event)
    log_request(line, status.HTTP_201_CREATED, "CREATED")
    return Response(status_code=status.HTTP_201_CREATED)


@router.delete("/removeEvent/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_event(
    event_id: int,
    request: Request,
    service: RegistrationService = Depends(get_registration_service),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Delete an event and its registrations.

    The API key is the raw request body.  A JSON string body (with
    surrounding quotes) is accepted as well.
    """
    line = request_line(request)
    key = (await request.body()).decode("utf-8", errors="replace").strip()
    if len(key) >= 2 and key[0] == key[-1] == '"':
        key = key[1:-1]
    if not api_key_matches(key, settings.api_key):
        abort(line, status.HTTP_401_UNAUTHORIZED, "UNAUTHORIZED", "Invalid API key")
    if service.remove_event(event_id) is Outcome.NOT_FOUND:
        abort(line, status.HTTP_404_NOT_FOUND, "NOT FOUND", "Event not Found")
    log_request(line, status.HTTP_204_NO_CONTENT, "NO CONTENT: Event Removed")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/registeredEvents/{attendee_id}", response_model=List[EventRead])
async def list_attendee_events(
    attendee_id: str,
    request: Request,
    service: RegistrationService = Depends(get_registration_service),
) -> List[EventRead]:
    """Return the events the given attendee is registered to.

    An unknown attendee simply has no events.
    """
    events = [EventRead.from_event(event) for event in service.get_attendees_events(attendee_id)]
    log_request(request_line(request), status.HTTP_200_OK, "OK")
    return events


@router.get("/{event_id}", response_model=EventRead)
async def get_event(
    event_id: int,
    request: Request,
    service: RegistrationService = Depends(get_registration_service),
) -> EventRead:
    line = request_line(request)
    event = service.get_event(event_id)
    if event is None:
        abort(line, status.HTTP_404_NOT_FOUND, "NOT FOUND", "Event Not Found")
    log_request(line, status.HTTP_200_OK, "OK")
    return EventRead.from_event(event)
