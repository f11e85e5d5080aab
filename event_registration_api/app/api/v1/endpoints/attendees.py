"""
Attendee endpoints for API v1.

These routes register, update and deregister attendees on an event
and list an event's roster.  Registration is a single atomic service
call, so the duplicate and capacity checks cannot race with concurrent
registrations for the same event.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from event_registration_api.app.api.deps import (
    abort,
    get_registration_service,
    log_request,
    request_line,
)
from event_registration_api.app.schemas.attendee import Attendee
from event_registration_api.app.services.outcomes import Outcome
from event_registration_api.app.services.registration_service import RegistrationService


router = APIRouter()

# Reason phrases for outcomes that reject a request with 400.
_REJECTIONS = {
    Outcome.DUPLICATE_ATTENDEE: "Attendee Registered Already",
    Outcome.CAPACITY_EXCEEDED: "Event does not have enough space",
    Outcome.NOT_REGISTERED: "Attendee is not Registered",
}


def _raise_for_outcome(line: str, outcome: Outcome) -> None:
    if outcome.ok:
        return
    if outcome is Outcome.NOT_FOUND:
        abort(line, status.HTTP_404_NOT_FOUND, "NOT FOUND", "Event Not Found")
    if outcome in _REJECTIONS:
        abort(line, status.HTTP_400_BAD_REQUEST, "BAD REQUEST", _REJECTIONS[outcome])


@router.get("/registeredAttendees/{event_id}", response_model=List[Attendee])
async def list_registered_attendees(
    event_id: int,
    request: Request,
    service: RegistrationService = Depends(get_registration_service),
) -> List[Attendee]:
    """Return the roster of an event in registration order."""
    line = request_line(request)
    if not service.has_event(event_id):
        abort(line, status.HTTP_404_NOT_FOUND, "NOT FOUND", "Event Not Found")
    attendees = service.get_registered_attendees(event_id)
    log_request(line, status.HTTP_200_OK, "OK")
    return attendees


@router.post("/registerAttendee/{event_id}", status_code=status.HTTP_201_CREATED)
async def register_attendee(
    event_id: int,
    attendee: Attendee,
    request: Request,
    service: RegistrationService = Depends(get_registration_service),
) -> Response:
    """Register an attendee to an event.

    Responds with 404 for an unknown event, and with 400 when the uid
    is already registered or the event is full.
    """
    line = request_line(request)
    _raise_for_outcome(line, service.try_register(event_id, attendee))
    log_request(line, status.HTTP_201_CREATED, "CREATED")
    return Response(status_code=status.HTTP_201_CREATED)


@router.put("/updateAttendee/{event_id}", status_code=status.HTTP_201_CREATED)
async def update_attendee(
    event_id: int,
    attendee: Attendee,
    request: Request,
    service: RegistrationService = Depends(get_registration_service),
) -> Response:
    """Replace a registered attendee's details, keeping their position."""
    line = request_line(request)
    _raise_for_outcome(line, service.update_attendee(event_id, attendee))
    log_request(line, status.HTTP_201_CREATED, "CREATED")
    return Response(status_code=status.HTTP_201_CREATED)


@router.delete("/deregisterAttendee/{event_id}/{attendee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def deregister_attendee(
    event_id: int,
    attendee_id: str,
    request: Request,
    service: RegistrationService = Depends(get_registration_service),
) -> Response:
    """Cancel an attendee's registration."""
    line = request_line(request)
    _raise_for_outcome(line, service.cancel_attendee(event_id, attendee_id))
    log_request(line, status.HTTP_204_NO_CONTENT, "NO CONTENT: Registration Cancelled")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
