"""
Top‑level router for version 1 of the API.

This router aggregates the event and attendee routers.  The
application mounts it under ``/eventreg``.
"""

from fastapi import APIRouter

from .endpoints import attendees, events

router = APIRouter()

router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(attendees.router, prefix="/attendees", tags=["attendees"])
