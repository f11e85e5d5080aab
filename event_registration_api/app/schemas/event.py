"""
Pydantic models for event data.

``Event`` is the full value type held by the registration store: the
display fields, the capacity and the ordered roster of attendees.
``EventRead`` is the public projection returned by the API; it never
contains the roster or the API key.  The JSON field names (``eventID``
in particular) follow the payloads used by existing clients.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .attendee import Attendee


class EventBase(BaseModel):
    event_id: int = Field(..., alias="eventID", examples=[100])
    # Display strings; the service never parses them.
    description: str = Field("", examples=["CyberSecurity all around"])
    location: str = Field("", examples=["Pathfoot Building"])
    date: str = Field("", examples=["2022-04-01"])
    time: str = Field("", examples=["9am"])
    duration: int = Field(0, examples=[3])
    capacity: int = Field(0, examples=[40])

    model_config = {
        "populate_by_name": True,
    }


class Event(EventBase):
    """An event together with its ordered attendee roster.

    ``apikey`` is write‑only: it is accepted from request bodies so the
    API layer can authorise the call, but it is excluded from every
    serialisation and dropped when a snapshot is taken, so the store
    never keeps it.
    """

    attendees: List[Attendee] = Field(default_factory=list)
    apikey: Optional[str] = Field(default=None, exclude=True)

    @property
    def attending(self) -> int:
        """Number of attendees currently registered."""
        return len(self.attendees)

    def snapshot(self) -> "Event":
        """Return a deep copy that shares no state with this event.

        The copy has its own attendee list (and its own attendee
        objects) and carries no API key.
        """
        copy = self.model_copy(deep=True)
        copy.apikey = None
        return copy


class EventRead(EventBase):
    """Schema for reading an event from the API."""

    attending: int = 0

    @classmethod
    def from_event(cls, event: Event) -> "EventRead":
        return cls(
            event_id=event.event_id,
            description=event.description,
            location=event.location,
            date=event.date,
            time=event.time,
            duration=event.duration,
            capacity=event.capacity,
            attending=event.attending,
        )
