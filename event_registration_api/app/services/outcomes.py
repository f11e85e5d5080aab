"""
Result kinds returned by the registration service.

The service reports expected failures (missing event, duplicate
registration, full event and so on) as values rather than exceptions.
The API layer maps each kind to an HTTP status.
"""

from enum import Enum


class Outcome(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    DUPLICATE_ATTENDEE = "duplicate_attendee"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    DUPLICATE_EVENT = "duplicate_event"
    NOT_REGISTERED = "not_registered"

    @property
    def ok(self) -> bool:
        return self is Outcome.OK
