"""
Business logic for events and attendee registration.

``RegistrationService`` enforces the domain rules on top of an
:class:`EventStore`: event creation and update, capacity checks,
duplicate detection, registration and cancellation, and lookups by
attendee.  Every value handed out is a snapshot.

Operations that mutate one event run under that event's lock, so the
check‑then‑register sequence in :meth:`RegistrationService.try_register`
is atomic.  The older fine‑grained calls (``has_attendee_registered``,
``capacity_exceeded`` and ``register_attendee``) are kept for callers
that sequence the checks themselves; such callers are racing with
concurrent requests.

The service does not log and never raises for a missing event id.
Absence is reported as ``None``, ``False``, an empty list or
:attr:`Outcome.NOT_FOUND`.
"""

from typing import List, Optional

from ..schemas.attendee import Attendee
from ..schemas.event import Event
from .event_store import EventStore
from .outcomes import Outcome


class RegistrationService:
    """Registration engine bound to an explicitly owned store."""

    def __init__(self, store: Optional[EventStore] = None) -> None:
        self.store = store if store is not None else EventStore()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def add_event(self, event: Optional[Event]) -> None:
        """Store ``event``, silently replacing any event with the same id.

        Use :meth:`create_event` when an existing event must not be
        overwritten.
        """
        if event is None:
            return
        with self.store.lock(event.event_id):
            self.store.put(event)

    def create_event(self, event: Event) -> Outcome:
        """Add ``event`` unless its id is already taken."""
        with self.store.lock(event.event_id):
            if event.event_id in self.store:
                return Outcome.DUPLICATE_EVENT
            self.store.put(event)
            return Outcome.OK

    def update_event(self, event: Event) -> None:
        """Replace an event's details while keeping its roster.

        Attendee data carried by the payload is ignored when the event
        already exists; membership only changes through the attendee
        operations.  An unknown id is inserted as given.
        """
        with self.store.lock(event.event_id):
            existing = self.store.get(event.event_id)
            if existing is not None:
                event = event.model_copy(update={"attendees": existing.attendees})
            self.store.put(event)

    def remove_event(self, event_id: int) -> Outcome:
        with self.store.lock(event_id):
            if event_id not in self.store:
                return Outcome.NOT_FOUND
            self.store.delete(event_id)
            return Outcome.OK

    def has_event(self, event_id: int) -> bool:
        return event_id in self.store

    def get_event(self, event_id: int) -> Optional[Event]:
        return self.store.get(event_id)

    def get_all_events(self) -> List[Event]:
        return self.store.list()

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------
    def capacity_exceeded(self, event_id: int) -> bool:
        """Return True if admitting one more attendee would exceed capacity.

        An unknown event is reported as *not* exceeded; callers must
        confirm the event exists before relying on the answer.
        """
        event = self.store.get(event_id)
        if event is None:
            return False
        return event.attending + 1 > event.capacity

    def has_attendee_registered(self, event_id: int, uid: str) -> bool:
        event = self.store.get(event_id)
        if event is None:
            return False
        return _index_of(event.attendees, uid) is not None

    # ------------------------------------------------------------------
    # Attendees
    # ------------------------------------------------------------------
    def register_attendee(self, event_id: int, attendee: Attendee) -> None:
        """Append ``attendee`` to the roster without any checks.

        Nothing happens when the event does not exist.  Prefer
        :meth:`try_register`, which performs the duplicate and capacity
        checks atomically.
        """
        with self.store.lock(event_id):
            event = self.store.get(event_id)
            if event is None:
                return
            event.attendees.append(attendee.snapshot())
            self.store.put(event)

    def try_register(self, event_id: int, attendee: Attendee) -> Outcome:
        """Register ``attendee`` if the event exists, has room and the
        uid is not already on the roster.

        A duplicate uid is reported before a full event.
        """
        with self.store.lock(event_id):
            event = self.store.get(event_id)
            if event is None:
                return Outcome.NOT_FOUND
            if _index_of(event.attendees, attendee.uid) is not None:
                return Outcome.DUPLICATE_ATTENDEE
            if event.attending + 1 > event.capacity:
                return Outcome.CAPACITY_EXCEEDED
            event.attendees.append(attendee.snapshot())
            self.store.put(event)
            return Outcome.OK

    def cancel_attendee(self, event_id: int, uid: str) -> Outcome:
        """Remove every roster entry with ``uid``.

        Cancelling an unknown attendee, or on an unknown event, leaves
        the store untouched.
        """
        with self.store.lock(event_id):
            event = self.store.get(event_id)
            if event is None:
                return Outcome.NOT_FOUND
            remaining = [a for a in event.attendees if a.uid != uid]
            if len(remaining) == len(event.attendees):
                return Outcome.NOT_REGISTERED
            event.attendees = remaining
            self.store.put(event)
            return Outcome.OK

    def update_attendee(self, event_id: int, attendee: Attendee) -> Outcome:
        """Replace the roster entry whose uid matches ``attendee.uid``.

        The entry keeps its position in the roster.
        """
        with self.store.lock(event_id):
            event = self.store.get(event_id)
            if event is None:
                return Outcome.NOT_FOUND
            index = _index_of(event.attendees, attendee.uid)
            if index is None:
                return Outcome.NOT_REGISTERED
            event.attendees[index] = attendee.snapshot()
            self.store.put(event)
            return Outcome.OK

    def get_registered_attendees(self, event_id: int) -> List[Attendee]:
        event = self.store.get(event_id)
        if event is None:
            return []
        return event.attendees

    def get_attendees_events(self, uid: str) -> List[Event]:
        """Return every event whose roster contains ``uid``."""
        return [
            event
            for event in self.store.list()
            if _index_of(event.attendees, uid) is not None
        ]


def _index_of(attendees: List[Attendee], uid: str) -> Optional[int]:
    for index, attendee in enumerate(attendees):
        if attendee.uid == uid:
            return index
    return None
