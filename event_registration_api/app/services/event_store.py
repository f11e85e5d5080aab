"""
In‑memory keyed storage for events.

``EventStore`` maps ``event_id`` to ``Event`` and is the single source
of truth for the registration service.  Values are copied on the way
in and on the way out, so a caller can never reach the stored objects
through a reference it holds.  Each primitive operation (``put``,
``get``, ``delete``, ``list``) runs under one internal lock and is
atomic with respect to the others.

Compound read‑modify‑write sequences belong to the service layer,
which serialises them through :meth:`EventStore.lock`.  State is
volatile and disappears with the process.
"""

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from ..schemas.event import Event


class EventStore:
    """Thread‑safe, copy‑in/copy‑out container of events."""

    def __init__(self) -> None:
        self._events: Dict[int, Event] = {}
        self._guard = threading.Lock()
        # Per‑event locks exist only while some thread holds or awaits
        # them; see ``lock``.
        self._locks: Dict[int, "_LockEntry"] = {}

    def put(self, event: Event) -> None:
        """Insert or overwrite the entry for ``event.event_id``."""
        stored = event.snapshot()
        with self._guard:
            self._events[stored.event_id] = stored

    def get(self, event_id: int) -> Optional[Event]:
        """Return a snapshot of the stored event, or ``None`` if absent."""
        with self._guard:
            event = self._events.get(event_id)
            return event.snapshot() if event is not None else None

    def delete(self, event_id: int) -> None:
        """Remove the entry if present.  Missing ids are ignored."""
        with self._guard:
            self._events.pop(event_id, None)

    def list(self) -> List[Event]:
        """Return snapshots of every stored event in no particular order."""
        with self._guard:
            return [event.snapshot() for event in self._events.values()]

    def __contains__(self, event_id: object) -> bool:
        with self._guard:
            return event_id in self._events

    def __len__(self) -> int:
        with self._guard:
            return len(self._events)

    @contextmanager
    def lock(self, event_id: int) -> Iterator[None]:
        """Hold the exclusive lock for one event id.

        The lock is re‑entrant, so a service method holding it may call
        other methods that take it again.  Its entry is dropped once the
        last holder or waiter leaves, so ids that are never stored (or
        have been deleted) do not keep a lock alive.
        """
        with self._guard:
            entry = self._locks.get(event_id)
            if entry is None:
                entry = self._locks[event_id] = _LockEntry()
            entry.users += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._locks[event_id]


class _LockEntry:
    """A per‑event lock and the number of threads holding or awaiting it."""

    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.users = 0
