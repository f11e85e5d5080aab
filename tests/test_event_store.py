"""EventStore: copy-in/copy-out keyed storage.

Invariants:
    - put stores a snapshot; later changes to the caller's object are invisible
    - get and list hand out snapshots; changing them never touches stored state
    - delete on a missing id is a silent no-op
"""

import threading

from event_registration_api.app.services.event_store import EventStore

from conftest import make_attendee, make_event


def test_get_missing_returns_none():
    assert EventStore().get(1) is None


def test_put_then_get_round_trip():
    store = EventStore()
    event = make_event(100)
    store.put(event)
    assert store.get(100) == event


def test_put_stores_a_copy():
    store = EventStore()
    event = make_event(100)
    store.put(event)

    event.attendees.append(make_attendee("A"))
    event.capacity = 99

    stored = store.get(100)
    assert stored.attendees == []
    assert stored.capacity == 3


def test_get_returns_a_copy():
    store = EventStore()
    store.put(make_event(100))

    fetched = store.get(100)
    fetched.attendees.append(make_attendee("A"))

    assert store.get(100).attendees == []


def test_put_overwrites_existing_entry():
    store = EventStore()
    store.put(make_event(100, description="old"))
    store.put(make_event(100, description="new"))
    assert store.get(100).description == "new"
    assert len(store) == 1


def test_delete_missing_is_noop():
    store = EventStore()
    store.put(make_event(100))
    store.delete(999)
    assert 100 in store
    assert len(store) == 1


def test_delete_removes_entry():
    store = EventStore()
    store.put(make_event(100))
    store.delete(100)
    assert store.get(100) is None
    assert 100 not in store


def test_list_returns_copies_of_every_event():
    store = EventStore()
    store.put(make_event(100))
    store.put(make_event(101))

    listed = store.list()
    assert sorted(e.event_id for e in listed) == [100, 101]

    for event in listed:
        event.attendees.append(make_attendee("X"))
    assert all(e.attendees == [] for e in store.list())


def test_lock_is_reentrant():
    store = EventStore()
    with store.lock(1):
        with store.lock(1):
            store.put(make_event(1))
    assert 1 in store


def test_lock_serialises_same_event():
    store = EventStore()
    inside = threading.Event()
    release = threading.Event()
    entered_second = threading.Event()

    def hold():
        with store.lock(1):
            inside.set()
            release.wait(timeout=5)

    def contend():
        with store.lock(1):
            entered_second.set()

    holder = threading.Thread(target=hold)
    holder.start()
    inside.wait(timeout=5)

    contender = threading.Thread(target=contend)
    contender.start()
    assert not entered_second.wait(timeout=0.2)

    release.set()
    holder.join(timeout=5)
    contender.join(timeout=5)
    assert entered_second.is_set()


def test_locks_for_distinct_events_are_independent():
    store = EventStore()
    acquired = threading.Event()

    def other():
        with store.lock(2):
            acquired.set()

    with store.lock(1):
        worker = threading.Thread(target=other)
        worker.start()
        assert acquired.wait(timeout=5)
        worker.join(timeout=5)


def test_lock_entries_are_dropped_after_use():
    store = EventStore()
    store.put(make_event(1))
    with store.lock(1):
        with store.lock(1):
            assert list(store._locks) == [1]
    assert store._locks == {}


def test_lock_map_stays_empty_for_unknown_ids(service):
    store = service.store
    for event_id in range(1000, 1500):
        service.try_register(event_id, make_attendee("A"))
        service.cancel_attendee(event_id, "A")
        service.update_attendee(event_id, make_attendee("A"))
        service.remove_event(event_id)
    assert store._locks == {}


def test_lock_entry_survives_while_a_thread_waits():
    store = EventStore()
    inside = threading.Event()
    release = threading.Event()

    def hold():
        with store.lock(1):
            inside.set()
            release.wait(timeout=5)

    def contend():
        with store.lock(1):
            pass

    holder = threading.Thread(target=hold)
    holder.start()
    inside.wait(timeout=5)
    contender = threading.Thread(target=contend)
    contender.start()
    contender.join(timeout=0.2)
    assert 1 in store._locks

    release.set()
    holder.join(timeout=5)
    contender.join(timeout=5)
    assert store._locks == {}
