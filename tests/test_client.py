"""EventRegistrationClient: request building and error translation."""

import json
from unittest import mock

import pytest
import requests

from event_registration_client import EventRegistrationClient


def _response(status_code=200, json_body=None, text=""):
    response = requests.Response()
    response.status_code = status_code
    if json_body is not None:
        response._content = json.dumps(json_body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = text.encode("utf-8")
    return response


@pytest.fixture
def session():
    return mock.Mock(spec=requests.Session)


@pytest.fixture
def api(session):
    return EventRegistrationClient(base_url="http://svc.test/", api_key="secret", session=session)


def test_list_events(api, session):
    session.request.return_value = _response(json_body=[{"eventID": 100}])
    events, error = api.list_events()

    assert error is None
    assert events == [{"eventID": 100}]
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "http://svc.test/eventreg/events/allEvents"


def test_add_event_sends_api_key_in_body(api, session):
    session.request.return_value = _response(status_code=201)
    ok, error = api.add_event({"eventID": 100, "capacity": 3})

    assert ok and error is None
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["json"] == {"eventID": 100, "capacity": 3, "apikey": "secret"}


def test_add_event_does_not_mutate_caller_payload(api, session):
    session.request.return_value = _response(status_code=201)
    payload = {"eventID": 100}
    api.add_event(payload)
    assert payload == {"eventID": 100}


def test_remove_event_sends_raw_key(api, session):
    session.request.return_value = _response(status_code=204)
    ok, _ = api.remove_event(100)

    assert ok
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "DELETE"
    assert kwargs["url"] == "http://svc.test/eventreg/events/removeEvent/100"
    assert kwargs["data"] == "secret"


def test_register_attendee_error_is_translated(api, session):
    session.request.return_value = _response(
        status_code=400, json_body={"detail": "Event does not have enough space"}
    )
    ok, error = api.register_attendee(100, {"uid": "A", "name": "Ada"})

    assert not ok
    assert error == {"status_code": 400, "message": "Event does not have enough space"}


def test_non_json_error_body_uses_text(api, session):
    session.request.return_value = _response(status_code=500, text="boom")
    event, error = api.get_event(100)
    assert event is None
    assert error == {"status_code": 500, "message": "boom"}


def test_transport_error_is_translated(api, session):
    session.request.side_effect = requests.ConnectionError("refused")
    attendees, error = api.registered_attendees(100)
    assert attendees == []
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_deregister_attendee_path(api, session):
    session.request.return_value = _response(status_code=204)
    ok, _ = api.deregister_attendee(100, "A")
    assert ok
    assert session.request.call_args.kwargs["url"] == (
        "http://svc.test/eventreg/attendees/deregisterAttendee/100/A"
    )
