"""Shared fixtures: a fresh registration service and an API test client."""

import os

import pytest

# Settings read the environment at import time; keep the default app quiet.
os.environ.setdefault("SEED_ON_STARTUP", "false")

from fastapi.testclient import TestClient  # noqa: E402

from event_registration_api.app.core.config import Settings  # noqa: E402
from event_registration_api.app.main import create_app  # noqa: E402
from event_registration_api.app.schemas.attendee import Attendee  # noqa: E402
from event_registration_api.app.schemas.event import Event  # noqa: E402
from event_registration_api.app.services.registration_service import RegistrationService  # noqa: E402

TEST_API_KEY = "test-key"


def make_event(event_id: int = 100, capacity: int = 3, **overrides) -> Event:
    fields = dict(
        event_id=event_id,
        description="CyberSecurity all around",
        location="Pathfoot Building",
        date="2022-04-01",
        time="9am",
        duration=3,
        capacity=capacity,
    )
    fields.update(overrides)
    return Event(**fields)


def make_attendee(uid: str, name: str = "", interests=None) -> Attendee:
    return Attendee(uid=uid, name=name or f"Attendee {uid}", interests=interests or [])


@pytest.fixture
def service() -> RegistrationService:
    return RegistrationService()


@pytest.fixture
def app_settings() -> Settings:
    return Settings(api_key=TEST_API_KEY, seed_on_startup=False)


@pytest.fixture
def client(app_settings, service):
    app = create_app(app_settings, service)
    with TestClient(app) as test_client:
        yield test_client
