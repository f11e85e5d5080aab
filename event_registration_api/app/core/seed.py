"""
Startup seed data.

A fresh process starts with a small fixed catalogue of example events
so the API is usable straight away.  Seeding goes through
``RegistrationService.add_event`` and therefore overwrites events with
the same ids, which makes repeated seeding harmless.
"""

import logging
from typing import List

from ..schemas.event import Event
from ..services.registration_service import RegistrationService

logger = logging.getLogger(__name__)


def default_events() -> List[Event]:
    return [
        Event(
            event_id=100,
            description="CyberSecurity all around",
            location="Pathfoot Building",
            date="2022-04-01",
            time="9am",
            duration=3,
            capacity=40,
        ),
        Event(
            event_id=102,
            description="Wearables!",
            location="Cortrell Building",
            date="2022-02-03",
            time="10am",
            duration=3,
            capacity=2,
        ),
        Event(
            event_id=103,
            description="Data Security Awareness",
            location="Cortrell Building",
            date="2022-08-20",
            time="10am",
            duration=3,
            capacity=2,
        ),
    ]


def seed_events(service: RegistrationService) -> int:
    """Add the default events to ``service`` and return how many were added."""
    events = default_events()
    for event in events:
        service.add_event(event)
    logger.info("Seeded %d example events", len(events))
    return len(events)
