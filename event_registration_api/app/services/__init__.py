"""
Service layer abstraction.

``EventStore`` holds the events in memory and ``RegistrationService``
applies the registration rules on top of it.  API handlers only talk
to the service, so the store can be replaced without touching them.
"""

from .event_store import EventStore
from .outcomes import Outcome
from .registration_service import RegistrationService

__all__ = ["EventStore", "Outcome", "RegistrationService"]
