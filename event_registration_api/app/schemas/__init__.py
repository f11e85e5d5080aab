"""
Pydantic schema definitions for events and attendees.

The same models serve as the engine's value types and as API
payloads.  Every model exposes a ``snapshot`` method that returns an
independently owned copy so that data never aliases across the store
boundary.
"""
