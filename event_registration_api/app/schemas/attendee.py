"""
Pydantic model for event attendees.

An attendee is identified by ``uid``.  The identifier is unique within
a single event's roster and is also used across events to answer
"which events is this attendee registered to".
"""

from typing import List

from pydantic import BaseModel, Field


class Attendee(BaseModel):
    uid: str = Field(..., examples=["u-1001"])
    name: str = Field(..., examples=["Ada Lovelace"])
    # Order carries no meaning and duplicates are not rejected.
    interests: List[str] = Field(default_factory=list, examples=[["security", "iot"]])

    def snapshot(self) -> "Attendee":
        """Return a deep, independently owned copy of this attendee."""
        return self.model_copy(deep=True)
