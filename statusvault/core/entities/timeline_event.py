"""
Entity: Timeline Event

A dated lifecycle milestone of one document. Derived, read-only.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class EventType(str, Enum):
    ADDED = "Document Added"
    EXPIRATION_WARNING = "Expiration Warning"
    EXPIRED = "Document Expired"
    SUPERSEDED = "Document Superseded"

    @property
    def icon(self) -> str:
        return EVENT_ICONS[self]


EVENT_ICONS: dict[EventType, str] = {
    EventType.ADDED: "plus.circle.fill",
    EventType.EXPIRATION_WARNING: "clock.fill",
    EventType.EXPIRED: "exclamationmark.triangle.fill",
    EventType.SUPERSEDED: "arrow.turn.up.right",
}


@dataclass(frozen=True)
class TimelineEvent:
    event_date: datetime
    event_type: EventType
    description: str
    document_id: str | None = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
