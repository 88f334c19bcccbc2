"""
Timeline Generator.

Derives the lifecycle milestones of a document from its dates. Events
are regenerated from scratch on every call; merging them into a stored
timeline is the caller's concern.
"""

from datetime import timedelta

from statusvault.core.entities.document import Document
from statusvault.core.entities.timeline_event import EventType, TimelineEvent

WARNING_LEAD_DAYS = 30


class TimelineGenerator:

    def __init__(self, warning_lead_days: int = WARNING_LEAD_DAYS):
        self.warning_lead_days = warning_lead_days

    def events(self, document: Document) -> list[TimelineEvent]:
        """Added, then warning/expired when dated, then superseded."""
        label = document.kind.label
        events = [
            TimelineEvent(
                event_date=document.created_at,
                event_type=EventType.ADDED,
                description=f"{label} added to vault",
                document_id=document.id,
            )
        ]

        if document.expiry_date is not None:
            events.append(TimelineEvent(
                event_date=document.expiry_date - timedelta(days=self.warning_lead_days),
                event_type=EventType.EXPIRATION_WARNING,
                description=f"{label} expiring in {self.warning_lead_days} days",
                document_id=document.id,
            ))
            events.append(TimelineEvent(
                event_date=document.expiry_date,
                event_type=EventType.EXPIRED,
                description=f"{label} expired",
                document_id=document.id,
            ))

        if document.superseded_date is not None:
            events.append(TimelineEvent(
                event_date=document.superseded_date,
                event_type=EventType.SUPERSEDED,
                description=f"{label} superseded by newer document",
                document_id=document.id,
            ))

        return events

    def events_for(self, documents: list[Document]) -> list[TimelineEvent]:
        """Events of every document, oldest first (stable on equal dates)."""
        merged = [event for document in documents for event in self.events(document)]
        return sorted(merged, key=lambda e: e.event_date)
