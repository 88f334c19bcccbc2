"""
Use Case: Refresh Status.

Every read of the vault goes through here: states are recomputed over
the full document set and persisted before a snapshot, a timeline or
an expiry query is derived from them.
"""

from datetime import datetime

from statusvault.core.entities.document import Document, utc_now
from statusvault.core.entities.status_snapshot import StatusSnapshot
from statusvault.core.entities.timeline_event import TimelineEvent
from statusvault.core.exceptions import DocumentNotFoundError
from statusvault.core.interfaces.document_repository import IDocumentRepository
from statusvault.core.lifecycle.lifecycle_engine import LifecycleEngine
from statusvault.core.lifecycle.status_engine import StatusEngine
from statusvault.core.lifecycle.timeline_generator import TimelineGenerator


class RefreshStatusUseCase:

    def __init__(
        self,
        repository: IDocumentRepository,
        lifecycle: LifecycleEngine,
        status_engine: StatusEngine,
        timeline: TimelineGenerator,
    ):
        self._repository = repository
        self._lifecycle = lifecycle
        self._status = status_engine
        self._timeline = timeline

    def refresh(self, now: datetime | None = None) -> list[Document]:
        """Recompute and persist the state of every document."""
        documents = self._repository.list_all()
        self._lifecycle.refresh(documents, now or utc_now())
        self._repository.update_many(documents)
        return documents

    def document(self, document_id: str, now: datetime | None = None) -> Document:
        for document in self.refresh(now):
            if document.id == document_id:
                return document
        raise DocumentNotFoundError(document_id)

    def snapshot(self, now: datetime | None = None) -> StatusSnapshot:
        now = now or utc_now()
        return self._status.compute_snapshot(self.refresh(now), now)

    def expiring(self, days: int, now: datetime | None = None) -> list[Document]:
        now = now or utc_now()
        return self._lifecycle.expiring_within(self.refresh(now), days, now)

    def timeline(self, document_id: str, now: datetime | None = None) -> list[TimelineEvent]:
        return self._timeline.events(self.document(document_id, now))

    def full_timeline(self, now: datetime | None = None) -> list[TimelineEvent]:
        return self._timeline.events_for(self.refresh(now))
