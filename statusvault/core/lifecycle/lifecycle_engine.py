"""
Lifecycle Engine.

Derives each document's temporal state from its expiry date and the
current time. States are recomputed wholesale on every run, never
transitioned incrementally, with one exception: SUPERSEDED is terminal
and a superseded document is never touched again.

    expiry < now                   -> EXPIRED
    now <= expiry < now + horizon  -> EXPIRING_SOON
    otherwise / no expiry          -> ACTIVE
"""

import logging
from datetime import datetime, timedelta

from statusvault.core.entities.document import Document, DocumentState, utc_now

logger = logging.getLogger(__name__)

DEFAULT_EXPIRING_SOON_DAYS = 30


class LifecycleEngine:
    """Computes and refreshes document states against an explicit clock."""

    def __init__(self, expiring_soon_days: int = DEFAULT_EXPIRING_SOON_DAYS):
        self.expiring_soon_days = expiring_soon_days

    def state_for(self, document: Document, now: datetime) -> DocumentState:
        """State the document should be in at `now`."""
        if document.is_superseded:
            return DocumentState.SUPERSEDED
        expiry = document.expiry_date
        if expiry is None:
            return DocumentState.ACTIVE
        if expiry < now:
            return DocumentState.EXPIRED
        if expiry < now + timedelta(days=self.expiring_soon_days):
            return DocumentState.EXPIRING_SOON
        return DocumentState.ACTIVE

    def refresh(self, documents: list[Document], now: datetime | None = None) -> list[Document]:
        """
        Recompute the state of every non-superseded document in place.

        `updated_at` is stamped even when the state does not change.
        Returns the same list for chaining.
        """
        now = now or utc_now()
        for document in documents:
            if document.is_superseded:
                continue
            new_state = self.state_for(document, now)
            if new_state != document.state:
                logger.debug(f"Document {document.id}: {document.state.value} -> {new_state.value}")
            document.state = new_state
            document.updated_at = now
        return documents

    def supersede(self, old: Document, new: Document, now: datetime | None = None) -> Document:
        """Mark `old` as replaced by `new`. `new` is left untouched."""
        now = now or utc_now()
        if old.is_superseded:
            return old
        old.state = DocumentState.SUPERSEDED
        old.superseded_date = now
        old.updated_at = now
        logger.info(f"Document {old.id} superseded by {new.id}")
        return old

    @staticmethod
    def expiring_within(
        documents: list[Document], days: int, now: datetime | None = None
    ) -> list[Document]:
        """Documents whose expiry falls in (now, now + days]."""
        now = now or utc_now()
        horizon = now + timedelta(days=days)
        return [
            d for d in documents
            if d.expiry_date is not None and now < d.expiry_date <= horizon
        ]

    @staticmethod
    def active_documents(documents: list[Document]) -> list[Document]:
        """Documents that are ACTIVE or EXPIRING_SOON."""
        return [d for d in documents if d.is_live]
