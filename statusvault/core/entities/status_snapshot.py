"""
Entity: Status Snapshot

Point-in-time aggregate of the user's immigration status over the
whole document set. Immutable: a new snapshot is computed on demand.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime

from statusvault.core.entities.document import utc_now


UNKNOWN_STATUS = "Unknown"


@dataclass(frozen=True)
class StatusSnapshot:
    """Current status derived from all documents."""
    current_status: str = UNKNOWN_STATUS
    can_work: bool = False
    work_expiry_date: datetime | None = None
    can_study: bool = False
    study_expiry_date: datetime | None = None
    must_maintain_status: bool = False
    warnings: tuple[str, ...] = ()
    active_documents: tuple[str, ...] = ()   # ids of live documents
    timestamp: datetime = field(default_factory=utc_now)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
