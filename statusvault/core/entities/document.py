"""
Entity: Document

An immigration document held in the user's vault.
Pure model: no framework or database dependency.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from statusvault.core.entities.field_record import FieldRecord


def utc_now() -> datetime:
    """Naive UTC timestamp, the convention for every datetime in the vault."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class DocumentKind(str, Enum):
    I20 = "I-20"
    EAD = "EAD"
    PASSPORT = "Passport"
    VISA = "Visa"
    I94 = "I-94"
    I797 = "I-797"
    OTHER = "Other"

    @property
    def label(self) -> str:
        return self.value

    @property
    def icon(self) -> str:
        return KIND_DISPLAY[self][0]

    @property
    def color(self) -> str:
        return KIND_DISPLAY[self][1]


class DocumentState(str, Enum):
    ACTIVE = "Active"
    EXPIRING_SOON = "Expiring Soon"
    EXPIRED = "Expired"
    SUPERSEDED = "Superseded"

    @property
    def color(self) -> str:
        return STATE_COLORS[self]


# kind -> (icon, color)
KIND_DISPLAY: dict[DocumentKind, tuple[str, str]] = {
    DocumentKind.I20: ("doc.text.fill", "blue"),
    DocumentKind.EAD: ("person.text.rectangle.fill", "green"),
    DocumentKind.PASSPORT: ("book.closed.fill", "red"),
    DocumentKind.VISA: ("airplane", "purple"),
    DocumentKind.I94: ("doc.fill", "orange"),
    DocumentKind.I797: ("envelope.fill", "indigo"),
    DocumentKind.OTHER: ("doc", "gray"),
}

STATE_COLORS: dict[DocumentState, str] = {
    DocumentState.ACTIVE: "green",
    DocumentState.EXPIRING_SOON: "orange",
    DocumentState.EXPIRED: "red",
    DocumentState.SUPERSEDED: "gray",
}

# States that still grant whatever the document authorizes
LIVE_STATES = frozenset({DocumentState.ACTIVE, DocumentState.EXPIRING_SOON})


@dataclass
class Document:
    """Domain entity: Document."""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    kind: DocumentKind = DocumentKind.OTHER
    state: DocumentState = DocumentState.ACTIVE
    effective_date: datetime | None = None
    expiry_date: datetime | None = None
    superseded_date: datetime | None = None
    fields: FieldRecord | None = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
    image_ref: str | None = None         # opaque reference owned by the image store

    @property
    def is_live(self) -> bool:
        return self.state in LIVE_STATES

    @property
    def is_superseded(self) -> bool:
        return self.state == DocumentState.SUPERSEDED
