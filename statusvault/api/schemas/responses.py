"""
Pydantic schemas: Response models for the API.
"""

from datetime import date, datetime

from pydantic import BaseModel

from statusvault.core.entities.document import Document
from statusvault.core.entities.field_record import FieldRecord
from statusvault.core.entities.status_snapshot import StatusSnapshot
from statusvault.core.entities.timeline_event import TimelineEvent


class FieldRecordResponse(BaseModel):
    full_name: str | None = None
    document_number: str | None = None
    issued_date: date | None = None
    expiration_date: date | None = None
    country_of_issuance: str | None = None
    sevis_id: str | None = None
    school_name: str | None = None
    degree_level: str | None = None
    major_field: str | None = None
    program_end_date: date | None = None
    ead_category: str | None = None
    valid_from: date | None = None
    valid_until: date | None = None
    passport_number: str | None = None
    nationality: str | None = None
    date_of_birth: date | None = None
    place_of_birth: str | None = None
    visa_type: str | None = None
    visa_number: str | None = None
    entries_allowed: str | None = None
    admission_number: str | None = None
    class_of_admission: str | None = None
    admit_until_date: date | None = None
    receipt_number: str | None = None
    case_type: str | None = None
    petitioner_name: str | None = None
    beneficiary_name: str | None = None
    raw_text: str | None = None

    @classmethod
    def from_record(cls, record: FieldRecord) -> "FieldRecordResponse":
        return cls(**record.to_dict())


class DocumentResponse(BaseModel):
    id: str
    kind: str
    state: str
    icon: str
    color: str
    effective_date: datetime | None = None
    expiry_date: datetime | None = None
    superseded_date: datetime | None = None
    image_ref: str | None = None
    created_at: datetime
    updated_at: datetime
    fields: FieldRecordResponse | None = None

    @classmethod
    def from_document(cls, document: Document) -> "DocumentResponse":
        return cls(
            id=document.id,
            kind=document.kind.value,
            state=document.state.value,
            icon=document.kind.icon,
            color=document.state.color,
            effective_date=document.effective_date,
            expiry_date=document.expiry_date,
            superseded_date=document.superseded_date,
            image_ref=document.image_ref,
            created_at=document.created_at,
            updated_at=document.updated_at,
            fields=FieldRecordResponse.from_record(document.fields) if document.fields else None,
        )


class ClassificationResponse(BaseModel):
    kind: str
    fields: FieldRecordResponse
    fields_found: list[str]
    stage_latencies: dict = {}


class StatusResponse(BaseModel):
    current_status: str
    can_work: bool
    work_expiry_date: datetime | None = None
    can_study: bool
    study_expiry_date: datetime | None = None
    must_maintain_status: bool
    warnings: list[str]
    active_documents: list[str]
    timestamp: datetime

    @classmethod
    def from_snapshot(cls, snapshot: StatusSnapshot) -> "StatusResponse":
        return cls(
            current_status=snapshot.current_status,
            can_work=snapshot.can_work,
            work_expiry_date=snapshot.work_expiry_date,
            can_study=snapshot.can_study,
            study_expiry_date=snapshot.study_expiry_date,
            must_maintain_status=snapshot.must_maintain_status,
            warnings=list(snapshot.warnings),
            active_documents=list(snapshot.active_documents),
            timestamp=snapshot.timestamp,
        )


class TimelineEventResponse(BaseModel):
    id: str
    event_date: datetime
    event_type: str
    icon: str
    description: str
    document_id: str | None = None

    @classmethod
    def from_event(cls, event: TimelineEvent) -> "TimelineEventResponse":
        return cls(
            id=event.id,
            event_date=event.event_date,
            event_type=event.event_type.value,
            icon=event.event_type.icon,
            description=event.description,
            document_id=event.document_id,
        )


class ChatResponse(BaseModel):
    reply: str
    model: str = ""
    latency_ms: float = 0
    error: str | None = None
