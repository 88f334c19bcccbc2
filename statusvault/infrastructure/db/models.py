"""
Database Models: SQLAlchemy.

Tables:
  - documents: vault documents with their extracted fields
"""

from sqlalchemy import JSON, Column, DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase

from statusvault.core.entities.document import Document, DocumentKind, DocumentState, utc_now
from statusvault.core.entities.field_record import FieldRecord


class Base(DeclarativeBase):
    pass


class DocumentRecord(Base):
    """Stores one vault document."""
    __tablename__ = "documents"

    id = Column(String(36), primary_key=True)
    kind = Column(String(20), nullable=False, index=True)
    state = Column(String(20), nullable=False, index=True)

    # Lifecycle dates
    effective_date = Column(DateTime, nullable=True)
    expiry_date = Column(DateTime, nullable=True, index=True)
    superseded_date = Column(DateTime, nullable=True)

    # Extraction
    fields = Column(JSON, default=dict)
    raw_text = Column(Text, default="")

    image_ref = Column(String(500), nullable=True)
    created_at = Column(DateTime, default=utc_now, index=True)
    updated_at = Column(DateTime, default=utc_now)

    def __repr__(self):
        return f"<Document {self.id} [{self.kind}/{self.state}] expires={self.expiry_date}>"

    @classmethod
    def from_document(cls, document: Document) -> "DocumentRecord":
        record = cls(id=document.id)
        record.apply(document)
        return record

    def apply(self, document: Document) -> None:
        """Copy the entity's mutable attributes onto this row."""
        self.kind = document.kind.value
        self.state = document.state.value
        self.effective_date = document.effective_date
        self.expiry_date = document.expiry_date
        self.superseded_date = document.superseded_date
        self.image_ref = document.image_ref
        self.created_at = document.created_at
        self.updated_at = document.updated_at
        if document.fields is not None:
            data = document.fields.to_dict()
            self.raw_text = data.pop("raw_text") or ""
            self.fields = data
        else:
            self.fields = None
            self.raw_text = ""

    def to_document(self) -> Document:
        fields = None
        if self.fields is not None:
            fields = FieldRecord.from_dict(self.fields)
            fields.raw_text = self.raw_text
        return Document(
            id=self.id,
            kind=DocumentKind(self.kind),
            state=DocumentState(self.state),
            effective_date=self.effective_date,
            expiry_date=self.expiry_date,
            superseded_date=self.superseded_date,
            fields=fields,
            created_at=self.created_at,
            updated_at=self.updated_at,
            image_ref=self.image_ref,
        )
