"""
Document Repository: SQLAlchemy implementation of IDocumentRepository.

Handles:
  - Storing ingested documents with their field records
  - Persisting lifecycle refreshes and supersede stamps
  - Listing the full vault for status computation
"""

import logging

from statusvault.core.entities.document import Document
from statusvault.core.interfaces.document_repository import IDocumentRepository
from statusvault.infrastructure.db.database import get_db
from statusvault.infrastructure.db.models import DocumentRecord

logger = logging.getLogger(__name__)


class SqlDocumentRepository(IDocumentRepository):
    """Repository for vault documents."""

    def __init__(self, session_factory=None):
        # None -> the global session factory, resolved per call
        self._factory = session_factory

    def add(self, document: Document) -> Document:
        with get_db(self._factory) as db:
            db.add(DocumentRecord.from_document(document))
            logger.info(f"Saved document {document.id} [{document.kind.value}]")
        return document

    def update(self, document: Document) -> Document:
        with get_db(self._factory) as db:
            record = db.get(DocumentRecord, document.id)
            if record is None:
                db.add(DocumentRecord.from_document(document))
                logger.debug(f"Document {document.id} not stored yet, inserting")
            else:
                record.apply(document)
        return document

    def update_many(self, documents: list[Document]) -> None:
        if not documents:
            return
        with get_db(self._factory) as db:
            for document in documents:
                record = db.get(DocumentRecord, document.id)
                if record is None:
                    db.add(DocumentRecord.from_document(document))
                else:
                    record.apply(document)

    def get(self, document_id: str) -> Document | None:
        with get_db(self._factory) as db:
            record = db.get(DocumentRecord, document_id)
            return record.to_document() if record else None

    def list_all(self) -> list[Document]:
        with get_db(self._factory) as db:
            records = (
                db.query(DocumentRecord)
                .order_by(DocumentRecord.created_at, DocumentRecord.id)
                .all()
            )
            return [r.to_document() for r in records]

    def delete(self, document_id: str) -> bool:
        with get_db(self._factory) as db:
            record = db.get(DocumentRecord, document_id)
            if record is None:
                return False
            db.delete(record)
            logger.info(f"Deleted document {document_id}")
            return True

    def count(self) -> int:
        with get_db(self._factory) as db:
            return db.query(DocumentRecord).count()
