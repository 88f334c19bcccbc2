"""
Use Case: Ingest Document.

Orchestrates: recognized text -> classify -> extract -> Document ->
store -> lifecycle refresh over the whole vault.
Measures the latency of each stage.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import date, datetime

from statusvault.core.entities.document import Document, DocumentKind, utc_now
from statusvault.core.entities.field_record import FieldRecord
from statusvault.core.exceptions import TextSourceUnavailableError
from statusvault.core.interfaces.document_parser import (
    IDocumentClassifier,
    IFieldExtractor,
    RawText,
)
from statusvault.core.interfaces.document_repository import IDocumentRepository
from statusvault.core.interfaces.text_source import ITextSource
from statusvault.core.lifecycle.lifecycle_engine import LifecycleEngine

logger = logging.getLogger(__name__)


@dataclass
class ParsedDocument:
    """Classification and extraction output, before anything is stored."""
    kind: DocumentKind
    fields: FieldRecord
    stage_latencies: dict = field(default_factory=dict)


def _at_midnight(value: date | None) -> datetime | None:
    return datetime.combine(value, datetime.min.time()) if value else None


def resolve_dates(fields: FieldRecord) -> tuple[datetime | None, datetime | None]:
    """(effective, expiry) of a document from its extracted fields."""
    effective = fields.valid_from or fields.issued_date
    expiry = fields.expiration_date or fields.valid_until
    return _at_midnight(effective), _at_midnight(expiry)


class IngestDocumentUseCase:
    """
    Use Case: recognized text in, stored Document out.

    Dependency injection: every collaborator comes through the
    constructor. The text source is optional; without it only text
    ingestion is available.
    """

    def __init__(
        self,
        classifier: IDocumentClassifier,
        extractor: IFieldExtractor,
        repository: IDocumentRepository,
        lifecycle: LifecycleEngine,
        text_source: ITextSource | None = None,
    ):
        self._classifier = classifier
        self._extractor = extractor
        self._repository = repository
        self._lifecycle = lifecycle
        self._text_source = text_source

    def parse(self, text: RawText) -> ParsedDocument:
        """Classify and extract without storing anything."""
        latencies: dict[str, float] = {}

        t0 = time.perf_counter()
        kind = self._classifier.classify(text)
        latencies["classify_ms"] = round((time.perf_counter() - t0) * 1000, 2)

        t0 = time.perf_counter()
        fields = self._extractor.extract(text, kind)
        latencies["extract_ms"] = round((time.perf_counter() - t0) * 1000, 2)

        return ParsedDocument(kind=kind, fields=fields, stage_latencies=latencies)

    def execute(
        self,
        text: RawText,
        image_ref: str | None = None,
        now: datetime | None = None,
    ) -> Document:
        """
        Run the full ingestion.

        1. Classify + extract
        2. Resolve effective/expiry dates from the fields
        3. Store the document
        4. Refresh lifecycle states of the whole vault and persist them
        """
        now = now or utc_now()
        parsed = self.parse(text)
        effective, expiry = resolve_dates(parsed.fields)

        document = Document(
            kind=parsed.kind,
            effective_date=effective,
            expiry_date=expiry,
            fields=parsed.fields,
            created_at=now,
            updated_at=now,
            image_ref=image_ref,
        )
        self._repository.add(document)
        logger.info(
            f"Ingested {document.kind.value} document {document.id} "
            f"({len(parsed.fields.present())} fields, {parsed.stage_latencies})"
        )

        documents = self._repository.list_all()
        self._lifecycle.refresh(documents, now)
        self._repository.update_many(documents)

        for stored in documents:
            if stored.id == document.id:
                return stored
        return document

    def execute_image(
        self,
        image_bytes: bytes,
        image_ref: str | None = None,
        now: datetime | None = None,
    ) -> Document:
        """
        Recognize the text of an image first, then ingest it.

        Needs the OCR adapter passed as `text_source`; without one this
        raises TextSourceUnavailableError.
        """
        if self._text_source is None:
            raise TextSourceUnavailableError("No text source configured for image ingestion")
        recognized = self._text_source.read_text(image_bytes)
        return self.execute(recognized.lines, image_ref=image_ref, now=now)
