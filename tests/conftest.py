"""Shared fixtures: pinned clock, document factory, in-memory vault."""

from datetime import datetime, timedelta

import pytest

from statusvault.core.entities.document import Document, DocumentKind, DocumentState
from statusvault.core.entities.field_record import FieldRecord
from statusvault.core.interfaces.document_repository import IDocumentRepository
from statusvault.infrastructure.db import database
from statusvault.infrastructure.db.repository import SqlDocumentRepository

NOW = datetime(2026, 1, 15, 12, 0, 0)


# ── Sample recognized text, one per kind ──

I20_TEXT = """Certificate of Eligibility for Nonimmigrant Student Status
SEVIS ID: N0012345678
Name: Jane Doe
School: State University
Issue Date: 08/01/2024
Program End Date: 05/15/2026"""

EAD_TEXT = """EMPLOYMENT AUTHORIZATION CARD
Card# SRC-21-123-4567
Category: C09
Name
JANE DOE
Valid From: 01/15/2025
Card Expires: 01/14/2027"""

PASSPORT_TEXT = """PASSPORT
Passport No: X12345678
Surname: DOE
Date of birth: 03/15/1990
Date of issue: 02/01/2020
Date of expiry: 01/31/2030"""

VISA_TEXT = """UNITED STATES OF AMERICA
VISA
Visa Type: F-1
Issue Date: 06/01/2024
Expiration Date: 05/31/2029"""

I94_TEXT = """I-94 Arrival/Departure Record
Admission (I-94) Record Number: 12345678901
Class of Admission: F1
Admit Until Date: 12/31/2026"""

I797_TEXT = """I-797 Notice of Action
Receipt Number: EAC2190012345
Notice Date: 03/01/2025
Beneficiary: DOE, JANE
Valid From: 04/01/2025 to 03/31/2028"""


def make_document(
    kind: DocumentKind = DocumentKind.OTHER,
    expires_in: int | None = None,
    created_at: datetime = NOW,
    now: datetime = NOW,
    state: DocumentState = DocumentState.ACTIVE,
    **field_values,
) -> Document:
    """Document expiring `expires_in` days after `now` (None: no expiry)."""
    expiry = now + timedelta(days=expires_in) if expires_in is not None else None
    return Document(
        kind=kind,
        state=state,
        expiry_date=expiry,
        fields=FieldRecord(**field_values),
        created_at=created_at,
        updated_at=created_at,
    )


class InMemoryRepository(IDocumentRepository):
    """Dict-backed repository for use case tests."""

    def __init__(self):
        self.documents: dict[str, Document] = {}
        self.updates = 0

    def add(self, document):
        self.documents[document.id] = document
        return document

    def update(self, document):
        self.updates += 1
        self.documents[document.id] = document
        return document

    def get(self, document_id):
        return self.documents.get(document_id)

    def list_all(self):
        return sorted(self.documents.values(), key=lambda d: (d.created_at, d.id))

    def delete(self, document_id):
        return self.documents.pop(document_id, None) is not None


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def memory_repo():
    return InMemoryRepository()


@pytest.fixture
def sql_repo():
    """SqlDocumentRepository over a fresh in-memory SQLite database."""
    engine = database.configure("sqlite://")
    database.init_db()
    yield SqlDocumentRepository()
    engine.dispose()
