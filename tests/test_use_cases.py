"""Tests for the ingest, refresh, supersede and assistant use cases."""

from datetime import date, datetime, timedelta

import pytest

from conftest import EAD_TEXT, I20_TEXT, NOW, PASSPORT_TEXT, make_document
from statusvault.core.assistant.context_builder import ContextBuilder
from statusvault.core.entities.document import DocumentKind, DocumentState
from statusvault.core.entities.field_record import FieldRecord
from statusvault.core.exceptions import (
    DocumentNotFoundError,
    InvalidSupersedeError,
    TextSourceUnavailableError,
)
from statusvault.core.interfaces.assistant import AssistantReply, ChatMessage, ChatRole, IStatusAssistant
from statusvault.core.interfaces.text_source import ITextSource, RecognizedText
from statusvault.core.lifecycle.lifecycle_engine import LifecycleEngine
from statusvault.core.lifecycle.status_engine import StatusEngine
from statusvault.core.lifecycle.timeline_generator import TimelineGenerator
from statusvault.core.use_cases.ask_assistant import AskAssistantUseCase
from statusvault.core.use_cases.ingest_document import IngestDocumentUseCase, resolve_dates
from statusvault.core.use_cases.refresh_status import RefreshStatusUseCase
from statusvault.core.use_cases.supersede_document import SupersedeDocumentUseCase
from statusvault.infrastructure.rules.field_extractor import ImmigrationFieldExtractor
from statusvault.infrastructure.rules.type_classifier import KeywordTypeClassifier


class FakeTextSource(ITextSource):
    def __init__(self, lines):
        self.lines = lines

    def read_text(self, image_bytes):
        return RecognizedText(lines=self.lines, source="fake")


class RecordingAssistant(IStatusAssistant):
    def __init__(self):
        self.calls = []

    def reply(self, message, history, context):
        self.calls.append((message, history, context))
        return AssistantReply(reply="You can work.", model="fake")


@pytest.fixture
def ingest(memory_repo):
    return IngestDocumentUseCase(
        classifier=KeywordTypeClassifier(),
        extractor=ImmigrationFieldExtractor(),
        repository=memory_repo,
        lifecycle=LifecycleEngine(),
    )


@pytest.fixture
def status(memory_repo):
    return RefreshStatusUseCase(
        repository=memory_repo,
        lifecycle=LifecycleEngine(),
        status_engine=StatusEngine(),
        timeline=TimelineGenerator(),
    )


class TestResolveDates:

    def test_ead_dates(self):
        fields = FieldRecord(valid_from=date(2025, 1, 15), expiration_date=date(2027, 1, 14))
        assert resolve_dates(fields) == (datetime(2025, 1, 15), datetime(2027, 1, 14))

    def test_fallbacks(self):
        fields = FieldRecord(issued_date=date(2024, 8, 1), valid_until=date(2026, 5, 1))
        assert resolve_dates(fields) == (datetime(2024, 8, 1), datetime(2026, 5, 1))

    def test_nothing_found(self):
        assert resolve_dates(FieldRecord()) == (None, None)


class TestIngest:

    def test_parse_only(self, ingest, memory_repo):
        parsed = ingest.parse(EAD_TEXT)
        assert parsed.kind == DocumentKind.EAD
        assert parsed.fields.ead_category == "C09"
        assert set(parsed.stage_latencies) == {"classify_ms", "extract_ms"}
        assert memory_repo.documents == {}

    def test_execute(self, ingest, memory_repo):
        doc = ingest.execute(EAD_TEXT, image_ref="img/1.jpg", now=NOW)

        assert doc.id in memory_repo.documents
        assert doc.kind == DocumentKind.EAD
        assert doc.effective_date == datetime(2025, 1, 15)
        assert doc.expiry_date == datetime(2027, 1, 14)
        assert doc.state == DocumentState.ACTIVE
        assert doc.created_at == NOW
        assert doc.image_ref == "img/1.jpg"
        assert doc.fields.raw_text == EAD_TEXT

    def test_refreshes_whole_vault(self, ingest, memory_repo):
        stale = make_document(DocumentKind.VISA, expires_in=-3)
        memory_repo.add(stale)
        ingest.execute(PASSPORT_TEXT, now=NOW)
        assert memory_repo.get(stale.id).state == DocumentState.EXPIRED

    def test_state_from_expiry(self, ingest):
        i20 = ingest.execute(I20_TEXT, now=datetime(2026, 5, 1))
        # no expiration on an I-20 record; program end date is informational
        assert i20.expiry_date is None
        assert i20.state == DocumentState.ACTIVE

        passport = ingest.execute(PASSPORT_TEXT, now=datetime(2030, 1, 15))
        assert passport.state == DocumentState.EXPIRING_SOON

    def test_execute_image(self, memory_repo):
        use_case = IngestDocumentUseCase(
            classifier=KeywordTypeClassifier(),
            extractor=ImmigrationFieldExtractor(),
            repository=memory_repo,
            lifecycle=LifecycleEngine(),
            text_source=FakeTextSource(PASSPORT_TEXT.splitlines()),
        )
        doc = use_case.execute_image(b"\xff\xd8", now=NOW)
        assert doc.kind == DocumentKind.PASSPORT
        assert doc.fields.passport_number == "X12345678"

    def test_execute_image_without_source(self, ingest):
        with pytest.raises(TextSourceUnavailableError):
            ingest.execute_image(b"\xff\xd8", now=NOW)


class TestRefreshStatus:

    def test_refresh_persists(self, status, memory_repo):
        doc = make_document(expires_in=5)
        memory_repo.add(doc)
        status.refresh(NOW)
        assert memory_repo.get(doc.id).state == DocumentState.EXPIRING_SOON
        assert memory_repo.updates == 1

    def test_document(self, status, memory_repo):
        doc = make_document(expires_in=-1)
        memory_repo.add(doc)
        assert status.document(doc.id, NOW).state == DocumentState.EXPIRED
        with pytest.raises(DocumentNotFoundError):
            status.document("missing", NOW)

    def test_snapshot(self, status, memory_repo):
        memory_repo.add(make_document(DocumentKind.EAD, expires_in=40))
        memory_repo.add(make_document(DocumentKind.I20, expires_in=10))
        snapshot = status.snapshot(NOW)
        assert snapshot.current_status == "F-1 Student"
        assert snapshot.warnings == ("I-20 expiring soon",)
        assert snapshot.timestamp == NOW

    def test_expiring(self, status, memory_repo):
        soon = make_document(expires_in=20)
        memory_repo.add(soon)
        memory_repo.add(make_document(expires_in=90))
        assert status.expiring(30, NOW) == [soon]
        assert len(status.expiring(90, NOW)) == 2

    def test_timelines(self, status, memory_repo):
        doc = make_document(expires_in=60)
        memory_repo.add(doc)
        memory_repo.add(make_document(created_at=NOW - timedelta(days=1)))
        assert len(status.timeline(doc.id, NOW)) == 3
        assert len(status.full_timeline(NOW)) == 4
        with pytest.raises(DocumentNotFoundError):
            status.timeline("missing", NOW)


class TestSupersede:

    @pytest.fixture
    def supersede(self, memory_repo):
        return SupersedeDocumentUseCase(repository=memory_repo, lifecycle=LifecycleEngine())

    def test_supersede(self, supersede, memory_repo):
        old = make_document(DocumentKind.EAD, expires_in=10)
        new = make_document(DocumentKind.EAD, expires_in=400)
        memory_repo.add(old)
        memory_repo.add(new)

        result = supersede.execute(old.id, new.id, NOW)
        assert result.state == DocumentState.SUPERSEDED
        assert memory_repo.get(old.id).superseded_date == NOW
        assert memory_repo.get(new.id).state == DocumentState.ACTIVE

    def test_self_supersede(self, supersede, memory_repo):
        doc = make_document()
        memory_repo.add(doc)
        with pytest.raises(InvalidSupersedeError):
            supersede.execute(doc.id, doc.id, NOW)

    def test_missing_documents(self, supersede, memory_repo):
        doc = make_document()
        memory_repo.add(doc)
        with pytest.raises(DocumentNotFoundError):
            supersede.execute("missing", doc.id, NOW)
        with pytest.raises(DocumentNotFoundError):
            supersede.execute(doc.id, "missing", NOW)


class TestAskAssistant:

    def test_passes_context_and_history(self, memory_repo):
        memory_repo.add(make_document(DocumentKind.EAD, expires_in=40))
        assistant = RecordingAssistant()
        use_case = AskAssistantUseCase(
            repository=memory_repo,
            lifecycle=LifecycleEngine(),
            context_builder=ContextBuilder(),
            assistant=assistant,
        )
        history = [ChatMessage(role=ChatRole.USER, content="hi")]
        reply = use_case.execute("Can I work?", history=history, now=NOW)

        assert reply.reply == "You can work."
        message, sent_history, context = assistant.calls[0]
        assert message == "Can I work?"
        assert sent_history == history
        assert "- Work Authorization: Yes" in context

    def test_empty_vault_context(self, memory_repo):
        assistant = RecordingAssistant()
        use_case = AskAssistantUseCase(memory_repo, LifecycleEngine(), ContextBuilder(), assistant)
        use_case.execute("hello", now=NOW)
        assert assistant.calls[0][1] == []
        assert assistant.calls[0][2] == "The user has no documents uploaded yet."
