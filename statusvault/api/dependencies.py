"""
Dependency factories: build use cases with concrete adapters.

Wired through FastAPI `Depends`; overriding `get_repository` or
`get_assistant` in `app.dependency_overrides` reaches every use case.
"""

from functools import lru_cache

from fastapi import Depends

from statusvault.config.settings import get_settings
from statusvault.core.assistant.context_builder import ContextBuilder
from statusvault.core.interfaces.assistant import IStatusAssistant
from statusvault.core.interfaces.document_repository import IDocumentRepository
from statusvault.core.lifecycle.lifecycle_engine import LifecycleEngine
from statusvault.core.lifecycle.status_engine import StatusEngine
from statusvault.core.lifecycle.timeline_generator import TimelineGenerator
from statusvault.core.use_cases.ask_assistant import AskAssistantUseCase
from statusvault.core.use_cases.ingest_document import IngestDocumentUseCase
from statusvault.core.use_cases.refresh_status import RefreshStatusUseCase
from statusvault.core.use_cases.supersede_document import SupersedeDocumentUseCase
from statusvault.infrastructure.db.repository import SqlDocumentRepository
from statusvault.infrastructure.llm.gemini_assistant import GeminiStatusAssistant
from statusvault.infrastructure.rules.field_extractor import ImmigrationFieldExtractor
from statusvault.infrastructure.rules.type_classifier import KeywordTypeClassifier


@lru_cache
def get_repository() -> IDocumentRepository:
    return SqlDocumentRepository()


@lru_cache
def get_lifecycle() -> LifecycleEngine:
    return LifecycleEngine(expiring_soon_days=get_settings().expiring_soon_days)


@lru_cache
def get_assistant() -> IStatusAssistant | None:
    """Gemini assistant, or None when disabled in settings."""
    settings = get_settings()
    if not settings.assistant_enabled:
        return None
    return GeminiStatusAssistant(
        api_key=settings.gemini_api_key,
        model_name=settings.gemini_model,
        temperature=settings.assistant_temperature,
        max_tokens=settings.assistant_max_tokens,
        history_limit=settings.chat_history_limit,
    )


def get_ingest_use_case(
    repository: IDocumentRepository = Depends(get_repository),
    lifecycle: LifecycleEngine = Depends(get_lifecycle),
) -> IngestDocumentUseCase:
    return IngestDocumentUseCase(
        classifier=KeywordTypeClassifier(),
        extractor=ImmigrationFieldExtractor(),
        repository=repository,
        lifecycle=lifecycle,
    )


def get_refresh_use_case(
    repository: IDocumentRepository = Depends(get_repository),
    lifecycle: LifecycleEngine = Depends(get_lifecycle),
) -> RefreshStatusUseCase:
    return RefreshStatusUseCase(
        repository=repository,
        lifecycle=lifecycle,
        status_engine=StatusEngine(),
        timeline=TimelineGenerator(),
    )


def get_supersede_use_case(
    repository: IDocumentRepository = Depends(get_repository),
    lifecycle: LifecycleEngine = Depends(get_lifecycle),
) -> SupersedeDocumentUseCase:
    return SupersedeDocumentUseCase(repository=repository, lifecycle=lifecycle)


def get_ask_use_case(
    repository: IDocumentRepository = Depends(get_repository),
    lifecycle: LifecycleEngine = Depends(get_lifecycle),
    assistant: IStatusAssistant | None = Depends(get_assistant),
) -> AskAssistantUseCase | None:
    if assistant is None:
        return None
    return AskAssistantUseCase(
        repository=repository,
        lifecycle=lifecycle,
        context_builder=ContextBuilder(),
        assistant=assistant,
    )
