"""
Use Case: Ask Assistant.

Builds the vault context from freshly refreshed documents and hands the
question to the configured assistant.
"""

from datetime import datetime

from statusvault.core.assistant.context_builder import ContextBuilder
from statusvault.core.entities.document import utc_now
from statusvault.core.interfaces.assistant import AssistantReply, ChatMessage, IStatusAssistant
from statusvault.core.interfaces.document_repository import IDocumentRepository
from statusvault.core.lifecycle.lifecycle_engine import LifecycleEngine


class AskAssistantUseCase:

    def __init__(
        self,
        repository: IDocumentRepository,
        lifecycle: LifecycleEngine,
        context_builder: ContextBuilder,
        assistant: IStatusAssistant,
    ):
        self._repository = repository
        self._lifecycle = lifecycle
        self._context = context_builder
        self._assistant = assistant

    def build_context(self, now: datetime | None = None) -> str:
        now = now or utc_now()
        documents = self._lifecycle.refresh(self._repository.list_all(), now)
        return self._context.build_context(documents, now)

    def execute(
        self,
        message: str,
        history: list[ChatMessage] | None = None,
        now: datetime | None = None,
    ) -> AssistantReply:
        context = self.build_context(now)
        return self._assistant.reply(message, history or [], context)
