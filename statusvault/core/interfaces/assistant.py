"""
Contract: Status Assistant

Answers free-form questions about the user's immigration situation,
grounded in a context block built from the vault.
"""

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from enum import Enum


class ChatRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass
class ChatMessage:
    role: ChatRole
    content: str


@dataclass
class AssistantReply:
    """Outcome of one assistant call. Failures are reported, not raised."""
    reply: str = ""
    model: str = ""
    latency_ms: float = 0.0
    error: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


class IStatusAssistant(ABC):
    """
    Port: Status Assistant

    Any chat model can sit behind this contract. Network failures,
    missing credentials and malformed responses end up in
    AssistantReply.error.
    """

    @abstractmethod
    def reply(
        self,
        message: str,
        history: list[ChatMessage],
        context: str,
    ) -> AssistantReply:
        """
        Answer a user message.

        Args:
            message: The new user message.
            history: Earlier turns, oldest first.
            context: Document/status context from the vault.

        Returns:
            AssistantReply with the answer or an error.
        """
        ...
