"""
Gemini Status Assistant: google-genai implementation of IStatusAssistant.

Sends the system prompt plus vault context as the system instruction,
the most recent chat turns, and the new user message. Failures never
raise: they come back in AssistantReply.error.
"""

import logging
import time

from statusvault.core.assistant.context_builder import SYSTEM_PROMPT
from statusvault.core.interfaces.assistant import (
    AssistantReply,
    ChatMessage,
    ChatRole,
    IStatusAssistant,
)

logger = logging.getLogger(__name__)

NO_API_KEY = "API key not configured. Set GEMINI_API_KEY in .env"

# Gemini calls the assistant side of a conversation "model"
_ROLES = {ChatRole.USER: "user", ChatRole.ASSISTANT: "model"}


class GeminiStatusAssistant(IStatusAssistant):
    """Gemini-powered assistant grounded in the user's documents."""

    def __init__(
        self,
        api_key: str,
        model_name: str = "gemini-2.0-flash",
        temperature: float = 0.7,
        max_tokens: int = 1000,
        history_limit: int = 10,
        client=None,
    ):
        self.api_key = api_key
        self.model_name = model_name
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.history_limit = history_limit
        self._client = client

    def _get_client(self):
        if self._client is None:
            from google import genai
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def build_contents(self, message: str, history: list[ChatMessage]) -> list[dict]:
        """Last `history_limit` turns followed by the new message."""
        recent = history[-self.history_limit:] if self.history_limit > 0 else []
        contents = [
            {"role": _ROLES[ChatRole(m.role)], "parts": [{"text": m.content}]}
            for m in recent
        ]
        contents.append({"role": "user", "parts": [{"text": message}]})
        return contents

    def reply(self, message: str, history: list[ChatMessage], context: str) -> AssistantReply:
        if not self.api_key and self._client is None:
            return AssistantReply(error=NO_API_KEY, model=self.model_name)

        t0 = time.perf_counter()
        try:
            response = self._get_client().models.generate_content(
                model=self.model_name,
                contents=self.build_contents(message, history),
                config={
                    "system_instruction": f"{SYSTEM_PROMPT}\n\nCurrent User Context:\n{context}",
                    "temperature": self.temperature,
                    "max_output_tokens": self.max_tokens,
                },
            )
            text = (response.text or "").strip()
            latency = (time.perf_counter() - t0) * 1000
            if not text:
                return AssistantReply(
                    error="Received invalid response from AI service.",
                    latency_ms=round(latency, 1),
                    model=self.model_name,
                )
            return AssistantReply(reply=text, latency_ms=round(latency, 1), model=self.model_name)

        except Exception as e:
            latency = (time.perf_counter() - t0) * 1000
            logger.warning(f"Assistant call failed: {e}")
            return AssistantReply(
                error=f"LLM error: {e}",
                latency_ms=round(latency, 1),
                model=self.model_name,
            )
