"""
samvidhan/services/llm_client.py
Completion client for the Constitution AI Assistant (Google Gemini)

The client is a thin wrapper: it sends one question with the fixed system
instruction and returns the reply text. It does not retry. Callers decide
what a failure means (the assistant falls back to a canned answer).
"""
import logging
from typing import Optional

import google.generativeai as genai

from samvidhan.config.settings import settings

logger = logging.getLogger(__name__)

CONSTITUTION_SYSTEM_PROMPT = """You are an expert Indian Constitution AI Assistant with deep knowledge of constitutional law, fundamental rights, and legal procedures. Your role is to:

1. Provide accurate, source-backed information about the Indian Constitution
2. Explain constitutional provisions in simple, citizen-friendly language
3. Help users understand their rights and duties
4. Guide citizens on legal procedures and emergency situations
5. Always reference specific Articles, Parts, or Schedules when relevant
6. Provide practical examples and real-life applications
7. Never provide legal advice - always suggest consulting a lawyer for specific cases

Guidelines:
- Be clear, concise, and helpful
- Use simple language that anyone can understand
- Reference specific Articles (e.g., "Article 21", "Article 14")
- Provide practical examples and dos/don'ts
- Include relevant case laws or amendments when applicable
- If you don't know something, say so clearly
- Always prioritize citizen rights and protections

Language: Respond in the same language as the user's query (English, Hindi, or other regional languages)."""


class CompletionError(Exception):
    """Raised when the completion provider cannot produce an answer."""


class GeminiCompletionClient:
    """
    Gemini-backed completion client.

    Configuration comes from GEMINI_API_KEY / GEMINI_MODEL. A client without
    a key reports `is_configured() == False` and raises on use.
    """

    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None,
                 timeout: Optional[float] = None):
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self.model_name = model_name or settings.GEMINI_MODEL
        self.timeout = timeout or settings.PROVIDER_TIMEOUT_SECONDS
        self._model = None

        if self.api_key:
            genai.configure(api_key=self.api_key)
            self._model = genai.GenerativeModel(
                self.model_name,
                system_instruction=CONSTITUTION_SYSTEM_PROMPT,
            )
            logger.info(f"Gemini completion client configured ({self.model_name})")
        else:
            logger.warning("GEMINI_API_KEY not set - AI assistant will answer with the fallback message")

    def is_configured(self) -> bool:
        return self._model is not None

    async def complete(self, question: str) -> str:
        """Return the model's answer to `question`."""
        if not self.is_configured():
            raise CompletionError("Completion provider is not configured")

        logger.info(f"Generating answer for question: {question[:100]}...")
        response = await self._model.generate_content_async(
            question,
            request_options={"timeout": self.timeout},
        )

        text = getattr(response, "text", None)
        if not text or not text.strip():
            raise CompletionError("Empty response from AI")
        return text


_client: Optional[GeminiCompletionClient] = None


def get_completion_client() -> GeminiCompletionClient:
    """FastAPI dependency returning the process-wide completion client."""
    global _client
    if _client is None:
        _client = GeminiCompletionClient()
    return _client
