"""
samvidhan/services/tts_client.py
Speech synthesis through an OpenAI-compatible /audio/speech endpoint

Returns raw WAV bytes. Any non-200 reply is surfaced as SpeechSynthesisError
carrying the provider's message; there is no retry.
"""
import asyncio
import json
import logging
from typing import Optional

import aiohttp

from samvidhan.config.settings import settings

logger = logging.getLogger(__name__)

RESPONSE_FORMAT = "wav"


class SpeechSynthesisError(Exception):
    """Raised when the speech provider rejects or fails a request."""


class SpeechClient:
    """
    Client for text-to-speech synthesis.
    """

    def __init__(self, api_key: Optional[str] = None, api_url: Optional[str] = None,
                 model: Optional[str] = None, timeout: Optional[float] = None):
        self.api_key = api_key if api_key is not None else settings.OPENAI_API_KEY
        self.api_url = api_url or settings.TTS_API_URL
        self.model = model or settings.TTS_MODEL
        self.timeout = timeout or settings.PROVIDER_TIMEOUT_SECONDS

        if not self.api_key:
            logger.warning("SpeechClient: No OPENAI_API_KEY, synthesis requests will fail")

    async def synthesize(self, text: str, voice: str, speed: float) -> bytes:
        """Synthesize `text` and return the WAV payload."""
        if not self.api_key:
            raise SpeechSynthesisError("Speech synthesis provider is not configured")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self.model,
            "input": text,
            "voice": voice,
            "speed": speed,
            "response_format": RESPONSE_FORMAT,
        }

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    self.api_url,
                    headers=headers,
                    json=payload,
                    timeout=aiohttp.ClientTimeout(total=self.timeout)
                ) as response:

                    if response.status != 200:
                        error_text = await response.text()
                        logger.error(f"Speech API error {response.status}: {error_text[:200]}")
                        raise SpeechSynthesisError(_provider_message(error_text, response.status))

                    audio = await response.read()
                    logger.info(f"Synthesized {len(audio)} bytes of audio ({len(text)} chars, voice={voice})")
                    return audio

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Speech API request failed: {e}")
            raise SpeechSynthesisError(str(e) or "Failed to generate speech") from e


def _provider_message(body: str, status: int) -> str:
    """Pull error.message out of an OpenAI-style error body."""
    try:
        data = json.loads(body)
        message = data.get("error", {}).get("message")
        if message:
            return message
    except (ValueError, AttributeError):
        pass
    return body.strip() or f"Speech provider returned HTTP {status}"


_client: Optional[SpeechClient] = None


def get_speech_client() -> SpeechClient:
    """FastAPI dependency returning the process-wide speech client."""
    global _client
    if _client is None:
        _client = SpeechClient()
    return _client
