"""
samvidhan/routes/tts.py
Text-to-speech: returns WAV audio for a short passage
"""
import logging

from fastapi import APIRouter, Depends, Request, Response

from samvidhan.config.settings import settings
from samvidhan.errors import BadRequestError, ErrorCode, ProviderError, validate_not_empty
from samvidhan.rate_limit import limiter
from samvidhan.schemas.tts import (
    DEFAULT_SPEED,
    MAX_SPEED,
    MAX_TEXT_LENGTH,
    MIN_SPEED,
    SpeechRequest,
)
from samvidhan.services.tts_client import SpeechClient, SpeechSynthesisError, get_speech_client

router = APIRouter(prefix="/api/tts", tags=["Text to Speech"])
logger = logging.getLogger(__name__)


def validate_speech_request(payload: SpeechRequest):
    """Return (text, voice, speed) or raise 400."""
    text = validate_not_empty(payload.text, "Text is required")

    if len(payload.text) > MAX_TEXT_LENGTH:
        raise BadRequestError(
            f"Text input exceeds maximum length of {MAX_TEXT_LENGTH} characters",
            code=ErrorCode.INVALID_INPUT,
        )

    speed = DEFAULT_SPEED if payload.speed is None else payload.speed
    if speed < MIN_SPEED or speed > MAX_SPEED:
        raise BadRequestError(
            f"Speed must be between {MIN_SPEED} and {MAX_SPEED}",
            code=ErrorCode.INVALID_INPUT,
        )

    voice = payload.voice or settings.TTS_DEFAULT_VOICE
    return text, voice, speed


@router.post("")
@limiter.limit(settings.TTS_RATE_LIMIT)
async def synthesize_speech(
    request: Request,
    payload: SpeechRequest,
    client: SpeechClient = Depends(get_speech_client),
):
    text, voice, speed = validate_speech_request(payload)

    try:
        audio = await client.synthesize(text, voice, speed)
    except SpeechSynthesisError as e:
        logger.error(f"Speech synthesis failed: {e}")
        raise ProviderError(str(e) or "Failed to generate speech", code=ErrorCode.TTS_SERVICE_ERROR)

    return Response(
        content=audio,
        media_type="audio/wav",
        headers={
            "Content-Length": str(len(audio)),
            "Cache-Control": "no-cache",
        },
    )
