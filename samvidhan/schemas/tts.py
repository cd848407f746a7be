"""
samvidhan/schemas/tts.py
Request schema for speech synthesis
"""
from typing import Optional
from pydantic import BaseModel, Field

MAX_TEXT_LENGTH = 1024
MIN_SPEED = 0.5
MAX_SPEED = 2.0
DEFAULT_SPEED = 1.0


class SpeechRequest(BaseModel):
    text: Optional[str] = None
    voice: Optional[str] = None
    speed: Optional[float] = Field(None, allow_inf_nan=False)
