"""
Provider stand-ins used through the app's dependency overrides.
"""
from typing import List, Optional

from samvidhan.services.tts_client import SpeechSynthesisError

FAKE_WAV = b"RIFF\x24\x00\x00\x00WAVEfmt " + b"\x00" * 24


class FakeCompletionClient:
    """Returns `answer`, or raises `error` when set."""

    def __init__(self, answer: str = "Article 21 protects life and liberty.", error: Optional[Exception] = None):
        self.answer = answer
        self.error = error
        self.questions: List[str] = []

    def is_configured(self) -> bool:
        return True

    async def complete(self, question: str) -> str:
        self.questions.append(question)
        if self.error is not None:
            raise self.error
        return self.answer


class FakeSpeechClient:
    def __init__(self, audio: bytes = FAKE_WAV, error: Optional[str] = None):
        self.audio = audio
        self.error = error
        self.calls = []

    async def synthesize(self, text: str, voice: str, speed: float) -> bytes:
        self.calls.append({"text": text, "voice": voice, "speed": speed})
        if self.error is not None:
            raise SpeechSynthesisError(self.error)
        return self.audio
