"""
Speech synthesis endpoint.
"""
import pytest

from samvidhan.errors import ErrorCode
from samvidhan.main import app
from samvidhan.services.tts_client import get_speech_client

from samvidhan.tests.fakes import FAKE_WAV, FakeSpeechClient


async def test_returns_wav_bytes(client, speech_client):
    response = await client.post("/api/tts", json={"text": "  Article 21 protects life.  "})
    assert response.status_code == 200
    assert response.headers["content-type"] == "audio/wav"
    assert response.headers["content-length"] == str(len(FAKE_WAV))
    assert response.headers["cache-control"] == "no-cache"
    assert response.content == FAKE_WAV

    call = speech_client.calls[0]
    assert call["text"] == "Article 21 protects life."
    assert call["speed"] == 1.0
    assert call["voice"]


async def test_voice_and_speed_forwarded(client, speech_client):
    await client.post("/api/tts", json={"text": "Hello", "voice": "nova", "speed": 1.5})
    assert speech_client.calls[0]["voice"] == "nova"
    assert speech_client.calls[0]["speed"] == 1.5


@pytest.mark.parametrize("speed", [0.5, 2.0])
async def test_speed_bounds_accepted(client, speed):
    response = await client.post("/api/tts", json={"text": "Hello", "speed": speed})
    assert response.status_code == 200


@pytest.mark.parametrize("speed", [0.49, 2.01, 0, -1])
async def test_speed_out_of_range(client, speed):
    response = await client.post("/api/tts", json={"text": "Hello", "speed": speed})
    assert response.status_code == 400
    assert response.json()["error"] == "Speed must be between 0.5 and 2.0"


async def test_speed_not_a_number(client):
    response = await client.post("/api/tts", json={"text": "Hello", "speed": "fast"})
    assert response.status_code == 400
    assert response.json()["success"] is False


@pytest.mark.parametrize("speed", ["NaN", "Infinity", "-Infinity"])
async def test_non_finite_speed_rejected(client, speech_client, speed):
    response = await client.post(
        "/api/tts",
        content=f'{{"text": "Hello", "speed": {speed}}}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["code"] == ErrorCode.VALIDATION_ERROR
    assert speech_client.calls == []


async def test_max_length_accepted(client):
    response = await client.post("/api/tts", json={"text": "a" * 1024})
    assert response.status_code == 200


async def test_over_max_length_rejected(client):
    response = await client.post("/api/tts", json={"text": "a" * 1025})
    assert response.status_code == 400
    assert response.json()["error"] == "Text input exceeds maximum length of 1024 characters"


@pytest.mark.parametrize("body", [{}, {"text": ""}, {"text": "   "}])
async def test_text_required(client, speech_client, body):
    response = await client.post("/api/tts", json=body)
    assert response.status_code == 400
    assert response.json()["error"] == "Text is required"
    assert speech_client.calls == []


async def test_provider_error_is_500(client):
    app.dependency_overrides[get_speech_client] = lambda: FakeSpeechClient(error="Invalid API key")
    response = await client.post("/api/tts", json={"text": "Hello"})
    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Invalid API key"
    assert body["code"] == ErrorCode.TTS_SERVICE_ERROR
