"""
API contract checks: envelopes, status codes and health endpoints.

Every failure leaves the API as {"success": false, "error", "code"}.
"""
import pytest

from samvidhan.errors import ErrorCode


def assert_error_envelope(response, status_code: int):
    assert response.status_code == status_code
    body = response.json()
    assert body["success"] is False
    assert isinstance(body["error"], str) and body["error"]
    assert isinstance(body["code"], str) and body["code"]
    return body


class TestHealthEndpoints:
    async def test_root(self, client):
        response = await client.get("/")
        assert response.status_code == 200
        assert response.json()["message"] == "Samvidhan API"

    async def test_main_health(self, client):
        data = (await client.get("/health")).json()
        assert data["status"] == "healthy"
        assert {"environment", "gemini_configured", "tts_configured", "version"} <= set(data)

    async def test_errors_health(self, client):
        data = (await client.get("/api/errors/health")).json()
        assert "status_codes" in data
        assert ErrorCode.MISSING_FIELD in data["error_codes"]


class TestErrorEnvelope:
    async def test_unknown_route(self, client):
        body = assert_error_envelope(await client.get("/api/does-not-exist"), 404)
        assert body["code"] == ErrorCode.NOT_FOUND

    async def test_wrong_method(self, client):
        body = assert_error_envelope(await client.delete("/api/quiz"), 405)
        assert body["code"] == ErrorCode.INVALID_INPUT

    async def test_malformed_json_is_400(self, client):
        response = await client.post(
            "/api/quiz",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        body = assert_error_envelope(response, 400)
        assert body["code"] == ErrorCode.VALIDATION_ERROR
        assert body["details"]["errors"]

    @pytest.mark.parametrize("method,path,kwargs", [
        ("get", "/api/search", {"params": {"q": " "}}),
        ("get", "/api/amendments", {"params": {"year": "x"}}),
        ("get", "/api/quiz", {"params": {"limit": "500"}}),
        ("post", "/api/quiz", {"json": {}}),
        ("post", "/api/ai-assistant", {"json": {}}),
        ("get", "/api/ai-assistant", {}),
        ("post", "/api/tts", {"json": {}}),
        ("post", "/api/rti", {"json": {}}),
        ("post", "/api/banking", {"json": {}}),
    ])
    async def test_bad_input_is_400(self, client, method, path, kwargs):
        response = await getattr(client, method)(path, **kwargs)
        assert_error_envelope(response, 400)


class TestSuccessEnvelope:
    @pytest.mark.parametrize("path", [
        "/api/constitution",
        "/api/amendments",
        "/api/rights",
        "/api/quiz",
        "/api/search?q=law",
        "/api/rti",
        "/api/legal-emergency",
    ])
    async def test_success_shape(self, client, path):
        response = await client.get(path)
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert "data" in body
