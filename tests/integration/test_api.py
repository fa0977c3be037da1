"""
Integration tests for the HTTP surface, with a scripted LLM behind it.

Run: pytest tests/integration/test_api.py -v
"""
import pytest

from agent.errors import ServiceCallError
from config import settings
from tests.fakes import FakeLLM, payload_reply


class TestGenerateSuccess:

    def test_single_platform_default_tone(self, client, fake_llm):
        resp = client.post("/generate", json={
            "content": "Hello world",
            "platforms": ["professional-network"],
        })

        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert "error" not in body
        result = body["data"]["professional-network"]
        assert isinstance(result["content"], str) and result["content"]
        assert result["characterCount"] == len(result["content"])
        assert "with a professional tone" in fake_llm.calls[0]["user"]

    def test_key_set_matches_request(self, make_client):
        llm = FakeLLM(replies={
            "instagram": payload_reply("Golden hour 🌅", hashtags=["#sunset"] * 12),
        })
        client = make_client(llm)
        requested = ["linkedin", "twitter", "instagram", "newsletter"]

        resp = client.post("/generate", json={
            "content": "We shipped our new release today.",
            "platforms": requested,
            "tone": "casual",
        })

        assert resp.status_code == 200
        data = resp.json()["data"]
        assert set(data) == set(requested)
        for platform_id, result in data.items():
            assert result["platform"] == platform_id
            assert result["characterCount"] == len(result["content"])
            assert set(result) == {"platform", "content", "hashtags", "characterCount", "suggestions"}
        assert len(data["instagram"]["hashtags"]) == 12
        assert llm.platforms_called == requested


class TestGenerateValidation:

    def test_empty_content(self, client, fake_llm):
        resp = client.post("/generate", json={"content": "", "platforms": ["linkedin"]})
        assert resp.status_code == 400
        body = resp.json()
        assert body["success"] is False
        assert "empty" in body["error"].lower()
        assert fake_llm.calls == []

    def test_missing_content(self, client):
        resp = client.post("/generate", json={"platforms": ["linkedin"]})
        assert resp.status_code == 400
        assert "empty" in resp.json()["error"].lower()

    def test_content_too_long(self, client, fake_llm):
        resp = client.post("/generate", json={"content": "a" * 10_001, "platforms": ["twitter"]})
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "error": "Content exceeds 10000 character limit"}
        assert fake_llm.calls == []

    def test_no_platforms(self, client, fake_llm):
        resp = client.post("/generate", json={"content": "Hello world", "platforms": []})
        assert resp.status_code == 400
        assert "at least one platform" in resp.json()["error"].lower()
        assert fake_llm.calls == []

    @pytest.mark.parametrize("body", [
        {"content": "Hello world", "platforms": None},
        {"content": "Hello world"},
    ])
    def test_null_or_missing_platforms(self, client, fake_llm, body):
        resp = client.post("/generate", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "error": "At least one platform must be selected"}
        assert fake_llm.calls == []

    def test_unrecognized_platform(self, client, fake_llm):
        resp = client.post("/generate", json={"content": "Hello world", "platforms": ["linkedin", "friendster"]})
        assert resp.status_code == 400
        assert "friendster" in resp.json()["error"]
        assert fake_llm.calls == []

    def test_invalid_tone(self, client):
        resp = client.post("/generate", json={
            "content": "Hello world",
            "platforms": ["linkedin"],
            "tone": "sarcastic",
        })
        assert resp.status_code == 400
        body = resp.json()
        assert body["success"] is False
        assert "tone" in body["error"]

    def test_malformed_body(self, client):
        resp = client.post(
            "/generate",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json()["success"] is False


class TestGenerateFailures:

    def test_reply_without_payload_names_platform(self, make_client):
        llm = FakeLLM(replies={"twitter": "Here are some thoughts, but no structured data at all."})
        client = make_client(llm)

        resp = client.post("/generate", json={
            "content": "Hello world",
            "platforms": ["linkedin", "twitter", "newsletter"],
        })

        assert resp.status_code == 500
        body = resp.json()
        assert body["success"] is False
        assert "data" not in body
        assert "twitter" in body["error"]
        assert "No valid JSON found" in body["error"]
        assert llm.platforms_called == ["linkedin", "twitter"]

    def test_service_error_names_platform(self, make_client):
        llm = FakeLLM(replies={"instagram": ServiceCallError("Overloaded")})
        resp = make_client(llm).post("/generate", json={"content": "Hi", "platforms": ["instagram"]})

        assert resp.status_code == 500
        assert resp.json() == {
            "success": False,
            "error": "Failed to generate content for instagram: Overloaded",
        }

    def test_unexpected_error_names_platform(self, make_client):
        llm = FakeLLM(replies={"twitter": TypeError("'NoneType' object is not subscriptable")})
        resp = make_client(llm).post("/generate", json={"content": "Hi", "platforms": ["linkedin", "twitter"]})

        assert resp.status_code == 500
        assert resp.json() == {
            "success": False,
            "error": "Failed to generate content for twitter: 'NoneType' object is not subscriptable",
        }
        assert llm.platforms_called == ["linkedin", "twitter"]

    def test_error_outside_platform_loop(self):
        from fastapi.testclient import TestClient
        from web.app import create_app

        def _broken_factory():
            raise RuntimeError("boom")

        resp = TestClient(create_app(llm_factory=_broken_factory)).post(
            "/generate", json={"content": "Hi", "platforms": ["linkedin"]},
        )
        assert resp.status_code == 500
        assert resp.json() == {"success": False, "error": "boom"}

    def test_missing_credential(self, monkeypatch):
        from fastapi.testclient import TestClient
        from web.app import create_app

        monkeypatch.setattr(settings, "llm_provider", "anthropic")
        monkeypatch.setattr(settings, "anthropic_api_key", "")
        client = TestClient(create_app())

        resp = client.post("/generate", json={"content": "Hi", "platforms": ["linkedin"]})
        assert resp.status_code == 500
        assert "ANTHROPIC_API_KEY" in resp.json()["error"]

        # Validation still runs first and needs no credential.
        resp = client.post("/generate", json={"content": " ", "platforms": ["linkedin"]})
        assert resp.status_code == 400


class TestMetadata:

    def test_platforms(self, client):
        resp = client.get("/platforms")
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert [p["id"] for p in body["data"]] == ["linkedin", "twitter", "instagram", "newsletter"]
        linkedin = body["data"][0]
        assert linkedin["alias"] == "professional-network"
        assert linkedin["name"] == "LinkedIn"
        assert linkedin["description"]

    @pytest.mark.parametrize("provider,field,model", [
        ("anthropic", "anthropic_model", "claude-x"),
        ("openai", "openai_model", "gpt-x"),
    ])
    def test_health(self, client, monkeypatch, provider, field, model):
        monkeypatch.setattr(settings, "llm_provider", provider)
        monkeypatch.setattr(settings, field, model)
        resp = client.get("/health")
        assert resp.json() == {"status": "ok", "provider": provider, "model": model}
