"""Tests for the HTTP surface: generate endpoint, export, health and the UI page"""
import pytest
from fastapi.testclient import TestClient

from bizbuilder.api.deps import get_http_client
from bizbuilder.core.config import settings
from bizbuilder.main import app

from conftest import FakeGateway

PROMPT = "Create a website for my bakery called Sweet Oven"


@pytest.fixture
def fake():
    return FakeGateway()


@pytest.fixture
def client(fake, monkeypatch):
    monkeypatch.setattr(settings, "ai_gateway_api_key", "test-key")
    monkeypatch.setattr(settings, "ai_gateway_url", "https://gateway.test/v1")
    monkeypatch.setattr(settings, "image_concurrency", 1)
    app.dependency_overrides[get_http_client] = lambda: fake.http_client()
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


class TestGenerateWebsite:

    def test_success(self, client, fake):
        response = client.post(
            "/api/generate-website",
            json={"prompt": PROMPT},
            headers={"Origin": "https://example.test"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["business_name"] == "Sweet Oven"
        assert data["images"]["hero"] == "https://img.test/hero.png"
        assert len(data["images"]["gallery"]) == 3
        assert "<title>Sweet Oven</title>" in data["html"]
        assert data["js"] == "// Add custom JavaScript here if needed"
        assert response.headers["access-control-allow-origin"] == "*"
        assert len(fake.requests) == 5

    def test_missing_api_key(self, client, fake, monkeypatch):
        monkeypatch.setattr(settings, "ai_gateway_api_key", "")

        response = client.post("/api/generate-website", json={"prompt": PROMPT})

        assert response.status_code == 500
        assert response.json() == {"error": "AI_GATEWAY_API_KEY not configured"}
        assert fake.requests == []

    def test_upstream_failure(self, client):
        app.dependency_overrides[get_http_client] = lambda: FakeGateway(content_status=503).http_client()

        response = client.post("/api/generate-website", json={"prompt": PROMPT})

        assert response.status_code == 500
        assert "error" in response.json()

    def test_blank_prompt(self, client, fake):
        response = client.post("/api/generate-website", json={"prompt": "   "})

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid request")
        assert fake.requests == []

    def test_missing_body(self, client):
        response = client.post("/api/generate-website", json={})

        assert response.status_code == 400

    def test_preflight(self, client):
        response = client.options(
            "/api/generate-website",
            headers={
                "Origin": "https://example.test",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type, apikey",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        allowed = response.headers["access-control-allow-headers"].lower()
        for header in ("authorization", "x-client-info", "apikey", "content-type"):
            assert header in allowed


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestExport:
    SITE = {"html": "<h1>Hi</h1>", "css": "h1 { color: red; }"}

    def test_download(self, client):
        response = client.post("/api/export", json=self.SITE)

        assert response.status_code == 200
        assert 'filename="website-files.txt"' in response.headers["content-disposition"]
        assert response.text == (
            "\n\n/* ===== index.html ===== */\n\n<h1>Hi</h1>"
            "\n\n/* ===== styles.css ===== */\n\nh1 { color: red; }"
            "\n\n/* ===== script.js ===== */\n\n// Add your custom JavaScript here"
        )

    def test_clipboard(self, client):
        response = client.post("/api/export?format=clipboard", json=dict(self.SITE, js="// js"))

        assert response.status_code == 200
        assert "content-disposition" not in response.headers
        assert response.text.startswith("\n<!-- index.html -->\n<h1>Hi</h1>\n")
        assert response.text.endswith("\n// script.js\n// js\n")

    def test_accepts_generated_website_payload(self, client):
        generated = client.post("/api/generate-website", json={"prompt": PROMPT}).json()

        response = client.post("/api/export", json=generated)

        assert response.status_code == 200
        assert "/* ===== script.js ===== */\n\n// Add custom JavaScript here if needed" in response.text


class TestPage:

    def test_empty_state(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "No Website Yet" in response.text
        assert "Create a website for my bakery called Sweet Oven" in response.text

    def test_blank_prompt_makes_no_request(self, client, fake):
        response = client.post("/", data={"prompt": "  "})

        assert response.status_code == 400
        assert "Please enter a business description" in response.text
        assert fake.requests == []

    def test_generate(self, client, fake):
        response = client.post("/", data={"prompt": PROMPT})

        assert response.status_code == 200
        assert "Website generated successfully!" in response.text
        assert 'id="tab-preview"' in response.text
        assert "srcdoc=" in response.text
        assert len(fake.content_requests) == 1

    def test_generation_error_is_shown(self, client):
        app.dependency_overrides[get_http_client] = lambda: FakeGateway(content_status=500).http_client()

        response = client.post("/", data={"prompt": PROMPT})

        assert response.status_code == 500
        assert "message error" in response.text
        assert "No Website Yet" in response.text
