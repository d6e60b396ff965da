# =============================================================================
# tests/test_app.py - Application Wiring Tests
# =============================================================================
# This module contains tests for:
# - Health and root endpoints
# - Demo seeding at startup
# - CORS and content type middleware
# - Request logging
# - Process termination on a poisoned store
# =============================================================================

import logging

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


# =============================================================================
# Health and Root
# =============================================================================

class TestHealth:
    """Tests for the health endpoints."""

    def test_health_reports_post_count(self, client, store, sample_post):
        store.add(sample_post)

        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["environment"] == "development"
        assert data["post_count"] == 1

    def test_liveness(self, client):
        response = client.get("/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["feed"] == "/feed"

    def test_api_docs_describe_the_feed(self, client):
        response = client.get("/openapi.json")

        assert response.status_code == 200
        schema = response.json()
        assert schema["info"]["title"] == "Hermes API"
        assert {"/feed", "/post", "/post/{id}"} <= set(schema["paths"])


# =============================================================================
# Startup
# =============================================================================

class TestCreateApp:
    """Tests for the application factory."""

    def test_seeds_demo_posts_when_enabled(self):
        app = create_app(Settings(SEED_DEMO_POSTS=True, DEMO_AUTHOR_HANDLE="hermes"))

        with TestClient(app) as client:
            feed = client.get("/feed").json()

        assert [post["summary"] for post in feed] == ["First post", "Hermes is now online"]
        assert {post["author_handle"] for post in feed} == {"hermes"}

    def test_no_seed_when_disabled(self, test_settings):
        app = create_app(test_settings)

        with TestClient(app) as client:
            assert client.get("/feed").json() == []

    def test_apps_do_not_share_stores(self, test_settings, sample_payload):
        first = TestClient(create_app(test_settings))
        second = TestClient(create_app(test_settings))

        first.post("/post", content=sample_payload)

        assert len(first.get("/feed").json()) == 1
        assert second.get("/feed").json() == []


# =============================================================================
# Middleware
# =============================================================================

class TestMiddleware:
    """Tests for CORS, content type and request logging."""

    def test_cors_preflight_allowed_in_development(self, client):
        response = client.options(
            "/post",
            headers={
                "Origin": "https://anonfeed.example",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_cors_restricted_in_production(self, store):
        settings = Settings(
            ENVIRONMENT="production",
            SEED_DEMO_POSTS=False,
            CORS_ORIGINS="https://anonfeed.example",
        )
        client = TestClient(create_app(settings, store))

        allowed = client.get("/feed", headers={"Origin": "https://anonfeed.example"})
        other = client.get("/feed", headers={"Origin": "https://elsewhere.example"})

        assert allowed.headers["access-control-allow-origin"] == "https://anonfeed.example"
        assert "access-control-allow-origin" not in other.headers

    @pytest.mark.parametrize("path", ["/feed", "/post/not-a-uuid", "/health"])
    def test_json_content_type_everywhere(self, client, path):
        response = client.get(path)

        assert response.headers["content-type"] == "application/json"

    def test_requests_are_logged(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="app.middleware"):
            client.get("/feed")

        assert "GET /feed 200" in caplog.text


# =============================================================================
# Poisoned Store
# =============================================================================

class TestPoisonedStore:
    """A poisoned store stops the process instead of answering."""

    def test_terminates_process(self, client, store, monkeypatch):
        calls = []
        monkeypatch.setattr("app.main.terminate_process", calls.append)

        with pytest.raises(RuntimeError):
            with store._locked():
                raise RuntimeError("crash")

        client.get("/feed")

        assert len(calls) == 1
        assert calls[0].code == "STORE_POISONED"
