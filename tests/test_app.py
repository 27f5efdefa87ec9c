"""Tests for web/app.py — Flask routes with an injected orchestrator."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from config.settings import Settings
from shred.analyzer import AnalysisOrchestrator
from shred.errors import InferenceTransportError
from shred.researcher import RequirementsResearcher
from web.app import create_app


def make_settings(**overrides) -> Settings:
    values = {"anthropic_api_key": "a-key", "google_api_key": "g-key", "google_search_engine_id": "cx"}
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def search_client() -> MagicMock:
    client = MagicMock()
    client.search.return_value = []
    return client


@pytest.fixture
def inference() -> MagicMock:
    inference = MagicMock()
    inference.complete.return_value = "## SHRED Eligibility Analysis\n**Overall Eligible:** NO"
    return inference


@pytest.fixture
def client(search_client, inference):
    orchestrator = AnalysisOrchestrator(RequirementsResearcher(search_client), inference)
    app = create_app(make_settings(), orchestrator)
    app.config["TESTING"] = True
    return app.test_client()


class TestAnalyzeRoute:
    def test_success_payload(self, client):
        response = client.post("/api/analyze", json={"task_description": "Deploy an update"})

        assert response.status_code == 200
        data = response.get_json()
        assert data["success"] is True
        assert data["task_description"] == "Deploy an update"
        assert data["company_context"] == ""
        assert "Overall Eligible" in data["claude_analysis"]
        assert data["claude_error"] is None
        assert data["analysis_prompt"] is None
        assert "**Search Query:**" in data["shred_research"]

    def test_missing_task_is_400(self, client, search_client, inference):
        response = client.post("/api/analyze", json={"company_context": "lab"})

        assert response.status_code == 400
        assert response.get_json() == {"error": "Task description is required"}
        assert search_client.search.call_count == 0
        assert inference.complete.call_count == 0

    def test_non_json_body_is_400(self, client):
        response = client.post("/api/analyze", data="task", content_type="text/plain")
        assert response.status_code == 400

    def test_unknown_depth_still_analyzes(self, client, search_client):
        response = client.post(
            "/api/analyze", json={"task_description": "Investigate X", "search_depth": "deep"},
        )

        assert response.status_code == 200
        assert response.get_json()["claude_analysis"] is not None
        assert search_client.search.call_count == 3

    def test_numeric_context_is_accepted(self, client):
        response = client.post(
            "/api/analyze", json={"task_description": "Investigate X", "company_context": 123},
        )

        assert response.status_code == 200
        data = response.get_json()
        assert data["company_context"] == "123"
        assert data["claude_error"] is None

    def test_model_failure_returns_prompt(self, client, inference):
        inference.complete.side_effect = InferenceTransportError("Claude API error: 529")

        response = client.post(
            "/api/analyze", json={"task_description": "Tune a new allocator", "company_context": "db vendor"},
        )

        data = response.get_json()
        assert response.status_code == 200
        assert data["claude_analysis"] is None
        assert data["claude_error"] == "Claude API error: 529"
        assert "**COMPANY CONTEXT:** db vendor" in data["analysis_prompt"]

    def test_depth_is_forwarded(self, client, search_client):
        client.post("/api/analyze", json={"task_description": "t", "search_depth": "detailed"})
        assert search_client.search.call_count == 3


class TestPromptRoute:
    def test_returns_basic_prompt_without_inference(self, client, inference):
        response = client.post("/api/prompt", json={"task_description": "Prototype a sensor"})

        data = response.get_json()
        assert response.status_code == 200
        assert "### Quick Answer" in data["analysis_prompt"]
        assert inference.complete.call_count == 0

    def test_missing_task_is_400(self, client):
        response = client.post("/api/prompt", json={})
        assert response.status_code == 400


class TestHealthRoute:
    def test_reports_configuration(self):
        app = create_app(make_settings(google_search_engine_id=""), MagicMock())

        data = app.test_client().get("/api/health").get_json()

        assert data == {"status": "ok", "google_configured": False, "claude_configured": True}
