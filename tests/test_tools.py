"""Tests for mcp_tools/tools.py — tool handlers without an MCP runtime."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from config.settings import Settings
from mcp_tools.tools import TOOL_REGISTRY, PromptOnlyInference, ShredTools, execute_tool
from shred.catalog import queries_for
from shred.errors import ConfigurationError, SearchTransportError, ValidationError
from shred.models import QueryFocus, SearchResult


def make_tools(search_client=None) -> ShredTools:
    settings = Settings(anthropic_api_key="", google_api_key="g", google_search_engine_id="cx")
    if search_client is None:
        search_client = MagicMock()
        search_client.search.return_value = [
            SearchResult(title="CRA", link="https://canada.ca", snippet="Rules"),
        ]
    return ShredTools(settings, search_client=search_client)


class TestRegistry:
    def test_tool_names(self):
        assert set(TOOL_REGISTRY) == {
            "research_shred_eligibility",
            "search_shred_requirements",
            "analyze_shred_eligibility",
            "google_search",
        }

    def test_unknown_tool_raises(self):
        with pytest.raises(ValueError, match="Unknown tool: nope"):
            execute_tool(make_tools(), "nope", {})

    def test_research_schema_requires_task(self):
        assert TOOL_REGISTRY["research_shred_eligibility"].parameters["required"] == ["task_description"]


class TestResearchShredEligibility:
    def test_report_contains_research_and_prompt(self):
        tools = make_tools()

        text = execute_tool(
            tools, "research_shred_eligibility",
            {"task_description": "Invent a new codec", "company_context": "media startup"},
        )

        assert text.startswith("# SHRED Tax Credit Eligibility Research & Analysis")
        assert "## Company Context:\nmedia startup" in text
        assert "1. CRA" in text
        assert "## SHRED Eligibility Analysis Report" in text
        assert tools.search_client.search.call_count == 2

    def test_context_section_omitted_when_blank(self):
        text = execute_tool(make_tools(), "research_shred_eligibility", {"task_description": "t"})
        assert "## Company Context" not in text

    def test_depth_argument(self):
        tools = make_tools()
        execute_tool(tools, "research_shred_eligibility", {"task_description": "t", "search_depth": "basic"})
        assert tools.search_client.search.call_count == 1

    def test_missing_task_raises(self):
        with pytest.raises(ValidationError):
            execute_tool(make_tools(), "research_shred_eligibility", {})


class TestSearchShredRequirements:
    def test_runs_focus_queries(self):
        tools = make_tools()

        text = execute_tool(tools, "search_shred_requirements", {"search_focus": "recent_changes"})

        assert text.startswith("# SHRED Tax Credit Requirements Research\n\n## Search Results:")
        queried = [c.args[0] for c in tools.search_client.search.call_args_list]
        assert queried == queries_for(QueryFocus.RECENT_CHANGES)

    def test_default_focus_is_general(self):
        tools = make_tools()
        execute_tool(tools, "search_shred_requirements", None)
        queried = [c.args[0] for c in tools.search_client.search.call_args_list]
        assert queried == queries_for()


class TestAnalyzeShredEligibility:
    def test_no_search_calls(self):
        tools = make_tools()

        text = execute_tool(tools, "analyze_shred_eligibility", {"task_description": "Calibrate a lathe"})

        assert '**Task to Analyze:**\n"Calibrate a lathe"' in text
        assert tools.search_client.search.call_count == 0

    def test_missing_task_raises(self):
        with pytest.raises(ValueError):
            execute_tool(make_tools(), "analyze_shred_eligibility", {"task_description": " "})


class TestGoogleSearch:
    def test_formats_results(self):
        tools = make_tools()

        text = execute_tool(tools, "google_search", {"query": "SHRED", "num_results": 4})

        assert text.startswith('# Search Results for: "SHRED"')
        tools.search_client.search.assert_called_once_with("SHRED", 4)

    def test_default_result_count(self):
        tools = make_tools()
        execute_tool(tools, "google_search", {"query": "SHRED"})
        tools.search_client.search.assert_called_once_with("SHRED", 10)

    def test_configuration_error_text(self):
        search_client = MagicMock()
        search_client.search.side_effect = ConfigurationError("missing")

        text = execute_tool(make_tools(search_client), "google_search", {"query": "x"})

        assert text.startswith("Error: Google API key or Search Engine ID not configured")

    def test_transport_error_text(self):
        search_client = MagicMock()
        search_client.search.side_effect = SearchTransportError("Daily Limit Exceeded")

        text = execute_tool(make_tools(search_client), "google_search", {"query": "x"})

        assert text == "Error performing Google search: Daily Limit Exceeded"


class TestPromptOnlyInference:
    def test_analyze_returns_prompt_as_fallback(self):
        tools = make_tools()

        result = tools.orchestrator.analyze("Model a new alloy", "foundry")

        assert result.model_output is None
        assert result.fallback_prompt.startswith("You are a senior tax expert")
        assert "Model calls are disabled" in result.model_error

    def test_complete_raises_configuration_error(self):
        with pytest.raises(ConfigurationError):
            PromptOnlyInference().complete("prompt")


class TestMalformedSearchResponse:
    def test_google_search_reports_invalid_json(self):
        search_client = MagicMock()
        search_client.search.side_effect = SearchTransportError("Invalid JSON from search API: malformed items")

        text = execute_tool(make_tools(search_client), "google_search", {"query": "x"})

        assert text.startswith("Error performing Google search: Invalid JSON")


class TestAnalyzeContextTypes:
    def test_numeric_context_is_rendered(self):
        text = execute_tool(
            make_tools(), "analyze_shred_eligibility", {"task_description": "t", "company_context": 42},
        )
        assert "## Company Context:\n42" in text
