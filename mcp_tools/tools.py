"""Tool definitions and handlers for the MCP adapter.

Handlers are plain synchronous functions returning text, so they can be
exercised without an MCP runtime. ``server.py`` wraps them for the SDK.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from shred.analyzer import AnalysisOrchestrator
from shred.errors import ConfigurationError, SearchTransportError
from shred.models import QueryFocus, SearchDepth
from shred.prompts import PromptVariant, compose_standalone
from shred.researcher import RequirementsResearcher
from shred.search import MAX_RESULTS, GoogleSearchClient, format_search_results

if TYPE_CHECKING:
    from config.settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class Tool:
    """Tool definition with metadata and implementation."""

    name: str
    description: str
    parameters: dict[str, Any]
    implementation: Callable[[ShredTools, dict[str, Any]], str]


class PromptOnlyInference:
    """Inference stand-in for tools that return the prompt to the agent host.

    ``complete`` always fails, so ``analyze`` on an orchestrator built with it
    ends in the degraded result that carries the prompt.
    """

    def complete(self, prompt: str) -> str:
        raise ConfigurationError(
            "Model calls are disabled here; run the returned prompt with the agent's model."
        )


class ShredTools:
    """Holds the collaborators the tool handlers share.

    These tools hand the composed prompt back to the agent host instead of
    calling a model themselves, so the orchestrator is only used through
    ``prepare``.
    """

    def __init__(self, settings: Settings, search_client: GoogleSearchClient | None = None) -> None:
        self.settings = settings
        self.search_client = search_client or GoogleSearchClient(settings)
        self.researcher = RequirementsResearcher(self.search_client)
        self.orchestrator = AnalysisOrchestrator(
            self.researcher, inference=PromptOnlyInference(), variant=PromptVariant.COMPREHENSIVE,
        )


# ── Handlers ───────────────────────────────────────────────────────────────────


def research_shred_eligibility(tools: ShredTools, arguments: dict[str, Any]) -> str:
    prepared = tools.orchestrator.prepare(
        arguments.get("task_description"),
        arguments.get("company_context") or "",
        arguments.get("search_depth") or SearchDepth.COMPREHENSIVE,
    )
    sections = [
        "# SHRED Tax Credit Eligibility Research & Analysis",
        f"## Task Description:\n{prepared.task_description}",
    ]
    if prepared.company_context.strip():
        sections.append(f"## Company Context:\n{prepared.company_context}")
    sections += [
        f"## Current SHRED Requirements Research:\n{prepared.research_blob}",
        "---",
        f"## Comprehensive Analysis Prompt:\n\n{prepared.prompt}",
    ]
    return "\n\n".join(sections)


def search_shred_requirements(tools: ShredTools, arguments: dict[str, Any]) -> str:
    focus = arguments.get("search_focus") or QueryFocus.GENERAL
    blob = tools.researcher.search_requirements(focus)
    return f"# SHRED Tax Credit Requirements Research\n\n## Search Results:\n\n{blob}"


def analyze_shred_eligibility(tools: ShredTools, arguments: dict[str, Any]) -> str:
    task_description = arguments.get("task_description")
    if not isinstance(task_description, str) or not task_description.strip():
        raise ValueError("Task description is required")
    company_context = str(arguments.get("company_context") or "")

    sections = [
        "# SHRED Tax Credit Eligibility Analysis",
        f"## Task Description:\n{task_description}",
    ]
    if company_context.strip():
        sections.append(f"## Company Context:\n{company_context}")
    sections += [
        f"## Analysis Prompt:\n\n{compose_standalone(task_description, company_context)}",
        "---",
        "**Note:** Run this prompt with a capable model to get the eligibility "
        "determination. The model is expected to recall the current SHRED program "
        "requirements and explain its reasoning.",
    ]
    return "\n\n".join(sections)


def google_search(tools: ShredTools, arguments: dict[str, Any]) -> str:
    query = arguments.get("query")
    if not isinstance(query, str) or not query.strip():
        raise ValueError("Search query is required")
    num_results = arguments.get("num_results") or MAX_RESULTS

    try:
        results = tools.search_client.search(query, int(num_results))
    except ConfigurationError:
        return (
            "Error: Google API key or Search Engine ID not configured. Please set "
            "GOOGLE_API_KEY and GOOGLE_SEARCH_ENGINE_ID environment variables."
        )
    except SearchTransportError as exc:
        return f"Error performing Google search: {exc}"
    return format_search_results(query, results)


# ── Registry ───────────────────────────────────────────────────────────────────

TOOL_REGISTRY: dict[str, Tool] = {
    tool.name: tool
    for tool in [
        Tool(
            name="research_shred_eligibility",
            description=(
                "Research SHRED tax credit requirements and analyze task eligibility "
                "using Google search and AI reasoning"
            ),
            parameters={
                "type": "object",
                "properties": {
                    "task_description": {
                        "type": "string",
                        "description": "The daily task description to analyze for SHRED eligibility",
                    },
                    "company_context": {
                        "type": "string",
                        "description": "Optional context about the company or industry",
                    },
                    "search_depth": {
                        "type": "string",
                        "description": "Search depth: basic, comprehensive, or detailed",
                        "enum": [d.value for d in SearchDepth],
                        "default": SearchDepth.COMPREHENSIVE.value,
                    },
                },
                "required": ["task_description"],
            },
            implementation=research_shred_eligibility,
        ),
        Tool(
            name="search_shred_requirements",
            description="Search for current SHRED tax credit requirements and guidelines",
            parameters={
                "type": "object",
                "properties": {
                    "search_focus": {
                        "type": "string",
                        "description": "Specific aspect to focus search on",
                        "enum": [f.value for f in QueryFocus],
                        "default": QueryFocus.GENERAL.value,
                    },
                },
            },
            implementation=search_shred_requirements,
        ),
        Tool(
            name="analyze_shred_eligibility",
            description=(
                "Analyze if a daily task description fits within the Canadian SHRED "
                "tax credit program definition"
            ),
            parameters={
                "type": "object",
                "properties": {
                    "task_description": {
                        "type": "string",
                        "description": "The daily task description to analyze for SHRED eligibility",
                    },
                    "company_context": {
                        "type": "string",
                        "description": (
                            'Optional context about the company or industry (e.g., '
                            '"software development company", "manufacturing")'
                        ),
                    },
                },
                "required": ["task_description"],
            },
            implementation=analyze_shred_eligibility,
        ),
        Tool(
            name="google_search",
            description="Search Google for information on any topic",
            parameters={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "The search query to execute",
                    },
                    "num_results": {
                        "type": "number",
                        "description": "Number of search results to return (default: 10, max: 10)",
                        "default": MAX_RESULTS,
                        "minimum": 1,
                        "maximum": MAX_RESULTS,
                    },
                },
                "required": ["query"],
            },
            implementation=google_search,
        ),
    ]
}


def execute_tool(tools: ShredTools, tool_name: str, arguments: dict[str, Any] | None) -> str:
    """Run *tool_name* with *arguments* and return its text output.

    Raises:
        ValueError: If the tool is unknown or required arguments are missing.
    """
    if tool_name not in TOOL_REGISTRY:
        raise ValueError(f"Unknown tool: {tool_name}")
    logger.info("Tool call name=%s", tool_name)
    return TOOL_REGISTRY[tool_name].implementation(tools, arguments or {})
