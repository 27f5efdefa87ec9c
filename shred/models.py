"""
Pydantic models shared across the SHRED eligibility core.

All of these are request-scoped values: built fresh for each analysis and
discarded once the caller has serialised them.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, model_validator

#: Placeholder used when the search API returns an item without a snippet.
NO_SNIPPET = "No description available"


class QueryFocus(str, Enum):
    """Which aspect of the program a requirements search concentrates on."""

    GENERAL = "general"
    ELIGIBILITY_CRITERIA = "eligibility_criteria"
    QUALIFYING_ACTIVITIES = "qualifying_activities"
    DOCUMENTATION = "documentation"
    RECENT_CHANGES = "recent_changes"


class SearchDepth(str, Enum):
    """How many catalog queries to issue before composing the prompt."""

    BASIC = "basic"                  # 1 query
    COMPREHENSIVE = "comprehensive"  # 2 queries
    DETAILED = "detailed"            # 3 queries

    @property
    def query_count(self) -> int:
        return _DEPTH_QUERY_COUNT[self]


_DEPTH_QUERY_COUNT: dict[SearchDepth, int] = {
    SearchDepth.BASIC: 1,
    SearchDepth.COMPREHENSIVE: 2,
    SearchDepth.DETAILED: 3,
}


class SearchResult(BaseModel):
    """A single ranked hit from the web-search API."""

    title: str
    link: str
    snippet: str = NO_SNIPPET


class PreparedAnalysis(BaseModel):
    """Research and prompt for a task, before any model call."""

    task_description: str
    company_context: str
    research_blob: str
    prompt: str


class AnalysisResult(BaseModel):
    """Outcome of a full analysis run.

    Exactly one of ``model_output`` / ``model_error`` is set. When the model
    call failed, ``fallback_prompt`` carries the prompt that would have been
    sent so the caller can show it or retry by hand.
    """

    task_description: str
    company_context: str
    research_blob: str
    model_output: Optional[str] = None
    model_error: Optional[str] = None
    fallback_prompt: Optional[str] = None

    @model_validator(mode="after")
    def _check_outcome(self) -> AnalysisResult:
        if (self.model_output is None) == (self.model_error is None):
            raise ValueError("exactly one of model_output or model_error must be set")
        if self.fallback_prompt is not None and self.model_error is None:
            raise ValueError("fallback_prompt is only set when the model call failed")
        return self

    @property
    def degraded(self) -> bool:
        """True when the model call failed and the prompt was returned instead."""
        return self.model_error is not None
