"""
SHRED eligibility analysis pipeline.

Flow
────
1. validate input             → ValidationError, no network I/O
2. researcher.research(depth) → research blob (never raises)
3. prompts.compose(...)       → prompt text
4. inference.complete(prompt) → model answer
     on failure: result carries model_error + the prompt as fallback_prompt

Nothing is retried here; a caller that wants another attempt sends a new
request.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

from shred.catalog import resolve_depth
from shred.errors import ShredError, ValidationError
from shred.inference import ClaudeClient
from shred.models import AnalysisResult, PreparedAnalysis, SearchDepth
from shred.prompts import PromptVariant, compose
from shred.researcher import RequirementsResearcher
from shred.search import GoogleSearchClient

if TYPE_CHECKING:
    from config.settings import Settings

logger = logging.getLogger(__name__)


def _require_task(task_description: object) -> str:
    if not isinstance(task_description, str) or not task_description.strip():
        raise ValidationError("Task description is required")
    return task_description


def _coerce_context(company_context: object) -> str:
    if company_context is None:
        return ""
    if isinstance(company_context, str):
        return company_context
    return str(company_context)


class AnalysisOrchestrator:
    """Runs research, prompt composition and inference for one task.

    Args:
        researcher: Produces the research blob.
        inference: Anything with ``complete(prompt) -> str``, e.g. ``ClaudeClient``.
        variant: Prompt variant used when a call does not pass one.
    """

    def __init__(
        self,
        researcher: RequirementsResearcher,
        inference,
        variant: PromptVariant = PromptVariant.CRITICAL,
    ) -> None:
        self.researcher = researcher
        self.inference = inference
        self.variant = variant

    def prepare(
        self,
        task_description: str,
        company_context: str = "",
        search_depth: Optional[Union[SearchDepth, str]] = None,
        variant: Optional[Union[PromptVariant, str]] = None,
    ) -> PreparedAnalysis:
        """Research and compose the prompt without calling the model.

        Raises:
            ValidationError: If *task_description* is missing or blank.
        """
        task_description = _require_task(task_description)
        depth = resolve_depth(search_depth)
        company_context = _coerce_context(company_context)
        variant = PromptVariant(variant) if variant is not None else self.variant

        logger.info(
            "Analysis task=%r depth=%s variant=%s",
            task_description[:80], depth.value, variant.value,
        )
        research_blob = self.researcher.research(depth)
        prompt = compose(variant, task_description, company_context, research_blob)
        return PreparedAnalysis(
            task_description=task_description,
            company_context=company_context,
            research_blob=research_blob,
            prompt=prompt,
        )

    def analyze(
        self,
        task_description: str,
        company_context: str = "",
        search_depth: Optional[Union[SearchDepth, str]] = None,
        variant: Optional[Union[PromptVariant, str]] = None,
    ) -> AnalysisResult:
        """Run the full pipeline and return an ``AnalysisResult``.

        A model failure does not raise: the result carries ``model_error``
        and the composed prompt as ``fallback_prompt``.

        Raises:
            ValidationError: If *task_description* is missing or blank. No
                remote calls are made.
        """
        prepared = self.prepare(task_description, company_context, search_depth, variant)

        try:
            output = self.inference.complete(prepared.prompt)
        except ShredError as exc:
            logger.warning("Inference failed, returning prompt as fallback: %s", exc)
            return self._fallback(prepared, str(exc))
        except Exception as exc:
            logger.exception("Unexpected inference failure, returning prompt as fallback")
            return self._fallback(prepared, str(exc) or exc.__class__.__name__)

        return AnalysisResult(
            task_description=prepared.task_description,
            company_context=prepared.company_context,
            research_blob=prepared.research_blob,
            model_output=output,
        )

    @staticmethod
    def _fallback(prepared: PreparedAnalysis, message: str) -> AnalysisResult:
        return AnalysisResult(
            task_description=prepared.task_description,
            company_context=prepared.company_context,
            research_blob=prepared.research_blob,
            model_error=message,
            fallback_prompt=prepared.prompt,
        )


def build_orchestrator(
    settings: Settings,
    variant: PromptVariant = PromptVariant.CRITICAL,
) -> AnalysisOrchestrator:
    """Wire the Google search client and Claude client from *settings*."""
    researcher = RequirementsResearcher(GoogleSearchClient(settings))
    return AnalysisOrchestrator(researcher, ClaudeClient(settings), variant=variant)
