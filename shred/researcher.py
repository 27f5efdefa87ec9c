"""
Requirements research for SHRED eligibility analysis.

Pulls queries from the catalog, runs each through the search client one at
a time, and folds the outcomes into a single markdown-like research blob.

Blob layout
───────────
    **Search Query:** <query>
    1. <title>
       <snippet>
       <link>

    2. ...

    ---

    **Search Query:** <query>
    **Error:** <message>

A failing query never aborts the others: its error text is written under
its own heading and the next query still runs.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from shred.catalog import queries_for, queries_for_depth, resolve_depth
from shred.errors import ShredError
from shred.models import QueryFocus, SearchDepth, SearchResult

logger = logging.getLogger(__name__)

#: Per-query result cap when researching ahead of an analysis prompt.
ANALYSIS_RESULTS_PER_QUERY = 3
#: Per-query result cap for a standalone requirements search.
REQUIREMENTS_RESULTS_PER_QUERY = 5

BLOCK_SEPARATOR = "\n\n---\n\n"


def format_query_block(query: str, results: list[SearchResult]) -> str:
    """Render one successful query as an enumerated title / snippet / link list."""
    if not results:
        return f'**Search Query:** {query}\nNo search results found for query: "{query}"'
    lines = "\n\n".join(
        f"{index}. {result.title}\n   {result.snippet}\n   {result.link}"
        for index, result in enumerate(results, start=1)
    )
    return f"**Search Query:** {query}\n{lines}"


def format_error_block(query: str, message: str) -> str:
    """Render one failed query as an inline error line."""
    return f"**Search Query:** {query}\n**Error:** {message}"


class RequirementsResearcher:
    """Builds the research blob that grounds the analysis prompt.

    Args:
        search_client: Anything with ``search(query, max_results)`` returning
            a list of ``SearchResult``, e.g. ``GoogleSearchClient``.
    """

    def __init__(self, search_client) -> None:
        self.search_client = search_client

    def research(self, depth: Optional[Union[SearchDepth, str]] = None) -> str:
        """Research the general requirements ahead of an analysis.

        Issues 1, 2 or 3 queries for ``basic``, ``comprehensive`` or
        ``detailed``; ``None`` means ``comprehensive`` and unknown
        values mean ``detailed``.
        """
        depth = resolve_depth(depth)
        return self._run(queries_for_depth(depth), ANALYSIS_RESULTS_PER_QUERY)

    def search_requirements(
        self,
        focus: Union[QueryFocus, str, None] = QueryFocus.GENERAL,
    ) -> str:
        """Run every query for *focus* and return the combined blob.

        Unknown focus values fall back to ``general``.
        """
        return self._run(queries_for(focus), REQUIREMENTS_RESULTS_PER_QUERY)

    def _run(self, queries: list[str], max_results: int) -> str:
        blocks: list[str] = []
        for query in queries:
            try:
                results = self.search_client.search(query, max_results)
            except ShredError as exc:
                logger.warning("Search failed for query=%r: %s", query, exc)
                blocks.append(format_error_block(query, str(exc)))
                continue
            except Exception as exc:
                logger.exception("Unexpected search failure for query=%r", query)
                blocks.append(format_error_block(query, str(exc) or exc.__class__.__name__))
                continue
            blocks.append(format_query_block(query, results))

        logger.info("Research complete: %d queries", len(queries))
        return BLOCK_SEPARATOR.join(blocks)
