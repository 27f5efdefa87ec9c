"""Web search over the Google Custom Search JSON API.

Responsibilities:
- Issue one search request per query, capped at 10 results
- Convert the API's item list into ``SearchResult`` objects
- Map missing credentials and transport/auth failures to typed errors
- Render a result list as the markdown-style text used by the tools

No retries: a failed request propagates on the first attempt so the
user-facing analysis keeps a bounded latency.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from shred.errors import ConfigurationError, SearchTransportError
from shred.models import NO_SNIPPET, SearchResult

if TYPE_CHECKING:
    from config.settings import Settings

logger = logging.getLogger(__name__)

#: Google Custom Search JSON API endpoint.
CUSTOM_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"
#: The API refuses ``num`` values above 10.
MAX_RESULTS = 10

NOT_CONFIGURED_MESSAGE = (
    "Google API not configured. Please set GOOGLE_API_KEY and "
    "GOOGLE_SEARCH_ENGINE_ID environment variables."
)


def _error_message(exc: httpx.HTTPError) -> str:
    """Pull Google's ``error.message`` out of a failed response, if any."""
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            body = exc.response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = (body.get("error") or {}).get("message")
            if message:
                return message
        return f"HTTP {exc.response.status_code} from search API"
    return str(exc) or exc.__class__.__name__


class GoogleSearchClient:
    """Searches the web through a Google Programmable Search Engine.

    The ``httpx`` client is lazy-initialised so that instances can be created
    without network access; tests pass their own client built on
    ``httpx.MockTransport``.
    """

    def __init__(self, settings: Settings, http_client: httpx.Client | None = None) -> None:
        self.settings = settings
        self._client = http_client

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialise and return the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.settings.search_timeout)
        return self._client

    def search(self, query: str, max_results: int = MAX_RESULTS) -> list[SearchResult]:
        """Run *query* and return up to *max_results* hits in relevance order.

        Args:
            query: Search query string.
            max_results: Requested result count, clamped to 1..10.

        Returns:
            A possibly empty list of ``SearchResult``.

        Raises:
            ConfigurationError: If the API key or search engine id is missing.
                No request is made in that case.
            SearchTransportError: If the request fails or the API rejects it.
        """
        if not self.settings.search_configured:
            raise ConfigurationError(NOT_CONFIGURED_MESSAGE)

        num = max(1, min(int(max_results), MAX_RESULTS))
        logger.info("Search query=%r num=%d", query, num)

        try:
            response = self.client.get(
                CUSTOM_SEARCH_URL,
                params={
                    "key": self.settings.google_api_key,
                    "cx": self.settings.google_search_engine_id,
                    "q": query,
                    "num": num,
                },
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as exc:
            raise SearchTransportError(_error_message(exc)) from exc
        except ValueError as exc:
            raise SearchTransportError(f"Invalid JSON from search API: {exc}") from exc

        if not isinstance(data, dict):
            raise SearchTransportError("Invalid JSON from search API: expected an object")
        items = data.get("items") or []
        if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
            raise SearchTransportError("Invalid JSON from search API: malformed items")

        results = [
            SearchResult(
                title=str(item.get("title") or ""),
                link=str(item.get("link") or ""),
                snippet=str(item.get("snippet") or NO_SNIPPET),
            )
            for item in items
        ]
        logger.info("Search complete: %d results for query=%r", len(results), query)
        return results[:num]

    def close(self) -> None:
        if self._client is not None:
            self._client.close()


# ── Formatting ─────────────────────────────────────────────────────────────────


def format_search_results(query: str, results: list[SearchResult]) -> str:
    """Render *results* as markdown-style text for a tool response.

    Examples:
        >>> format_search_results("x", [])
        'No search results found for query: "x"'
    """
    if not results:
        return f'No search results found for query: "{query}"'

    blocks = [
        f"**Result {index}:**\n"
        f"**Title:** {result.title}\n"
        f"**URL:** {result.link}\n"
        f"**Snippet:** {result.snippet}\n"
        f"\n---"
        for index, result in enumerate(results, start=1)
    ]
    header = f'# Search Results for: "{query}"\n\nFound {len(results)} results:\n\n'
    return header + "\n".join(blocks)
