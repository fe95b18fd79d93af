"""Tavily search client.

One POST per request, no retries. Failures are raised as FinderError
subclasses so the route can map them to a status code.
"""

from typing import Any

import httpx

from models.errors import ConfigurationError, NoResultsError, UpstreamError
from models.preferences import PreferenceSet
from utils.logger import get_logger

from .contracts import SearchOutcome, SearchSnippet
from .research_pack import build_digest, build_search_query

logger = get_logger(__name__)

TAVILY_SEARCH_URL = "https://api.tavily.com/search"
PROVIDER_NAME = "Tavily"
DEFAULT_MAX_RESULTS = 8
DEFAULT_TIMEOUT_S = 15.0

# Forums and content aggregators rarely carry program facts.
EXCLUDED_DOMAINS = (
    "reddit.com",
    "quora.com",
    "medium.com",
    "pinterest.com",
    "facebook.com",
    "youtube.com",
)


def _to_snippet(item: dict[str, Any]) -> SearchSnippet:
    excerpt = item.get("snippet") or item.get("content") or item.get("excerpt") or ""
    return SearchSnippet(
        title=str(item.get("title") or "").strip(),
        url=str(item.get("url") or "").strip(),
        excerpt=str(excerpt).strip(),
    )


class TavilySearchClient:
    """Async Tavily client built on httpx."""

    def __init__(
        self,
        api_key: str | None,
        *,
        max_results: int = DEFAULT_MAX_RESULTS,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            api_key: Tavily API key; a missing key fails each search, not construction
            max_results: Result cap sent to the provider
            timeout_s: Timeout for the single search call
            transport: Optional httpx transport (tests pass ``httpx.MockTransport``)
        """
        self.api_key = api_key
        self.max_results = max_results
        self.timeout_s = timeout_s
        self._transport = transport

    def _payload(self, query: str) -> dict[str, Any]:
        return {
            "query": query,
            "search_depth": "advanced",
            "max_results": self.max_results,
            "exclude_domains": list(EXCLUDED_DOMAINS),
        }

    async def search(self, preferences: PreferenceSet) -> SearchOutcome:
        """
        Run the search for a preference set.

        Raises:
            ConfigurationError: TAVILY_API_KEY is not configured
            UpstreamError: Non-2xx status or transport failure
            NoResultsError: The provider returned an empty result list
        """
        if not self.api_key:
            raise ConfigurationError("Missing TAVILY_API_KEY: search provider is not configured")

        query = build_search_query(preferences)
        logger.info(
            "Tavily search",
            extra={"extra_fields": {"query": query, "max_results": self.max_results}},
        )

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_s, transport=self._transport
            ) as client:
                response = await client.post(
                    TAVILY_SEARCH_URL,
                    json=self._payload(query),
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
        except httpx.HTTPError as exc:
            logger.error(
                "Tavily request failed",
                extra={"extra_fields": {"error": str(exc), "error_type": type(exc).__name__}},
            )
            raise UpstreamError(PROVIDER_NAME, body=str(exc) or type(exc).__name__) from exc

        if response.is_error:
            logger.error(
                "Tavily returned an error status",
                extra={"extra_fields": {"status": response.status_code}},
            )
            raise UpstreamError(PROVIDER_NAME, response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamError(PROVIDER_NAME, response.status_code, "response was not JSON") from exc

        results = payload.get("results") if isinstance(payload, dict) else None
        snippets = [_to_snippet(item) for item in (results or []) if isinstance(item, dict)]
        if not snippets:
            logger.warning("Tavily returned no results", extra={"extra_fields": {"query": query}})
            raise NoResultsError(f"No search results for: {query}")

        logger.info(
            "Tavily search complete",
            extra={"extra_fields": {"result_count": len(snippets)}},
        )
        return SearchOutcome(query=query, snippets=snippets, digest=build_digest(snippets))
