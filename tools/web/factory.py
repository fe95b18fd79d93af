"""Factory for the search client."""

from config.config import Settings

from .tavily_client import TavilySearchClient


def create_search_client(settings: Settings) -> TavilySearchClient:
    """Build the Tavily client from settings. A missing key is reported per search."""
    return TavilySearchClient(
        api_key=settings.tavily_api_key,
        timeout_s=settings.search_timeout_s,
    )
