"""Web search stage: query building, Tavily call, digest."""

from .contracts import SearchOutcome, SearchSnippet
from .factory import create_search_client
from .research_pack import build_digest, build_search_query
from .tavily_client import TavilySearchClient

__all__ = [
    "SearchOutcome",
    "SearchSnippet",
    "TavilySearchClient",
    "build_digest",
    "build_search_query",
    "create_search_client",
]
