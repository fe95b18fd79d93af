"""Data contracts for the web search stage."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SearchSnippet:
    """One search hit, in provider relevance order."""

    title: str
    url: str
    excerpt: str = ""


@dataclass(frozen=True)
class SearchOutcome:
    """Snippets plus the digest handed to the extraction stage."""

    query: str
    snippets: list[SearchSnippet] = field(default_factory=list)
    digest: str = ""
