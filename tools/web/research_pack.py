"""Build the search query and the digest text fed to the model."""

import re

from models.preferences import PreferenceSet

from .contracts import SearchSnippet

MAX_DIGEST_CHARS = 4000


def build_search_query(preferences: PreferenceSet) -> str:
    """
    Deterministic natural-language query for the search provider.

    Example:
        best Computer Science master's programs in the US tuition, minimum GPA,
        GRE/GMAT policy, scholarships
    """
    location = f"in {preferences.state_filter}" if preferences.has_state_filter else "in the US"
    stem = "STEM only" if preferences.stem_only else ""
    query = (
        f"best {preferences.field} master's programs {location} "
        f"tuition, minimum GPA, GRE/GMAT policy, scholarships {stem}"
    )
    return re.sub(r"\s+", " ", query).strip()


def build_digest(snippets: list[SearchSnippet], max_chars: int = MAX_DIGEST_CHARS) -> str:
    """
    Number and join snippets into one block of model context.

    The result is hard-truncated to ``max_chars``; a snippet may be cut mid-sentence.
    """
    blocks = [
        f"#{idx} {snippet.title}\n{snippet.excerpt}\nURL: {snippet.url}"
        for idx, snippet in enumerate(snippets, start=1)
    ]
    return "\n\n".join(blocks)[:max_chars]
