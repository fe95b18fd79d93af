from models.preferences import PreferenceSet
from tools.web.contracts import SearchSnippet
from tools.web.research_pack import MAX_DIGEST_CHARS, build_digest, build_search_query


def test_query_defaults_to_us():
    query = build_search_query(PreferenceSet())
    assert query == (
        "best Computer Science master's programs in the US tuition, minimum GPA, "
        "GRE/GMAT policy, scholarships"
    )


def test_query_with_state_and_stem():
    prefs = PreferenceSet(field="Data Science", state_filter="Texas", stem_only=True)
    query = build_search_query(prefs)
    assert query.startswith("best Data Science master's programs in Texas ")
    assert query.endswith("scholarships STEM only")
    assert "  " not in query


def test_digest_numbers_and_joins_snippets():
    snippets = [
        SearchSnippet(title="MIT MS CS", url="https://mit.edu", excerpt="Tuition $60k"),
        SearchSnippet(title="UT Austin", url="https://utexas.edu", excerpt="GRE optional"),
    ]
    digest = build_digest(snippets)
    assert digest == (
        "#1 MIT MS CS\nTuition $60k\nURL: https://mit.edu\n\n"
        "#2 UT Austin\nGRE optional\nURL: https://utexas.edu"
    )


def test_digest_is_hard_truncated():
    snippets = [SearchSnippet(title=f"School {i}", url="https://x.edu", excerpt="a" * 900) for i in range(8)]
    digest = build_digest(snippets)
    assert len(digest) == MAX_DIGEST_CHARS
    assert digest.startswith("#1 School 0")
