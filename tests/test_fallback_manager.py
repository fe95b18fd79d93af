import pytest

from models.errors import StructuredOutputRequiredError
from models.preferences import PreferenceSet
from models.program import FALLBACK_PROGRAM_NAME, CandidateProgram
from orchestrator.extraction_types import ExtractionOutcome, ExtractionResult
from orchestrator.fallback_manager import FallbackManager, FallbackPolicy
from tools.web.contracts import SearchOutcome, SearchSnippet


def _search(count: int) -> SearchOutcome:
    snippets = [
        SearchSnippet(title=f"School {i}", url=f"https://s{i}.edu", excerpt="...") for i in range(count)
    ]
    return SearchOutcome(query="best CS programs", snippets=snippets, digest="digest")


def _program(name: str) -> CandidateProgram:
    return CandidateProgram(name=name, school="U", url="https://u.edu", why="fit", tuition=1000, score=90)


def test_structured_programs_are_used_verbatim():
    manager = FallbackManager()
    extraction = ExtractionResult(
        outcome=ExtractionOutcome.SUCCESS, programs=(_program("A"), _program("B")), note="from model"
    )
    result = manager.assemble(preferences=PreferenceSet(), search=_search(5), extraction=extraction)
    assert [p.name for p in result.programs] == ["A", "B"]
    assert result.notes == "from model"
    assert result.count == 2
    assert result.search_query == "best CS programs"


def test_fallback_uses_first_three_snippets():
    manager = FallbackManager()
    extraction = ExtractionResult.fallback(ExtractionOutcome.QUOTA)
    result = manager.assemble(
        preferences=PreferenceSet(field="Biology"), search=_search(8), extraction=extraction
    )
    assert result.count == 3
    assert [p.school for p in result.programs] == ["School 0", "School 1", "School 2"]
    first = result.programs[0]
    assert first.name == FALLBACK_PROGRAM_NAME
    assert first.url == "https://s0.edu"
    assert "Biology" in first.why
    assert first.tuition is None and first.score is None and first.stem is None
    assert "quota" in result.notes


def test_fallback_with_fewer_snippets():
    result = FallbackManager().assemble(
        preferences=PreferenceSet(),
        search=_search(1),
        extraction=ExtractionResult.fallback(ExtractionOutcome.UNPARSEABLE),
    )
    assert result.count == 1


@pytest.mark.parametrize(
    "outcome",
    [
        ExtractionOutcome.MISSING_CREDENTIAL,
        ExtractionOutcome.QUOTA,
        ExtractionOutcome.UNPARSEABLE,
        ExtractionOutcome.UNEXPECTED_SHAPE,
        ExtractionOutcome.NO_PROGRAMS,
    ],
)
def test_required_structured_output_raises(outcome):
    manager = FallbackManager(FallbackPolicy(require_structured_output=True))
    with pytest.raises(StructuredOutputRequiredError) as exc_info:
        manager.assemble(
            preferences=PreferenceSet(), search=_search(3), extraction=ExtractionResult.fallback(outcome)
        )
    assert exc_info.value.status_code == 424


def test_caller_opt_out_is_honoured_when_structured_output_required():
    manager = FallbackManager(FallbackPolicy(require_structured_output=True))
    result = manager.assemble(
        preferences=PreferenceSet(extraction_enabled=False),
        search=_search(2),
        extraction=ExtractionResult.fallback(ExtractionOutcome.DISABLED),
    )
    assert result.count == 2
