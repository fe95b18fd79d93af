from dataclasses import dataclass

from models.errors import StructuredOutputRequiredError
from models.finder_result import FinderResult
from models.preferences import PreferenceSet
from models.program import CandidateProgram
from tools.web.contracts import SearchOutcome

from .extraction_types import ExtractionOutcome, ExtractionResult
from .program_normalizer import MAX_PROGRAMS


@dataclass(frozen=True)
class FallbackPolicy:
    max_programs: int = MAX_PROGRAMS
    require_structured_output: bool = False


class FallbackManager:
    """Reconciles extraction output with raw search snippets into the final result."""

    def __init__(self, policy: FallbackPolicy | None = None):
        self.policy = policy or FallbackPolicy()

    def snippet_candidates(
        self, search: SearchOutcome, preferences: PreferenceSet
    ) -> tuple[CandidateProgram, ...]:
        return tuple(
            CandidateProgram.from_snippet(
                title=snippet.title or snippet.url,
                url=snippet.url,
                field=preferences.field,
            )
            for snippet in search.snippets[: self.policy.max_programs]
        )

    def assemble(
        self,
        *,
        preferences: PreferenceSet,
        search: SearchOutcome,
        extraction: ExtractionResult,
    ) -> FinderResult:
        """
        Raises:
            StructuredOutputRequiredError: structured output is mandatory and the
                extraction produced none (a caller opt-out is still honoured)
        """
        if extraction.has_programs:
            programs = extraction.programs[: self.policy.max_programs]
        else:
            if (
                self.policy.require_structured_output
                and extraction.outcome != ExtractionOutcome.DISABLED
            ):
                raise StructuredOutputRequiredError(
                    f"Structured program extraction required but unavailable "
                    f"({extraction.outcome.value}): {extraction.note}"
                )
            programs = self.snippet_candidates(search, preferences)

        return FinderResult(
            preferences=preferences,
            search_query=search.query,
            programs=programs,
            notes=extraction.note,
        )
