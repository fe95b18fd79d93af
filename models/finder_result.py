from dataclasses import dataclass, field

from .preferences import PreferenceSet
from .program import CandidateProgram


@dataclass(frozen=True)
class FinderResult:
    """Outcome of one successful find-programs request."""

    preferences: PreferenceSet
    search_query: str
    programs: tuple[CandidateProgram, ...] = field(default_factory=tuple)
    notes: str | None = None

    @property
    def count(self) -> int:
        return len(self.programs)
