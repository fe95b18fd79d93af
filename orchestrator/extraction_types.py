from dataclasses import dataclass, field
from enum import Enum

from models.program import CandidateProgram


class ExtractionOutcome(str, Enum):
    SUCCESS = "success"
    DISABLED = "disabled"
    MISSING_CREDENTIAL = "missing_credential"
    QUOTA = "quota"
    UNPARSEABLE = "unparseable"
    UNEXPECTED_SHAPE = "unexpected_shape"
    NO_PROGRAMS = "no_programs"


FALLBACK_NOTES: dict[ExtractionOutcome, str] = {
    ExtractionOutcome.DISABLED: "AI extraction disabled by caller; showing raw search results.",
    ExtractionOutcome.MISSING_CREDENTIAL: (
        "AI extraction skipped: missing credential (OPENAI_API_KEY); showing raw search results."
    ),
    ExtractionOutcome.QUOTA: (
        "AI extraction skipped: OpenAI quota or rate limit reached; showing raw search results."
    ),
    ExtractionOutcome.UNPARSEABLE: "AI returned unparseable JSON; showing raw search results.",
    ExtractionOutcome.UNEXPECTED_SHAPE: (
        "AI returned non-JSON/unexpected shape; showing raw search results."
    ),
    ExtractionOutcome.NO_PROGRAMS: "AI returned no programs; showing raw search results.",
}


@dataclass(frozen=True)
class ExtractionResult:
    outcome: ExtractionOutcome
    programs: tuple[CandidateProgram, ...] = field(default_factory=tuple)
    note: str | None = None

    @property
    def has_programs(self) -> bool:
        return self.outcome == ExtractionOutcome.SUCCESS and bool(self.programs)

    @classmethod
    def fallback(cls, outcome: ExtractionOutcome, note: str | None = None) -> "ExtractionResult":
        return cls(outcome=outcome, note=note or FALLBACK_NOTES.get(outcome))
