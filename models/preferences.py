from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_GPA = "3.0"
DEFAULT_BUDGET = "25000"
DEFAULT_FIELD = "Computer Science"
ANY_STATE = "Any"

# Query parameter names accepted by the find-programs endpoint.
PARAM_GPA = "gpa"
PARAM_BUDGET = "budget"
PARAM_FIELD = "program"
PARAM_STATE = "state"
PARAM_STEM_ONLY = "stemOnly"
PARAM_EXTRACTION = "ai"


def _clean(value: str | None, default: str) -> str:
    text = (value or "").strip()
    return text or default


@dataclass(frozen=True)
class PreferenceSet:
    """
    Normalized user preferences driving one search.

    gpa and budget are opaque strings: they are echoed and interpolated into
    the prompt, never parsed as numbers.
    """

    gpa: str = DEFAULT_GPA
    budget: str = DEFAULT_BUDGET
    field: str = DEFAULT_FIELD
    state_filter: str = ANY_STATE
    stem_only: bool = False
    extraction_enabled: bool = True

    @property
    def has_state_filter(self) -> bool:
        return self.state_filter.lower() != ANY_STATE.lower()

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "PreferenceSet":
        """Build a preference set from raw query parameters. Never fails."""
        stem_raw = (params.get(PARAM_STEM_ONLY) or "").strip().lower()
        extraction_raw = (params.get(PARAM_EXTRACTION) or "").strip().lower()
        return cls(
            gpa=_clean(params.get(PARAM_GPA), DEFAULT_GPA),
            budget=_clean(params.get(PARAM_BUDGET), DEFAULT_BUDGET),
            field=_clean(params.get(PARAM_FIELD), DEFAULT_FIELD),
            state_filter=_clean(params.get(PARAM_STATE), ANY_STATE),
            stem_only=stem_raw == "true",
            extraction_enabled=extraction_raw != "off",
        )

    def to_query_echo(self, search_query: str) -> dict:
        return {
            PARAM_GPA: self.gpa,
            PARAM_BUDGET: self.budget,
            PARAM_FIELD: self.field,
            PARAM_STATE: self.state_filter,
            PARAM_STEM_ONLY: self.stem_only,
            PARAM_EXTRACTION: "on" if self.extraction_enabled else "off",
            "search": search_query,
        }
