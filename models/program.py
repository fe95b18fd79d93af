from dataclasses import dataclass

FALLBACK_PROGRAM_NAME = "(unknown — open page)"


@dataclass(frozen=True)
class CandidateProgram:
    """One normalized graduate program recommendation."""

    name: str
    school: str
    url: str
    why: str
    tuition: float | int | None = None
    min_gpa: str | None = None
    test_policy: str | None = None
    stem: bool | None = None
    deadline: str | None = None
    score: float | int | None = None

    @classmethod
    def from_snippet(cls, title: str, url: str, field: str) -> "CandidateProgram":
        """Placeholder candidate built from a raw search hit."""
        return cls(
            name=FALLBACK_PROGRAM_NAME,
            school=title,
            url=url,
            why=(
                f"Search result for {field} master's programs; open the page to confirm "
                "tuition, GPA requirements and test policy."
            ),
        )
