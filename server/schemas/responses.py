"""Pydantic response models (DTOs) for FastAPI endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProgramDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    school: str
    tuition: int | float | None = None
    url: str
    min_gpa: str | None = Field(None, alias="minGpa")
    test_policy: str | None = Field(None, alias="testPolicy")
    stem: bool | None = None
    deadline: str | None = None
    why: str
    score: int | float | None = None

    @classmethod
    def from_candidate(cls, program):
        return cls(
            name=program.name,
            school=program.school,
            tuition=program.tuition,
            url=program.url,
            min_gpa=program.min_gpa,
            test_policy=program.test_policy,
            stem=program.stem,
            deadline=program.deadline,
            why=program.why,
            score=program.score,
        )


class FindProgramsResponseDTO(BaseModel):
    ok: bool = True
    query: dict[str, Any]
    programs: list[ProgramDTO] = Field(default_factory=list, max_length=3)
    notes: str | None = None
    count: int

    @classmethod
    def from_finder_result(cls, result):
        """Convert FinderResult to DTO."""
        return cls(
            query=result.preferences.to_query_echo(result.search_query),
            programs=[ProgramDTO.from_candidate(p) for p in result.programs],
            notes=result.notes,
            count=result.count,
        )

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class HealthResponseDTO(BaseModel):
    status: str
    timestamp: str
    version: str = "1.0.0"
    missing_credentials: list[str] = Field(default_factory=list)
