"""Coerce model-produced program entries into CandidateProgram records."""

import math
import re
from typing import Any

from models.program import CandidateProgram

MAX_PROGRAMS = 3
SCORE_MIN = 0
SCORE_MAX = 100

_NUMBER_NOISE = re.compile(r"[\s$,]|usd", re.I)


def _is_finite(value: int | float) -> bool:
    # Arbitrarily long JSON integers overflow float conversion.
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def coerce_number(value: Any) -> float | int | None:
    """Finite number or None. Numeric strings such as "$45,000" are accepted."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if _is_finite(value) else None
    if isinstance(value, str):
        cleaned = _NUMBER_NOISE.sub("", value)
        if not cleaned:
            return None
        try:
            number = float(cleaned)
        except ValueError:
            return None
        if not math.isfinite(number):
            return None
        return int(number) if number.is_integer() else number
    return None


def coerce_score(value: Any) -> float | int | None:
    number = coerce_number(value)
    if number is None:
        return None
    return min(max(number, SCORE_MIN), SCORE_MAX)


def coerce_bool(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def coerce_optional_str(value: Any) -> str | None:
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, (int, float)) and not isinstance(value, bool) and _is_finite(value):
        return str(value)
    return None


def coerce_str(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def normalize_program(entry: dict[str, Any]) -> CandidateProgram:
    return CandidateProgram(
        name=coerce_str(entry.get("name")),
        school=coerce_str(entry.get("school")),
        url=coerce_str(entry.get("url")),
        why=coerce_str(entry.get("why")),
        tuition=coerce_number(entry.get("tuition")),
        min_gpa=coerce_optional_str(entry.get("minGpa")),
        test_policy=coerce_optional_str(entry.get("testPolicy")),
        stem=coerce_bool(entry.get("stem")),
        deadline=coerce_optional_str(entry.get("deadline")),
        score=coerce_score(entry.get("score")),
    )


def normalize_programs(entries: list[Any], limit: int = MAX_PROGRAMS) -> tuple[CandidateProgram, ...]:
    """Keep the first ``limit`` entries; entries that are not objects are dropped."""
    return tuple(normalize_program(entry) for entry in entries[:limit] if isinstance(entry, dict))
