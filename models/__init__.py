"""
Request-scoped value objects for the find-programs pipeline.
"""

from .errors import (
    ConfigurationError,
    FinderError,
    NoResultsError,
    StructuredOutputRequiredError,
    UpstreamError,
)
from .finder_result import FinderResult
from .preferences import PreferenceSet
from .program import FALLBACK_PROGRAM_NAME, CandidateProgram

__all__ = [
    "FALLBACK_PROGRAM_NAME",
    "CandidateProgram",
    "ConfigurationError",
    "FinderError",
    "FinderResult",
    "NoResultsError",
    "PreferenceSet",
    "StructuredOutputRequiredError",
    "UpstreamError",
]
