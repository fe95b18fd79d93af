"""Structured program extraction from search results via a language model."""

import re
from typing import Any

from api.base_client import BaseCompletionClient, CompletionHTTPError
from models.errors import UpstreamError
from models.preferences import PreferenceSet
from utils.logger import get_logger

from .extraction_types import ExtractionOutcome, ExtractionResult
from .program_normalizer import MAX_PROGRAMS, normalize_programs
from .response_parser import extract_text, parse_json_payload

logger = get_logger(__name__)

_QUOTA_PATTERN = re.compile(r"quota|rate[\s_-]?limit|too many requests", re.I)

SYSTEM_PROMPT = f"""You are a graduate program matching assistant. Return pure JSON, no markdown.
Schema:
{{
  "ok": true,
  "programs": [
    {{
      "name": "string",
      "school": "string",
      "tuition": number | null,
      "url": "string",
      "minGpa": "string" | null,
      "testPolicy": "string" | null,
      "stem": true | false | null,
      "deadline": "string" | null,
      "why": "string",
      "score": number | null
    }}
  ],
  "notes": "string"
}}
Rules:
- At most {MAX_PROGRAMS} items in "programs", best match first.
- Only include facts supported by the provided web snippets.
- Unknown values are null, or "unknown" for text fields.
- tuition is an annual USD estimate as a bare number (no currency symbols, no commas).
- score is 0-100: how well the program fits the user's GPA, budget and preferences.
- "why" is one sentence on the fit (budget, GPA, test policy).
"""


def build_user_prompt(preferences: PreferenceSet, search_query: str, digest: str) -> str:
    stem = "yes" if preferences.stem_only else "no"
    return (
        f"User: GPA {preferences.gpa}, budget ${preferences.budget}/year, "
        f"field {preferences.field}, state {preferences.state_filter}, STEM only: {stem}.\n"
        f"Search query: {search_query}\n"
        f"Pick the best {MAX_PROGRAMS} programs from these web snippets and return JSON only.\n\n"
        f"Snippets:\n{digest}"
    )


def is_quota_error(error: CompletionHTTPError) -> bool:
    if error.status == 429:
        return True
    return error.status is not None and bool(_QUOTA_PATTERN.search(error.body))


class ExtractionAdapter:
    """
    Runs the optional model call and classifies its outcome.

    Only a non-quota upstream failure escapes as an exception; every other
    problem becomes an ExtractionResult carrying a note.
    """

    def __init__(
        self,
        client: BaseCompletionClient | None,
        *,
        max_output_tokens: int = 800,
        temperature: float = 0.2,
    ):
        self.client = client
        self.max_output_tokens = max_output_tokens
        self.temperature = temperature

    async def extract(
        self, preferences: PreferenceSet, search_query: str, digest: str
    ) -> ExtractionResult:
        """
        Raises:
            UpstreamError: The provider failed for a reason other than quota/rate limiting
        """
        if not preferences.extraction_enabled:
            return ExtractionResult.fallback(ExtractionOutcome.DISABLED)
        if self.client is None:
            logger.warning("OPENAI_API_KEY not configured; skipping extraction")
            return ExtractionResult.fallback(ExtractionOutcome.MISSING_CREDENTIAL)

        try:
            payload = await self.client.complete(
                SYSTEM_PROMPT,
                build_user_prompt(preferences, search_query, digest),
                max_output_tokens=self.max_output_tokens,
                temperature=self.temperature,
            )
        except CompletionHTTPError as exc:
            if is_quota_error(exc):
                logger.warning(
                    "Completion provider quota/rate limit hit; falling back to snippets",
                    extra={"extra_fields": {"status": exc.status}},
                )
                return ExtractionResult.fallback(ExtractionOutcome.QUOTA)
            logger.error(
                "Completion provider failed",
                extra={"extra_fields": {"status": exc.status, "provider": exc.provider}},
            )
            raise UpstreamError(exc.provider, exc.status, exc.body) from exc

        return self.interpret(payload)

    def interpret(self, payload: dict[str, Any]) -> ExtractionResult:
        """Turn a successful provider payload into an extraction result."""
        text = extract_text(payload)
        parsed = parse_json_payload(text)
        if not parsed.ok:
            logger.warning(
                "Model output was not parseable JSON",
                extra={"extra_fields": {"text_length": len(text)}},
            )
            return ExtractionResult.fallback(ExtractionOutcome.UNPARSEABLE)

        value = parsed.value
        programs_raw = value.get("programs") if isinstance(value, dict) else None
        if not isinstance(programs_raw, list):
            logger.warning(
                "Model output had an unexpected shape",
                extra={"extra_fields": {"value_type": type(value).__name__, "parse_stage": parsed.stage}},
            )
            return ExtractionResult.fallback(ExtractionOutcome.UNEXPECTED_SHAPE)

        notes = value.get("notes")
        note = notes if isinstance(notes, str) else None
        programs = normalize_programs(programs_raw)
        if not programs:
            return ExtractionResult.fallback(ExtractionOutcome.NO_PROGRAMS, note)

        logger.info(
            "Structured extraction succeeded",
            extra={
                "extra_fields": {
                    "returned": len(programs_raw),
                    "kept": len(programs),
                    "parse_stage": parsed.stage,
                }
            },
        )
        return ExtractionResult(outcome=ExtractionOutcome.SUCCESS, programs=programs, note=note)
