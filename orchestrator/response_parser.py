"""Locate generated text in a completion payload and recover JSON from it."""

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

TextExtractor = Callable[[dict[str, Any]], str | None]


def _non_empty(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _first_item(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def extract_output_text(payload: dict[str, Any]) -> str | None:
    """Responses API convenience field: ``output_text``."""
    return _non_empty(payload.get("output_text"))


def extract_output_content(payload: dict[str, Any]) -> str | None:
    """Responses API items: first non-empty ``output[*].content[*].text``."""
    output = payload.get("output")
    if not isinstance(output, list):
        return None
    for item in output:
        content = item.get("content") if isinstance(item, dict) else None
        if not isinstance(content, list):
            continue
        for part in content:
            text = _non_empty(part.get("text")) if isinstance(part, dict) else None
            if text:
                return text
    return None


def extract_chat_message(payload: dict[str, Any]) -> str | None:
    """Chat Completions shape: ``choices[0].message.content``."""
    choice = _first_item(payload.get("choices"))
    message = choice.get("message") if isinstance(choice, dict) else None
    if isinstance(message, dict):
        return _non_empty(message.get("content"))
    return None


def extract_legacy_completion(payload: dict[str, Any]) -> str | None:
    """Legacy Completions shape: ``choices[0].text``."""
    choice = _first_item(payload.get("choices"))
    if isinstance(choice, dict):
        return _non_empty(choice.get("text"))
    return None


# Priority order; first non-empty wins.
TEXT_EXTRACTORS: tuple[TextExtractor, ...] = (
    extract_output_text,
    extract_output_content,
    extract_chat_message,
    extract_legacy_completion,
)


def extract_text(payload: dict[str, Any], extractors: tuple[TextExtractor, ...] = TEXT_EXTRACTORS) -> str:
    for extractor in extractors:
        text = extractor(payload)
        if text:
            return text
    return ""


def find_balanced_object(text: str) -> str | None:
    """
    Return the first balanced ``{...}`` substring, or None.

    Braces inside JSON string literals are ignored.
    """
    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for idx in range(start, len(text)):
        char = text[idx]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start : idx + 1]
    return None


@dataclass(frozen=True)
class ParseResult:
    ok: bool
    value: Any = None
    stage: str = "none"  # "strict" | "brace" | "none"


def parse_json_payload(text: str) -> ParseResult:
    """Strict parse, then brace-substring parse. Never raises."""
    if not text or not text.strip():
        return ParseResult(ok=False)

    try:
        return ParseResult(ok=True, value=json.loads(text), stage="strict")
    except ValueError:
        pass

    candidate = find_balanced_object(text)
    if candidate is None:
        return ParseResult(ok=False)
    try:
        return ParseResult(ok=True, value=json.loads(candidate), stage="brace")
    except ValueError:
        return ParseResult(ok=False)
