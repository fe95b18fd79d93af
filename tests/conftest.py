import json

import httpx
import pytest

from api.openai_client import OpenAIResponsesClient
from config.config import Settings
from orchestrator.core import ProgramFinder
from orchestrator.extraction import ExtractionAdapter
from orchestrator.fallback_manager import FallbackManager, FallbackPolicy
from tools.web.tavily_client import TavilySearchClient

TEST_TAVILY_KEY = "tvly-test-key"
TEST_OPENAI_KEY = "sk-test-key"


def tavily_result(title: str, url: str | None = None, content: str = "Tuition and GPA details.") -> dict:
    return {
        "title": title,
        "url": url or f"https://example.edu/{title.lower().replace(' ', '-')}",
        "content": content,
        "score": 0.9,
    }


def program_entry(name: str, **overrides) -> dict:
    entry = {
        "name": name,
        "school": f"{name} University",
        "tuition": 24000,
        "url": f"https://example.edu/{name.lower()}",
        "minGpa": "3.0",
        "testPolicy": "GRE optional",
        "stem": True,
        "deadline": "2027-01-15",
        "why": "Fits the budget.",
        "score": 88,
    }
    entry.update(overrides)
    return entry


def responses_payload(text: str) -> dict:
    """A Responses API body carrying ``text`` in output[0].content[0].text."""
    return {
        "id": "resp_test",
        "object": "response",
        "status": "completed",
        "model": "gpt-4o-mini",
        "output": [
            {
                "type": "message",
                "id": "msg_test",
                "role": "assistant",
                "status": "completed",
                "content": [{"type": "output_text", "text": text, "annotations": []}],
            }
        ],
    }


class RecordingTransport:
    """Builds an httpx.MockTransport that records every request it serves."""

    def __init__(self, status_code: int = 200, body=None, text: str | None = None):
        self.status_code = status_code
        self.body = body
        self.text = text
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def settings():
    return Settings(tavily_api_key=TEST_TAVILY_KEY, openai_api_key=TEST_OPENAI_KEY)


@pytest.fixture
def make_finder():
    """
    Factory wiring a ProgramFinder to mocked Tavily and OpenAI transports.

    Pass ``openai=None`` to simulate a missing OpenAI credential.
    """

    def _make(
        tavily: RecordingTransport,
        openai: RecordingTransport | None = None,
        *,
        tavily_key: str | None = TEST_TAVILY_KEY,
        require_structured_output: bool = False,
    ) -> ProgramFinder:
        completion_client = None
        if openai is not None:
            completion_client = OpenAIResponsesClient(
                api_key=TEST_OPENAI_KEY,
                http_client=httpx.AsyncClient(transport=openai.transport()),
            )
        return ProgramFinder(
            search_client=TavilySearchClient(tavily_key, transport=tavily.transport()),
            extraction=ExtractionAdapter(completion_client),
            fallback_manager=FallbackManager(
                FallbackPolicy(require_structured_output=require_structured_output)
            ),
        )

    return _make
