"""Request orchestration: search, optional extraction, assembly."""

from api.base_client import BaseCompletionClient
from api.openai_client import OpenAIResponsesClient
from config.config import Settings
from models.finder_result import FinderResult
from models.preferences import PreferenceSet
from tools.web.factory import create_search_client
from tools.web.tavily_client import TavilySearchClient
from utils.logger import get_logger

from .extraction import ExtractionAdapter
from .fallback_manager import FallbackManager, FallbackPolicy

logger = get_logger(__name__)


class ProgramFinder:
    """
    Runs the find-programs pipeline for one preference set.

    Holds no per-request state; a single instance serves concurrent requests.
    """

    def __init__(
        self,
        search_client: TavilySearchClient,
        extraction: ExtractionAdapter,
        fallback_manager: FallbackManager | None = None,
    ):
        self.search_client = search_client
        self.extraction = extraction
        self.fallback_manager = fallback_manager or FallbackManager()

    @classmethod
    def from_settings(
        cls, settings: Settings, completion_client: BaseCompletionClient | None = None
    ) -> "ProgramFinder":
        if completion_client is None and settings.openai_api_key:
            completion_client = OpenAIResponsesClient(
                api_key=settings.openai_api_key,
                model_name=settings.openai_model,
                base_url=settings.openai_base_url,
                timeout_s=settings.openai_timeout_s,
            )
        return cls(
            search_client=create_search_client(settings),
            extraction=ExtractionAdapter(
                completion_client,
                max_output_tokens=settings.openai_max_output_tokens,
                temperature=settings.openai_temperature,
            ),
            fallback_manager=FallbackManager(
                FallbackPolicy(require_structured_output=settings.require_structured_output)
            ),
        )

    async def find(self, preferences: PreferenceSet) -> FinderResult:
        """
        Raises:
            FinderError: any terminal condition (configuration, upstream, no results, 424)
        """
        search = await self.search_client.search(preferences)
        extraction = await self.extraction.extract(preferences, search.query, search.digest)
        result = self.fallback_manager.assemble(
            preferences=preferences, search=search, extraction=extraction
        )
        logger.info(
            "Find-programs request complete",
            extra={
                "extra_fields": {
                    "extraction_outcome": extraction.outcome.value,
                    "snippet_count": len(search.snippets),
                    "program_count": result.count,
                }
            },
        )
        return result
