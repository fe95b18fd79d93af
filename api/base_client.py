from abc import ABC, abstractmethod
from typing import Any


class CompletionHTTPError(Exception):
    """
    A completion provider answered with a non-success status, or could not be reached.

    ``status`` is None for transport failures (timeouts, DNS, refused connections).
    """

    def __init__(self, provider: str, status: int | None, body: str = ""):
        super().__init__(f"{provider} HTTP {status}: {body}" if status else f"{provider}: {body}")
        self.provider = provider
        self.status = status
        self.body = body or ""


class BaseCompletionClient(ABC):
    """
    Abstract base class for language-model completion clients.

    Clients return the provider's raw JSON payload; locating the generated
    text inside it is the caller's job because response shapes differ across
    API revisions.
    """

    provider_name = "unknown"

    def __init__(self, api_key: str, **kwargs):
        """
        Initialize the client.

        Args:
            api_key: API key for the completion service
            **kwargs: Provider-specific options such as ``model_name``
        """
        self.api_key = api_key
        self.model_name = kwargs.get("model_name")

    @abstractmethod
    async def complete(
        self, system: str, user: str, *, max_output_tokens: int, temperature: float
    ) -> dict[str, Any]:
        """
        Send one instruction/context pair and return the decoded JSON body.

        Raises:
            CompletionHTTPError: Non-success status or transport failure
        """
