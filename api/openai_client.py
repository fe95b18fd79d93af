from typing import Any

import httpx
import openai

from utils.logger import get_logger

from .base_client import BaseCompletionClient, CompletionHTTPError

logger = get_logger(__name__)


class OpenAIResponsesClient(BaseCompletionClient):
    """
    OpenAI Responses API client.

    SDK retries are disabled: each request makes exactly one attempt. The raw
    HTTP body is returned undecoded by the SDK's models so that every known
    response shape stays reachable.
    """

    provider_name = "OpenAI"

    def __init__(
        self,
        api_key: str,
        model_name: str = "gpt-4o-mini",
        *,
        base_url: str | None = None,
        timeout_s: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
        **kwargs,
    ):
        """
        Args:
            api_key: The OpenAI API key
            model_name: Model identifier sent with every request
            base_url: Optional OpenAI-compatible endpoint
            timeout_s: Timeout for the single completion call
            http_client: Optional httpx client (tests pass one with a MockTransport)
        """
        super().__init__(api_key, model_name=model_name, **kwargs)
        self.model_name = model_name
        self.client = openai.AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout_s,
            max_retries=0,
            http_client=http_client,
        )

    async def complete(
        self, system: str, user: str, *, max_output_tokens: int, temperature: float
    ) -> dict[str, Any]:
        try:
            raw = await self.client.responses.with_raw_response.create(
                model=self.model_name,
                input=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                max_output_tokens=max_output_tokens,
                temperature=temperature,
            )
        except openai.APIStatusError as exc:
            raise CompletionHTTPError(self.provider_name, exc.status_code, exc.response.text) from exc
        except openai.APIConnectionError as exc:
            raise CompletionHTTPError(self.provider_name, None, str(exc)) from exc

        logger.info(
            "OpenAI completion received",
            extra={
                "extra_fields": {
                    "model": self.model_name,
                    "status": raw.http_response.status_code,
                }
            },
        )

        try:
            payload = raw.http_response.json()
        except ValueError:
            # Non-JSON body on a success status: nothing to probe
            return {}
        return payload if isinstance(payload, dict) else {}
