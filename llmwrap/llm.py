"""
llm.py — Transport to the OpenAI Responses API.

One authenticated POST to {api_base}/responses per run, made through the
official `openai` SDK (openai>=1.66, which ships the Responses resource).
The SDK's typed response model is not used: send() returns the raw body text,
which command_translator decodes and matches against several known response
shapes, quoting it verbatim in error messages.

Any OpenAI-compatible endpoint that implements /responses works; point
--api-base (or LLMWRAP_OPENAI_BASE_URL) at it.
"""

from __future__ import annotations

import logging

import httpx
import openai

from .config import Config
from .errors import TransportError
from .models import ResponsesRequest

logger = logging.getLogger("llmwrap.llm")


class ResponsesClient:
    """
    Thin wrapper around openai.OpenAI for the Responses endpoint.

    max_retries=0: exactly one request is made per send().
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        http_client: httpx.Client | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = openai.OpenAI(
            api_key=api_key,
            base_url=self.base_url,
            max_retries=0,
            http_client=http_client,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/responses"

    def send(self, request: ResponsesRequest) -> str:
        """
        POST the request and return the undecoded response body.

        Raises:
            TransportError: connection failure or an HTTP error status.
        """
        body = request.to_dict()
        logger.debug("POST %s (model=%s)", self.endpoint, request.model)
        try:
            raw = self._client.responses.with_raw_response.create(
                model=body["model"],
                input=body["input"],
            )
        except openai.APIStatusError as e:
            raise TransportError(
                f"HTTP status {e.status_code} from {self.endpoint}",
                status_code=e.status_code,
            ) from e
        except openai.APIConnectionError as e:
            raise TransportError(f"Could not connect to {self.endpoint}") from e

        try:
            text = raw.http_response.text
        except httpx.HTTPError as e:
            raise TransportError(f"Failed to read response body from {self.endpoint}") from e

        logger.debug("HTTP %s, %d bytes", raw.http_response.status_code, len(text))
        return text


def get_llm_client(config: Config) -> ResponsesClient:
    """Factory: build the Responses client from the resolved Config."""
    return ResponsesClient(api_key=config.api_key, base_url=config.api_base)
