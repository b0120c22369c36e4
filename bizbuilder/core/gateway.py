"""OpenAI SDK wrapper for the AI gateway"""

import logging
from typing import Any, Dict, List, Optional

import httpx
from openai import APIError, APIStatusError, AsyncOpenAI
from openai.types.chat import ChatCompletion

from bizbuilder.core.config import GatewayConfig
from bizbuilder.models.errors import MalformedResponseError, UpstreamError

logger = logging.getLogger(__name__)


class GatewayClient:
    """
    Thin async wrapper around the OpenAI-compatible gateway.

    Both the content and the image requesters go through
    :meth:`chat_completion`, which turns SDK failures into
    :class:`UpstreamError`. SDK-level retries are disabled: one call per
    request, no backoff.
    """

    def __init__(self, config: GatewayConfig, http_client: Optional[httpx.AsyncClient] = None):
        self.config = config
        kwargs: Dict[str, Any] = {
            "api_key": config.api_key,
            "base_url": config.base_url,
            "max_retries": 0,
        }
        if config.timeout_seconds is not None:
            kwargs["timeout"] = config.timeout_seconds
        if http_client is not None:
            kwargs["http_client"] = http_client
        self.client = AsyncOpenAI(**kwargs)

    async def __aenter__(self) -> "GatewayClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self.client.close()

    async def chat_completion(
        self,
        model: str,
        messages: List[Dict[str, Any]],
        purpose: str,
        **kwargs,
    ) -> ChatCompletion:
        """
        Send one chat-completion request.

        Args:
            model: Gateway model id
            messages: Chat messages
            purpose: Short label used in logs and error messages
            **kwargs: Extra request fields (tools, tool_choice, extra_body, ...)

        Raises:
            UpstreamError: transport failure or non-2xx status
            MalformedResponseError: 2xx reply that is not a chat completion
        """
        logger.info(f"[GATEWAY] Calling {model} | purpose={purpose}")
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=messages,
                **kwargs,
            )
        except APIStatusError as e:
            logger.error(f"[GATEWAY] {purpose} failed | status={e.status_code} | body={e.message}")
            raise UpstreamError(
                f"{purpose} request failed with status {e.status_code}",
                status_code=e.status_code,
            ) from e
        except APIError as e:
            logger.error(f"[GATEWAY] {purpose} failed | error_type={type(e).__name__} | error={e}")
            raise UpstreamError(f"{purpose} request failed: {e}") from e

        if not isinstance(response, ChatCompletion):
            raise MalformedResponseError(f"{purpose} response was not a chat completion")

        usage = getattr(response, "usage", None)
        logger.info(
            f"[GATEWAY] Response received | purpose={purpose} | "
            f"total_tokens={getattr(usage, 'total_tokens', 'n/a')}"
        )
        return response
