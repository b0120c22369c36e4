"""HTTP client for a running BizBuilder backend"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from bizbuilder.models.errors import MalformedResponseError, PromptValidationError, UpstreamError
from bizbuilder.models.schemas import GeneratedWebsite

logger = logging.getLogger(__name__)

EMPTY_PROMPT_MESSAGE = "Please enter a business description"
DEFAULT_API_URL = "http://127.0.0.1:8000"


class WebsiteGeneratorClient:
    """Client to call POST /api/generate-website"""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: Optional[float] = 300.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _client(self, timeout: Optional[float] = None) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else self.timeout,
            transport=self.transport,
        )

    async def generate(self, prompt: str) -> GeneratedWebsite:
        """
        Generate a website for a business description.

        A blank prompt is rejected here, before any request is made.

        Raises:
            PromptValidationError: blank prompt
            UpstreamError: the backend could not be reached or answered with an error
        """
        if not prompt or not prompt.strip():
            raise PromptValidationError(EMPTY_PROMPT_MESSAGE)

        try:
            async with self._client() as client:
                logger.info(f"[CLIENT] Sending POST to {self.base_url}/api/generate-website")
                response = await client.post("/api/generate-website", json={"prompt": prompt})
        except httpx.HTTPError as e:
            logger.error(f"[CLIENT] Cannot reach backend - is it running? Error: {e}")
            raise UpstreamError(
                f"Could not reach {self.base_url}: {e}",
                hint="Start the backend with python -m bizbuilder.main",
            ) from e

        logger.info(f"[CLIENT] Received response | status={response.status_code}")
        if response.status_code != 200:
            error_detail = None
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict) and isinstance(body.get("error"), str):
                error_detail = body["error"]
            raise UpstreamError(error_detail or f"HTTP {response.status_code}", status_code=response.status_code)

        try:
            return GeneratedWebsite.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"[CLIENT] Response does not match GeneratedWebsite | error={e}")
            raise MalformedResponseError(f"Backend returned an invalid website payload: {e}") from e

    async def health_check(self) -> bool:
        """Check if the backend is healthy"""
        try:
            async with self._client(timeout=5.0) as client:
                response = await client.get("/health")
                return response.status_code == 200
        except httpx.HTTPError:
            return False
