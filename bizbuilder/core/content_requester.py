"""Content requester: structured website copy via a forced tool call"""

import json
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from bizbuilder.core.gateway import GatewayClient
from bizbuilder.core.prompts import (
    CONTENT_SYSTEM_PROMPT,
    CONTENT_TOOL_CHOICE,
    CONTENT_TOOL_NAME,
    WEBSITE_CONTENT_TOOL,
)
from bizbuilder.models.errors import MalformedResponseError
from bizbuilder.models.schemas import WebsiteContent

logger = logging.getLogger(__name__)


class ContentRequester:
    """Asks the text model for a WebsiteContent through the generate_website_content tool"""

    def __init__(self, gateway: GatewayClient, model: Optional[str] = None):
        self.gateway = gateway
        self.model = model or gateway.config.text_model

    def build_request(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": CONTENT_SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "tools": [WEBSITE_CONTENT_TOOL],
            "tool_choice": CONTENT_TOOL_CHOICE,
        }

    async def request(self, prompt: str) -> WebsiteContent:
        """
        Generate website copy for a business description.

        Raises:
            UpstreamError: the gateway call failed
            MalformedResponseError: no tool call, or its arguments do not parse
                into WebsiteContent
        """
        response = await self.gateway.chat_completion(purpose="content", **self.build_request(prompt))

        if not response.choices:
            raise MalformedResponseError("AI response contained no choices")

        tool_calls = response.choices[0].message.tool_calls
        if not tool_calls:
            logger.error("[CONTENT] Model declined structured output (no tool call)")
            raise MalformedResponseError("AI did not return structured data")

        function = getattr(tool_calls[0], "function", None)
        if function is None:
            raise MalformedResponseError("AI did not return structured data")
        if function.name and function.name != CONTENT_TOOL_NAME:
            logger.warning(f"[CONTENT] Unexpected tool name | name={function.name}")

        return parse_tool_arguments(function.arguments)


def parse_tool_arguments(arguments: Any) -> WebsiteContent:
    """Parse the tool-call arguments (a JSON string) into WebsiteContent"""
    if isinstance(arguments, str):
        try:
            arguments = json.loads(arguments)
        except json.JSONDecodeError as e:
            logger.error(f"[CONTENT] Tool arguments are not valid JSON | error={e}")
            raise MalformedResponseError(f"Could not parse structured data: {e}") from e

    if not isinstance(arguments, dict):
        raise MalformedResponseError("Structured data is not a JSON object")

    try:
        content = WebsiteContent.model_validate(arguments)
    except ValidationError as e:
        logger.error(f"[CONTENT] Tool arguments do not match schema | errors={e.error_count()}")
        raise MalformedResponseError(f"Structured data does not match the website schema: {e}") from e

    logger.info(
        f"[CONTENT] Parsed content | business_name={content.business_name} | "
        f"business_type={content.business_type} | services={len(content.services)} | "
        f"testimonials={len(content.testimonials)}"
    )
    return content
