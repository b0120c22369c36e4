"""Generation orchestrator: content -> images -> assembled site"""

import logging
import time
from typing import Optional

import httpx

from bizbuilder.core.config import GatewayConfig
from bizbuilder.core.content_requester import ContentRequester
from bizbuilder.core.gateway import GatewayClient
from bizbuilder.core.image_requester import ImageRequester
from bizbuilder.core.site_assembler import assemble_site
from bizbuilder.models.errors import PromptValidationError
from bizbuilder.models.schemas import GeneratedWebsite

logger = logging.getLogger(__name__)


async def orchestrate_generation(
    prompt: str,
    config: GatewayConfig,
    http_client: Optional[httpx.AsyncClient] = None,
    year: Optional[int] = None,
) -> GeneratedWebsite:
    """
    Generate a complete website for a business description.

    Steps:
    1) Content Requester: structured copy via forced tool call (fatal on failure)
    2) Image Requester: hero + gallery images (per-image failures are skipped)
    3) Site Assembler: index.html + styles.css from fixed templates

    Args:
        prompt: Business description, must not be blank
        config: Gateway configuration (API key, base URL, models)
        http_client: Optional transport for the OpenAI SDK
        year: Pin the footer copyright year

    Raises:
        PromptValidationError: blank prompt
        UpstreamError / MalformedResponseError: content generation failed
    """
    if not prompt or not prompt.strip():
        raise PromptValidationError("Please enter a business description")

    started = time.monotonic()
    logger.info(f"[GENERATE] Generating website | prompt_chars={len(prompt)}")

    async with GatewayClient(config, http_client=http_client) as gateway:
        # Step 1: content
        logger.info("[GENERATE] Step 1/3: requesting website content...")
        content = await ContentRequester(gateway).request(prompt)

        # Step 2: images
        logger.info(f"[GENERATE] Step 2/3: requesting images | business_type={content.business_type}")
        images = await ImageRequester(gateway).request_images(
            business_name=content.business_name,
            business_type=content.business_type,
        )

    # Step 3: templating
    logger.info("[GENERATE] Step 3/3: assembling HTML and CSS...")
    site = assemble_site(content, images, year=year)

    website = GeneratedWebsite.assemble(content, images, site)
    logger.info(
        f"[GENERATE] Website generation complete | business_name={website.business_name} | "
        f"html_chars={len(website.html)} | elapsed={time.monotonic() - started:.1f}s"
    )
    return website
