"""POST /api/generate-website endpoint"""

import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Depends

from bizbuilder.api.deps import get_gateway_config, get_http_client
from bizbuilder.core.config import GatewayConfig
from bizbuilder.core.orchestrator import orchestrate_generation
from bizbuilder.models.schemas import ErrorResponse, GeneratedWebsite, GenerationRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/generate-website",
    response_model=GeneratedWebsite,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_website(
    request: GenerationRequest,
    config: GatewayConfig = Depends(get_gateway_config),
    http_client: Optional[httpx.AsyncClient] = Depends(get_http_client),
) -> GeneratedWebsite:
    """
    Generate a website from a business description.

    Flow:
    1. Content Requester asks the text model for structured copy
    2. Image Requester asks the image model for hero + gallery images
    3. Site Assembler renders index.html and styles.css

    Content or configuration failures return 500 ``{"error": ...}``
    (see the ApplicationError handler in main); image failures only
    leave the corresponding image out.
    """
    logger.info(f"[ENDPOINT] POST /api/generate-website received | prompt_chars={len(request.prompt)}")
    return await orchestrate_generation(request.prompt, config, http_client=http_client)
