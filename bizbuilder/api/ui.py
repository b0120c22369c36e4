"""Server-rendered BizBuilder page"""

import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse

from bizbuilder.api.deps import get_gateway_config, get_http_client
from bizbuilder.client import EMPTY_PROMPT_MESSAGE
from bizbuilder.core.orchestrator import orchestrate_generation
from bizbuilder.models.errors import ApplicationError
from bizbuilder.preview.renderer import PageMessage, PreviewState, render_page

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    return HTMLResponse(render_page(PreviewState()))


@router.post("/", response_class=HTMLResponse)
async def generate_from_form(
    prompt: str = Form(""),
    http_client: Optional[httpx.AsyncClient] = Depends(get_http_client),
) -> HTMLResponse:
    """Generate from the form prompt and render the tabbed preview"""
    state = PreviewState(prompt=prompt)

    if not prompt.strip():
        state.message = PageMessage(level="error", text=EMPTY_PROMPT_MESSAGE)
        return HTMLResponse(render_page(state), status_code=400)

    try:
        state.website = await orchestrate_generation(prompt, get_gateway_config(), http_client=http_client)
    except ApplicationError as e:
        logger.error(f"[UI] Generation failed | {e.model_dump()}")
        state.message = PageMessage(level="error", text=e.message or "Failed to generate website")
        return HTMLResponse(render_page(state), status_code=e.http_status)

    state.message = PageMessage(level="success", text="Website generated successfully!")
    return HTMLResponse(render_page(state))
