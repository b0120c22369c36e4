"""FastAPI application entry point"""

import logging
import os
import sys

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bizbuilder.api import export, generate, ui
from bizbuilder.core.config import settings
from bizbuilder.models.errors import ApplicationError

# Configure logging early with force=True to override any existing config
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True,
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]

# Create FastAPI app
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
)

# Any origin may call the API (no cookies are used)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=CORS_ALLOW_HEADERS,
)


@app.exception_handler(ApplicationError)
async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    """ApplicationError -> {"error": message} with the mapped status"""
    logger.error(f"[ERROR] {request.method} {request.url.path} | {exc.model_dump()}")
    return JSONResponse(status_code=exc.http_status, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', 'invalid')}"
        for error in exc.errors()
    )
    logger.warning(f"[ERROR] {request.method} {request.url.path} | invalid request | {details}")
    return JSONResponse(status_code=400, content={"error": f"Invalid request: {details}"})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"[ERROR] {request.method} {request.url.path} | unexpected {type(exc).__name__}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Failed to generate website"})


@app.on_event("startup")
async def startup_event():
    """Log startup diagnostic information"""
    logger.info("=" * 60)
    logger.info("BIZBUILDER SERVICE STARTING")
    logger.info("=" * 60)
    logger.info(f"PID: {os.getpid()}")
    logger.info(f"Gateway: {settings.ai_gateway_url}")
    logger.info(f"Text model: {settings.text_model} | Image model: {settings.image_model}")
    logger.info(f"Image concurrency: {settings.image_concurrency}")
    if not settings.ai_gateway_api_key:
        logger.warning("AI_GATEWAY_API_KEY not set - generation requests will fail")
    logger.info("=" * 60)


@app.get("/health")
async def health():
    """Health check for monitoring"""
    return {"status": "healthy", "version": settings.api_version}


# Register routes
app.include_router(generate.router, prefix="/api", tags=["generate"])
app.include_router(export.router, prefix="/api", tags=["export"])
app.include_router(ui.router, tags=["ui"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "bizbuilder.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )
