"""Configuration and settings"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bizbuilder.models.errors import ConfigurationError


DEFAULT_GATEWAY_URL = "https://ai.gateway.lovable.dev/v1"
DEFAULT_TEXT_MODEL = "google/gemini-2.5-flash"
DEFAULT_IMAGE_MODEL = "google/gemini-2.5-flash-image"


class GatewayConfig(BaseModel):
    """Everything the generation flow needs to reach the AI gateway.

    Built once per request from :class:`Settings` and handed to the
    orchestrator, so nothing below the API layer reads the environment.
    """
    model_config = ConfigDict(frozen=True)

    api_key: str
    base_url: str = DEFAULT_GATEWAY_URL
    text_model: str = DEFAULT_TEXT_MODEL
    image_model: str = DEFAULT_IMAGE_MODEL
    image_concurrency: int = Field(default=4, ge=1)
    timeout_seconds: Optional[float] = None


class Settings(BaseSettings):
    """Application settings from environment variables"""

    # AI gateway (OpenAI-compatible chat completions)
    ai_gateway_api_key: str = Field(default="")
    ai_gateway_url: str = Field(default=DEFAULT_GATEWAY_URL)
    text_model: str = Field(default=DEFAULT_TEXT_MODEL)
    image_model: str = Field(default=DEFAULT_IMAGE_MODEL)

    # Upper bound on image calls in flight; 1 issues them one after another
    image_concurrency: int = Field(default=4, ge=1)

    # Unset keeps the HTTP client's default timeout
    gateway_timeout_seconds: Optional[float] = Field(default=None)

    # Server
    backend_host: str = Field(default="127.0.0.1")
    backend_port: int = Field(default=8000)
    cors_allow_origins: List[str] = Field(default=["*"])

    # Logging
    log_level: str = Field(default="INFO")

    # API Configuration
    api_title: str = "BizBuilder AI"
    api_version: str = "0.1.0"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    def gateway_config(self) -> GatewayConfig:
        """Resolve the gateway configuration, failing if the API key is absent"""
        if not self.ai_gateway_api_key:
            raise ConfigurationError(
                "AI_GATEWAY_API_KEY not configured",
                hint="Set AI_GATEWAY_API_KEY in the environment or .env file.",
            )
        return GatewayConfig(
            api_key=self.ai_gateway_api_key,
            base_url=self.ai_gateway_url,
            text_model=self.text_model,
            image_model=self.image_model,
            image_concurrency=self.image_concurrency,
            timeout_seconds=self.gateway_timeout_seconds,
        )


# Global settings instance
settings = Settings()
