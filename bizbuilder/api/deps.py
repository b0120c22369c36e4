"""Request-scoped dependencies shared by the routers"""

from typing import Optional

import httpx

from bizbuilder.core.config import GatewayConfig, settings


def get_gateway_config() -> GatewayConfig:
    """Gateway configuration for this request; raises ConfigurationError without an API key"""
    return settings.gateway_config()


def get_http_client() -> Optional[httpx.AsyncClient]:
    """Transport override for the gateway SDK; None uses the SDK's own client"""
    return None
