"""
FastAPI dependencies that hand configured components to the routes
"""
from fastapi import Depends, Request

from analytics_relay.agent.llm_client import GeminiClient
from analytics_relay.agent.report_analyst import ReportAnalyst
from analytics_relay.agent.shopify_client import ShopifyClient
from analytics_relay.core.config import Settings
from analytics_relay.core.errors import ConfigurationError


def get_settings(request: Request) -> Settings:
    """Settings built once at startup and attached to the application"""
    return request.app.state.settings


def require_configuration(settings: Settings = Depends(get_settings)) -> Settings:
    """Reject the request when any required secret is missing"""
    missing = settings.missing_secrets()
    if missing:
        raise ConfigurationError(missing)
    return settings


def get_shopify_client(settings: Settings = Depends(require_configuration)) -> ShopifyClient:
    return ShopifyClient(
        store_domain=settings.SHOPIFY_STORE_DOMAIN,
        access_token=settings.SHOPIFY_ACCESS_TOKEN,
        api_version=settings.SHOPIFY_API_VERSION,
        timeout=settings.REQUEST_TIMEOUT
    )


def get_llm_client(settings: Settings = Depends(require_configuration)) -> GeminiClient:
    return GeminiClient(
        api_key=settings.GEMINI_API_KEY,
        model=settings.GEMINI_MODEL,
        base_url=settings.GEMINI_API_BASE_URL,
        timeout=settings.AI_REQUEST_TIMEOUT
    )


def get_report_analyst(
    shopify_client: ShopifyClient = Depends(get_shopify_client),
    llm_client: GeminiClient = Depends(get_llm_client)
) -> ReportAnalyst:
    return ReportAnalyst(shopify_client, llm_client)
