"""
Shared test fixtures
"""
import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from analytics_relay.api.dependencies import get_llm_client, get_shopify_client
from analytics_relay.core.config import Settings
from main import create_app


@pytest.fixture
def settings():
    """Fully configured settings that never touch the environment file"""
    return Settings(
        _env_file=None,
        SHOPIFY_STORE_DOMAIN="https://test-store.myshopify.com",
        SHOPIFY_ACCESS_TOKEN="shpat_test_token",
        GEMINI_API_KEY="gemini_test_key",
    )


@pytest.fixture
def mock_shopify_client():
    client = MagicMock()
    client.fetch_report = AsyncMock(return_value={
        "orders": [{"id": 1, "total_price": "19.99"}],
        "extra": {"ignored": True}
    })
    return client


@pytest.fixture
def mock_llm_client():
    client = MagicMock()
    client.generate = AsyncMock(return_value="## Summary\nSales are steady.")
    return client


@pytest.fixture
def app(settings, mock_shopify_client, mock_llm_client):
    app = create_app(settings)
    app.dependency_overrides[get_shopify_client] = lambda: mock_shopify_client
    app.dependency_overrides[get_llm_client] = lambda: mock_llm_client
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
