"""
Shopify Client - Handles communication with the Shopify Admin REST API
"""
import httpx
import structlog
from typing import Dict, Any, Optional

from analytics_relay.agent.resource_resolver import normalize_store_domain
from analytics_relay.core.errors import RelayError, UpstreamRequestError
from analytics_relay.models.schemas import ReportQuery

logger = structlog.get_logger()


class ShopifyClient:
    """
    Client for reading store resources from the Shopify Admin REST API.
    """

    def __init__(
        self,
        store_domain: str,
        access_token: str,
        api_version: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.store_domain = normalize_store_domain(store_domain)
        self.access_token = access_token
        self.api_version = api_version
        self.timeout = timeout
        self._transport = transport
        self.base_url = f"https://{self.store_domain}/admin/api/{self.api_version}"

    def _get_headers(self) -> Dict[str, str]:
        """Get headers for Shopify API requests"""
        return {
            "Content-Type": "application/json",
            "X-Shopify-Access-Token": self.access_token
        }

    def resource_url(self, resource: str) -> str:
        return f"{self.base_url}/{resource}.json"

    async def fetch_report(self, query: ReportQuery, report_type: str) -> Dict[str, Any]:
        """
        Fetch a single page of a resource.

        Args:
            query: Resolved resource and query parameters
            report_type: Report tag the caller asked for, used in errors

        Returns:
            Parsed JSON object exactly as Shopify returned it

        Raises:
            UpstreamRequestError: Shopify answered with a non-success status
            RelayError: The body is not a JSON object
        """
        logger.info("Fetching Shopify resource", resource=query.resource, params=query.params)

        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.get(
                self.resource_url(query.resource),
                headers=self._get_headers(),
                params=query.params,
                timeout=self.timeout
            )

            if not response.is_success:
                logger.error(
                    "Shopify API request failed",
                    report_type=report_type,
                    status=response.status_code,
                    body=response.text[:500]
                )
                raise UpstreamRequestError(report_type, response.status_code)

            data = response.json()

        if not isinstance(data, dict):
            logger.error("Shopify returned a non-object body", report_type=report_type, body_type=type(data).__name__)
            raise RelayError(f"Shopify API returned an unexpected response for '{report_type}' report")

        return data
