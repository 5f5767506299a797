"""
Report Analyst - Orchestrates a single relay request

The analyst runs two sequential workflows:
1. Report: resolve the resource, fetch it from Shopify, ask Gemini for an analysis
2. Chat: answer a follow-up question about report data the dashboard already holds
"""
import structlog
from datetime import datetime
from typing import Dict, Any, Optional, Union

from analytics_relay.agent.llm_client import GeminiClient
from analytics_relay.agent.prompt_builder import build_analysis_prompt, build_chat_prompt
from analytics_relay.agent.resource_resolver import resolve_report_query
from analytics_relay.agent.shopify_client import ShopifyClient
from analytics_relay.core.errors import ValidationError
from analytics_relay.models.schemas import ChatRequest, ReportType

logger = structlog.get_logger()


class ReportAnalyst:
    """
    Combines the Shopify and Gemini clients into the relay's two workflows.
    Holds no state between requests.
    """

    def __init__(self, shopify_client: ShopifyClient, llm_client: GeminiClient):
        self.shopify_client = shopify_client
        self.llm_client = llm_client

    async def generate_report(
        self,
        report: Optional[str],
        days: Optional[Union[str, int]] = None,
        now: Optional[datetime] = None
    ) -> Dict[str, Any]:
        """
        Fetch a report from Shopify and analyze it.

        Args:
            report: Raw report tag; unknown tags fall back to orders
            days: Look-back window for time-based reports
            now: Reference time for the window

        Returns:
            Dictionary with the raw Shopify data and the analysis text
        """
        report_type = ReportType.parse(report).value
        query = resolve_report_query(report_type, days, now=now)
        logger.info("Report resolved", report_type=report_type, resource=query.resource)

        shopify_data = await self.shopify_client.fetch_report(query, report_type)

        prompt = build_analysis_prompt(shopify_data, report_type)
        analysis = await self.llm_client.generate(prompt)
        logger.info("Analysis generated", report_type=report_type, analysis_chars=len(analysis))

        return {
            "shopifyData": shopify_data,
            "analysis": analysis
        }

    async def answer_question(self, request: ChatRequest) -> Dict[str, Any]:
        """
        Answer a follow-up question from the supplied report data only.

        Raises:
            ValidationError: question, reportData or reportType is missing
        """
        missing = request.missing_fields()
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        logger.info("Answering follow-up", report_type=request.report_type, question=request.question[:100])

        prompt = build_chat_prompt(request.question, request.report_data, request.report_type)
        answer = await self.llm_client.generate(prompt)

        return {"answer": answer}
