"""
API Routes for the Analytics Relay
"""
import structlog
from fastapi import APIRouter, Depends, Query
from typing import Optional

from analytics_relay.agent.report_analyst import ReportAnalyst
from analytics_relay.agent.resource_resolver import DEFAULT_DAYS, is_time_based, resolve_resource
from analytics_relay.api.dependencies import get_report_analyst, require_configuration
from analytics_relay.core.errors import RelayError
from analytics_relay.models.schemas import (
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    ReportResponse,
    ReportType,
    ReportTypeInfo
)

logger = structlog.get_logger()

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


# Every verb other than POST is a report request
REPORT_METHODS = ["GET", "PUT", "PATCH", "DELETE"]


@router.api_route(
    "/analytics",
    methods=REPORT_METHODS,
    response_model=ReportResponse,
    responses=ERROR_RESPONSES,
    dependencies=[Depends(require_configuration)]
)
async def get_report(
    report: Optional[str] = Query(None, description="Report type, defaults to orders"),
    days: Optional[str] = Query(None, description="Look-back window in days, defaults to 30"),
    analyst: ReportAnalyst = Depends(get_report_analyst)
):
    """
    Fetch a Shopify report and analyze it.

    This endpoint:
    1. Maps the report type to a Shopify resource and time window
    2. Fetches one page of that resource from Shopify
    3. Asks Gemini for an analysis of the data
    4. Returns the raw data together with the analysis
    """
    logger.info("Received report request", report=report, days=days)

    try:
        return await analyst.generate_report(report, days)

    except RelayError as e:
        logger.warning("Report request failed", error=e.message, status=e.status_code)
        raise

    except Exception as e:
        logger.error("Report generation failed", error=str(e), exc_info=True)
        raise RelayError(str(e) or "An internal server error occurred.")


@router.post(
    "/analytics",
    response_model=ChatResponse,
    responses=ERROR_RESPONSES,
    dependencies=[Depends(require_configuration)]
)
async def chat_about_report(
    request: ChatRequest,
    analyst: ReportAnalyst = Depends(get_report_analyst)
):
    """
    Answer a follow-up question about report data the dashboard already holds.
    """
    logger.info("Received chat request", report_type=request.report_type)

    try:
        return await analyst.answer_question(request)

    except RelayError as e:
        logger.warning("Chat request failed", error=e.message, status=e.status_code)
        raise

    except Exception as e:
        logger.error("Chat answer failed", error=str(e), exc_info=True)
        raise RelayError(str(e) or "An internal server error occurred.")


@router.get("/report-types")
async def get_report_types():
    """
    Returns the report types the relay can serve
    """
    return {
        "default_report": ReportType.ORDERS.value,
        "default_days": DEFAULT_DAYS,
        "report_types": [
            ReportTypeInfo(
                report_type=report_type,
                resource=resolve_resource(report_type),
                time_based=is_time_based(report_type)
            )
            for report_type in ReportType
        ]
    }
