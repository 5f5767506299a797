"""
Resource Resolver - Maps a report type and time window to a Shopify REST resource

The relay is permissive: unknown report types and unusable day counts fall
back to defaults instead of failing the request.
"""
import re
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Union

from analytics_relay.models.schemas import ReportType, ReportQuery, TimeWindow

DEFAULT_DAYS = 30
MAX_DAYS = 36500
PAGE_LIMIT = 250

# Reports bounded by a creation-date window
TIME_BASED_REPORTS = frozenset({
    ReportType.ORDERS,
    ReportType.DRAFT_ORDERS,
    ReportType.FULFILLMENTS,
    ReportType.MARKETING_EVENTS,
})

# Admin REST resource for each report type
RESOURCE_PATHS: Dict[ReportType, str] = {
    ReportType.ORDERS: "orders",
    ReportType.PRODUCTS: "products",
    ReportType.CUSTOMERS: "customers",
    ReportType.DRAFT_ORDERS: "draft_orders",
    ReportType.FULFILLMENTS: "fulfillments",
    ReportType.LOCATIONS: "locations",
    ReportType.MARKETING_EVENTS: "marketing_events",
    ReportType.THEMES: "themes",
    ReportType.PAGES: "pages",
    ReportType.SCRIPT_TAGS: "script_tags",
    ReportType.SHIPPING_ZONES: "shipping_zones",
    ReportType.COMPANIES: "companies",
    ReportType.DISCOUNTS: "price_rules",
    ReportType.INVENTORY_LEVELS: "inventory_levels",
}

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


def normalize_store_domain(domain: str) -> str:
    """Strip a leading http(s) scheme and trailing slashes from a store domain"""
    return _SCHEME_RE.sub("", domain.strip()).rstrip("/")


def parse_days(value: Optional[Union[str, int]]) -> int:
    """
    Parse the caller-supplied day count.

    Absent, non-numeric and zero values give the 30 day default;
    other values are clamped to between one day and MAX_DAYS.
    """
    if value is None:
        return DEFAULT_DAYS

    try:
        days = int(str(value).strip())
    except ValueError:
        return DEFAULT_DAYS

    if days == 0:
        return DEFAULT_DAYS
    return min(max(days, 1), MAX_DAYS)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2024-07-01T12:00:00.000Z"""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def resolve_resource(report_type: Optional[str]) -> str:
    """Admin REST resource for a raw report tag"""
    return RESOURCE_PATHS[ReportType.parse(report_type)]


def is_time_based(report_type: Optional[str]) -> bool:
    return ReportType.parse(report_type) in TIME_BASED_REPORTS


def resolve_report_query(
    report_type: Optional[str],
    days: Optional[Union[str, int]] = None,
    now: Optional[datetime] = None
) -> ReportQuery:
    """
    Build the resource path and query parameters for a report.

    Args:
        report_type: Raw report tag from the caller
        days: Look-back window in days (string or int)
        now: Reference time, defaults to the current UTC time

    Returns:
        ReportQuery with parameters in the order Shopify receives them
    """
    window_end = now or datetime.now(timezone.utc)
    window_start = window_end - timedelta(days=parse_days(days))

    params: Dict[str, str] = {}
    window = None

    if is_time_based(report_type):
        window = TimeWindow(start=window_start, end=window_end)
        params["status"] = "any"
        params["created_at_min"] = format_timestamp(window_start)
        params["created_at_max"] = format_timestamp(window_end)

    params["limit"] = str(PAGE_LIMIT)

    return ReportQuery(
        resource=resolve_resource(report_type),
        params=params,
        window=window
    )
