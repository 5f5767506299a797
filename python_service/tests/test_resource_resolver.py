"""
Resource resolver tests
"""
import pytest
from datetime import datetime, timedelta, timezone

from analytics_relay.agent.resource_resolver import (
    DEFAULT_DAYS,
    MAX_DAYS,
    format_timestamp,
    is_time_based,
    normalize_store_domain,
    parse_days,
    resolve_report_query,
    resolve_resource,
)
from analytics_relay.models.schemas import ReportType


NOW = datetime(2024, 7, 15, 12, 30, 0, tzinfo=timezone.utc)

NON_TIME_BASED = [
    "locations", "themes", "pages", "script_tags", "shipping_zones",
    "companies", "discounts", "inventory_levels", "products", "customers",
]


@pytest.mark.parametrize("report_type,resource", [
    ("orders", "orders"),
    ("products", "products"),
    ("customers", "customers"),
    ("draft_orders", "draft_orders"),
    ("fulfillments", "fulfillments"),
    ("locations", "locations"),
    ("marketing_events", "marketing_events"),
    ("themes", "themes"),
    ("pages", "pages"),
    ("script_tags", "script_tags"),
    ("shipping_zones", "shipping_zones"),
    ("companies", "companies"),
    ("discounts", "price_rules"),
    ("inventory_levels", "inventory_levels"),
])
def test_resource_paths(report_type, resource):
    assert resolve_resource(report_type) == resource
    assert resolve_report_query(report_type, 30, now=NOW).resource == resource


@pytest.mark.parametrize("report_type", ["foo", "", None, "ORDERS"])
def test_unknown_report_falls_back_to_orders(report_type):
    query = resolve_report_query(report_type, 30, now=NOW)
    assert query.resource == "orders"
    assert query.params["status"] == "any"


def test_time_window_for_seven_days():
    query = resolve_report_query("orders", 7, now=NOW)

    assert query.params["created_at_min"] == format_timestamp(NOW - timedelta(days=7))
    assert query.params["created_at_max"] == format_timestamp(NOW)
    assert query.params["created_at_min"] == "2024-07-08T12:30:00.000Z"
    assert query.params["created_at_max"] == "2024-07-15T12:30:00.000Z"
    assert query.window.start == NOW - timedelta(days=7)
    assert query.window.end == NOW


def test_time_based_parameter_order():
    query = resolve_report_query("draft_orders", "14", now=NOW)
    assert list(query.params) == ["status", "created_at_min", "created_at_max", "limit"]
    assert query.params["limit"] == "250"


@pytest.mark.parametrize("report_type", NON_TIME_BASED)
def test_non_time_based_reports_only_set_limit(report_type):
    query = resolve_report_query(report_type, 7, now=NOW)
    assert query.params == {"limit": "250"}
    assert query.window is None
    assert not is_time_based(report_type)


@pytest.mark.parametrize("report_type", ["orders", "draft_orders", "fulfillments", "marketing_events"])
def test_time_based_reports(report_type):
    assert is_time_based(report_type)
    assert "created_at_min" in resolve_report_query(report_type, now=NOW).params


@pytest.mark.parametrize("value,expected", [
    (None, DEFAULT_DAYS),
    ("", DEFAULT_DAYS),
    ("abc", DEFAULT_DAYS),
    ("7.5", DEFAULT_DAYS),
    ("0", DEFAULT_DAYS),
    ("14", 14),
    (" 90 ", 90),
    (7, 7),
    ("-5", 1),
    ("36500", MAX_DAYS),
    ("1000000", MAX_DAYS),
    (10 ** 9, MAX_DAYS),
])
def test_parse_days(value, expected):
    assert parse_days(value) == expected


def test_default_window_is_thirty_days():
    query = resolve_report_query("orders", None, now=NOW)
    assert query.params["created_at_min"] == format_timestamp(NOW - timedelta(days=30))


@pytest.mark.parametrize("domain", [
    "https://my-store.myshopify.com",
    "http://my-store.myshopify.com",
    "my-store.myshopify.com",
    "https://my-store.myshopify.com/",
])
def test_normalize_store_domain(domain):
    assert normalize_store_domain(domain) == "my-store.myshopify.com"


def test_format_timestamp_treats_naive_as_utc():
    assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05.000Z"


def test_report_type_parse():
    assert ReportType.parse("discounts") is ReportType.DISCOUNTS
    assert ReportType.parse("nope") is ReportType.ORDERS


@pytest.mark.parametrize("report_type", ["products", "orders"])
def test_huge_day_count_is_capped(report_type):
    query = resolve_report_query(report_type, "1000000", now=NOW)

    assert query.params["limit"] == "250"
    if is_time_based(report_type):
        assert query.params["created_at_min"] == format_timestamp(NOW - timedelta(days=MAX_DAYS))
