"""
Prompt Builder - Turns Shopify report data into instructions for the AI service

Both builders are pure: the same inputs always produce the same prompt.
"""
import json
from typing import Any, Dict, Optional

from analytics_relay.models.schemas import ReportType

ANALYSIS_PREAMBLE = """You are an expert e-commerce analyst for a Shopify store. Analyze the JSON data below
and write a concise, business-friendly report for the store owner.

Guidelines:
- Format your answer in Markdown with short headings and bullet points
- Include specific numbers from the data
- Highlight notable trends, risks and opportunities
- Finish with 2-3 actionable recommendations
"""

DEFAULT_FOCUS = "Summarize the most important patterns in this data and what they mean for the business."

# What the analysis should concentrate on for each report type
ANALYSIS_FOCUS: Dict[ReportType, str] = {
    ReportType.ORDERS: "Focus on sales performance: total revenue, order volume, average order value, best-selling items and payment or fulfillment status trends.",
    ReportType.PRODUCTS: "Focus on the product catalog: product status, pricing, inventory levels across variants and products that need attention.",
    ReportType.CUSTOMERS: "Focus on the customer base: top customers by spend, order counts, repeat buyers, new customer acquisition and marketing consent.",
    ReportType.DRAFT_ORDERS: "Focus on draft orders: how many are open or completed, their total value and any that appear stalled.",
    ReportType.FULFILLMENTS: "Focus on fulfillment operations: fulfillment status, shipment tracking coverage and delivery delays.",
    ReportType.LOCATIONS: "Focus on store locations: which locations are active, where they are and how they support fulfillment.",
    ReportType.MARKETING_EVENTS: "Focus on marketing activity: event types, channels, timing and which campaigns appear most effective.",
    ReportType.THEMES: "Focus on the storefront themes: which theme is published, which are unpublished and anything worth cleaning up.",
    ReportType.PAGES: "Focus on the online store pages: published versus hidden pages, recent updates and content gaps.",
    ReportType.SCRIPT_TAGS: "Focus on installed script tags: their sources, display scope and any that may affect storefront performance.",
    ReportType.SHIPPING_ZONES: "Focus on shipping configuration: zones, countries covered and the rates offered in each zone.",
    ReportType.COMPANIES: "Focus on B2B companies: how many there are, their locations and their purchasing relationships.",
    ReportType.DISCOUNTS: "Focus on discounts and price rules: discount values, usage limits, active periods and customer eligibility.",
    ReportType.INVENTORY_LEVELS: "Focus on inventory levels: available stock by location, items that are out of stock or running low.",
}

CHAT_PREAMBLE = """You are a helpful Shopify analytics assistant answering a question about a store report.
Answer ONLY using the report data provided below. Do not use outside knowledge or make assumptions.
If the answer cannot be found in the data, reply exactly with: "{refusal}"
Keep your answer short and format it in Markdown."""

CHAT_REFUSAL = "I'm sorry, but I can't find the answer to that question in the provided report data."

# Human-readable label for the kind of data a chat question is about
DATA_TYPE_LABELS: Dict[ReportType, str] = {
    ReportType.ORDERS: "Orders",
    ReportType.PRODUCTS: "Products",
    ReportType.CUSTOMERS: "Customers",
    ReportType.DRAFT_ORDERS: "Draft Orders",
    ReportType.FULFILLMENTS: "Fulfillments",
    ReportType.LOCATIONS: "Locations",
    ReportType.MARKETING_EVENTS: "Marketing Events",
    ReportType.THEMES: "Themes",
    ReportType.PAGES: "Pages",
    ReportType.SCRIPT_TAGS: "Script Tags",
    ReportType.SHIPPING_ZONES: "Shipping Zones",
    ReportType.COMPANIES: "Companies",
    ReportType.DISCOUNTS: "Discounts",
    ReportType.INVENTORY_LEVELS: "Inventory Levels",
}


def _to_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def _focus_for(report_type: Optional[str]) -> str:
    try:
        return ANALYSIS_FOCUS[ReportType(report_type)]
    except ValueError:
        return DEFAULT_FOCUS


def data_type_label(report_type: Optional[str]) -> str:
    """Label for a report tag; unknown tags are shown as given"""
    try:
        return DATA_TYPE_LABELS[ReportType(report_type)]
    except ValueError:
        return str(report_type)


def first_value(payload: Dict[str, Any]) -> Any:
    """Value of the first top-level key in insertion order, None when empty"""
    for key in payload:
        return payload[key]
    return None


def build_analysis_prompt(payload: Dict[str, Any], report_type: Optional[str]) -> str:
    """
    Build the initial-analysis prompt for a freshly fetched report.

    Only the first top-level property of the payload is embedded, which keeps
    the prompt to the resource list Shopify returns.
    """
    return (
        f"{ANALYSIS_PREAMBLE}\n"
        f"Report focus: {_focus_for(report_type)}\n\n"
        f"Data:\n{_to_json(first_value(payload))}"
    )


def build_chat_prompt(question: str, report_data: Dict[str, Any], report_type: Optional[str]) -> str:
    """Build the follow-up prompt; the whole report is embedded as context"""
    return (
        f"{CHAT_PREAMBLE.format(refusal=CHAT_REFUSAL)}\n\n"
        f"Data type: {data_type_label(report_type)}\n\n"
        f"Question: \"{question}\"\n\n"
        f"Report data:\n{_to_json(report_data)}"
    )
