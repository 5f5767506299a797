"""
Data models and schemas for the Analytics Relay
"""
from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class ReportType(str, Enum):
    """Report types the dashboard can request"""
    ORDERS = "orders"
    PRODUCTS = "products"
    CUSTOMERS = "customers"
    DRAFT_ORDERS = "draft_orders"
    FULFILLMENTS = "fulfillments"
    LOCATIONS = "locations"
    MARKETING_EVENTS = "marketing_events"
    THEMES = "themes"
    PAGES = "pages"
    SCRIPT_TAGS = "script_tags"
    SHIPPING_ZONES = "shipping_zones"
    COMPANIES = "companies"
    DISCOUNTS = "discounts"
    INVENTORY_LEVELS = "inventory_levels"

    @classmethod
    def parse(cls, value: Optional[str]) -> "ReportType":
        """Resolve a raw report tag, falling back to orders for unknown values"""
        try:
            return cls(value)
        except ValueError:
            return cls.ORDERS


class TimeWindow(BaseModel):
    """Creation-date window applied to time-based reports"""
    start: datetime
    end: datetime


class ReportQuery(BaseModel):
    """Resolved Shopify resource and the query parameters to send with it"""
    resource: str = Field(..., description="Admin REST resource, e.g. orders or price_rules")
    params: Dict[str, str] = Field(default_factory=dict, description="Ordered query parameters")
    window: Optional[TimeWindow] = Field(None, description="Window used for time-based reports")


class ChatRequest(BaseModel):
    """Follow-up question about previously fetched report data"""
    model_config = ConfigDict(populate_by_name=True)

    question: Optional[str] = Field(None, description="Natural language question from the user")
    report_data: Optional[Dict[str, Any]] = Field(None, alias="reportData", description="Report data previously returned by the relay")
    report_type: Optional[str] = Field(None, alias="reportType", description="Report type the data belongs to")

    def missing_fields(self) -> List[str]:
        """Wire names of the required fields that are absent or empty"""
        missing = []
        if not self.question:
            missing.append("question")
        if self.report_data is None:
            missing.append("reportData")
        if not self.report_type:
            missing.append("reportType")
        return missing


class ReportResponse(BaseModel):
    """Raw Shopify data together with the AI analysis of it"""
    model_config = ConfigDict(populate_by_name=True)

    shopify_data: Dict[str, Any] = Field(..., alias="shopifyData")
    analysis: str


class ChatResponse(BaseModel):
    """Answer to a follow-up question"""
    answer: str


class ErrorResponse(BaseModel):
    """Error response model"""
    error: str


class ReportTypeInfo(BaseModel):
    """Description of a supported report type"""
    report_type: ReportType
    resource: str
    time_based: bool
