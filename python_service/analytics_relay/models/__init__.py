"""Models module"""
from .schemas import (
    ReportType,
    TimeWindow,
    ReportQuery,
    ChatRequest,
    ReportResponse,
    ChatResponse,
    ErrorResponse,
    ReportTypeInfo
)

__all__ = [
    "ReportType",
    "TimeWindow",
    "ReportQuery",
    "ChatRequest",
    "ReportResponse",
    "ChatResponse",
    "ErrorResponse",
    "ReportTypeInfo"
]
