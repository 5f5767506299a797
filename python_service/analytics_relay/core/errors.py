"""
Error types raised by the relay.

Every error carries the HTTP status it should be reported with; the API
layer renders them as ``{"error": message}``.
"""
from typing import Iterable, Optional


class RelayError(Exception):
    """Base error for the relay. Unclassified failures surface as a 500."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(RelayError):
    """Required server secrets are missing"""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required configuration: {', '.join(self.missing)}")


class ValidationError(RelayError):
    """The caller sent an incomplete or malformed request"""

    status_code = 400


class UpstreamRequestError(RelayError):
    """Shopify answered with a non-success status"""

    def __init__(self, report_type: str, status_code: int):
        self.report_type = report_type
        super().__init__(
            f"Shopify API request for '{report_type}' report failed with status {status_code}",
            status_code=status_code,
        )


class AiRequestError(RelayError):
    """Gemini answered with a non-success status"""

    def __init__(self, upstream_status: Optional[int] = None):
        self.upstream_status = upstream_status
        super().__init__("Failed to get a response from the AI service.")


class AiEmptyResponseError(RelayError):
    """Gemini answered without any generated text"""

    def __init__(self):
        super().__init__("The AI service returned an empty or malformed response.")
