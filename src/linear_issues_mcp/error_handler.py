"""
Linear MCP Error Handler

Provides the error taxonomy for issue queries and the single translation of
those errors into result envelopes returned to the MCP host.
"""

from typing import Dict, Optional

from fastmcp.exceptions import ToolError

from .types import ResultEnvelope


class LinearMCPError(Exception):
    """Base exception for Linear MCP errors."""
    def __init__(self, message: str, error_code: str = "UNKNOWN", details: Optional[Dict] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(LinearMCPError):
    """Raised when no Linear API token is configured."""
    def __init__(self, variable: str):
        message = (
            "No Linear API token found in environment. "
            f"Set the {variable} environment variable."
        )
        super().__init__(message, "CONFIGURATION_ERROR", {"variable": variable})
        self.variable = variable


class InvalidURLError(LinearMCPError):
    """Raised when a URL is malformed, off-domain, or not an issue URL."""
    def __init__(self, url: str):
        super().__init__(f"Invalid Linear issue URL: {url}", "INVALID_URL", {"url": url})
        self.url = url


class APIError(LinearMCPError):
    """Raised when the Linear API call does not yield usable data."""


class RequestFailedError(APIError):
    """Raised when Linear answers with a non-success HTTP status."""
    def __init__(self, status_code: int, status_text: str):
        message = f"Linear API request failed: {status_text}"
        details = {"status_code": status_code, "status_text": status_text}
        super().__init__(message, "REQUEST_FAILED", details)
        self.status_code = status_code
        self.status_text = status_text


class NoDataError(APIError):
    """Raised when the response body lacks the top-level data field."""
    def __init__(self, errors: Optional[list] = None):
        details = {"errors": errors} if errors else None
        super().__init__("Linear API request failed: no data", "NO_DATA", details)


class IssueNotFoundError(LinearMCPError):
    """Raised when Linear confirms that no such issue exists."""
    def __init__(self, issue: str):
        super().__init__(f"Linear issue not found: {issue}", "NOT_FOUND", {"issue": issue})
        self.issue = issue


def describe_operation(include_comments: bool) -> str:
    """Name the operation being performed, for error messages."""
    return "Linear issue with comments" if include_comments else "Linear issue"


def create_error_response(error: Exception, include_comments: bool = False) -> ResultEnvelope:
    """
    Create the error envelope for a failed issue query.

    Configuration, URL and not-found errors are reported as-is. Any other
    failure, including API errors, is prefixed with the operation that was
    being performed.

    Args:
        error: The exception that occurred
        include_comments: Whether comments were requested

    Returns:
        ResultEnvelope flagged as an error
    """
    if isinstance(error, (ConfigurationError, InvalidURLError, IssueNotFoundError)):
        return ResultEnvelope.failure(f"Error: {error.message}")

    message = error.message if isinstance(error, LinearMCPError) else str(error)
    return ResultEnvelope.failure(
        f"Error fetching {describe_operation(include_comments)}: {message}"
    )


def unwrap_envelope(envelope: ResultEnvelope) -> str:
    """
    Hand an envelope to FastMCP.

    Error envelopes are raised as ToolError so that the host receives a tool
    result flagged with isError and the envelope text as its content.

    Raises:
        ToolError: If the envelope is an error
    """
    if envelope.is_error:
        raise ToolError(envelope.text)
    return envelope.text
