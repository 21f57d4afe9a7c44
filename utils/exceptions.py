"""
Custom Exception Classes for Post Insights

This module defines custom exceptions for better error handling and
categorization of failures across the application.
"""

from typing import Optional


class PostInsightsError(Exception):
    """Base exception for all Post Insights application errors."""
    pass


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(PostInsightsError):
    """Raised when configuration validation fails or required settings are missing."""
    pass


# =============================================================================
# Chat Gateway Errors
# =============================================================================

class GatewayError(PostInsightsError):
    """
    Base exception for failures talking to the chat-completion endpoint.

    Attributes:
        status_code: HTTP status returned by the endpoint, if any.
        api_message: Error message from the upstream error body, if any.
    """

    def __init__(self, message: str, status_code: Optional[int] = None,
                 api_message: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.api_message = api_message


class NetworkUnreachableError(GatewayError):
    """Raised when the endpoint cannot be reached (DNS failure, connection refused)."""
    pass


class AuthError(GatewayError):
    """Raised when the endpoint rejects the credential (401)."""
    pass


class RateLimitedError(GatewayError):
    """Raised when the endpoint rate limits the client (429)."""
    pass


class UpstreamUnavailableError(GatewayError):
    """Raised when the endpoint reports a bad gateway (502)."""
    pass


class BadRequestError(GatewayError):
    """Raised when the endpoint rejects the request body (400)."""
    pass


class ResponseShapeError(GatewayError):
    """Raised when a successful response lacks the expected completion envelope."""
    pass


# Errors ChatGateway.send() answers with a mock response instead of raising
RECOVERABLE_GATEWAY_ERRORS = (
    NetworkUnreachableError,
    AuthError,
    RateLimitedError,
    UpstreamUnavailableError,
    BadRequestError,
)

_STATUS_ERRORS = {
    400: BadRequestError,
    401: AuthError,
    429: RateLimitedError,
    502: UpstreamUnavailableError,
}


def classify_http_error(status_code: int, message: str,
                        api_message: Optional[str] = None) -> GatewayError:
    """
    Build the gateway error matching an HTTP status code.

    Args:
        status_code: The HTTP status of the failed call.
        message: Human-readable description of the failure.
        api_message: Error message extracted from the response body, if any.

    Returns:
        GatewayError: The most specific subclass for the status.
    """
    error_class = _STATUS_ERRORS.get(status_code, GatewayError)
    return error_class(message, status_code=status_code, api_message=api_message)


# =============================================================================
# Search Errors
# =============================================================================

class SearchError(PostInsightsError):
    """Base exception for semantic search errors."""
    pass


class ResponseParseError(SearchError):
    """Raised when a ranking response contains no parseable id array."""
    pass
