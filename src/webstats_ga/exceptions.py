"""Custom exceptions for the Google Analytics to Webstats relay."""
from typing import Optional


class WebstatsReporterError(Exception):
    """Base exception for all relay errors."""


class ConfigError(WebstatsReporterError):
    """Raised when a required environment variable is missing."""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"Environment variable {variable} not set")


class AuthError(WebstatsReporterError):
    """Raised when the service account token exchange fails."""


class TransportError(WebstatsReporterError):
    """Raised for HTTP failures (non-2xx, network errors, undecodable bodies)."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        body: Optional[str] = None,
    ):
        self.status = status
        self.body = body
        super().__init__(message)


class WebstatsGraphQLError(TransportError):
    """Raised when the Webstats GraphQL API returns root-level errors."""

    def __init__(self, errors: object):
        self.errors = errors
        if isinstance(errors, str):
            message = errors
        else:
            message = f"GraphQL errors: {errors}"
        super().__init__(message)


class FormatError(WebstatsReporterError):
    """Raised when a report response does not have the expected shape."""
