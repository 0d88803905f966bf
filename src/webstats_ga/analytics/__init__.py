"""Google Analytics Reporting v4 access: auth, date windows, fetch, transform."""
from .auth import GoogleAnalyticsAuthenticator
from .dates import previous_day_window
from .reporting import GoogleAnalyticsReportingClient
from .transform import transform_report

__all__ = [
    "GoogleAnalyticsAuthenticator",
    "GoogleAnalyticsReportingClient",
    "previous_day_window",
    "transform_report",
]
